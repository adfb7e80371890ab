"""Configuration from an optional YAML file and environment variables.

Precedence (lowest to highest): defaults, YAML file, environment. Command
line flags are applied on top by the CLI.
"""

import logging
import os
from dataclasses import dataclass, replace

import yaml

from zsh_history_to_fish.formatter import OUTPUT_FORMATS

logger = logging.getLogger(__name__)

DEFAULT_HISTORY_FILE = "~/.zsh_history"


class ConfigError(ValueError):
    """Raised when a config file cannot be used."""


@dataclass(frozen=True)
class Config:
    history_file: str = DEFAULT_HISTORY_FILE
    output_format: str = "text"
    log_level: str = "WARNING"

    @classmethod
    def from_dict(cls, d: dict) -> "Config":
        defaults = cls()
        return cls(
            history_file=str(d.get("history_file", defaults.history_file)),
            output_format=str(d.get("output_format", defaults.output_format)),
            log_level=str(d.get("log_level", defaults.log_level)),
        )


def load_yaml(path: str) -> dict:
    """Load a YAML mapping from *path*."""
    try:
        with open(path, "r") as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML in {path}: {e}") from e

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ConfigError(f"Config file {path} must contain a mapping")
    return data


def _validated_format(output_format: str) -> str:
    normalized = output_format.strip().lower()
    if normalized not in OUTPUT_FORMATS:
        logger.warning("Invalid output format '%s', falling back to 'text'", output_format)
        return "text"
    return normalized


def _validated_level(log_level: str) -> str:
    normalized = log_level.strip().upper()
    if not isinstance(logging.getLevelName(normalized), int):
        logger.warning("Invalid log level '%s', falling back to 'WARNING'", log_level)
        return "WARNING"
    return normalized


def load_config(config_path: str | None = None) -> Config:
    """Build a Config from *config_path* (if given) and the environment."""
    config = Config.from_dict(load_yaml(config_path)) if config_path else Config()

    config = replace(
        config,
        history_file=os.environ.get("HISTFILE", config.history_file),
        output_format=os.environ.get("ZSH2FISH_OUTPUT", config.output_format),
        log_level=os.environ.get("LOG_LEVEL", config.log_level),
    )
    return replace(
        config,
        output_format=_validated_format(config.output_format),
        log_level=_validated_level(config.log_level),
    )
