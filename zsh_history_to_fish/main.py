"""zsh-history-to-fish — print the entries of a zsh history file."""

import logging
import sys
from argparse import ArgumentParser

from zsh_history_to_fish.config import ConfigError, load_config
from zsh_history_to_fish.converter import Converter
from zsh_history_to_fish.formatter import OUTPUT_FORMATS, get_formatter

logger = logging.getLogger(__name__)


def build_parser() -> ArgumentParser:
    """Build the CLI argument parser."""
    parser = ArgumentParser(
        prog="zsh-history-to-fish",
        description="Convert a zsh history file into timestamped entries.",
    )
    parser.add_argument(
        "zsh_history",
        nargs="?",
        help="Path to the zsh history file (default: $HISTFILE or ~/.zsh_history)",
    )
    parser.add_argument(
        "--output",
        choices=OUTPUT_FORMATS,
        help="Output format (default: text)",
    )
    parser.add_argument(
        "--config",
        help="Path to a YAML config file",
    )
    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Log progress to stderr",
    )
    return parser


def run(args) -> int:
    """Convert the history file named by *args* and print each entry."""
    try:
        config = load_config(args.config)
    except (ConfigError, OSError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else config.log_level,
        format="%(asctime)s [%(levelname)s] %(name)s — %(message)s",
        stream=sys.stderr,
    )

    history_file = args.zsh_history or config.history_file
    formatter = get_formatter(args.output or config.output_format)

    try:
        with Converter.from_path(history_file) as converter:
            entries = converter.convert()
    except OSError as e:
        logger.debug("Conversion failed", exc_info=True)
        print(f"Error: {e}", file=sys.stderr)
        return 1

    for entry in entries:
        print(formatter(entry))
    return 0


def main() -> None:
    parser = build_parser()
    args = parser.parse_args()
    try:
        sys.exit(run(args))
    except KeyboardInterrupt:
        sys.exit(0)
    except BrokenPipeError:
        sys.exit(0)


if __name__ == "__main__":
    main()
