"""Output formatters — text (fish-style block) and JSON (NDJSON)."""

import json
from typing import Callable

from zsh_history_to_fish.parser import Entry

OUTPUT_FORMATS = ("text", "json")


def format_text(entry: Entry) -> str:
    """Return the two-line ``- cmd:`` / ``  when:`` block."""
    return str(entry)


def format_json(entry: Entry) -> str:
    """Return NDJSON — one JSON object per line, compatible with jq."""
    return json.dumps({"cmd": entry.command, "when": entry.timestamp}, ensure_ascii=False)


def get_formatter(output_format: str = "text") -> Callable[[Entry], str]:
    """Factory that returns the formatter for *output_format*."""
    if output_format == "json":
        return format_json
    if output_format == "text":
        return format_text
    raise ValueError(f"Unknown output format: {output_format!r}")
