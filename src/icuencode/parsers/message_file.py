"""go-i18n message file reader/writer (flat JSON or YAML objects)."""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Optional

import yaml

from icuencode.parsers import MessageFileDecodeError, MessageFileFormatError

log = logging.getLogger(__name__)

YAML_SUFFIXES = (".yaml", ".yml")


@dataclass
class MessageFileData:
    """Parsed message file."""
    path: Path
    messages: dict[str, Any]
    format: str = "json"  # json / yaml

    @property
    def total_count(self) -> int:
        return len(self.messages)


def detect_format(path: str | Path) -> str:
    return "yaml" if Path(path).suffix.lower() in YAML_SUFFIXES else "json"


def _load(text: str, fmt: str) -> Any:
    try:
        if fmt == "yaml":
            return yaml.safe_load(text)
        return json.loads(text)
    except (json.JSONDecodeError, yaml.YAMLError) as exc:
        raise MessageFileDecodeError(f"invalid {fmt.upper()}: {exc}") from exc


def loads_messages(text: str, fmt: str = "json") -> dict[str, Any]:
    """Decode message file contents; the top level must be an object."""
    data = _load(text, fmt)
    if not isinstance(data, dict):
        raise MessageFileFormatError(
            f"top-level value must be an object, got {type(data).__name__}"
        )
    for key in data:
        if not isinstance(key, str):
            raise MessageFileFormatError(
                f"keys must be strings, got {type(key).__name__} {key!r}"
            )
    return data


def dumps_messages(messages: dict[str, Any], fmt: str = "json", *,
                   indent: int = 2, sort_keys: bool = True,
                   ensure_ascii: bool = False,
                   trailing_newline: bool = True) -> str:
    """Encode messages the way they are written back to disk."""
    if fmt == "yaml":
        text = yaml.dump(
            messages, allow_unicode=not ensure_ascii, default_flow_style=False,
            sort_keys=sort_keys, indent=indent,
        )
        # yaml.dump always ends with a newline
        return text if trailing_newline else text.rstrip("\n")
    text = json.dumps(messages, ensure_ascii=ensure_ascii, indent=indent, sort_keys=sort_keys)
    return text + "\n" if trailing_newline else text


def parse_message_file(path: str | Path) -> MessageFileData:
    """Parse a go-i18n message file."""
    path = Path(path)
    fmt = detect_format(path)
    try:
        with open(path, "r", encoding="utf-8") as f:
            text = f.read()
    except UnicodeDecodeError as exc:
        raise MessageFileDecodeError(f"{path} is not valid UTF-8: {exc}") from exc
    messages = loads_messages(text, fmt)
    log.debug("Read %d messages from %s", len(messages), path)
    return MessageFileData(path=path, messages=messages, format=fmt)


def save_message_file(data: MessageFileData, path: Optional[str | Path] = None,
                      **options) -> None:
    """Save a message file, in place unless ``path`` is given.

    Opening for writing truncates the file first, so a crash mid-write can
    leave it incomplete.
    """
    out = Path(path) if path else data.path
    fmt = detect_format(out) if path else data.format
    text = dumps_messages(data.messages, fmt, **options)
    with open(out, "w", encoding="utf-8") as f:
        f.write(text)
    log.debug("Wrote %d messages to %s", len(data.messages), out)
