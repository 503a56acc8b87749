"""Classify decoded message values.

A go-i18n message file maps each key to either a plain string or an object
of plural variants (``{"one": "...", "other": "..."}``). Everything else is
left out of the conversion.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Union

from icuencode.parsers import InvalidVariantType


@dataclass
class PlainMessage:
    """A single translated string."""
    text: str


@dataclass
class PluralMessage:
    """Plural variants in the order they were read, labels as written."""
    variants: list[tuple[str, str]] = field(default_factory=list)


@dataclass
class Unsupported:
    """A value of any other shape (number, list, null, bool)."""
    value: Any


Message = Union[PlainMessage, PluralMessage, Unsupported]


def decode_message(key: str, value: Any) -> Message:
    """Turn one raw value into a PlainMessage, PluralMessage or Unsupported.

    Raises InvalidVariantType when an object holds a non-string variant.
    """
    if isinstance(value, str):
        return PlainMessage(value)
    if isinstance(value, dict):
        variants = []
        for category, text in value.items():
            if not isinstance(text, str):
                raise InvalidVariantType(key, str(category), text)
            variants.append((str(category), text))
        return PluralMessage(variants)
    return Unsupported(value)

