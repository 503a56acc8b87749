"""Message file parsers for go-i18n JSON and YAML files."""

from __future__ import annotations

from typing import Any


class MessageFileError(Exception):
    """Base class for everything that can go wrong reading a message file."""


class MessageFileDecodeError(MessageFileError):
    """The file is not valid JSON/YAML."""


class MessageFileFormatError(MessageFileError):
    """The file decoded, but its top level is not a key/value object."""


class InvalidVariantType(MessageFileError):
    """A plural variant holds something other than a string."""

    def __init__(self, key: str, category: str, value: Any):
        self.key = key
        self.category = category
        self.value = value
        super().__init__(
            f"plural variant {category!r} of {key!r} must be a string, "
            f"got {type(value).__name__}"
        )
