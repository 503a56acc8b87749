"""Convert go-i18n messages into ICU MessageFormat strings."""

from __future__ import annotations

import logging
import re
from typing import Any, Mapping

from icuencode.parsers.messages import (
    Message, PlainMessage, PluralMessage, Unsupported, decode_message,
)
from icuencode.services.plurals import PluralVariant, sort_variants

log = logging.getLogger(__name__)

DEFAULT_PLURAL_ARGUMENT = "PluralCount"

# {{.Name}} or {{.User.Name}}; stray braces are left alone
PLACEHOLDER_RE = re.compile(r"\{\{\.([^{}]*?)\}\}")


def rewrite_placeholders(text: str) -> str:
    """Turn ``{{.Name}}`` template placeholders into ICU ``{Name}`` arguments."""
    return PLACEHOLDER_RE.sub(r"{\1}", text)


def encode_plural(message: PluralMessage,
                  plural_argument: str = DEFAULT_PLURAL_ARGUMENT) -> str:
    """Build ``{PluralCount, plural, one {...} other {...}}`` from the variants."""
    count_marker = "{{.%s}}" % plural_argument
    variants = [
        PluralVariant(
            category=category.lower(),
            text=rewrite_placeholders(text.replace(count_marker, "#")),
        )
        for category, text in message.variants
    ]
    parts = [f"{{{plural_argument}, plural,"]
    for variant in sort_variants(variants):
        parts.append(f" {variant.category} {{{variant.text}}}")
    parts.append("}")
    return "".join(parts)


def encode_message(message: Message,
                   plural_argument: str = DEFAULT_PLURAL_ARGUMENT) -> str | None:
    """Encode one decoded message. Returns None for unsupported values."""
    if isinstance(message, PlainMessage):
        return rewrite_placeholders(message.text)
    if isinstance(message, PluralMessage):
        return encode_plural(message, plural_argument)
    if isinstance(message, Unsupported):
        return None
    raise TypeError(f"not a message: {message!r}")


def transform(messages: Mapping[str, Any],
              plural_argument: str = DEFAULT_PLURAL_ARGUMENT) -> dict[str, str]:
    """Encode every supported value of a decoded message file.

    Values that are neither strings nor plural objects are dropped. A plural
    object holding a non-string variant raises InvalidVariantType, and
    nothing is returned for any key. ``messages`` is not modified.
    """
    result: dict[str, str] = {}
    for key, value in messages.items():
        encoded = encode_message(decode_message(key, value), plural_argument)
        if encoded is None:
            log.debug("Skipping %r: unsupported value of type %s", key, type(value).__name__)
            continue
        result[key] = encoded
    return result
