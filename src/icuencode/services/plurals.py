"""Plural category ordering for ICU plural clauses.

Explicit-value selectors (``=0``, ``=1``) come first, then the CLDR
categories from most to least specific, ending with ``other``. Labels the
table does not know get rank 0 and end up in front of everything.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable

# CLDR categories, in the order ICU expects them
CATEGORY_RANKS: dict[str, int] = {
    "one": 2,
    "two": 3,
    "few": 4,
    "many": 5,
    "other": 6,
}

EXPLICIT_RANK = 1
UNKNOWN_RANK = 0


@dataclass
class PluralVariant:
    """One branch of a plural message."""
    category: str  # lower-cased
    text: str


def rank(label: str) -> int:
    """Return the sort rank of a plural category label."""
    if "=" in label:
        return EXPLICIT_RANK
    return CATEGORY_RANKS.get(label.lower(), UNKNOWN_RANK)


def compare(a: PluralVariant, b: PluralVariant) -> int:
    """Three-way comparison of two variants by category rank."""
    ra, rb = rank(a.category), rank(b.category)
    return (ra > rb) - (ra < rb)


def sort_variants(variants: Iterable[PluralVariant]) -> list[PluralVariant]:
    """Stable sort; variants of equal rank keep their input order."""
    return sorted(variants, key=lambda v: rank(v.category))
