"""Selector specificity.

Specificity is counted in three buckets, following the W3C selector rules:

    a = ID selectors (``#``)
    b = class, attribute and pseudo-class selectors (``.``, ``[``, ``:``)
    c = type selectors (letter runs at the start or after whitespace)

The legacy value glues the three counts together as decimal digits and reads
the result as one integer, so ``a=1, b=2, c=3`` becomes ``123``.  Once a bucket
reaches 10 its digits spill into the next bucket: ten class selectors tie
with one ID selector and eleven outrank it.  That is a known limitation of
the legacy scheme and is kept as-is; ``SpecificityMode.TUPLE`` gives the true
lexicographic ordering.
"""

from __future__ import annotations

import re
from enum import Enum

__all__ = [
    "SpecificityMode",
    "calculate",
    "calculate_tuple",
    "count",
    "specificity_for",
]

_ID_RE = re.compile(r"#")
_CLASS_RE = re.compile(r"[.\[:]")
_TYPE_RE = re.compile(r"(?:^|\s)[A-Za-z]+")


class SpecificityMode(Enum):
    """Which specificity value a Selector caches."""

    LEGACY = "legacy"
    TUPLE = "tuple"


def count(selector_text: str) -> tuple[int, int, int]:
    """Return the raw ``(a, b, c)`` bucket counts for *selector_text*."""
    a = len(_ID_RE.findall(selector_text))
    b = len(_CLASS_RE.findall(selector_text))
    c = len(_TYPE_RE.findall(selector_text))
    return a, b, c


def calculate(selector_text: str) -> int:
    """Legacy specificity: the bucket counts concatenated into one integer."""
    a, b, c = count(selector_text)
    return int(f"{a}{b}{c}")


def calculate_tuple(selector_text: str) -> tuple[int, int, int]:
    """Specificity as a tuple compared lexicographically."""
    return count(selector_text)


def specificity_for(
    selector_text: str, mode: SpecificityMode = SpecificityMode.LEGACY
) -> int | tuple[int, int, int]:
    if mode is SpecificityMode.TUPLE:
        return calculate_tuple(selector_text)
    return calculate(selector_text)
