"""Regular-expression matchers for receipt product lines."""

from __future__ import annotations

import re
from dataclasses import dataclass

# Price token at the end of a line:
#   $4.99   € 3,50   USD 12   4.99   1,299.00   4.99-   4.99 A
_TRAILING_PRICE = re.compile(
    r"""
    \s*
    (?:
      (?:[$€£¥]|\b(?:USD|EUR|GBP|MXN|CAD|AUD)\b)   # currency symbol or ISO code
      \s*-?\d+(?:[.,]\d{3})*(?:[.,]\d{1,2})?
    |
      (?<![\d.,])-?\d+(?:[.,]\d{3})*[.,]\d{2}       # bare amount with cents
    )
    \s*-?                                          # refund marker
    (?:\s+(?![LG]\b)[A-Z])?                        # tax flag, not a unit letter
    \s*$
    """,
    re.VERBOSE,
)

_QUANTITY_UNIT = re.compile(
    r"(?<![\d.,])(\d+(?:[.,]\d+)?) ?"
    r"(kg|mg|g|lbs|lb|oz|ml|cl|l|pcs|pc|pack|pkt|pkg|bag|ct|ea|units|unit)\b",
    re.IGNORECASE,
)

# "2x Milk", "2 x Milk", "Milk 2X"
_MULTIPLIER = re.compile(r"(?<![\d.,])(\d+(?:[.,]\d+)?) ?[xX](?=\s|$)")

_TRAILING_NUMBER = re.compile(r"\s+\d+(?:[.,]\d+)?\s*$")
_WHITESPACE = re.compile(r"\s+")


@dataclass
class QuantityMatch:
    """A quantity found in a line, with the span it occupied."""

    quantity: str
    unit: str | None
    start: int
    end: int


def collapse_whitespace(text: str) -> str:
    return _WHITESPACE.sub(" ", text).strip()


def strip_trailing_price(text: str) -> str:
    """Remove a trailing price token and normalize whitespace."""
    return collapse_whitespace(_TRAILING_PRICE.sub("", text, count=1))


def match_quantity_unit(text: str) -> QuantityMatch | None:
    """Find the first number immediately followed by a known unit.

    The unit is returned as written; callers normalize it.
    """
    m = _QUANTITY_UNIT.search(text)
    if m is None:
        return None
    return QuantityMatch(
        quantity=m.group(1), unit=m.group(2), start=m.start(), end=m.end()
    )


def match_multiplier(text: str) -> QuantityMatch | None:
    """Find a "<N>x" multiplier anywhere in the line."""
    m = _MULTIPLIER.search(text)
    if m is None:
        return None
    return QuantityMatch(
        quantity=m.group(1), unit=None, start=m.start(), end=m.end()
    )


def strip_trailing_number(text: str) -> str:
    """Drop a bare number left at the end of a line ("Apples 3")."""
    return _TRAILING_NUMBER.sub("", text, count=1)
