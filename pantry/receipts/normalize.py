"""Unit, quantity and product-name normalization."""

from __future__ import annotations

import re

DEFAULT_QUANTITY = "1"
DEFAULT_UNIT = "pcs"

# Synonym → canonical unit. Anything not listed passes through lowercased.
_UNIT_SYNONYMS: dict[str, str] = {
    "lb": "lb",
    "lbs": "lb",
    "pc": "pcs",
    "pcs": "pcs",
    "ea": "pcs",
    "pkt": "pack",
    "pkg": "pack",
    "pack": "pack",
    "bag": "pack",
}

# Bullets, list numbering ("1.", "2)") and stray punctuation at the start
_LEADING_PREFIX = re.compile(r"^(?:[-*•·.,:;#>|~+]+|\d+[.):]?(?=\s|$))\s*")
_FILLER_TOKENS = re.compile(r"\b(?:qty|ea)\b[.:]?", re.IGNORECASE)
_WHITESPACE = re.compile(r"\s+")
_EDGE_PUNCTUATION = " \t-_*•·.,:;#|/~+"


def normalize_unit(raw: str | None = None) -> str:
    """Fold a unit token into its canonical form.

    Examples:
        "LBS" → "lb", "ea" → "pcs", "Units" → "pcs", "bag" → "pack",
        "KG" → "kg", "" → "pcs"
    """
    unit = (raw or "").strip().lower()
    if not unit:
        return DEFAULT_UNIT
    if unit.startswith("unit"):
        return DEFAULT_UNIT
    return _UNIT_SYNONYMS.get(unit, unit)


def sanitize_quantity(raw: str | None = None) -> str:
    """Return a quantity literal with "." as the decimal separator.

    Only a lone decimal comma ("1,5") is rewritten; the value is not
    validated as a number.
    """
    qty = (raw or "").strip()
    if not qty:
        return DEFAULT_QUANTITY
    if qty.count(",") == 1 and "." not in qty:
        qty = qty.replace(",", ".")
    return qty


def clean_name(raw: str | None) -> str:
    """Clean a product name candidate.

    Drops "qty"/"ea" filler tokens, leading bullets and list numbering,
    collapses whitespace and trims surrounding punctuation. Returns "" when
    nothing is left or what is left has no letters.
    """
    name = _FILLER_TOKENS.sub(" ", raw or "")
    name = _WHITESPACE.sub(" ", name).strip()

    while True:
        stripped = _LEADING_PREFIX.sub("", name, count=1)
        if stripped == name:
            break
        name = stripped

    name = name.strip(_EDGE_PUNCTUATION)
    if not any(c.isalpha() for c in name):
        return ""
    return name
