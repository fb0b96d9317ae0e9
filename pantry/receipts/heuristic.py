"""Rule-based receipt parsing used when no model is available."""

from __future__ import annotations

import logging
from collections.abc import Iterable

from .classifier import should_ignore
from .models import ParsedItem
from .normalize import clean_name, normalize_unit, sanitize_quantity
from .patterns import (
    match_multiplier,
    match_quantity_unit,
    strip_trailing_number,
    strip_trailing_price,
)

logger = logging.getLogger(__name__)


def derive_item(line: str) -> ParsedItem | None:
    """Turn one receipt line into an item, or None for noise.

    A quantity with a unit ("1.5kg") wins over a multiplier ("2x"), which
    wins over a bare trailing number. A bare trailing number is discarded,
    not read as a quantity: "Apples 3" gives quantity "1".
    """
    if should_ignore(line):
        return None

    text = strip_trailing_price(line)
    if not text:
        return None

    qty_unit = match_quantity_unit(text)
    if qty_unit is not None:
        name = clean_name(text[: qty_unit.start])
        if not name:
            return None
        return ParsedItem(
            name=name,
            quantity=sanitize_quantity(qty_unit.quantity),
            unit=normalize_unit(qty_unit.unit),
        )

    multiplier = match_multiplier(text)
    if multiplier is not None:
        name = clean_name(f"{text[: multiplier.start]} {text[multiplier.end:]}")
        if not name:
            return None
        return ParsedItem(
            name=name,
            quantity=sanitize_quantity(multiplier.quantity),
            unit=normalize_unit(None),
        )

    name = clean_name(strip_trailing_number(text))
    if not name:
        return None
    return ParsedItem(name=name)


def parse_heuristically(lines: Iterable[str]) -> list[ParsedItem]:
    """Parse receipt lines into items, keeping the first item per name."""
    seen: dict[str, ParsedItem] = {}
    count = 0
    for line in lines:
        count += 1
        item = derive_item(line)
        if item is None:
            continue
        key = item.name.lower()
        if key not in seen:
            seen[key] = item

    logger.debug("Heuristic parse: %d lines → %d items", count, len(seen))
    return list(seen.values())
