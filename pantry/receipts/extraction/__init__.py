"""Model-assisted receipt extraction: base class, response parsing, factory."""

from __future__ import annotations

import json
import logging
from abc import ABC, abstractmethod
from collections.abc import Iterable
from typing import TYPE_CHECKING, Any

from ..models import ParsedItem
from ..normalize import clean_name, normalize_unit, sanitize_quantity

if TYPE_CHECKING:
    from ..config import ReceiptsConfig

logger = logging.getLogger(__name__)

_SYSTEM_PROMPT = """\
You turn OCR text from a grocery receipt into a pantry inventory.

Rules:
- Only include edible grocery items (food, drinks, ingredients).
- Ignore totals, subtotals, taxes, payments, change, discounts, coupons,
  loyalty points and store metadata (address, phone, clerk, dates).
- Translate every item name into {language}. Use short, everyday names
  without brand codes or prices.
- quantity is a number written as a string; use "1" when the receipt does
  not state one.
- unit is one of kg, g, mg, lb, oz, l, ml, cl, pcs, pack, ct; use "pcs"
  when the receipt does not state one.

Respond with strict JSON only, no other text:
{{"items": [{{"name": "...", "quantity": "1", "unit": "pcs"}}]}}
"""

_QUANTITY_KEYS = ("quantity", "qty")
_UNIT_KEYS = ("unit", "units", "measurement")


class ResponseFormatError(ValueError):
    """The model reply could not be read as an item list."""


def build_system_prompt(target_language: str = "English") -> str:
    return _SYSTEM_PROMPT.format(language=target_language)


def build_user_prompt(lines: Iterable[str]) -> str:
    body = "\n".join(line.strip() for line in lines if line.strip())
    return f"Receipt lines:\n{body}"


class ReceiptExtractor(ABC):
    """Abstract base for extracting receipt items with a hosted model."""

    def __init__(self, target_language: str = "English") -> None:
        self._target_language = target_language

    @abstractmethod
    async def _complete(self, system_prompt: str, user_prompt: str) -> str:
        """Send one prompt to the provider and return the reply text."""
        ...

    async def extract_items(self, lines: Iterable[str]) -> list[ParsedItem]:
        """Extract items from receipt lines.

        Provider, transport and response-format failures are logged and
        reported as an empty list.
        """
        lines = list(lines)
        try:
            text = await self._complete(
                build_system_prompt(self._target_language),
                build_user_prompt(lines),
            )
            items = parse_response(text)
        except Exception:
            logger.warning(
                "%s extraction failed; no items extracted",
                type(self).__name__,
                exc_info=True,
            )
            return []

        logger.debug(
            "%s extracted %d items from %d lines",
            type(self).__name__, len(items), len(lines),
        )
        return items


def _strip_fences(text: str) -> str:
    cleaned = text.strip()
    if cleaned.startswith("```"):
        lines = cleaned.split("\n")
        # Remove first and last fence lines
        lines = [l for l in lines[1:] if not l.strip().startswith("```")]
        cleaned = "\n".join(lines)
    return cleaned.strip()


def _as_text(value: Any) -> str | None:
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, str):
        return value
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    if isinstance(value, (int, float)):
        return str(value)
    return None


def _first_present(entry: dict, keys: tuple[str, ...]) -> str | None:
    for key in keys:
        value = _as_text(entry.get(key))
        if value is not None and value.strip():
            return value
    return None


def coerce_item(entry: Any) -> ParsedItem | None:
    """Coerce one untrusted model entry into a ParsedItem.

    Returns None if the entry is not an object or has no usable name.
    """
    if not isinstance(entry, dict):
        return None

    name = clean_name(_as_text(entry.get("name")))
    if not name:
        return None

    return ParsedItem(
        name=name,
        quantity=sanitize_quantity(_first_present(entry, _QUANTITY_KEYS)),
        unit=normalize_unit(_first_present(entry, _UNIT_KEYS)),
    )


def parse_response(text: str) -> list[ParsedItem]:
    """Parse a model reply into de-duplicated items.

    Accepts a JSON array or an object with an "items" array, optionally
    wrapped in Markdown code fences. Entries sharing name (case-insensitive),
    quantity and unit collapse into the first one.

    Raises:
        ResponseFormatError: If the reply is not JSON of an accepted shape.
    """
    try:
        data = json.loads(_strip_fences(text))
    except json.JSONDecodeError as e:
        raise ResponseFormatError(f"reply is not valid JSON: {e}") from e

    if isinstance(data, dict):
        data = data.get("items")
    if not isinstance(data, list):
        raise ResponseFormatError("reply has no item list")

    seen: dict[tuple[str, str, str], ParsedItem] = {}
    for entry in data:
        item = coerce_item(entry)
        if item is None:
            continue
        key = (item.name.lower(), item.quantity, item.unit)
        if key not in seen:
            seen[key] = item
    return list(seen.values())


def create_extractor(config: ReceiptsConfig) -> ReceiptExtractor | None:
    """Create the configured extraction backend.

    Returns None when the selected backend has no API key, so callers fall
    back to heuristic parsing.
    """
    extraction = config.extraction
    backend_name = extraction.backend

    match backend_name:
        case "openai":
            from .openai import OpenAIReceiptExtractor as backend_cls
        case "claude":
            from .claude import ClaudeReceiptExtractor as backend_cls
        case "gemini":
            from .gemini import GeminiReceiptExtractor as backend_cls
        case _:
            raise ValueError(
                f"Unknown extraction backend: {backend_name!r} "
                f"(choose openai / claude / gemini)"
            )

    if not extraction.has_credential:
        logger.debug("No API key for %s backend; model extraction disabled", backend_name)
        return None

    return backend_cls(
        api_key=extraction.api_key,
        model=extraction.model,
        target_language=extraction.target_language,
        timeout=extraction.timeout,
    )
