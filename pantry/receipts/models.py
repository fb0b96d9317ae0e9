"""Data models for items parsed from receipt text."""

from __future__ import annotations

from dataclasses import asdict, dataclass, field


@dataclass
class ParsedItem:
    """A candidate pantry item extracted from a receipt."""

    name: str
    quantity: str = "1"  # numeric literal, "." as decimal separator
    unit: str = "pcs"  # canonical unit (see normalize.normalize_unit)

    def to_dict(self) -> dict[str, str]:
        return asdict(self)


@dataclass
class ParseOutcome:
    """Items produced by one pipeline run and the tier that produced them."""

    items: list[ParsedItem] = field(default_factory=list)
    source: str = "empty"  # model / heuristic / empty
