"""Two-tier receipt parsing: model extraction with heuristic fallback.

A run moves through the states below until it reaches DONE:

    START ──(no lines)──────────────────────────────▶ DONE
      │ ──(no extractor)──▶ HEURISTIC ──────────────▶ DONE
      └──▶ MODEL_ATTEMPT ──(items)──────────────────▶ DONE
                 └──(error / no items)──▶ HEURISTIC
"""

from __future__ import annotations

import enum
import logging
from collections.abc import Iterable
from typing import TYPE_CHECKING

from .heuristic import parse_heuristically
from .models import ParsedItem, ParseOutcome

if TYPE_CHECKING:
    from .config import ReceiptsConfig
    from .extraction import ReceiptExtractor

logger = logging.getLogger(__name__)


class PipelineState(enum.Enum):
    START = "start"
    MODEL_ATTEMPT = "model_attempt"
    HEURISTIC = "heuristic"
    DONE = "done"


class ReceiptParser:
    """Parses OCR receipt lines into pantry items.

    Args:
        extractor: Model-backed extractor to try first. None means no
            credential is configured and only heuristics run.
    """

    def __init__(self, extractor: ReceiptExtractor | None = None) -> None:
        self._extractor = extractor

    @classmethod
    def from_config(cls, config: ReceiptsConfig) -> ReceiptParser:
        from .extraction import create_extractor

        return cls(extractor=create_extractor(config))

    @property
    def model_enabled(self) -> bool:
        return self._extractor is not None

    async def parse(self, lines: Iterable[str]) -> list[ParsedItem]:
        outcome = await self.parse_with_source(lines)
        return outcome.items

    async def parse_with_source(self, lines: Iterable[str]) -> ParseOutcome:
        """Run the pipeline and report which tier produced the items.

        Never raises on account of the input or the model provider.
        """
        lines = [line for line in lines if isinstance(line, str)]
        state = PipelineState.START
        outcome = ParseOutcome()

        while state is not PipelineState.DONE:
            match state:
                case PipelineState.START:
                    state = self._start(lines)
                case PipelineState.MODEL_ATTEMPT:
                    state, outcome = await self._model_attempt(lines)
                case PipelineState.HEURISTIC:
                    state, outcome = self._heuristic(lines)

        logger.info(
            "Parsed %d items from %d lines (source: %s)",
            len(outcome.items), len(lines), outcome.source,
        )
        return outcome

    def _start(self, lines: list[str]) -> PipelineState:
        if not lines:
            return PipelineState.DONE
        if self._extractor is None:
            logger.debug("No extraction credential; using heuristics")
            return PipelineState.HEURISTIC
        return PipelineState.MODEL_ATTEMPT

    async def _model_attempt(
        self, lines: list[str]
    ) -> tuple[PipelineState, ParseOutcome]:
        assert self._extractor is not None
        try:
            items = await self._extractor.extract_items(lines)
        except Exception:
            logger.warning(
                "Model extraction raised; falling back to heuristics",
                exc_info=True,
            )
            return PipelineState.HEURISTIC, ParseOutcome()

        if not items:
            logger.info("Model extraction found no items; falling back to heuristics")
            return PipelineState.HEURISTIC, ParseOutcome()
        return PipelineState.DONE, ParseOutcome(items=items, source="model")

    def _heuristic(self, lines: list[str]) -> tuple[PipelineState, ParseOutcome]:
        return PipelineState.DONE, ParseOutcome(
            items=parse_heuristically(lines), source="heuristic"
        )


async def parse_receipt_lines(
    lines: Iterable[str], extractor: ReceiptExtractor | None = None
) -> list[ParsedItem]:
    """Parse receipt lines, trying ``extractor`` first when one is given."""
    return await ReceiptParser(extractor).parse(lines)
