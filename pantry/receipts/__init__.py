"""Receipt-to-inventory parsing for the pantry app."""

from .classifier import STOP_WORDS, should_ignore
from .config import (
    ClaudeExtractionConfig,
    ExtractionConfig,
    GeminiExtractionConfig,
    OpenAIExtractionConfig,
    ReceiptsConfig,
    load_config,
)
from .extraction import (
    ReceiptExtractor,
    ResponseFormatError,
    create_extractor,
    parse_response,
)
from .heuristic import derive_item, parse_heuristically
from .models import ParsedItem, ParseOutcome
from .normalize import clean_name, normalize_unit, sanitize_quantity
from .pipeline import PipelineState, ReceiptParser, parse_receipt_lines

__all__ = [
    "ParsedItem",
    "ParseOutcome",
    "STOP_WORDS",
    "should_ignore",
    "derive_item",
    "parse_heuristically",
    "clean_name",
    "normalize_unit",
    "sanitize_quantity",
    "ReceiptExtractor",
    "ResponseFormatError",
    "create_extractor",
    "parse_response",
    "PipelineState",
    "ReceiptParser",
    "parse_receipt_lines",
    "ReceiptsConfig",
    "ExtractionConfig",
    "OpenAIExtractionConfig",
    "ClaudeExtractionConfig",
    "GeminiExtractionConfig",
    "load_config",
]
