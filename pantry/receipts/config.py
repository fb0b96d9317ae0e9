"""TOML configuration loader for receipt parsing."""

from __future__ import annotations

import os
import sys
from dataclasses import dataclass, field
from pathlib import Path

if sys.version_info >= (3, 11):
    import tomllib
else:
    try:
        import tomli as tomllib
    except ImportError:
        tomllib = None  # type: ignore[assignment]


@dataclass
class OpenAIExtractionConfig:
    api_key: str = ""
    model: str = "gpt-4o-mini"


@dataclass
class ClaudeExtractionConfig:
    api_key: str = ""
    model: str = "claude-sonnet-4-5-20250929"


@dataclass
class GeminiExtractionConfig:
    api_key: str = ""
    model: str = "gemini-2.0-flash"


@dataclass
class ExtractionConfig:
    backend: str = "openai"
    target_language: str = "English"
    timeout: float = 30.0
    openai: OpenAIExtractionConfig = field(default_factory=OpenAIExtractionConfig)
    claude: ClaudeExtractionConfig = field(default_factory=ClaudeExtractionConfig)
    gemini: GeminiExtractionConfig = field(default_factory=GeminiExtractionConfig)

    def _selected(self):
        return {
            "openai": self.openai,
            "claude": self.claude,
            "gemini": self.gemini,
        }.get(self.backend)

    @property
    def api_key(self) -> str:
        selected = self._selected()
        return selected.api_key if selected is not None else ""

    @property
    def model(self) -> str:
        selected = self._selected()
        return selected.model if selected is not None else ""

    @property
    def has_credential(self) -> bool:
        return bool(self.api_key)


@dataclass
class LoggingConfig:
    level: str = "WARNING"


@dataclass
class ReceiptsConfig:
    extraction: ExtractionConfig = field(default_factory=ExtractionConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)


def load_config(path: str | Path | None = None) -> ReceiptsConfig:
    """Load configuration from a TOML file.

    Falls back to defaults if no path is given or the file doesn't exist.
    API keys can be overridden via environment variables.
    """
    raw: dict = {}

    if path is not None:
        p = Path(path)
        if p.exists():
            if tomllib is None:
                raise ImportError(
                    "tomli is required on Python < 3.11: pip install tomli"
                )
            with open(p, "rb") as f:
                raw = tomllib.load(f)

    ext = raw.get("extraction", {})
    log = raw.get("logging", {})

    openai_cfg = ext.get("openai", {})
    claude_cfg = ext.get("claude", {})
    gemini_cfg = ext.get("gemini", {})

    # Resolve API keys: config file → environment variable
    openai_api_key = openai_cfg.get("api_key", "") or os.environ.get(
        "OPENAI_API_KEY", ""
    )
    claude_api_key = claude_cfg.get("api_key", "") or os.environ.get(
        "ANTHROPIC_API_KEY", ""
    )
    gemini_api_key = gemini_cfg.get("api_key", "") or os.environ.get(
        "GEMINI_API_KEY", ""
    )

    return ReceiptsConfig(
        extraction=ExtractionConfig(
            backend=ext.get("backend", "openai"),
            target_language=ext.get("target_language", "English"),
            timeout=float(ext.get("timeout", 30.0)),
            openai=OpenAIExtractionConfig(
                api_key=openai_api_key,
                model=openai_cfg.get("model", "gpt-4o-mini"),
            ),
            claude=ClaudeExtractionConfig(
                api_key=claude_api_key,
                model=claude_cfg.get("model", "claude-sonnet-4-5-20250929"),
            ),
            gemini=GeminiExtractionConfig(
                api_key=gemini_api_key,
                model=gemini_cfg.get("model", "gemini-2.0-flash"),
            ),
        ),
        logging=LoggingConfig(
            level=str(log.get("level", "WARNING")).upper(),
        ),
    )
