"""Claude API backend for receipt extraction."""

from __future__ import annotations

from . import ReceiptExtractor


class ClaudeReceiptExtractor(ReceiptExtractor):
    """Extract receipt items using Claude."""

    def __init__(
        self,
        api_key: str = "",
        model: str = "claude-sonnet-4-5-20250929",
        target_language: str = "English",
        timeout: float = 30.0,
    ) -> None:
        super().__init__(target_language=target_language)
        self._api_key = api_key
        self._model = model
        self._timeout = timeout

    async def _complete(self, system_prompt: str, user_prompt: str) -> str:
        if not self._api_key:
            raise ValueError(
                "Anthropic API key is not configured. "
                "Check the config file or the ANTHROPIC_API_KEY environment variable."
            )

        try:
            import anthropic
        except ImportError:
            raise ImportError(
                "anthropic SDK is required: pip install anthropic"
            ) from None

        async with anthropic.AsyncAnthropic(
            api_key=self._api_key, timeout=self._timeout
        ) as client:
            response = await client.messages.create(
                model=self._model,
                max_tokens=2048,
                temperature=0,
                system=system_prompt,
                messages=[{"role": "user", "content": user_prompt}],
            )

        return response.content[0].text
