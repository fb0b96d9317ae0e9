"""OpenAI chat-completions backend for receipt extraction."""

from __future__ import annotations

from . import ReceiptExtractor, ResponseFormatError


class OpenAIReceiptExtractor(ReceiptExtractor):
    """Extract receipt items with an OpenAI chat model."""

    def __init__(
        self,
        api_key: str = "",
        model: str = "gpt-4o-mini",
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
                "OpenAI API key is not configured. "
                "Check the config file or the OPENAI_API_KEY environment variable."
            )

        try:
            import openai
        except ImportError:
            raise ImportError(
                "openai SDK is required: pip install openai"
            ) from None

        async with openai.AsyncOpenAI(
            api_key=self._api_key, timeout=self._timeout
        ) as client:
            response = await client.chat.completions.create(
                model=self._model,
                temperature=0,
                response_format={"type": "json_object"},
                messages=[
                    {"role": "system", "content": system_prompt},
                    {"role": "user", "content": user_prompt},
                ],
            )

        content = response.choices[0].message.content
        if not isinstance(content, str):
            raise ResponseFormatError("Unexpected OpenAI response format")
        return content
