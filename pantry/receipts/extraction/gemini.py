"""Gemini API backend for receipt extraction."""

from __future__ import annotations

from . import ReceiptExtractor


class GeminiReceiptExtractor(ReceiptExtractor):
    """Extract receipt items using Google Gemini."""

    def __init__(
        self,
        api_key: str = "",
        model: str = "gemini-2.0-flash",
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
                "Gemini API key is not configured. "
                "Check the config file or the GEMINI_API_KEY environment variable."
            )

        try:
            import google.generativeai as genai
        except ImportError:
            raise ImportError(
                "google-generativeai SDK is required: pip install google-generativeai"
            ) from None

        genai.configure(api_key=self._api_key)
        model = genai.GenerativeModel(self._model, system_instruction=system_prompt)

        response = await model.generate_content_async(
            user_prompt,
            generation_config={
                "temperature": 0,
                "response_mime_type": "application/json",
            },
            request_options={"timeout": self._timeout},
        )
        return response.text
