from __future__ import annotations

import logging

from openai import AsyncOpenAI, OpenAIError

from .config import GEMINI_OPENAI_BASE_URL
from .errors import UpstreamError
from .prompt_templates import SYSTEM_PROMPT

logger = logging.getLogger("uvicorn.error")


class GeminiGenerator:
    """Single chat completion against Gemini's OpenAI-compatible endpoint.

    A client is opened per call and closed when the call returns. Failures are
    not retried.
    """

    def __init__(
        self,
        model: str = "gemini-2.5-pro",
        base_url: str = GEMINI_OPENAI_BASE_URL,
        temperature: float = 0.4,
    ):
        self.model = model
        self.base_url = base_url
        self.temperature = temperature

    async def generate(self, prompt: str, api_key: str) -> str:
        try:
            async with AsyncOpenAI(api_key=api_key, base_url=self.base_url, max_retries=0) as client:
                resp = await client.chat.completions.create(
                    model=self.model,
                    messages=[
                        {"role": "system", "content": SYSTEM_PROMPT},
                        {"role": "user", "content": prompt},
                    ],
                    temperature=self.temperature,
                )
        except OpenAIError as e:
            raise UpstreamError(f"Gemini API error: {e}") from e

        choices = getattr(resp, "choices", None) or []
        message = getattr(choices[0], "message", None) if choices else None
        text = getattr(message, "content", None)
        if not text:
            raise UpstreamError("Invalid response from Gemini API")
        logger.info("gemini model=%s returned %d chars", self.model, len(text))
        return text
