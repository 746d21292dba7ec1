"""Google Gemini adapter over the google-genai SDK."""

from __future__ import annotations

from google import genai
from google.genai import types

from resume_assist.clients.base import LLMResponse, ProviderAdapter


class GeminiAdapter(ProviderAdapter):
    name = "gemini"

    def __init__(
        self,
        model: str = "gemini-1.5-pro",
        api_key: str | None = None,
        timeout: float = 30.0,
        temperature: float = 0.7,
    ):
        super().__init__(model, timeout=timeout, temperature=temperature)
        kwargs: dict = {}
        if api_key is not None:
            kwargs["api_key"] = api_key
        self.client = genai.Client(**kwargs)

    async def _call_api(self, prompt: str, max_tokens: int) -> LLMResponse:
        response = await self.client.aio.models.generate_content(
            model=self.model,
            contents=prompt,
            config=types.GenerateContentConfig(
                temperature=self.temperature,
                max_output_tokens=max_tokens,
            ),
        )
        usage = response.usage_metadata
        return LLMResponse(
            text=response.text or "",
            input_tokens=(usage.prompt_token_count or 0) if usage else 0,
            output_tokens=(usage.candidates_token_count or 0) if usage else 0,
            model=self.model,
        )
