"""OpenAI chat-completions adapter."""

from __future__ import annotations

from openai import AsyncOpenAI

from resume_assist.clients.base import LLMResponse, ProviderAdapter


class OpenAIAdapter(ProviderAdapter):
    name = "openai"

    def __init__(
        self,
        model: str = "gpt-4o",
        api_key: str | None = None,
        timeout: float = 30.0,
        temperature: float = 0.7,
        base_url: str | None = None,
    ):
        super().__init__(model, timeout=timeout, temperature=temperature)
        kwargs: dict = {"max_retries": 0}
        if api_key is not None:
            kwargs["api_key"] = api_key
        if base_url is not None:
            kwargs["base_url"] = base_url
        self.client = AsyncOpenAI(**kwargs)

    async def _call_api(self, prompt: str, max_tokens: int) -> LLMResponse:
        completion = await self.client.chat.completions.create(
            model=self.model,
            messages=[{"role": "user", "content": prompt}],
            max_tokens=max_tokens,
            temperature=self.temperature,
        )
        usage = completion.usage
        return LLMResponse(
            text=completion.choices[0].message.content or "",
            input_tokens=usage.prompt_tokens if usage else 0,
            output_tokens=usage.completion_tokens if usage else 0,
            model=self.model,
        )
