"""Claude adapter over the async Anthropic SDK."""

from __future__ import annotations

import anthropic

from resume_assist.clients.base import LLMResponse, ProviderAdapter


class AnthropicAdapter(ProviderAdapter):
    name = "anthropic"

    def __init__(
        self,
        model: str = "claude-3-haiku-20240307",
        api_key: str | None = None,
        timeout: float = 30.0,
        temperature: float = 0.7,
    ):
        super().__init__(model, timeout=timeout, temperature=temperature)
        kwargs: dict = {"max_retries": 0}
        if api_key is not None:
            kwargs["api_key"] = api_key
        self.client = anthropic.AsyncAnthropic(**kwargs)

    async def _call_api(self, prompt: str, max_tokens: int) -> LLMResponse:
        message = await self.client.messages.create(
            model=self.model,
            max_tokens=max_tokens,
            temperature=self.temperature,
            messages=[{"role": "user", "content": prompt}],
        )
        text = "".join(
            block.text for block in message.content if getattr(block, "type", "text") == "text"
        )
        return LLMResponse(
            text=text,
            input_tokens=message.usage.input_tokens,
            output_tokens=message.usage.output_tokens,
            model=self.model,
        )
