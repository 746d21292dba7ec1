"""Uniform async interface over text-generation backends."""

from __future__ import annotations

import asyncio
import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass

logger = logging.getLogger(__name__)


@dataclass
class LLMResponse:
    """Response from a provider including usage metadata."""

    text: str
    input_tokens: int
    output_tokens: int
    model: str = ""


class ProviderError(Exception):
    """A single backend call failed (network, auth, rate limit, timeout, empty output)."""

    def __init__(self, provider: str, cause: BaseException | str):
        self.provider = provider
        self.cause = cause
        super().__init__(f"{provider}: {cause}")

    def __repr__(self) -> str:
        return f"ProviderError(provider={self.provider!r}, cause={self.cause!r})"


class ProviderAdapter(ABC):
    """Wraps one backend behind ``generate(prompt, max_tokens)``.

    Adapters make exactly one outbound call per ``generate``. Retrying or
    moving on to another backend is the caller's decision.
    """

    name: str = ""

    def __init__(self, model: str, timeout: float = 30.0, temperature: float = 0.7):
        self.model = model
        self.timeout = timeout
        self.temperature = temperature

    @abstractmethod
    async def _call_api(self, prompt: str, max_tokens: int) -> LLMResponse:
        """Make the actual backend call."""

    async def generate(self, prompt: str, max_tokens: int) -> LLMResponse:
        """Send a prompt and return the generated text with usage.

        Raises:
            ProviderError: on any backend failure, on timeout, or when the
                backend returns no text.
        """
        logger.debug("LLM call: provider=%s model=%s max_tokens=%d", self.name, self.model, max_tokens)
        try:
            response = await asyncio.wait_for(
                self._call_api(prompt, max_tokens), timeout=self.timeout
            )
        except asyncio.TimeoutError as exc:
            raise ProviderError(self.name, f"timed out after {self.timeout:g}s") from exc
        except ProviderError:
            raise
        except Exception as exc:
            raise ProviderError(self.name, exc) from exc

        if not response.text or not response.text.strip():
            raise ProviderError(self.name, "empty response")

        logger.debug(
            "LLM response: %s %d input, %d output tokens",
            self.name, response.input_tokens, response.output_tokens,
        )
        return response

    def __repr__(self) -> str:
        return f"{type(self).__name__}(model={self.model!r})"
