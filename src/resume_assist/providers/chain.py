"""Strict-priority provider fallback chain."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Sequence, Union

from resume_assist.clients.base import LLMResponse, ProviderAdapter, ProviderError

logger = logging.getLogger(__name__)


@dataclass
class ChainSuccess:
    """A provider answered. ``attempts`` holds the failures that preceded it."""

    provider: str
    response: LLMResponse
    attempts: list[ProviderError] = field(default_factory=list)

    @property
    def text(self) -> str:
        return self.response.text


class AllProvidersExhausted(Exception):
    """Every configured provider failed for one request."""

    def __init__(self, attempts: Sequence[ProviderError]):
        self.attempts = list(attempts)
        detail = "; ".join(str(a) for a in self.attempts) or "no providers configured"
        super().__init__(f"All AI providers failed ({detail})")


ChainOutcome = Union[ChainSuccess, AllProvidersExhausted]


class ProviderChain:
    """Tries adapters one at a time in the given order; first success wins.

    Attempts never overlap: provider i+1 is only called after provider i has
    failed, so a request is billed at most once per provider.
    """

    def __init__(self, adapters: Sequence[ProviderAdapter]):
        self.adapters = tuple(adapters)

    @property
    def provider_names(self) -> list[str]:
        return [a.name for a in self.adapters]

    async def run(self, prompt: str, max_tokens: int) -> ChainOutcome:
        """Run the chain and return a tagged outcome instead of raising."""
        attempts: list[ProviderError] = []
        for adapter in self.adapters:
            try:
                response = await adapter.generate(prompt, max_tokens)
            except ProviderError as err:
                logger.warning("Provider %s failed: %s", adapter.name, err.cause)
                attempts.append(err)
                continue
            if attempts:
                logger.info(
                    "Provider %s succeeded after %d failed attempt(s)", adapter.name, len(attempts)
                )
            return ChainSuccess(provider=adapter.name, response=response, attempts=attempts)

        if not self.adapters:
            logger.error("No AI providers configured")
        else:
            logger.error("All %d providers failed", len(attempts))
        return AllProvidersExhausted(attempts)

    async def generate(self, prompt: str, max_tokens: int) -> ChainSuccess:
        """Like :meth:`run`, but raises :class:`AllProvidersExhausted`."""
        outcome = await self.run(prompt, max_tokens)
        if isinstance(outcome, AllProvidersExhausted):
            raise outcome
        return outcome
