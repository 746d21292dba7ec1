"""Build the configured provider adapters in preference order."""

from __future__ import annotations

import logging

from resume_assist.clients.anthropic_client import AnthropicAdapter
from resume_assist.clients.base import ProviderAdapter
from resume_assist.clients.gemini_client import GeminiAdapter
from resume_assist.clients.openai_client import OpenAIAdapter
from resume_assist.config import AppConfig

logger = logging.getLogger(__name__)

ADAPTER_TYPES: dict[str, type[ProviderAdapter]] = {
    "openai": OpenAIAdapter,
    "anthropic": AnthropicAdapter,
    "gemini": GeminiAdapter,
}


def build_adapters(config: AppConfig) -> list[ProviderAdapter]:
    """Instantiate one adapter per configured provider that has an API key.

    Providers without a key are skipped, so the returned list may be shorter
    than the configured one (or empty).
    """
    adapters: list[ProviderAdapter] = []
    for provider in config.llm.providers:
        api_key = provider.api_key
        if api_key is None:
            logger.warning("%s not set - skipping provider %s", provider.api_key_env, provider.name)
            continue
        adapter_cls = ADAPTER_TYPES[provider.name]
        adapters.append(
            adapter_cls(
                model=provider.model,
                api_key=api_key,
                timeout=config.llm.timeout,
                temperature=config.generation.temperature,
            )
        )
    return adapters
