"""Application configuration loaded from config.yaml."""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path

import yaml

SUPPORTED_PROVIDERS = ("openai", "anthropic", "gemini")


@dataclass(frozen=True)
class ProviderConfig:
    name: str
    model: str
    api_key_env: str = ""

    def __post_init__(self) -> None:
        if self.name not in SUPPORTED_PROVIDERS:
            raise ValueError(
                f"provider name must be one of {SUPPORTED_PROVIDERS}, got {self.name!r}"
            )
        if not self.model:
            raise ValueError(f"model must be set for provider {self.name!r}")
        if not self.api_key_env:
            object.__setattr__(self, "api_key_env", f"{self.name.upper()}_API_KEY")

    @property
    def api_key(self) -> str | None:
        return os.environ.get(self.api_key_env) or None


def _default_providers() -> tuple[ProviderConfig, ...]:
    return (
        ProviderConfig(name="openai", model="gpt-4o"),
        ProviderConfig(name="anthropic", model="claude-3-haiku-20240307"),
        ProviderConfig(name="gemini", model="gemini-1.5-pro"),
    )


@dataclass(frozen=True)
class LLMConfig:
    timeout: float = 30.0
    providers: tuple[ProviderConfig, ...] = field(default_factory=_default_providers)

    def __post_init__(self) -> None:
        if self.timeout < 1:
            raise ValueError(f"timeout must be >= 1 second, got {self.timeout}")
        if not self.providers:
            raise ValueError("providers must list at least one provider")


@dataclass(frozen=True)
class GenerationConfig:
    summary_max_tokens: int = 200
    cover_letter_max_tokens: int = 500
    analysis_max_tokens: int = 1000
    temperature: float = 0.7

    def __post_init__(self) -> None:
        for name in ("summary_max_tokens", "cover_letter_max_tokens", "analysis_max_tokens"):
            value = getattr(self, name)
            if not 1 <= value <= 8192:
                raise ValueError(f"{name} must be between 1 and 8192, got {value}")
        if not 0.0 <= self.temperature <= 1.0:
            raise ValueError(f"temperature must be between 0 and 1, got {self.temperature}")


@dataclass(frozen=True)
class AppConfig:
    llm: LLMConfig = field(default_factory=LLMConfig)
    generation: GenerationConfig = field(default_factory=GenerationConfig)


def _load_llm(raw: dict) -> LLMConfig:
    raw = dict(raw)
    providers = raw.pop("providers", None)
    if providers is not None:
        raw["providers"] = tuple(ProviderConfig(**p) for p in providers)
    return LLMConfig(**raw)


def load_config(path: str | Path | None = None) -> AppConfig:
    """Load config from YAML file, falling back to defaults."""
    if path is None:
        # Look for config.yaml relative to the project root
        candidates = [
            Path.cwd() / "config.yaml",
            Path(__file__).resolve().parent.parent.parent / "config.yaml",
        ]
        for c in candidates:
            if c.exists():
                path = c
                break

    raw: dict = {}
    if path is not None:
        p = Path(path)
        if p.exists():
            raw = yaml.safe_load(p.read_text()) or {}

    return AppConfig(
        llm=_load_llm(raw.get("llm", {})),
        generation=GenerationConfig(**raw.get("generation", {})),
    )
