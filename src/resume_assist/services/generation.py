"""Generation façade: prompt -> provider chain -> parser, with fallbacks.

The three public operations never raise for provider or parsing problems;
they degrade to the fixed defaults in ``services.fallback`` and log why.
"""

from __future__ import annotations

import logging
from typing import Callable, TypeVar

from resume_assist.clients.factory import build_adapters
from resume_assist.config import AppConfig, load_config
from resume_assist.models.requests import AnalysisRequest, CoverLetterRequest, SummaryRequest
from resume_assist.models.results import AnalysisResult, GenerationReport, Task
from resume_assist.parsing.validator import (
    ParseOutcome,
    ValidationFailure,
    parse_analysis,
    parse_text,
)
from resume_assist.prompts.builder import (
    build_analysis_prompt,
    build_cover_letter_prompt,
    build_summary_prompt,
)
from resume_assist.providers.chain import AllProvidersExhausted, ProviderChain
from resume_assist.services.fallback import (
    fallback_analysis,
    fallback_cover_letter,
    fallback_summary,
)

logger = logging.getLogger(__name__)

T = TypeVar("T")


class GenerationService:
    """Summary, cover-letter and ATS-analysis generation with a total contract."""

    def __init__(
        self,
        chain: ProviderChain,
        *,
        summary_max_tokens: int = 200,
        cover_letter_max_tokens: int = 500,
        analysis_max_tokens: int = 1000,
    ):
        self.chain = chain
        self.summary_max_tokens = summary_max_tokens
        self.cover_letter_max_tokens = cover_letter_max_tokens
        self.analysis_max_tokens = analysis_max_tokens

    @classmethod
    def from_config(cls, config: AppConfig | None = None) -> GenerationService:
        """Build the service from config.yaml and provider API keys in the environment."""
        config = config or load_config()
        chain = ProviderChain(build_adapters(config))
        logger.info("Provider order: %s", ", ".join(chain.provider_names) or "(none)")
        return cls(
            chain,
            summary_max_tokens=config.generation.summary_max_tokens,
            cover_letter_max_tokens=config.generation.cover_letter_max_tokens,
            analysis_max_tokens=config.generation.analysis_max_tokens,
        )

    # --- Public operations ---

    async def generate_summary(self, request: SummaryRequest) -> str:
        """Professional summary for the resume; never empty."""
        return (await self.generate_summary_report(request)).value

    async def generate_cover_letter(self, request: CoverLetterRequest) -> str:
        """Cover-letter body; never empty."""
        return (await self.generate_cover_letter_report(request)).value

    async def analyze_resume(self, request: AnalysisRequest) -> AnalysisResult:
        """ATS compatibility analysis; always a fully valid result."""
        return (await self.analyze_resume_report(request)).value

    # --- Variants that expose diagnostics ---

    async def generate_summary_report(self, request: SummaryRequest) -> GenerationReport[str]:
        return await self._run(
            "summary",
            lambda: build_summary_prompt(request),
            self.summary_max_tokens,
            parse_text,
            lambda: fallback_summary(request),
        )

    async def generate_cover_letter_report(
        self, request: CoverLetterRequest
    ) -> GenerationReport[str]:
        return await self._run(
            "cover_letter",
            lambda: build_cover_letter_prompt(request),
            self.cover_letter_max_tokens,
            parse_text,
            lambda: fallback_cover_letter(request),
        )

    async def analyze_resume_report(
        self, request: AnalysisRequest
    ) -> GenerationReport[AnalysisResult]:
        return await self._run(
            "analysis",
            lambda: build_analysis_prompt(request),
            self.analysis_max_tokens,
            parse_analysis,
            fallback_analysis,
        )

    # --- Internals ---

    async def _run(
        self,
        task: Task,
        build_prompt: Callable[[], str],
        max_tokens: int,
        parse: Callable[[str], ParseOutcome[T]],
        fallback: Callable[[], T],
    ) -> GenerationReport[T]:
        try:
            prompt = build_prompt()
            outcome = await self.chain.run(prompt, max_tokens)

            if isinstance(outcome, AllProvidersExhausted):
                logger.warning(
                    "%s: using fallback, all providers failed: %s",
                    task,
                    "; ".join(str(a) for a in outcome.attempts) or "no providers configured",
                )
                return GenerationReport(
                    task=task,
                    value=fallback(),
                    fallback_cause="exhausted",
                    attempts=outcome.attempts,
                )

            usage = [(outcome.response.model, outcome.response.input_tokens, outcome.response.output_tokens)]
            parsed = parse(outcome.text)
            if isinstance(parsed, ValidationFailure):
                logger.warning(
                    "%s: using fallback, %s returned unusable output: %s",
                    task, outcome.provider, parsed.reason,
                )
                logger.debug("%s: raw output from %s: %r", task, outcome.provider, parsed.raw[:500])
                return GenerationReport(
                    task=task,
                    value=fallback(),
                    provider=outcome.provider,
                    fallback_cause="validation",
                    attempts=outcome.attempts,
                    usage=usage,
                )

            logger.info(
                "%s: generated by %s (%d input, %d output tokens)",
                task, outcome.provider, outcome.response.input_tokens, outcome.response.output_tokens,
            )
            return GenerationReport(
                task=task,
                value=parsed.value,
                provider=outcome.provider,
                attempts=outcome.attempts,
                usage=usage,
            )
        except Exception:
            logger.error("%s: unexpected error, using fallback", task, exc_info=True)
            return GenerationReport(task=task, value=fallback(), fallback_cause="error")
