"""Pydantic models for generation results."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Annotated, Generic, Literal, TypeVar

from pydantic import BaseModel, ConfigDict, Field

from resume_assist.clients.base import ProviderError

T = TypeVar("T")

Task = Literal["summary", "cover_letter", "analysis"]
FallbackCause = Literal["exhausted", "validation", "error"]

BulletPoint = Annotated[str, Field(min_length=1, pattern=r"\S")]


class AnalysisResult(BaseModel):
    """ATS compatibility analysis, in the JSON shape the model is asked to emit."""

    model_config = ConfigDict(strict=True, frozen=True, populate_by_name=True)

    score: int = Field(ge=0, le=100)
    keyword_match: int = Field(alias="keywordMatch", ge=0, le=100)
    format_score: int = Field(alias="formatScore", ge=0, le=100)
    content_score: int = Field(alias="contentScore", ge=0, le=100)
    feedback: str = Field(min_length=1)
    improvements: list[BulletPoint] = Field(min_length=3, max_length=5)
    strengths: list[BulletPoint] = Field(min_length=3, max_length=5)


@dataclass
class GenerationReport(Generic[T]):
    """Result of one façade call plus the diagnostics behind it."""

    task: Task
    value: T
    provider: str | None = None
    fallback_cause: FallbackCause | None = None
    attempts: list[ProviderError] = field(default_factory=list)
    usage: list[tuple[str, int, int]] = field(default_factory=list)  # (model, input_tokens, output_tokens)

    @property
    def used_fallback(self) -> bool:
        return self.fallback_cause is not None
