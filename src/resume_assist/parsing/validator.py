"""Turn raw provider text into validated results.

Parsing never raises for bad model output. It returns either ``Valid`` or
``ValidationFailure``; a failure is never accompanied by a partially-filled
result.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, TypeVar, Union

from pydantic import ValidationError

from resume_assist.models.results import AnalysisResult
from resume_assist.parsing.json_parser import extract_json_object

T = TypeVar("T")


@dataclass(frozen=True)
class Valid(Generic[T]):
    value: T


@dataclass(frozen=True)
class ValidationFailure:
    reason: str
    raw: str = ""

    def __str__(self) -> str:
        return self.reason


ParseOutcome = Union[Valid[T], ValidationFailure]


def parse_text(raw: str) -> ParseOutcome[str]:
    """Summary and cover-letter output: trimmed text, must not be empty."""
    text = (raw or "").strip()
    if not text:
        return ValidationFailure("empty text response", raw=raw or "")
    return Valid(text)


def parse_analysis(raw: str) -> ParseOutcome[AnalysisResult]:
    """ATS analysis output: one JSON object matching ``AnalysisResult`` exactly.

    Invalid JSON, missing fields, wrong types (including numeric strings and
    fractional scores), scores outside 0-100 and list lengths outside 3-5 all
    produce a ``ValidationFailure``.
    """
    try:
        data = extract_json_object(raw or "")
    except ValueError as exc:
        return ValidationFailure(f"invalid JSON: {exc}", raw=raw or "")

    try:
        result = AnalysisResult.model_validate(data)
    except ValidationError as exc:
        errors = "; ".join(
            f"{'.'.join(str(loc) for loc in err['loc'])}: {err['msg']}" for err in exc.errors()
        )
        return ValidationFailure(f"schema mismatch: {errors}", raw=raw or "")
    return Valid(result)
