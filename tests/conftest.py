"""Shared test fixtures."""

from __future__ import annotations

import json

import pytest

from resume_assist.clients.base import LLMResponse, ProviderAdapter
from resume_assist.models.requests import (
    AnalysisRequest,
    CoverLetterRequest,
    Education,
    Experience,
    SummaryRequest,
)


class FakeAdapter(ProviderAdapter):
    """Scripted adapter: returns ``text`` or raises ``error`` and records prompts."""

    def __init__(
        self,
        name: str,
        text: str = "",
        error: BaseException | None = None,
        model: str = "fake-model",
        timeout: float = 30.0,
    ):
        super().__init__(model, timeout=timeout)
        self.name = name
        self.text = text
        self.error = error
        self.calls: list[tuple[str, int]] = []

    async def _call_api(self, prompt: str, max_tokens: int) -> LLMResponse:
        self.calls.append((prompt, max_tokens))
        if self.error is not None:
            raise self.error
        return LLMResponse(text=self.text, input_tokens=120, output_tokens=80, model=self.model)


@pytest.fixture
def make_adapter():
    def _make(name: str, text: str = "", error: BaseException | None = None, **kwargs) -> FakeAdapter:
        return FakeAdapter(name, text=text, error=error, **kwargs)

    return _make


@pytest.fixture
def summary_request() -> SummaryRequest:
    return SummaryRequest(
        name="Jane Doe",
        experiences=[
            Experience(
                title="Backend Engineer",
                company="Acme Corp",
                description="Built payment APIs handling 1M requests/day",
            ),
            Experience(title="Junior Developer", company="Startup Inc", description="Django REST APIs"),
        ],
        educations=[Education(degree="B.Sc. Computer Science", institution="State University")],
        skills="Python, Go, PostgreSQL, Kubernetes",
    )


@pytest.fixture
def cover_letter_request() -> CoverLetterRequest:
    return CoverLetterRequest(
        name="Jane Doe",
        job_title="Senior Backend Engineer",
        company_name="Globex",
        skills="Python, Go, PostgreSQL, Kubernetes",
    )


@pytest.fixture
def analysis_request() -> AnalysisRequest:
    return AnalysisRequest(
        job_title="Engineer",
        job_description="We are hiring a backend engineer with Python and AWS experience.",
        resume_text="Jane Doe. Backend Engineer at Acme Corp. Python, Go, PostgreSQL, Docker.",
    )


@pytest.fixture
def analysis_payload() -> dict:
    return {
        "score": 82,
        "keywordMatch": 78,
        "formatScore": 90,
        "contentScore": 80,
        "feedback": "Strong technical match; AWS is not mentioned.",
        "improvements": [
            "Mention AWS services you have used",
            "Add metrics to the Startup Inc role",
            "Move skills above education",
        ],
        "strengths": [
            "Python experience matches the core requirement",
            "Clear job titles",
            "Quantified impact at Acme Corp",
            "Simple single-column layout",
        ],
    }


@pytest.fixture
def analysis_json(analysis_payload) -> str:
    return json.dumps(analysis_payload)
