"""Tests for fallback defaults."""

from resume_assist.models.requests import CoverLetterRequest
from resume_assist.models.results import AnalysisResult
from resume_assist.services.fallback import (
    FALLBACK_IMPROVEMENTS,
    FALLBACK_STRENGTHS,
    FALLBACK_SUMMARY,
    fallback_analysis,
    fallback_cover_letter,
    fallback_summary,
)


class TestFallbackSummary:
    def test_fixed_text(self, summary_request):
        text = fallback_summary(summary_request)
        assert text == FALLBACK_SUMMARY
        assert text == text.strip() and text


class TestFallbackCoverLetter:
    def test_mentions_role_company_and_top_three_skills(self, cover_letter_request):
        text = fallback_cover_letter(cover_letter_request)
        assert text.startswith(
            "I am writing to express my interest in the Senior Backend Engineer position at Globex."
        )
        assert "my skills in Python, Go, PostgreSQL would allow me" in text
        assert "Kubernetes" not in text
        assert text.count("\n\n") == 3

    def test_empty_skills(self):
        request = CoverLetterRequest(name="Sam", job_title="Analyst", company_name="Initech", skills="")
        text = fallback_cover_letter(request)
        assert "my skills in my core areas of expertise" in text

    def test_never_empty(self):
        request = CoverLetterRequest(name="", job_title="", company_name="", skills=" , ,")
        text = fallback_cover_letter(request)
        assert text.strip() == text
        assert "your company" in text


class TestFallbackAnalysis:
    def test_fixed_values(self):
        result = fallback_analysis()
        assert isinstance(result, AnalysisResult)
        assert (result.score, result.keyword_match, result.format_score, result.content_score) == (68, 65, 75, 70)
        assert result.improvements == list(FALLBACK_IMPROVEMENTS)
        assert result.strengths == list(FALLBACK_STRENGTHS)
        assert len(result.improvements) == 5
        assert len(result.strengths) == 5

    def test_fresh_instance_per_call(self):
        first = fallback_analysis()
        first.improvements.append("mutated")
        assert len(fallback_analysis().improvements) == 5
