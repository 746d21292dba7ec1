"""Tests for response parsing and validation."""

import json

import pytest

from resume_assist.models.results import AnalysisResult
from resume_assist.parsing.validator import Valid, ValidationFailure, parse_analysis, parse_text


class TestParseText:
    def test_trims_whitespace(self):
        assert parse_text("  Hello there.\n\n") == Valid("Hello there.")

    @pytest.mark.parametrize("raw", ["", "   ", "\n\t\n"])
    def test_blank_is_failure(self, raw):
        assert isinstance(parse_text(raw), ValidationFailure)


class TestParseAnalysis:
    def test_valid_json(self, analysis_json):
        outcome = parse_analysis(analysis_json)
        assert isinstance(outcome, Valid)
        assert isinstance(outcome.value, AnalysisResult)
        assert outcome.value.content_score == 80

    def test_fenced_json(self, analysis_json):
        outcome = parse_analysis(f"```json\n{analysis_json}\n```")
        assert isinstance(outcome, Valid)

    def test_prose_is_failure(self):
        outcome = parse_analysis("I think this resume is pretty good, maybe a 75 out of 100.")
        assert isinstance(outcome, ValidationFailure)
        assert "invalid JSON" in outcome.reason

    def test_out_of_range_score_is_failure(self, analysis_payload):
        analysis_payload["score"] = 150
        outcome = parse_analysis(json.dumps(analysis_payload))
        assert isinstance(outcome, ValidationFailure)
        assert "score" in outcome.reason

    def test_missing_field_is_failure(self, analysis_payload):
        del analysis_payload["feedback"]
        outcome = parse_analysis(json.dumps(analysis_payload))
        assert isinstance(outcome, ValidationFailure)
        assert "feedback" in outcome.reason

    @pytest.mark.parametrize(
        "field, value",
        [
            ("score", "82"),
            ("score", 82.5),
            ("keywordMatch", True),
            ("feedback", 12),
            ("improvements", "add keywords"),
            ("strengths", ["ok", 2, "fine"]),
        ],
    )
    def test_wrong_type_is_failure(self, analysis_payload, field, value):
        analysis_payload[field] = value
        assert isinstance(parse_analysis(json.dumps(analysis_payload)), ValidationFailure)

    @pytest.mark.parametrize("field", ["improvements", "strengths"])
    @pytest.mark.parametrize("items", [["", "", ""], ["Clear titles", "   ", "Good format"]])
    def test_blank_bullet_is_failure(self, analysis_payload, field, items):
        analysis_payload[field] = items
        outcome = parse_analysis(json.dumps(analysis_payload))
        assert isinstance(outcome, ValidationFailure)
        assert field in outcome.reason

    def test_list_length_out_of_bounds_is_failure(self, analysis_payload):
        analysis_payload["improvements"] = ["a", "b"]
        assert isinstance(parse_analysis(json.dumps(analysis_payload)), ValidationFailure)

    def test_failure_keeps_raw_output(self):
        outcome = parse_analysis("not json")
        assert outcome.raw == "not json"
