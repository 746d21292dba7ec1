"""Data models for the generation layer."""

from resume_assist.models.requests import (
    AnalysisRequest,
    CoverLetterRequest,
    Education,
    Experience,
    SummaryRequest,
)
from resume_assist.models.results import AnalysisResult, GenerationReport

__all__ = [
    "AnalysisRequest",
    "AnalysisResult",
    "CoverLetterRequest",
    "Education",
    "Experience",
    "GenerationReport",
    "SummaryRequest",
]
