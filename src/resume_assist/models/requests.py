"""Pydantic models for generation requests."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class Experience(BaseModel):
    model_config = ConfigDict(frozen=True)

    title: str
    company: str
    description: str = ""


class Education(BaseModel):
    model_config = ConfigDict(frozen=True)

    degree: str
    institution: str


class SummaryRequest(BaseModel):
    """Facts used to write a professional summary."""

    model_config = ConfigDict(frozen=True)

    name: str
    experiences: tuple[Experience, ...] = ()
    educations: tuple[Education, ...] = ()
    skills: str = ""


class CoverLetterRequest(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    name: str
    job_title: str = Field(alias="jobTitle")
    company_name: str = Field(alias="companyName")
    skills: str = ""


class AnalysisRequest(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    job_title: str = Field(alias="jobTitle")
    job_description: str = Field(alias="jobDescription")
    resume_text: str = Field(alias="resumeText")
