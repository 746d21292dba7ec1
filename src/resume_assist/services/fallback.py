"""Fixed default results used when generation or validation fails."""

from __future__ import annotations

from resume_assist.models.requests import CoverLetterRequest, SummaryRequest
from resume_assist.models.results import AnalysisResult

FALLBACK_SUMMARY = (
    "An experienced professional with a track record of success in my field. "
    "I combine technical expertise with strong communication skills to deliver results. "
    "I am dedicated to continuous improvement and bringing value to my organization."
)

FALLBACK_FEEDBACK = (
    "Your resume has good structure but could benefit from more targeted keywords related "
    "to the job description. The experience section is well-detailed, but some technical "
    "skills mentioned in the job posting are missing from your resume."
)

FALLBACK_IMPROVEMENTS = (
    "Add more industry-specific keywords from the job description",
    "Quantify achievements with metrics and numbers",
    "Include a skills section with technical competencies",
    "Use more action verbs at the beginning of bullet points",
    "Tailor your professional summary to the specific job",
)

FALLBACK_STRENGTHS = (
    "Clear chronological format that's easy for ATS to parse",
    "Relevant work experience is well-described",
    "Education section is properly formatted",
    "Contact information is complete and well-positioned",
    "Job titles are clearly stated",
)


def fallback_summary(request: SummaryRequest) -> str:
    return FALLBACK_SUMMARY


def _top_skills(skills: str, limit: int = 3) -> str:
    top = [s.strip() for s in skills.split(",") if s.strip()][:limit]
    return ", ".join(top) if top else "my core areas of expertise"


def fallback_cover_letter(request: CoverLetterRequest) -> str:
    """Generic four-paragraph letter naming the role, company and top three skills."""
    job_title = request.job_title.strip() or "advertised"
    company = request.company_name.strip() or "your company"
    return f"""I am writing to express my interest in the {job_title} position at {company}. With my background and skills, I believe I would be a valuable addition to your team.

Throughout my career, I have developed expertise in various areas that align well with this role. My experience includes strong problem-solving abilities, excellent communication skills, and a dedication to delivering high-quality results.

I am particularly drawn to {company} because of your reputation for innovation and excellence in the industry. I am confident that my skills in {_top_skills(request.skills)} would allow me to make significant contributions to your team.

I would welcome the opportunity to discuss how my background, skills, and experiences would benefit {company}. Thank you for considering my application, and I look forward to the possibility of working with your team."""


def fallback_analysis() -> AnalysisResult:
    """A fresh copy of the default analysis (lists are not shared between calls)."""
    return AnalysisResult(
        score=68,
        keyword_match=65,
        format_score=75,
        content_score=70,
        feedback=FALLBACK_FEEDBACK,
        improvements=list(FALLBACK_IMPROVEMENTS),
        strengths=list(FALLBACK_STRENGTHS),
    )
