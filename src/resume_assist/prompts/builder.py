"""Prompt templates for the three generation tasks.

Every function here is pure: the same request always yields the same prompt.
"""

from __future__ import annotations

from resume_assist.models.requests import AnalysisRequest, CoverLetterRequest, SummaryRequest

ANALYSIS_JSON_SCHEMA = """\
{
  "score": number,
  "keywordMatch": number,
  "formatScore": number,
  "contentScore": number,
  "feedback": "string",
  "improvements": ["string", "string", ...],
  "strengths": ["string", "string", ...]
}"""


def build_summary_prompt(request: SummaryRequest) -> str:
    """Professional-summary prompt from experience, education and skills."""
    experience_text = "\n".join(
        f"- {exp.title} at {exp.company}: {exp.description}" for exp in request.experiences
    )
    education_text = "\n".join(
        f"- {edu.degree} from {edu.institution}" for edu in request.educations
    )

    return f"""Write a professional summary for {request.name}'s resume.

Work Experience:
{experience_text}

Education:
{education_text}

Skills:
{request.skills}

The summary should be concise (3-4 sentences), professional, and highlight key strengths and experiences.
Do not use bullet points. Write in first person.
Make sure to include keywords that would be relevant for ATS systems."""


def build_cover_letter_prompt(request: CoverLetterRequest) -> str:
    return f"""Write a professional cover letter for {request.name} applying for the position of {request.job_title} at {request.company_name}.

The applicant has the following skills and experience:
{request.skills}

The cover letter should:
1. Be professionally formatted
2. Express enthusiasm for the position and company
3. Highlight relevant skills and experience
4. Include a call to action
5. Be approximately 3-4 paragraphs long
6. Include keywords that would be relevant for ATS systems

Do not include the header, date, or signature sections. Start with the body of the letter."""


def build_analysis_prompt(request: AnalysisRequest) -> str:
    """ATS analysis prompt.

    The JSON shape spelled out here is what ``parse_analysis`` validates
    against; field names and list lengths must stay in sync with
    ``AnalysisResult``.
    """
    return f"""Analyze the following resume for ATS compatibility for a {request.job_title} position.

Job Description:
{request.job_description}

Resume:
{request.resume_text}

Provide a detailed analysis with the following:
1. Overall ATS score (0-100)
2. Keyword match percentage (0-100)
3. Format score (0-100)
4. Content score (0-100)
5. General feedback (1-2 paragraphs)
6. 3-5 specific improvements
7. 3-5 strengths

All four scores must be whole numbers between 0 and 100.
Return the results as a single JSON object in the following format, with no other text before or after it:
{ANALYSIS_JSON_SCHEMA}"""
