"""AI generation layer for the resume builder: summaries, cover letters, ATS analysis."""

__version__ = "0.1.0"
