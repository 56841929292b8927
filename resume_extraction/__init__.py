from resume_extraction.parser import (
    ParsedResume,
    ResumeParser,
    ResumeScore,
    parse_resume,
    parse_resume_text,
)

__all__ = [
    "ParsedResume",
    "ResumeParser",
    "ResumeScore",
    "parse_resume",
    "parse_resume_text",
]
