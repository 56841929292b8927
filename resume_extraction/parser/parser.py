"""Main resume parser facade with unified API."""

import logging
from typing import Dict, Any, Optional, Tuple

from ..config import get_settings
from .models import ParsedResume, ResumeScore
from .contact import extract_email, extract_name, extract_phone
from .education import classify_education
from .experience import estimate_years
from .skills import extract_skills
from .links import extract_links
from .languages import extract_languages
from .scoring import score_resume


logger = logging.getLogger(__name__)


class ResumeParser:
    """Unified resume parser with modular extraction components.

    Takes plain text already extracted from a PDF/DOC/DOCX file and returns
    a ParsedResume. Every extractor runs independently; a field that cannot
    be determined keeps its empty default.

    Usage:
        parser = ResumeParser()
        result = parser.parse(text)
        print(result.email)
        print(result.skills)
        print(result.experience_years)
    """

    def __init__(self, max_text_chars: Optional[int] = None):
        """
        Args:
            max_text_chars: Truncate longer input before extraction. Falls
                back to the RESUME_MAX_TEXT_CHARS setting; None means no cap.

        Raises:
            ValueError: If max_text_chars is not a positive integer
        """
        if max_text_chars is None:
            max_text_chars = get_settings().resume_max_text_chars
        if max_text_chars is not None and max_text_chars <= 0:
            raise ValueError(f"max_text_chars must be positive, got {max_text_chars}")
        self.max_text_chars = max_text_chars

    def parse(self, text: str) -> ParsedResume:
        """Parse resume text and extract structured data.

        Args:
            text: Plain resume text

        Returns:
            ParsedResume with all extracted information

        Raises:
            TypeError: If text is not a str (e.g. undecoded bytes)
        """
        return self._extract(self._prepare(text))

    def parse_with_score(
        self, text: str, job_description: str = ""
    ) -> Tuple[ParsedResume, ResumeScore]:
        """Parse resume text and score the result.

        Args:
            text: Plain resume text
            job_description: Optional job description for skill matching

        Returns:
            (ParsedResume, ResumeScore)
        """
        text = self._prepare(text)
        parsed = self._extract(text)
        return parsed, score_resume(parsed, text, job_description)

    def _extract(self, text: str) -> ParsedResume:
        """Run every extractor over prepared text."""
        if not text:
            return ParsedResume()

        links = extract_links(text)

        return ParsedResume(
            name=extract_name(text),
            email=extract_email(text),
            phone=extract_phone(text),
            skills=extract_skills(text),
            education=classify_education(text),
            experience_years=estimate_years(text),
            linkedin=links.linkedin,
            github=links.github,
            languages=extract_languages(text),
        )

    def _prepare(self, text: str) -> str:
        """Validate input type and apply the configured length cap."""
        if isinstance(text, (bytes, bytearray)):
            raise TypeError(
                "Resume parser expects decoded text, got binary data; "
                "run it through a text extractor first"
            )
        if not isinstance(text, str):
            raise TypeError(f"Resume parser expects str, got {type(text).__name__}")

        if self.max_text_chars is not None and len(text) > self.max_text_chars:
            logger.warning(
                f"Resume text truncated from {len(text)} to {self.max_text_chars} characters"
            )
            text = text[: self.max_text_chars]
        return text


def parse_resume(text: str) -> ParsedResume:
    """Parse resume text with default settings.

    Args:
        text: Plain resume text

    Returns:
        ParsedResume object
    """
    return ResumeParser().parse(text)


def parse_resume_text(text: str) -> Dict[str, Any]:
    """Parse resume text and return a dictionary.

    Args:
        text: Plain resume text

    Returns:
        Dictionary with extracted information, keyed as in the JSON output
    """
    return parse_resume(text).to_dict()
