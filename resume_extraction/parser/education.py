"""Education level classification from resume text."""

import re
import logging
from typing import List

from .models import EducationCategory
from .sections import SectionScanner


logger = logging.getLogger(__name__)


EDUCATION_SECTION = SectionScanner(
    start_keywords=("education", "academic", "qualification", "educational background"),
    stop_keywords=("experience", "work", "employment", "skills", "projects", "certification"),
)

# Degree pattern families, checked in reporting order
DEGREE_PATTERNS = [
    (
        EducationCategory.BACHELORS,
        re.compile(
            r"\b(bachelor|b\.\s*e\.?|b\s*e\b|be\b|b\.\s*tech\.?|b\s*tech\b|btech\b|"
            r"b\.\s*sc\.?|b\s*sc\b|bsc\b|b\.\s*com\.?|b\s*com\b|bcom\b)\b",
            re.IGNORECASE,
        ),
    ),
    (
        EducationCategory.MASTERS,
        re.compile(
            r"\b(master|m\.\s*e\.?|m\s*e\b|me\b|m\.\s*tech\.?|m\s*tech\b|mtech\b|"
            r"m\.\s*sc\.?|m\s*sc\b|msc\b|mba|m\.b\.a\.?)\b",
            re.IGNORECASE,
        ),
    ),
    (
        EducationCategory.PHD,
        re.compile(r"\b(phd|ph\.\s*d\.?|doctorate|doctor\s+of\s+philosophy)\b", re.IGNORECASE),
    ),
    (
        EducationCategory.DIPLOMA,
        re.compile(r"\b(diploma)\b", re.IGNORECASE),
    ),
    (
        EducationCategory.CERTIFICATION,
        re.compile(r"\b(certificate|certification)\b", re.IGNORECASE),
    ),
    (
        EducationCategory.HIGH_SCHOOL,
        re.compile(r"\b(high\s*school|secondary\s+school|12th|10th)\b", re.IGNORECASE),
    ),
]


def _education_search_area(text: str) -> str:
    """Education section body, or the first half of the document if unlabeled."""
    lines = text.split("\n")
    section = EDUCATION_SECTION.scan(lines)
    if section:
        return section

    # Unlabeled resumes tend to list education near the top
    logger.debug("No education section found, searching first half of document")
    return " ".join(lines[: len(lines) // 2])


def classify_education_categories(text: str) -> List[EducationCategory]:
    """Map resume text to the degree categories it mentions.

    Args:
        text: Raw resume text

    Returns:
        Matched categories in reporting order, without duplicates
    """
    if not text:
        return []

    area = _education_search_area(text).lower()
    return [category for category, pat in DEGREE_PATTERNS if pat.search(area)]


def classify_education(text: str) -> str:
    """Classify education level as a comma-joined category list.

    Args:
        text: Raw resume text

    Returns:
        e.g. "Bachelor's Degree, Master's Degree", or empty string
    """
    return ", ".join(c.value for c in classify_education_categories(text))
