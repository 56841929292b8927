"""Years-of-experience estimation from resume text."""

import math
import re
import logging
from datetime import datetime
from typing import List, Optional

from .models import DateRange, MAX_EXPERIENCE_YEARS
from .sections import SectionScanner


logger = logging.getLogger(__name__)


EXPERIENCE_SECTION = SectionScanner(
    start_keywords=(
        "experience", "work experience", "employment", "work history",
        "professional experience",
    ),
    stop_keywords=("education", "academic", "skills", "projects", "certification"),
)

# Explicit statements, checked in order on lower-cased text
DIRECT_PATTERNS = [
    re.compile(r"(\d+(?:\.\d+)?)\s*\+?\s*years?\s*(?:of\s+)?experience"),
    re.compile(r"experience[:\s]+(\d+)\s*years?"),
    re.compile(r"(\d+)\s*years?\s*(?:in\s+)?(?:the\s+)?field"),
    re.compile(r"(\d+)\s*years?\s*(?:of\s+)?work"),
]

DATE_RANGE_RE = re.compile(
    r"(\d{4})\s*(?:[-–—]+|to)\s*(present|now|current|\d{4})",
    re.IGNORECASE,
)
OPEN_ENDED = ("present", "now", "current")

# Work before this year is treated as a misread number
EARLIEST_START_YEAR = 1990


def _round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def _years_from_phrases(text_lower: str) -> Optional[int]:
    """Years stated explicitly, e.g. '5+ years of experience'."""
    for pat in DIRECT_PATTERNS:
        m = pat.search(text_lower)
        if not m:
            continue
        years = float(m.group(1))
        if 0 <= years <= MAX_EXPERIENCE_YEARS:
            logger.debug(f"Experience stated directly: {m.group(0)!r}")
            return _round_half_up(years)
    return None


def _parse_date_ranges(text: str, current_year: int) -> List[DateRange]:
    """Find plausible year ranges such as '2015 - 2018' or '2019 to present'."""
    ranges: List[DateRange] = []
    for m in DATE_RANGE_RE.finditer(text):
        start = int(m.group(1))
        end_part = m.group(2).lower()
        end = current_year if end_part in OPEN_ENDED else int(end_part)

        if end < start or start < EARLIEST_START_YEAR or end > current_year + 1:
            continue
        rng = DateRange(start, end)
        if rng.years > MAX_EXPERIENCE_YEARS:
            continue
        ranges.append(rng)
    return ranges


def merge_date_ranges(ranges: List[DateRange]) -> List[DateRange]:
    """Merge overlapping or touching ranges into disjoint ones."""
    if not ranges:
        return []

    sorted_ranges = sorted(ranges, key=lambda r: r.start)
    merged = [sorted_ranges[0]]

    for rng in sorted_ranges[1:]:
        last = merged[-1]
        if rng.start <= last.end:
            merged[-1] = DateRange(last.start, max(last.end, rng.end))
        else:
            merged.append(rng)

    return merged


def _years_from_date_ranges(text: str, current_year: int) -> Optional[int]:
    """Total years covered by date ranges in the experience section."""
    section = EXPERIENCE_SECTION.scan(text.split("\n"))
    # An empty section under a real header still excludes the rest of the document
    if section is None:
        logger.debug("No experience section found, scanning whole document")
        section = text

    merged = merge_date_ranges(_parse_date_ranges(section, current_year))
    total = sum(r.years for r in merged)
    if total > 0:
        return min(total, MAX_EXPERIENCE_YEARS)
    return None


def _years_from_keywords(text_lower: str) -> Optional[int]:
    """Coarse signal for candidates without dated work history."""
    if "fresher" in text_lower or "fresh graduate" in text_lower:
        return 0
    if "student" in text_lower and "experience" not in text_lower:
        return 0
    if "internship" in text_lower or "intern" in text_lower:
        return 1
    return None


def estimate_years(text: str, current_year: Optional[int] = None) -> int:
    """Estimate total years of professional experience.

    Priority:
    1. Explicit phrases ("5+ years of experience", "experience: 3 years")
    2. Merged year ranges from the experience section, so concurrent
       roles are not double counted
    3. Keyword hints (fresher/student -> 0, intern -> 1)

    Never guesses a nonzero figure without an explicit signal.

    Args:
        text: Raw resume text
        current_year: Year that 'present'/'now'/'current' resolve to;
            defaults to the current calendar year

    Returns:
        Whole years between 0 and 50
    """
    if not text:
        return 0
    if current_year is None:
        current_year = datetime.now().year

    text_lower = text.lower()

    years = _years_from_phrases(text_lower)
    if years is None:
        years = _years_from_date_ranges(text, current_year)
    if years is None:
        years = _years_from_keywords(text_lower)

    return years if years is not None else 0
