"""Social and professional links extraction from resume text."""

import re
from dataclasses import dataclass


LINKEDIN_RE = re.compile(
    r"(?:https?://)?(?:www\.)?linkedin\.com/in/[A-Za-z0-9\-_/]+",
    re.IGNORECASE,
)
GITHUB_RE = re.compile(
    r"(?:https?://)?(?:www\.)?github\.com/[A-Za-z0-9\-_/]+",
    re.IGNORECASE,
)


@dataclass(frozen=True)
class SocialLinks:
    """Profile links extracted from resume."""
    linkedin: str = ""
    github: str = ""

    def to_dict(self) -> dict:
        return {
            "linkedin": self.linkedin,
            "github": self.github,
        }


def extract_linkedin(text: str) -> str:
    """Return the first LinkedIn profile URL as written, or empty string."""
    m = LINKEDIN_RE.search(text or "")
    return m.group(0) if m else ""


def extract_github(text: str) -> str:
    """Return the first GitHub URL as written, or empty string."""
    m = GITHUB_RE.search(text or "")
    return m.group(0) if m else ""


def extract_links(text: str) -> SocialLinks:
    """Extract LinkedIn and GitHub links from resume text.

    URLs are returned exactly as they appear; no scheme is added.

    Args:
        text: Raw resume text

    Returns:
        SocialLinks object with extracted URLs
    """
    return SocialLinks(
        linkedin=extract_linkedin(text),
        github=extract_github(text),
    )
