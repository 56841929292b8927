"""Contact information extraction (name, email, phone) from resume text."""

import re
from typing import List, Optional


# Email pattern constants
_EMAIL_PATTERN = r"[a-zA-Z0-9._-]+@[a-zA-Z0-9.-]+\.[a-zA-Z]{2,6}"
_EMAIL_RE = re.compile(_EMAIL_PATTERN)

# Indian mobile numbers: 10 digits starting with 6-9, optional +91 / leading 0
INDIAN_PHONE_PATTERNS = [
    re.compile(r"\+?91[\s.\-]?[6-9]\d{9}"),
    re.compile(r"0?[6-9]\d{9}"),
    re.compile(r"\+?91\s*-?\s*[6-9]\d{4}\s*-?\s*\d{5}"),
]

# International / US numbers
INTERNATIONAL_PHONE_PATTERNS = [
    re.compile(r"\+?1?\s*\(?[0-9]{3}\)?[\s.\-]?[0-9]{3}[\s.\-]?[0-9]{4}"),
    re.compile(r"\+?[0-9]{1,4}[\s.\-]?[0-9]{1,4}[\s.\-]?[0-9]{1,4}[\s.\-]?[0-9]{1,4}"),
]

_US_COUNTRY_CODE_RE = re.compile(r"^\+?1\s*")

# Lines containing any of these cannot hold the candidate name
NAME_STOP_KEYWORDS = (
    "education", "experience", "skills", "projects", "summary", "profile",
    "contact", "address", "phone", "email", "curriculum", "vitae", "resume",
    "student", "btech", "mtech", "msc",
)

NAME_SCAN_LINES = 5


def extract_email(text: str) -> str:
    """Extract the first email address from resume text.

    Args:
        text: Raw resume text

    Returns:
        Extracted email address or empty string
    """
    m = _EMAIL_RE.search(text or "")
    return m.group(0) if m else ""


def extract_phone(text: str) -> str:
    """Extract and normalize a phone number.

    Strategy:
    - Indian mobile patterns first, normalized to a bare 10-digit number
    - Then international/US patterns, normalized to 10-15 digits
    - Only the first match of each pattern is considered

    Args:
        text: Raw resume text

    Returns:
        Digits-only phone number or empty string
    """
    if not text:
        return ""

    for pattern in INDIAN_PHONE_PATTERNS:
        m = pattern.search(text)
        if m:
            phone = _normalize_indian_phone(m.group(0))
            if phone:
                return phone

    for pattern in INTERNATIONAL_PHONE_PATTERNS:
        m = pattern.search(text)
        if m:
            phone = _normalize_international_phone(m.group(0))
            if phone:
                return phone

    return ""


def _normalize_indian_phone(num_str: str) -> str:
    """Normalize to 10 digits starting with 6-9, or empty string."""
    digits = re.sub(r"\D", "", num_str.replace("+91", ""))
    if digits.startswith("0") and len(digits) == 11:
        digits = digits[1:]
    if len(digits) == 10 and digits[0] in "6789":
        return digits
    return ""


def _normalize_international_phone(num_str: str) -> str:
    """Normalize to 10-15 digits, or empty string."""
    if num_str.startswith(("1 ", "+1")):
        num_str = _US_COUNTRY_CODE_RE.sub("", num_str)
    digits = re.sub(r"\D", "", num_str)
    if 10 <= len(digits) <= 15:
        return digits
    return ""


def extract_name(text: str) -> str:
    """Extract candidate name from resume text.

    Looks at the first few non-blank lines, stopping at the first line that
    looks like a section header or contact label. Falls back to a name
    derived from the email local-part.

    Args:
        text: Raw resume text

    Returns:
        Extracted name or empty string
    """
    for line in _name_candidate_lines(text):
        words = line.split()
        if 2 <= len(words) <= 4:
            capitalized = sum(1 for w in words if w[0].isupper())
            if capitalized >= 2:
                return line

    return _name_from_email(extract_email(text))


def _name_candidate_lines(text: str) -> List[str]:
    """First non-blank lines up to (excluding) the first header-like line."""
    lines = [ln.strip() for ln in (text or "").splitlines() if ln.strip()]
    candidates: List[str] = []
    for line in lines[:NAME_SCAN_LINES]:
        low = line.lower()
        if any(kw in low for kw in NAME_STOP_KEYWORDS):
            break
        candidates.append(line)
    return candidates


def _name_from_email(email: Optional[str]) -> str:
    """Turn 'jane.doe42@x.com' into 'Jane Doe'."""
    if not email:
        return ""
    local = email.split("@", 1)[0]
    local = re.sub(r"[0-9]+$", "", local)
    local = re.sub(r"[._-]", " ", local)
    return " ".join(w.capitalize() for w in local.split())
