"""Spoken language extraction from resume text."""

import re
from typing import List


SPOKEN_LANGUAGES = (
    "english", "hindi", "french", "german", "spanish", "mandarin", "tamil",
    "telugu", "marathi", "kannada", "bengali", "gujarati", "punjabi", "urdu",
    "japanese", "korean", "russian", "italian", "portuguese",
)

_LANGUAGE_RES = [
    (lang, re.compile(rf"\b{lang}\b", re.IGNORECASE)) for lang in SPOKEN_LANGUAGES
]


def extract_languages(text: str) -> List[str]:
    """Extract spoken languages mentioned anywhere in the text.

    Results follow the order of SPOKEN_LANGUAGES, not the order of
    appearance, and are title-cased.
    """
    if not text:
        return []
    return [lang.capitalize() for lang, pat in _LANGUAGE_RES if pat.search(text)]
