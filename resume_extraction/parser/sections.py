"""Line-oriented section scanning shared by the education and experience extractors."""

from enum import Enum
from typing import Iterable, List, Optional, Sequence, Tuple


class ScanState(Enum):
    """Scanner position relative to the wanted section."""
    OUTSIDE = "OUTSIDE"
    INSIDE = "INSIDE"


def is_header(line: str, keywords: Iterable[str]) -> bool:
    """Check if a line introduces a section named by one of the keywords.

    The trimmed, lower-cased line must equal a keyword or start with the
    keyword followed by ':' or a space.
    """
    normalized = line.strip().lower()
    return any(
        normalized == kw
        or normalized.startswith(kw + ":")
        or normalized.startswith(kw + " ")
        for kw in keywords
    )


class SectionScanner:
    """Two-state scanner that slices one named section out of resume lines.

    OUTSIDE -> INSIDE on a start header (the header itself is excluded).
    INSIDE -> OUTSIDE on a stop header, which ends the scan. While inside,
    repeated start headers are skipped and blank lines are ignored.
    """

    def __init__(self, start_keywords: Iterable[str], stop_keywords: Iterable[str]):
        self.start_keywords: Tuple[str, ...] = tuple(start_keywords)
        self.stop_keywords: Tuple[str, ...] = tuple(stop_keywords)

    def scan(self, lines: Sequence[str]) -> Optional[str]:
        """Return the section body joined with spaces.

        Returns:
            The body text, possibly empty, or None if no start header was found
        """
        state = ScanState.OUTSIDE
        seen_header = False
        body: List[str] = []

        for line in lines:
            if is_header(line, self.start_keywords):
                state = ScanState.INSIDE
                seen_header = True
                continue

            if state is ScanState.INSIDE:
                if is_header(line, self.stop_keywords):
                    state = ScanState.OUTSIDE
                    break
                if line.strip():
                    body.append(line.strip())

        if not seen_header:
            return None
        return " ".join(body)


def find_section(
    lines: Sequence[str],
    start_keywords: Iterable[str],
    stop_keywords: Iterable[str],
) -> Optional[str]:
    """Locate a section by its header keywords and return its body text.

    Args:
        lines: Resume text split into lines
        start_keywords: Header keywords that open the section
        stop_keywords: Header keywords of sections that close it

    Returns:
        Space-joined body, or None if the section header never appears
    """
    return SectionScanner(start_keywords, stop_keywords).scan(lines)
