"""Normalized edit-distance similarity between two strings."""

from rapidfuzz.distance import Levenshtein


def similarity(a: str, b: str) -> float:
    """Return a case-insensitive similarity score in [0, 1].

    1.0 means identical (ignoring case). Otherwise the Levenshtein distance
    of the lower-cased strings is normalized by the longer input length.

    Args:
        a: First string
        b: Second string

    Returns:
        Similarity score between 0.0 and 1.0
    """
    a_low, b_low = a.lower(), b.lower()
    if a_low == b_low:
        return 1.0

    max_len = max(len(a), len(b))
    if max_len == 0:
        return 1.0

    distance = Levenshtein.distance(a_low, b_low)
    return max(0.0, 1.0 - distance / max_len)


def can_reach(len_a: int, len_b: int, threshold: float) -> bool:
    """Check whether two lengths allow a similarity of at least `threshold`.

    The edit distance is never smaller than the length difference, so this
    bound lets callers skip pairs that cannot pass before computing it.
    """
    max_len = max(len_a, len_b)
    if max_len == 0:
        return True
    return 1.0 - abs(len_a - len_b) / max_len >= threshold
