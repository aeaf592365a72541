"""Jaro and Jaro-Winkler string similarity.

Both metrics are symmetric, bounded in [0, 1] and reflexive
(a nonempty string compared with itself scores exactly 1).
"""

from .consts import JARO_WINKLER_PREFIX_CAP, JARO_WINKLER_SCALING
from .models import make_similarity_score


def _find_matches(
    s1: str, s2: str, match_distance: int
) -> tuple[int, list[bool], list[bool]]:
    """Mark characters of s1 and s2 that match within match_distance.

    Each character of s1, scanned left to right, takes the leftmost
    unmatched equal character of s2 inside its window.
    """
    len2 = len(s2)
    s1_matches = [False] * len(s1)
    s2_matches = [False] * len2
    matches = 0

    for i, char in enumerate(s1):
        start = max(0, i - match_distance)
        end = min(i + match_distance + 1, len2)

        for j in range(start, end):
            if s2_matches[j] or s2[j] != char:
                continue
            s1_matches[i] = True
            s2_matches[j] = True
            matches += 1
            break

    return matches, s1_matches, s2_matches


def _count_transpositions(
    s1: str, s2: str, s1_matches: list[bool], s2_matches: list[bool]
) -> int:
    """Count positions where the matched-character sequences disagree."""
    matched1 = [char for char, hit in zip(s1, s1_matches) if hit]
    matched2 = [char for char, hit in zip(s2, s2_matches) if hit]
    return sum(1 for a, b in zip(matched1, matched2) if a != b)


def jaro(s1: str, s2: str) -> float:
    """Compute the Jaro similarity of two strings.

    Args:
        s1: First string.
        s2: Second string.

    Returns:
        Similarity in [0, 1]. Equal strings score 1; an empty string
        against a different string scores 0.
    """
    if s1 == s2:
        return 1.0

    len1 = len(s1)
    len2 = len(s2)
    if len1 == 0 or len2 == 0:
        return 0.0

    match_distance = max(len1, len2) // 2 - 1
    matches, s1_matches, s2_matches = _find_matches(s1, s2, match_distance)
    if matches == 0:
        return 0.0

    transpositions = _count_transpositions(s1, s2, s1_matches, s2_matches)

    result = (
        matches / len1 + matches / len2 + (matches - transpositions / 2) / matches
    ) / 3
    return make_similarity_score(result)


def jaro_winkler(s1: str, s2: str) -> float:
    """Compute the Jaro-Winkler similarity of two strings.

    Adds a bonus of 0.1 * (1 - jaro) per shared leading character, for at
    most 4 characters. The result is never below jaro(s1, s2).

    Args:
        s1: First string.
        s2: Second string.

    Returns:
        Similarity in [0, 1].
    """
    jaro_sim = jaro(s1, s2)

    prefix = 0
    for a, b in zip(s1[:JARO_WINKLER_PREFIX_CAP], s2[:JARO_WINKLER_PREFIX_CAP]):
        if a != b:
            break
        prefix += 1

    return make_similarity_score(
        jaro_sim + prefix * JARO_WINKLER_SCALING * (1 - jaro_sim)
    )
