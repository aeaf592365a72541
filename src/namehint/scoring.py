"""Composite similarity scoring for identifier names.

The composite score blends five signals:

    0.5 * jaro_winkler      character-level similarity
  + 0.3 * jaccard           overlap of camelCase/snake_case tokens
  + 0.1 * containment       one normalized name contains the other
  + 0.1 * prefix            shared normalized prefix, up to 4 characters
  - length_penalty          0.01 per extra candidate character, at most 0.15

and clamps the result into [0, 1].
"""

from .consts import (
    MAX_LENGTH_PENALTY,
    MAX_PREFIX_BONUS,
    PENALTY_PER_CHAR,
    WEIGHT_CONTAINMENT,
    WEIGHT_JACCARD,
    WEIGHT_JARO_WINKLER,
    WEIGHT_PREFIX,
)
from .jaro import jaro_winkler
from .models import make_similarity_score
from .text import (
    has_substring_match,
    longest_common_prefix,
    normalize,
    split_identifier,
)


def jaccard_similarity(s1: str, s2: str) -> float:
    """Jaccard index of the token sets of two identifiers.

    Returns 0.0 when either identifier has no tokens.
    """
    tokens1 = set(split_identifier(s1))
    tokens2 = set(split_identifier(s2))

    if not tokens1 or not tokens2:
        return 0.0

    intersection = len(tokens1 & tokens2)
    union = len(tokens1) + len(tokens2) - intersection
    return make_similarity_score(intersection / union)


def containment_score(s1: str, s2: str) -> float:
    """1.0 if either normalized string contains the other, else 0.0."""
    return 1.0 if has_substring_match(s1, s2) else 0.0


def prefix_score(s1: str, s2: str) -> float:
    """Shared normalized prefix length, capped at 4, scaled to [0, 1]."""
    common = longest_common_prefix(normalize(s1), normalize(s2))
    return min(MAX_PREFIX_BONUS, common) / MAX_PREFIX_BONUS


def length_penalty(user_input: str, candidate: str) -> float:
    """Penalty for candidates longer than the user input.

    Shorter candidates are never penalized.
    """
    length_diff = max(0, len(candidate) - len(user_input))
    return min(MAX_LENGTH_PENALTY, length_diff * PENALTY_PER_CHAR)


def composite_score(user_input: str, candidate: str) -> float:
    """Score how likely `candidate` is the name `user_input` meant.

    Args:
        user_input: Name as typed by the user (possibly misspelled).
        candidate: A valid name from the candidate pool.

    Returns:
        Score in [0, 1]; higher is more similar. Defined for every pair of
        strings, including empty and non-ASCII ones.
    """
    raw = (
        WEIGHT_JARO_WINKLER * jaro_winkler(user_input, candidate)
        + WEIGHT_JACCARD * jaccard_similarity(user_input, candidate)
        + WEIGHT_CONTAINMENT * containment_score(user_input, candidate)
        + WEIGHT_PREFIX * prefix_score(user_input, candidate)
        - length_penalty(user_input, candidate)
    )
    return make_similarity_score(raw)
