"""Ranking of candidate names by composite similarity."""

import logging
from collections.abc import Iterable

from .consts import (
    LONG_INPUT_LENGTH,
    LONG_INPUT_MIN_SCORE,
    MAX_SUGGESTIONS,
    MIN_SIMILARITY_SCORE,
)
from .models import SuggestionWithScore
from .scoring import composite_score

logger = logging.getLogger("namehint.ranking")


def calculate_min_score(input_length: int) -> float:
    """Minimum score for an input of the given length.

    Longer inputs tolerate more absolute character difference, so inputs of
    LONG_INPUT_LENGTH characters or more get the lower threshold.
    """
    if input_length >= LONG_INPUT_LENGTH:
        return LONG_INPUT_MIN_SCORE
    return MIN_SIMILARITY_SCORE


def min_score_for_input(user_input: str) -> float:
    """Minimum score for a user input (see calculate_min_score)."""
    return calculate_min_score(len(user_input))


def is_valid_candidate(
    candidate: str, target: str | None = None, include_private: bool = False
) -> bool:
    """Check whether a name may be offered as a suggestion.

    Args:
        candidate: Name from the candidate pool.
        target: Name the user typed; an exact match is not a suggestion.
        include_private: Allow names starting with an underscore.

    Returns:
        False for empty names, private names (unless allowed) and the
        target itself; True otherwise.
    """
    if not candidate:
        return False
    if candidate.startswith("_") and not include_private:
        return False
    if target is not None and candidate == target:
        return False
    return True


def find_similar_candidates(
    user_input: str,
    candidates: Iterable[str],
    min_score: float | None = None,
    max_results: int = MAX_SUGGESTIONS,
) -> list[SuggestionWithScore]:
    """Rank candidates by similarity to the user input.

    Args:
        user_input: Name as typed by the user.
        candidates: Pool of valid names. Duplicates are scored (and may be
            returned) once per occurrence.
        min_score: Minimum composite score; None means MIN_SIMILARITY_SCORE.
        max_results: Maximum number of suggestions to return.

    Returns:
        Up to max_results suggestions, highest score first. Candidates with
        exactly equal scores keep their order from `candidates`.
    """
    threshold = MIN_SIMILARITY_SCORE if min_score is None else min_score

    scored = [
        SuggestionWithScore(name=name, score=composite_score(user_input, name))
        for name in candidates
    ]
    filtered = [s for s in scored if s.score >= threshold]

    # sorted() is stable, also with reverse=True
    ranked = sorted(filtered, key=lambda s: s.score, reverse=True)

    logger.debug(
        f"Ranked {len(scored)} candidates for '{user_input}': "
        f"{len(filtered)} above {threshold}"
    )
    return ranked[: max(0, max_results)]


def suggest_similar_strings(
    target: str,
    candidates: Iterable[str],
    threshold: float | None = None,
    max_results: int = MAX_SUGGESTIONS,
) -> list[str]:
    """Suggest similar names, without scores.

    Args:
        target: String to match against.
        candidates: Set or list of candidate strings.
        threshold: Minimum similarity; None uses the input-length dependent
            default from min_score_for_input.
        max_results: Maximum number of suggestions to return.

    Returns:
        List of similar strings, sorted by similarity (highest first).
    """
    if threshold is None:
        threshold = min_score_for_input(target)
    return [
        s.name
        for s in find_similar_candidates(target, candidates, threshold, max_results)
    ]
