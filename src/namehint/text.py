"""Identifier normalization and tokenization."""

import re

# Split before an uppercase letter, or on (and consuming) an underscore,
# whitespace character or ASCII digit.
_SPLIT_PATTERN = re.compile(r"(?=[A-Z])|[_\s0-9]")
_SEPARATOR_PATTERN = re.compile(r"[_\s./-]")


def normalize(text: str) -> str:
    """Lowercase a string and strip `_`, whitespace, `.`, `/` and `-`.

    Args:
        text: Any string, possibly empty.

    Returns:
        The normalized string; empty input gives an empty string.
    """
    return _SEPARATOR_PATTERN.sub("", text.lower())


def split_identifier(identifier: str) -> list[str]:
    """Split an identifier into lowercase tokens.

    Splits on camelCase boundaries, underscores, whitespace and digits.
    Every returned token is nonempty and lowercase.

    Args:
        identifier: Identifier to decompose, e.g. "getHTTPResponse2_code".

    Returns:
        List of tokens in order of appearance, e.g.
        ["get", "h", "t", "t", "p", "response", "code"]. Empty or
        separator-only input gives an empty list.
    """
    return [
        piece.lower() for piece in _SPLIT_PATTERN.split(identifier) if piece
    ]


def tokenize(identifier: str) -> list[str]:
    """Decompose an identifier into tokens (see split_identifier)."""
    return split_identifier(identifier)


def longest_common_prefix(a: str, b: str) -> int:
    """Number of leading characters shared by a and b."""
    limit = min(len(a), len(b))
    i = 0
    while i < limit and a[i] == b[i]:
        i += 1
    return i


def has_substring_match(a: str, b: str) -> bool:
    """Check whether either normalized string contains the other.

    Empty strings (after normalization) never match.
    """
    norm_a = normalize(a)
    norm_b = normalize(b)

    if not norm_a or not norm_b:
        return False

    return norm_b in norm_a or norm_a in norm_b
