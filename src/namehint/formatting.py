"""Human-readable "did you mean" messages."""

from collections.abc import Mapping, Sequence
from typing import Any

from .consts import DID_YOU_MEAN_PREFIX, NO_SUGGESTIONS_MESSAGE
from .models import SuggestionWithScore


def _name_of(suggestion: SuggestionWithScore | Mapping[str, Any]) -> str:
    if isinstance(suggestion, Mapping):
        return str(suggestion["name"])
    return suggestion.name


def format_suggestion_list(
    suggestions: Sequence[SuggestionWithScore | Mapping[str, Any]],
) -> str:
    """Quote each suggested name and join them with commas."""
    return ", ".join(f"'{_name_of(s)}'" for s in suggestions)


def format_suggestion_message(
    suggestions: Sequence[SuggestionWithScore | Mapping[str, Any]],
) -> str:
    """Render ranked suggestions as a single sentence.

    Args:
        suggestions: Ranked suggestions, as SuggestionWithScore instances or
            mappings with a "name" key.

    Returns:
        "Did you mean 'a', 'b'?" or, for an empty sequence,
        "No similar suggestions found."
    """
    if not suggestions:
        return NO_SUGGESTIONS_MESSAGE
    return f"{DID_YOU_MEAN_PREFIX} {format_suggestion_list(suggestions)}?"


def format_member_message(
    member: str,
    owner: str,
    suggestions: Sequence[SuggestionWithScore | Mapping[str, Any]],
) -> str:
    """Message for an attribute that does not exist on an object or type."""
    return (
        f"Property '{member}' does not exist on '{owner}'. "
        f"{format_suggestion_message(suggestions)}"
    )


def format_import_message(
    name: str,
    module: str,
    suggestions: Sequence[SuggestionWithScore | Mapping[str, Any]],
) -> str:
    """Message for a name that a module does not export."""
    return (
        f"Module '{module}' does not export '{name}'. "
        f"{format_suggestion_message(suggestions)}"
    )


def format_module_message(
    requested_path: str,
    suggestions: Sequence[SuggestionWithScore | Mapping[str, Any]],
) -> str:
    """Message for a module path that cannot be resolved."""
    return (
        f"Cannot find module '{requested_path}'. "
        f"{format_suggestion_message(suggestions)}"
    )
