"""namehint Package

Ranks candidate identifier names by similarity to a misspelled identifier,
powering "did you mean" suggestions, with an MCP server that lets LLMs check
attribute, import and module names before using them.
"""

from .config import Config, get_config
from .consts import MAX_SUGGESTIONS, MIN_SIMILARITY_SCORE, PACKAGE_VERSION
from .exceptions import ConfigError, MetadataError, NameHintError, NoSuchNameError
from .formatting import format_suggestion_message
from .jaro import jaro, jaro_winkler
from .lookup import SuggestionService, get_suggestion_service
from .models import SimilarityScore, SuggestionWithScore, make_similarity_score
from .ranking import (
    find_similar_candidates,
    is_valid_candidate,
    min_score_for_input,
    suggest_similar_strings,
)
from .scoring import (
    composite_score,
    containment_score,
    jaccard_similarity,
    length_penalty,
    prefix_score,
)
from .text import longest_common_prefix, normalize, split_identifier, tokenize

__version__ = PACKAGE_VERSION

__all__ = [
    "__version__",
    "MAX_SUGGESTIONS",
    "MIN_SIMILARITY_SCORE",
    "get_config",
    "get_suggestion_service",
    "Config",
    "SuggestionService",
    "SimilarityScore",
    "SuggestionWithScore",
    "make_similarity_score",
    "normalize",
    "split_identifier",
    "tokenize",
    "longest_common_prefix",
    "jaro",
    "jaro_winkler",
    "jaccard_similarity",
    "containment_score",
    "prefix_score",
    "length_penalty",
    "composite_score",
    "find_similar_candidates",
    "min_score_for_input",
    "is_valid_candidate",
    "suggest_similar_strings",
    "format_suggestion_message",
    "NameHintError",
    "ConfigError",
    "MetadataError",
    "NoSuchNameError",
]
