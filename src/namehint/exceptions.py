"""namehint custom exceptions.

Exception Design Principles:
1. The scoring, ranking and formatting core never raises for string input;
   these exceptions belong to the collaborators that gather candidates
2. Handle exceptions as late as possible (preserve details until domain context is available)
3. Split on domain of actionable information:
   - Recoverable by user reconfiguration (ConfigError)
   - Recoverable by fixing package metadata (MetadataError)
   - Recoverable by picking one of the suggested names (NoSuchNameError)
"""


class NameHintError(Exception):
    """Base exception for all namehint errors.

    Provides rich context and actionable suggestions beyond standard exceptions.
    All namehint custom exceptions inherit from this base class.
    """

    def __init__(
        self,
        message: str,  # the error message
        *,
        errors: list[str] = None,  # detailed list of errors (if available)
        suggestions: list[str] = None,  # remedial actions
        context: dict = None,  # additional detailed context
    ):
        """Initialize NameHintError.

        Args:
            message: Primary error message for users
            errors: List of specific error details
            suggestions: List of actionable suggestions for resolution
            context: Additional context information as key-value pairs
        """
        super().__init__(message)
        self.message = message
        self.errors = errors or []
        self.suggestions = suggestions or []
        self.context = context or {}


class ConfigError(NameHintError):
    """Setup errors - recoverable by user reconfiguration.

    Covers problems that prevent a candidate source from producing names:
    - Directories that do not exist or are not directories
    - Modules that cannot be imported
    - Unknown builtin type names
    """

    pass


class MetadataError(NameHintError):
    """Package metadata errors - recoverable by fixing the package metadata.

    Raised when required metadata fields (name, version) are missing or
    empty, or when the requested distribution is not installed.
    """

    pass


class NoSuchNameError(NameHintError):
    """Member, export or module not found - recoverable by choosing a suggestion.

    Carries the ranked suggestions produced by the similarity engine:
    `suggestions` holds "Try 'x' instead" hints, `context["suggestions"]`
    holds name/score pairs and `errors` holds the formatted message.
    """

    pass
