import math
from typing import Annotated, Any, Literal

from pydantic import AfterValidator, BaseModel, ConfigDict, Field

from .exceptions import NameHintError

# =============================================================================
# SIMILARITY VALUE TYPES
# =============================================================================


def make_similarity_score(value: float) -> float:
    """Clamp a raw score into the closed interval [0, 1].

    NaN maps to 0.0 so that every score handed out stays comparable.
    """
    if math.isnan(value) or value < 0.0:
        return 0.0
    if value > 1.0:
        return 1.0
    return float(value)


SimilarityScore = Annotated[float, AfterValidator(make_similarity_score)]


class SuggestionWithScore(BaseModel):
    """A candidate name paired with its composite similarity score."""

    model_config = ConfigDict(frozen=True)

    name: str = Field(..., description="Candidate name")
    score: SimilarityScore = Field(..., description="Similarity score in [0, 1]")


# =============================================================================
# UNIFIED RESPONSE MODEL
# =============================================================================
# Single response type for all MCP tools


class Response(BaseModel):
    """Unified response type for all MCP tools."""

    status: Literal["success", "error"] = Field(
        ..., description="Response status indicating outcome"
    )
    message: str = Field(..., description="Human-readable summary of the response")
    data: Any | None = Field(
        None,
        description="Response payload - can be dict, pydantic model, or any serializable type",
    )
    errors: list[str] = Field(
        default_factory=list, description="List of error messages"
    )
    suggestions: list[str] = Field(
        default_factory=list, description="Actionable suggestions for the user"
    )
    metadata: dict[str, Any] | None = Field(
        None, description="Additional context and domain-specific information"
    )

    @classmethod
    def from_error(cls, error: Exception) -> "Response":
        """Create Response from any Exception, with potentially helpful info for recovery.

        Args:
            error: Any Exception instance

        Returns:
            Response object with error details
        """
        if isinstance(error, NameHintError):
            # Use rich context from NameHintError
            return cls(
                status="error",
                message=error.message,
                errors=error.errors,
                suggestions=error.suggestions,
                metadata={**error.context, "exception_type": type(error).__name__},
            )
        if isinstance(error, ValueError):
            return cls(
                status="error",
                message=f"Invalid argument: {str(error)}",
                errors=[str(error)],
                suggestions=["Check the tool arguments and try again"],
                metadata={"exception_type": type(error).__name__},
            )
        # Generic exception handling
        return cls(
            status="error",
            message=f"Unexpected error: {str(error)}",
            errors=[str(error)],
            suggestions=[
                "Check server logs for detailed information",
            ],
            metadata={"exception_type": type(error).__name__},
        )


# =============================================================================
# PACKAGE METADATA
# =============================================================================


class PackageMetadata(BaseModel):
    """Essential metadata of a Python distribution."""

    model_config = ConfigDict(frozen=True)

    name: str = Field(..., min_length=1, description="Distribution name")
    version: str = Field(..., min_length=1, description="Distribution version")
    description: str | None = Field(None, description="One-line summary")
    author: str | None = Field(None, description="Author name or email")
    license: str | None = Field(None, description="License expression")
