"""Configuration management."""

import logging
from functools import cache

from pydantic import ConfigDict, Field
from pydantic_settings import BaseSettings

from .consts import (
    LOGGER_NAME,
    LONG_INPUT_LENGTH,
    LONG_INPUT_MIN_SCORE,
    MAX_SUGGESTIONS,
    MIN_SIMILARITY_SCORE,
)


class Config(BaseSettings):
    """Configuration for suggestion lookups and the MCP server."""

    model_config = ConfigDict(
        env_prefix="NAMEHINT_", case_sensitive=False, extra="ignore"
    )
    log_level: str = Field(
        default="INFO",
        pattern=r"^(DEBUG|INFO|WARNING|ERROR)$",
        description="Logging level",
    )
    min_score: float = Field(
        default=MIN_SIMILARITY_SCORE,
        ge=0.0,
        le=1.0,
        description="Minimum composite score for a suggestion",
    )
    long_input_min_score: float = Field(
        default=LONG_INPUT_MIN_SCORE,
        ge=0.0,
        le=1.0,
        description="Minimum composite score for long inputs",
    )
    long_input_length: int = Field(
        default=LONG_INPUT_LENGTH,
        gt=0,
        description="Input length from which long_input_min_score applies",
    )
    adaptive_threshold: bool = Field(
        default=True,
        description="Lower the threshold for long inputs",
    )
    max_results: int = Field(
        default=MAX_SUGGESTIONS, ge=1, le=50, description="Maximum suggestions"
    )
    include_private: bool = Field(
        default=False,
        description="Offer names starting with an underscore as suggestions",
    )

    def threshold_for(self, user_input: str) -> float:
        """Effective minimum score for a given user input."""
        if self.adaptive_threshold and len(user_input) >= self.long_input_length:
            return self.long_input_min_score
        return self.min_score


@cache
def get_config() -> Config:
    """Get a cached Config instance."""
    return Config()


def setup_logging(log_level: str = "INFO") -> logging.Logger:
    """Configure logging for the entire application"""
    numeric_level = getattr(logging, log_level.upper(), logging.INFO)
    logging.basicConfig(
        level=numeric_level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        force=True,  # Override any existing configuration
    )
    return logging.getLogger(LOGGER_NAME)
