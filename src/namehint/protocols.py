"""Protocol definitions for dependency injection and interface contracts."""

from typing import Protocol


class CandidateSource(Protocol):
    """Protocol for providers of candidate name pools."""

    description: str  # what the names belong to, e.g. "module 'json'"

    async def get_candidates(self) -> list[str]:
        """Get the complete pool of valid names.

        Returns:
            Concrete list of candidate names.

        Raises:
            ConfigError: If the source cannot be read.
        """
        ...
