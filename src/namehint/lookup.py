"""Name lookup service: validate names and suggest replacements."""

import logging
from functools import cache
from pathlib import Path
from typing import Any

from .config import Config, get_config
from .exceptions import NoSuchNameError
from .formatting import (
    format_import_message,
    format_member_message,
    format_module_message,
    format_suggestion_message,
)
from .models import SuggestionWithScore
from .protocols import CandidateSource
from .ranking import find_similar_candidates, is_valid_candidate
from .sources import DirectoryModules, ModuleExports, ObjectMembers

logger = logging.getLogger("namehint.lookup")


class SuggestionService:
    """Validate names against candidate sources with similarity suggestions."""

    def __init__(self, config: Config | None = None):
        """Initialize SuggestionService.

        Args:
            config: Thresholds and limits; defaults to the cached Config.

        Raises:
            No exceptions raised during initialization.
        """
        self.config = config if config is not None else get_config()

    def rank(
        self,
        name: str,
        candidates: list[str],
        min_score: float | None = None,
        max_results: int | None = None,
    ) -> list[SuggestionWithScore]:
        """Filter and rank an already gathered candidate pool.

        Args:
            name: Name as typed by the user.
            candidates: Concrete pool of valid names.
            min_score: Overrides the configured threshold.
            max_results: Overrides the configured limit.

        Returns:
            Ranked suggestions, highest score first.
        """
        if min_score is None:
            min_score = self.config.threshold_for(name)
        if max_results is None:
            max_results = self.config.max_results

        include_private = self.config.include_private
        valid = [
            c
            for c in candidates
            if is_valid_candidate(c, name, include_private=include_private)
        ]
        return find_similar_candidates(name, valid, min_score, max_results)

    async def suggest(
        self, name: str, source: CandidateSource
    ) -> list[SuggestionWithScore]:
        """Gather candidates from a source and rank them against name.

        Raises:
            ConfigError: If the source cannot be read.
        """
        candidates = await source.get_candidates()
        suggestions = self.rank(name, candidates)
        logger.debug(
            f"{len(suggestions)} suggestions for '{name}' from {source.description}"
        )
        return suggestions

    async def validate_name(
        self, name: str, source: CandidateSource, kind: str = "name"
    ) -> None:
        """Validate that name exists in source.

        Returns:
            None: success is the absence of an exception.

        Raises:
            ConfigError: If the source cannot be read.
            NoSuchNameError: If name is not in the source.
        """
        candidates = await source.get_candidates()
        if name in candidates:
            return

        suggestions = self.rank(name, candidates)
        raise self._not_found(
            f"Unknown {kind} '{name}' in {source.description}",
            format_suggestion_message(suggestions),
            suggestions,
            {"name": name, "kind": kind, "source": source.description},
        )

    async def validate_member(self, owner: Any, member: str) -> None:
        """Validate attribute access `owner.member`.

        Args:
            owner: Live object, or the name of a builtin type ("str", "list[int]").
            member: Accessed attribute name.

        Raises:
            ConfigError: If owner is an unknown builtin type name.
            NoSuchNameError: If the attribute does not exist.
        """
        if isinstance(owner, str):
            source = ObjectMembers.for_type_name(owner)
        else:
            source = ObjectMembers(owner)

        candidates = await source.get_candidates()
        if member in candidates:
            return

        suggestions = self.rank(member, candidates)
        raise self._not_found(
            f"Unknown member '{member}' on '{source.description}'",
            format_member_message(member, source.description, suggestions),
            suggestions,
            {"name": member, "kind": "member", "owner": source.description},
        )

    async def validate_import(self, module_name: str, name: str) -> None:
        """Validate `from module_name import name`.

        Raises:
            ConfigError: If the module cannot be imported.
            NoSuchNameError: If the module does not export name.
        """
        source = ModuleExports(module_name)
        if await source.has_name(name):
            return

        suggestions = self.rank(name, await source.get_candidates())
        raise self._not_found(
            f"Unknown import '{name}' from module '{module_name}'",
            format_import_message(name, module_name, suggestions),
            suggestions,
            {"name": name, "kind": "import", "module": module_name},
        )

    async def validate_module_path(
        self, requested_path: str, directory: str | Path
    ) -> None:
        """Validate a dotted module path relative to a directory.

        Each dotted component must be a module or package inside the
        directory reached by the previous components. Suggestions replace
        the first component that cannot be found.

        Raises:
            ConfigError: If directory does not exist.
            NoSuchNameError: If a component of the path cannot be found.
        """
        parts = [p for p in requested_path.split(".") if p]
        current = Path(directory).expanduser()
        if not parts:
            raise self._not_found(
                f"Cannot find module '{requested_path}'",
                format_module_message(requested_path, []),
                [],
                {"name": requested_path, "kind": "module", "directory": str(directory)},
            )

        for index, part in enumerate(parts):
            candidates = await DirectoryModules(current).get_candidates()
            if part not in candidates:
                prefix = ".".join(parts[:index])
                ranked = self.rank(part, candidates)
                suggestions = [
                    SuggestionWithScore(
                        name=f"{prefix}.{s.name}" if prefix else s.name,
                        score=s.score,
                    )
                    for s in ranked
                ]
                raise self._module_not_found(
                    requested_path, directory, part, suggestions
                )

            current = current / part
            is_last = index == len(parts) - 1
            if not is_last and not current.is_dir():
                # a plain module has no submodules
                raise self._module_not_found(
                    requested_path, directory, parts[index + 1], []
                )

    def _module_not_found(
        self,
        requested_path: str,
        directory: str | Path,
        missing_component: str,
        suggestions: list[SuggestionWithScore],
    ) -> NoSuchNameError:
        return self._not_found(
            f"Cannot find module '{requested_path}'",
            format_module_message(requested_path, suggestions),
            suggestions,
            {
                "name": requested_path,
                "kind": "module",
                "directory": str(directory),
                "missing_component": missing_component,
            },
        )

    @staticmethod
    def _not_found(
        message: str,
        detail: str,
        suggestions: list[SuggestionWithScore],
        context: dict,
    ) -> NoSuchNameError:
        logger.info(f"{message} ({len(suggestions)} suggestions)")
        return NoSuchNameError(
            message,
            errors=[detail],
            suggestions=[f"Try '{s.name}' instead" for s in suggestions],
            context={
                **context,
                "suggestions": [s.model_dump() for s in suggestions],
            },
        )


@cache
def get_suggestion_service() -> SuggestionService:
    """Get a cached SuggestionService instance."""
    return SuggestionService(get_config())
