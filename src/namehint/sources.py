"""Candidate sources: where pools of valid names come from.

Each source resolves to a concrete list of names before the similarity
engine sees it. Sources enumerate names by runtime introspection or by
listing a directory; they never parse source code.
"""

import asyncio
import builtins
import importlib
import logging
import pkgutil
import sys
from collections.abc import Iterable
from pathlib import Path
from types import ModuleType
from typing import Any

from .consts import EXTENSION_MODULE_SUFFIXES, MODULE_EXTENSIONS
from .exceptions import ConfigError
from .ranking import suggest_similar_strings

logger = logging.getLogger("namehint.sources")

BUILTIN_TYPE_NAMES = (
    "bool",
    "bytearray",
    "bytes",
    "complex",
    "dict",
    "float",
    "frozenset",
    "int",
    "list",
    "memoryview",
    "object",
    "range",
    "set",
    "slice",
    "str",
    "tuple",
    "type",
)


class StaticCandidates:
    """A fixed pool of names supplied by the caller."""

    def __init__(self, names: Iterable[str], description: str = "candidates"):
        self.names = list(names)
        self.description = description

    async def get_candidates(self) -> list[str]:
        return list(self.names)


class ObjectMembers:
    """Attribute names of a live Python object, as reported by dir()."""

    def __init__(self, obj: Any, description: str | None = None):
        self.obj = obj
        if description is None:
            owner = obj if isinstance(obj, type) else type(obj)
            description = owner.__name__
        self.description = description

    @classmethod
    def for_type_name(cls, type_name: str) -> "ObjectMembers":
        """Build a source for a builtin type given by name.

        Accepts subscripted forms such as "list[int]" or "dict[str, Any]".

        Raises:
            ConfigError: If the name is not a builtin type.
        """
        base = type_name.strip().split("[", 1)[0].strip().lower()
        if base not in BUILTIN_TYPE_NAMES:
            similar = suggest_similar_strings(base, BUILTIN_TYPE_NAMES)
            raise ConfigError(
                f"Unknown builtin type '{type_name}'",
                errors=[f"'{type_name}' is not one of the supported builtin types"],
                suggestions=[f"Try '{s}' instead" for s in similar],
                context={
                    "type_name": type_name,
                    "known_types": list(BUILTIN_TYPE_NAMES),
                },
            )
        return cls(getattr(builtins, base), description=base)

    async def get_candidates(self) -> list[str]:
        return dir(self.obj)


class ModuleExports:
    """Names exported by an importable module.

    Uses `__all__` when the module defines it, otherwise the public names
    that dir() reports.
    """

    def __init__(self, module_name: str):
        self.module_name = module_name
        self.description = f"module '{module_name}'"

    async def get_candidates(self) -> list[str]:
        """Import the module and list its exports.

        Raises:
            ConfigError: If the module cannot be imported.
        """
        module = await self._import()
        exported = getattr(module, "__all__", None)
        if exported is not None:
            return [str(name) for name in exported]
        return [name for name in dir(module) if not name.startswith("_")]

    async def has_name(self, name: str) -> bool:
        """Check whether `from module import name` would succeed.

        Any module attribute counts, also names missing from `__all__`.

        Raises:
            ConfigError: If the module cannot be imported.
        """
        return hasattr(await self._import(), name)

    async def _import(self) -> ModuleType:
        # importing and scanning sys.path block, keep them off the event loop
        try:
            return await asyncio.to_thread(importlib.import_module, self.module_name)
        except ImportError as e:
            logger.warning(f"Cannot import module '{self.module_name}': {e}")
            siblings = await asyncio.to_thread(_sibling_module_names, self.module_name)
            similar = suggest_similar_strings(self.module_name, siblings)
            raise ConfigError(
                f"Cannot import module '{self.module_name}'",
                errors=[str(e)],
                suggestions=[f"Try '{s}' instead" for s in similar],
                context={"module_name": self.module_name},
            ) from e


class DirectoryModules:
    """Importable module and package names found in a directory.

    Files with a module extension contribute their stem ("helpers.py" and
    "helpers.pyi" both give "helpers"), except `__init__`; directories
    contribute their name, except hidden ones and `__pycache__`.
    """

    def __init__(self, directory: str | Path):
        self.directory = Path(directory).expanduser()
        self.description = f"directory '{self.directory}'"

    async def get_candidates(self) -> list[str]:
        """List module names in the directory.

        Raises:
            ConfigError: If the directory does not exist or is not a directory.
        """
        if not self.directory.is_dir():
            raise ConfigError(
                f"Directory not found: {self.directory}",
                errors=[f"'{self.directory}' does not exist or is not a directory"],
                suggestions=["Check the directory path and try again"],
                context={"directory": str(self.directory)},
            )
        return await asyncio.to_thread(self._list_modules)

    def _list_modules(self) -> list[str]:
        names: dict[str, None] = {}
        for entry in sorted(self.directory.iterdir()):
            if entry.is_dir():
                if entry.name.startswith(".") or entry.name == "__pycache__":
                    continue
                names[entry.name] = None
            elif entry.suffix in MODULE_EXTENSIONS:
                if entry.suffix in EXTENSION_MODULE_SUFFIXES:
                    # "name.cpython-312-x86_64-linux-gnu.so" imports as "name"
                    stem = entry.name.split(".", 1)[0]
                else:
                    stem = entry.stem
                if stem and "." not in stem and stem != "__init__":
                    names[stem] = None
        logger.debug(f"Found {len(names)} modules in {self.directory}")
        return list(names)


def _sibling_module_names(module_name: str) -> list[str]:
    """Importable modules living next to module_name.

    For a top-level name these are the standard library and installed
    top-level modules; for "pkg.mod" the submodules of "pkg".
    """
    parent, _, _ = module_name.rpartition(".")
    if not parent:
        names = set(sys.stdlib_module_names)
        names.update(info.name for info in pkgutil.iter_modules())
        return sorted(names)

    try:
        package = importlib.import_module(parent)
    except ImportError:
        return []
    paths = getattr(package, "__path__", None)
    if not paths:
        return []
    return sorted(f"{parent}.{info.name}" for info in pkgutil.iter_modules(paths))
