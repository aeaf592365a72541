"""Package metadata extraction."""

import logging
from collections.abc import Mapping
from importlib import metadata as importlib_metadata
from typing import Any

from .exceptions import MetadataError
from .models import PackageMetadata

logger = logging.getLogger("namehint.metadata")

REQUIRED_FIELDS = ("name", "version")
OPTIONAL_FIELDS = ("description", "author", "license")


def extract_package_metadata(data: Mapping[str, Any]) -> PackageMetadata:
    """Extract essential metadata from raw package metadata.

    Args:
        data: Mapping with at least "name" and "version", e.g. the
            [project] table of a pyproject.toml.

    Returns:
        PackageMetadata with the required and any optional fields.

    Raises:
        MetadataError: If a required field is missing or empty.
    """
    missing = [
        field
        for field in REQUIRED_FIELDS
        if not isinstance(data.get(field), str) or not data[field].strip()
    ]
    if missing:
        raise MetadataError(
            "Failed to extract package metadata",
            errors=[f"missing or empty {field} field" for field in missing],
            suggestions=[f"Add a non-empty '{field}' entry" for field in missing],
            context={"missing_fields": missing},
        )

    optional = {
        field: str(data[field]) for field in OPTIONAL_FIELDS if data.get(field)
    }
    return PackageMetadata(name=data["name"], version=data["version"], **optional)


def get_package_metadata(distribution: str = "namehint") -> PackageMetadata:
    """Read the metadata of an installed distribution.

    Raises:
        MetadataError: If the distribution is not installed or its metadata
            lacks a name or version.
    """
    try:
        raw = importlib_metadata.metadata(distribution)
    except importlib_metadata.PackageNotFoundError as e:
        logger.warning(f"Distribution '{distribution}' is not installed")
        raise MetadataError(
            f"Distribution '{distribution}' is not installed",
            errors=[str(e)],
            suggestions=["Install the package, e.g. with `pip install -e .`"],
            context={"distribution": distribution},
        ) from e

    return extract_package_metadata(
        {
            "name": raw.get("Name"),
            "version": raw.get("Version"),
            "description": raw.get("Summary"),
            "author": raw.get("Author") or raw.get("Author-email"),
            "license": raw.get("License-Expression") or raw.get("License"),
        }
    )
