"""namehint MCP server implementation."""

import logging

from mcp.server.fastmcp import FastMCP

from .config import get_config, setup_logging
from .consts import SERVER_NAME
from .formatting import format_suggestion_message
from .jaro import jaro, jaro_winkler
from .lookup import get_suggestion_service
from .metadata import get_package_metadata
from .models import Response
from .scoring import (
    composite_score,
    containment_score,
    jaccard_similarity,
    length_penalty,
    prefix_score,
)
from .sources import StaticCandidates

logger = logging.getLogger("namehint.server")

mcp = FastMCP(
    name=SERVER_NAME,
    instructions="""
    namehint MCP server.

    This MCP server allows you to:
    1. Find the valid identifier you most likely meant when a name is misspelled.
    2. Check attribute, import and module names before using them in code.
    """,
    log_level=get_config().log_level,
)


@mcp.tool()
async def suggest_names(
    name: str,
    candidates: list[str],
    min_score: float | None = None,
    max_results: int | None = None,
) -> Response:
    """Rank candidate names by similarity to a possibly misspelled name.

    Args:
        name: The name as typed (e.g. 'getCouner')
        candidates: Valid names to choose from
        min_score: Minimum similarity in [0, 1]; defaults to the configured threshold
        max_results: Maximum number of suggestions; defaults to the configured limit

    Returns:
        Suggestions with scores, highest first, plus a "Did you mean" message.

    Workflow: **Start here** when you have a list of valid names
    """
    logger.info(f"Suggesting names for '{name}' among {len(candidates)} candidates")

    try:
        suggestions = get_suggestion_service().rank(
            name, candidates, min_score=min_score, max_results=max_results
        )

        return Response(
            status="success",
            message=format_suggestion_message(suggestions),
            data=[s.model_dump() for s in suggestions],
            suggestions=[f"Try '{s.name}' instead" for s in suggestions],
            metadata={"name": name, "candidate_count": len(candidates)},
        )
    except Exception as e:
        return Response.from_error(e)


@mcp.tool()
async def score_names(user_input: str, candidate: str) -> Response:
    """Explain how similar two names are.

    Args:
        user_input: The name as typed
        candidate: A valid name to compare against

    Returns:
        The composite score and every metric it is built from.
    """
    logger.info(f"Scoring '{user_input}' against '{candidate}'")

    try:
        return Response(
            status="success",
            message=f"Composite score for '{user_input}' vs '{candidate}'",
            data={
                "composite": composite_score(user_input, candidate),
                "jaro": jaro(user_input, candidate),
                "jaro_winkler": jaro_winkler(user_input, candidate),
                "jaccard": jaccard_similarity(user_input, candidate),
                "containment": containment_score(user_input, candidate),
                "prefix": prefix_score(user_input, candidate),
                "length_penalty": length_penalty(user_input, candidate),
            },
        )
    except Exception as e:
        return Response.from_error(e)


@mcp.tool()
async def check_member(type_name: str, member: str) -> Response:
    """Check that an attribute exists on a builtin type.

    Args:
        type_name: Builtin type name (e.g. 'str', 'list[int]', 'dict')
        member: Attribute name (e.g. 'appendd')

    Returns:
        Success if the attribute exists, otherwise an error with suggestions.

    Workflow: **Use before** writing `value.member` for a builtin value
    """
    logger.info(f"Checking member '{member}' on '{type_name}'")

    try:
        await get_suggestion_service().validate_member(type_name, member)
        return Response(
            status="success",
            message=f"'{type_name}' has member '{member}'",
            metadata={"type_name": type_name, "member": member, "valid": True},
        )
    except Exception as e:
        return Response.from_error(e)


@mcp.tool()
async def check_import(module_name: str, name: str) -> Response:
    """Check that a module exports a name.

    Args:
        module_name: Importable module (e.g. 'os.path', 'json')
        name: Imported name (e.g. 'joinn')

    Returns:
        Success if `from module_name import name` is valid, otherwise an
        error with suggestions.
    """
    logger.info(f"Checking import '{name}' from '{module_name}'")

    try:
        await get_suggestion_service().validate_import(module_name, name)
        return Response(
            status="success",
            message=f"Module '{module_name}' exports '{name}'",
            metadata={"module_name": module_name, "name": name, "valid": True},
        )
    except Exception as e:
        return Response.from_error(e)


@mcp.tool()
async def check_module_path(requested_path: str, directory: str) -> Response:
    """Check that a dotted module path exists below a directory.

    Args:
        requested_path: Dotted module path (e.g. 'utils.helpers')
        directory: Directory the path is relative to (e.g. a project's src/)

    Returns:
        Success if every component exists, otherwise an error with suggestions.
    """
    logger.info(f"Checking module path '{requested_path}' in '{directory}'")

    try:
        await get_suggestion_service().validate_module_path(requested_path, directory)
        return Response(
            status="success",
            message=f"Module '{requested_path}' found in '{directory}'",
            metadata={"requested_path": requested_path, "valid": True},
        )
    except Exception as e:
        return Response.from_error(e)


@mcp.tool()
async def check_name(name: str, candidates: list[str], kind: str = "name") -> Response:
    """Check that a name is one of the given valid names.

    Args:
        name: The name as typed
        candidates: Valid names
        kind: What the names are, used in messages (e.g. 'field', 'command')

    Returns:
        Success if name is valid, otherwise an error with suggestions.
    """
    logger.info(f"Checking {kind} '{name}'")

    try:
        source = StaticCandidates(candidates, description=f"{kind}s")
        await get_suggestion_service().validate_name(name, source, kind=kind)
        return Response(
            status="success",
            message=f"'{name}' is a valid {kind}",
            metadata={"name": name, "valid": True},
        )
    except Exception as e:
        return Response.from_error(e)


@mcp.tool()
async def server_info() -> Response:
    """Get the name and version of this server."""
    logger.info("Fetching server info")

    try:
        metadata = get_package_metadata()
        return Response(
            status="success",
            message=f"{metadata.name} {metadata.version}",
            data=metadata.model_dump(),
        )
    except Exception as e:
        return Response.from_error(e)


def main() -> None:
    """Run the MCP server."""
    setup_logging(get_config().log_level)
    logger.info("Starting namehint MCP server")
    mcp.run(transport="stdio")


if __name__ == "__main__":
    main()
