"""
Build tools - MCP tools for building and inspecting token stylesheets.

Tools for listing destinations, building stylesheets, and explaining
where a token lands.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import TYPE_CHECKING, Any

from acorn_tokens.compiler import TokenBuilder
from acorn_tokens.models.token import Token

if TYPE_CHECKING:
    from chuk_mcp_server import ChukMCPServer

logger = logging.getLogger(__name__)


def register_build_tools(
    mcp: ChukMCPServer,
    builder: TokenBuilder,
    output_dir: Path,
) -> dict[str, Any]:
    """
    Register token build tools with the MCP server.

    Args:
        mcp: The MCP server instance
        builder: The token builder
        output_dir: Directory stylesheets are written to

    Returns:
        Dictionary of registered tool functions
    """
    tools: dict[str, Any] = {}

    def load_tokens(source: str | None) -> list[Token]:
        return builder.load(Path(source) if source else None)

    @mcp.tool  # type: ignore[arg-type]
    async def tokens_list_destinations() -> str:
        """
        List the stylesheets a build produces.

        Returns:
            JSON string with destination keys and file names

        Example:
            tokens_list_destinations()
        """
        return json.dumps(
            {
                "status": "success",
                "destinations": [
                    {
                        "key": d.key,
                        "filename": d.filename,
                        "path": d.path(builder.config.prefix),
                    }
                    for d in builder.destinations
                ],
                "count": len(builder.destinations),
            }
        )

    tools["tokens_list_destinations"] = tokens_list_destinations

    @mcp.tool  # type: ignore[arg-type]
    async def tokens_build(source: str | None = None, write: bool = True) -> str:
        """
        Build every stylesheet from a token document.

        Args:
            source: Token document path (defaults to the configured source)
            write: Whether to write the files to the output directory

        Returns:
            JSON string with built paths and diagnostic counts

        Example:
            tokens_build(source="design-tokens.json")
        """
        try:
            result = builder.build(load_tokens(source))
            # Error diagnostics (strict mode) block writing
            written = builder.write(result, output_dir) if write and not result.has_errors else []

            return json.dumps(
                {
                    "status": "success",
                    "files": list(result.files),
                    "written": [str(p) for p in written],
                    "token_count": result.token_count,
                    "diagnostic_count": len(result.diagnostics),
                    "has_errors": result.has_errors,
                    "message": f"Built {len(result.files)} stylesheet(s)",
                }
            )
        except Exception as e:
            logger.exception("Failed to build stylesheets")
            return json.dumps({"status": "error", "message": str(e)})

    tools["tokens_build"] = tokens_build

    @mcp.tool  # type: ignore[arg-type]
    async def tokens_build_file(destination: str, source: str | None = None) -> str:
        """
        Build a single stylesheet and return its CSS.

        Args:
            destination: Destination key ("colors") or file name ("acorn-colors.css")
            source: Token document path (defaults to the configured source)

        Returns:
            JSON string with the CSS text

        Example:
            tokens_build_file(destination="colors")
        """
        try:
            css = builder.build_file(load_tokens(source), destination)
            return json.dumps({"status": "success", "destination": destination, "css": css})
        except Exception as e:
            logger.exception("Failed to build stylesheet")
            return json.dumps({"status": "error", "message": str(e)})

    tools["tokens_build_file"] = tokens_build_file

    @mcp.tool  # type: ignore[arg-type]
    async def tokens_explain(name: str, source: str | None = None) -> str:
        """
        Explain which stylesheet and section a token lands in.

        Args:
            name: Token name (e.g. "button-background-color-hover")
            source: Token document path (defaults to the configured source)

        Returns:
            JSON string with destinations, section and per-axis values

        Example:
            tokens_explain(name="border-color-default")
        """
        try:
            explanation = builder.explain(load_tokens(source), name)
            return json.dumps({"status": "success", "token": explanation})
        except Exception as e:
            logger.exception("Failed to explain token")
            return json.dumps({"status": "error", "message": str(e)})

    tools["tokens_explain"] = tokens_explain

    @mcp.tool  # type: ignore[arg-type]
    async def tokens_diagnostics(source: str | None = None) -> str:
        """
        Report tokens that are unclaimed, multiply claimed or unsectioned.

        Args:
            source: Token document path (defaults to the configured source)

        Returns:
            JSON string with diagnostics

        Example:
            tokens_diagnostics()
        """
        try:
            result = builder.build(load_tokens(source))
            return json.dumps(
                {
                    "status": "success",
                    "diagnostics": [d.model_dump(mode="json") for d in result.diagnostics],
                    "count": len(result.diagnostics),
                }
            )
        except Exception as e:
            logger.exception("Failed to collect diagnostics")
            return json.dumps({"status": "error", "message": str(e)})

    tools["tokens_diagnostics"] = tokens_diagnostics

    return tools
