#!/usr/bin/env python3
"""
Command line entry point for building the Acorn token stylesheets.

Usage:
    acorn-tokens build --source design-tokens.json --out dist
    acorn-tokens explain button-background-color-hover --source design-tokens.json
    acorn-tokens serve --transport http --port 8000
"""

import argparse
import asyncio
import json
import logging
import sys
from pathlib import Path

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Acorn design token CSS builder")
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Enable debug logging",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    build = subparsers.add_parser("build", help="Build all stylesheets")
    build.add_argument("--source", type=Path, help="Token document (.json, .yaml)")
    build.add_argument("--out", type=Path, dest="output_dir", help="Output directory")
    build.add_argument("--config", type=Path, help="YAML build configuration")
    build.add_argument("--prefix", help="Subdirectory for the stylesheets")
    build.add_argument(
        "--strict",
        action="store_true",
        default=None,
        help="Fail on unclaimed or multiply-claimed tokens",
    )

    explain = subparsers.add_parser("explain", help="Show where a token ends up")
    explain.add_argument("name", help="Token name (e.g. color-accent-primary)")
    explain.add_argument("--source", type=Path, help="Token document (.json, .yaml)")
    explain.add_argument("--config", type=Path, help="YAML build configuration")

    serve = subparsers.add_parser("serve", help="Run the MCP server")
    serve.add_argument(
        "--transport",
        choices=["stdio", "http"],
        default="stdio",
        help="Transport mode (default: stdio)",
    )
    serve.add_argument(
        "--port",
        type=int,
        default=8000,
        help="HTTP port (only for http transport)",
    )

    return parser


def _serve(transport: str, port: int) -> int:
    """Run the MCP server on the chosen transport."""
    from acorn_tokens.async_server import mcp

    if transport == "stdio":
        logger.info("Starting Acorn Tokens MCP Server (stdio)")
        asyncio.run(mcp.run_stdio())
    else:
        logger.info(f"Starting Acorn Tokens MCP Server (http:{port})")
        asyncio.run(mcp.run_http(port=port))
    return 0


def main(argv: list[str] | None = None) -> int:
    """Main entry point."""
    args = _build_parser().parse_args(argv)

    if args.debug:
        logging.getLogger().setLevel(logging.DEBUG)

    if args.command == "serve":
        return _serve(args.transport, args.port)

    # Import after argument parsing to keep --help fast
    from acorn_tokens.compiler import TokenBuilder
    from acorn_tokens.config import BuildConfig
    from acorn_tokens.constants import ErrorMessages

    try:
        # ConfigError and pydantic's ValidationError are both ValueErrors
        config = BuildConfig.from_yaml(args.config) if args.config else BuildConfig()
        config = config.with_overrides(
            source=args.source,
            output_dir=getattr(args, "output_dir", None),
            prefix=getattr(args, "prefix", None),
            strict=getattr(args, "strict", None),
        )
        builder = TokenBuilder(config)

        if args.command == "explain":
            print(json.dumps(builder.explain(builder.load(), args.name), indent=2))
            return 0

        result = builder.build()
    except ValueError as e:
        logger.error(str(e))
        return 1

    for diagnostic in result.diagnostics:
        log = logger.error if diagnostic.severity == "error" else logger.warning
        log(f"[{diagnostic.code.value}] {diagnostic.message}")

    if result.has_errors:
        logger.error(ErrorMessages.BUILD_FAILED)
        return 1

    builder.write(result)
    return 0


if __name__ == "__main__":
    sys.exit(main())
