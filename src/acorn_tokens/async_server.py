#!/usr/bin/env python3
"""
Async Acorn Tokens MCP Server using chuk-mcp-server

This server provides MCP tools for building the Acorn design-token
stylesheets. Tokens come from a style-dictionary shaped document and
are split into seven topical CSS files.

The server provides tools for:
- Listing the stylesheets a build produces
- Building all stylesheets, or a single one
- Explaining which stylesheet and section a token lands in
- Reporting unclaimed, overlapping and unsectioned tokens
"""

import logging
from pathlib import Path

from chuk_mcp_server import ChukMCPServer

from acorn_tokens.compiler import TokenBuilder
from acorn_tokens.config import BuildConfig
from acorn_tokens.tools import register_build_tools

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)

# Create the MCP server instance
mcp = ChukMCPServer("acorn-tokens")

# Paths - use standard project structure
BASE_PATH = Path.cwd()
SOURCE_PATH = BASE_PATH / "design-tokens.json"
OUTPUT_DIR = BASE_PATH / "build"

builder = TokenBuilder(BuildConfig(source=SOURCE_PATH, output_dir=OUTPUT_DIR))

# Register all tools
build_tools = register_build_tools(mcp, builder, OUTPUT_DIR)

# Export tool functions for direct access
tokens_list_destinations = build_tools["tokens_list_destinations"]
tokens_build = build_tools["tokens_build"]
tokens_build_file = build_tools["tokens_build_file"]
tokens_explain = build_tools["tokens_explain"]
tokens_diagnostics = build_tools["tokens_diagnostics"]

logger.info("Acorn Tokens MCP Server initialized")
logger.info(f"  Source: {SOURCE_PATH}")
logger.info(f"  Output dir: {OUTPUT_DIR}")
