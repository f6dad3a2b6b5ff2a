"""
MCP tool implementations.

Tools are organized by domain:
- build - Building stylesheets and inspecting token placement
"""

from acorn_tokens.tools.build import register_build_tools

__all__ = [
    "register_build_tools",
]
