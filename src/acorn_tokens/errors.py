"""
Exceptions raised by the token build.

All of them are ValueErrors: they describe bad input, never a broken
environment.
"""

from __future__ import annotations


class TokenLoadError(ValueError):
    """The token document could not be read or has the wrong shape."""


class TokenReferenceError(ValueError):
    """A token reference could not be resolved (e.g. a reference cycle)."""


class ConfigError(ValueError):
    """The build configuration file is missing or malformed."""


class PartitionError(ValueError):
    """Strict build found tokens claimed by no destination or by several."""

    def __init__(self, message: str, problems: list[str] | None = None):
        super().__init__(message)
        self.problems = problems or []
