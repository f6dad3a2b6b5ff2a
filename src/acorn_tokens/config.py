"""
Build configuration.

Paths and switches for a build. Rendering tables (sections, scales,
media queries) are compiled in and not part of the configuration.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, Field

from acorn_tokens.constants import DEFAULT_PREFIX, ErrorMessages
from acorn_tokens.errors import ConfigError


class BuildConfig(BaseModel):
    """Where to read tokens from and where to write stylesheets."""

    source: Path | None = Field(None, description="Token document (.json, .yaml, .yml)")
    output_dir: Path = Field(default=Path("build"), description="Output root directory")
    prefix: str = Field(
        default=DEFAULT_PREFIX,
        description="Subdirectory of output_dir the stylesheets go into",
    )
    strict: bool = Field(
        default=False,
        description=(
            "Fail the build on unclaimed or multiply-claimed tokens; "
            "unsectioned tokens and unknown references become errors"
        ),
    )

    model_config = {"frozen": True}

    @classmethod
    def from_yaml(cls, path: Path) -> BuildConfig:
        """
        Load configuration from a YAML file.

        Relative paths are resolved against the file's directory.

        Example file:
            source: tokens/design-tokens.json
            output_dir: dist
            strict: true

        Raises:
            ConfigError: If the file is missing, unreadable or not a mapping
            ValidationError: If a field has the wrong type
        """
        if not path.exists():
            raise ConfigError(ErrorMessages.CONFIG_NOT_FOUND.format(path=path))

        try:
            with open(path, encoding="utf-8") as f:
                data: dict[str, Any] = yaml.safe_load(f) or {}
        except (OSError, yaml.YAMLError) as e:
            raise ConfigError(f"Failed to read build configuration {path}: {e}") from e

        if not isinstance(data, dict):
            raise ConfigError(ErrorMessages.INVALID_CONFIG.format(path=path))

        base = path.parent
        for key in ("source", "output_dir"):
            if data.get(key) is not None and not Path(data[key]).is_absolute():
                data[key] = base / data[key]

        return cls(**data)

    def with_overrides(self, **overrides: Any) -> BuildConfig:
        """Return a copy with the non-None overrides applied."""
        updates = {k: v for k, v in overrides.items() if v is not None}
        return self.model_validate({**self.model_dump(), **updates})
