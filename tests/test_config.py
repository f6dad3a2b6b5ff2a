"""
Tests for BuildConfig.
"""

from pathlib import Path

import pytest
import yaml
from pydantic import ValidationError

from acorn_tokens.config import BuildConfig
from acorn_tokens.errors import ConfigError


class TestBuildConfig:
    """Tests for BuildConfig."""

    def test_defaults(self):
        config = BuildConfig()
        assert config.source is None
        assert config.output_dir == Path("build")
        assert config.prefix == "acorn-tokens"
        assert config.strict is False

    def test_frozen(self):
        config = BuildConfig()
        with pytest.raises(ValidationError):
            config.strict = True

    def test_from_yaml_resolves_relative_paths(self, temp_dir: Path):
        path = temp_dir / "acorn-tokens.yaml"
        data = {"source": "tokens/design-tokens.json", "output_dir": "dist", "strict": True}
        path.write_text(yaml.safe_dump(data))
        config = BuildConfig.from_yaml(path)
        assert config.source == temp_dir / "tokens" / "design-tokens.json"
        assert config.output_dir == temp_dir / "dist"
        assert config.strict is True

    def test_from_yaml_keeps_absolute_paths(self, temp_dir: Path):
        path = temp_dir / "acorn-tokens.yaml"
        absolute = temp_dir / "elsewhere" / "tokens.json"
        path.write_text(yaml.safe_dump({"source": str(absolute)}))
        assert BuildConfig.from_yaml(path).source == absolute

    def test_from_empty_yaml(self, temp_dir: Path):
        path = temp_dir / "acorn-tokens.yaml"
        path.write_text("")
        assert BuildConfig.from_yaml(path) == BuildConfig()

    def test_from_missing_yaml(self, temp_dir: Path):
        with pytest.raises(ConfigError, match="configuration not found"):
            BuildConfig.from_yaml(temp_dir / "missing.yaml")

    def test_from_non_mapping_yaml(self, temp_dir: Path):
        path = temp_dir / "acorn-tokens.yaml"
        path.write_text("- source\n- strict\n")
        with pytest.raises(ConfigError, match="mapping"):
            BuildConfig.from_yaml(path)

    def test_from_malformed_yaml(self, temp_dir: Path):
        path = temp_dir / "acorn-tokens.yaml"
        path.write_text("source: [unclosed\n")
        with pytest.raises(ConfigError):
            BuildConfig.from_yaml(path)

    def test_from_yaml_wrong_type(self, temp_dir: Path):
        path = temp_dir / "acorn-tokens.yaml"
        path.write_text("strict: notabool\n")
        with pytest.raises(ValidationError):
            BuildConfig.from_yaml(path)

    def test_config_errors_are_value_errors(self, temp_dir: Path):
        with pytest.raises(ValueError):
            BuildConfig.from_yaml(temp_dir / "missing.yaml")

    def test_with_overrides(self):
        config = BuildConfig(prefix="tokens").with_overrides(
            source=Path("a.json"), prefix=None, strict=True
        )
        assert config.source == Path("a.json")
        assert config.prefix == "tokens"
        assert config.strict is True
