"""
Tests for the command line entry point.
"""

import json
from pathlib import Path

import pytest
import yaml

from acorn_tokens.cli import main


@pytest.fixture
def source_path(temp_dir: Path, sample_document) -> Path:
    """Sample token document written as YAML."""
    path = temp_dir / "design-tokens.yaml"
    path.write_text(yaml.safe_dump(sample_document))
    return path


class TestBuildCommand:
    """Tests for `acorn-tokens build`."""

    def test_build(self, source_path: Path, temp_dir: Path):
        out = temp_dir / "dist"
        assert main(["build", "--source", str(source_path), "--out", str(out)]) == 0
        written = sorted(p.name for p in (out / "acorn-tokens").iterdir())
        assert written == [
            "acorn-borders.css",
            "acorn-colors.css",
            "acorn-inputs.css",
            "acorn-shadows.css",
            "acorn-size.css",
            "acorn-space.css",
            "acorn-typography.css",
        ]

    def test_build_with_prefix(self, source_path: Path, temp_dir: Path):
        out = temp_dir / "dist"
        args = ["build", "--source", str(source_path), "--out", str(out), "--prefix", "css"]
        assert main(args) == 0
        assert (out / "css" / "acorn-colors.css").exists()

    def test_build_from_config(self, source_path: Path, temp_dir: Path):
        config = temp_dir / "acorn-tokens.yaml"
        config.write_text(yaml.safe_dump({"source": source_path.name, "output_dir": "out"}))
        assert main(["build", "--config", str(config)]) == 0
        assert (temp_dir / "out" / "acorn-tokens" / "acorn-space.css").exists()

    def test_strict_build_fails(self, source_path: Path, temp_dir: Path):
        args = ["build", "--source", str(source_path), "--out", str(temp_dir), "--strict"]
        assert main(args) == 1
        assert not (temp_dir / "acorn-tokens").exists()

    def test_missing_source(self, temp_dir: Path):
        assert main(["build", "--source", str(temp_dir / "missing.json")]) == 1

    def test_missing_config(self, temp_dir: Path):
        """A missing config file is an error, not a traceback."""
        assert main(["build", "--config", str(temp_dir / "missing.yaml")]) == 1

    def test_invalid_config(self, source_path: Path, temp_dir: Path):
        """Wrongly typed config values are an error, not a traceback."""
        config = temp_dir / "acorn-tokens.yaml"
        config.write_text(f"source: {source_path.name}\nstrict: notabool\n")
        assert main(["build", "--config", str(config)]) == 1

    def test_explain_with_missing_config(self, temp_dir: Path):
        assert main(["explain", "space-2", "--config", str(temp_dir / "missing.yaml")]) == 1

    def test_strict_error_diagnostics_fail(self, temp_dir: Path):
        """Error diagnostics fail the build and nothing is written."""
        source = temp_dir / "design-tokens.json"
        source.write_text(json.dumps({"color": {"ghost": {"value": "{color.nowhere}"}}}))
        out = temp_dir / "dist"
        args = ["build", "--source", str(source), "--out", str(out), "--strict"]
        assert main(args) == 1
        assert not out.exists()

    def test_warnings_do_not_fail(self, temp_dir: Path):
        source = temp_dir / "design-tokens.json"
        source.write_text(json.dumps({"color": {"ghost": {"value": "{color.nowhere}"}}}))
        out = temp_dir / "dist"
        assert main(["build", "--source", str(source), "--out", str(out)]) == 0
        assert (out / "acorn-tokens" / "acorn-colors.css").exists()

    def test_debug_flag(self, source_path: Path, temp_dir: Path):
        args = ["--debug", "build", "--source", str(source_path), "--out", str(temp_dir)]
        assert main(args) == 0


class TestExplainCommand:
    """Tests for `acorn-tokens explain`."""

    def test_explain(self, source_path: Path, capsys):
        assert main(["explain", "button-background-color-hover", "--source", str(source_path)]) == 0
        info = json.loads(capsys.readouterr().out)
        assert info["owner"] == "acorn-inputs.css"
        assert info["values"]["default"] == "light-dark(#e0e0e6, #52525e)"

    def test_explain_unknown(self, source_path: Path):
        assert main(["explain", "nope", "--source", str(source_path)]) == 1
