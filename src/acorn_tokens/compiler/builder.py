"""
Token builder - runs the whole pipeline for every destination.

Pipeline per build:
1. Load tokens (or take them as given)
2. Collapse light/dark pairs (once, shared by all destinations)
3. Partition tokens across destinations
4. Format each destination's stylesheet
5. Optionally write the stylesheets to disk

Destinations are processed one at a time, in order.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from pathlib import Path
from typing import Any

from acorn_tokens.compiler.css import format_stylesheet
from acorn_tokens.config import BuildConfig
from acorn_tokens.constants import (
    MEDIA_QUERY_PROPERTY_MAP,
    Axis,
    DiagnosticMessages,
    DiagnosticSeverity,
    ErrorMessages,
    SuccessMessages,
)
from acorn_tokens.destinations import (
    DESTINATIONS,
    Destination,
    PartitionReport,
    get_destination,
    matching_destinations,
    partition_tokens,
)
from acorn_tokens.errors import PartitionError
from acorn_tokens.models.build import BuildDiagnostic, BuildResult, DiagnosticCode
from acorn_tokens.models.token import Token
from acorn_tokens.resolution import collapse_light_dark, resolve_token_value, rewrite_references
from acorn_tokens.sections import TOKEN_SECTIONS, SectionRule, normalize_token_name
from acorn_tokens.tokens import TokenDictionary, TokenLoader

logger = logging.getLogger(__name__)


class TokenBuilder:
    """
    Builds the topical stylesheets from a token set.

    The builder never modifies the tokens it is given: the light/dark
    collapse produces a new token view for each build.
    """

    def __init__(
        self,
        config: BuildConfig | None = None,
        destinations: Sequence[Destination] = DESTINATIONS,
        rules: Sequence[SectionRule] = TOKEN_SECTIONS,
    ):
        """
        Initialize the builder.

        Args:
            config: Build configuration (defaults to BuildConfig())
            destinations: Destinations to build, in output order
            rules: Section rules, in priority order
        """
        self.config = config or BuildConfig()
        self.destinations = list(destinations)
        self.rules = tuple(rules)
        self.loader = TokenLoader(self.config.source)

    def load(self, path: Path | None = None) -> list[Token]:
        """Load tokens from the configured (or given) source document."""
        return self.loader.load(path)

    def prepare(self, tokens: Sequence[Token]) -> tuple[list[Token], TokenDictionary]:
        """
        Collapse light/dark pairs and index the result.

        Returns:
            (collapsed tokens, dictionary over them)
        """
        collapsed = collapse_light_dark(tokens)
        return collapsed, TokenDictionary(collapsed)

    def partition(self, tokens: Sequence[Token]) -> PartitionReport:
        """
        Partition tokens across destinations.

        Raises:
            PartitionError: In strict mode, when the partition is not exact
        """
        report = partition_tokens(tokens, self.destinations)
        if self.config.strict and not report.is_exact:
            problems = [d.message for d in report.diagnostics()]
            raise PartitionError(
                ErrorMessages.PARTITION_FAILED.format(count=len(problems)),
                problems,
            )
        return report

    def build(self, tokens: Sequence[Token] | None = None) -> BuildResult:
        """
        Build every destination.

        Args:
            tokens: Tokens to build from (defaults to loading the source)

        Returns:
            BuildResult with CSS per destination path and diagnostics. In
            strict mode unsectioned tokens and unknown references are
            error diagnostics.
        """
        if tokens is None:
            tokens = self.load()

        collapsed, dictionary = self.prepare(tokens)
        report = self.partition(collapsed)

        result = BuildResult(token_count=len(collapsed))
        severity: DiagnosticSeverity = "error" if self.config.strict else "warning"
        result.diagnostics.extend(report.diagnostics())

        for destination in self.destinations:
            sheet = format_stylesheet(report.tokens_for(destination.key), dictionary, self.rules)
            path = destination.path(self.config.prefix)
            result.files[path] = sheet.css
            logger.debug(
                "Formatted %s (%d tokens)", path, len(report.tokens_for(destination.key))
            )

            for token in sheet.unsectioned:
                message = DiagnosticMessages.UNSECTIONED.format(
                    name=token.name, destination=destination.filename
                )
                logger.warning(message)
                result.diagnostics.append(
                    BuildDiagnostic(
                        code=DiagnosticCode.UNSECTIONED,
                        token=token.name,
                        severity=severity,
                        destination=destination.filename,
                        message=message,
                    )
                )

        for path in sorted(dictionary.missing_references):
            result.diagnostics.append(
                BuildDiagnostic(
                    code=DiagnosticCode.UNKNOWN_REFERENCE,
                    token=path,
                    severity=severity,
                    message=DiagnosticMessages.UNKNOWN_REFERENCE.format(path=path),
                )
            )

        logger.info(
            SuccessMessages.BUILD_COMPLETE.format(count=len(result.files), tokens=len(collapsed))
        )
        return result

    def build_file(self, tokens: Sequence[Token], destination: str | Destination) -> str:
        """
        Build a single destination's stylesheet.

        Args:
            tokens: Full token set (references may point anywhere in it)
            destination: Destination, its key or its file name

        Returns:
            Stylesheet CSS

        Raises:
            ValueError: If the destination is unknown
        """
        target = self._get_destination(destination)
        collapsed, dictionary = self.prepare(tokens)
        report = self.partition(collapsed)
        return format_stylesheet(report.tokens_for(target.key), dictionary, self.rules).css

    def write(self, result: BuildResult, output_dir: Path | None = None) -> list[Path]:
        """
        Write built stylesheets to disk.

        Args:
            result: Build result
            output_dir: Output root (defaults to the configured one)

        Returns:
            Paths written, in destination order
        """
        root = output_dir or self.config.output_dir
        written: list[Path] = []
        for relative, css in result.files.items():
            path = root / relative
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_text(css, encoding="utf-8")
            logger.info(SuccessMessages.FILE_WRITTEN.format(path=path))
            written.append(path)
        return written

    def explain(self, tokens: Sequence[Token], name: str) -> dict[str, Any]:
        """
        Explain where a token ends up and what it renders to.

        Args:
            tokens: Full token set
            name: Token name

        Returns:
            Dictionary with matching destinations, the owner, the section
            and the CSS value per axis (None when the axis does not apply)

        Raises:
            ValueError: If no token has this name
        """
        collapsed, dictionary = self.prepare(tokens)
        token = dictionary.get(name)
        if token is None:
            raise ValueError(ErrorMessages.TOKEN_NOT_FOUND.format(name=name))

        matches = matching_destinations(token, self.destinations)
        normalized = normalize_token_name(name)
        section = next((rule.label for rule in self.rules if rule.matches(normalized)), None)

        axes = [Axis.DEFAULT, *MEDIA_QUERY_PROPERTY_MAP.values()]
        values: dict[str, str | None] = {}
        for axis in axes:
            value, _surface = resolve_token_value(token, axis)
            values[axis.value] = None if value is None else rewrite_references(value, dictionary)

        owner = self._get_destination(matches[0]).filename if matches else None
        return {
            "name": name,
            "destinations": [self._get_destination(key).filename for key in matches],
            "owner": owner,
            "section": section,
            "values": values,
            "comment": token.comment,
        }

    def _get_destination(self, destination: str | Destination) -> Destination:
        """Resolve a destination argument."""
        if isinstance(destination, Destination):
            return destination
        found = next(
            (d for d in self.destinations if destination in (d.key, d.filename)),
            None,
        ) or get_destination(destination)
        if found is None:
            raise ValueError(ErrorMessages.UNKNOWN_DESTINATION.format(destination=destination))
        return found
