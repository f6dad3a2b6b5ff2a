"""
Token partition - assigns every token to exactly one destination.

Each token is tested once against every destination. A token accepted by
several destinations goes to the first one in claim priority and is
reported as an overlap; a token accepted by none is reported as
unclaimed. Both are diagnostics, not silent drops.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from dataclasses import dataclass, field

from acorn_tokens.constants import DiagnosticMessages
from acorn_tokens.destinations.filters import CLAIM_PRIORITY, DESTINATIONS, Destination
from acorn_tokens.models.build import BuildDiagnostic, DiagnosticCode
from acorn_tokens.models.token import Token

logger = logging.getLogger(__name__)


@dataclass
class PartitionReport:
    """Outcome of partitioning a token set."""

    assignments: dict[str, list[Token]] = field(default_factory=dict)
    matches: dict[str, list[str]] = field(default_factory=dict)
    unclaimed: list[Token] = field(default_factory=list)

    @property
    def overlaps(self) -> dict[str, list[str]]:
        """Token name to every destination that accepted it, for multiply-claimed tokens."""
        return {name: keys for name, keys in self.matches.items() if len(keys) > 1}

    @property
    def is_exact(self) -> bool:
        """Whether every token landed in exactly one destination."""
        return not self.unclaimed and not self.overlaps

    def tokens_for(self, key: str) -> list[Token]:
        """Tokens assigned to a destination, in document order."""
        return self.assignments.get(key, [])

    def owner_of(self, name: str) -> str | None:
        """Destination key a token was assigned to."""
        keys = self.matches.get(name)
        return keys[0] if keys else None

    def diagnostics(self) -> list[BuildDiagnostic]:
        """Diagnostics for unclaimed and multiply-claimed tokens."""
        found = [
            BuildDiagnostic(
                code=DiagnosticCode.UNCLAIMED,
                token=token.name,
                message=DiagnosticMessages.UNCLAIMED.format(name=token.name),
            )
            for token in self.unclaimed
        ]
        for name, keys in self.overlaps.items():
            found.append(
                BuildDiagnostic(
                    code=DiagnosticCode.OVERLAP,
                    token=name,
                    destination=keys[0],
                    message=DiagnosticMessages.OVERLAP.format(
                        name=name, destinations=", ".join(keys), winner=keys[0]
                    ),
                )
            )
        return found


def matching_destinations(
    token: Token,
    destinations: Sequence[Destination] = DESTINATIONS,
    priority: Sequence[str] = CLAIM_PRIORITY,
) -> list[str]:
    """
    Keys of every destination accepting a token, in claim priority.

    Destinations missing from the priority list rank after the listed ones,
    in their declared order.
    """
    rank = {key: i for i, key in enumerate(priority)}
    ordered = sorted(destinations, key=lambda d: rank.get(d.key, len(rank)))
    return [d.key for d in ordered if d.accepts(token)]


def partition_tokens(
    tokens: Sequence[Token],
    destinations: Sequence[Destination] = DESTINATIONS,
    priority: Sequence[str] = CLAIM_PRIORITY,
) -> PartitionReport:
    """
    Partition tokens across destinations.

    Args:
        tokens: Tokens in document order
        destinations: Destinations to fill
        priority: Destination keys, first wins on overlap

    Returns:
        Report with per-destination assignments and every token's matches
    """
    report = PartitionReport(assignments={d.key: [] for d in destinations})

    for token in tokens:
        keys = matching_destinations(token, destinations, priority)
        report.matches[token.name] = keys
        if not keys:
            report.unclaimed.append(token)
            continue
        report.assignments[keys[0]].append(token)

    if report.unclaimed:
        logger.warning("%d token(s) not claimed by any destination", len(report.unclaimed))
    for name, keys in report.overlaps.items():
        logger.warning(
            DiagnosticMessages.OVERLAP.format(
                name=name, destinations=", ".join(keys), winner=keys[0]
            )
        )

    return report
