"""
Genre compatibility - flags genre pairs that do not work together.

The conflict table maps a genre to the genres it clashes with. A pair is
reported once, using whichever direction's entry is found first.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from enum import Enum

logger = logging.getLogger(__name__)


class ConflictSeverity(str, Enum):
    """How badly two genres clash."""

    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"


@dataclass(frozen=True)
class GenreConflict:
    """An incompatible genre pair."""

    genre1: str
    genre2: str
    severity: ConflictSeverity
    reason: str
    suggestion: str

    def __str__(self) -> str:
        return f"{self.genre1} / {self.genre2} ({self.reason})"

    def as_warning(self) -> str:
        return f"Genre conflict: {self.genre1} and {self.genre2} ({self.reason})"


@dataclass(frozen=True)
class ConflictEntry:
    """Table entry: the genres one genre conflicts with."""

    conflicts_with: frozenset[str]
    reason: str
    suggestion: str
    severity: ConflictSeverity = ConflictSeverity.HIGH


CONFLICT_TABLE: dict[str, ConflictEntry] = {
    "Classical": ConflictEntry(
        frozenset({"Death Metal", "Hardcore", "Trap", "Dubstep"}),
        "Classical and modern heavy genres pull in opposite musical directions",
        "Consider classical crossover or symphonic metal",
    ),
    "Death Metal": ConflictEntry(
        frozenset({"Ambient", "Lullaby", "Easy Listening"}),
        "Aggressive and gentle genres are hard to combine",
        "Consider dark ambient or progressive metal",
    ),
    "Country": ConflictEntry(
        frozenset({"Techno", "Dubstep", "Hardcore Techno"}),
        "Traditional country and electronic music differ sharply in character",
        "Consider electronic country or country pop",
    ),
    "Opera": ConflictEntry(
        frozenset({"Punk", "Grunge", "Noise"}),
        "Operatic formality clashes with punk's anti-establishment edge",
        "Consider operatic metal or theatrical rock",
    ),
}


class GenreCompatibilityChecker:
    """
    Detects conflicting genre pairs.

    Also serves as the default genre-conflict detector for the
    optimization pipeline.
    """

    def __init__(self, table: Mapping[str, ConflictEntry] | None = None):
        """
        Initialize the checker.

        Args:
            table: Conflict table (defaults to CONFLICT_TABLE)
        """
        self.table = table if table is not None else CONFLICT_TABLE

    def find_conflicts(self, genres: Sequence[str]) -> list[GenreConflict]:
        """
        Check every pair in order.

        Args:
            genres: Ordered genre names

        Returns:
            One conflict per clashing pair (empty if compatible)
        """
        conflicts: list[GenreConflict] = []
        names = list(genres)

        for i, first in enumerate(names):
            for second in names[i + 1 :]:
                conflict = self._check_pair(first, second)
                if conflict:
                    conflicts.append(conflict)

        if conflicts:
            logger.debug(f"Found {len(conflicts)} genre conflicts in {names}")
        return conflicts

    async def detect_conflicts(self, genres: Sequence[str]) -> list[GenreConflict]:
        """Async form used by the optimization pipeline."""
        return self.find_conflicts(genres)

    def is_compatible(self, genres: Sequence[str]) -> bool:
        return not self.find_conflicts(genres)

    def _check_pair(self, first: str, second: str) -> GenreConflict | None:
        """Forward entry wins; the reverse entry reports the pair reversed."""
        entry = self.table.get(first)
        if entry and second in entry.conflicts_with:
            return GenreConflict(first, second, entry.severity, entry.reason, entry.suggestion)

        entry = self.table.get(second)
        if entry and first in entry.conflicts_with:
            return GenreConflict(second, first, entry.severity, entry.reason, entry.suggestion)

        return None


def detect_genre_conflicts(genres: Sequence[str]) -> list[GenreConflict]:
    """
    Convenience function to check genres against the built-in table.

    Args:
        genres: Ordered genre names

    Returns:
        List of conflicts
    """
    return GenreCompatibilityChecker().find_conflicts(genres)
