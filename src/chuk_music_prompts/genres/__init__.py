"""
Genre compatibility checks.
"""

from chuk_music_prompts.genres.compatibility import (
    ConflictSeverity,
    GenreCompatibilityChecker,
    GenreConflict,
    detect_genre_conflicts,
)

__all__ = [
    "ConflictSeverity",
    "GenreCompatibilityChecker",
    "GenreConflict",
    "detect_genre_conflicts",
]
