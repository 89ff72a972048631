"""
Genre value - one to five names from the supported catalogue.
"""

from __future__ import annotations

from collections.abc import Iterator, Sequence
from dataclasses import dataclass
from typing import Literal

from chuk_music_prompts.constants import MAX_GENRES, ErrorMessages
from chuk_music_prompts.errors import InvalidGenreError
from chuk_music_prompts.vocabulary import MAIN_GENRES, SUB_GENRES, SUPPORTED_GENRES

_SUPPORTED = frozenset(SUPPORTED_GENRES)


@dataclass(frozen=True)
class Genre:
    """An ordered, duplicate-free genre selection."""

    names: tuple[str, ...]

    def __post_init__(self) -> None:
        if not self.names or any(not name for name in self.names):
            raise InvalidGenreError(ErrorMessages.EMPTY_GENRE)
        if len(self.names) > MAX_GENRES:
            raise InvalidGenreError(
                ErrorMessages.TOO_MANY_GENRES.format(limit=MAX_GENRES, count=len(self.names))
            )
        seen: set[str] = set()
        for name in self.names:
            if name in seen:
                raise InvalidGenreError(ErrorMessages.DUPLICATE_GENRE.format(genre=name))
            if name not in _SUPPORTED:
                raise InvalidGenreError(ErrorMessages.UNSUPPORTED_GENRE.format(genre=name))
            seen.add(name)

    @classmethod
    def create(cls, value: str | Sequence[str]) -> Genre:
        """
        Build a genre from one name or a list of names.

        Raises:
            InvalidGenreError: Empty, more than five, duplicated or unsupported
        """
        names = (value,) if isinstance(value, str) else tuple(value)
        return cls(names)

    @property
    def primary(self) -> str:
        """First selected genre."""
        return self.names[0]

    def __len__(self) -> int:
        return len(self.names)

    def __iter__(self) -> Iterator[str]:
        return iter(self.names)

    def __str__(self) -> str:
        return ", ".join(self.names)

    def to_prompt_string(self, priority: Literal["low", "medium", "high"] | None = None) -> str:
        """Render for a prompt; high priority shouts, low priority whispers."""
        text = str(self)
        if priority == "high":
            return text.upper()
        if priority == "low":
            return text.lower()
        return text

    @staticmethod
    def is_supported(name: str) -> bool:
        """Check a single name against the catalogue."""
        return name in _SUPPORTED

    @staticmethod
    def is_valid_combination(names: Sequence[str]) -> bool:
        """Check a selection without raising."""
        if not names or len(names) > MAX_GENRES:
            return False
        if len(set(names)) != len(names):
            return False
        return all(Genre.is_supported(name) for name in names)

    @staticmethod
    def supported_genres() -> tuple[str, ...]:
        return SUPPORTED_GENRES

    @staticmethod
    def main_genres() -> tuple[str, ...]:
        return MAIN_GENRES

    @staticmethod
    def sub_genres(main_genre: str) -> tuple[str, ...]:
        """Sub-genres of a main genre (empty if unknown)."""
        return SUB_GENRES.get(main_genre, ())
