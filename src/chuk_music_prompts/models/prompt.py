"""
Prompt model - a saved generation prompt with its usage history.

Prompts are immutable: every update returns a new Prompt with a fresh
``updated`` timestamp.
"""

from __future__ import annotations

import uuid
from dataclasses import dataclass
from datetime import UTC, datetime
from typing import Any

from pydantic import BaseModel, Field

from chuk_music_prompts.constants import RATING_RANGE, TITLE_MAX_LENGTH, ErrorMessages
from chuk_music_prompts.errors import RatingRangeError
from chuk_music_prompts.models.genre import Genre
from chuk_music_prompts.models.language import Language
from chuk_music_prompts.models.style import StyleDescriptor
from chuk_music_prompts.prompts.validator import PromptValidator, ValidationResult
from chuk_music_prompts.scoring.quality import QualityScore, QualityScorer


def new_prompt_id() -> str:
    return f"prompt-{uuid.uuid4().hex[:12]}"


@dataclass(frozen=True)
class PromptString:
    """The rendered prompt as sent to the generator."""

    style: str
    language: str
    full_prompt: str
    character_count: int


@dataclass(frozen=True)
class OptimizedPrompt:
    """Result of descriptor-level optimization of a prompt."""

    style: str
    optimizations_applied: list[str]
    language_optimizations: list[str]
    quality_score: int


@dataclass(frozen=True)
class UsageStats:
    """Generation counters with derived rates."""

    generated_count: int
    successful_generations: int
    average_rating: float
    success_rate: float


class Prompt(BaseModel):
    """
    A generation prompt.

    Combines genre, language and style descriptor with user metadata
    and generation statistics.
    """

    id: str = Field(default_factory=new_prompt_id, min_length=1, description="Prompt id")
    title: str = Field(..., min_length=1, max_length=TITLE_MAX_LENGTH, description="Title")
    genre: Genre = Field(..., description="Selected genres")
    language: Language = Field(..., description="Lyric language")
    style: StyleDescriptor = Field(..., description="Style descriptor")
    tags: list[str] = Field(default_factory=list, description="User tags")
    description: str = Field("", description="Free-text description")
    is_public: bool = Field(False, description="Visible to other users")
    created: datetime = Field(
        default_factory=lambda: datetime.now(UTC), description="Creation timestamp"
    )
    updated: datetime = Field(
        default_factory=lambda: datetime.now(UTC), description="Last modified"
    )

    # Usage counters
    generated_count: int = Field(0, ge=0)
    successful_generations: int = Field(0, ge=0)
    total_rating: int = Field(0, ge=0)
    rating_count: int = Field(0, ge=0)

    model_config = {"frozen": True, "arbitrary_types_allowed": True}

    @classmethod
    def create(
        cls,
        title: str,
        genre: Genre,
        language: Language,
        style: StyleDescriptor,
        tags: list[str] | None = None,
        description: str = "",
        is_public: bool = False,
    ) -> Prompt:
        """
        Create a new prompt with a fresh id.

        Raises:
            pydantic.ValidationError: If the title is empty or too long
        """
        return cls(
            title=title,
            genre=genre,
            language=language,
            style=style,
            tags=list(tags or []),
            description=description,
            is_public=is_public,
        )

    def _updated(self, **changes: Any) -> Prompt:
        """Validated copy with changes applied and the timestamp bumped."""
        data = dict(self)
        data.update(changes)
        data["updated"] = datetime.now(UTC)
        return type(self)(**data)

    def with_title(self, title: str) -> Prompt:
        return self._updated(title=title)

    def with_genre(self, genre: Genre) -> Prompt:
        return self._updated(genre=genre)

    def with_language(self, language: Language) -> Prompt:
        return self._updated(language=language)

    def with_style(self, style: StyleDescriptor) -> Prompt:
        return self._updated(style=style)

    def with_tags(self, tags: list[str]) -> Prompt:
        return self._updated(tags=list(tags))

    def with_description(self, description: str) -> Prompt:
        return self._updated(description=description)

    def with_visibility(self, is_public: bool) -> Prompt:
        return self._updated(is_public=is_public)

    # ------------------------------------------------------------------
    # Usage
    # ------------------------------------------------------------------

    def record_generation(self, successful: bool, rating: int | None = None) -> Prompt:
        """
        Record one generation run.

        Args:
            successful: Whether the generation succeeded
            rating: Optional user rating (1-5)

        Returns:
            Updated prompt

        Raises:
            RatingRangeError: If the rating is outside 1-5
        """
        changes: dict[str, Any] = {
            "generated_count": self.generated_count + 1,
            "successful_generations": self.successful_generations + (1 if successful else 0),
        }
        if rating is not None:
            low, high = RATING_RANGE
            if not low <= rating <= high:
                raise RatingRangeError(
                    ErrorMessages.RATING_OUT_OF_RANGE.format(low=low, high=high, value=rating)
                )
            changes["total_rating"] = self.total_rating + rating
            changes["rating_count"] = self.rating_count + 1

        return self._updated(**changes)

    def usage_stats(self) -> UsageStats:
        """Counters plus success rate (percent) and average rating, one decimal."""
        success_rate = 0.0
        if self.generated_count:
            success_rate = self.successful_generations / self.generated_count * 100
        average_rating = 0.0
        if self.rating_count:
            average_rating = self.total_rating / self.rating_count

        return UsageStats(
            generated_count=self.generated_count,
            successful_generations=self.successful_generations,
            average_rating=round(average_rating, 1),
            success_rate=round(success_rate, 1),
        )

    # ------------------------------------------------------------------
    # Rendering and assessment
    # ------------------------------------------------------------------

    def generate_prompt_string(self) -> PromptString:
        style = self.style.value
        full_prompt = f"{style} [Language: {self.language.code}]"
        return PromptString(
            style=style,
            language=self.language.code,
            full_prompt=full_prompt,
            character_count=len(full_prompt),
        )

    def generate_optimized_prompt(self) -> OptimizedPrompt:
        """Optimize the descriptor and note the language adjustments applied."""
        applied: list[str] = []
        optimized = self.style.optimize()
        if optimized != self.style.value:
            applied.append("Fitted to the character limit")
        if self.language.code == "ja":
            applied.append("Japanese vocal optimization applied")
        if not self.language.is_high_quality():
            applied.append("Lower-quality language compensation applied")

        return OptimizedPrompt(
            style=optimized,
            optimizations_applied=applied,
            language_optimizations=list(self.language.optimization_hints),
            quality_score=self.quality_score().overall,
        )

    def quality_score(self) -> QualityScore:
        return QualityScorer().compute(
            genre=self.genre,
            style=self.style,
            language=self.language,
            title=self.title,
            description=self.description,
            tags=self.tags,
        )

    def validate_prompt(self) -> ValidationResult:
        """Check style, genre/language fit and title (see ``PromptValidator``)."""
        return PromptValidator().validate(self)

    # ------------------------------------------------------------------
    # Serialization
    # ------------------------------------------------------------------

    def to_yaml_dict(self) -> dict[str, Any]:
        """Convert to a YAML-friendly dict."""
        return {
            "schema": "prompt/v1",
            "id": self.id,
            "title": self.title,
            "genre": list(self.genre.names),
            "language": self.language.code,
            "style": self.style.value,
            "tags": list(self.tags),
            "description": self.description,
            "is_public": self.is_public,
            "created": self.created.isoformat(),
            "updated": self.updated.isoformat(),
            "usage": {
                "generated_count": self.generated_count,
                "successful_generations": self.successful_generations,
                "total_rating": self.total_rating,
                "rating_count": self.rating_count,
            },
        }

    @classmethod
    def from_yaml_dict(cls, data: dict[str, Any]) -> Prompt:
        """Create a Prompt from a YAML-parsed dict."""
        usage = data.get("usage", {})
        return cls(
            id=data["id"],
            title=data["title"],
            genre=Genre.create(data["genre"]),
            language=Language.create(data.get("language", "en")),
            style=StyleDescriptor.create(data["style"]),
            tags=data.get("tags", []),
            description=data.get("description", ""),
            is_public=data.get("is_public", False),
            created=data["created"],
            updated=data["updated"],
            generated_count=usage.get("generated_count", 0),
            successful_generations=usage.get("successful_generations", 0),
            total_rating=usage.get("total_rating", 0),
            rating_count=usage.get("rating_count", 0),
        )
