"""
Tests for the Prompt model, PromptValidator and prompt stores.
"""

from pathlib import Path

import pytest
import yaml
from pydantic import ValidationError

from chuk_music_prompts.errors import RatingRangeError
from chuk_music_prompts.models import Genre, Language, StyleDescriptor
from chuk_music_prompts.models.prompt import Prompt
from chuk_music_prompts.prompts import PromptValidator, ValidationSeverity, validate_prompt
from chuk_music_prompts.storage import InMemoryPromptStore, PromptStore, YamlPromptStore


def make_prompt(
    title: str = "Night Drive",
    genres: list[str] | None = None,
    language: str = "en",
    style: str = "Rock, energetic, drums",
) -> Prompt:
    return Prompt.create(
        title=title,
        genre=Genre.create(genres or ["Rock"]),
        language=Language.create(language),
        style=StyleDescriptor.create(style),
    )


class TestPrompt:
    """Tests for the Prompt model."""

    def test_create_defaults(self, sample_prompt: Prompt):
        """New prompts get an id, timestamps and zero counters."""
        assert sample_prompt.id.startswith("prompt-")
        assert sample_prompt.generated_count == 0
        assert sample_prompt.is_public is False
        assert sample_prompt.created.tzinfo is not None

    def test_unique_ids(self):
        """Each prompt gets its own id."""
        assert make_prompt().id != make_prompt().id

    def test_title_limits(self):
        """Titles must be 1-100 characters."""
        assert len(make_prompt(title="x" * 100).title) == 100
        with pytest.raises(ValidationError):
            make_prompt(title="")
        with pytest.raises(ValidationError):
            make_prompt(title="x" * 101)

    def test_frozen(self, sample_prompt: Prompt):
        """Prompts cannot be mutated in place."""
        with pytest.raises(ValidationError):
            sample_prompt.title = "Changed"  # type: ignore[misc]

    def test_with_methods_return_copies(self, sample_prompt: Prompt):
        """Updates return new prompts and keep the id."""
        renamed = sample_prompt.with_title("Winter Anthem")
        assert renamed.title == "Winter Anthem"
        assert sample_prompt.title == "Summer Anthem"
        assert renamed.id == sample_prompt.id
        assert renamed.updated >= sample_prompt.updated

        restyled = sample_prompt.with_style(StyleDescriptor.create("Jazz, calm"))
        assert restyled.style.value == "Jazz, calm"

        public = sample_prompt.with_visibility(True)
        assert public.is_public

    def test_with_title_validates(self, sample_prompt: Prompt):
        """Updated titles are validated too."""
        with pytest.raises(ValidationError):
            sample_prompt.with_title("")

    def test_record_generation(self, sample_prompt: Prompt):
        """Counters and derived stats."""
        prompt = (
            sample_prompt.record_generation(True, 5)
            .record_generation(False)
            .record_generation(True, 4)
        )
        stats = prompt.usage_stats()
        assert stats.generated_count == 3
        assert stats.successful_generations == 2
        assert stats.success_rate == 66.7
        assert stats.average_rating == 4.5
        assert sample_prompt.generated_count == 0

    def test_rating_range(self, sample_prompt: Prompt):
        """Ratings outside 1-5 raise."""
        with pytest.raises(RatingRangeError):
            sample_prompt.record_generation(True, 0)
        with pytest.raises(RatingRangeError):
            sample_prompt.record_generation(True, 6)

    def test_usage_stats_empty(self, sample_prompt: Prompt):
        """No generations means zero rates."""
        stats = sample_prompt.usage_stats()
        assert stats.success_rate == 0
        assert stats.average_rating == 0

    def test_prompt_string(self, sample_prompt: Prompt):
        """Style followed by the language tag."""
        rendered = sample_prompt.generate_prompt_string()
        expected = "Rock, energetic, electric guitar, drums [Language: en]"
        assert rendered.full_prompt == expected
        assert rendered.character_count == len(expected)
        assert rendered.language == "en"

    def test_optimized_prompt(self, sample_prompt: Prompt):
        """English prompts need no language adjustments."""
        optimized = sample_prompt.generate_optimized_prompt()
        assert optimized.style == sample_prompt.style.value
        assert optimized.optimizations_applied == []
        assert optimized.language_optimizations == list(sample_prompt.language.optimization_hints)
        assert optimized.quality_score == sample_prompt.quality_score().overall

    def test_optimized_prompt_language_notes(self):
        """Japanese and lower-tier languages add notes."""
        ja = make_prompt(genres=["J-Pop"], language="ja").generate_optimized_prompt()
        assert "Japanese vocal optimization applied" in ja.optimizations_applied

        tl = make_prompt(language="tl").generate_optimized_prompt()
        assert "Lower-quality language compensation applied" in tl.optimizations_applied

    def test_quality_score(self, sample_prompt: Prompt):
        """A complete prompt scores 100."""
        assert sample_prompt.quality_score().overall == 100

    def test_yaml_roundtrip(self, sample_prompt: Prompt):
        """YAML dict survives a dump and load."""
        prompt = sample_prompt.record_generation(True, 3)
        data = yaml.safe_load(yaml.safe_dump(prompt.to_yaml_dict()))
        loaded = Prompt.from_yaml_dict(data)

        assert loaded.id == prompt.id
        assert loaded.genre == prompt.genre
        assert loaded.style == prompt.style
        assert loaded.created == prompt.created
        assert loaded.usage_stats() == prompt.usage_stats()


class TestPromptValidator:
    """Tests for PromptValidator."""

    def test_valid_prompt(self, sample_prompt: Prompt):
        """A complete prompt has no issues."""
        result = PromptValidator().validate(sample_prompt)
        assert result.is_valid
        assert result.issues == []
        assert str(result) == "No issues"

    def test_style_issues_are_errors(self):
        """Style validation issues fail validation."""
        result = validate_prompt(make_prompt(style="calm"))
        assert not result.is_valid
        assert not result
        assert all(e.severity == ValidationSeverity.ERROR for e in result.errors)
        assert len(result.errors) == 2

    def test_japanese_without_j_genre(self):
        """Japanese lyrics with a non-J genre is a warning."""
        result = validate_prompt(make_prompt(language="ja"))
        assert result.is_valid
        assert [w.code for w in result.warnings] == ["LANGUAGE_GENRE_MISMATCH"]

        result = validate_prompt(make_prompt(genres=["J-Rock"], language="ja"))
        assert result.warnings == []

    def test_short_title(self):
        """Short titles are a warning."""
        result = make_prompt(title="Hi").validate_prompt()
        assert result.is_valid
        assert [w.code for w in result.warnings] == ["SHORT_TITLE"]
        assert result.summary() == "0 error(s), 1 warning(s)"
        lines = str(result).splitlines()
        assert lines[1] == "title: Use a more specific title (SHORT_TITLE, warning)"
        assert result.warnings[0].target == "title"


class TestInMemoryPromptStore:
    """Tests for InMemoryPromptStore."""

    @pytest.mark.asyncio
    async def test_save_get_delete(self, sample_prompt: Prompt):
        """Basic lifecycle."""
        store = InMemoryPromptStore()
        assert isinstance(store, PromptStore)

        await store.save(sample_prompt)
        assert len(store) == 1
        assert await store.get(sample_prompt.id) == sample_prompt
        assert await store.list_prompts() == [sample_prompt]

        assert await store.delete(sample_prompt.id) is True
        assert await store.delete(sample_prompt.id) is False
        assert await store.get(sample_prompt.id) is None


class TestYamlPromptStore:
    """Tests for YamlPromptStore."""

    @pytest.mark.asyncio
    async def test_save_and_load(self, temp_dir: Path, sample_prompt: Prompt):
        """Saved prompts load in a fresh store."""
        store = YamlPromptStore(temp_dir / "prompts")
        path = await store.save(sample_prompt)
        assert path.exists()
        assert path.name == f"{sample_prompt.id}.prompt.yaml"

        fresh = YamlPromptStore(temp_dir / "prompts")
        loaded = await fresh.get(sample_prompt.id)
        assert loaded is not None
        assert loaded.title == sample_prompt.title
        assert loaded.style == sample_prompt.style

    @pytest.mark.asyncio
    async def test_list_skips_broken_files(self, temp_dir: Path, sample_prompt: Prompt):
        """Unparseable files are skipped."""
        store = YamlPromptStore(temp_dir)
        await store.save(sample_prompt)
        (temp_dir / "broken.prompt.yaml").write_text("title: [unclosed")
        (temp_dir / "empty.prompt.yaml").write_text("")

        prompts = await store.list_prompts()
        assert [p.id for p in prompts] == [sample_prompt.id]

    @pytest.mark.asyncio
    async def test_list_missing_dir(self, temp_dir: Path):
        """A missing directory lists nothing."""
        store = YamlPromptStore(temp_dir / "missing")
        assert await store.list_prompts() == []
        assert await store.get("prompt-unknown") is None

    @pytest.mark.asyncio
    async def test_delete(self, temp_dir: Path, sample_prompt: Prompt):
        """Delete removes the file."""
        store = YamlPromptStore(temp_dir)
        path = await store.save(sample_prompt)
        assert await store.delete(sample_prompt.id) is True
        assert not path.exists()
        assert await store.delete(sample_prompt.id) is False
