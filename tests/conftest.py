"""
Pytest configuration and shared fixtures.
"""

import tempfile
from pathlib import Path

import pytest

from chuk_music_prompts.models import Genre, Language, StyleDescriptor
from chuk_music_prompts.models.prompt import Prompt


@pytest.fixture
def temp_dir() -> Path:
    """Create a temporary directory for test outputs."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def sample_prompt() -> Prompt:
    """A well-formed English rock prompt."""
    return Prompt.create(
        title="Summer Anthem",
        genre=Genre.create("Rock"),
        language=Language.create("en"),
        style=StyleDescriptor.create("Rock, energetic, electric guitar, drums"),
        tags=["summer"],
        description="A bright tune for long drives",
    )
