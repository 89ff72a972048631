"""
Prompt persistence.
"""

from chuk_music_prompts.storage.prompt_store import (
    InMemoryPromptStore,
    PromptStore,
    YamlPromptStore,
)

__all__ = [
    "InMemoryPromptStore",
    "PromptStore",
    "YamlPromptStore",
]
