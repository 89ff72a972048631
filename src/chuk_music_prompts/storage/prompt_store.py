"""
Prompt stores - persistence for prompts.

PromptStore is the port the optimization pipeline saves through.
Two implementations are provided:
- InMemoryPromptStore: dict keyed by id
- YamlPromptStore: one ``<id>.prompt.yaml`` file per prompt
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Protocol, runtime_checkable

import yaml

from chuk_music_prompts.models.prompt import Prompt

logger = logging.getLogger(__name__)

PROMPT_FILE_SUFFIX = ".prompt.yaml"


@runtime_checkable
class PromptStore(Protocol):
    """Anything prompts can be saved to."""

    async def save(self, prompt: Prompt) -> object: ...


class InMemoryPromptStore:
    """Keeps prompts in a dict. Useful for tests and short-lived sessions."""

    def __init__(self) -> None:
        self._prompts: dict[str, Prompt] = {}

    async def save(self, prompt: Prompt) -> Prompt:
        self._prompts[prompt.id] = prompt
        return prompt

    async def get(self, prompt_id: str) -> Prompt | None:
        return self._prompts.get(prompt_id)

    async def list_prompts(self) -> list[Prompt]:
        """All prompts, most recently updated first."""
        return sorted(self._prompts.values(), key=lambda p: p.updated, reverse=True)

    async def delete(self, prompt_id: str) -> bool:
        return self._prompts.pop(prompt_id, None) is not None

    def __len__(self) -> int:
        return len(self._prompts)


class YamlPromptStore:
    """
    Stores prompts as YAML files with an in-memory cache.

    Files that cannot be parsed are skipped when listing.
    """

    def __init__(self, prompts_dir: Path):
        """
        Initialize the store.

        Args:
            prompts_dir: Directory for prompt files
        """
        self.prompts_dir = prompts_dir
        self._cache: dict[str, Prompt] = {}

    async def save(self, prompt: Prompt) -> Path:
        """
        Save a prompt to disk.

        Args:
            prompt: The prompt to save

        Returns:
            Path to the saved file
        """
        self.prompts_dir.mkdir(parents=True, exist_ok=True)

        path = self._get_path(prompt.id)
        with open(path, "w") as f:
            yaml.safe_dump(
                prompt.to_yaml_dict(),
                f,
                default_flow_style=False,
                sort_keys=False,
                allow_unicode=True,
            )

        self._cache[prompt.id] = prompt
        logger.info(f"Saved prompt {prompt.id} to {path}")
        return path

    async def get(self, prompt_id: str) -> Prompt | None:
        """
        Get a prompt by id.

        Checks cache first, then loads from file if not cached.
        """
        if prompt_id in self._cache:
            return self._cache[prompt_id]

        path = self._get_path(prompt_id)
        if path.exists():
            return await self.load(path)

        return None

    async def load(self, path: Path) -> Prompt:
        """
        Load a prompt from a file.

        Args:
            path: Path to the prompt file

        Returns:
            The loaded Prompt

        Raises:
            ValueError: If the file does not hold a prompt mapping
        """
        with open(path) as f:
            data = yaml.safe_load(f)

        if not isinstance(data, dict):
            raise ValueError(f"Not a prompt file: {path}")

        prompt = Prompt.from_yaml_dict(data)
        self._cache[prompt.id] = prompt
        return prompt

    async def list_prompts(self) -> list[Prompt]:
        """
        List all prompts in the directory.

        Returns:
            Prompts, most recently updated first
        """
        if not self.prompts_dir.exists():
            return []

        result = []
        for path in self.prompts_dir.glob(f"*{PROMPT_FILE_SUFFIX}"):
            try:
                result.append(await self.load(path))
            except (OSError, yaml.YAMLError, KeyError, TypeError, ValueError) as e:
                logger.warning(f"Skipping prompt file {path}: {e}")

        return sorted(result, key=lambda p: p.updated, reverse=True)

    async def delete(self, prompt_id: str) -> bool:
        """
        Delete a prompt.

        Returns:
            True if deleted, False if not found
        """
        path = self._get_path(prompt_id)
        self._cache.pop(prompt_id, None)

        if path.exists():
            path.unlink()
            return True

        return False

    def _get_path(self, prompt_id: str) -> Path:
        """Get the file path for a prompt."""
        safe_id = prompt_id.replace(" ", "_").replace("/", "_")
        return self.prompts_dir / f"{safe_id}{PROMPT_FILE_SUFFIX}"
