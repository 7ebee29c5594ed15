"""Story loading from JSON files."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

from pydantic import ValidationError

from storypush.contracts.exceptions import StoryLoadError
from storypush.contracts.story import Story


class StoryLoader:
    """Load a story list from a JSON array or an object with a ``stories`` array."""

    def load(self, path: str | Path) -> list[Story]:
        story_path = Path(path)
        payload = self._read_json(story_path)
        if isinstance(payload, dict):
            payload = payload.get("stories")
        if not isinstance(payload, list):
            raise StoryLoadError(f"story file must contain a JSON array of stories: {story_path}")
        if not payload:
            raise StoryLoadError(f"story file contains no stories: {story_path}")

        stories: list[Story] = []
        for index, raw_story in enumerate(payload):
            if not isinstance(raw_story, dict):
                raise StoryLoadError(f"story #{index + 1} must be a JSON object: {story_path}")
            try:
                stories.append(Story.model_validate(raw_story))
            except ValidationError as exc:
                raise StoryLoadError(f"story #{index + 1} is invalid: {exc}") from exc
        return stories

    def _read_json(self, path: Path) -> Any:
        if not path.exists():
            raise StoryLoadError(f"story file not found: {path}")
        if not path.is_file():
            raise StoryLoadError(f"story path is not a file: {path}")
        try:
            return json.loads(path.read_text(encoding="utf-8"))
        except OSError as exc:
            raise StoryLoadError(f"failed reading story file: {path}") from exc
        except json.JSONDecodeError as exc:
            raise StoryLoadError(f"invalid JSON in story file: {path}") from exc


def load_stories(path: str | Path) -> list[Story]:
    return StoryLoader().load(path)
