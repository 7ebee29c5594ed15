import json
from pathlib import Path

import pytest

from storypush.contracts.exceptions import StoryLoadError
from storypush.stories import StoryLoader, load_stories


def _write(tmp_path: Path, payload: object) -> Path:
    path = tmp_path / "stories.json"
    path.write_text(json.dumps(payload), encoding="utf-8")
    return path


def test_load_stories_from_array(tmp_path: Path) -> None:
    path = _write(
        tmp_path,
        [
            {"title": "Login", "description": "* a", "points": 3, "epic": "Auth"},
            {"title": "Logout", "epic": "Auth"},
        ],
    )

    stories = load_stories(path)

    assert [story.title for story in stories] == ["Login", "Logout"]
    assert stories[0].points == 3
    assert stories[1].description == ""


def test_load_stories_from_wrapped_object(tmp_path: Path) -> None:
    path = _write(tmp_path, {"stories": [{"title": "Login", "epic": "Auth"}]})

    assert len(StoryLoader().load(path)) == 1


@pytest.mark.parametrize(
    ("payload", "message"),
    [
        ([], "contains no stories"),
        ({"items": []}, "must contain a JSON array"),
        (["Login"], "story #1 must be a JSON object"),
        ([{"title": "Login", "epic": "Auth"}, {"title": "", "epic": "Auth"}], "story #2 is invalid"),
        ([{"title": "Login", "epic": "Auth", "points": -2}], "story #1 is invalid"),
    ],
)
def test_load_stories_rejects_bad_payloads(tmp_path: Path, payload: object, message: str) -> None:
    with pytest.raises(StoryLoadError, match=message):
        load_stories(_write(tmp_path, payload))


def test_load_stories_missing_file(tmp_path: Path) -> None:
    with pytest.raises(StoryLoadError, match="story file not found"):
        load_stories(tmp_path / "missing.json")


def test_load_stories_directory(tmp_path: Path) -> None:
    with pytest.raises(StoryLoadError, match="not a file"):
        load_stories(tmp_path)


def test_load_stories_invalid_json(tmp_path: Path) -> None:
    path = tmp_path / "stories.json"
    path.write_text("[", encoding="utf-8")

    with pytest.raises(StoryLoadError, match="invalid JSON in story file"):
        load_stories(path)
