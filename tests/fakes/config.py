"""Config builders for tests."""

from __future__ import annotations

from storypush.contracts.config import PushConfig


def make_config(*, max_concurrent: int = 1, **overrides: object) -> PushConfig:
    values: dict[str, object] = {
        "base_url": "https://example.atlassian.net",
        "email": "pm@example.com",
        "project_key": "PROJ",
        "max_concurrent": max_concurrent,
    }
    values.update(overrides)
    return PushConfig.model_validate(values)
