"""Shared test fixtures for storypush tests."""

from __future__ import annotations

import pytest

from storypush.contracts.config import PushConfig
from storypush.contracts.story import Story
from tests.fakes.config import make_config


@pytest.fixture
def config() -> PushConfig:
    return make_config()


@pytest.fixture
def sample_stories() -> list[Story]:
    return [
        Story(title="Login form", description="h3. Goal\n* email field\n* password field", points=3, epic="Auth"),
        Story(title="Cart badge", description="Show *item count*", points=2, epic="Checkout"),
        Story(title="Logout", description="", points=0, epic="Auth"),
    ]
