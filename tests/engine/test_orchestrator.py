from __future__ import annotations

import asyncio

import pytest

from storypush.contracts.config import PushConfig
from storypush.contracts.document import BulletList, Heading
from storypush.contracts.item import CreateIssueInput, EpicRef, IssueRef
from storypush.contracts.story import Story
from storypush.engine.orchestrator import TicketOrchestrator, group_by_epic
from storypush.markup.builder import NO_CONTENT_TEXT
from tests.fakes.config import make_config
from tests.fakes.progress import RecordingProgress
from tests.fakes.provider import FakeProvider


def test_group_by_epic_keeps_first_seen_order(sample_stories: list[Story]) -> None:
    groups = group_by_epic(sample_stories)

    assert list(groups) == ["Auth", "Checkout"]
    assert [story.title for story in groups["Auth"]] == ["Login form", "Logout"]


@pytest.mark.asyncio
async def test_create_all_creates_epics_then_stories(config: PushConfig, sample_stories: list[Story]) -> None:
    provider = FakeProvider()

    result = await TicketOrchestrator(provider, config).create_all(sample_stories)

    assert result.created == 3
    assert result.failed == 0
    assert result.dry_run is False
    assert provider.calls == [
        ("search_epics", "Auth"),
        ("create_epic", "Auth"),
        ("create_issue", "Login form"),
        ("create_issue", "Logout"),
        ("search_epics", "Checkout"),
        ("create_epic", "Checkout"),
        ("create_issue", "Cart badge"),
    ]
    assert [success.epic.name for success in result.successes] == ["Auth", "Auth", "Checkout"]


@pytest.mark.asyncio
async def test_create_all_builds_issue_input(config: PushConfig, sample_stories: list[Story]) -> None:
    provider = FakeProvider()

    await TicketOrchestrator(provider, config).create_all(sample_stories)

    by_title = {call.title: call for call in provider.create_issue_calls}
    login = by_title["Login form"]
    assert login.points == 3
    assert login.epic is not None and login.epic.name == "Auth"
    assert [type(block) for block in login.description.blocks] == [Heading, BulletList]
    assert by_title["Logout"].points is None
    assert by_title["Logout"].description.plain_text == NO_CONTENT_TEXT


@pytest.mark.asyncio
async def test_epic_failure_fails_every_story_in_its_group(config: PushConfig, sample_stories: list[Story]) -> None:
    provider = FakeProvider()
    provider.fail_epic_names = {"Auth"}

    result = await TicketOrchestrator(provider, config).create_all(sample_stories)

    assert result.created == 1
    assert result.successes[0].story.title == "Cart badge"
    assert [failure.story.title for failure in result.failures] == ["Login form", "Logout"]
    expected = (
        'Failed to create/find epic: Failed to create epic "Auth": Failed to create epic: 400 - issuetype: invalid'
    )
    assert [failure.error for failure in result.failures] == [expected, expected]
    assert [title for name, title in provider.calls if name == "create_issue"] == ["Cart badge"]


@pytest.mark.asyncio
async def test_story_failure_is_isolated(config: PushConfig, sample_stories: list[Story]) -> None:
    provider = FakeProvider()
    provider.fail_issue_titles = {"Login form"}

    result = await TicketOrchestrator(provider, config).create_all(sample_stories)

    assert [success.story.title for success in result.successes] == ["Logout", "Cart badge"]
    assert len(result.failures) == 1
    assert result.failures[0].error == (
        'Failed to create story "Login form": Failed to create story: 400 - summary: too long'
    )


@pytest.mark.asyncio
async def test_existing_epic_is_reused(config: PushConfig, sample_stories: list[Story]) -> None:
    provider = FakeProvider(existing_epics=[EpicRef(id="900", key="PROJ-900", name="Checkout redesign")])

    result = await TicketOrchestrator(provider, config).create_all(sample_stories)

    assert provider.create_epic_calls == ["Auth"]
    cart = next(success for success in result.successes if success.story.title == "Cart badge")
    assert cart.epic.key == "PROJ-900"


@pytest.mark.asyncio
async def test_search_failure_still_creates_epic(config: PushConfig, sample_stories: list[Story]) -> None:
    provider = FakeProvider()
    provider.fail_search = True

    result = await TicketOrchestrator(provider, config).create_all(sample_stories)

    assert result.failed == 0
    assert provider.create_epic_calls == ["Auth", "Checkout"]


@pytest.mark.asyncio
async def test_create_all_empty_input(config: PushConfig) -> None:
    provider = FakeProvider()
    progress = RecordingProgress()

    result = await TicketOrchestrator(provider, config, dry_run=True, progress=progress).create_all([])

    assert result.successes == []
    assert result.failures == []
    assert result.dry_run is True
    assert provider.calls == []
    assert progress.events == [
        ("start", "Epics:0"),
        ("start", "Stories:0"),
        ("done", "Epics"),
        ("done", "Stories"),
    ]


@pytest.mark.asyncio
async def test_results_keep_input_order_under_concurrency() -> None:
    provider = FakeProvider()
    provider.delays = {"S1": 0.03, "S2": 0.01}
    stories = [Story(title=f"S{i}", epic="E") for i in range(1, 5)]

    result = await TicketOrchestrator(provider, make_config(max_concurrent=3)).create_all(stories)

    assert [success.story.title for success in result.successes] == ["S1", "S2", "S3", "S4"]


class ConcurrencyProvider(FakeProvider):
    def __init__(self) -> None:
        super().__init__()
        self.active_creates = 0
        self.max_active_creates = 0

    async def create_issue(self, input: CreateIssueInput) -> IssueRef:
        self.active_creates += 1
        self.max_active_creates = max(self.max_active_creates, self.active_creates)
        try:
            await asyncio.sleep(0.01)
            return await super().create_issue(input)
        finally:
            self.active_creates -= 1


@pytest.mark.asyncio
async def test_create_all_respects_semaphore_limit() -> None:
    provider = ConcurrencyProvider()
    stories = [Story(title=f"S{i}", epic="E") for i in range(6)]

    result = await TicketOrchestrator(provider, make_config(max_concurrent=2)).create_all(stories)

    assert result.created == 6
    assert provider.max_active_creates == 2


@pytest.mark.asyncio
async def test_progress_counts_every_epic_and_story(config: PushConfig, sample_stories: list[Story]) -> None:
    provider = FakeProvider()
    provider.fail_epic_names = {"Checkout"}
    progress = RecordingProgress()

    await TicketOrchestrator(provider, config, progress=progress).create_all(sample_stories)

    assert progress.events[:2] == [("start", "Epics:2"), ("start", "Stories:3")]
    assert progress.events[-2:] == [("done", "Epics"), ("done", "Stories")]
    assert progress.events.count(("item", "Epics")) == 2
    assert progress.events.count(("item", "Stories")) == 3


@pytest.mark.asyncio
async def test_unexpected_story_error_is_recorded_and_earlier_groups_are_kept(
    config: PushConfig, sample_stories: list[Story]
) -> None:
    class BrokenProvider(FakeProvider):
        async def create_issue(self, input: CreateIssueInput) -> IssueRef:
            if input.title == "Cart badge":
                raise KeyError("id")
            return await super().create_issue(input)

    progress = RecordingProgress()

    result = await TicketOrchestrator(BrokenProvider(), config, progress=progress).create_all(sample_stories)

    assert [success.story.title for success in result.successes] == ["Login form", "Logout"]
    assert [failure.story.title for failure in result.failures] == ["Cart badge"]
    assert result.failures[0].error == "Failed to create story \"Cart badge\": unexpected error: KeyError('id')"
    assert progress.events[-2:] == [("done", "Epics"), ("done", "Stories")]


@pytest.mark.asyncio
async def test_unexpected_epic_error_fails_only_its_group(config: PushConfig, sample_stories: list[Story]) -> None:
    class BrokenSearchProvider(FakeProvider):
        async def search_epics(self, name: str) -> list[EpicRef]:
            if name == "Auth":
                raise TypeError("bad payload")
            return await super().search_epics(name)

    result = await TicketOrchestrator(BrokenSearchProvider(), config).create_all(sample_stories)

    assert [success.story.title for success in result.successes] == ["Cart badge"]
    assert [failure.error for failure in result.failures] == [
        "Failed to create/find epic: unexpected error: TypeError('bad payload')"
    ] * 2


@pytest.mark.asyncio
async def test_story_failure_keeps_http_status(config: PushConfig, sample_stories: list[Story]) -> None:
    provider = FakeProvider()
    provider.fail_issue_titles = {"Logout"}
    provider.fail_epic_names = {"Checkout"}

    result = await TicketOrchestrator(provider, config).create_all(sample_stories)

    assert [(failure.story.title, failure.status_code) for failure in result.failures] == [
        ("Logout", 400),
        ("Cart badge", None),
    ]


@pytest.mark.asyncio
async def test_epic_failure_logs_epic_name(
    config: PushConfig, sample_stories: list[Story], caplog: pytest.LogCaptureFixture
) -> None:
    provider = FakeProvider()
    provider.fail_epic_names = {"Checkout"}

    with caplog.at_level("WARNING", logger="storypush.engine.orchestrator"):
        await TicketOrchestrator(provider, config).create_all(sample_stories)

    assert "Skipping 1 story(s) of epic 'Checkout'" in caplog.text
