"""Batch ticket orchestration."""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Sequence

from storypush.contracts.config import PushConfig
from storypush.contracts.exceptions import EpicResolutionError, IssueCreationError, ProviderError
from storypush.contracts.item import CreateIssueInput, EpicRef
from storypush.contracts.provider import Provider
from storypush.contracts.result import BatchResult, TicketFailure, TicketResult, TicketSuccess
from storypush.contracts.story import Story
from storypush.engine.epics import EpicResolver
from storypush.engine.progress import NullPushProgress, PushProgress
from storypush.markup.builder import build_document

_LOG = logging.getLogger(__name__)


def group_by_epic(stories: Sequence[Story]) -> dict[str, list[Story]]:
    """Group stories by epic name, keeping first-seen group and input order."""
    groups: dict[str, list[Story]] = {}
    for story in stories:
        groups.setdefault(story.epic, []).append(story)
    return groups


class TicketOrchestrator:
    """Create one epic per distinct epic name and one issue per story.

    Each group's epic is resolved exactly once, before any of its stories is
    submitted. A failed epic fails its whole group; a failed story fails only
    itself. Errors raised while creating tickets never escape
    :meth:`create_all`; they are recorded as failures so the report still
    lists every issue that was created.
    """

    def __init__(
        self,
        provider: Provider,
        config: PushConfig,
        *,
        resolver: EpicResolver | None = None,
        dry_run: bool = False,
        progress: PushProgress | None = None,
    ) -> None:
        self._provider = provider
        self._config = config
        self._resolver = resolver or EpicResolver(provider)
        self._dry_run = dry_run
        self._semaphore = asyncio.Semaphore(config.max_concurrent)
        self._progress: PushProgress = progress or NullPushProgress()

    async def create_all(self, stories: Sequence[Story]) -> BatchResult:
        result = BatchResult(dry_run=self._dry_run)
        groups = group_by_epic(stories)

        self._progress.phase_start("Epics", total=len(groups))
        self._progress.phase_start("Stories", total=len(stories))
        try:
            for epic_name, group in groups.items():
                for outcome in await self._push_group(epic_name, group):
                    if isinstance(outcome, TicketSuccess):
                        result.successes.append(outcome)
                    else:
                        result.failures.append(outcome)
            self._progress.phase_done("Epics")
            self._progress.phase_done("Stories")
        except BaseException as exc:
            self._progress.phase_error("Epics", exc)
            self._progress.phase_error("Stories", exc)
            raise

        _LOG.debug("Pushed %d story(s): %d created, %d failed", len(stories), result.created, result.failed)
        return result

    async def _push_group(self, epic_name: str, stories: list[Story]) -> list[TicketResult]:
        try:
            epic = await self._resolver.resolve(epic_name)
        except EpicResolutionError as exc:
            _LOG.warning("Skipping %d story(s) of epic %r: %s", len(stories), exc.epic_name, exc)
            return self._fail_group(stories, f"Failed to create/find epic: {exc}")
        except Exception as exc:
            _LOG.exception("Unexpected error resolving epic %r", epic_name)
            return self._fail_group(stories, f"Failed to create/find epic: unexpected error: {exc!r}")
        self._progress.item_done("Epics")

        outcomes: list[TicketResult | None] = [None] * len(stories)
        async with asyncio.TaskGroup() as tg:
            for index, story in enumerate(stories):
                tg.create_task(self._push_story(index, story, epic, outcomes))
        return [outcome for outcome in outcomes if outcome is not None]

    def _fail_group(self, stories: list[Story], message: str) -> list[TicketResult]:
        self._progress.item_done("Epics")
        for _ in stories:
            self._progress.item_done("Stories")
        return [TicketFailure(story=story, error=message) for story in stories]

    async def _push_story(
        self,
        index: int,
        story: Story,
        epic: EpicRef,
        outcomes: list[TicketResult | None],
    ) -> None:
        create_input = CreateIssueInput(
            title=story.title,
            description=build_document(story.description),
            points=story.points if story.points > 0 else None,
            epic=epic,
        )
        try:
            async with self._semaphore:
                issue = await self._provider.create_issue(create_input)
        except ProviderError as exc:
            message = f'Failed to create story "{story.title}": {exc}'
            _LOG.warning(message)
            status_code = exc.status_code if isinstance(exc, IssueCreationError) else None
            outcomes[index] = TicketFailure(story=story, error=message, status_code=status_code)
        except Exception as exc:
            message = f'Failed to create story "{story.title}": unexpected error: {exc!r}'
            _LOG.exception(message)
            outcomes[index] = TicketFailure(story=story, error=message)
        else:
            _LOG.debug("Created %s for %r under %s", issue.key, story.title, epic.key)
            outcomes[index] = TicketSuccess(story=story, issue=issue, epic=epic)
        self._progress.item_done("Stories")
