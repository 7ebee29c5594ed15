"""SDK composition root for storypush."""

from __future__ import annotations

from collections.abc import Sequence

from storypush.auth import create_token_resolver
from storypush.contracts.config import PushConfig
from storypush.contracts.provider import Provider
from storypush.contracts.result import BatchResult
from storypush.contracts.story import Story
from storypush.engine import TicketOrchestrator
from storypush.engine.progress import PushProgress
from storypush.providers.dry_run import DryRunProvider
from storypush.providers.factory import create_provider


class StoryPush:
    """storypush SDK public API."""

    def __init__(
        self,
        *,
        provider: Provider | None,
        config: PushConfig,
        progress: PushProgress | None = None,
    ) -> None:
        self._provider = provider
        self._config = config
        self._progress = progress

    @classmethod
    async def from_config(cls, config: PushConfig, *, progress: PushProgress | None = None) -> StoryPush:
        return cls(provider=None, config=config, progress=progress)

    async def push(self, stories: Sequence[Story], *, dry_run: bool = False) -> BatchResult:
        """Create epics and issues for *stories*; per-story failures are reported, not raised."""
        if dry_run:
            provider: Provider = DryRunProvider(project_key=self._config.project_key)
        else:
            provider = await self._resolve_apply_provider()

        async with provider:
            orchestrator = TicketOrchestrator(provider, self._config, dry_run=dry_run, progress=self._progress)
            return await orchestrator.create_all(stories)

    async def _resolve_apply_provider(self) -> Provider:
        if self._provider is not None:
            return self._provider
        token = await create_token_resolver(self._config).resolve()
        return create_provider(self._config, token=token)
