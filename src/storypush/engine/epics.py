"""Find-or-create resolution of epics by name."""

from __future__ import annotations

import logging

from storypush.contracts.exceptions import EpicResolutionError, ProviderError
from storypush.contracts.item import EpicRef
from storypush.contracts.provider import Provider

_LOG = logging.getLogger(__name__)


class EpicResolver:
    """Resolve epic names to tracker epics, creating the ones that are missing.

    Lookup is a substring match on the epic title, so an existing epic named
    "Checkout flow v2" is reused for the name "Checkout flow". Lookup failures
    are not fatal and fall through to creation; only a failed creation raises.
    Resolved names are remembered for the lifetime of the resolver.
    """

    def __init__(self, provider: Provider) -> None:
        self._provider = provider
        self._resolved: dict[str, EpicRef] = {}

    async def resolve(self, name: str) -> EpicRef:
        cached = self._resolved.get(name)
        if cached is not None:
            return cached

        epic = await self._lookup(name)
        if epic is None:
            epic = await self._create(name)
        self._resolved[name] = epic
        return epic

    async def _lookup(self, name: str) -> EpicRef | None:
        try:
            matches = await self._provider.search_epics(name)
        except ProviderError as exc:
            _LOG.warning("Epic search for %r failed, will create a new epic: %s", name, exc)
            return None

        if not matches:
            return None
        epic = matches[0]
        _LOG.debug("Reusing epic %s (%r) for %r", epic.key, epic.name, name)
        return epic

    async def _create(self, name: str) -> EpicRef:
        try:
            epic = await self._provider.create_epic(name)
        except ProviderError as exc:
            raise EpicResolutionError(f'Failed to create epic "{name}": {exc}', epic_name=name) from exc
        _LOG.debug("Created epic %s for %r", epic.key, name)
        return epic
