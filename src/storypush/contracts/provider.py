"""Provider adapter contract."""

from __future__ import annotations

from abc import ABC, abstractmethod
from types import TracebackType

from storypush.contracts.item import CreateIssueInput, EpicRef, IssueRef


class Provider(ABC):
    @abstractmethod
    async def __aenter__(self) -> Provider: ...  # pragma: no cover

    @abstractmethod
    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: TracebackType | None,
    ) -> None: ...  # pragma: no cover

    @abstractmethod
    async def search_epics(self, name: str) -> list[EpicRef]:
        """Return epics whose title contains *name*, best match first."""
        ...  # pragma: no cover

    @abstractmethod
    async def create_epic(self, name: str) -> EpicRef: ...  # pragma: no cover

    @abstractmethod
    async def create_issue(self, input: CreateIssueInput) -> IssueRef: ...  # pragma: no cover
