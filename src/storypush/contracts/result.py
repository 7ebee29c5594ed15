"""Batch push result contracts."""

from __future__ import annotations

from pydantic import BaseModel, Field

from storypush.contracts.item import EpicRef, IssueRef
from storypush.contracts.story import Story


class TicketSuccess(BaseModel):
    story: Story
    issue: IssueRef
    epic: EpicRef


class TicketFailure(BaseModel):
    story: Story
    error: str
    status_code: int | None = None


TicketResult = TicketSuccess | TicketFailure


class BatchResult(BaseModel):
    successes: list[TicketSuccess] = Field(default_factory=list)
    failures: list[TicketFailure] = Field(default_factory=list)
    dry_run: bool = False

    @property
    def created(self) -> int:
        return len(self.successes)

    @property
    def failed(self) -> int:
        return len(self.failures)
