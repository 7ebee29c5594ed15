"""In-memory dry-run provider."""

from __future__ import annotations

from dataclasses import dataclass
from types import TracebackType

from storypush.contracts.item import CreateIssueInput, EpicRef, IssueRef
from storypush.contracts.provider import Provider


@dataclass(frozen=True)
class DryRunOperation:
    """Deterministic dry-run operation log entry."""

    sequence: int
    name: str
    item_id: str | None
    payload: dict[str, str]


class DryRunProvider(Provider):
    """Provider that returns deterministic placeholders without network calls."""

    def __init__(self, project_key: str = "DRY") -> None:
        self._project_key = project_key
        self._counter = 0
        self._epics: dict[str, EpicRef] = {}
        self._operation_counter = 0
        self._operations: list[DryRunOperation] = []

    @property
    def operations(self) -> tuple[DryRunOperation, ...]:
        return tuple(self._operations)

    def _record_operation(self, name: str, item_id: str | None, payload: dict[str, str] | None = None) -> None:
        self._operation_counter += 1
        self._operations.append(
            DryRunOperation(
                sequence=self._operation_counter,
                name=name,
                item_id=item_id,
                payload=payload or {},
            )
        )

    def _next_identity(self) -> tuple[str, str]:
        self._counter += 1
        return f"dry-run-{self._counter}", f"{self._project_key}-{self._counter}"

    async def __aenter__(self) -> DryRunProvider:
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: TracebackType | None,
    ) -> None:
        return None

    async def search_epics(self, name: str) -> list[EpicRef]:
        self._record_operation("search_epics", None, {"name": name})
        return [epic for epic in self._epics.values() if name in epic.name]

    async def create_epic(self, name: str) -> EpicRef:
        item_id, key = self._next_identity()
        self._record_operation("create_epic", item_id, {"name": name})
        epic = EpicRef(id=item_id, key=key, name=name)
        self._epics[item_id] = epic
        return epic

    async def create_issue(self, input: CreateIssueInput) -> IssueRef:
        item_id, key = self._next_identity()
        payload = {"title": input.title, "epic_key": input.epic.key if input.epic is not None else ""}
        if input.points is not None:
            payload["points"] = str(input.points)
        self._record_operation("create_issue", item_id, payload)
        return IssueRef(id=item_id, key=key, url="dry-run")
