"""List aggregation state machine.

Consumes classified lines one at a time and merges runs of list lines into
list blocks. Checkbox lines are a flavor of bullet line, so checklists and
plain bullets that touch end up in the same ``BulletList``.

Transitions::

    Idle          --Bullet/Checkbox--> InBulletList
    Idle          --Ordered----------> InOrderedList
    InBulletList  --Ordered----------> InOrderedList   (emits BulletList)
    InOrderedList --Bullet/Checkbox--> InBulletList    (emits OrderedList)
    any           --Blank/Heading/Plain--> Idle        (emits open list)
"""

from __future__ import annotations

from collections.abc import Iterable
from enum import StrEnum

from storypush.contracts.document import Block, BulletList, Heading, ListItem, Mark, OrderedList, Paragraph
from storypush.markup.blocks import (
    BlankToken,
    BlockToken,
    BulletToken,
    CheckboxToken,
    HeadingToken,
    OrderedToken,
    PlainToken,
)
from storypush.markup.inline import tokenize


class ListState(StrEnum):
    IDLE = "idle"
    IN_BULLET_LIST = "in_bullet_list"
    IN_ORDERED_LIST = "in_ordered_list"


class ListAggregator:
    def __init__(self) -> None:
        self._state = ListState.IDLE
        self._items: list[ListItem] = []
        self._blocks: list[Block] = []

    @property
    def state(self) -> ListState:
        return self._state

    @property
    def blocks(self) -> tuple[Block, ...]:
        """Blocks emitted so far; an open list is not included until closed."""
        return tuple(self._blocks)

    def feed(self, token: BlockToken) -> None:
        if isinstance(token, BulletToken | CheckboxToken):
            self._enter(ListState.IN_BULLET_LIST)
            checked = token.checked if isinstance(token, CheckboxToken) else None
            self._items.append(ListItem(runs=tuple(tokenize(token.text)), checked=checked))
        elif isinstance(token, OrderedToken):
            self._enter(ListState.IN_ORDERED_LIST)
            self._items.append(ListItem(runs=tuple(tokenize(token.text))))
        elif isinstance(token, HeadingToken):
            self.close()
            runs = tuple(run.with_mark(Mark.BOLD) for run in tokenize(token.text))
            self._blocks.append(Heading(level=token.level, runs=runs))
        elif isinstance(token, PlainToken):
            self.close()
            self._blocks.append(Paragraph(runs=tuple(tokenize(token.text))))
        elif isinstance(token, BlankToken):
            self.close()
        else:  # pragma: no cover
            raise TypeError(f"unknown block token: {token!r}")

    def close(self) -> None:
        """Emit the open list, if any, and return to ``Idle``."""
        if self._items:
            items = tuple(self._items)
            if self._state == ListState.IN_BULLET_LIST:
                self._blocks.append(BulletList(items=items))
            elif self._state == ListState.IN_ORDERED_LIST:
                self._blocks.append(OrderedList(items=items))
        self._items = []
        self._state = ListState.IDLE

    def finish(self) -> tuple[Block, ...]:
        self.close()
        return self.blocks

    def _enter(self, state: ListState) -> None:
        if self._state != state:
            self.close()
            self._state = state


def aggregate(tokens: Iterable[BlockToken]) -> tuple[Block, ...]:
    aggregator = ListAggregator()
    for token in tokens:
        aggregator.feed(token)
    return aggregator.finish()
