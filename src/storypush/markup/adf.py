"""Atlassian Document Format serialization."""

from __future__ import annotations

from typing import Any

from storypush.contracts.document import (
    Block,
    BulletList,
    Document,
    Heading,
    ListItem,
    Mark,
    OrderedList,
    Paragraph,
    TextRun,
)
from storypush.markup.builder import build_document

_ADF_MARKS: tuple[tuple[Mark, str], ...] = (
    (Mark.BOLD, "strong"),
    (Mark.ITALIC, "em"),
    (Mark.CODE, "code"),
)
CHECKED_PREFIX = "☑ "
UNCHECKED_PREFIX = "☐ "


def text_node(run: TextRun) -> dict[str, Any]:
    node: dict[str, Any] = {"type": "text", "text": run.text}
    if Mark.CODE in run.marks:
        # ADF only allows "code" alongside "link".
        marks = [{"type": "code"}]
    else:
        marks = [{"type": adf_mark} for mark, adf_mark in _ADF_MARKS if mark in run.marks]
    if marks:
        node["marks"] = marks
    return node


def _inline(runs: tuple[TextRun, ...]) -> list[dict[str, Any]]:
    # ADF rejects empty text nodes.
    return [text_node(run) for run in runs if run.text]


def _list_item(item: ListItem) -> dict[str, Any]:
    content = _inline(item.runs)
    if item.checked is not None:
        content.insert(0, {"type": "text", "text": CHECKED_PREFIX if item.checked else UNCHECKED_PREFIX})
    return {"type": "listItem", "content": [{"type": "paragraph", "content": content}]}


def block_to_adf(block: Block) -> dict[str, Any]:
    if isinstance(block, Heading):
        return {"type": "heading", "attrs": {"level": block.level}, "content": _inline(block.runs)}
    if isinstance(block, Paragraph):
        return {"type": "paragraph", "content": _inline(block.runs)}
    if isinstance(block, BulletList):
        return {"type": "bulletList", "content": [_list_item(item) for item in block.items]}
    if isinstance(block, OrderedList):
        return {"type": "orderedList", "content": [_list_item(item) for item in block.items]}
    raise TypeError(f"unsupported block: {block!r}")  # pragma: no cover


def to_adf(document: Document) -> dict[str, Any]:
    return {"type": "doc", "version": 1, "content": [block_to_adf(block) for block in document.blocks]}


def markup_to_adf(markup: str | None) -> dict[str, Any]:
    return to_adf(build_document(markup))
