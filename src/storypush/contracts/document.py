"""Document tree contracts.

The tree is renderer-agnostic: ``storypush.markup.adf`` turns it
into Atlassian Document Format, but nothing here knows about that schema.
"""

from __future__ import annotations

from enum import StrEnum
from typing import Annotated, Literal

from pydantic import BaseModel, Field


class Mark(StrEnum):
    BOLD = "bold"
    ITALIC = "italic"
    CODE = "code"


class TextRun(BaseModel):
    """A span of text sharing one set of marks."""

    text: str
    marks: frozenset[Mark] = frozenset()

    model_config = {"frozen": True}

    def with_mark(self, mark: Mark) -> TextRun:
        return TextRun(text=self.text, marks=self.marks | {mark})


class Heading(BaseModel):
    kind: Literal["heading"] = "heading"
    level: int = Field(ge=2, le=6)
    runs: tuple[TextRun, ...]

    model_config = {"frozen": True}


class Paragraph(BaseModel):
    kind: Literal["paragraph"] = "paragraph"
    runs: tuple[TextRun, ...]

    model_config = {"frozen": True}


class ListItem(BaseModel):
    kind: Literal["list_item"] = "list_item"
    runs: tuple[TextRun, ...]
    checked: bool | None = None

    model_config = {"frozen": True}


class BulletList(BaseModel):
    kind: Literal["bullet_list"] = "bullet_list"
    items: tuple[ListItem, ...] = Field(min_length=1)

    model_config = {"frozen": True}


class OrderedList(BaseModel):
    kind: Literal["ordered_list"] = "ordered_list"
    items: tuple[ListItem, ...] = Field(min_length=1)

    model_config = {"frozen": True}


Block = Annotated[Heading | Paragraph | BulletList | OrderedList, Field(discriminator="kind")]


class Document(BaseModel):
    blocks: tuple[Block, ...]

    model_config = {"frozen": True}

    @property
    def plain_text(self) -> str:
        lines: list[str] = []
        for block in self.blocks:
            if isinstance(block, Heading | Paragraph):
                lines.append("".join(run.text for run in block.runs))
            else:
                lines.extend("".join(run.text for run in item.runs) for item in block.items)
        return "\n".join(lines)
