"""Provider-agnostic tracker item contracts."""

from __future__ import annotations

from pydantic import BaseModel

from storypush.contracts.document import Document


class EpicRef(BaseModel):
    id: str
    key: str
    name: str

    model_config = {"frozen": True}


class IssueRef(BaseModel):
    id: str
    key: str
    url: str

    model_config = {"frozen": True}


class CreateIssueInput(BaseModel):
    title: str
    description: Document
    points: int | None = None
    epic: EpicRef | None = None
