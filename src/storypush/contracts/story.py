"""Story contracts."""

from __future__ import annotations

from pydantic import BaseModel, Field, field_validator


class Story(BaseModel):
    title: str
    description: str = ""
    points: int = Field(default=0, ge=0)
    epic: str

    model_config = {"frozen": True}

    @field_validator("title", "epic")
    @classmethod
    def validate_not_blank(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("must not be blank")
        return value
