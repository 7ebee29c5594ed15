"""Configuration contracts."""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, Field, model_validator

EpicLinkShape = Literal["key-object", "key", "id"]


class FieldConfig(BaseModel):
    epic_issue_type: str = "Epic"
    story_issue_type: str = "Story"
    story_points_field: str = "customfield_13805"
    epic_link_field: str = "parent"
    epic_link_shape: EpicLinkShape = "key-object"

    model_config = {"frozen": True}


class PushConfig(BaseModel):
    base_url: str
    email: str
    project_key: str
    auth: str = "env"
    token: str | None = None
    max_concurrent: int = Field(default=1, ge=1, le=10)
    timeout: float = Field(default=90.0, gt=0)
    field_config: FieldConfig = Field(default_factory=FieldConfig)

    model_config = {"frozen": True}

    @model_validator(mode="after")
    def validate_required_values(self) -> PushConfig:
        for name in ("base_url", "email", "project_key"):
            if not getattr(self, name).strip():
                raise ValueError(f"{name} must not be empty")
        return self

    @model_validator(mode="after")
    def validate_auth_token(self) -> PushConfig:
        token = (self.token or "").strip()
        if self.auth == "token":
            if not token:
                raise ValueError("token auth requires a non-empty token")
            return self
        if token:
            raise ValueError("token must be unset when auth is not 'token'")
        if self.auth not in {"env", "token"}:
            raise ValueError("auth must be one of: env, token")
        return self

    @property
    def api_base(self) -> str:
        return self.base_url.rstrip("/")
