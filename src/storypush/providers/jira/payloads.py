"""Request payload builders for the Jira REST API."""

from __future__ import annotations

from typing import Any

from storypush.contracts.config import FieldConfig
from storypush.contracts.document import Document, Paragraph, TextRun
from storypush.contracts.item import CreateIssueInput, EpicRef
from storypush.markup.adf import to_adf


def escape_jql(value: str) -> str:
    return value.replace("\\", "\\\\").replace('"', '\\"')


def epic_search_jql(project_key: str, name: str, *, issue_type: str = "Epic") -> str:
    return f'project={project_key} AND type={issue_type} AND summary~"{escape_jql(name)}"'


def epic_link_value(epic: EpicRef, field_config: FieldConfig) -> Any:
    if field_config.epic_link_shape == "key":
        return epic.key
    if field_config.epic_link_shape == "id":
        return epic.id
    return {"key": epic.key}


def epic_payload(project_key: str, name: str, field_config: FieldConfig) -> dict[str, Any]:
    description = Document(blocks=(Paragraph(runs=(TextRun(text=f"Epic: {name}"),)),))
    return {
        "fields": {
            "project": {"key": project_key},
            "summary": name,
            "description": to_adf(description),
            "issuetype": {"name": field_config.epic_issue_type},
        }
    }


def issue_payload(project_key: str, input: CreateIssueInput, field_config: FieldConfig) -> dict[str, Any]:
    fields: dict[str, Any] = {
        "project": {"key": project_key},
        "summary": input.title,
        "description": to_adf(input.description),
        "issuetype": {"name": field_config.story_issue_type},
    }
    if input.points:
        fields[field_config.story_points_field] = input.points
    if input.epic is not None:
        fields[field_config.epic_link_field] = epic_link_value(input.epic, field_config)
    return {"fields": fields}
