"""Jira error response formatting."""

from __future__ import annotations

import httpx

_EPIC_LINK_MARKERS = ("parent", "Epic Link")


def describe_error(response: httpx.Response) -> str:
    """Summarize a failed Jira response as ``<status> - <details>``."""
    message = str(response.status_code)
    try:
        payload = response.json()
    except ValueError:
        payload = None

    if isinstance(payload, dict) and payload.get("errors"):
        details = ", ".join(f"{field}: {text}" for field, text in payload["errors"].items())
    elif isinstance(payload, dict) and payload.get("errorMessages"):
        details = ", ".join(str(text) for text in payload["errorMessages"])
    else:
        details = response.text
    if details:
        message += f" - {details}"
    return message


def epic_link_hint(response: httpx.Response, *, epic_link_field: str) -> str | None:
    if not any(marker in response.text for marker in _EPIC_LINK_MARKERS):
        return None
    return (
        f"Hint: the epic link field '{epic_link_field}' might be incorrect. "
        "Check field_config.epic_link_field and field_config.epic_link_shape "
        "(common fields: parent, customfield_10014, customfield_10011)."
    )
