"""Jira Cloud provider adapter over the REST v3 API."""

from __future__ import annotations

import logging
from types import TracebackType
from typing import Any

import httpx

from storypush.contracts.config import FieldConfig
from storypush.contracts.exceptions import AuthenticationError, IssueCreationError, ProviderError
from storypush.contracts.item import CreateIssueInput, EpicRef, IssueRef
from storypush.contracts.provider import Provider
from storypush.providers.jira.errors import describe_error, epic_link_hint
from storypush.providers.jira.payloads import epic_payload, epic_search_jql, issue_payload

_LOG = logging.getLogger(__name__)

SEARCH_PATH = "/rest/api/3/search"
ISSUE_PATH = "/rest/api/3/issue"
_AUTH_STATUS_CODES = frozenset({401, 403})


class JiraProvider(Provider):
    """Thin adapter translating provider calls into Jira REST requests."""

    def __init__(
        self,
        *,
        base_url: str,
        email: str,
        token: str,
        project_key: str,
        field_config: FieldConfig | None = None,
        timeout: float = 90.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._base_url = base_url.rstrip("/")
        self._email = email
        self._token = token
        self._project_key = project_key
        self._field_config = field_config or FieldConfig()
        self._timeout = timeout
        self._transport = transport
        self._client: httpx.AsyncClient | None = None

    async def __aenter__(self) -> JiraProvider:
        self._client = httpx.AsyncClient(
            base_url=self._base_url,
            auth=httpx.BasicAuth(self._email, self._token),
            headers={"Accept": "application/json", "Content-Type": "application/json"},
            timeout=self._timeout,
            transport=self._transport,
        )
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: TracebackType | None,
    ) -> None:
        if self._client is not None:
            await self._client.aclose()
            self._client = None

    async def search_epics(self, name: str) -> list[EpicRef]:
        jql = epic_search_jql(self._project_key, name, issue_type=self._field_config.epic_issue_type)
        response = await self._request("GET", SEARCH_PATH, action="Epic search", params={"jql": jql})
        if response.is_error:
            raise ProviderError(f"Epic search failed: {describe_error(response)}")

        try:
            payload = response.json()
        except ValueError as exc:
            raise ProviderError("Epic search returned a non-JSON response") from exc
        issues = payload.get("issues") if isinstance(payload, dict) else None
        try:
            return [
                EpicRef(
                    id=str(issue["id"]),
                    key=str(issue["key"]),
                    name=str((issue.get("fields") or {}).get("summary", "")),
                )
                for issue in issues or []
            ]
        except (KeyError, TypeError, AttributeError) as exc:
            raise ProviderError("Epic search returned a malformed response") from exc

    async def create_epic(self, name: str) -> EpicRef:
        body = epic_payload(self._project_key, name, self._field_config)
        response = await self._request("POST", ISSUE_PATH, action="Epic creation", json=body)
        if response.is_error:
            raise ProviderError(f"Failed to create epic: {describe_error(response)}")

        data = self._created_payload(response, action="Epic creation")
        return EpicRef(id=str(data["id"]), key=str(data["key"]), name=name)

    async def create_issue(self, input: CreateIssueInput) -> IssueRef:
        body = issue_payload(self._project_key, input, self._field_config)
        response = await self._request("POST", ISSUE_PATH, action="Story creation", json=body)
        if response.is_error:
            message = f"Failed to create story: {describe_error(response)}"
            hint = epic_link_hint(response, epic_link_field=self._field_config.epic_link_field)
            if hint:
                message = f"{message}\n\n{hint}"
            raise IssueCreationError(message, status_code=response.status_code)

        data = self._created_payload(response, action="Story creation")
        return IssueRef(id=str(data["id"]), key=str(data["key"]), url=str(data.get("self", "")))

    @staticmethod
    def _created_payload(response: httpx.Response, *, action: str) -> dict[str, Any]:
        try:
            data = response.json()
        except ValueError as exc:
            raise ProviderError(f"{action} returned a non-JSON response") from exc
        if not isinstance(data, dict) or not data.get("id") or not data.get("key"):
            raise ProviderError(f"{action} response is missing the issue id or key")
        if not isinstance(data["id"], str | int) or not isinstance(data["key"], str):
            raise ProviderError(f"{action} returned a malformed issue id or key")
        return data

    def _require_client(self) -> httpx.AsyncClient:
        if self._client is None:
            raise ProviderError("JiraProvider is not open; use it as an async context manager")
        return self._client

    async def _request(self, method: str, path: str, *, action: str, **kwargs: Any) -> httpx.Response:
        client = self._require_client()
        _LOG.debug("%s %s%s", method, self._base_url, path)
        try:
            response = await client.request(method, path, **kwargs)
        except httpx.TimeoutException as exc:
            raise ProviderError(f"{action} timed out after {self._timeout:g} seconds") from exc
        except httpx.HTTPError as exc:
            raise ProviderError(f"{action} request failed: {exc}") from exc

        if response.status_code in _AUTH_STATUS_CODES:
            raise AuthenticationError(f"{action} was rejected by Jira: {describe_error(response)}")
        return response
