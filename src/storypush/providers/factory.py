"""Provider factory."""

from __future__ import annotations

from storypush.contracts.config import PushConfig
from storypush.contracts.provider import Provider
from storypush.providers.dry_run import DryRunProvider
from storypush.providers.jira import JiraProvider


def create_provider(config: PushConfig, *, token: str = "", dry_run: bool = False) -> Provider:
    if dry_run:
        return DryRunProvider(project_key=config.project_key)
    return JiraProvider(
        base_url=config.api_base,
        email=config.email,
        token=token,
        project_key=config.project_key,
        field_config=config.field_config,
        timeout=config.timeout,
    )
