"""Provider implementations and factory."""

from storypush.providers.dry_run import DryRunOperation, DryRunProvider
from storypush.providers.factory import create_provider
from storypush.providers.jira import JiraProvider

__all__ = ["DryRunOperation", "DryRunProvider", "JiraProvider", "create_provider"]
