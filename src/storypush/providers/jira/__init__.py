"""Jira provider."""

from storypush.providers.jira.provider import JiraProvider

__all__ = ["JiraProvider"]
