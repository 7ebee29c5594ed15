"""Exception hierarchy for storypush."""

from __future__ import annotations


class StoryPushError(Exception):
    """Base exception for all storypush errors."""


class ConfigError(StoryPushError):
    """Configuration loading or validation failure."""


class StoryLoadError(StoryPushError):
    """Story file loading/parsing failure."""


class ProviderError(StoryPushError):
    """Base provider operation failure."""


class AuthenticationError(ProviderError):
    """Authentication/authorization failure."""


class EpicResolutionError(ProviderError):
    """An epic could be neither found nor created."""

    def __init__(self, message: str, *, epic_name: str) -> None:
        super().__init__(message)
        self.epic_name = epic_name


class IssueCreationError(ProviderError):
    """The tracker rejected a single issue-creation request."""

    def __init__(self, message: str, *, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code
