"""Public contracts for storypush."""

from storypush.contracts.config import EpicLinkShape, FieldConfig, PushConfig
from storypush.contracts.document import (
    Block,
    BulletList,
    Document,
    Heading,
    ListItem,
    Mark,
    OrderedList,
    Paragraph,
    TextRun,
)
from storypush.contracts.exceptions import (
    AuthenticationError,
    ConfigError,
    EpicResolutionError,
    IssueCreationError,
    ProviderError,
    StoryLoadError,
    StoryPushError,
)
from storypush.contracts.item import CreateIssueInput, EpicRef, IssueRef
from storypush.contracts.provider import Provider
from storypush.contracts.result import BatchResult, TicketFailure, TicketResult, TicketSuccess
from storypush.contracts.story import Story

__all__ = [
    "AuthenticationError",
    "BatchResult",
    "Block",
    "BulletList",
    "ConfigError",
    "CreateIssueInput",
    "Document",
    "EpicLinkShape",
    "EpicRef",
    "EpicResolutionError",
    "FieldConfig",
    "Heading",
    "IssueCreationError",
    "IssueRef",
    "ListItem",
    "Mark",
    "OrderedList",
    "Paragraph",
    "Provider",
    "ProviderError",
    "PushConfig",
    "Story",
    "StoryLoadError",
    "StoryPushError",
    "TextRun",
    "TicketFailure",
    "TicketResult",
    "TicketSuccess",
]
