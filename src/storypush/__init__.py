"""Public API surface for storypush."""

__version__ = "0.3.0"

from storypush.auth import create_token_resolver
from storypush.config import load_config
from storypush.contracts import (
    AuthenticationError,
    BatchResult,
    ConfigError,
    Document,
    EpicRef,
    EpicResolutionError,
    FieldConfig,
    IssueCreationError,
    IssueRef,
    Provider,
    ProviderError,
    PushConfig,
    Story,
    StoryLoadError,
    StoryPushError,
    TicketFailure,
    TicketSuccess,
)
from storypush.engine import EpicResolver, PushProgress, TicketOrchestrator
from storypush.markup import build_document, markup_to_adf, to_adf, tokenize
from storypush.providers import create_provider
from storypush.sdk import StoryPush
from storypush.stories import load_stories

__all__ = [
    "AuthenticationError",
    "BatchResult",
    "ConfigError",
    "Document",
    "EpicRef",
    "EpicResolutionError",
    "EpicResolver",
    "FieldConfig",
    "IssueCreationError",
    "IssueRef",
    "Provider",
    "ProviderError",
    "PushConfig",
    "PushProgress",
    "Story",
    "StoryLoadError",
    "StoryPush",
    "StoryPushError",
    "TicketFailure",
    "TicketOrchestrator",
    "TicketSuccess",
    "__version__",
    "build_document",
    "create_provider",
    "create_token_resolver",
    "load_config",
    "load_stories",
    "markup_to_adf",
    "to_adf",
    "tokenize",
]
