"""Batch push engine."""

from storypush.engine.epics import EpicResolver
from storypush.engine.orchestrator import TicketOrchestrator, group_by_epic
from storypush.engine.progress import NullPushProgress, PushProgress

__all__ = ["EpicResolver", "NullPushProgress", "PushProgress", "TicketOrchestrator", "group_by_epic"]
