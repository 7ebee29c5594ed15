"""Shared CLI formatting helpers."""

from __future__ import annotations


def format_count(count: int, singular: str, plural: str) -> str:
    return f"{count} {singular if count == 1 else plural}"
