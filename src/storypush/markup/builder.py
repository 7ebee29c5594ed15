"""Markup to document tree conversion."""

from __future__ import annotations

from storypush.contracts.document import Document, Paragraph, TextRun
from storypush.markup.aggregator import aggregate
from storypush.markup.blocks import classify

NO_CONTENT_TEXT = "No description provided"


def fallback_document() -> Document:
    return Document(blocks=(Paragraph(runs=(TextRun(text=NO_CONTENT_TEXT),)),))


def build_document(markup: str | None) -> Document:
    """Convert *markup* into a document tree.

    Never raises: input that yields no blocks becomes a single paragraph with
    the "no content" sentinel.
    """
    if not markup or not markup.strip():
        return fallback_document()

    blocks = aggregate(classify(line) for line in markup.split("\n"))
    if not blocks:
        return fallback_document()
    return Document(blocks=blocks)
