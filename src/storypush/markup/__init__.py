"""Story markup parsing and document tree building."""

from storypush.markup.adf import markup_to_adf, to_adf
from storypush.markup.aggregator import ListAggregator, ListState, aggregate
from storypush.markup.blocks import (
    BlankToken,
    BlockToken,
    BulletToken,
    CheckboxToken,
    HeadingToken,
    OrderedToken,
    PlainToken,
    classify,
)
from storypush.markup.builder import NO_CONTENT_TEXT, build_document, fallback_document
from storypush.markup.inline import tokenize

__all__ = [
    "NO_CONTENT_TEXT",
    "BlankToken",
    "BlockToken",
    "BulletToken",
    "CheckboxToken",
    "HeadingToken",
    "ListAggregator",
    "ListState",
    "OrderedToken",
    "PlainToken",
    "aggregate",
    "build_document",
    "classify",
    "fallback_document",
    "markup_to_adf",
    "to_adf",
    "tokenize",
]
