"""Render command."""

from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path

from storypush import StoryLoadError, markup_to_adf


def read_markup(source: str) -> str:
    if source == "-":
        return sys.stdin.read()
    try:
        return Path(source).read_text(encoding="utf-8")
    except OSError as exc:
        raise StoryLoadError(f"failed reading markup file: {source}") from exc


def run_render(args: argparse.Namespace) -> str:
    rendered = json.dumps(markup_to_adf(read_markup(args.file)), indent=args.indent, ensure_ascii=False)
    print(rendered)
    return rendered


__all__ = ["read_markup", "run_render"]
