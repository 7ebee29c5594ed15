"""Command-line interface for storypush."""

from __future__ import annotations

import asyncio as asyncio
import logging as logging

from storypush import StoryPush as StoryPush
from storypush import load_config as load_config
from storypush import load_stories as load_stories
from storypush.cli.app import main as main
from storypush.cli.commands import push as push_command
from storypush.cli.commands import render as render_command
from storypush.cli.parser import build_parser as build_parser

_format_summary = push_command.format_push_summary
_run_push = push_command.run_push
_run_render = render_command.run_render

__all__ = ["build_parser", "main"]

if __name__ == "__main__":
    raise SystemExit(main())
