"""CLI parser construction."""

from __future__ import annotations

import argparse
from importlib.metadata import PackageNotFoundError, version


def _package_version() -> str:
    try:
        return version("storypush")
    except PackageNotFoundError:
        return "0.0.0"


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="storypush")
    parser.add_argument("--version", action="version", version=f"%(prog)s {_package_version()}")

    subparsers = parser.add_subparsers(dest="command", required=True)

    push_parser = subparsers.add_parser("push", help="Create Jira epics and stories from a story file")
    push_parser.add_argument("--config", default="./storypush.json", help="Path to storypush.json")
    push_parser.add_argument("--stories", required=True, help="Path to a JSON story list")
    mode = push_parser.add_mutually_exclusive_group(required=True)
    mode.add_argument("--dry-run", action="store_true", help="Preview mode")
    mode.add_argument("--apply", action="store_true", help="Apply mode")
    push_parser.add_argument("--verbose", "-v", action="store_true", help="Enable debug logging")

    render_parser = subparsers.add_parser("render", help="Print the ADF document for story markup")
    render_parser.add_argument("file", nargs="?", default="-", help="Markup file (default: stdin)")
    render_parser.add_argument("--indent", type=int, default=2, help="JSON indentation (default: 2)")
    render_parser.add_argument("--verbose", "-v", action="store_true", help="Enable debug logging")

    return parser


__all__ = ["build_parser"]
