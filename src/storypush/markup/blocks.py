"""Line classification for story markup."""

from __future__ import annotations

import re
from dataclasses import dataclass

_HEADING_RE = re.compile(r"h([2-6])\.\s+(.+)")
_CHECKBOX_RE = re.compile(r"\[([ x])\]\s+(.+)")
_BULLET_RE = re.compile(r"[*-]\s+(.+)")
_ORDERED_RE = re.compile(r"#\s+(.+)")


@dataclass(frozen=True)
class BlankToken:
    pass


@dataclass(frozen=True)
class HeadingToken:
    level: int
    text: str


@dataclass(frozen=True)
class CheckboxToken:
    checked: bool
    text: str


@dataclass(frozen=True)
class BulletToken:
    text: str


@dataclass(frozen=True)
class OrderedToken:
    text: str


@dataclass(frozen=True)
class PlainToken:
    text: str


BlockToken = BlankToken | HeadingToken | CheckboxToken | BulletToken | OrderedToken | PlainToken


def classify(line: str) -> BlockToken:
    """Classify one markup line; the first matching rule wins."""
    stripped = line.strip()
    if not stripped:
        return BlankToken()

    if match := _HEADING_RE.fullmatch(stripped):
        return HeadingToken(level=int(match.group(1)), text=match.group(2))
    if match := _CHECKBOX_RE.fullmatch(stripped):
        return CheckboxToken(checked=match.group(1) == "x", text=match.group(2))
    if match := _BULLET_RE.fullmatch(stripped):
        return BulletToken(text=match.group(1))
    if match := _ORDERED_RE.fullmatch(stripped):
        return OrderedToken(text=match.group(1))
    return PlainToken(text=stripped)
