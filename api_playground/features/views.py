"""View-model produced by feature handlers.

A ``View`` is the complete content of one output container. It is replaced
wholesale on every state change; nothing is diffed or appended.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Tuple, Union

LOADING = "loading"
ERROR = "error"
RENDERED = "rendered"

DEFAULT_LOADING_MESSAGE = "Loading..."
DEFAULT_ERROR_MESSAGE = "Something went wrong."


@dataclass(frozen=True)
class Line:
    """A paragraph of text. ``style`` is one of normal, strong, small, emphasis."""

    text: str
    style: str = "normal"


@dataclass(frozen=True)
class Image:
    src: str
    alt: str = ""
    size: str = "full"  # "thumb" (avatar-sized) or "full" (container width)


@dataclass(frozen=True)
class Audio:
    src: str


@dataclass(frozen=True)
class Link:
    href: str
    label: str


@dataclass(frozen=True)
class BulletList:
    items: Tuple[str, ...]


Block = Union[Line, Image, Audio, Link, BulletList]


@dataclass(frozen=True)
class View:
    state: str
    blocks: Tuple[Block, ...] = ()

    @property
    def is_loading(self) -> bool:
        return self.state == LOADING

    @property
    def is_error(self) -> bool:
        return self.state == ERROR

    @property
    def text(self) -> str:
        """Plain text of every text-bearing block, one per line."""
        parts = []
        for block in self.blocks:
            if isinstance(block, Line):
                parts.append(block.text)
            elif isinstance(block, Link):
                parts.append(block.label)
            elif isinstance(block, BulletList):
                parts.extend(block.items)
        return "\n".join(parts)


def loading_view(message: str = DEFAULT_LOADING_MESSAGE) -> View:
    return View(LOADING, (Line(message, "small"),))


def error_view(message: str = DEFAULT_ERROR_MESSAGE) -> View:
    return View(ERROR, (Line(message),))


def rendered(*blocks: Block | None) -> View:
    """Build a success view, dropping omitted (``None``) blocks."""
    return View(RENDERED, tuple(block for block in blocks if block is not None))


def format_number(value: float | int | None, placeholder: str = "N/A") -> str:
    """Format a number the way the browser prints it by default.

    Integral values drop the fractional part (``6.0`` -> ``6``), others use
    the shortest round-tripping representation (``0.4``).
    """
    if value is None or isinstance(value, bool):
        return placeholder
    number = float(value)
    if not math.isfinite(number):
        return placeholder
    if number.is_integer():
        return str(int(number))
    return repr(number)
