"""Page abstraction and the HTML sink.

``Page`` is the only thing a handler knows about the host surface: which
elements exist, what the inputs currently hold, and where to put a view.
``MemoryPage`` keeps everything in process so handlers can be driven
without a browser.
"""

from __future__ import annotations

import html
import logging
from abc import ABC, abstractmethod
from collections import defaultdict
from typing import Callable, Dict, Iterable, List, Mapping, Optional

from .views import Audio, BulletList, Image, Line, Link, View

logger = logging.getLogger(__name__)

Handler = Callable[[], object]


class Page(ABC):
    """Abstract host surface for feature handlers."""

    @abstractmethod
    def has_element(self, element_id: str) -> bool:
        """Return True if the page contains an element with *element_id*."""

    @abstractmethod
    def read_value(self, element_id: str) -> Optional[str]:
        """Current value of an input element, None when it does not exist."""

    @abstractmethod
    def show(self, output_id: str, view: View) -> None:
        """Replace the whole content of *output_id* with *view*."""

    @abstractmethod
    def bind(self, trigger_id: str, handler: Handler) -> None:
        """Run *handler* whenever *trigger_id* is activated."""


class MemoryPage(Page):
    """In-process page: a set of element ids, input values and render history."""

    def __init__(self, elements: Iterable[str] = (), values: Mapping[str, str] | None = None):
        self.values: Dict[str, str] = dict(values or {})
        self.elements = set(elements) | set(self.values)
        self.handlers: Dict[str, Handler] = {}
        self.history: Dict[str, List[View]] = defaultdict(list)

    def has_element(self, element_id: str) -> bool:
        return element_id in self.elements

    def read_value(self, element_id: str) -> Optional[str]:
        if element_id not in self.elements:
            return None
        return self.values.get(element_id, "")

    def show(self, output_id: str, view: View) -> None:
        self.history[output_id].append(view)

    def bind(self, trigger_id: str, handler: Handler) -> None:
        self.handlers[trigger_id] = handler

    # -- helpers for scripts and tests ---------------------------------

    def set_value(self, element_id: str, value: str) -> None:
        self.elements.add(element_id)
        self.values[element_id] = value

    def click(self, trigger_id: str) -> object:
        handler = self.handlers.get(trigger_id)
        if handler is None:
            logger.debug("click on unbound trigger %s ignored", trigger_id)
            return None
        return handler()

    def current(self, output_id: str) -> Optional[View]:
        views = self.history.get(output_id)
        return views[-1] if views else None

    def current_html(self, output_id: str) -> str:
        view = self.current(output_id)
        return render_html(view) if view else ""


# ---------------------------------------------------------------------------
# HTML sink
# ---------------------------------------------------------------------------

_THUMB_STYLE = "width:70px; height:70px; border-radius:12px; object-fit:cover;"
_FULL_STYLE = "width:100%; border-radius:12px;"


def _esc(value: str) -> str:
    return html.escape(value, quote=True)


def _line_html(line: Line) -> str:
    text = _esc(line.text)
    if line.style == "strong":
        return f"<p><strong>{text}</strong></p>"
    if line.style == "small":
        return f'<p class="small">{text}</p>'
    if line.style == "emphasis":
        return f"<p><em>{text}</em></p>"
    return f"<p>{text}</p>"


def _block_html(block: object) -> str:
    if isinstance(block, Line):
        return _line_html(block)
    if isinstance(block, Image):
        style = _THUMB_STYLE if block.size == "thumb" else _FULL_STYLE
        return f'<img src="{_esc(block.src)}" alt="{_esc(block.alt)}" style="{style}" />'
    if isinstance(block, Audio):
        return f'<audio controls src="{_esc(block.src)}" style="width:100%;"></audio>'
    if isinstance(block, Link):
        return f'<a href="{_esc(block.href)}" target="_blank" rel="noreferrer">{_esc(block.label)}</a>'
    if isinstance(block, BulletList):
        items = "".join(f"<li>{_esc(item)}</li>" for item in block.items)
        return f'<ul style="margin:8px 0 0 18px;">{items}</ul>'
    raise TypeError(f"Unsupported block: {block!r}")


def render_html(view: View) -> str:
    """Return the HTML fragment that replaces an output container."""
    if view.is_error:
        return "".join(f'<p class="error">{_esc(block.text)}</p>' for block in view.blocks if isinstance(block, Line))
    return "\n".join(_block_html(block) for block in view.blocks)
