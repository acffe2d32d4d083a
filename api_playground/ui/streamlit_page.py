"""Streamlit implementation of the ``Page`` interface."""
from __future__ import annotations

import logging
from typing import Callable, Dict, List, Optional, Sequence

import streamlit as st

from api_playground.features.base import FeatureConfig, InputField
from api_playground.features.page import Page
from api_playground.features.views import Audio, BulletList, Image, Line, Link, View

logger = logging.getLogger(__name__)

Handler = Callable[[], object]

_VIEW_STATE_PREFIX = "_view_"
_MARKDOWN_SPECIALS = "\\`*_[]#<>|$~"


def _md_escape(text: str) -> str:
    return "".join(f"\\{ch}" if ch in _MARKDOWN_SPECIALS else ch for ch in text)


def _md_href(href: str) -> str:
    return href.replace("(", "%28").replace(")", "%29")


def _render_block(block: object) -> None:
    if isinstance(block, Line):
        text = _md_escape(block.text)
        if block.style == "strong":
            st.markdown(f"**{text}**")
        elif block.style == "small":
            st.caption(text)
        elif block.style == "emphasis":
            st.markdown(f"*{text}*")
        else:
            st.markdown(text)
    elif isinstance(block, Image):
        if block.size == "thumb":
            st.image(block.src, caption=block.alt or None, width=70)
        else:
            st.image(block.src, caption=block.alt or None)
    elif isinstance(block, Audio):
        st.audio(block.src)
    elif isinstance(block, Link):
        st.markdown(f"[{_md_escape(block.label)}]({_md_href(block.href)})")
    elif isinstance(block, BulletList):
        st.markdown("\n".join(f"- {_md_escape(item)}" for item in block.items))


def render_view(view: View) -> None:
    """Draw *view* with native Streamlit elements in the current container."""
    if view.is_error:
        st.error(view.text)
    elif view.is_loading:
        st.info(view.text)
    else:
        for block in view.blocks:
            _render_block(block)


class StreamlitPage(Page):
    """One card per feature: inputs, a trigger button and an output slot.

    Streamlit reports a click as a ``True`` return from ``st.button`` on the
    rerun that follows it, so bound handlers are collected during layout and
    run by ``dispatch`` once every widget exists.
    """

    def __init__(self) -> None:
        self._elements: set[str] = set()
        self._values: Dict[str, Optional[str]] = {}
        self._outputs: Dict[str, object] = {}
        self._handlers: Dict[str, Handler] = {}
        self._clicked: List[str] = []

    # ------------------------------------------------------------------
    # Layout
    # ------------------------------------------------------------------

    def layout(self, features: Sequence[FeatureConfig], columns: int = 2) -> None:
        cols = st.columns(columns)
        for index, feature in enumerate(features):
            with cols[index % columns]:
                with st.container(border=True):
                    self._layout_card(feature)

    def _layout_card(self, feature: FeatureConfig) -> None:
        st.subheader(feature.title)
        if feature.description:
            st.caption(feature.description)

        for field in feature.inputs:
            self._values[field.id] = self._input_widget(field)
            self._elements.add(field.id)

        if st.button(feature.button_label, key=feature.trigger_id):
            self._clicked.append(feature.trigger_id)
        self._elements.add(feature.trigger_id)

        self._outputs[feature.output_id] = st.empty()
        self._elements.add(feature.output_id)

        previous = st.session_state.get(_VIEW_STATE_PREFIX + feature.output_id)
        if previous is not None:
            with self._outputs[feature.output_id].container():
                render_view(previous)

    @staticmethod
    def _input_widget(field: InputField) -> Optional[str]:
        if field.kind == "number":
            value = st.number_input(
                field.label,
                key=field.id,
                value=float(field.default) if field.default else None,
                min_value=0.0,
                placeholder=field.placeholder or None,
            )
            return "" if value is None else str(value)
        return st.text_input(
            field.label,
            key=field.id,
            value=field.default or "",
            placeholder=field.placeholder,
        )

    # ------------------------------------------------------------------
    # Page interface
    # ------------------------------------------------------------------

    def has_element(self, element_id: str) -> bool:
        return element_id in self._elements

    def read_value(self, element_id: str) -> Optional[str]:
        if element_id not in self._elements:
            return None
        return self._values.get(element_id) or ""

    def show(self, output_id: str, view: View) -> None:
        slot = self._outputs.get(output_id)
        if slot is None:
            return
        # Loading views are transient; a rerun mid-request must not resurrect them.
        if not view.is_loading:
            st.session_state[_VIEW_STATE_PREFIX + output_id] = view
        with slot.container():  # type: ignore[attr-defined]
            render_view(view)

    def bind(self, trigger_id: str, handler: Handler) -> None:
        self._handlers[trigger_id] = handler

    def dispatch(self) -> None:
        """Run the handlers of the triggers clicked on this rerun."""
        for trigger_id in self._clicked:
            handler = self._handlers.get(trigger_id)
            if handler is None:
                logger.debug("No handler bound to %s", trigger_id)
                continue
            handler()
        self._clicked.clear()
