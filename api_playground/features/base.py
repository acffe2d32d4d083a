"""Feature configuration and the single handler that runs every feature.

A feature is data: which trigger it listens to, which inputs it reads, how
it validates them, which fetch stages it runs and how it renders the result.
``FeatureHandler`` applies the same contract to all of them:

    Idle -> Validating -> (Error | Loading) -> (Rendered | Error)
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Callable, Dict, Mapping, Optional, Tuple

import requests

from api_playground.config.settings import SETTINGS, AppSettings
from api_playground.errors import InputError

from .page import Page
from .views import DEFAULT_LOADING_MESSAGE, View, error_view, loading_view

logger = logging.getLogger(__name__)

Params = Dict[str, Any]
Validator = Callable[[Mapping[str, Optional[str]], AppSettings], Params]
Renderer = Callable[[Any, Params], View]


@dataclass(frozen=True)
class InputField:
    """A user-editable field read when the trigger fires.

    ``default`` is used only when the page has no such field at all; an
    empty field on the page is passed through as ``""``.
    """

    id: str
    label: str
    kind: str = "text"  # "text" or "number"
    default: Optional[str] = None
    placeholder: str = ""


@dataclass(frozen=True)
class FetchContext:
    """Everything a fetch stage may need."""

    params: Params
    previous: Any
    settings: AppSettings
    session: requests.Session | None = None

    def transport(self) -> Dict[str, Any]:
        """Keyword arguments accepted by every ``fetch_*`` function."""
        return {"timeout": self.settings.http_timeout_sec, "session": self.session}


@dataclass(frozen=True)
class Stage:
    fetch: Callable[[FetchContext], Any]
    loading_message: str = DEFAULT_LOADING_MESSAGE


@dataclass(frozen=True)
class FeatureConfig:
    key: str
    title: str
    trigger_id: str
    output_id: str
    stages: Tuple[Stage, ...]
    render: Renderer
    error_message: str
    validate: Optional[Validator] = None
    inputs: Tuple[InputField, ...] = ()
    button_label: str = "Go"
    description: str = ""


class FeatureHandler:
    """Run one feature invocation against a page. Never raises."""

    def __init__(
        self,
        config: FeatureConfig,
        page: Page,
        settings: AppSettings = SETTINGS,
        session: requests.Session | None = None,
    ):
        self.config = config
        self.page = page
        self.settings = settings
        self.session = session

    def __call__(self) -> View | None:
        config = self.config
        if not self.page.has_element(config.output_id):
            logger.debug("%s: output %s not on page, nothing to do", config.key, config.output_id)
            return None

        values = {field.id: self._read(field) for field in config.inputs}

        try:
            params = config.validate(values, self.settings) if config.validate else {}
        except InputError as exc:
            logger.info("%s: rejected input: %s", config.key, exc)
            return self._show(error_view(str(exc)))

        try:
            result: Any = None
            for index, stage in enumerate(config.stages, start=1):
                self._show(loading_view(stage.loading_message))
                logger.debug("%s: stage %d/%d", config.key, index, len(config.stages))
                result = stage.fetch(
                    FetchContext(params=params, previous=result, settings=self.settings, session=self.session)
                )
            view = config.render(result, params)
        except Exception as exc:  # pylint: disable=broad-except
            logger.error("%s failed: %s", config.key, exc, exc_info=True)
            return self._show(error_view(config.error_message))

        logger.debug("%s: rendered", config.key)
        return self._show(view)

    # ------------------------------------------------------------------

    def _read(self, field: InputField) -> Optional[str]:
        value = self.page.read_value(field.id)
        return field.default if value is None else value

    def _show(self, view: View) -> View:
        self.page.show(self.config.output_id, view)
        return view
