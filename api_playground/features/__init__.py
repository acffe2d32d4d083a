"""Feature handlers: one configuration per demo card, one shared handler.

Rendering here is DOM-free: handlers produce ``View`` objects and hand them to
a ``Page`` which decides how to display them (Streamlit widgets, an HTML
fragment, or an in-memory record in tests).
"""

from api_playground.features.base import FeatureConfig, FeatureHandler, FetchContext, InputField, Stage
from api_playground.features.page import MemoryPage, Page, render_html
from api_playground.features.registry import FEATURES, get_feature, setup_features
from api_playground.features.views import View

__all__ = [
    "FEATURES",
    "FeatureConfig",
    "FeatureHandler",
    "FetchContext",
    "InputField",
    "MemoryPage",
    "Page",
    "Stage",
    "View",
    "get_feature",
    "render_html",
    "setup_features",
]
