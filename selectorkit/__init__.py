"""CSS selector builder with small object and JSON helpers."""

from selectorkit.config.logging import configure_from_settings, setup_logging
from selectorkit.css import CssSelectorBuilder, Selector, css_selector_builder
from selectorkit.exceptions import DuplicateError, OrderError, SelectorKitError
from selectorkit.models.domain import Rectangle
from selectorkit.utils.serialization import from_json_text, to_json_text

__all__ = [
    "CssSelectorBuilder",
    "DuplicateError",
    "OrderError",
    "Rectangle",
    "Selector",
    "SelectorKitError",
    "configure_from_settings",
    "css_selector_builder",
    "from_json_text",
    "setup_logging",
    "to_json_text",
]
