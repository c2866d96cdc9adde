from selectorkit.css.facade import CssSelectorBuilder, css_selector_builder
from selectorkit.css.selector import Selector

__all__ = ["CssSelectorBuilder", "Selector", "css_selector_builder"]
