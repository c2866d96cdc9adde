"""Stateless entry points that start a fresh selector per call."""

from __future__ import annotations

from selectorkit.css.selector import Selector
from selectorkit.types import Combinator


class CssSelectorBuilder:
    """Facade over :class:`Selector`; holds no state between calls."""

    def element(self, name: str) -> Selector:
        return Selector().element(name)

    def id(self, name: str) -> Selector:
        return Selector().id(name)

    def class_(self, name: str) -> Selector:
        return Selector().class_(name)

    def attribute(self, expr: str) -> Selector:
        return Selector().attribute(expr)

    attr = attribute

    def pseudo_class(self, name: str) -> Selector:
        return Selector().pseudo_class(name)

    def pseudo_element(self, name: str) -> Selector:
        return Selector().pseudo_element(name)

    def combine(
        self, left: Selector, combinator: Combinator | str, right: Selector
    ) -> Selector:
        return Selector().combine(left, combinator, right)


css_selector_builder = CssSelectorBuilder()
