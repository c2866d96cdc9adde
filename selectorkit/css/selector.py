"""Chainable CSS selector builder."""

from __future__ import annotations

import structlog

from selectorkit.exceptions import DuplicateError, OrderError
from selectorkit.types import Combinator, PartCategory

logger = structlog.get_logger(__name__)

ORDER_MESSAGE = (
    "Selector parts should be arranged in the following order: "
    "element, id, class, attribute, pseudo-class, pseudo-element"
)


class Selector:
    """Accumulates compound selector parts and renders them as CSS text.

    Every part method mutates the selector and returns it, so calls chain::

        Selector().element("a").id("main").class_("nav").stringify()
        # => "a#main.nav"

    Ordering is gated on the category of the *first* part ever added: a part
    is rejected only when its rank is lower than that first rank.
    """

    def __init__(self) -> None:
        self.element_name: str | None = None
        self.id_name: str | None = None
        self.class_names: list[str] = []
        self.attribute_expr: str | None = None
        self.pseudo_class_names: list[str] = []
        self.pseudo_element_name: str | None = None
        self.combined_parts: tuple[str, str, str] | None = None
        self._ranks: list[PartCategory] = []

    @property
    def first_rank(self) -> PartCategory | None:
        return self._ranks[0] if self._ranks else None

    @property
    def last_rank(self) -> PartCategory | None:
        return self._ranks[-1] if self._ranks else None

    def element(self, name: str) -> Selector:
        self._check_unique(PartCategory.ELEMENT, self.element_name)
        if self._ranks:
            self._reject_order(PartCategory.ELEMENT)
        self.element_name = name
        self._ranks.append(PartCategory.ELEMENT)
        return self

    def id(self, name: str) -> Selector:
        self._check_unique(PartCategory.ID, self.id_name)
        self._check_order(PartCategory.ID)
        self.id_name = name
        self._ranks.append(PartCategory.ID)
        return self

    def class_(self, name: str) -> Selector:
        self._check_order(PartCategory.CLASS)
        self.class_names.append(name)
        self._ranks.append(PartCategory.CLASS)
        return self

    def attribute(self, expr: str) -> Selector:
        """Set the attribute expression; only one ``[...]`` slot exists."""
        self._check_order(PartCategory.ATTRIBUTE)
        self.attribute_expr = expr
        self._ranks.append(PartCategory.ATTRIBUTE)
        return self

    attr = attribute

    def pseudo_class(self, name: str) -> Selector:
        self._check_order(PartCategory.PSEUDO_CLASS)
        self.pseudo_class_names.append(name)
        self._ranks.append(PartCategory.PSEUDO_CLASS)
        return self

    def pseudo_element(self, name: str) -> Selector:
        self._check_unique(PartCategory.PSEUDO_ELEMENT, self.pseudo_element_name)
        self._check_order(PartCategory.PSEUDO_ELEMENT)
        self.pseudo_element_name = name
        self._ranks.append(PartCategory.PSEUDO_ELEMENT)
        return self

    def combine(
        self, left: Selector, combinator: Combinator | str, right: Selector
    ) -> Selector:
        """Join two selectors with a combinator.

        Any string is accepted; :class:`Combinator` lists the CSS symbols.
        """
        self.combined_parts = (left.stringify(), str(combinator), right.stringify())
        return self

    def stringify(self) -> str:
        if self.combined_parts is not None:
            left, combinator, right = self.combined_parts
            return f"{left} {combinator} {right}"

        pieces: list[str] = []
        if self.element_name:
            pieces.append(self.element_name)
        if self.id_name:
            pieces.append(f"#{self.id_name}")
        pieces.extend(f".{name}" for name in self.class_names)
        if self.attribute_expr:
            pieces.append(f"[{self.attribute_expr}]")
        pieces.extend(f":{name}" for name in self.pseudo_class_names)
        if self.pseudo_element_name:
            pieces.append(f"::{self.pseudo_element_name}")
        return "".join(pieces)

    def __str__(self) -> str:
        return self.stringify()

    def __repr__(self) -> str:
        return f"Selector({self.stringify()!r})"

    def _check_unique(self, category: PartCategory, current: str | None) -> None:
        if current:
            logger.debug("selector_part_duplicate", category=category.name.lower(), value=current)
            label = category.name.replace("_", " ").title().replace(" ", "")
            raise DuplicateError(f"{label} value should be unique")

    def _check_order(self, category: PartCategory) -> None:
        if self._ranks and self._ranks[0] > category:
            self._reject_order(category)

    def _reject_order(self, category: PartCategory) -> None:
        logger.debug(
            "selector_part_out_of_order",
            category=category.name.lower(),
            first_rank=int(self._ranks[0]),
        )
        raise OrderError(ORDER_MESSAGE)
