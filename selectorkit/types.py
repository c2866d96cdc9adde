"""Enums and type aliases for selectorkit."""

from enum import IntEnum, StrEnum


class PartCategory(IntEnum):
    ELEMENT = 1
    ID = 2
    CLASS = 3
    ATTRIBUTE = 4
    PSEUDO_CLASS = 5
    PSEUDO_ELEMENT = 6


class Combinator(StrEnum):
    DESCENDANT = " "
    ADJACENT_SIBLING = "+"
    GENERAL_SIBLING = "~"
    CHILD = ">"
