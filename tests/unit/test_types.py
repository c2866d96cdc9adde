import pytest

from selectorkit.exceptions import (
    ConfigError,
    DuplicateError,
    OrderError,
    SelectorError,
    SelectorKitError,
    SerializationError,
)
from selectorkit.types import Combinator, PartCategory


@pytest.mark.unit
class TestEnums:
    def test_part_category_ranks(self) -> None:
        assert [int(c) for c in PartCategory] == [1, 2, 3, 4, 5, 6]
        assert PartCategory.ELEMENT < PartCategory.PSEUDO_ELEMENT

    def test_combinator_values(self) -> None:
        assert Combinator.DESCENDANT.value == " "
        assert Combinator.ADJACENT_SIBLING.value == "+"
        assert Combinator.GENERAL_SIBLING.value == "~"
        assert Combinator.CHILD.value == ">"


@pytest.mark.unit
class TestExceptions:
    def test_hierarchy(self) -> None:
        for exc in (SelectorError, SerializationError, ConfigError):
            assert issubclass(exc, SelectorKitError)
        assert issubclass(DuplicateError, SelectorError)
        assert issubclass(OrderError, SelectorError)

    def test_base_catches_all(self) -> None:
        with pytest.raises(SelectorKitError):
            raise OrderError("wrong order")
