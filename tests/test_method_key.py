"""
Tests for MethodKey operation identity.
"""

import sys
from abc import abstractmethod
from pathlib import Path
from typing import List, TypeVar

import pytest

# Add parent directory to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from compositelib import Composite, MethodKey


class Document(Composite["Document"]):

    @abstractmethod
    def render(self) -> str:
        pass

    @abstractmethod
    def find(self, text: str, limit: int) -> List[str]:
        pass

    @abstractmethod
    def attach(self, other: "Document") -> None:
        pass

    def untyped(self, first, second=None):
        pass

    def variadic(self, name: str, *args, **kwargs):
        pass


class TestMethodKeyOf:
    """Test building keys from functions."""

    def test_self_is_dropped(self):
        assert MethodKey.of(Document.render) == MethodKey("render", ())

    def test_parameter_types_in_order(self):
        key = MethodKey.of(Document.find)
        assert key.name == "find"
        assert key.parameter_types == (str, int)
        assert key.parameter_count == 2

    def test_forward_reference_resolved(self):
        assert MethodKey.of(Document.attach).parameter_types == (Document,)

    def test_unannotated_parameters_are_object(self):
        assert MethodKey.of(Document.untyped).parameter_types == (object, object)

    def test_variadic_parameters_skipped(self):
        assert MethodKey.of(Document.variadic).parameter_types == (str,)

    def test_generic_element_parameter(self):
        """Composite.add is keyed by its element TypeVar."""
        key = MethodKey.of(Document.add)
        assert key.name == "add"
        assert key.parameter_count == 1
        assert isinstance(key.parameter_types[0], TypeVar)

    def test_return_type_not_part_of_key(self):
        def first(self, value: int) -> int:
            pass

        def second(self, value: int) -> str:
            pass

        second.__name__ = "first"
        assert MethodKey.of(first) == MethodKey.of(second)

    def test_declaring_class_not_part_of_key(self):
        """An override with the same signature has the same key."""
        class Report(Document):
            def render(self) -> str:
                return "report"

        assert MethodKey.of(Report.render) == MethodKey.of(Document.render)

    def test_unresolvable_annotation_kept_as_written(self):
        def lookup(self, item: "NoSuchType") -> None:
            pass

        assert MethodKey.of(lookup).parameter_types == ("NoSuchType",)


class TestMethodKeyValue:
    """Test value semantics."""

    def test_equality_and_hash(self):
        a = MethodKey("find", (str, int))
        b = MethodKey("find", (str, int))
        assert a == b
        assert hash(a) == hash(b)
        assert len({a, b}) == 1

    @pytest.mark.parametrize("other", [
        MethodKey("find", (int, str)),
        MethodKey("find", (str,)),
        MethodKey("search", (str, int)),
    ])
    def test_different_keys(self, other):
        assert MethodKey("find", (str, int)) != other

    def test_immutable(self):
        key = MethodKey("render")
        with pytest.raises(AttributeError):
            key.name = "other"

    def test_str(self):
        assert str(MethodKey.of(Document.find)) == "find(str, int)"
        assert str(MethodKey("render")) == "render()"
