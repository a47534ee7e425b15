"""Tests for the type and annotation utility functions."""

from collections import OrderedDict
from dataclasses import dataclass
from typing import Annotated, Optional, Union

from schemahints.meta.typing.utilities import (
    annotated_metadata,
    declares_member,
    is_annotated,
    is_union,
    kind_ancestors,
    qualified_name,
    resolve_member_hints,
)


class Base:
    """Test"""

    declared: int
    value = 1

    def method(self):
        """Test"""

    @property
    def prop(self):
        """Test"""
        return 1


class Derived(Base):
    """Test"""

    class Inner:
        """Test"""


@dataclass
class Fields:
    """Test"""

    no_default: int
    with_default: int = 0


class Slotted:
    """Test"""

    __slots__ = ("slot",)


class TestKinds:
    """Test naming and walking classes."""

    def test_qualified_name(self):
        """Test the module and qualified name of classes."""
        assert qualified_name(OrderedDict) == "collections.OrderedDict"
        assert qualified_name(Derived.Inner) == f"{__name__}.Derived.Inner"

    def test_kind_ancestors_excludes_object(self):
        """Test that the chain starts at the class and never contains object."""
        assert kind_ancestors(Derived) == (Derived, Base)
        assert kind_ancestors(object) == ()

    def test_declares_member(self):
        """Test every way a member can be declared."""
        assert declares_member(Derived, "declared")
        assert declares_member(Derived, "value")
        assert declares_member(Derived, "method")
        assert declares_member(Derived, "prop")
        assert declares_member(Fields, "no_default")
        assert declares_member(Fields, "with_default")
        assert declares_member(Slotted, "slot")
        assert not declares_member(Derived, "missing")


class TestAnnotations:
    """Test reading Annotated hints."""

    def test_is_union(self):
        """Test is_union with both union syntaxes."""
        assert is_union(Union[int, str])
        assert is_union(int | None)
        assert is_union(Optional[int])
        assert not is_union(int)

    def test_is_annotated(self):
        """Test is_annotated."""
        assert is_annotated(Annotated[int, "meta"])
        assert not is_annotated(int)
        assert not is_annotated(Annotated[int, "meta"] | None)

    def test_annotated_metadata(self):
        """Test metadata extraction from plain and nested hints."""
        assert annotated_metadata(Annotated[int, "a", "b"]) == ("a", "b")
        assert annotated_metadata(int) == ()
        assert annotated_metadata(None) == ()
        assert annotated_metadata(Annotated[int, "a"] | None) == ("a",)
        assert annotated_metadata(Annotated[int, "a"] | Annotated[str, "b"]) == ("a", "b")

    def test_resolve_member_hints_keeps_extras_and_inheritance(self):
        """Test that inherited hints are resolved with their metadata."""

        class Parent:
            """Test"""

            a: Annotated[int, "parent"]

        class Child(Parent):
            """Test"""

            b: str

        hints = resolve_member_hints(Child)

        assert hints["a"] == Annotated[int, "parent"]
        assert hints["b"] is str
