"""Where annotation objects come from.

Annotation objects are attached to a class with the `attach` decorator, and to a member either
as `Annotated` metadata of its type hint, in the metadata of a dataclass field under the
"schema_attributes" key, or as `Annotated` metadata of a property's return hint:

    >>> @attach(Description("A person."))
    ... @dataclass
    ... class Person:
    ...     age: Annotated[int, Range(0, 120)]
    ...     name: str = field(default="", metadata={"schema_attributes": (Required(),)})
    ...
    ...     @property
    ...     def initials(self) -> Annotated[str, MaxLength(3)]: ...
"""

import dataclasses
import inspect
import logging
from collections.abc import Callable, Sequence
from typing import Any, Protocol, get_type_hints, runtime_checkable

from ..utilities import (
    Annotation,
    annotated_metadata,
    resolve_member_hints,
    resolve_member_hints_by_member,
)

logger = logging.getLogger(__name__)

ATTRIBUTES_KEY = "__schema_attributes__"
METADATA_KEY = "schema_attributes"


def attach[T: type](*attributes: Any) -> Callable[[T], T]:
    """Class decorator attaching annotation objects to a class. Stacked decorators keep their
    reading order: the top-most decorator's objects come first.

    Args:
        *attributes (Any): The annotation objects.

    Returns:
        Callable[[T], T]: The decorator.
    """

    def decorator(cls: T) -> T:
        own = vars(cls).get(ATTRIBUTES_KEY, ())
        setattr(cls, ATTRIBUTES_KEY, tuple(attributes) + tuple(own))
        return cls

    return decorator


@runtime_checkable
class AttributeSource(Protocol):
    """Provides the annotation objects attached to a class or to one of its members."""

    def get_attributes(
        self, owner: type, member: str | None = None, inherit: bool = True
    ) -> Sequence[Any]:
        """Get the annotation objects of a class (member is None) or of one of its members, in
        precedence order. Must not have side effects."""
        ...


class ReflectionAttributeSource:
    """Default attribute source, reading the objects attached with `attach`, `Annotated` hints,
    dataclass field metadata and property return hints."""

    def get_attributes(
        self, owner: type, member: str | None = None, inherit: bool = True
    ) -> Sequence[Any]:
        if member is None:
            return self.type_attributes(owner, inherit)
        return self.member_attributes(owner, member, inherit)

    def type_attributes(self, owner: type, inherit: bool = True) -> tuple[Any, ...]:
        """The objects attached to a class and, if `inherit`, to its bases. The class's own
        objects come first, then its bases' in method resolution order."""
        classes = owner.__mro__ if inherit else (owner,)
        return tuple(a for c in classes for a in vars(c).get(ATTRIBUTES_KEY, ()))

    def member_attributes(
        self, owner: type, member: str, inherit: bool = True
    ) -> tuple[Any, ...]:
        """The objects attached to a member of a class. An unknown member has none."""
        found: list[Any] = []

        hints = self._member_hints(owner, inherit)
        if member in hints:
            found.extend(annotated_metadata(hints[member]))

        if dataclasses.is_dataclass(owner):
            own = inspect.get_annotations(owner)
            for f in dataclasses.fields(owner):
                if f.name == member and (inherit or f.name in own):
                    found.extend(f.metadata.get(METADATA_KEY, ()))

        prop = self._property(owner, member, inherit)
        if prop is not None and prop.fget is not None:
            found.extend(annotated_metadata(self._return_hint(prop.fget)))

        return tuple(found)

    @staticmethod
    def _member_hints(owner: type, inherit: bool) -> dict[str, Annotation]:
        try:
            hints = resolve_member_hints(owner)
        except NameError as e:
            # Only the members whose own hint is unresolvable are left out.
            logger.debug("Could not resolve the hints of '%s': %s", owner.__qualname__, e)
            hints = resolve_member_hints_by_member(owner)
        if inherit:
            return hints
        own = inspect.get_annotations(owner)
        return {k: v for k, v in hints.items() if k in own}

    @staticmethod
    def _property(owner: type, member: str, inherit: bool) -> property | None:
        if inherit:
            try:
                candidate = inspect.getattr_static(owner, member)
            except AttributeError:
                return None
        else:
            candidate = vars(owner).get(member)
        return candidate if isinstance(candidate, property) else None

    @staticmethod
    def _return_hint(getter: Callable[..., Any]) -> Annotation:
        try:
            return get_type_hints(getter, include_extras=True).get("return")
        except NameError:
            return inspect.get_annotations(getter).get("return")


def default_attribute_source() -> AttributeSource:
    """The attribute source used when none is given."""
    return ReflectionAttributeSource()
