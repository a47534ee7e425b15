"""Type and annotation utility functions.

This module provides helper functions for working with classes as annotation kinds (qualified
names and ancestor chains) and with `typing.Annotated` hints (union checks and extraction of the
metadata carried by an hint).
"""
import inspect
import sys
from types import UnionType
from typing import Annotated, Any, Union, get_args, get_origin, get_type_hints

type Annotation = Any


def qualified_name(kind: type) -> str:
    """The fully-qualified name of a class: its module followed by its qualified name.

    Examples:
        >>> qualified_name(OrderedDict)
        'collections.OrderedDict'

    Args:
        kind (type): The class to name.

    Returns:
        str: The fully-qualified name of the class.
    """
    return f"{kind.__module__}.{kind.__qualname__}"


def kind_ancestors(kind: type) -> tuple[type, ...]:
    """The ancestor chain of a class, starting at the class itself and ending with the root-most
    ancestor. `object` is never part of the chain.

    Args:
        kind (type): The class to walk.

    Returns:
        tuple[type, ...]: The class and its ancestors in method resolution order.
    """
    return tuple(k for k in kind.__mro__ if k is not object)


def declares_member(kind: type, name: str) -> bool:
    """Check if a class declares a member, either as an attribute visible on the class (method,
    property, slot, class attribute) or as an annotated field of the class or of one of its
    ancestors.

    Args:
        kind (type): The class to inspect.
        name (str): The member name.

    Returns:
        bool: Whether the member is declared.
    """
    try:
        inspect.getattr_static(kind, name)
        return True
    except AttributeError:
        pass
    return any(name in inspect.get_annotations(k) for k in kind_ancestors(kind))


def is_union(annotation: Annotation) -> bool:
    """Check if an annotation is a union. A union is a Union or UnionType type.

    Args:
        annotation (Any): The annotation to check.

    Returns:
        bool: Whether the annotation is a union.
    """
    o = get_origin(annotation) or annotation
    return o in (Union, UnionType)


def is_annotated(annotation: Annotation) -> bool:
    """Check if an annotation is an `Annotated[T, ...]` hint.

    Args:
        annotation (Any): The annotation to check.

    Returns:
        bool: Whether the annotation carries metadata.
    """
    return get_origin(annotation) is Annotated


def annotated_metadata(annotation: Annotation) -> tuple[Any, ...]:
    """Get the metadata objects of an annotation. The metadata of an `Annotated` nested in a
    union (e.g. `Annotated[int, Range(0, 1)] | None`) is collected too, in the order of the union.

    Args:
        annotation (Any): The annotation to read.

    Returns:
        tuple[Any, ...]: The metadata objects, empty if the annotation carries none.
    """
    if is_annotated(annotation):
        return annotation.__metadata__
    if is_union(annotation):
        return tuple(m for arg in get_args(annotation) for m in annotated_metadata(arg))
    return ()


def resolve_member_hints(owner: type) -> dict[str, Annotation]:
    """Get the type hints of a class, including the ones inherited from its bases, keeping the
    `Annotated` metadata. See typing.get_type_hints.

    Args:
        owner (type): The class to read.

    Returns:
        dict[str, Any]: A dictionary of type hints.
    """
    return get_type_hints(owner, include_extras=True)


def resolve_member_hint(owner: type, member: str, hint: Annotation) -> Annotation:
    """Resolve the hint of a single member declared by a class. String hints (forward references
    or postponed annotations) are evaluated against the module of the class and its namespace,
    independently of the hints of the other members.

    Args:
        owner (type): The class declaring the member.
        member (str): The member name.
        hint (Any): The raw hint, as found in the class annotations.

    Raises:
        NameError: Raised if the hint refers to a name that is not defined at runtime.

    Returns:
        Any: The resolved hint, keeping the `Annotated` metadata.
    """
    if not isinstance(hint, str):
        return hint
    module = sys.modules.get(owner.__module__)
    single = type(owner.__name__, (), {"__annotations__": {member: hint}})
    return get_type_hints(
        single,
        globalns=vars(module) if module is not None else {},
        localns=dict(vars(owner)),
        include_extras=True,
    )[member]


def resolve_member_hints_by_member(owner: type) -> dict[str, Annotation]:
    """Like resolve_member_hints, but each hint is resolved on its own, so that a hint referring to
    a name only defined for type checkers does not prevent resolving the others. Such hints are
    left out.

    Args:
        owner (type): The class to read.

    Returns:
        dict[str, Any]: A dictionary of the resolvable type hints.
    """
    hints: dict[str, Annotation] = {}
    for c in reversed(owner.__mro__):
        for member, hint in inspect.get_annotations(c).items():
            try:
                hints[member] = resolve_member_hint(c, member, hint)
            except NameError:
                hints.pop(member, None)
    return hints
