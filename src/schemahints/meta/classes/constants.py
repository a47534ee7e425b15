"""
MIT License

Copyright (c) 2025 Sébastien Gachoud

Permission is hereby granted, free of charge, to any person obtaining a copy
of this software and associated documentation files (the "Software"), to deal
in the Software without restriction, including without limitation the rights
to use, copy, modify, merge, publish, distribute, sublicense, and/or sell
copies of the Software, and to permit persons to whom the Software is
furnished to do so, subject to the following conditions:

The above copyright notice and this permission notice shall be included in all
copies or substantial portions of the Software.

THE SOFTWARE IS PROVIDED "AS IS", WITHOUT WARRANTY OF ANY KIND, EXPRESS OR
IMPLIED, INCLUDING BUT NOT LIMITED TO THE WARRANTIES OF MERCHANTABILITY,
FITNESS FOR A PARTICULAR PURPOSE AND NONINFRINGEMENT. IN NO EVENT SHALL THE
AUTHORS OR COPYRIGHT HOLDERS BE LIABLE FOR ANY CLAIM, DAMAGES OR OTHER
LIABILITY, WHETHER IN AN ACTION OF CONTRACT, TORT OR OTHERWISE, ARISING FROM,
OUT OF OR IN CONNECTION WITH THE SOFTWARE OR THE USE OR OTHER DEALINGS IN THE
SOFTWARE.

-------------------------------------------------------------------------------

Author: Sébastien Gachoud
Created: 2025-07-11
Updated: 2026-10-19
Description: This module provides tools to create namespaces (class) of constants. Constant
            values are checked against their annotation, they are never coerced.
🦙
"""

__author__ = "Sébastien Gachoud"
__license__ = "MIT"

import inspect
from collections.abc import Iterator
from typing import Any, NoReturn, Callable, ClassVar, get_origin

from ...abstract.exceptions.traced_exceptions import TracedException


class ConstantsInstantiationError(TracedException):
    """Instantiation error of a Constants class."""


class ConstantsCompositionError(TracedException):
    """Composition error of a Constants class."""


class ConstantsModificationError(TracedException):
    """Modification error of a Constants class."""


def _verify_functions(name: str, namespace: dict[str, Any]) -> None:
    """Verify that no disalowed function is added.
    Disallowed functions are __new__ and __init__.

    Args:
        name (str): name of the class.
        namespace (dict[str, Any]): namespace of the class.

    Raises:
        ConstantsCompositionError: Raised when a disallowed function is added.
    """
    if "__init__" in namespace or "__new__" in namespace:
        raise ConstantsCompositionError(
            f"Constant class '{name}' is disallowed to have __new__ or __init__"
            " method since it shall never be instantiated."
        )


def _instantiation_error(name: str) -> Callable[..., NoReturn]:
    """Helper to format an error message when trying to instantiate a Constants class.

    Args:
        name (str): name of the class.

    Returns:
        Callable[..., NoReturn]: A callable that throws an instantiation error when called.
    """

    def f(*_: Any, **__: Any) -> NoReturn:
        raise ConstantsInstantiationError(
            f"Cannot instantiate constant class '{name}'. Constant class cannot be instantiated."
        )

    return f


def _runtime_type(annotation: Any) -> type | None:
    """The class a constant value must be an instance of, or None when the annotation cannot be
    checked at runtime (strings, ClassVar, Literal, ...)."""
    if isinstance(annotation, type):
        return annotation
    origin = get_origin(annotation)
    if isinstance(origin, type):
        return origin
    return None


def _verify_values(cls: type, annotations: dict[str, Any], constants: tuple[str, ...]) -> None:
    """Verify that no annotated constant value is missing and that every value matches its
    annotation.

    Args:
        cls (type): the created class.
        annotations (dict[str, Any]): the annotations declared by the class itself.
        constants (tuple[str, ...]): the names of the constants declared by the class itself.

    Raises:
        ConstantsCompositionError: Raised when a value is missing or of the wrong type.
    """
    for key in constants:
        if key not in vars(cls):
            raise ConstantsCompositionError(
                f"Attribute '{key}' needs a value in constant class '{cls.__name__}'.",
                constant=key,
            )
        expected = _runtime_type(annotations[key])
        value = vars(cls)[key]
        if expected is not None and not isinstance(value, expected):
            raise ConstantsCompositionError(
                f"Value {value!r} of constant '{key}' in class '{cls.__name__}' is not of type"
                f" {annotations[key]}.",
                constant=key,
            )


class ConstantsMetaclass(type):
    __constants__: tuple[str, ...]

    def __new__(
        mcs,
        name: str,
        bases: tuple[type, ...],
        namespace: dict[str, Any],
        /,
        allow_private: bool = False,
        **kwargs: Any,
    ) -> Any:

        # verify that no function is added.
        _verify_functions(name, namespace)

        # add an __new__ method that throws an error.
        namespace["__new__"] = _instantiation_error(name)

        cls = super().__new__(mcs, name, bases, namespace, **kwargs)

        annotations = inspect.get_annotations(cls)
        own = tuple(
            k
            for k in annotations
            if k != "__constants__" and (allow_private or not k.startswith("_"))
        )

        # inherited constants come first, in declaration order.
        constants: list[str] = []
        for base in reversed(cls.__mro__[1:]):
            if isinstance(base, ConstantsMetaclass):
                constants.extend(k for k in base.__constants__ if k not in constants)
        constants.extend(k for k in own if k not in constants)

        _verify_values(cls, annotations, own)

        type.__setattr__(cls, "__constants__", tuple(constants))
        return cls

    def __setattr__(cls, name: str, value: Any) -> NoReturn:
        raise ConstantsModificationError(
            f"Attribute '{name}' of class '{cls.__name__}' cannot be modified. Reason: Constant"
            " class cannot be modified."
        )

    def __delattr__(cls, name: str) -> NoReturn:
        raise ConstantsModificationError(
            f"Attribute '{name}' of class '{cls.__name__}' cannot be deleted. Reason: Constant"
            " class cannot be modified."
        )

    def __repr__(cls) -> str:
        """Returns a string representation of the class."""
        constants = ", ".join(f"{k}={getattr(cls, k)!r}" for k in cls.__constants__)
        return f"<ConstantNamespace {cls.__name__}({constants})>"

    def __iter__(cls) -> Iterator[str]:
        return iter(cls.__constants__)

    def __contains__(cls, name: object) -> bool:
        """Check if a constant name exists."""
        return name in cls.__constants__

    def __len__(cls) -> int:
        """Return the number of constants."""
        return len(cls.__constants__)

    def items(cls) -> list[tuple[str, Any]]:
        """Return all constants as (name, value) pairs."""
        return [(k, getattr(cls, k)) for k in cls.__constants__]

    def keys(cls) -> tuple[str, ...]:
        """Return all constant names."""
        return cls.__constants__

    def values(cls) -> tuple[Any, ...]:
        """Return all constant values."""
        return tuple(getattr(cls, k) for k in cls.__constants__)

    def get(cls, name: str, default: Any = None) -> Any:
        """Get a constant value with optional default. Only constants are looked up."""
        if name not in cls.__constants__:
            return default
        return getattr(cls, name)


class ConstantNamespace(metaclass=ConstantsMetaclass, allow_private=False):
    """Base class to create namespaces (class) of constants.
    Examples:
        >>> class Formats(ConstantNamespace):
        ...    A = 1 # this is not a constant. It needs annotation.
        ...    _A: str = "a" # this is not a constant unless allow_private=True.
        ...    uri: str = "uri" # this is a constant.
        ...    date: str = 3 # raises ConstantsCompositionError, values are not coerced.

        >>> Formats.uri
        'uri'

        >>> Formats.uri = "url" # raises ConstantsModificationError.

        >>> Formats.get("items") # None, only constants are looked up.
    """

    __constants__: ClassVar[tuple[str, ...]]
