"""Converters applied to the raw member values read out of annotation objects.

Every converter either returns a value of its target type or raises a ConversionError chained
to the original failure.
"""

import operator
from collections.abc import Callable
from enum import Enum
from typing import Any

from .errors import ConversionError

type Converter = Callable[[Any], Any]


def identity(value: Any) -> Any:
    """Return the value unchanged."""
    return value


def type_converter[T](c_type: type[T]) -> Callable[[Any], T]:
    """Create a type converter for a specific type.

    Args:
        c_type (type[T]): the type to convert to.

    Returns:
        Callable[[Any], T]: A function that converts a value to the specified type.
    """

    def converter(value: Any) -> T:
        if isinstance(value, c_type):
            return value
        try:
            return c_type(value)  # type: ignore
        except Exception as e:
            raise ConversionError(
                f"Could not convert '{value}' of type '{type(value)}' to '{c_type}'."
            ) from e

    return converter


# float() does not depend on the locale, "1.5" always parses to 1.5.
float_converter = type_converter(float)


def integer_converter(value: Any) -> int:
    """Convert an integral value to int. Booleans, floats and strings are refused.

    Raises:
        ConversionError: Raised if the value is not integral.
    """
    if isinstance(value, bool):
        raise ConversionError(f"Could not convert boolean '{value}' to 'int'.")
    try:
        return operator.index(value)
    except TypeError as e:
        raise ConversionError(
            f"Could not convert '{value}' of type '{type(value)}' to 'int'."
        ) from e


def string_converter(value: Any) -> str:
    """Accept strings only.

    Raises:
        ConversionError: Raised if the value is not a string.
    """
    if not isinstance(value, str):
        raise ConversionError(f"Expected a string, got '{value}' of type '{type(value)}'.")
    return value


def class_converter(value: Any) -> type:
    """Accept classes only.

    Raises:
        ConversionError: Raised if the value is not a class.
    """
    if not isinstance(value, type):
        raise ConversionError(f"Expected a class, got '{value}' of type '{type(value)}'.")
    return value


def name_converter(value: Any) -> str:
    """Convert a value to its name: the member name of an enum, the string itself, or `str()`
    of anything else.

    Raises:
        ConversionError: Raised if the value is None.
    """
    if value is None:
        raise ConversionError("Expected a named value, got 'None'.")
    if isinstance(value, Enum):
        return value.name
    return str(value)


def optional(converter: Converter) -> Converter:
    """Wrap a converter so that None is passed through unchanged.

    Args:
        converter (Converter): The converter for non-None values.

    Returns:
        Converter: The wrapped converter.
    """

    def optional_converter(value: Any) -> Any:
        if value is None:
            return None
        return converter(value)

    return optional_converter
