"""Errors raised while reading schema metadata out of annotation objects.

Finding no annotation is never an error; these only signal annotation kinds that do not have
the expected shape or hold values of the wrong type.
"""

from ..errors import TypingError


class AttributeMetadataError(TypingError):
    """Signals an error while extracting metadata from an annotation object."""


class ShapeMismatchError(AttributeMetadataError):
    """Signals a matched annotation kind that does not declare the members expected for its
    slot."""


class ConversionError(AttributeMetadataError):
    """Signals an annotation member value that cannot be converted to the expected type."""
