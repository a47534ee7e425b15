"""
Re-export exceptions module for cleaner imports.

This allows: from schemahints.exceptions import TracedException
Instead of: from schemahints.abstract.exceptions.traced_exceptions import TracedException
"""

from .abstract.exceptions.traced_exceptions import (
    TracedException,
    format_details,
    format_exception,
)
from .meta.typing.errors import TypingError
from .meta.typing.attributes.errors import (
    AttributeMetadataError,
    ConversionError,
    ShapeMismatchError,
)

__all__ = [
    "TracedException",
    "format_details",
    "format_exception",
    "TypingError",
    "AttributeMetadataError",
    "ConversionError",
    "ShapeMismatchError",
]
