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
Created: 2026-10-19
Description: Built-in kinds of the accessor registry. This module registers, for every
            constraint slot, the data annotation kind it recognizes (see
            schemahints.data_annotations), the members read from it and their converters.
            Kinds are named, never imported.
🦙
"""

from .accessors import AccessorRegistry, ConstraintSlot, accessor_registry
from .converters import (
    class_converter,
    float_converter,
    integer_converter,
    name_converter,
    optional,
    string_converter,
)
from ...classes.constants import ConstantNamespace

_PREFIX = "schemahints.data_annotations."


class KindNames(ConstantNamespace):
    """Fully-qualified names of the recognized annotation kinds."""

    REQUIRED: str = _PREFIX + "Required"
    RANGE: str = _PREFIX + "Range"
    STRING_LENGTH: str = _PREFIX + "StringLength"
    MIN_LENGTH: str = _PREFIX + "MinLength"
    MAX_LENGTH: str = _PREFIX + "MaxLength"
    ENUM_DATA_TYPE: str = _PREFIX + "EnumDataType"
    REGULAR_EXPRESSION: str = _PREFIX + "RegularExpression"
    URL: str = _PREFIX + "Url"
    PHONE: str = _PREFIX + "Phone"
    EMAIL_ADDRESS: str = _PREFIX + "EmailAddress"
    DATA_TYPE: str = _PREFIX + "DataType"
    DISPLAY: str = _PREFIX + "Display"
    DISPLAY_NAME: str = _PREFIX + "DisplayName"
    DESCRIPTION: str = _PREFIX + "Description"


class Formats(ConstantNamespace):
    """JSON schema format tags."""

    uri: str = "uri"
    date: str = "date"
    time: str = "time"
    date_time: str = "date-time"
    email: str = "email"
    phone: str = "phone"


class DataTypeFormats(ConstantNamespace):
    """Format tag of each data type name. Other data types have no format."""

    Url: str = Formats.uri
    Date: str = Formats.date
    Time: str = Formats.time
    DateTime: str = Formats.date_time
    EmailAddress: str = Formats.email
    PhoneNumber: str = Formats.phone


def register_known_kinds(registry: AccessorRegistry) -> AccessorRegistry:
    """Register the built-in kinds on a registry, replacing the kinds registered for the same
    slots.

    Args:
        registry (AccessorRegistry): The registry to populate.

    Returns:
        AccessorRegistry: The same registry.
    """
    optional_string = optional(string_converter)

    registry.register_kind(ConstraintSlot.REQUIRED, KindNames.REQUIRED)
    registry.register_kind(
        ConstraintSlot.RANGE,
        KindNames.RANGE,
        members=("minimum", "maximum"),
        converters={"minimum": float_converter, "maximum": float_converter},
    )
    registry.register_kind(
        ConstraintSlot.STRING_LENGTH,
        KindNames.STRING_LENGTH,
        members=("maximum_length",),
        optional_members=("minimum_length",),
        converters={
            "maximum_length": integer_converter,
            "minimum_length": integer_converter,
        },
    )
    registry.register_kind(
        ConstraintSlot.MIN_LENGTH,
        KindNames.MIN_LENGTH,
        members=("length",),
        converters={"length": integer_converter},
    )
    registry.register_kind(
        ConstraintSlot.MAX_LENGTH,
        KindNames.MAX_LENGTH,
        members=("length",),
        converters={"length": integer_converter},
    )
    registry.register_kind(
        ConstraintSlot.ENUM_DATA_TYPE,
        KindNames.ENUM_DATA_TYPE,
        members=("enum_type",),
        converters={"enum_type": optional(class_converter)},
    )
    registry.register_kind(
        ConstraintSlot.PATTERN,
        KindNames.REGULAR_EXPRESSION,
        members=("pattern",),
        converters={"pattern": optional_string},
    )
    registry.register_kind(ConstraintSlot.URL, KindNames.URL)
    registry.register_kind(ConstraintSlot.PHONE, KindNames.PHONE)
    registry.register_kind(ConstraintSlot.EMAIL_ADDRESS, KindNames.EMAIL_ADDRESS)
    registry.register_kind(
        ConstraintSlot.DATA_TYPE,
        KindNames.DATA_TYPE,
        members=("data_type",),
        converters={"data_type": name_converter},
    )
    registry.register_kind(
        ConstraintSlot.DISPLAY,
        KindNames.DISPLAY,
        members={"name": "get_name", "description": "get_description"},
        converters={"name": optional_string, "description": optional_string},
    )
    registry.register_kind(
        ConstraintSlot.DISPLAY_NAME,
        KindNames.DISPLAY_NAME,
        members=("display_name",),
        converters={"display_name": optional_string},
    )
    registry.register_kind(
        ConstraintSlot.DESCRIPTION,
        KindNames.DESCRIPTION,
        members=("description",),
        converters={"description": optional_string},
    )
    return registry


# Register the built-in kinds on the default registry.
register_known_kinds(accessor_registry())
