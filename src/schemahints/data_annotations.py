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
Description: Data annotations: validation and documentation metadata attached to classes and
            members. The extractors never import this module, they recognize these kinds by
            their qualified names, so any library may provide kinds of the same names and
            shapes, or subclass these ones.
🦙

Examples:
    >>> @attach(Display(name="Person"))
    ... @dataclass
    ... class Person:
    ...     age: Annotated[int, Required(), Range(0, 120)]
    ...     email: Annotated[str, EmailAddress()]
"""

__author__ = "Sébastien Gachoud"
__license__ = "MIT"

from dataclasses import dataclass, field
from enum import Enum
from typing import Any


class DataTypeKind(Enum):
    """The data types a DataType annotation can declare."""

    Custom = "Custom"
    DateTime = "DateTime"
    Date = "Date"
    Time = "Time"
    Duration = "Duration"
    PhoneNumber = "PhoneNumber"
    Currency = "Currency"
    Text = "Text"
    Html = "Html"
    MultilineText = "MultilineText"
    EmailAddress = "EmailAddress"
    Password = "Password"
    Url = "Url"
    ImageUrl = "ImageUrl"
    CreditCard = "CreditCard"
    PostalCode = "PostalCode"
    Upload = "Upload"


@dataclass(frozen=True)
class ValidationAnnotation:
    """Base class of the annotations that constrain values."""

    error_message: str | None = field(default=None, kw_only=True)


@dataclass(frozen=True)
class Required(ValidationAnnotation):
    """The member must have a value."""

    allow_empty_strings: bool = False


@dataclass(frozen=True)
class Range(ValidationAnnotation):
    """Inclusive numeric bounds. Bounds may be numbers or numeric strings."""

    minimum: Any
    maximum: Any


@dataclass(frozen=True)
class StringLength(ValidationAnnotation):
    """Bounds of the length of a string."""

    maximum_length: int
    minimum_length: int = 0


@dataclass(frozen=True)
class MinLength(ValidationAnnotation):
    """Minimum length of a string or collection."""

    length: int


@dataclass(frozen=True)
class MaxLength(ValidationAnnotation):
    """Maximum length of a string or collection."""

    length: int


@dataclass(frozen=True)
class RegularExpression(ValidationAnnotation):
    """The value must match a regular expression."""

    pattern: str


@dataclass(frozen=True)
class DataType(ValidationAnnotation):
    """Declares the kind of data a member holds. Custom data types are given as strings."""

    data_type: DataTypeKind | str


@dataclass(frozen=True)
class EmailAddress(DataType):
    data_type: DataTypeKind | str = field(default=DataTypeKind.EmailAddress, init=False)


@dataclass(frozen=True)
class Phone(DataType):
    data_type: DataTypeKind | str = field(default=DataTypeKind.PhoneNumber, init=False)


@dataclass(frozen=True)
class Url(DataType):
    data_type: DataTypeKind | str = field(default=DataTypeKind.Url, init=False)


@dataclass(frozen=True)
class EnumDataType(DataType):
    """The value must be a member of an enum."""

    data_type: DataTypeKind | str = field(default=DataTypeKind.Custom, init=False)
    enum_type: type


@dataclass(frozen=True)
class Display:
    """Display texts of a class or member."""

    name: str | None = None
    short_name: str | None = None
    description: str | None = None
    prompt: str | None = None
    group_name: str | None = None
    order: int | None = None

    def get_name(self) -> str | None:
        return self.name

    def get_short_name(self) -> str | None:
        return self.short_name if self.short_name is not None else self.name

    def get_description(self) -> str | None:
        return self.description

    def get_prompt(self) -> str | None:
        return self.prompt


@dataclass(frozen=True)
class DisplayName:
    """Legacy display name. Display takes precedence when it provides a name."""

    display_name: str = ""


@dataclass(frozen=True)
class Description:
    """Legacy description. Display takes precedence when it provides a description."""

    description: str = ""


__all__ = [
    "DataTypeKind",
    "ValidationAnnotation",
    "Required",
    "Range",
    "StringLength",
    "MinLength",
    "MaxLength",
    "RegularExpression",
    "DataType",
    "EmailAddress",
    "Phone",
    "Url",
    "EnumDataType",
    "Display",
    "DisplayName",
    "Description",
]
