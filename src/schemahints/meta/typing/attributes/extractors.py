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
Description: This module provides the constraint extractors. Given a class and optionally one of
            its members, each extractor finds the annotation object of its kind and returns the
            constraint it carries, ready to be written into a JSON schema:
            - required, range, string length, min length, max length, enum data type,
              pattern and format constraints;
            - display name and description texts.
            Member annotations are always searched first, the class annotations are only
            searched when the member has no annotation of the requested kind.
🦙
"""

__author__ = "Sébastien Gachoud"
__license__ = "MIT"

from dataclasses import dataclass
from functools import lru_cache

from .accessors import AccessorRegistry, ConstraintSlot, accessor_registry
from .known_kinds import DataTypeFormats, Formats
from .matching import MatchResult
from .sources import AttributeSource, default_attribute_source


@dataclass(frozen=True)
class ConstraintSet:
    """Every constraint extracted for a class or member. None means absent."""

    required: bool = False
    range: tuple[float, float] | None = None
    string_length: tuple[int, int] | None = None
    min_length: int | None = None
    max_length: int | None = None
    enum_data_type: type | None = None
    pattern: str | None = None
    format: str | None = None
    display_name: str | None = None
    description: str | None = None


class ConstraintExtractor:
    """Extracts constraints from the annotation objects provided by an attribute source, using
    the kinds and accessor bundles of an accessor registry.

    Examples:
        >>> @dataclass
        ... class Person:
        ...     age: Annotated[int, Range(0, 120)]
        >>> ConstraintExtractor().get_range(Person, "age")
        (0.0, 120.0)
    """

    def __init__(
        self,
        source: AttributeSource | None = None,
        registry: AccessorRegistry | None = None,
    ) -> None:
        self.source = source if source is not None else default_attribute_source()
        self.registry = registry if registry is not None else accessor_registry()

    def match(
        self, slot: ConstraintSlot, owner: type, member: str | None = None
    ) -> MatchResult | None:
        """Find the annotation object of the kind registered for a slot. The member's objects are
        searched first, then the owner's.

        Args:
            slot (ConstraintSlot): The slot to look up.
            owner (type): The class.
            member (str | None): The member name, or None to only search the class.

        Returns:
            MatchResult | None: The match, or None.
        """
        if member is not None:
            found = self.registry.find(slot, self.source.get_attributes(owner, member, True))
            if found is not None:
                return found
        return self.registry.find(slot, self.source.get_attributes(owner, None, True))

    def get_required(self, owner: type, member: str | None = None) -> bool:
        """Whether a Required annotation is present."""
        return self.match(ConstraintSlot.REQUIRED, owner, member) is not None

    def get_range(self, owner: type, member: str | None = None) -> tuple[float, float] | None:
        """The (minimum, maximum) bounds of a Range annotation, as floats.

        Raises:
            ConversionError: Raised if a bound is not numeric.
        """
        match = self.match(ConstraintSlot.RANGE, owner, member)
        if match is None:
            return None
        bundle = self.registry.get_bundle(ConstraintSlot.RANGE, match.matching_kind)
        return bundle.read(match.instance, "minimum"), bundle.read(match.instance, "maximum")

    def get_string_length(
        self, owner: type, member: str | None = None
    ) -> tuple[int, int] | None:
        """The (minimum, maximum) lengths of a StringLength annotation. The minimum is 0 for
        kinds that do not declare one."""
        match = self.match(ConstraintSlot.STRING_LENGTH, owner, member)
        if match is None:
            return None
        bundle = self.registry.get_bundle(ConstraintSlot.STRING_LENGTH, match.matching_kind)
        minimum = (
            bundle.read(match.instance, "minimum_length")
            if "minimum_length" in bundle
            else 0
        )
        return minimum, bundle.read(match.instance, "maximum_length")

    def get_min_length(self, owner: type, member: str | None = None) -> int | None:
        match = self.match(ConstraintSlot.MIN_LENGTH, owner, member)
        if match is None:
            return None
        return self.registry.read(ConstraintSlot.MIN_LENGTH, match, "length")

    def get_max_length(self, owner: type, member: str | None = None) -> int | None:
        match = self.match(ConstraintSlot.MAX_LENGTH, owner, member)
        if match is None:
            return None
        return self.registry.read(ConstraintSlot.MAX_LENGTH, match, "length")

    def get_enum_data_type(self, owner: type, member: str | None = None) -> type | None:
        """The enum class values are restricted to."""
        match = self.match(ConstraintSlot.ENUM_DATA_TYPE, owner, member)
        if match is None:
            return None
        return self.registry.read(ConstraintSlot.ENUM_DATA_TYPE, match, "enum_type")

    def get_pattern(self, owner: type, member: str | None = None) -> str | None:
        """The regular expression of a RegularExpression annotation."""
        match = self.match(ConstraintSlot.PATTERN, owner, member)
        if match is None:
            return None
        return self.registry.read(ConstraintSlot.PATTERN, match, "pattern")

    def get_format(self, owner: type, member: str | None = None) -> str | None:
        """The format tag of a member. Url, Phone and EmailAddress annotations are checked in
        that order, then the data type of a DataType annotation is mapped with DataTypeFormats.
        The class annotations are only checked when the member has none of these kinds.
        """
        levels = [self.source.get_attributes(owner, None, True)]
        if member is not None:
            levels.insert(0, self.source.get_attributes(owner, member, True))

        for candidates in levels:
            for slot, tag in (
                (ConstraintSlot.URL, Formats.uri),
                (ConstraintSlot.PHONE, Formats.phone),
                (ConstraintSlot.EMAIL_ADDRESS, Formats.email),
            ):
                if self.registry.find(slot, candidates) is not None:
                    return tag

            match = self.registry.find(ConstraintSlot.DATA_TYPE, candidates)
            if match is not None:
                return DataTypeFormats.get(
                    self.registry.read(ConstraintSlot.DATA_TYPE, match, "data_type")
                )
        return None

    def get_display(
        self, owner: type, member: str | None = None
    ) -> tuple[str | None, str | None] | None:
        """The (name, description) of a Display annotation."""
        match = self.match(ConstraintSlot.DISPLAY, owner, member)
        if match is None:
            return None
        bundle = self.registry.get_bundle(ConstraintSlot.DISPLAY, match.matching_kind)
        return bundle.read(match.instance, "name"), bundle.read(match.instance, "description")

    def get_display_name(self, owner: type, member: str | None = None) -> str | None:
        """The display name: the name of a Display annotation when it is not empty, otherwise
        the value of a DisplayName annotation."""
        display = self.get_display(owner, member)
        if display is not None and display[0]:
            return display[0]

        match = self.match(ConstraintSlot.DISPLAY_NAME, owner, member)
        if match is None:
            return None
        return self.registry.read(ConstraintSlot.DISPLAY_NAME, match, "display_name")

    def get_description(self, owner: type, member: str | None = None) -> str | None:
        """The description: the description of a Display annotation when it is not empty,
        otherwise the value of a Description annotation."""
        display = self.get_display(owner, member)
        if display is not None and display[1]:
            return display[1]

        match = self.match(ConstraintSlot.DESCRIPTION, owner, member)
        if match is None:
            return None
        return self.registry.read(ConstraintSlot.DESCRIPTION, match, "description")

    def get_constraints(self, owner: type, member: str | None = None) -> ConstraintSet:
        """Run every extractor for a class or member."""
        return ConstraintSet(
            required=self.get_required(owner, member),
            range=self.get_range(owner, member),
            string_length=self.get_string_length(owner, member),
            min_length=self.get_min_length(owner, member),
            max_length=self.get_max_length(owner, member),
            enum_data_type=self.get_enum_data_type(owner, member),
            pattern=self.get_pattern(owner, member),
            format=self.get_format(owner, member),
            display_name=self.get_display_name(owner, member),
            description=self.get_description(owner, member),
        )


@lru_cache(1)
def constraint_extractor() -> ConstraintExtractor:
    """Default constraint extractor, reading with the default attribute source and accessor
    registry.

    Returns:
        ConstraintExtractor: the constraint extractor instance.
    """
    return ConstraintExtractor()


def extract_required(owner: type, member: str | None = None) -> bool:
    """This function is a shortcut to `constraint_extractor().get_required()`."""
    return constraint_extractor().get_required(owner, member)


def extract_range(owner: type, member: str | None = None) -> tuple[float, float] | None:
    """This function is a shortcut to `constraint_extractor().get_range()`."""
    return constraint_extractor().get_range(owner, member)


def extract_string_length(owner: type, member: str | None = None) -> tuple[int, int] | None:
    """This function is a shortcut to `constraint_extractor().get_string_length()`."""
    return constraint_extractor().get_string_length(owner, member)


def extract_min_length(owner: type, member: str | None = None) -> int | None:
    """This function is a shortcut to `constraint_extractor().get_min_length()`."""
    return constraint_extractor().get_min_length(owner, member)


def extract_max_length(owner: type, member: str | None = None) -> int | None:
    """This function is a shortcut to `constraint_extractor().get_max_length()`."""
    return constraint_extractor().get_max_length(owner, member)


def extract_enum_data_type(owner: type, member: str | None = None) -> type | None:
    """This function is a shortcut to `constraint_extractor().get_enum_data_type()`."""
    return constraint_extractor().get_enum_data_type(owner, member)


def extract_pattern(owner: type, member: str | None = None) -> str | None:
    """This function is a shortcut to `constraint_extractor().get_pattern()`."""
    return constraint_extractor().get_pattern(owner, member)


def extract_format(owner: type, member: str | None = None) -> str | None:
    """This function is a shortcut to `constraint_extractor().get_format()`."""
    return constraint_extractor().get_format(owner, member)


def extract_display_name(owner: type, member: str | None = None) -> str | None:
    """This function is a shortcut to `constraint_extractor().get_display_name()`."""
    return constraint_extractor().get_display_name(owner, member)


def extract_description(owner: type, member: str | None = None) -> str | None:
    """This function is a shortcut to `constraint_extractor().get_description()`."""
    return constraint_extractor().get_description(owner, member)


def extract_constraints(owner: type, member: str | None = None) -> ConstraintSet:
    """This function is a shortcut to `constraint_extractor().get_constraints()`."""
    return constraint_extractor().get_constraints(owner, member)
