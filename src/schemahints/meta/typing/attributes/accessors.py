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
Description: This module provides the accessor registry. The registry holds, for each constraint
            slot (range, pattern, ...), the descriptor of the annotation kind it recognizes:
            the kind name, the members to read and how to convert them. It builds and caches
            one accessor bundle per (slot, matching kind), so that reading a member out of an
            annotation object never introspects its class twice. The descriptors can be
            customized with register_kind and register_descriptor.
🦙
"""

from __future__ import annotations

__author__ = "Sébastien Gachoud"
__license__ = "MIT"

import inspect
import logging
import operator
import threading
from collections.abc import Callable, Iterable, Mapping
from dataclasses import dataclass, field
from enum import Enum
from functools import lru_cache
from types import MappingProxyType
from typing import Any, Self

from .converters import Converter, identity
from .errors import AttributeMetadataError, ConversionError, ShapeMismatchError
from .matching import MatchResult, find_attribute
from ..utilities import declares_member, qualified_name

logger = logging.getLogger(__name__)

type Reader = Callable[[Any], Any]


class ConstraintSlot(Enum):
    """One constraint lookup. Each slot recognizes a single annotation kind."""

    REQUIRED = "required"
    RANGE = "range"
    STRING_LENGTH = "string_length"
    MIN_LENGTH = "min_length"
    MAX_LENGTH = "max_length"
    ENUM_DATA_TYPE = "enum_data_type"
    PATTERN = "pattern"
    URL = "url"
    PHONE = "phone"
    EMAIL_ADDRESS = "email_address"
    DATA_TYPE = "data_type"
    DISPLAY = "display"
    DISPLAY_NAME = "display_name"
    DESCRIPTION = "description"


def _as_roles(members: Iterable[str] | Mapping[str, str]) -> Mapping[str, str]:
    """Member names given as an iterable are their own role."""
    if isinstance(members, Mapping):
        return MappingProxyType(dict(members))
    return MappingProxyType({m: m for m in members})


@dataclass(frozen=True)
class KindDescriptor:
    """Describes the annotation kind recognized by a slot.

    Extractors read values by role (e.g. "minimum"); the descriptor maps each role to the
    member that holds it on the kind.

    Attributes:
        name: fully-qualified name of the kind.
        members: role to member name, for the members every matching kind must declare.
        optional_members: role to member name, for the members read only when the matching
            kind declares them.
        converters: converter applied to the value of each role. Roles without a converter are
            returned as read.
    """

    name: str
    members: Mapping[str, str] = field(default_factory=dict)
    optional_members: Mapping[str, str] = field(default_factory=dict)
    converters: Mapping[str, Converter] = field(default_factory=dict)

    def __post_init__(self) -> None:
        object.__setattr__(self, "members", _as_roles(self.members))
        object.__setattr__(self, "optional_members", _as_roles(self.optional_members))
        object.__setattr__(self, "converters", MappingProxyType(dict(self.converters)))

    def converter_for(self, role: str) -> Converter:
        """The converter of a role."""
        return self.converters.get(role, identity)

    @property
    def presence_only(self) -> bool:
        """Whether the kind is only checked for presence."""
        return not self.members and not self.optional_members


def _raw_getter(kind: type, member: str) -> Reader:
    """Methods are called without arguments, everything else is read as an attribute."""
    try:
        static = inspect.getattr_static(kind, member)
    except AttributeError:
        # annotated field, only set on instances.
        return operator.attrgetter(member)
    if isinstance(static, (staticmethod, classmethod)) or inspect.isfunction(static):
        return operator.methodcaller(member)
    return operator.attrgetter(member)


def _create_reader(kind: type, member: str, converter: Converter) -> Reader:
    get = _raw_getter(kind, member)
    kind_name = qualified_name(kind)

    def reader(instance: Any) -> Any:
        try:
            value = get(instance)
        except AttributeError as e:
            raise ShapeMismatchError(
                f"Member '{member}' of annotation kind '{kind_name}' has no value.",
                kind=kind_name,
                member=member,
            ) from e
        try:
            return converter(value)
        except ConversionError as e:
            e.details.setdefault("kind", kind_name)
            e.details.setdefault("member", member)
            raise

    return reader


@dataclass(frozen=True)
class AccessorBundle:
    """The readers built for one slot against one matching kind. Immutable once built.

    The readers accept instances of `kind` or of any of its subclasses.
    """

    slot: ConstraintSlot
    kind: type
    readers: Mapping[str, Reader]

    @classmethod
    def build(cls, slot: ConstraintSlot, kind: type, descriptor: KindDescriptor) -> Self:
        """Build the readers of a descriptor against a kind, one per role.

        Args:
            slot (ConstraintSlot): The slot the bundle is built for.
            kind (type): The matching kind. Members are looked up on this class.
            descriptor (KindDescriptor): The members to read and their converters.

        Raises:
            ShapeMismatchError: Raised if the kind does not declare a required member.

        Returns:
            AccessorBundle: The bundle.
        """
        missing = tuple(
            m for m in descriptor.members.values() if not declares_member(kind, m)
        )
        if missing:
            raise ShapeMismatchError(
                f"Annotation kind '{qualified_name(kind)}' does not declare the member(s)"
                f" {', '.join(repr(m) for m in missing)} expected for slot '{slot.value}'.",
                kind=qualified_name(kind),
                slot=slot.value,
                missing=missing,
            )
        roles = dict(descriptor.members)
        roles.update(
            (role, m)
            for role, m in descriptor.optional_members.items()
            if declares_member(kind, m)
        )
        readers = {
            role: _create_reader(kind, m, descriptor.converter_for(role))
            for role, m in roles.items()
        }
        return cls(slot, kind, MappingProxyType(readers))

    def __contains__(self, role: object) -> bool:
        return role in self.readers

    def read(self, instance: Any, role: str) -> Any:
        """Read and convert a member of an annotation object.

        Args:
            instance (Any): The annotation object, an instance of `kind` or of a subclass.
            role (str): The role of the member to read.

        Raises:
            ShapeMismatchError: Raised if the bundle has no reader for the role, or if the
                member has no value on the instance.
            ConversionError: Raised if the value cannot be converted.

        Returns:
            Any: The converted value.
        """
        try:
            reader = self.readers[role]
        except KeyError as e:
            raise ShapeMismatchError(
                f"No reader for '{role}' on annotation kind '{qualified_name(self.kind)}'.",
                kind=qualified_name(self.kind),
                member=role,
            ) from e
        return reader(instance)


class AccessorRegistry:
    """
    A class to hold the kind descriptor of every constraint slot and the accessor bundles built
    from them. It allows customization.
    """

    __descriptors: dict[ConstraintSlot, KindDescriptor]
    __bundles: dict[tuple[ConstraintSlot, type], AccessorBundle]

    def __init__(self) -> None:
        self.__descriptors = {}
        self.__bundles = {}
        self.__lock = threading.RLock()

    def register_descriptor(self, slot: ConstraintSlot, descriptor: KindDescriptor) -> None:
        """Register the descriptor of a slot, replacing the previous one. The bundles cached for
        the slot are dropped.

        Args:
            slot (ConstraintSlot): The slot.
            descriptor (KindDescriptor): The kind recognized by the slot.
        """
        with self.__lock:
            self.__descriptors[slot] = descriptor
            self.clear_cache_for_slot(slot)
        logger.debug("Registered kind '%s' for slot '%s'.", descriptor.name, slot.value)

    def register_kind(
        self,
        slot: ConstraintSlot,
        name: str,
        members: Iterable[str] | Mapping[str, str] = (),
        optional_members: Iterable[str] | Mapping[str, str] = (),
        converters: Mapping[str, Converter] | None = None,
    ) -> KindDescriptor:
        """
        Register the annotation kind recognized by a slot. This allows the extractors to read
        constraints out of annotation kinds defined by any library.

        Members are given either as names, each name being its own role, or as a mapping from
        the role the extractor reads to the member name on the kind. For example to read ranges
        out of a `mylib.Between(low, high)` annotation:
            >>> registry.register_kind(
            ...     ConstraintSlot.RANGE,
            ...     "mylib.Between",
            ...     members={"minimum": "low", "maximum": "high"},
            ...     converters={"minimum": float_converter, "maximum": float_converter},
            ... )

        Args:
            slot (ConstraintSlot): The slot.
            name (str): The fully-qualified name of the kind.
            members (Iterable[str] | Mapping[str, str]): The members every matching kind must
                declare.
            optional_members (Iterable[str] | Mapping[str, str]): The members read only when
                declared.
            converters (Mapping[str, Converter] | None): The converter of each role.

        Returns:
            KindDescriptor: The registered descriptor.
        """
        descriptor = KindDescriptor(
            name,
            _as_roles(members),
            _as_roles(optional_members),
            converters or {},
        )
        self.register_descriptor(slot, descriptor)
        return descriptor

    def get_descriptor(self, slot: ConstraintSlot) -> KindDescriptor:
        """Get the descriptor of a slot.

        Raises:
            AttributeMetadataError: Raised if no kind is registered for the slot.
        """
        try:
            return self.__descriptors[slot]
        except KeyError as e:
            raise AttributeMetadataError(
                f"No annotation kind registered for slot '{slot.value}'.", slot=slot.value
            ) from e

    def has_descriptor(self, slot: ConstraintSlot) -> bool:
        """Check if a kind is registered for a slot."""
        return slot in self.__descriptors

    def list_registered_slots(self) -> list[ConstraintSlot]:
        """Get all registered slots for debugging/introspection."""
        return list(self.__descriptors)

    def find(self, slot: ConstraintSlot, candidates: Iterable[Any]) -> MatchResult | None:
        """Find the first candidate matching the kind registered for a slot."""
        return find_attribute(candidates, self.get_descriptor(slot).name)

    def get_bundle(self, slot: ConstraintSlot, matching_kind: type) -> AccessorBundle:
        """Get the accessor bundle of a slot for a matching kind. The bundle is built on first
        use and cached. Concurrent first uses build it once.

        Args:
            slot (ConstraintSlot): The slot.
            matching_kind (type): The matching kind, see MatchResult.

        Raises:
            ShapeMismatchError: Raised if the kind does not have the shape the slot expects.

        Returns:
            AccessorBundle: The bundle.
        """
        key = (slot, matching_kind)
        bundle = self.__bundles.get(key)
        if bundle is not None:
            return bundle
        with self.__lock:
            bundle = self.__bundles.get(key)
            if bundle is None:
                bundle = AccessorBundle.build(slot, matching_kind, self.get_descriptor(slot))
                self.__bundles[key] = bundle
                logger.debug(
                    "Built accessor bundle for slot '%s' and kind '%s' with members %s.",
                    slot.value,
                    qualified_name(matching_kind),
                    tuple(bundle.readers),
                )
        return bundle

    def read(self, slot: ConstraintSlot, match: MatchResult, role: str) -> Any:
        """This function is a shortcut to
        `self.get_bundle(slot, match.matching_kind).read(match.instance, role)`."""
        return self.get_bundle(slot, match.matching_kind).read(match.instance, role)

    def clear_cache_for_slot(self, slot: ConstraintSlot) -> None:
        """Drop the bundles cached for a slot."""
        with self.__lock:
            for key in [k for k in self.__bundles if k[0] is slot]:
                del self.__bundles[key]

    def clear_cache(self) -> None:
        """Drop all the cached bundles."""
        with self.__lock:
            self.__bundles.clear()
        logger.debug("Cleared the accessor bundle cache.")

    def list_cached_bundles(self) -> list[tuple[ConstraintSlot, type]]:
        """Get the (slot, kind) pairs of the cached bundles for debugging/introspection."""
        return list(self.__bundles)


@lru_cache(1)
def accessor_registry() -> AccessorRegistry:
    """Default accessor registry. The built-in kinds are registered on it when
    `schemahints.meta.typing.attributes` is imported. See AccessorRegistry for more information.

    Returns:
        AccessorRegistry: the accessor registry instance.
    """
    return AccessorRegistry()
