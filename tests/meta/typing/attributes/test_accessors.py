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
Description: Tests for the accessor registry and accessor bundles.
🦙
"""

__author__ = "Sébastien Gachoud"
__license__ = "MIT"

import threading
import time
from types import MappingProxyType
from unittest.mock import patch

import pytest

from schemahints.constraints import (
    AccessorBundle,
    AccessorRegistry,
    AttributeMetadataError,
    ConstraintSlot,
    ConversionError,
    KindDescriptor,
    KindNames,
    MatchResult,
    ShapeMismatchError,
    accessor_registry,
    register_known_kinds,
)
from schemahints.data_annotations import Display, Range, StringLength
from schemahints.meta.typing.attributes.converters import float_converter


class Between:
    """A range-like kind from another library, with differently named members."""

    def __init__(self, low, high):
        self.low = low
        self.high = high

    low: float
    high: float


class PlainRange:
    """A kind exposing its members through every declaration style."""

    __slots__ = ("_minimum",)

    def __init__(self, minimum):
        self._minimum = minimum

    @property
    def minimum(self):
        """Test"""
        return self._minimum

    def maximum(self):
        """Test"""
        return 10


class NoMaximum:
    """A kind missing a member."""

    minimum: int = 0


class LegacyStringLength:
    """A string length kind without a minimum."""

    def __init__(self, maximum_length):
        self.maximum_length = maximum_length

    maximum_length: int


@pytest.fixture(name="registry")
def fixture_registry() -> AccessorRegistry:
    """A registry with the built-in kinds and an empty cache."""
    return register_known_kinds(AccessorRegistry())


# =============================================================================
# Descriptor Tests
# =============================================================================


class TestDescriptors:
    """Test registering the kind of a slot."""

    def test_default_registry_has_every_slot(self):
        """Test that the built-in kinds are registered on import."""
        assert set(accessor_registry().list_registered_slots()) == set(ConstraintSlot)

    def test_default_registry_is_a_singleton(self):
        """Test that the default registry is always the same instance."""
        assert accessor_registry() is accessor_registry()

    def test_register_kind_with_names(self, registry: AccessorRegistry):
        """Test that names given as an iterable are their own role."""
        descriptor = registry.get_descriptor(ConstraintSlot.RANGE)

        assert descriptor.name == KindNames.RANGE
        assert dict(descriptor.members) == {"minimum": "minimum", "maximum": "maximum"}
        assert not descriptor.presence_only

    def test_register_kind_with_roles(self, registry: AccessorRegistry):
        """Test that members can be mapped from roles."""
        descriptor = registry.register_kind(
            ConstraintSlot.RANGE,
            f"{__name__}.Between",
            members={"minimum": "low", "maximum": "high"},
            converters={"minimum": float_converter, "maximum": float_converter},
        )

        assert registry.get_descriptor(ConstraintSlot.RANGE) is descriptor
        assert isinstance(descriptor.members, MappingProxyType)

    def test_descriptor_built_directly_is_read_only(self, registry: AccessorRegistry):
        """Test that a descriptor created from plain dicts cannot be modified afterwards."""
        members = {"minimum": "low"}
        descriptor = KindDescriptor(
            f"{__name__}.Between",
            members,
            ["maximum"],
            {"minimum": float_converter},
        )
        registry.register_descriptor(ConstraintSlot.RANGE, descriptor)
        members["maximum"] = "high"

        assert dict(descriptor.members) == {"minimum": "low"}
        assert dict(descriptor.optional_members) == {"maximum": "maximum"}
        with pytest.raises(TypeError):
            descriptor.members["maximum"] = "high"  # type: ignore
        with pytest.raises(TypeError):
            descriptor.converters["maximum"] = float_converter  # type: ignore

    def test_presence_only(self, registry: AccessorRegistry):
        """Test that kinds without members are presence only."""
        assert registry.get_descriptor(ConstraintSlot.REQUIRED).presence_only
        assert registry.get_descriptor(ConstraintSlot.URL).presence_only

    def test_missing_descriptor(self):
        """Test that an unregistered slot raises."""
        registry = AccessorRegistry()

        assert not registry.has_descriptor(ConstraintSlot.RANGE)
        with pytest.raises(AttributeMetadataError) as info:
            registry.get_descriptor(ConstraintSlot.RANGE)
        assert info.value.details == {"slot": "range"}


# =============================================================================
# Bundle Tests
# =============================================================================


class TestAccessorBundle:
    """Test building bundles against a kind."""

    def test_build_reads_and_converts(self, registry: AccessorRegistry):
        """Test that readers read the members and convert them."""
        bundle = registry.get_bundle(ConstraintSlot.RANGE, Range)

        assert bundle.kind is Range
        assert bundle.slot is ConstraintSlot.RANGE
        assert bundle.read(Range("0", 120), "minimum") == 0.0
        assert bundle.read(Range("0", 120), "maximum") == 120.0

    def test_readers_are_read_only(self, registry: AccessorRegistry):
        """Test that the readers of a bundle cannot be modified."""
        bundle = registry.get_bundle(ConstraintSlot.RANGE, Range)

        with pytest.raises(TypeError):
            bundle.readers["minimum"] = None  # type: ignore

    def test_methods_properties_and_fields(self):
        """Test that methods are called and properties read."""
        descriptor = KindDescriptor(
            "x", MappingProxyType({"minimum": "minimum", "maximum": "maximum"})
        )

        bundle = AccessorBundle.build(ConstraintSlot.RANGE, PlainRange, descriptor)

        assert bundle.read(PlainRange(3), "minimum") == 3
        assert bundle.read(PlainRange(3), "maximum") == 10

    def test_display_methods(self, registry: AccessorRegistry):
        """Test that Display is read through its getter methods."""
        bundle = registry.get_bundle(ConstraintSlot.DISPLAY, Display)

        assert bundle.read(Display(name="Name"), "name") == "Name"
        assert bundle.read(Display(), "description") is None

    def test_missing_member_is_a_shape_mismatch(self, registry: AccessorRegistry):
        """Test that a kind without an expected member raises."""
        with pytest.raises(ShapeMismatchError) as info:
            registry.get_bundle(ConstraintSlot.RANGE, NoMaximum)

        assert info.value.details["missing"] == ("maximum",)
        assert info.value.details["slot"] == "range"
        assert registry.list_cached_bundles() == []

    def test_optional_member(self, registry: AccessorRegistry):
        """Test that optional members are only read when declared."""
        full = registry.get_bundle(ConstraintSlot.STRING_LENGTH, StringLength)
        legacy = registry.get_bundle(ConstraintSlot.STRING_LENGTH, LegacyStringLength)

        assert "minimum_length" in full
        assert "minimum_length" not in legacy
        assert "maximum_length" in legacy
        with pytest.raises(ShapeMismatchError):
            legacy.read(LegacyStringLength(5), "minimum_length")

    def test_declared_member_without_value(self, registry: AccessorRegistry):
        """Test that a declared member without value raises a shape mismatch."""
        bundle = registry.get_bundle(ConstraintSlot.STRING_LENGTH, LegacyStringLength)
        instance = LegacyStringLength.__new__(LegacyStringLength)

        with pytest.raises(ShapeMismatchError) as info:
            bundle.read(instance, "maximum_length")

        assert isinstance(info.value.__cause__, AttributeError)

    def test_conversion_error_details(self, registry: AccessorRegistry):
        """Test that conversion errors name the kind and member."""
        bundle = registry.get_bundle(ConstraintSlot.RANGE, Range)

        with pytest.raises(ConversionError) as info:
            bundle.read(Range("low", 1), "minimum")

        assert info.value.details["member"] == "minimum"
        assert info.value.details["kind"] == KindNames.RANGE

    def test_readers_accept_subclasses(self, registry: AccessorRegistry):
        """Test that readers built for a kind work on its subclasses."""

        class Percentage(Range):
            """Test"""

        bundle = registry.get_bundle(ConstraintSlot.RANGE, Range)

        assert bundle.read(Percentage(0, 100), "maximum") == 100.0


# =============================================================================
# Cache Tests
# =============================================================================


class TestBundleCache:
    """Test the bundle cache of the registry."""

    def test_bundle_is_built_once(self, registry: AccessorRegistry):
        """Test that a bundle is built on first use only."""
        with patch.object(AccessorBundle, "build", wraps=AccessorBundle.build) as build:
            first = registry.get_bundle(ConstraintSlot.RANGE, Range)
            second = registry.get_bundle(ConstraintSlot.RANGE, Range)

        assert first is second
        assert build.call_count == 1
        assert registry.list_cached_bundles() == [(ConstraintSlot.RANGE, Range)]

    def test_cache_is_keyed_by_kind(self, registry: AccessorRegistry):
        """Test that distinct kinds of a slot get distinct bundles."""
        registry.get_bundle(ConstraintSlot.STRING_LENGTH, StringLength)
        registry.get_bundle(ConstraintSlot.STRING_LENGTH, LegacyStringLength)

        assert set(registry.list_cached_bundles()) == {
            (ConstraintSlot.STRING_LENGTH, StringLength),
            (ConstraintSlot.STRING_LENGTH, LegacyStringLength),
        }

    def test_registering_a_kind_clears_its_slot(self, registry: AccessorRegistry):
        """Test that re-registering a slot drops its bundles only."""
        registry.get_bundle(ConstraintSlot.RANGE, Range)
        registry.get_bundle(ConstraintSlot.DISPLAY, Display)

        registry.register_kind(
            ConstraintSlot.RANGE, f"{__name__}.Between", members={"minimum": "low"}
        )

        assert registry.list_cached_bundles() == [(ConstraintSlot.DISPLAY, Display)]

    def test_clear_cache(self, registry: AccessorRegistry):
        """Test that clear_cache drops every bundle."""
        registry.get_bundle(ConstraintSlot.RANGE, Range)
        registry.clear_cache()

        assert registry.list_cached_bundles() == []

    def test_read_shortcut(self, registry: AccessorRegistry):
        """Test that read goes through the cached bundle of the matching kind."""
        match = MatchResult(Range(1, 2), Range)

        assert registry.read(ConstraintSlot.RANGE, match, "maximum") == 2.0
        assert registry.list_cached_bundles() == [(ConstraintSlot.RANGE, Range)]

    def test_concurrent_first_use_builds_once(self, registry: AccessorRegistry):
        """Test that concurrent first uses build a single bundle."""
        original = AccessorBundle.build.__func__
        calls = []

        def slow_build(cls, slot, kind, descriptor):
            calls.append(kind)
            time.sleep(0.05)
            return original(cls, slot, kind, descriptor)

        results = []
        with patch.object(AccessorBundle, "build", classmethod(slow_build)):
            threads = [
                threading.Thread(
                    target=lambda: results.append(
                        registry.get_bundle(ConstraintSlot.RANGE, Range)
                    )
                )
                for _ in range(8)
            ]
            for thread in threads:
                thread.start()
            for thread in threads:
                thread.join()

        assert len(calls) == 1
        assert len(results) == 8
        assert all(result is results[0] for result in results)
