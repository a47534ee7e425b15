"""
Re-export the attributes module for cleaner imports.

This allows: from schemahints.constraints import extract_range
Instead of: from schemahints.meta.typing.attributes.extractors import extract_range
"""

from .meta.typing.errors import (
    TypingError,
)

from .meta.typing.attributes import (
    AccessorBundle,
    AccessorRegistry,
    AttributeSource,
    ConstraintExtractor,
    ConstraintSet,
    ConstraintSlot,
    KindDescriptor,
    MatchResult,
    ReflectionAttributeSource,
    DataTypeFormats,
    Formats,
    KindNames,
    accessor_registry,
    attach,
    constraint_extractor,
    extract_constraints,
    extract_description,
    extract_display_name,
    extract_enum_data_type,
    extract_format,
    extract_max_length,
    extract_min_length,
    extract_pattern,
    extract_range,
    extract_required,
    extract_string_length,
    find_attribute,
    matching_kind,
    register_known_kinds,
    AttributeMetadataError,
    ConversionError,
    ShapeMismatchError,
)

__all__ = [
    # Core classes
    "AccessorBundle",
    "AccessorRegistry",
    "AttributeSource",
    "ConstraintExtractor",
    "ConstraintSet",
    "ConstraintSlot",
    "KindDescriptor",
    "MatchResult",
    "ReflectionAttributeSource",
    # Constants
    "DataTypeFormats",
    "Formats",
    "KindNames",
    # Main API functions
    "accessor_registry",
    "attach",
    "constraint_extractor",
    "extract_constraints",
    "extract_description",
    "extract_display_name",
    "extract_enum_data_type",
    "extract_format",
    "extract_max_length",
    "extract_min_length",
    "extract_pattern",
    "extract_range",
    "extract_required",
    "extract_string_length",
    "find_attribute",
    "matching_kind",
    "register_known_kinds",
    # Errors
    "TypingError",
    "AttributeMetadataError",
    "ConversionError",
    "ShapeMismatchError",
]
