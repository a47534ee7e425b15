"""Schema metadata extraction from annotation objects."""

# Import known_kinds to register the built-in kinds on the default registry
from . import known_kinds as _  # noqa: F401

from .accessors import (
    AccessorBundle,
    AccessorRegistry,
    ConstraintSlot,
    KindDescriptor,
    accessor_registry,
)
from .errors import (
    TypingError,
    AttributeMetadataError,
    ConversionError,
    ShapeMismatchError,
)
from .extractors import (
    ConstraintExtractor,
    ConstraintSet,
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
)
from .known_kinds import DataTypeFormats, Formats, KindNames, register_known_kinds
from .matching import MatchResult, find_attribute, matching_kind
from .sources import AttributeSource, ReflectionAttributeSource, attach

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
