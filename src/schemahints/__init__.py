"""
schemahints: schema metadata extraction for Python classes.

This library provides:
- Constraint extractors (required, range, lengths, pattern, format, display texts) reading the
  annotation objects attached to classes and members
- Data annotations: the annotation kinds the extractors recognize by name
- An accessor registry, customizable to recognize annotation kinds of other libraries
- ConstantNamespace for immutable class-level constants
- TracedException for enhanced exception formatting
"""

__version__ = "0.1.0"
__author__ = "Sébastien Gachoud"
__license__ = "MIT"

__all__ = [
    # Version info
    "__version__",
    "__author__",
    "__license__",
]
