"""Exception utilities for schemahints."""

from .traced_exceptions import TracedException, format_exception, format_details

__all__ = [
    "TracedException",
    "format_exception",
    "format_details",
]
