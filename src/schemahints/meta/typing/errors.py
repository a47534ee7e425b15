"""Base error for the typing and introspection tools of schemahints."""

from ...abstract.exceptions.traced_exceptions import TracedException


class TypingError(TracedException):
    """General error for the typing extensions."""
