"""Find annotation objects by the fully-qualified name of their kind.

The kind of an annotation object is its class. An object matches a name when its class, or any
ancestor of its class, has that exact qualified name. This lets user-defined subclasses of a
recognized kind be found without registering them.
"""

from collections.abc import Iterable
from dataclasses import dataclass
from typing import Any

from ..utilities import kind_ancestors, qualified_name


@dataclass(frozen=True, slots=True)
class MatchResult:
    """A matched annotation object and the ancestor of its class whose name matched.

    Accessors are always built against `matching_kind`, never against `type(instance)`, so the
    members they read are declared at or above the matched level.
    """

    instance: Any
    matching_kind: type


def matching_kind(kind: type, name: str) -> type | None:
    """Walk the ancestor chain of a class, from the class itself up to (excluding) `object`, and
    return the first class whose qualified name equals `name`. The comparison is exact and case
    sensitive.

    Args:
        kind (type): The class to walk.
        name (str): The fully-qualified name to look for.

    Returns:
        type | None: The matching ancestor, or None.
    """
    for ancestor in kind_ancestors(kind):
        if qualified_name(ancestor) == name:
            return ancestor
    return None


def find_attribute(candidates: Iterable[Any], name: str) -> MatchResult | None:
    """Find the first annotation object whose kind matches `name`.

    Candidates are scanned in the given order; the first match wins.

    Examples:
        >>> find_attribute([Required(), Range(0, 1)], "schemahints.data_annotations.Range")
        MatchResult(instance=<Range ...>, matching_kind=<class '...Range'>)

    Args:
        candidates (Iterable[Any]): The annotation objects, in precedence order.
        name (str): The fully-qualified kind name to look for.

    Returns:
        MatchResult | None: The match, or None when no candidate matches.
    """
    for candidate in candidates:
        kind = matching_kind(type(candidate), name)
        if kind is not None:
            return MatchResult(candidate, kind)
    return None
