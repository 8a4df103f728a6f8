"""Property path resolution over parsed JSON documents."""

from collections.abc import Iterable, Sequence

from unique_properties.types import JSONValue

WILDCARD = "*"
"""Path segment that expands a value into all of its children."""

ARRAY_PROPERTY = "array"
"""Property name used to wrap non-object values produced by array fan-out."""

PathLike = str | Sequence[str] | None


def parse_path(expression: PathLike) -> tuple[str, ...] | None:
    """Split a dot-separated path expression into segments.

    Args:
        expression: Path string such as "items.*.name", an already split
            sequence of segments, or None.

    Returns:
        Tuple of segments, or None when no path was given.
    """
    if expression is None:
        return None
    if isinstance(expression, str):
        return tuple(expression.split("."))
    return tuple(expression)


def _children(value: JSONValue) -> list[JSONValue]:
    if isinstance(value, dict):
        return [child for child in value.values() if child is not None]
    if isinstance(value, list):
        return [child for child in value if child is not None]
    return []


def _child(value: JSONValue, segment: str) -> JSONValue:
    if isinstance(value, dict):
        return value.get(segment)
    # Only canonical decimal indices: "1" selects, "01" and "+1" do not
    if isinstance(value, list) and segment.isascii() and segment.isdigit():
        index = int(segment)
        if str(index) == segment and index < len(value):
            return value[index]
    return None


def resolve(root: JSONValue, path: PathLike) -> list[JSONValue]:
    """Resolve a property path against a JSON value.

    Segments are processed left to right, each one mapping the current
    working set of values to the next. Null values are dropped at every
    step. A wildcard segment expands objects and arrays into their
    non-null children; scalars expand to nothing.

    Args:
        root: Parsed JSON document.
        path: Path expression, or None to return the root itself.

    Returns:
        Matched values in breadth-first order.
    """
    segments = parse_path(path)
    if segments is None:
        return [root]

    values: list[JSONValue] = [root]
    for segment in segments:
        next_values: list[JSONValue] = []
        for value in values:
            if value is None:
                continue
            if segment == WILDCARD:
                next_values.extend(_children(value))
            else:
                child = _child(value, segment)
                if child is not None:
                    next_values.append(child)
        values = next_values

    return values


def exists(value: JSONValue, path: PathLike) -> bool:
    """Check whether a path resolves to at least one non-null value."""
    return len(resolve(value, path)) > 0


def expand_candidates(values: list[JSONValue]) -> list[JSONValue]:
    """Apply the array fan-out rule to resolved values.

    Only the first value is inspected: if it is an array, every value is
    flattened one level and non-object elements are wrapped as
    {"array": element}. Otherwise the values are returned unchanged.
    """
    if not values or not isinstance(values[0], list):
        return values

    flattened: list[JSONValue] = []
    for value in values:
        if isinstance(value, list):
            flattened.extend(value)
        else:
            flattened.append(value)

    return [
        element if isinstance(element, dict) else {ARRAY_PROPERTY: element}
        for element in flattened
    ]


def filter_candidates(
    candidates: list[JSONValue],
    exists_paths: Iterable[str] = (),
    missing_paths: Iterable[str] = (),
) -> list[JSONValue]:
    """Keep candidates satisfying every existence constraint.

    Args:
        candidates: Values to filter.
        exists_paths: Paths that must resolve to at least one value.
        missing_paths: Paths that must resolve to no value.

    Returns:
        Surviving candidates in their original order.
    """
    for path in exists_paths:
        candidates = [c for c in candidates if exists(c, path)]
    for path in missing_paths:
        candidates = [c for c in candidates if not exists(c, path)]
    return candidates
