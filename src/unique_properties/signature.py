"""Structural type signatures for JSON values."""

from collections.abc import Iterable

from unique_properties.types import JSONValue

NEVER = "never"
"""Rendered in place of an empty union."""


def _union(signatures: Iterable[str]) -> str:
    # dict keeps first-occurrence order while dropping duplicates
    members = list(dict.fromkeys(signatures))
    return "|".join(members) if members else NEVER


def type_signature(value: JSONValue) -> str:
    """Describe the structure of a JSON value.

    Primitives map to "null", "boolean", "number" or "string". Arrays map
    to "Array<T>" where T is the union of element signatures. Objects map
    to a single coarse "Record<K, V>" where K is the union of key
    signatures and V the union of value signatures, with no per-property
    breakdown. Empty unions render as "never".

    Args:
        value: Parsed JSON value.

    Returns:
        Signature string.

    Raises:
        TypeError: If value is not a JSON value.
    """
    match value:
        case None:
            return "null"
        case bool():
            return "boolean"
        case int() | float():
            return "number"
        case str():
            return "string"
        case list():
            return f"Array<{_union(type_signature(item) for item in value)}>"
        case dict():
            keys = _union(type_signature(key) for key in value)
            values = _union(type_signature(item) for item in value.values())
            return f"Record<{keys}, {values}>"
    raise TypeError(f"Not a JSON value: {type(value).__name__}")
