"""JSON value type aliases."""

from typing import TypeAlias

JSONPrimitive: TypeAlias = "str | int | float | bool | None"
"""A JSON primitive value: string, number, boolean, or null."""

JSONArray: TypeAlias = "list[JSONValue]"
"""A JSON array containing any JSON values."""

JSONObject: TypeAlias = "dict[str, JSONValue]"
"""A JSON object mapping string keys to JSON values."""

JSONValue: TypeAlias = "JSONPrimitive | JSONArray | JSONObject"
"""Any JSON value: primitive, array, or object."""
