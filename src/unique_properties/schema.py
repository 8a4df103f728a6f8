"""Schema aggregation across candidate objects."""

import json
from collections.abc import Iterable
from dataclasses import dataclass, field
from typing import TypedDict

from unique_properties.signature import type_signature
from unique_properties.types import JSONObject, JSONValue


class PropertyInfo(TypedDict):
    """Report entry for a single property."""

    required: bool
    types: list[str]
    values: list[JSONValue]


# Type alias for the final report
Report = dict[str, PropertyInfo]


def _normalize(value: JSONValue) -> JSONValue:
    if isinstance(value, float) and value.is_integer():
        return int(value)
    if isinstance(value, list):
        return [_normalize(item) for item in value]
    if isinstance(value, dict):
        return {key: _normalize(item) for key, item in value.items()}
    return value


def canonical_key(value: JSONValue) -> str:
    """Serialize a value so equal JSON values always produce the same key.

    Object keys are sorted and integral floats are keyed as integers, so
    {"a": 1, "b": 2} and {"b": 2.0, "a": 1} share a key.
    """
    return json.dumps(
        _normalize(value),
        sort_keys=True,
        separators=(",", ":"),
        ensure_ascii=False,
        allow_nan=False,
    )


@dataclass
class PropertyRecord:
    """Observed types and values for one property name."""

    types: dict[str, None] = field(default_factory=dict)
    """Distinct type signatures in first-seen order."""

    values: dict[str, JSONValue] = field(default_factory=dict)
    """First-seen value for each distinct canonical key."""

    def add(self, value: JSONValue) -> None:
        """Record one observed value."""
        self.types.setdefault(type_signature(value), None)
        self.values.setdefault(canonical_key(value), value)

    def update(self, other: "PropertyRecord") -> None:
        """Union another record into this one."""
        for signature in other.types:
            self.types.setdefault(signature, None)
        for key, value in other.values.items():
            self.values.setdefault(key, value)


class SchemaAggregator:
    """Running schema state folded from a stream of objects.

    Tracks, per property name, the distinct type signatures and values
    seen, plus the set of property names present on every object folded
    so far. A property whose value is null still counts as present.
    """

    def __init__(self) -> None:
        self.records: dict[str, PropertyRecord] = {}
        self.required: set[str] = set()
        self.object_count = 0

    def fold(self, obj: JSONObject) -> None:
        """Fold one object into the running state.

        Args:
            obj: Candidate object.
        """
        for name, value in obj.items():
            record = self.records.get(name)
            if record is None:
                record = self.records[name] = PropertyRecord()
            record.add(value)

        if self.object_count == 0:
            self.required = set(obj)
        else:
            self.required.intersection_update(obj)
        self.object_count += 1

    def fold_all(self, objects: Iterable[JSONObject]) -> None:
        """Fold a batch of objects in order."""
        for obj in objects:
            self.fold(obj)

    def merge(self, other: "SchemaAggregator") -> None:
        """Merge state from an aggregator that folded a disjoint stream.

        Types and values are unioned, with this aggregator's entries
        first. Required sets are intersected. An aggregator that has not
        folded anything leaves the other side unchanged.

        Args:
            other: Aggregator to merge into this one.
        """
        if other.object_count == 0:
            return

        for name, other_record in other.records.items():
            record = self.records.get(name)
            if record is None:
                record = self.records[name] = PropertyRecord()
            record.update(other_record)

        if self.object_count == 0:
            self.required = set(other.required)
        else:
            self.required &= other.required
        self.object_count += other.object_count

    def build(self) -> Report:
        """Build the report from the current state."""
        return build_report(self.records, self.required)


def build_report(records: dict[str, PropertyRecord], required: set[str]) -> Report:
    """Render property records into the final report.

    Args:
        records: Property records in first-seen order.
        required: Names of properties present on every object.

    Returns:
        Report keyed by property name.
    """
    return {
        name: PropertyInfo(
            required=name in required,
            types=list(record.types),
            values=list(record.values.values()),
        )
        for name, record in records.items()
    }
