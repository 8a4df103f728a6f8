"""Tests for signature module."""

import pytest

from unique_properties.signature import type_signature


class TestTypeSignature:
    """Tests for type_signature function."""

    @pytest.mark.parametrize(
        ("value", "expected"),
        [
            (None, "null"),
            (True, "boolean"),
            (False, "boolean"),
            (0, "number"),
            (1.5, "number"),
            ("", "string"),
        ],
    )
    def test_primitives(self, value: object, expected: str) -> None:
        """Primitive values map to their primitive name."""
        assert type_signature(value) == expected

    def test_array_union(self) -> None:
        """Array signatures union element types in first-seen order."""
        assert type_signature(["a", 1, "b", None]) == "Array<string|number|null>"

    def test_empty_array(self) -> None:
        """Empty arrays have an empty union."""
        assert type_signature([]) == "Array<never>"

    def test_nested_array(self) -> None:
        """Nested arrays are described recursively."""
        assert type_signature([[1], [], ["x"]]) == (
            "Array<Array<number>|Array<never>|Array<string>>"
        )

    def test_object(self) -> None:
        """Objects give one coarse record signature."""
        assert type_signature({"a": 1, "b": "x", "c": 2}) == "Record<string, number|string>"

    def test_empty_object(self) -> None:
        """Empty objects have empty key and value unions."""
        assert type_signature({}) == "Record<never, never>"

    def test_nested_object(self) -> None:
        """Values inside records are described structurally."""
        value = {"tags": ["x"], "meta": {"ok": True}}
        assert type_signature(value) == (
            "Record<string, Array<string>|Record<string, boolean>>"
        )

    def test_duplicates_collapse(self) -> None:
        """Repeated element types appear once."""
        assert type_signature([1, 2, 3.5]) == "Array<number>"

    def test_not_json(self) -> None:
        """Non-JSON values are rejected."""
        with pytest.raises(TypeError):
            type_signature(object())
