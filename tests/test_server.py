"""Tests for MCP server module."""

from pathlib import Path

import pytest

import unique_properties.server as server_module
from unique_properties.errors import ConfigError


@pytest.fixture
def temp_base_dir(tmp_path: Path):
    """Create a base directory with test JSON files."""
    (tmp_path / "a.json").write_text('{"title": "A", "tags": ["python"]}')
    (tmp_path / "b.json").write_text('{"title": "B"}')
    (tmp_path / "subdir").mkdir()
    (tmp_path / "subdir" / "c.json").write_text(
        '{"title": "C", "items": [{"n": 1}, {"n": 2, "extra": true}]}'
    )
    (tmp_path / "notes.txt").write_text("not json")

    server_module._base_dir = tmp_path
    yield tmp_path
    server_module._base_dir = None


class TestInspectJson:
    """Tests for inspect_json tool."""

    def test_basic_schema(self, temp_base_dir: Path) -> None:
        """Get schema from files."""
        result = server_module.inspect_json("*.json")

        assert result["file_count"] == 2
        assert result["object_count"] == 2
        assert result["schema"]["title"]["required"] is True
        assert result["schema"]["tags"]["required"] is False
        assert "warnings" not in result

    def test_recursive_glob(self, temp_base_dir: Path) -> None:
        """Get schema with recursive glob."""
        result = server_module.inspect_json("**/*.json")

        assert result["file_count"] == 3
        assert "items" in result["schema"]

    def test_property_and_filters(self, temp_base_dir: Path) -> None:
        """Property paths and existence filters are applied."""
        result = server_module.inspect_json("**/*.json", property="items.*")
        assert result["schema"]["n"]["required"] is True
        assert result["schema"]["extra"]["required"] is False

        result = server_module.inspect_json(
            "**/*.json", property="items.*", doesnt_exist=["extra"]
        )
        assert result["object_count"] == 1
        assert list(result["schema"]) == ["n"]

    def test_warnings_on_invalid_files(self, temp_base_dir: Path) -> None:
        """Files that are not JSON are reported as warnings."""
        result = server_module.inspect_json("**/*")

        assert result["file_count"] == 3
        assert len(result["warnings"]) == 1
        assert "notes.txt" in result["warnings"][0]

    def test_missing_base_dir(self, tmp_path: Path) -> None:
        """A base directory that does not exist is an error."""
        server_module._base_dir = tmp_path / "missing"
        try:
            with pytest.raises(ConfigError):
                server_module.inspect_json()
        finally:
            server_module._base_dir = None
