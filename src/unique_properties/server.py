"""MCP Server implementation using FastMCP."""

import sys
from pathlib import Path
from typing import Any

from mcp.server.fastmcp import FastMCP

from unique_properties.errors import ConfigError
from unique_properties.scanner import scan
from unique_properties.settings import get_settings

# Base directory override from --base-dir
_base_dir: Path | None = None

mcp = FastMCP("unique-properties")


def get_base_dir() -> Path:
    """Get the configured base directory.

    Raises:
        ConfigError: If the directory does not exist.
    """
    base = (_base_dir or get_settings().directory).resolve()
    if not base.is_dir():
        raise ConfigError(f"Base directory does not exist: {base}")
    return base


@mcp.tool()
def inspect_json(
    glob: str = "**/*.json",
    property: str | None = None,
    exists: list[str] | None = None,
    doesnt_exist: list[str] | None = None,
) -> dict[str, Any]:
    """Infer the property schema of JSON files matching glob pattern.

    Args:
        glob: Glob pattern relative to base directory (e.g. "data/**/*.json").
        property: Dot-separated property path to scope the scan to. Use "*"
            to expand every element of an array or object.
        exists: Property paths that must resolve on each object found.
        doesnt_exist: Property paths that must not resolve on each object found.

    Returns:
        Dict with file_count, object_count, and schema (required, types,
        values for each property).
    """
    result = scan(
        get_base_dir(),
        property=property,
        exists=exists or [],
        doesnt_exist=doesnt_exist or [],
        pattern=glob,
    )

    response: dict[str, Any] = {
        "file_count": result.file_count,
        "object_count": result.object_count,
        "schema": result.report,
    }
    if result.warnings:
        response["warnings"] = result.warnings

    return response


def main() -> None:
    """Entry point for the MCP server."""
    global _base_dir

    # Optional --base-dir argument overrides UNIQUE_PROPERTIES_DIRECTORY
    args = sys.argv[1:]
    if "--base-dir" in args:
        base_dir_idx = args.index("--base-dir")
        if base_dir_idx + 1 >= len(args):
            print("Error: --base-dir requires a value", file=sys.stderr)
            sys.exit(1)
        _base_dir = Path(args[base_dir_idx + 1])

    try:
        base = get_base_dir()
    except ConfigError as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)

    print(f"Serving JSON schemas from {base}", file=sys.stderr)
    mcp.run()


if __name__ == "__main__":
    main()
