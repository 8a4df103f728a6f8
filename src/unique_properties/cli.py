"""
Command-line interface for unique-properties.
"""

import argparse
import logging
import sys
from typing import Any

from pydantic import ValidationError
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape

from unique_properties.errors import ConfigError
from unique_properties.scanner import scan, write_report
from unique_properties.settings import Settings

console = Console()

EXAMPLE = "Example: unique-properties -d myDirectory -p property.values.* -e testProp"


def build_parser() -> argparse.ArgumentParser:
    """Create the argument parser.

    Options that are not given are left out of the namespace so that
    environment settings apply.
    """
    parser = argparse.ArgumentParser(
        prog="unique-properties",
        description=(
            "Gives a beautified JSON output for an analysis of other json "
            "files' properties"
        ),
        epilog=EXAMPLE,
        argument_default=argparse.SUPPRESS,
    )
    parser.add_argument(
        "-d", "--directory", "--dir",
        dest="directory",
        metavar="DIR",
        help="Searches in a specific directory (default: .)",
    )
    parser.add_argument(
        "-p", "--property", "--prop",
        dest="property",
        metavar="NAME",
        help=(
            "Sets the scope of the search to a sub-property of a file. "
            "Wildcards can be used for arrays and objects."
        ),
    )
    parser.add_argument(
        "-e", "--exists", "--exist",
        dest="exists",
        action="append",
        metavar="PROP",
        help=(
            "Checks if a property exists on each object found, ignoring it if "
            "it doesn't. Wildcards can be used for arrays and objects. Can be "
            "stacked. Use !PROP for negative searches."
        ),
    )
    parser.add_argument(
        "-o", "--output", "--out",
        dest="output",
        metavar="FILE",
        help="Sets the analysis output file (default: ./uniquePropertyOutput.json)",
    )
    parser.add_argument(
        "--pattern",
        metavar="GLOB",
        help="Glob relative to the directory selecting files (default: **/*)",
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Show debug logging",
    )
    return parser


def load_settings(overrides: dict[str, Any]) -> Settings:
    """Build settings from the environment and command-line overrides.

    Raises:
        ConfigError: If the settings are invalid or the directory is missing.
    """
    try:
        settings = Settings(**overrides)
    except ValidationError as e:
        raise ConfigError(str(e)) from e

    if not settings.directory.is_dir():
        raise ConfigError(f"Directory does not exist: {settings.directory}")
    return settings


def configure_logging(verbose: bool) -> None:
    """Send log records to stderr through rich."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(message)s",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
    )


def main(argv: list[str] | None = None) -> int:
    """Main entry point for the CLI."""
    parser = build_parser()
    args = vars(parser.parse_args(argv))
    configure_logging(args.pop("verbose", False))

    try:
        settings = load_settings(args)
    except ConfigError as e:
        console.print(f"[bold red]Error: {escape(str(e))}[/bold red]")
        parser.print_usage()
        return 1

    try:
        result = scan(
            settings.directory,
            property=settings.property,
            exists=settings.exists,
            doesnt_exist=settings.doesnt_exist,
            pattern=settings.pattern,
            exclude=[settings.output],
        )
        write_report(result.report, settings.output)
    except (OSError, ValueError) as e:
        # ValueError covers reports that cannot be encoded
        console.print(f"[bold red]Error: {escape(str(e))}[/bold red]")
        return 1
    except KeyboardInterrupt:
        console.print("\n[yellow]Interrupted.[/yellow]")
        return 130

    console.print(
        f"[bold green]{len(result.report)} properties from "
        f"{result.object_count:,} objects in {result.file_count:,} files "
        f"written to {escape(str(settings.output))}[/bold green]"
    )
    if result.warnings:
        console.print(f"[yellow]{len(result.warnings)} files skipped[/yellow]")

    return 0


if __name__ == "__main__":
    sys.exit(main())
