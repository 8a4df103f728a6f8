"""Error types for unique-properties."""

from pathlib import Path


class UniquePropertiesError(Exception):
    """Base class for all errors raised by this package."""


class ParseError(UniquePropertiesError):
    """A file could not be read or parsed as JSON.

    Raised per file; the scan skips the file and records a warning.
    """

    def __init__(self, path: Path, error: Exception) -> None:
        self.path = path
        self.error = error
        super().__init__(f"{path}: {error}")


class ConfigError(UniquePropertiesError):
    """Invalid configuration. Raised before any file is processed."""
