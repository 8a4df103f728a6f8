"""Settings module for unique-properties."""

from functools import lru_cache
from pathlib import Path

from pydantic import model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

# Default report destination
DEFAULT_OUTPUT = Path("./uniquePropertyOutput.json")

# Default file selection: every file below the directory
DEFAULT_PATTERN = "**/*"

# Prefix marking a negative existence constraint
NEGATION_PREFIX = "!"


class Settings(BaseSettings):
    """Application settings loaded from environment variables.

    Environment variables:
        UNIQUE_PROPERTIES_DIRECTORY: Directory to scan (default: .)
        UNIQUE_PROPERTIES_PROPERTY: Property path to scope the scan to (default: none)
        UNIQUE_PROPERTIES_EXISTS: JSON list of required sub-property paths
        UNIQUE_PROPERTIES_DOESNT_EXIST: JSON list of forbidden sub-property paths
        UNIQUE_PROPERTIES_OUTPUT: Report path (default: ./uniquePropertyOutput.json)
        UNIQUE_PROPERTIES_PATTERN: Glob selecting files (default: **/*)
    """

    model_config = SettingsConfigDict(env_prefix="UNIQUE_PROPERTIES_")

    directory: Path = Path(".")
    property: str | None = None
    exists: list[str] = []
    doesnt_exist: list[str] = []
    output: Path = DEFAULT_OUTPUT
    pattern: str = DEFAULT_PATTERN

    @model_validator(mode="after")
    def split_negated_exists(self) -> "Settings":
        """Move "!path" entries of exists into doesnt_exist."""
        positive = [p for p in self.exists if not p.startswith(NEGATION_PREFIX)]
        negative = [
            p[len(NEGATION_PREFIX) :]
            for p in self.exists
            if p.startswith(NEGATION_PREFIX)
        ]
        if negative:
            self.exists = positive
            self.doesnt_exist = [*self.doesnt_exist, *negative]
        return self


@lru_cache
def get_settings() -> Settings:
    """Return the process-wide settings used by the MCP server.

    The UNIQUE_PROPERTIES_* variables are read once. The CLI builds its own
    Settings from command-line overrides instead.

    Raises:
        ValidationError: If an environment variable holds an invalid value.
    """
    return Settings()
