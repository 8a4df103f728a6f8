"""Directory scanning and report output."""

import json
import logging
import math
from collections.abc import Iterable
from dataclasses import dataclass, field
from pathlib import Path

from unique_properties.errors import ParseError
from unique_properties.path import PathLike, expand_candidates, filter_candidates, resolve
from unique_properties.schema import Report, SchemaAggregator
from unique_properties.settings import DEFAULT_PATTERN
from unique_properties.types import JSONObject, JSONValue

logger = logging.getLogger(__name__)


@dataclass
class ScanResult:
    """Outcome of scanning a directory."""

    report: Report
    file_count: int = 0
    """Number of files that parsed successfully."""

    object_count: int = 0
    """Number of candidate objects folded into the report."""

    warnings: list[str] = field(default_factory=list)
    """One message per file that was skipped."""


def list_files(
    directory: Path,
    pattern: str = DEFAULT_PATTERN,
    exclude: Iterable[Path] = (),
) -> list[Path]:
    """Collect regular files below a directory.

    Args:
        directory: Directory to search.
        pattern: Glob relative to directory (e.g. "**/*.json").
        exclude: Paths to leave out, compared after resolving.

    Returns:
        Matching file paths sorted for deterministic processing.
    """
    excluded = {p.resolve() for p in exclude}
    return sorted(
        p
        for p in directory.glob(pattern)
        if p.is_file() and p.resolve() not in excluded
    )


def _reject_constant(name: str) -> None:
    raise ValueError(f"Invalid JSON literal: {name}")


def _parse_finite_float(text: str) -> float:
    value = float(text)
    if not math.isfinite(value):
        raise ValueError(f"Number out of range: {text}")
    return value


def read_and_parse(path: Path) -> JSONValue:
    """Read a file and parse it as strict JSON.

    Args:
        path: File to read.

    Returns:
        Parsed JSON value.

    Raises:
        ParseError: If the file cannot be read, is not valid JSON, holds a
            number outside the float range, or nests too deeply to decode.
    """
    try:
        return json.loads(
            path.read_bytes(),
            parse_constant=_reject_constant,
            parse_float=_parse_finite_float,
        )
    except (OSError, ValueError, RecursionError) as e:
        # JSONDecodeError and UnicodeDecodeError are both ValueError
        raise ParseError(path, e) from e


def extract_candidates(
    document: JSONValue,
    property: PathLike = None,
    exists: Iterable[str] = (),
    doesnt_exist: Iterable[str] = (),
) -> list[JSONObject]:
    """Resolve and filter the candidate objects of one document.

    Args:
        document: Parsed JSON document.
        property: Path scoping the scan, or None for the whole document.
        exists: Paths each candidate must resolve.
        doesnt_exist: Paths each candidate must not resolve.

    Returns:
        Candidate objects ready to fold.
    """
    candidates = expand_candidates(resolve(document, property))
    candidates = filter_candidates(candidates, exists, doesnt_exist)

    objects = [c for c in candidates if isinstance(c, dict)]
    if len(objects) < len(candidates):
        logger.debug("Ignored %d non-object values", len(candidates) - len(objects))
    return objects


def scan(
    directory: Path,
    property: PathLike = None,
    exists: Iterable[str] = (),
    doesnt_exist: Iterable[str] = (),
    pattern: str = DEFAULT_PATTERN,
    exclude: Iterable[Path] = (),
) -> ScanResult:
    """Infer a property schema from every JSON file below a directory.

    Files that fail to parse, or are too deeply nested to fold, are
    skipped and reported in warnings. Each file is folded into its own
    aggregator and merged only on success.

    Args:
        directory: Directory to scan.
        property: Path scoping the scan, or None for whole documents.
        exists: Paths each candidate must resolve.
        doesnt_exist: Paths each candidate must not resolve.
        pattern: Glob relative to directory selecting files.
        exclude: Files to leave out of the scan.

    Returns:
        ScanResult with the report, counts, and warnings.
    """
    exists = list(exists)
    doesnt_exist = list(doesnt_exist)
    aggregator = SchemaAggregator()
    warnings: list[str] = []
    file_count = 0

    for file_path in list_files(directory, pattern, exclude):
        try:
            document = read_and_parse(file_path)
        except ParseError as e:
            logger.warning("Failed to parse %s: %s", file_path, e.error)
            warnings.append(f"Failed to parse {file_path}: {e.error}")
            continue

        objects = extract_candidates(document, property, exists, doesnt_exist)
        logger.debug("%s: %d candidate objects", file_path, len(objects))

        file_aggregator = SchemaAggregator()
        try:
            file_aggregator.fold_all(objects)
        except RecursionError as e:
            logger.warning("Failed to fold %s: %s", file_path, e)
            warnings.append(f"Failed to fold {file_path}: {e}")
            continue

        aggregator.merge(file_aggregator)
        file_count += 1

    return ScanResult(
        report=aggregator.build(),
        file_count=file_count,
        object_count=aggregator.object_count,
        warnings=warnings,
    )


def write_report(report: Report, output: Path) -> None:
    """Write the report as JSON indented by four spaces.

    Non-ASCII text is written as UTF-8. A report holding strings that
    UTF-8 cannot encode (lone surrogates) is written with escapes instead.

    Raises:
        OSError: If the file cannot be written.
    """
    text = json.dumps(report, indent=4, ensure_ascii=False, allow_nan=False)
    try:
        data = text.encode("utf-8")
    except UnicodeEncodeError:
        data = json.dumps(report, indent=4, allow_nan=False).encode("ascii")

    output.parent.mkdir(parents=True, exist_ok=True)
    output.write_bytes(data)
