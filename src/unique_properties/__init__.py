"""Schema inference over directories of JSON files."""

from unique_properties.path import WILDCARD, exists, parse_path, resolve
from unique_properties.schema import PropertyInfo, Report, SchemaAggregator
from unique_properties.signature import type_signature

__version__ = "0.1.0"

__all__ = [
    "WILDCARD",
    "PropertyInfo",
    "Report",
    "SchemaAggregator",
    "exists",
    "parse_path",
    "resolve",
    "type_signature",
    "__version__",
]
