"""Scanner package: package matching, discovery, collection and aggregation."""

from .matcher import PackageMatcher, is_target_package, strip_quotes
from .discovery import DEFAULT_EXCLUDES, DEFAULT_PATTERNS, discover_files, read_source
from .aggregate import (
    OUTPUT_FORMATS,
    clean_import_name,
    format_record,
    format_results,
    sort_records,
    unique_import_names,
)
from .collector import ImportExtractor, collect_imports

__all__ = [
    "PackageMatcher",
    "is_target_package",
    "strip_quotes",
    "DEFAULT_EXCLUDES",
    "DEFAULT_PATTERNS",
    "discover_files",
    "read_source",
    "OUTPUT_FORMATS",
    "clean_import_name",
    "format_record",
    "format_results",
    "sort_records",
    "unique_import_names",
    "ImportExtractor",
    "collect_imports",
]
