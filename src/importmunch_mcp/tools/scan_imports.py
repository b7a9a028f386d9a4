"""Scan imports tools - discover, parse, collect, aggregate."""

import os
import re
from pathlib import Path
from typing import Optional

from ..scanner import DEFAULT_PATTERNS, ImportExtractor, PackageMatcher, sort_records

# Comma-separated globs appended to every scan's exclusions
EXCLUDE_ENV_VAR = "IMPORTMUNCH_EXCLUDE"


def env_exclude_paths() -> list[str]:
    """Exclusion globs configured through the environment."""
    raw = os.environ.get(EXCLUDE_ENV_VAR, "")
    return [p.strip() for p in raw.split(",") if p.strip()]


def _build_extractor(
    path: str,
    target_pkg: str,
    regex: bool,
    exclude_paths: Optional[list[str]],
) -> ImportExtractor:
    folder_path = Path(path).expanduser().resolve()
    matcher = PackageMatcher.from_string(target_pkg, regex=regex)
    excludes = list(exclude_paths or []) + env_exclude_paths()
    return ImportExtractor(folder_path, matcher, excludes)


def _run_scan(
    path: str,
    target_pkg: str,
    regex: bool = False,
    exclude_paths: Optional[list[str]] = None,
    patterns: Optional[list[str]] = None,
) -> tuple[Optional[ImportExtractor], dict]:
    """Run a scan and build the fields shared by every tool response."""
    if not target_pkg:
        return None, {"success": False, "error": "target_pkg is required"}

    try:
        extractor = _build_extractor(path, target_pkg, regex, exclude_paths)
    except re.error as e:
        return None, {"success": False, "error": f"Invalid target pattern: {e}"}

    folder_path = extractor.search_path
    if not folder_path.exists():
        return None, {"success": False, "error": f"Folder not found: {path}"}
    if not folder_path.is_dir():
        return None, {"success": False, "error": f"Path is not a directory: {path}"}

    names = extractor.scan_directory(patterns or DEFAULT_PATTERNS)

    result = {
        "success": True,
        "search_path": str(folder_path),
        "target": extractor.matcher.describe(),
        "file_count": extractor.file_count,
        "record_count": len(extractor.results),
        "imports": names,
    }

    if extractor.warnings:
        result["warnings"] = extractor.warnings

    return extractor, result


def scan_imports(
    path: str,
    target_pkg: str,
    regex: bool = False,
    exclude_paths: Optional[list[str]] = None,
    patterns: Optional[list[str]] = None,
) -> dict:
    """List every name imported or re-exported from a package.

    Args:
        path: Folder to scan (absolute or relative)
        target_pkg: Package name prefix, or a regular expression when regex is set
        regex: Treat target_pkg as a regular expression
        exclude_paths: Extra glob patterns to skip
        patterns: Glob patterns selecting files (default: **/*.ts, **/*.tsx)

    Returns:
        Dict with the sorted unique names
    """
    _, result = _run_scan(path, target_pkg, regex, exclude_paths, patterns)
    return result


def get_import_records(
    path: str,
    target_pkg: str,
    regex: bool = False,
    exclude_paths: Optional[list[str]] = None,
    patterns: Optional[list[str]] = None,
) -> dict:
    """Like scan_imports, plus one record per matching declaration, sorted by file."""
    extractor, result = _run_scan(path, target_pkg, regex, exclude_paths, patterns)
    if extractor is None:
        return result

    result["records"] = [r.to_dict() for r in sort_records(extractor.get_detailed_results())]
    return result
