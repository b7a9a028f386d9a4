"""File discovery and reading for a local source tree."""

from pathlib import Path
from typing import Iterable, Union

import pathspec
import structlog

from ..errors import DiscoveryError, FileReadError

log = structlog.get_logger("importmunch_mcp.discovery")

# Build, dependency and coverage output is never scanned
DEFAULT_EXCLUDES = [
    "node_modules/**",
    "dist/**",
    "build/**",
    "coverage/**",
]

DEFAULT_PATTERNS = ["**/*.ts", "**/*.tsx"]


def anchor_pattern(pattern: str) -> str:
    """Pin a slash-less pattern to the root, so `*.ts` behaves like a glob."""
    if not pattern.strip() or "/" in pattern or pattern.startswith("!"):
        return pattern
    return "/" + pattern


def _compile(patterns: Iterable[str], what: str) -> pathspec.PathSpec:
    try:
        return pathspec.PathSpec.from_lines("gitwildmatch", [anchor_pattern(p) for p in patterns])
    except ValueError as e:
        raise DiscoveryError(f"Invalid {what} pattern: {e}") from e


def discover_files(
    root: Union[str, Path],
    patterns: Iterable[str] = DEFAULT_PATTERNS,
    exclude_paths: Iterable[str] = (),
) -> list[str]:
    """Discover source files under a root folder.

    Args:
        root: Folder to scan
        patterns: Glob patterns selecting files; a pattern without "/" matches
            at the root only
        exclude_paths: Extra glob patterns to skip, on top of DEFAULT_EXCLUDES

    Returns:
        Sorted, de-duplicated list of POSIX paths relative to root

    Raises:
        DiscoveryError: if the root is unusable or a pattern is invalid
    """
    folder_path = Path(root).expanduser()

    if not folder_path.exists():
        raise DiscoveryError(f"Folder not found: {root}")
    if not folder_path.is_dir():
        raise DiscoveryError(f"Path is not a directory: {root}")

    include_spec = _compile(patterns, "search")
    exclude_spec = _compile([*DEFAULT_EXCLUDES, *exclude_paths], "exclude")

    files = set()
    try:
        for file_path in folder_path.rglob("*"):
            if not file_path.is_file():
                continue

            rel_path = file_path.relative_to(folder_path).as_posix()

            # Dotfiles and dot-directories are hidden from globbing
            if any(part.startswith(".") for part in rel_path.split("/")):
                continue

            if exclude_spec.match_file(rel_path):
                continue
            if not include_spec.match_file(rel_path):
                continue

            files.add(rel_path)
    except OSError as e:
        raise DiscoveryError(f"Could not walk {root}: {e}") from e

    log.info("files_discovered", root=str(folder_path), count=len(files))
    return sorted(files)


def read_source(path: Union[str, Path]) -> str:
    """Read a whole file as UTF-8 text.

    Raises:
        FileReadError: if the file is missing, unreadable or not UTF-8
    """
    try:
        with open(path, "r", encoding="utf-8") as f:
            return f.read()
    except (OSError, UnicodeDecodeError) as e:
        raise FileReadError(str(path), str(e)) from e
