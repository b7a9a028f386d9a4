"""Exceptions raised while scanning a source tree."""

from typing import Optional


class ImportScanError(Exception):
    """Base class for scan failures."""


class FileReadError(ImportScanError):
    """A single source file could not be read. The file is skipped."""

    def __init__(self, path: str, reason: str):
        self.path = path
        self.reason = reason
        super().__init__(f"Failed to read {path}: {reason}")


class ParseError(ImportScanError):
    """A single source file did not parse cleanly. The file is skipped."""

    def __init__(self, path: str, reason: str, line: Optional[int] = None):
        self.path = path
        self.reason = reason
        self.line = line
        location = f"{path}:{line}" if line is not None else path
        super().__init__(f"Failed to parse {location}: {reason}")


class DiscoveryError(ImportScanError):
    """File discovery failed; the whole scan is abandoned."""
