"""Walk parsed files and collect the declarations that reference a package."""

import sys
from pathlib import Path
from typing import Iterable, Optional, TextIO, Union

import structlog

from ..errors import DiscoveryError, FileReadError, ParseError
from ..parser import (
    DeclarationKind,
    ImportRecord,
    SourceTree,
    extract_import_names,
    get_package_name,
    is_export_declaration,
    is_import_declaration,
    parse_source,
    walk_tree,
)
from .aggregate import format_results, unique_import_names
from .discovery import DEFAULT_PATTERNS, discover_files, read_source
from .matcher import PackageMatcher, Target

log = structlog.get_logger("importmunch_mcp.collector")


def collect_imports(tree: SourceTree, rel_path: str, matcher: PackageMatcher) -> list[ImportRecord]:
    """Collect one record per matching declaration in a parsed file.

    Declarations without a string specifier, or whose specifier does not
    match, are skipped; so are declarations binding no names. The walk
    always continues into children.
    """
    records = []

    def visit(node):
        if is_import_declaration(node, tree.spec):
            kind = DeclarationKind.IMPORT
        elif is_export_declaration(node, tree.spec):
            kind = DeclarationKind.EXPORT
        else:
            return

        specifier = get_package_name(node, tree)
        if not specifier or not matcher.matches(specifier):
            return

        names = extract_import_names(node, tree)
        if names:
            records.append(ImportRecord(
                file=rel_path,
                declaration_kind=kind,
                package_specifier=specifier,
                bound_names=names,
                line=node.start_point[0] + 1,
            ))

    walk_tree(tree.root, visit)
    return records


class ImportExtractor:
    """Scan a folder for every name imported from a target package.

    Holds the records of the most recent scan; each scan starts from an
    empty list.
    """

    def __init__(
        self,
        search_path: Union[str, Path],
        target_pkg: Union[Target, PackageMatcher],
        exclude_paths: Optional[Iterable[str]] = None,
    ):
        self.search_path = Path(search_path)
        self.matcher = target_pkg if isinstance(target_pkg, PackageMatcher) else PackageMatcher(target_pkg)
        self.exclude_paths = list(exclude_paths or [])
        self.results: list[ImportRecord] = []
        self.warnings: list[str] = []
        self.discovery_error: Optional[str] = None
        self.file_count = 0

    def process_file(self, rel_path: str) -> list[ImportRecord]:
        """Read, parse and collect a single file.

        Raises:
            FileReadError: if the file cannot be read
            ParseError: if the file has syntax errors
        """
        content = read_source(self.search_path / rel_path)
        tree = parse_source(content, rel_path)
        return collect_imports(tree, rel_path, self.matcher)

    def scan_directory(self, patterns: Iterable[str] = DEFAULT_PATTERNS) -> list[str]:
        """Scan every matching file and return the sorted unique bound names.

        Unreadable or unparsable files are logged and skipped. If discovery
        itself fails the scan returns [].
        """
        self.results = []
        self.warnings = []
        self.discovery_error = None
        self.file_count = 0

        try:
            files = discover_files(self.search_path, patterns, self.exclude_paths)
        except DiscoveryError as e:
            log.error("scan_failed", search_path=str(self.search_path), error=str(e))
            self.discovery_error = str(e)
            self.warnings.append(str(e))
            return []

        log.info(
            "scan_started",
            search_path=str(self.search_path),
            target=self.matcher.describe(),
            files=len(files),
        )

        for rel_path in files:
            try:
                records = self.process_file(rel_path)
            except (FileReadError, ParseError) as e:
                log.warning("file_skipped", path=rel_path, error=str(e))
                self.warnings.append(str(e))
                continue
            self.file_count += 1
            self.results.extend(records)

        log.info("scan_finished", records=len(self.results), skipped=len(self.warnings))
        return unique_import_names(self.results)

    def get_detailed_results(self) -> list[ImportRecord]:
        """Records from the last scan, in discovery order."""
        return list(self.results)

    def print_results(self, output_format: str = "simple", stream: Optional[TextIO] = None) -> None:
        """Print the last scan's results as simple, detailed or json."""
        stream = stream or sys.stdout
        text = format_results(self.results, output_format)
        if text:
            print(text, file=stream)
