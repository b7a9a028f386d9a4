"""
Command-line interface: print every name a codebase imports from a package.
"""

import argparse
import re
import sys
from typing import List, Optional

from .logging_config import configure_logging
from .scanner import DEFAULT_PATTERNS, ImportExtractor, PackageMatcher
from .tools.scan_imports import env_exclude_paths

EXAMPLE = "search-imports --search-path ./packages --target-pkg @scope/pkg-name --exclude-paths 'packages/pkg/**'"


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="search-imports",
        description="List the names imported or re-exported from a package across a source tree.",
        epilog=f"Example: {EXAMPLE}",
    )
    parser.add_argument("patterns", nargs="*", help="Glob patterns selecting files; patterns without / match at the root only (default: **/*.ts **/*.tsx)")
    parser.add_argument("--search-path", default=".", help="Folder to scan (default: current directory)")
    parser.add_argument("--target-pkg", default="", help="Package prefix to look for, e.g. @scope/pkg")
    parser.add_argument("--exclude-paths", default="", help="Comma-separated glob patterns to skip")
    parser.add_argument("--regex", action="store_true", help="Treat --target-pkg as a regular expression")

    output = parser.add_mutually_exclusive_group()
    output.add_argument("--json", dest="output_format", action="store_const", const="json",
                        help="Dump every matching declaration as JSON")
    output.add_argument("--detailed", dest="output_format", action="store_const", const="detailed",
                        help="One line per matching declaration, sorted by file")
    parser.set_defaults(output_format="simple")

    parser.add_argument("-v", "--verbose", action="store_true", help="Log scan progress to stderr")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    configure_logging(verbose=args.verbose)

    if not args.search_path:
        sys.stderr.write("--search-path is required\n")
        parser.print_usage(sys.stderr)
        return 1
    if not args.target_pkg:
        sys.stderr.write("--target-pkg is required\n")
        parser.print_usage(sys.stderr)
        return 1

    try:
        matcher = PackageMatcher.from_string(args.target_pkg, regex=args.regex)
    except re.error as e:
        sys.stderr.write(f"Invalid --target-pkg pattern: {e}\n")
        return 1

    exclude_paths = [p.strip() for p in args.exclude_paths.split(",") if p.strip()]
    exclude_paths.extend(env_exclude_paths())

    extractor = ImportExtractor(args.search_path, matcher, exclude_paths)
    extractor.scan_directory(args.patterns or DEFAULT_PATTERNS)
    extractor.print_results(args.output_format)
    return 1 if extractor.discovery_error else 0


if __name__ == "__main__":
    sys.exit(main())
