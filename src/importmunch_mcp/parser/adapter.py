"""Thin tree-sitter adapter: parse source text and expose module declarations."""

from dataclasses import dataclass
from typing import Any, Callable, Optional

from tree_sitter_language_pack import get_parser

from ..errors import ParseError
from .languages import LanguageSpec, LANGUAGE_REGISTRY, language_for_file


@dataclass
class SourceTree:
    """A parsed file: the root node plus the bytes its offsets refer to."""
    root: Any
    source_bytes: bytes
    spec: LanguageSpec
    filename: str


def parse_source(content: str, filename: str) -> SourceTree:
    """Parse source code with the grammar matching the file extension.

    Args:
        content: Raw source code
        filename: File path (selects the grammar, used in error messages)

    Returns:
        SourceTree for the file

    Raises:
        ParseError: if the tree contains syntax errors
    """
    spec = LANGUAGE_REGISTRY[language_for_file(filename)]
    source_bytes = content.encode("utf-8")

    parser = get_parser(spec.ts_language)
    tree = parser.parse(source_bytes)
    root = tree.root_node

    # tree-sitter recovers from bad input instead of raising
    if root.has_error:
        error_node = _first_error_node(root)
        line = error_node.start_point[0] + 1 if error_node is not None else None
        raise ParseError(filename, "syntax error", line=line)

    return SourceTree(root=root, source_bytes=source_bytes, spec=spec, filename=filename)


def _first_error_node(node) -> Optional[Any]:
    """Find the first ERROR or MISSING node in document order."""
    stack = [node]
    while stack:
        current = stack.pop()
        if current.type == "ERROR" or current.is_missing:
            return current
        stack.extend(reversed(current.children))
    return None


def node_text(node, source_bytes: bytes) -> str:
    """Source text covered by a node."""
    return source_bytes[node.start_byte:node.end_byte].decode("utf-8")


def is_import_declaration(node, spec: LanguageSpec) -> bool:
    return node.type == spec.import_node_type


def is_export_declaration(node, spec: LanguageSpec) -> bool:
    return node.type == spec.export_node_type


def get_package_name(node, tree: SourceTree) -> Optional[str]:
    """Get the module specifier of an import/export declaration.

    Returns the string literal exactly as written (quotes included), or
    None when the declaration has no `from "..."` part or the source is
    not a plain string literal.
    """
    source = node.child_by_field_name("source")
    if source is None or source.type != tree.spec.string_node_type:
        return None
    return node_text(source, tree.source_bytes)


def walk_tree(node, visit: Callable[[Any], None]) -> None:
    """Call `visit` on every node, pre-order, depth-first.

    Uses an explicit stack: generated code can nest deeper than the
    interpreter's recursion limit.
    """
    stack = [node]
    while stack:
        current = stack.pop()
        visit(current)
        stack.extend(reversed(current.children))
