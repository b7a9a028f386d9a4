"""Parser package for finding module declarations in TypeScript/JavaScript."""

from .records import ImportRecord, DeclarationKind
from .languages import LanguageSpec, LANGUAGE_REGISTRY, LANGUAGE_EXTENSIONS, language_for_file
from .adapter import (
    SourceTree,
    parse_source,
    node_text,
    is_import_declaration,
    is_export_declaration,
    get_package_name,
    walk_tree,
)
from .bindings import extract_import_names

__all__ = [
    "ImportRecord",
    "DeclarationKind",
    "LanguageSpec",
    "LANGUAGE_REGISTRY",
    "LANGUAGE_EXTENSIONS",
    "language_for_file",
    "SourceTree",
    "parse_source",
    "node_text",
    "is_import_declaration",
    "is_export_declaration",
    "get_package_name",
    "walk_tree",
    "extract_import_names",
]
