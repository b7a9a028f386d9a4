"""Grammar registry mapping file extensions to tree-sitter languages."""

from dataclasses import dataclass


@dataclass
class LanguageSpec:
    """Specification for finding module declarations in a language's AST."""
    # tree-sitter language name (for tree-sitter-language-pack)
    ts_language: str

    # Node type for `import ... from "..."` statements
    import_node_type: str

    # Node type for `export ... from "..."` statements
    export_node_type: str

    # Node type of a quoted module specifier
    string_node_type: str

    # Node types that wrap named bindings: `{ a, b as c }`
    named_bindings_types: list[str]

    # Node types of the individual elements inside named bindings
    specifier_types: list[str]

    # Node types that introduce a namespace binding: `* as ns`
    namespace_types: list[str]


# JavaScript specification
JAVASCRIPT_SPEC = LanguageSpec(
    ts_language="javascript",
    import_node_type="import_statement",
    export_node_type="export_statement",
    string_node_type="string",
    named_bindings_types=["named_imports", "export_clause"],
    specifier_types=["import_specifier", "export_specifier"],
    namespace_types=["namespace_import", "namespace_export"],
)


# TypeScript specification (the grammar extends JavaScript's module syntax)
TYPESCRIPT_SPEC = LanguageSpec(
    ts_language="typescript",
    import_node_type="import_statement",
    export_node_type="export_statement",
    string_node_type="string",
    named_bindings_types=["named_imports", "export_clause"],
    specifier_types=["import_specifier", "export_specifier"],
    namespace_types=["namespace_import", "namespace_export"],
)


# TSX shares the TypeScript node shapes but needs its own grammar for JSX
TSX_SPEC = LanguageSpec(
    ts_language="tsx",
    import_node_type=TYPESCRIPT_SPEC.import_node_type,
    export_node_type=TYPESCRIPT_SPEC.export_node_type,
    string_node_type=TYPESCRIPT_SPEC.string_node_type,
    named_bindings_types=TYPESCRIPT_SPEC.named_bindings_types,
    specifier_types=TYPESCRIPT_SPEC.specifier_types,
    namespace_types=TYPESCRIPT_SPEC.namespace_types,
)


# File extension to language mapping
LANGUAGE_EXTENSIONS = {
    ".ts": "typescript",
    ".mts": "typescript",
    ".cts": "typescript",
    ".tsx": "tsx",
    ".js": "javascript",
    ".jsx": "javascript",
    ".mjs": "javascript",
    ".cjs": "javascript",
}

DEFAULT_LANGUAGE = "typescript"


# Language registry
LANGUAGE_REGISTRY = {
    "javascript": JAVASCRIPT_SPEC,
    "typescript": TYPESCRIPT_SPEC,
    "tsx": TSX_SPEC,
}


def language_for_file(filename: str) -> str:
    """Pick a grammar from the file extension, defaulting to TypeScript."""
    dot = filename.rfind(".")
    if dot == -1:
        return DEFAULT_LANGUAGE
    return LANGUAGE_EXTENSIONS.get(filename[dot:].lower(), DEFAULT_LANGUAGE)
