"""Extract the names bound by import and export-from declarations."""

from typing import Optional

from .adapter import SourceTree, node_text, is_import_declaration, is_export_declaration


def extract_import_names(node, tree: SourceTree) -> list[str]:
    """Extract bound names from an import or export declaration node.

    Handles:
    - default imports:   import foo from '...'
    - named bindings:    import { a, b as c } from '...' / export { a, b as c } from '...'
    - namespace imports: import * as ns from '...' / export * as ns from '...'

    Aliased elements contribute the alias (the local name). A declaration
    without any clause (`import '...'`, `export * from '...'`) yields [].
    """
    spec = tree.spec

    if is_import_declaration(node, spec):
        clause = _first_child_of_type(node, "import_clause")
        if clause is None:
            return []
        return _clause_names(clause, tree, allow_default=True)

    if is_export_declaration(node, spec):
        return _clause_names(node, tree, allow_default=False)

    return []


def _clause_names(clause, tree: SourceTree, allow_default: bool) -> list[str]:
    """Walk the direct children of a clause in source order."""
    spec = tree.spec
    names = []

    for child in clause.children:
        # Default import: the bare identifier before any braces
        if allow_default and child.type == "identifier":
            names.append(node_text(child, tree.source_bytes))

        elif child.type in spec.named_bindings_types:
            names.extend(_named_binding_names(child, tree))

        elif child.type in spec.namespace_types:
            name = _namespace_name(child, tree)
            if name:
                names.append(name)

    return names


def _named_binding_names(bindings, tree: SourceTree) -> list[str]:
    """Local names from `{ a, b as c }`."""
    names = []
    for element in bindings.named_children:
        if element.type not in tree.spec.specifier_types:
            continue
        local = element.child_by_field_name("alias")
        if local is None:
            local = element.child_by_field_name("name")
        if local is None:
            continue
        name = node_text(local, tree.source_bytes)
        if name:
            names.append(name)
    return names


def _namespace_name(node, tree: SourceTree) -> Optional[str]:
    """The identifier after `* as`."""
    named = node.named_children
    if not named:
        return None
    return node_text(named[-1], tree.source_bytes)


def _first_child_of_type(node, node_type: str):
    for child in node.children:
        if child.type == node_type:
            return child
    return None
