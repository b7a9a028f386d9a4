"""ImportRecord dataclass and declaration kinds."""

from dataclasses import dataclass, field
from enum import Enum


class DeclarationKind(str, Enum):
    """Which statement form produced a record."""
    IMPORT = "import"
    EXPORT = "export"


@dataclass
class ImportRecord:
    """One matched import/export declaration found in a file."""
    file: str                           # Path relative to the scan root (e.g., "src/app.ts")
    declaration_kind: DeclarationKind   # import | export
    package_specifier: str              # Module specifier as written, quotes included
    bound_names: list[str] = field(default_factory=list)  # Local names, in source order
    line: int = 0                       # Declaration line number (1-indexed)

    def to_dict(self) -> dict:
        """Convert to the JSON shape used by `--json` and the MCP tools."""
        return {
            "file": self.file,
            "imports": list(self.bound_names),
            "type": self.declaration_kind.value,
            "packageName": self.package_specifier,
            "line": self.line,
        }
