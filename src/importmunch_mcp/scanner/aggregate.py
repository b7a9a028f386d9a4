"""Reduce import records into name lists and printable reports."""

import json
from typing import Iterable

from ..parser.records import ImportRecord

OUTPUT_FORMATS = ("simple", "detailed", "json")


def clean_import_name(raw: str) -> list[str]:
    """Normalize one bound name into zero or more clean names.

    Braces are dropped and comma-joined text such as "{ sleep, throttle }"
    is split into its parts.
    """
    cleaned = raw.replace("{", "").replace("}", "").strip()
    if "," in cleaned:
        return [name.strip() for name in cleaned.split(",") if name.strip()]
    return [cleaned] if cleaned else []


def unique_import_names(records: Iterable[ImportRecord]) -> list[str]:
    """All distinct bound names across records, sorted."""
    all_imports = set()
    for record in records:
        for imp in record.bound_names:
            all_imports.update(clean_import_name(imp))
    return sorted(all_imports)


def sort_records(records: Iterable[ImportRecord]) -> list[ImportRecord]:
    """Order records by file path; declaration order is kept within a file."""
    return sorted(records, key=lambda r: r.file)


def format_record(record: ImportRecord) -> str:
    """Render one record as `file: a, b (import from '@scope/pkg')`."""
    names = ", ".join(record.bound_names)
    return f"{record.file}: {names} ({record.declaration_kind.value} from {record.package_specifier})"


def format_results(records: list[ImportRecord], output_format: str = "simple") -> str:
    """Render records in one of OUTPUT_FORMATS.

    simple: one unique name per line, sorted
    detailed: one line per record, sorted by file
    json: indented dump of every record
    """
    if output_format == "json":
        return json.dumps([r.to_dict() for r in records], indent=2)
    if output_format == "detailed":
        return "\n".join(format_record(r) for r in sort_records(records))
    if output_format == "simple":
        return "\n".join(unique_import_names(records))
    raise ValueError(f"Unknown output format: {output_format}")
