"""Shared fixtures."""

import pytest

from importmunch_mcp.logging_config import configure_logging


@pytest.fixture(autouse=True)
def _logs_to_stderr():
    """Keep structlog output off stdout, which several tests read."""
    configure_logging()


@pytest.fixture
def write_tree(tmp_path):
    """Create files under tmp_path from a {relative_path: content} dict."""
    def _write(files: dict) -> str:
        for rel_path, content in files.items():
            dest = tmp_path / rel_path
            dest.parent.mkdir(parents=True, exist_ok=True)
            dest.write_text(content, encoding="utf-8")
        return str(tmp_path)
    return _write
