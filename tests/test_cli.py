"""Tests for the search-imports command."""

import json

import pytest

from importmunch_mcp.cli import main


@pytest.fixture
def consumer_tree(write_tree):
    return write_tree({
        "a.ts": 'import { sleep, throttle } from "@acme/utils";\n',
        "b.ts": 'export { retry } from "@acme/utils/core";\n',
        "c.js": 'import { legacy } from "@acme/utils";\n',
    })


def test_simple_output(consumer_tree, capsys):
    code = main(["--search-path", consumer_tree, "--target-pkg", "@acme/utils"])

    assert code == 0
    assert capsys.readouterr().out.splitlines() == ["retry", "sleep", "throttle"]


def test_detailed_output(consumer_tree, capsys):
    main(["--search-path", consumer_tree, "--target-pkg", "@acme/utils", "--detailed"])

    assert capsys.readouterr().out.splitlines() == [
        'a.ts: sleep, throttle (import from "@acme/utils")',
        'b.ts: retry (export from "@acme/utils/core")',
    ]


def test_json_output(consumer_tree, capsys):
    main(["--search-path", consumer_tree, "--target-pkg", "@acme/utils", "--json"])

    data = json.loads(capsys.readouterr().out)
    assert sorted(r["file"] for r in data) == ["a.ts", "b.ts"]


def test_positional_patterns(consumer_tree, capsys):
    main(["--search-path", consumer_tree, "--target-pkg", "@acme/utils", "**/*.js"])

    assert capsys.readouterr().out.splitlines() == ["legacy"]


def test_exclude_paths(consumer_tree, capsys):
    main(["--search-path", consumer_tree, "--target-pkg", "@acme/utils", "--exclude-paths", "a.ts,c.js"])

    assert capsys.readouterr().out.splitlines() == ["retry"]


def test_regex_target(consumer_tree, capsys):
    main(["--search-path", consumer_tree, "--target-pkg", "^@acme/utils$", "--regex"])

    assert capsys.readouterr().out.splitlines() == ["sleep", "throttle"]


def test_missing_target(consumer_tree, capsys):
    code = main(["--search-path", consumer_tree])

    assert code == 1
    assert "--target-pkg is required" in capsys.readouterr().err


def test_invalid_regex(consumer_tree, capsys):
    code = main(["--search-path", consumer_tree, "--target-pkg", "(", "--regex"])

    assert code == 1
    assert "Invalid --target-pkg pattern" in capsys.readouterr().err


def test_output_flags_are_exclusive(consumer_tree):
    with pytest.raises(SystemExit):
        main(["--search-path", consumer_tree, "--target-pkg", "x", "--json", "--detailed"])


def test_discovery_failure_exit_code(tmp_path, capsys):
    code = main(["--search-path", str(tmp_path / "missing"), "--target-pkg", "@acme/utils"])

    assert code == 1
    assert capsys.readouterr().out == ""
