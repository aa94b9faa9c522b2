# topmark:header:start
#
#   project      : KernelWire
#   file         : test_cli_config.py
#   file_relpath : tests/cli/test_cli_config.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""CLI test: `config` command and the global ``--config`` option."""

from __future__ import annotations

import json
from typing import TYPE_CHECKING

import tomlkit

from tests.cli.conftest import (
    assert_FAILURE,
    assert_SUCCESS,
    assert_USAGE_ERROR,
    run_cli,
    write_config,
)
from tests.conftest import mark_cli

if TYPE_CHECKING:
    from pathlib import Path


@mark_cli
def test_config_defaults_as_toml() -> None:
    result = run_cli(["--no-color", "config"])
    assert_SUCCESS(result)
    doc = tomlkit.parse(result.output).unwrap()
    # indent is unset by default and therefore omitted
    assert doc == {
        "strict-payloads": False,
        "warn-on-malformed-payload": True,
        "sort-keys": True,
    }


@mark_cli
def test_config_json_includes_null_indent() -> None:
    result = run_cli(["config", "--format", "json"])
    assert_SUCCESS(result)
    assert json.loads(result.output)["indent"] is None


@mark_cli
def test_config_from_pyproject(tmp_path: Path) -> None:
    path = write_config(
        tmp_path,
        "[tool.kernelwire]\nstrict-payloads = true\nindent = 2\n",
        name="pyproject.toml",
    )
    result = run_cli(["--config", str(path), "config", "--format", "json"])
    assert_SUCCESS(result)
    payload = json.loads(result.output)
    assert payload["strict-payloads"] is True
    assert payload["indent"] == 2


@mark_cli
def test_config_markdown_is_fenced(tmp_path: Path) -> None:
    path = write_config(tmp_path, "sort-keys = false\n")
    result = run_cli(["--config", str(path), "config", "--format", "markdown"])
    assert_SUCCESS(result)
    lines = result.output.strip().splitlines()
    assert lines[0] == "```toml"
    assert lines[-1] == "```"
    assert "sort-keys = false" in lines


@mark_cli
def test_invalid_config_fails(tmp_path: Path) -> None:
    path = write_config(tmp_path, "pretty = true\n")
    result = run_cli(["--config", str(path), "config"])
    assert_FAILURE(result)
    assert "Unknown config key" in result.output


@mark_cli
def test_missing_config_file_is_usage_error(tmp_path: Path) -> None:
    result = run_cli(["--config", str(tmp_path / "absent.toml"), "config"])
    assert_USAGE_ERROR(result)
