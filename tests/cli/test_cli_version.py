# topmark:header:start
#
#   project      : KernelWire
#   file         : test_cli_version.py
#   file_relpath : tests/cli/test_cli_version.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""CLI test: `version` command output."""

from __future__ import annotations

import json

from kernelwire.constants import KERNELWIRE_VERSION, PROTOCOL_VERSION
from tests.cli.conftest import assert_SUCCESS, assert_USAGE_ERROR, run_cli
from tests.conftest import mark_cli, parametrize


@mark_cli
def test_version_text() -> None:
    """It prints the package version followed by the protocol version."""
    result = run_cli(["--no-color", "version"])
    assert_SUCCESS(result)
    assert result.output.strip() == f"{KERNELWIRE_VERSION} (protocol {PROTOCOL_VERSION})"


@mark_cli
@parametrize("fmt", ["json", "ndjson"])
def test_version_machine_formats(fmt: str) -> None:
    """Machine formats emit a single JSON object."""
    result = run_cli(["version", "--format", fmt])
    assert_SUCCESS(result)
    payload = json.loads(result.output)
    assert payload == {"version": KERNELWIRE_VERSION, "protocol_version": PROTOCOL_VERSION}


@mark_cli
def test_version_markdown() -> None:
    result = run_cli(["version", "--format", "markdown"])
    assert_SUCCESS(result)
    assert result.output.startswith("# KernelWire Version")
    assert f"**KernelWire version: {KERNELWIRE_VERSION}**" in result.output


@mark_cli
def test_version_rejects_unknown_format() -> None:
    result = run_cli(["version", "--format", "yaml"])
    assert_USAGE_ERROR(result)
    assert "Must be one of" in result.output


@mark_cli
def test_no_subcommand_prints_help() -> None:
    result = run_cli([])
    assert_SUCCESS(result)
    for name in ("version", "kinds", "config"):
        assert name in result.output
