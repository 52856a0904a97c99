# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""BDD tests covering listing and dispatch end to end."""

from __future__ import annotations

import os
import subprocess
import sys
from pathlib import Path

import pytest
from pytest_bdd import given, parsers, scenarios, then, when

PROJECT_ROOT = Path(__file__).resolve().parents[1]
LABEL_WIDTH = 20

scenarios("features/shim.feature")


def _write_tool(directory: Path, name: str, body: str) -> None:
    path = directory / name
    path.write_text(f"#!/bin/sh\n{body}\n", encoding="utf-8")
    path.chmod(0o755)


@pytest.fixture
def shim_state(tmp_path: Path) -> dict[str, object]:
    return {"tmp_root": tmp_path}


@given("a tools directory", target_fixture="shim_state")
def given_tools_directory(shim_state: dict[str, object]) -> dict[str, object]:
    tools = Path(shim_state["tmp_root"]) / "bin"
    tools.mkdir()
    shim_state["tools"] = tools
    return shim_state


@given(parsers.parse('an executable tool "{name}" whose help prints:'))
def given_tool_with_help(shim_state: dict[str, object], name: str, docstring: str) -> None:
    body = f"cat <<'__HELP__'\n{docstring}\n__HELP__"
    _write_tool(Path(shim_state["tools"]), name, body)


@given(parsers.parse('an executable tool "{name}" whose help fails'))
def given_failing_tool(shim_state: dict[str, object], name: str) -> None:
    _write_tool(Path(shim_state["tools"]), name, 'echo "usage text on failure"\nexit 64')


@given(parsers.parse('an executable tool "{name}" that exits with status {code:d}'))
def given_exiting_tool(shim_state: dict[str, object], name: str, code: int) -> None:
    _write_tool(Path(shim_state["tools"]), name, f"exit {code}")


def _run_shim(shim_state: dict[str, object], args: list[str]) -> None:
    env = dict(os.environ)
    env["PYTHONPATH"] = os.pathsep.join(filter(None, [str(PROJECT_ROOT / "src"), env.get("PYTHONPATH")]))
    env["COLUMNS"] = "100"
    command = [sys.executable, "-m", "toolshim", "--tools-dir", str(shim_state["tools"]), "--wrapper", "shim", *args]
    shim_state["process"] = subprocess.run(command, env=env, capture_output=True, text=True, check=False)


@when("I run the shim with no arguments")
def run_without_arguments(shim_state: dict[str, object]) -> None:
    _run_shim(shim_state, [])


@when(parsers.parse('I run the shim with "{args}"'))
def run_with_arguments(shim_state: dict[str, object], args: str) -> None:
    _run_shim(shim_state, args.split())


def _process(shim_state: dict[str, object]) -> subprocess.CompletedProcess[str]:
    process = shim_state["process"]
    assert isinstance(process, subprocess.CompletedProcess)
    return process


@then(parsers.parse("the shim exits with status {code:d}"))
def assert_exit_status(shim_state: dict[str, object], code: int) -> None:
    process = _process(shim_state)
    assert process.returncode == code, process.stderr


@then(parsers.parse('"{name}" is summarised as "{summary}"'))
def assert_summary(shim_state: dict[str, object], name: str, summary: str) -> None:
    assert f"{name.ljust(LABEL_WIDTH)}{summary}" in _process(shim_state).stdout.splitlines()


@then(parsers.parse('"{first}" is listed before "{second}"'))
def assert_order(shim_state: dict[str, object], first: str, second: str) -> None:
    stdout = _process(shim_state).stdout
    assert stdout.index(first.ljust(LABEL_WIDTH)) < stdout.index(second.ljust(LABEL_WIDTH))


@then("every tool is listed before the usage footer")
def assert_footer_last(shim_state: dict[str, object]) -> None:
    lines = _process(shim_state).stdout.splitlines()
    footer = lines.index("Usage: shim <tool> [args...]")
    tool_lines = [index for index, line in enumerate(lines) if line.startswith("tool")]
    assert tool_lines
    assert max(tool_lines) < footer
    assert lines[footer + 1] == "For help on a tool: shim <tool> --help"


@then(parsers.parse('the error output mentions "{text}"'))
def assert_error_output(shim_state: dict[str, object], text: str) -> None:
    assert text in _process(shim_state).stderr
