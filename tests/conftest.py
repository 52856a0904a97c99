# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Shared pytest fixtures."""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path

import pytest

from toolshim.config import ShimConfig
from toolshim.console import get_console_manager

ToolFactory = Callable[..., Path]


def _script_for(help_text: str | None, exit_code: int, body: str | None) -> str:
    if body is not None:
        return f"#!/bin/sh\n{body}\n"
    lines = ["#!/bin/sh"]
    if help_text is not None:
        lines.extend(["cat <<'__HELP__'", help_text, "__HELP__"])
    lines.append(f"exit {exit_code}")
    return "\n".join(lines) + "\n"


@pytest.fixture
def tools_dir(tmp_path: Path) -> Path:
    """Return an empty directory acting as the tools directory."""

    directory = tmp_path / "bin"
    directory.mkdir()
    return directory


@pytest.fixture
def make_tool(tools_dir: Path) -> ToolFactory:
    """Return a factory writing ``/bin/sh`` stub tools into ``tools_dir``."""

    def factory(
        name: str,
        help_text: str | None = None,
        *,
        exit_code: int = 0,
        body: str | None = None,
        mode: int = 0o755,
    ) -> Path:
        path = tools_dir / name
        path.write_text(_script_for(help_text, exit_code, body), encoding="utf-8")
        path.chmod(mode)
        return path

    return factory


@pytest.fixture
def shim_config(tools_dir: Path) -> ShimConfig:
    """Return a configuration pointing at ``tools_dir``."""

    return ShimConfig(wrapper_label="shim", tools_directory=tools_dir)


@pytest.fixture(autouse=True)
def _reset_consoles(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("COLUMNS", "100")
    get_console_manager().clear()
