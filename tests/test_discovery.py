# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Tests for executable discovery in the tools directory."""

from __future__ import annotations

import os
from pathlib import Path

import pytest

from toolshim.discovery import discover_executables
from toolshim.errors import DiscoveryError


def test_discovery_keeps_only_executable_regular_files(tools_dir: Path, make_tool) -> None:
    make_tool("runner")
    make_tool("group-exec", mode=0o610)
    make_tool("other-exec", mode=0o601)
    make_tool("notes.txt", mode=0o644)
    (tools_dir / "subdir").mkdir()
    (tools_dir / "subdir").chmod(0o755)

    assert discover_executables(tools_dir) == ["group-exec", "other-exec", "runner"]


def test_discovery_sorts_case_insensitively(tools_dir: Path, make_tool) -> None:
    for name in ("beta", "Alpha", "gamma", "Delta"):
        make_tool(name)

    assert discover_executables(tools_dir) == ["Alpha", "beta", "Delta", "gamma"]


def test_discovery_skips_symbolic_links(tools_dir: Path, make_tool, tmp_path: Path) -> None:
    target = make_tool("real")
    outside = tmp_path / "outside"
    outside.write_text("#!/bin/sh\n", encoding="utf-8")
    outside.chmod(0o755)
    os.symlink(target, tools_dir / "alias")
    os.symlink(outside, tools_dir / "external")

    assert discover_executables(tools_dir) == ["real"]


def test_discovery_of_empty_directory(tools_dir: Path) -> None:
    assert discover_executables(tools_dir) == []


def test_discovery_missing_directory_is_fatal(tmp_path: Path) -> None:
    missing = tmp_path / "does-not-exist"

    with pytest.raises(DiscoveryError) as excinfo:
        discover_executables(missing)

    assert excinfo.value.directory == missing
    assert str(missing) in str(excinfo.value)


def test_discovery_rejects_a_file_path(make_tool) -> None:
    tool = make_tool("lonely")

    with pytest.raises(DiscoveryError):
        discover_executables(tool)
