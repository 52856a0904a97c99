# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Executable discovery inside the tools directory."""

from __future__ import annotations

import os
from pathlib import Path

from .errors import DiscoveryError
from .process import is_executable_file


def _sort_key(name: str) -> tuple[str, str]:
    """Return a case-insensitive ordering key, tie-broken by the exact name."""

    return name.casefold(), name


def discover_executables(directory: Path) -> list[str]:
    """Return the executable regular files directly inside ``directory``.

    Subdirectories, symbolic links and files without any execute bit are
    skipped silently.

    Args:
        directory: Tools directory to scan.

    Returns:
        list[str]: Entry names sorted case-insensitively.

    Raises:
        DiscoveryError: If ``directory`` cannot be read.
    """

    try:
        with os.scandir(directory) as entries:
            names = [entry.name for entry in entries if is_executable_file(Path(entry.path))]
    except OSError as exc:
        raise DiscoveryError(directory, exc.strerror or str(exc)) from exc
    return sorted(names, key=_sort_key)


__all__ = ["discover_executables"]
