# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Safe wrappers around ``subprocess`` execution."""

from __future__ import annotations

import os
import shutil
import stat

# Bandit: subprocess usage is intentional; arguments are passed as a list and
# ``shell=True`` is never used.
import subprocess  # nosec B404
from collections.abc import Sequence
from dataclasses import dataclass, replace
from pathlib import Path
from subprocess import CompletedProcess
from typing import Final

TIMEOUT_RETURNCODE: Final[int] = 124


@dataclass(frozen=True, slots=True)
class CommandOptions:
    """Immutable command execution options."""

    capture_output: bool = False
    discard_stdin: bool = False
    discard_stderr: bool = False
    timeout: float | None = None

    def with_timeout(self, timeout: float | None) -> CommandOptions:
        """Return a copy of the options using ``timeout``.

        Args:
            timeout: Replacement timeout in seconds, ``None`` disables it.

        Returns:
            CommandOptions: Updated options instance.

        Raises:
            ValueError: When ``timeout`` is negative.
        """

        if timeout is not None and timeout < 0:
            raise ValueError("timeout must be non-negative")
        return replace(self, timeout=timeout)


CAPTURE_STDOUT: Final[CommandOptions] = CommandOptions(
    capture_output=True,
    discard_stdin=True,
    discard_stderr=True,
)
PASSTHROUGH: Final[CommandOptions] = CommandOptions()


def is_executable_file(path: Path) -> bool:
    """Return ``True`` when ``path`` is a regular file with an execute bit set.

    Symbolic links are not followed.

    Args:
        path: Filesystem entry to inspect.

    Returns:
        bool: ``True`` for executable regular files.
    """

    try:
        info = path.lstat()
    except OSError:
        return False
    return stat.S_ISREG(info.st_mode) and bool(info.st_mode & 0o111)


def resolve_executable(name: str, search_dir: Path | None = None) -> str:
    """Return the path used to launch ``name``.

    Absolute or relative paths containing a separator are used as given.
    Bare names are looked up in ``search_dir`` first and then on ``PATH``;
    symbolic links in either location are followed.

    Args:
        name: Executable name or path.
        search_dir: Optional directory searched before ``PATH``.

    Returns:
        str: Path suitable for :func:`subprocess.run`.

    Raises:
        FileNotFoundError: If ``name`` cannot be resolved.
    """

    if not name:
        raise FileNotFoundError("Executable name is empty")
    if os.sep in name or (os.altsep and os.altsep in name):
        return name
    if search_dir is not None:
        # ``which`` follows symbolic links, unlike discovery.
        local = shutil.which(name, path=str(search_dir))
        if local is not None:
            return local
    resolved = shutil.which(name)
    if resolved is None:
        raise FileNotFoundError(f"Executable '{name}' was not found on PATH")
    return resolved


def run_command(
    args: Sequence[str],
    *,
    options: CommandOptions = PASSTHROUGH,
) -> CompletedProcess[str]:
    """Execute ``args`` without a shell and wait for completion.

    Captured output is decoded as UTF-8 with undecodable bytes replaced.

    Args:
        args: Command and argument sequence; the first item must already be
            resolved with :func:`resolve_executable`.
        options: Execution options controlling stream handling and timeout.

    Returns:
        CompletedProcess[str]: Completed process metadata. A timeout produces a
        completed process with return code ``124``.

    Raises:
        ValueError: If ``args`` is empty.
        OSError: If the process cannot be launched.
    """

    if not args:
        raise ValueError("subprocess command requires at least one argument")

    command = [str(part) for part in args]
    try:
        return subprocess.run(  # nosec B603 - argument list, no shell
            command,
            check=False,
            stdout=subprocess.PIPE if options.capture_output else None,
            stderr=subprocess.DEVNULL if options.discard_stderr else None,
            stdin=subprocess.DEVNULL if options.discard_stdin else None,
            encoding="utf-8",
            errors="replace",
            timeout=options.timeout,
        )
    except subprocess.TimeoutExpired as exc:
        stdout = exc.stdout
        if isinstance(stdout, bytes):
            stdout = stdout.decode("utf-8", errors="replace")
        return subprocess.CompletedProcess(
            args=command,
            returncode=TIMEOUT_RETURNCODE,
            stdout=stdout or "",
            stderr=f"Command timed out after {options.timeout:.1f}s",
        )


__all__ = [
    "CAPTURE_STDOUT",
    "CommandOptions",
    "PASSTHROUGH",
    "TIMEOUT_RETURNCODE",
    "is_executable_file",
    "resolve_executable",
    "run_command",
]
