# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Forward an invocation to a named tool and propagate its exit status."""

from __future__ import annotations

from collections.abc import Callable, Sequence
from typing import Final, NoReturn

from .config import ShimConfig
from .logging import fail
from .process import PASSTHROUGH, resolve_executable, run_command

LAUNCH_FAILURE_EXIT_CODE: Final[int] = 1
ABNORMAL_EXIT_CODE: Final[int] = 1

ErrorReporter = Callable[[str], None]


def launch_failure_message(binary: str) -> str:
    """Return the error reported when ``binary`` cannot be started."""

    return f"Error: failed to run tool '{binary}'. Is it in $PATH?"


def _default_reporter(config: ShimConfig) -> ErrorReporter:
    """Return a reporter printing through ``fail`` with the styling of ``config``."""

    def report(message: str) -> None:
        fail(message, use_emoji=config.use_emoji, use_color=None if config.use_color else False)

    return report


def run_tool(
    argv: Sequence[str],
    config: ShimConfig,
    *,
    report_error: ErrorReporter | None = None,
) -> int:
    """Run ``argv[0]`` with ``argv[1:]`` and return the exit code to propagate.

    The child inherits standard input, output and error. Arguments are passed
    verbatim without shell interpretation.

    Args:
        argv: Target binary followed by its arguments.
        config: Active shim configuration; its tools directory is searched
            before ``PATH``.
        report_error: Callback receiving the launch-failure message. Defaults
            to the styled ``fail`` helper on standard error.

    Returns:
        int: The child's exit code, ``1`` when it could not be launched or
        terminated without a code.

    Raises:
        ValueError: If ``argv`` is empty.
    """

    if not argv:
        raise ValueError("dispatch requires a target binary")

    binary, *rest = argv
    reporter = report_error or _default_reporter(config)
    try:
        executable = resolve_executable(binary, config.tools_directory)
        completed = run_command([executable, *rest], options=PASSTHROUGH)
    except OSError:
        reporter(launch_failure_message(binary))
        return LAUNCH_FAILURE_EXIT_CODE

    # A negative return code means the child was killed by a signal.
    if completed.returncode < 0:
        return ABNORMAL_EXIT_CODE
    return completed.returncode


def dispatch(argv: Sequence[str], config: ShimConfig) -> NoReturn:
    """Run the target tool and terminate the process with its exit code.

    Args:
        argv: Target binary followed by its arguments.
        config: Active shim configuration.

    Raises:
        SystemExit: Always, carrying the propagated exit code.
    """

    raise SystemExit(run_tool(argv, config))


__all__ = [
    "ABNORMAL_EXIT_CODE",
    "LAUNCH_FAILURE_EXIT_CODE",
    "dispatch",
    "launch_failure_message",
    "run_tool",
]
