# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""CLI application entry point selecting listing or dispatch mode."""

from __future__ import annotations

from pathlib import Path
from typing import Annotated, Final

import typer

from .. import __version__
from ..config import (
    DEBUG_ENV,
    DEFAULT_HELP_FLAG,
    DEFAULT_TOOLS_DIRECTORY,
    HELP_TIMEOUT_ENV,
    JOBS_ENV,
    TOOLS_DIR_ENV,
    WRAPPER_ENV,
    ShimConfig,
    build_config,
)
from ..console import get_console_manager
from ..dispatch import run_tool
from ..errors import ConfigError, DiscoveryError
from ..listing import render
from .shared import CLIError, CLILogger, build_cli_logger

PROG_NAME: Final[str] = "toolshim"
CONFIG_ERROR_EXIT_CODE: Final[int] = 2

# Options are only parsed before the tool name; everything after it is
# forwarded untouched, including flags such as ``--help``.
DISPATCH_CONTEXT_SETTINGS: Final[dict[str, bool]] = {
    "allow_interspersed_args": False,
    "ignore_unknown_options": True,
}

app = typer.Typer(
    name=PROG_NAME,
    help="List the tools in a directory or run one of them.",
    add_completion=False,
)


def _version_callback(value: bool) -> None:
    """Print the installed version and exit when ``--version`` is given.

    Args:
        value: Parsed flag value.

    Raises:
        typer.Exit: After printing the version.
    """

    if value:
        typer.echo(f"{PROG_NAME} {__version__}")
        raise typer.Exit()


def _run_listing(config: ShimConfig, logger: CLILogger) -> None:
    """Render the tool catalog for ``config``.

    Raises:
        CLIError: If the tools directory cannot be read.
    """

    console = get_console_manager().get(color=config.use_color, emoji=config.use_emoji)
    try:
        entries = render(config, console)
    except DiscoveryError as exc:
        raise CLIError(str(exc), exit_code=1) from exc
    if not entries:
        logger.warn(f"No executable tools found in {config.tools_directory}")
    for entry in entries:
        logger.debug(f"tool={entry.name} summary={entry.summary.kind.value}")


@app.command(context_settings=DISPATCH_CONTEXT_SETTINGS)
def shim(
    argv: Annotated[
        list[str] | None,
        typer.Argument(
            metavar="[TOOL [ARGS]...]",
            help="Tool to run followed by the arguments forwarded to it. Omit to list tools.",
            show_default=False,
        ),
    ] = None,
    wrapper: Annotated[
        str,
        typer.Option("--wrapper", "-w", envvar=WRAPPER_ENV, help="Display name used in headers and usage text."),
    ] = "",
    tools_dir: Annotated[
        Path,
        typer.Option("--tools-dir", "-d", envvar=TOOLS_DIR_ENV, help="Directory scanned for executable tools."),
    ] = DEFAULT_TOOLS_DIRECTORY,
    help_flag: Annotated[
        str,
        typer.Option("--help-flag", help="Flag passed to each tool when collecting summaries."),
    ] = DEFAULT_HELP_FLAG,
    jobs: Annotated[
        int,
        typer.Option("--jobs", "-j", envvar=JOBS_ENV, help="Number of help queries run concurrently."),
    ] = 1,
    help_timeout: Annotated[
        float | None,
        typer.Option(
            "--help-timeout",
            envvar=HELP_TIMEOUT_ENV,
            help="Seconds to wait for each tool's help output. Waits indefinitely when unset.",
        ),
    ] = None,
    color: Annotated[bool, typer.Option("--color/--no-color", help="Enable ANSI styling on terminals.")] = True,
    emoji: Annotated[bool, typer.Option("--emoji/--no-emoji", help="Prefix diagnostics with emoji.")] = False,
    debug: Annotated[bool, typer.Option("--debug", envvar=DEBUG_ENV, help="Emit debug diagnostics.")] = False,
    version: Annotated[
        bool,
        typer.Option("--version", callback=_version_callback, is_eager=True, help="Show the version and exit."),
    ] = False,
) -> None:
    """List available tools, or run TOOL with ARGS and exit with its status."""

    del version
    logger = build_cli_logger(emoji=emoji, debug=debug, no_color=not color)
    try:
        config = build_config(
            wrapper_label=wrapper,
            tools_directory=tools_dir,
            help_flag=help_flag,
            jobs=jobs,
            help_timeout=help_timeout,
            use_color=color,
            use_emoji=emoji,
            debug=debug,
        )
    except ConfigError as exc:
        logger.fail(str(exc))
        raise typer.Exit(code=CONFIG_ERROR_EXIT_CODE) from exc

    if argv:
        logger.debug(f"mode=dispatch command={argv[0]} args={len(argv) - 1}")
        raise typer.Exit(code=run_tool(argv, config, report_error=logger.fail))

    logger.debug(f"mode=listing directory={config.tools_directory} jobs={config.jobs}")
    try:
        _run_listing(config, logger)
    except CLIError as exc:
        logger.fail(str(exc))
        raise typer.Exit(code=exc.exit_code) from exc


def main() -> None:
    """Console-script entry point."""

    app(prog_name=PROG_NAME)


__all__ = ["app", "main"]
