# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Catalog assembly and rendering for the no-argument listing mode."""

from __future__ import annotations

from collections.abc import Callable, Sequence
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass
from itertools import repeat
from typing import Final

from rich.console import Console
from rich.text import Text

from .config import ShimConfig
from .discovery import discover_executables
from .layout import format_entry, resolve_terminal_width
from .summary import HelpSummary, summarize

HEADER_TEMPLATE: Final[str] = "Available {label} tools:"
USAGE_TEMPLATE: Final[str] = "Usage: {label} <tool> [args...]"
TOOL_HELP_TEMPLATE: Final[str] = "For help on a tool: {label} <tool> --help"

Summarizer = Callable[[str, ShimConfig], HelpSummary]


@dataclass(frozen=True, slots=True)
class ToolEntry:
    """A discovered tool paired with its derived summary."""

    name: str
    summary: HelpSummary


def _summarize_all(names: Sequence[str], config: ShimConfig, summarizer: Summarizer) -> list[HelpSummary]:
    """Return one summary per name in ``names`` order.

    Args:
        names: Tool names in catalog order.
        config: Active shim configuration; ``jobs`` bounds the thread pool.
        summarizer: Callable producing a summary for one tool.

    Returns:
        list[HelpSummary]: Summaries aligned with ``names``.
    """

    if config.jobs <= 1 or len(names) <= 1:
        return [summarizer(name, config) for name in names]
    with ThreadPoolExecutor(max_workers=min(config.jobs, len(names))) as executor:
        return list(executor.map(summarizer, names, repeat(config)))


def build_catalog(config: ShimConfig, *, summarizer: Summarizer = summarize) -> list[ToolEntry]:
    """Discover tools and summarise each one, preserving catalog order.

    Args:
        config: Active shim configuration.
        summarizer: Callable producing a summary for one tool.

    Returns:
        list[ToolEntry]: Entries sorted case-insensitively by name.

    Raises:
        DiscoveryError: If the tools directory cannot be read.
    """

    names = discover_executables(config.tools_directory)
    summaries = _summarize_all(names, config, summarizer)
    return [ToolEntry(name=name, summary=summary) for name, summary in zip(names, summaries, strict=True)]


def render_catalog(
    entries: Sequence[ToolEntry],
    config: ShimConfig,
    console: Console,
    *,
    terminal_width: int | None = None,
) -> None:
    """Print the header, one block per entry and the usage footer.

    Args:
        entries: Catalog entries in display order.
        config: Active shim configuration supplying the wrapper label.
        console: Destination console.
        terminal_width: Width override; the platform width is used when ``None``.
    """

    width = terminal_width if terminal_width is not None else resolve_terminal_width()
    console.print(Text(config.label_phrase(HEADER_TEMPLATE)))
    console.print()
    for entry in entries:
        console.print(format_entry(entry.name, entry.summary.text, width))
    console.print()
    console.print(Text(config.label_phrase(USAGE_TEMPLATE)))
    console.print(Text(config.label_phrase(TOOL_HELP_TEMPLATE)))


def render(config: ShimConfig, console: Console, *, terminal_width: int | None = None) -> list[ToolEntry]:
    """Build the catalog for ``config`` and print it to ``console``.

    Args:
        config: Active shim configuration.
        console: Destination console.
        terminal_width: Width override; the platform width is used when ``None``.

    Returns:
        list[ToolEntry]: The entries that were rendered.
    """

    entries = build_catalog(config)
    render_catalog(entries, config, console, terminal_width=terminal_width)
    return entries


__all__ = [
    "HEADER_TEMPLATE",
    "TOOL_HELP_TEMPLATE",
    "ToolEntry",
    "USAGE_TEMPLATE",
    "build_catalog",
    "render",
    "render_catalog",
]
