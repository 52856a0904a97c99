# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Aligned, word-wrapped rendering of a single catalog entry."""

from __future__ import annotations

import shutil
from typing import Final

from rich.text import Text

LABEL_WIDTH: Final[int] = 20
DEFAULT_TERMINAL_WIDTH: Final[int] = 80
NAME_STYLE: Final[str] = "bold"


def resolve_terminal_width() -> int:
    """Return the terminal width in columns, defaulting to 80.

    Returns:
        int: Width reported by the platform (``COLUMNS`` takes precedence).
    """

    columns = shutil.get_terminal_size(fallback=(DEFAULT_TERMINAL_WIDTH, 24)).columns
    return columns if columns > 0 else DEFAULT_TERMINAL_WIDTH


def wrap_words(text: str, width: int) -> list[str]:
    """Greedily pack the words of ``text`` into lines of at most ``width``.

    Words are never split. A word longer than ``width`` occupies a line of its
    own.

    Args:
        text: Text to wrap; runs of whitespace are treated as one separator.
        width: Maximum line length.

    Returns:
        list[str]: Wrapped lines; a single empty line when ``text`` has no words.
    """

    lines: list[str] = []
    current = ""
    for word in text.split():
        if not current:
            current = word
        elif len(current) + 1 + len(word) <= width:
            current = f"{current} {word}"
        else:
            lines.append(current)
            current = word
    lines.append(current)
    return lines


def format_entry(name: str, summary: str, terminal_width: int) -> Text:
    """Return the display block for one tool.

    Args:
        name: Tool name shown in the label column.
        summary: One-line summary wrapped into the description column.
        terminal_width: Total available columns.

    Returns:
        Text: Rich text with the tool name styled bold. ``Text.plain`` holds the
        unstyled layout.
    """

    wrapped = wrap_words(summary, max(terminal_width - LABEL_WIDTH, 1))
    indent = " " * LABEL_WIDTH
    block = Text()
    if len(name) >= LABEL_WIDTH:
        block.append(name, style=NAME_STYLE)
        for line in wrapped:
            block.append(f"\n{indent}{line}")
        return block

    block.append(name.ljust(LABEL_WIDTH), style=NAME_STYLE)
    block.append(wrapped[0])
    for line in wrapped[1:]:
        block.append(f"\n{indent}{line}")
    return block


__all__ = [
    "DEFAULT_TERMINAL_WIDTH",
    "LABEL_WIDTH",
    "format_entry",
    "resolve_terminal_width",
    "wrap_words",
]
