# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Reduce arbitrary ``--help`` output to a single descriptive line.

Third-party tools print help in every imaginable shape. The heuristic used
here is intentionally small:

* a tool that cannot be launched, exits non-zero or times out has
  *no help*;
* a tool that prints nothing is *unparseable*;
* when the first line looks like a ``name 1.2.3`` banner, the description is
  expected on the third line (banner, blank separator, description);
* otherwise the first line is the description.

The banner rule mirrors the output of one family of tools and is fragile by
nature. It is kept literally, including the case where a lone banner line
yields an unparseable result.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import StrEnum
from typing import Final

from .config import ShimConfig
from .process import CAPTURE_STDOUT, resolve_executable, run_command

NO_HELP_TEXT: Final[str] = "no command help available"
UNPARSEABLE_TEXT: Final[str] = "could not parse the help string"

BANNER_PATTERN: Final[re.Pattern[str]] = re.compile(r"\S+\s+\d+\.\d+\.\d+", re.ASCII)
BANNER_DESCRIPTION_INDEX: Final[int] = 2
MIN_DESCRIPTION_LENGTH: Final[int] = 2


class SummaryKind(StrEnum):
    """Outcome of a help-text extraction."""

    EXTRACTED = "extracted"
    NO_HELP = "no_help"
    UNPARSEABLE = "unparseable"


_PLACEHOLDERS: Final[dict[SummaryKind, str]] = {
    SummaryKind.NO_HELP: NO_HELP_TEXT,
    SummaryKind.UNPARSEABLE: UNPARSEABLE_TEXT,
}


@dataclass(frozen=True, slots=True)
class HelpSummary:
    """Tagged summary result: either extracted text or a placeholder reason."""

    kind: SummaryKind
    extracted: str = ""

    @classmethod
    def from_text(cls, text: str) -> HelpSummary:
        """Return an extracted summary carrying ``text``."""

        return cls(SummaryKind.EXTRACTED, text)

    @classmethod
    def no_help(cls) -> HelpSummary:
        """Return the placeholder used when the tool produced no usable run."""

        return cls(SummaryKind.NO_HELP)

    @classmethod
    def unparseable(cls) -> HelpSummary:
        """Return the placeholder used when output could not be interpreted."""

        return cls(SummaryKind.UNPARSEABLE)

    @property
    def is_placeholder(self) -> bool:
        """Return ``True`` when the summary is a fixed placeholder string."""

        return self.kind is not SummaryKind.EXTRACTED

    @property
    def text(self) -> str:
        """Return the displayable line for this summary."""

        return _PLACEHOLDERS.get(self.kind, self.extracted)

    def __str__(self) -> str:
        return self.text


def is_banner(line: str) -> bool:
    """Return ``True`` when ``line`` reads like ``<name> <major.minor.patch>``.

    Args:
        line: Stripped help line.

    Returns:
        bool: ``True`` for a whole-line banner match.
    """

    return BANNER_PATTERN.fullmatch(line) is not None


def extract_summary(output: str) -> HelpSummary:
    """Apply the summary heuristic to captured help ``output``.

    Args:
        output: Standard output produced by a successful help invocation.

    Returns:
        HelpSummary: Extracted first or third line, or an unparseable placeholder.
    """

    # Only ``\n`` separates lines; form feeds and bare carriage returns stay
    # inside the line they appear in.
    pieces = output.split("\n")
    if pieces[-1] == "":
        pieces.pop()
    lines = [line.strip() for line in pieces]
    if not lines:
        return HelpSummary.unparseable()

    first = lines[0]
    if not is_banner(first):
        return HelpSummary.from_text(first)

    if len(lines) > BANNER_DESCRIPTION_INDEX:
        description = lines[BANNER_DESCRIPTION_INDEX]
        if len(description) > MIN_DESCRIPTION_LENGTH:
            return HelpSummary.from_text(description)
    return HelpSummary.unparseable()


def summarize(tool: str, config: ShimConfig) -> HelpSummary:
    """Invoke ``tool`` with the configured help flag and summarise its output.

    Standard error of the tool is discarded and standard input is closed.

    Args:
        tool: Executable name inside ``config.tools_directory``.
        config: Active shim configuration.

    Returns:
        HelpSummary: Summary of the tool's help output. Never raises for
        per-tool failures; they are reported as a ``NO_HELP`` placeholder.
    """

    options = CAPTURE_STDOUT.with_timeout(config.help_timeout)
    try:
        executable = resolve_executable(tool, config.tools_directory)
        completed = run_command([executable, config.help_flag], options=options)
    except OSError:
        return HelpSummary.no_help()
    if completed.returncode != 0:
        return HelpSummary.no_help()
    return extract_summary(completed.stdout or "")


__all__ = [
    "BANNER_PATTERN",
    "HelpSummary",
    "NO_HELP_TEXT",
    "SummaryKind",
    "UNPARSEABLE_TEXT",
    "extract_summary",
    "is_banner",
    "summarize",
]
