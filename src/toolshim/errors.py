# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Exception hierarchy shared across toolshim components."""

from __future__ import annotations

from pathlib import Path


class ToolshimError(RuntimeError):
    """Base class for errors raised by toolshim."""


class ConfigError(ToolshimError):
    """Raised when configuration input is invalid."""


class DiscoveryError(ToolshimError):
    """Raised when the tools directory cannot be enumerated."""

    def __init__(self, directory: Path, reason: str) -> None:
        """Initialise the error with the offending directory.

        Args:
            directory: Tools directory that could not be read.
            reason: Operating-system supplied description of the failure.
        """

        super().__init__(f"Failed to read tools directory '{directory}': {reason}")
        self.directory = directory
        self.reason = reason


__all__ = ["ConfigError", "DiscoveryError", "ToolshimError"]
