# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Configuration model for the toolshim dispatcher."""

from __future__ import annotations

from pathlib import Path
from typing import Final

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from .errors import ConfigError

DEFAULT_TOOLS_DIRECTORY: Final[Path] = Path("/usr/local/bin")
DEFAULT_HELP_FLAG: Final[str] = "--help"

WRAPPER_ENV: Final[str] = "TOOLSHIM_WRAPPER"
TOOLS_DIR_ENV: Final[str] = "TOOLSHIM_TOOLS_DIR"
JOBS_ENV: Final[str] = "TOOLSHIM_JOBS"
HELP_TIMEOUT_ENV: Final[str] = "TOOLSHIM_HELP_TIMEOUT"
DEBUG_ENV: Final[str] = "TOOLSHIM_DEBUG"


class ShimConfig(BaseModel):
    """Immutable settings supplied once at startup and passed to every component."""

    model_config = ConfigDict(frozen=True)

    wrapper_label: str = ""
    tools_directory: Path = Field(default=DEFAULT_TOOLS_DIRECTORY)
    help_flag: str = DEFAULT_HELP_FLAG
    jobs: int = Field(default=1, ge=1)
    help_timeout: float | None = Field(default=None, gt=0)
    use_color: bool = True
    use_emoji: bool = False
    debug: bool = False

    @field_validator("wrapper_label")
    @classmethod
    def strip_label(cls, value: str) -> str:
        return value.strip()

    @field_validator("help_flag")
    @classmethod
    def require_help_flag(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("help flag must not be empty")
        return value.strip()

    def label_phrase(self, template: str) -> str:
        """Return ``template`` with ``{label}`` substituted by the wrapper label.

        The space that surrounds the placeholder collapses when no label is
        configured so that ``"Available {label} tools:"`` reads
        ``"Available tools:"``.

        Args:
            template: Text containing a single ``{label}`` placeholder.

        Returns:
            str: Rendered text.
        """

        if self.wrapper_label:
            return template.format(label=self.wrapper_label)
        return " ".join(template.format(label="").split())


def build_config(**values: object) -> ShimConfig:
    """Return a validated :class:`ShimConfig` built from raw option values.

    Args:
        **values: Field values keyed by :class:`ShimConfig` attribute name.
            ``None`` values are dropped so that model defaults apply.

    Returns:
        ShimConfig: Frozen configuration instance.

    Raises:
        ConfigError: If any value fails validation.
    """

    payload = {key: value for key, value in values.items() if value is not None}
    try:
        return ShimConfig.model_validate(payload)
    except ValidationError as exc:
        problems = "; ".join(
            f"{'.'.join(str(part) for part in error['loc'])}: {error['msg']}" for error in exc.errors()
        )
        raise ConfigError(f"Invalid configuration: {problems}") from exc


__all__ = [
    "DEBUG_ENV",
    "DEFAULT_HELP_FLAG",
    "DEFAULT_TOOLS_DIRECTORY",
    "HELP_TIMEOUT_ENV",
    "JOBS_ENV",
    "ShimConfig",
    "TOOLS_DIR_ENV",
    "WRAPPER_ENV",
    "build_config",
]
