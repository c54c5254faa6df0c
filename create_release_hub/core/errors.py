"""Error types and exit codes for the init command.

``ErrorCode`` values are process exit codes and should remain stable:
- 0: Success
- 1: User error (config already exists, invalid --cwd)
- 2: Environment error (no interactive terminal)
- 3: Install error (package manager command failed)
- 5: I/O error (config file could not be written)
- 130: Cancelled by the user (same code a shell uses for Ctrl+C)
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from typing import Literal

__all__ = ["ErrorCode", "InitError", "InitErrorKind"]


class ErrorCode(IntEnum):
    """Exit codes for the CLI."""

    OK = 0
    USER_ERROR = 1
    ENV_ERROR = 2
    INSTALL_ERROR = 3
    IO_ERROR = 5
    CANCELLED = 130


InitErrorKind = Literal[
    "config_exists",
    "cancelled",
    "install_failed",
    "write_failed",
    "not_interactive",
]


@dataclass(frozen=True, slots=True)
class InitError:
    """A fatal condition that ends the run before the config is written."""

    kind: InitErrorKind
    message: str
    hint: str | None = None
