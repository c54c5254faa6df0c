"""Error presentation utilities.

Centralized error formatting and exit code mapping for the init command.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from create_release_hub.core.errors import ErrorCode, InitError
from create_release_hub.output.console import Style

if TYPE_CHECKING:
    from create_release_hub.output.console import ConsoleProtocol

__all__ = ["print_init_error", "init_error_exit_code"]


def print_init_error(error: InitError, console: ConsoleProtocol) -> None:
    """Print an init error as one error line plus an optional hint."""
    console.error(error.message)
    if error.hint:
        console.print(f"hint: {error.hint}", Style.DIM)


def init_error_exit_code(error: InitError) -> int:
    """Get the process exit code for an init error."""
    match error.kind:
        case "config_exists":
            return int(ErrorCode.USER_ERROR)
        case "not_interactive":
            return int(ErrorCode.ENV_ERROR)
        case "install_failed":
            return int(ErrorCode.INSTALL_ERROR)
        case "write_failed":
            return int(ErrorCode.IO_ERROR)
        case "cancelled":
            return int(ErrorCode.CANCELLED)
