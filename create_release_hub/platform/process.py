"""Subprocess execution with Result-based error handling.

The package manager runs with inherited standard streams so its own
progress output reaches the terminal. The call blocks until the process
exits; there is no timeout.

Usage:
    result = run_inherited(["pnpm", "add", "-D", "release-hub"], cwd=root)
    match result:
        case Ok(None):
            print("installed")
        case Err(error):
            print(f"Failed: {error}")
"""

from __future__ import annotations

import shutil
import subprocess
from dataclasses import dataclass
from pathlib import Path

from create_release_hub.core.result import Err, Ok, Result

__all__ = ["ProcessError", "run_inherited"]


@dataclass(frozen=True, slots=True)
class ProcessError:
    """Error from a failed subprocess execution.

    Attributes:
        command: The command that was executed.
        returncode: Exit code of the process, or -1 if it could not be started.
        stderr: OS error text when the process could not be started.
    """

    command: tuple[str, ...]
    returncode: int
    stderr: str = ""

    def __str__(self) -> str:
        """Format error for display."""
        cmd_str = " ".join(self.command[:4])
        if len(self.command) > 4:
            cmd_str += " ..."
        if self.returncode == -1:
            return f"{cmd_str} could not be started: {self.stderr}"
        return f"{cmd_str} failed (exit {self.returncode})"


def _resolve(executable: str) -> str:
    # npm, pnpm and yarn ship as .cmd shims on Windows; which() finds them.
    return shutil.which(executable) or executable


def run_inherited(
    cmd: list[str],
    cwd: Path,
    env: dict[str, str] | None = None,
) -> Result[None, ProcessError]:
    """Execute a command with the terminal's stdin/stdout/stderr.

    Args:
        cmd: Command and arguments to execute.
        cwd: Working directory for the command.
        env: Environment variables (uses current env if None).

    Returns:
        Ok(None) on exit code 0, Err(ProcessError) otherwise.
    """
    try:
        proc = subprocess.run(
            [_resolve(cmd[0]), *cmd[1:]],
            cwd=str(cwd),
            env=env,
            check=False,
        )
    except OSError as e:
        return Err(ProcessError(command=tuple(cmd), returncode=-1, stderr=str(e)))

    if proc.returncode != 0:
        return Err(ProcessError(command=tuple(cmd), returncode=proc.returncode))

    return Ok(None)
