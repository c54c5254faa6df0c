"""Result type for explicit error handling.

Every fallible step of the init pipeline returns ``Ok(value)`` or
``Err(error)`` instead of raising. Exceptions are only caught at the I/O
edges (file reads, subprocess spawn, file writes, prompt aborts) and turned
into typed errors there.

Usage:
    match install_dependency(manager, project, console):
        case Ok(None):
            console.success("installed")
        case Err(error):
            console.error(str(error))
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Ok[T]:
    """Successful result carrying ``value``."""

    value: T

    def __repr__(self) -> str:
        return f"Ok({self.value!r})"


@dataclass(frozen=True, slots=True)
class Err[E]:
    """Failed result carrying ``error``."""

    error: E

    def __repr__(self) -> str:
        return f"Err({self.error!r})"


type Result[T, E] = Ok[T] | Err[E]
