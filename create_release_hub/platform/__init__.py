"""Platform abstraction layer."""

from .files import atomic_write_text
from .process import ProcessError, run_inherited

__all__ = [
    # files
    "atomic_write_text",
    # process
    "ProcessError",
    "run_inherited",
]
