from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from create_release_hub.core.release_config import ReleaseConfig
from create_release_hub.core.result import Err, Ok, Result
from create_release_hub.platform.files import atomic_write_text

__all__ = ["WriteError", "write_config"]


@dataclass(frozen=True, slots=True)
class WriteError:
    path: Path
    message: str


def write_config(config: ReleaseConfig, path: Path) -> Result[None, WriteError]:
    """Write ``config`` as pretty JSON, replacing any file at ``path``."""
    try:
        atomic_write_text(path, config.to_json())
    except OSError as e:
        return Err(WriteError(path=path, message=str(e)))
    return Ok(None)
