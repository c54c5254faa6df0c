"""Project context: the directory being initialized and its manifest.

The manifest (``package.json``) is read at most once per run. A missing or
broken manifest is an expected state, not an error: it is cached as an
``Err(ManifestError)`` and every consumer decides its own fallback.
"""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from pathlib import Path
from typing import Literal

from .constants import MANIFEST_FILE
from .result import Err, Ok, Result
from .structured import StrDict, as_str_dict

__all__ = [
    "ManifestError",
    "ProjectContext",
    "load_manifest",
]


@dataclass(frozen=True, slots=True)
class ManifestError:
    """Why the manifest could not be used."""

    kind: Literal["missing", "invalid"]
    message: str
    path: Path | None = None


def load_manifest(path: Path) -> Result[StrDict, ManifestError]:
    """Read and parse a ``package.json`` file.

    Args:
        path: Path to the manifest.

    Returns:
        Ok(dict) with the parsed top-level object, or Err(ManifestError).
    """
    if not path.is_file():
        return Err(ManifestError("missing", f"{path.name} not found", path=path))

    try:
        text = path.read_text(encoding="utf-8")
    except OSError as e:
        return Err(ManifestError("invalid", f"Cannot read {path.name}: {e}", path=path))

    try:
        data: object = json.loads(text)
    except json.JSONDecodeError as e:
        return Err(ManifestError("invalid", f"Invalid JSON in {path.name}: {e}", path=path))

    table = as_str_dict(data)
    if table is None:
        return Err(ManifestError("invalid", f"{path.name} is not a JSON object", path=path))
    return Ok(table)


def _unloaded() -> list[Result[StrDict, ManifestError]]:
    return []


@dataclass(frozen=True, slots=True)
class ProjectContext:
    """The project directory for one run.

    Attributes:
        root: Working directory. All probes and the output path are relative to it.
    """

    root: Path
    _manifest: list[Result[StrDict, ManifestError]] = field(
        default_factory=_unloaded, repr=False, compare=False
    )

    @property
    def manifest_path(self) -> Path:
        """Path to package.json."""
        return self.root / MANIFEST_FILE

    def manifest(self) -> Result[StrDict, ManifestError]:
        """Parsed manifest, loaded on first access and cached."""
        if not self._manifest:
            self._manifest.append(load_manifest(self.manifest_path))
        return self._manifest[0]

    def has_file(self, name: str) -> bool:
        """Check whether ``name`` exists in the project directory."""
        return (self.root / name).exists()
