"""The release-hub configuration value produced by the init wizard.

``ReleaseConfig`` is frozen. Each ``with_*`` method returns a new value, so
the wizard builds the config one answer at a time without shared mutable
state. Enabled targets are held as an ordered set and only become the sparse
``{"node": true}`` map in :meth:`ReleaseConfig.to_dict`.
"""

from __future__ import annotations

import json
from collections.abc import Iterable, Mapping
from dataclasses import dataclass, replace
from pathlib import Path
from typing import Literal, cast, get_args

from .constants import CONFIG_SCHEMA_URL
from .result import Err, Ok, Result
from .structured import StrDict, as_str_dict

__all__ = [
    "ReleaseType",
    "Target",
    "SyncGroup",
    "SyncPolicy",
    "RELEASE_TYPES",
    "TARGETS",
    "DEFAULT_TARGET_PATHS",
    "ReleaseConfig",
    "ReleaseConfigError",
    "is_relative_path",
    "load_release_config",
]

ReleaseType = Literal["major", "minor", "patch"]
Target = Literal["node", "jsr", "deno", "webext"]

SyncGroup = tuple[Target, ...]
SyncPolicy = bool | tuple[SyncGroup, ...]

RELEASE_TYPES: tuple[ReleaseType, ...] = get_args(ReleaseType)
TARGETS: tuple[Target, ...] = get_args(Target)

DEFAULT_TARGET_PATHS: Mapping[Target, str] = {
    "node": "./package.json",
    "jsr": "./jsr.json",
    "deno": "./deno.json",
    "webext": "./manifest.json",
}


def is_relative_path(value: str) -> bool:
    """True if value starts with ``./`` or ``../``."""
    return value.startswith("./") or value.startswith("../")


def _dedupe(targets: Iterable[Target]) -> tuple[Target, ...]:
    return tuple(dict.fromkeys(targets))


@dataclass(frozen=True, slots=True)
class ReleaseConfigError:
    """Error when a release-hub.json file cannot be loaded or parsed."""

    message: str
    path: Path | None = None


@dataclass(frozen=True, slots=True)
class ReleaseConfig:
    """Release-hub configuration.

    Attributes:
        default_release_type: Bump applied when a release does not name one.
        targets: Enabled targets, in selection order, without duplicates.
        targets_path: (target, path) pairs for the manifest carrying each
            target's version.
        sync: True to keep every target in sync, False for none, or a tuple
            of groups whose versions move together.
    """

    default_release_type: ReleaseType = "patch"
    targets: tuple[Target, ...] = ()
    targets_path: tuple[tuple[Target, str], ...] = ()
    sync: SyncPolicy = True
    schema: str = CONFIG_SCHEMA_URL

    # -- builder ---------------------------------------------------------

    def with_release_type(self, release_type: ReleaseType) -> ReleaseConfig:
        if release_type not in RELEASE_TYPES:
            raise ValueError(f"unknown release type: {release_type}")
        return replace(self, default_release_type=release_type)

    def with_targets(self, targets: Iterable[Target]) -> ReleaseConfig:
        """Replace the enabled targets.

        Paths of targets that are no longer enabled are dropped.
        """
        enabled = _dedupe(targets)
        for target in enabled:
            if target not in TARGETS:
                raise ValueError(f"unknown target: {target}")
        kept = tuple((t, p) for t, p in self.targets_path if t in enabled)
        return replace(self, targets=enabled, targets_path=kept)

    def with_target_path(self, target: Target, path: str) -> ReleaseConfig:
        if target not in self.targets:
            raise ValueError(f"target is not enabled: {target}")
        if not is_relative_path(path):
            raise ValueError(f"path must start with ./ or ../: {path}")
        others = tuple((t, p) for t, p in self.targets_path if t != target)
        return replace(self, targets_path=(*others, (target, path)))

    def with_sync(self, sync: bool) -> ReleaseConfig:
        return replace(self, sync=sync)

    def with_sync_group(self, group: Iterable[Target]) -> ReleaseConfig:
        """Append a sync group, switching sync to group mode if needed."""
        members = _dedupe(group)
        if len(members) < 2:
            raise ValueError("a sync group needs at least 2 targets")
        groups = self.sync if isinstance(self.sync, tuple) else ()
        return replace(self, sync=(*groups, members))

    # -- queries ---------------------------------------------------------

    @property
    def paths(self) -> dict[Target, str]:
        return dict(self.targets_path)

    @property
    def missing_paths(self) -> tuple[Target, ...]:
        """Enabled targets that have no path yet."""
        have = self.paths
        return tuple(t for t in self.targets if t not in have)

    # -- serialization ---------------------------------------------------

    def to_dict(self) -> StrDict:
        """JSON shape of the config, keys in output order."""
        sync: object
        if isinstance(self.sync, bool):
            sync = self.sync
        else:
            sync = [list(group) for group in self.sync]

        return {
            "$schema": self.schema,
            "defaultReleaseType": self.default_release_type,
            "targets": {t: True for t in self.targets},
            "targetsPath": {t: p for t, p in self.targets_path},
            "sync": sync,
        }

    def to_json(self) -> str:
        """Pretty-printed JSON with a trailing newline."""
        return json.dumps(self.to_dict(), indent=2, ensure_ascii=False) + "\n"

    @classmethod
    def from_dict(cls, data: Mapping[str, object]) -> ReleaseConfig:
        """Create a config from its JSON shape.

        Raises:
            ValueError: If a field has the wrong type or an unknown value.
        """
        release_type = data.get("defaultReleaseType", "patch")
        if release_type not in RELEASE_TYPES:
            raise ValueError(f"invalid defaultReleaseType: {release_type!r}")

        targets_table = as_str_dict(data.get("targets", {}))
        if targets_table is None:
            raise ValueError("targets must be an object")
        targets = [_target(k) for k, v in targets_table.items() if v is True]

        paths_table = as_str_dict(data.get("targetsPath", {}))
        if paths_table is None:
            raise ValueError("targetsPath must be an object")

        config = cls(schema=str(data.get("$schema", CONFIG_SCHEMA_URL)))
        config = config.with_release_type(cast(ReleaseType, release_type))
        config = config.with_targets(targets)
        for key, value in paths_table.items():
            if not isinstance(value, str):
                raise ValueError(f"targetsPath.{key} must be a string")
            config = config.with_target_path(_target(key), value)

        raw_sync = data.get("sync", True)
        if isinstance(raw_sync, bool):
            return config.with_sync(raw_sync)
        if not isinstance(raw_sync, list):
            raise ValueError("sync must be a boolean or a list of groups")
        for group in cast(list[object], raw_sync):
            if not isinstance(group, list):
                raise ValueError("each sync group must be a list")
            config = config.with_sync_group(_target(m) for m in cast(list[object], group))
        return config


def _target(value: object) -> Target:
    if value not in TARGETS:
        raise ValueError(f"unknown target: {value!r}")
    return cast(Target, value)


def load_release_config(path: Path) -> Result[ReleaseConfig, ReleaseConfigError]:
    """Load a release-hub.json file."""
    if not path.exists():
        return Err(ReleaseConfigError(f"Config file not found: {path}", path=path))

    try:
        data: object = json.loads(path.read_text(encoding="utf-8"))
    except OSError as e:
        return Err(ReleaseConfigError(f"Cannot read config: {e}", path=path))
    except json.JSONDecodeError as e:
        return Err(ReleaseConfigError(f"Invalid JSON: {e}", path=path))

    table = as_str_dict(data)
    if table is None:
        return Err(ReleaseConfigError("Config is not a JSON object", path=path))

    try:
        return Ok(ReleaseConfig.from_dict(table))
    except ValueError as e:
        return Err(ReleaseConfigError(f"Invalid config structure: {e}", path=path))
