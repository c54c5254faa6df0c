"""Package manager detection.

Detection runs a fixed list of probes and keeps the first answer:

1. lockfiles (what actually ran in this project)
2. the ``packageManager`` field of package.json (explicit declaration)
3. the ``npm_config_user_agent`` variable set by the invoking runner
4. npm as the fallback

Each probe returns ``PackageManager | None``. A probe that cannot read its
input returns None and the next probe runs.
"""

from __future__ import annotations

import os
from collections.abc import Callable, Mapping, Sequence
from enum import Enum

from create_release_hub.core.constants import LIBRARY_NAME, USER_AGENT_ENV
from create_release_hub.core.project import ProjectContext
from create_release_hub.core.result import Err
from create_release_hub.core.structured import get_str

__all__ = [
    "PackageManager",
    "Probe",
    "LOCKFILES",
    "first_match",
    "probe_lockfiles",
    "probe_manifest_field",
    "probe_user_agent",
    "detect_package_manager",
]


class PackageManager(Enum):
    """JavaScript package managers that can install the library."""

    NPM = "npm"
    YARN = "yarn"
    PNPM = "pnpm"
    BUN = "bun"

    def __str__(self) -> str:
        return self.value

    @classmethod
    def from_name(cls, name: str) -> PackageManager | None:
        """Look up a manager by its command name, None if unknown."""
        try:
            return cls(name.strip().lower())
        except ValueError:
            return None

    @property
    def install_command(self) -> list[str]:
        """Command that adds the library as a dev dependency."""
        return {
            PackageManager.NPM: ["npm", "i", "-D", LIBRARY_NAME],
            PackageManager.YARN: ["yarn", "add", "-D", LIBRARY_NAME],
            PackageManager.PNPM: ["pnpm", "add", "-D", LIBRARY_NAME],
            PackageManager.BUN: ["bun", "i", "-D", LIBRARY_NAME],
        }[self]


# Highest priority first. bun.lock is the text format of Bun 1.2+,
# bun.lockb the older binary one.
LOCKFILES: tuple[tuple[str, PackageManager], ...] = (
    ("pnpm-lock.yaml", PackageManager.PNPM),
    ("yarn.lock", PackageManager.YARN),
    ("bun.lock", PackageManager.BUN),
    ("bun.lockb", PackageManager.BUN),
    ("package-lock.json", PackageManager.NPM),
)

_USER_AGENT_PREFIXES: tuple[PackageManager, ...] = (
    PackageManager.PNPM,
    PackageManager.YARN,
    PackageManager.BUN,
    PackageManager.NPM,
)

Probe = Callable[[], PackageManager | None]


def first_match[T](probes: Sequence[Callable[[], T | None]]) -> T | None:
    """Run probes in order and return the first non-None result."""
    for probe in probes:
        found = probe()
        if found is not None:
            return found
    return None


def probe_lockfiles(project: ProjectContext) -> PackageManager | None:
    for name, manager in LOCKFILES:
        if project.has_file(name):
            return manager
    return None


def probe_manifest_field(project: ProjectContext) -> PackageManager | None:
    """Read ``"packageManager": "yarn@3.0.0"`` style declarations."""
    manifest = project.manifest()
    if isinstance(manifest, Err):
        return None
    declared = get_str(manifest.value, "packageManager")
    if declared is None:
        return None
    return PackageManager.from_name(declared.split("@", 1)[0])


def probe_user_agent(env: Mapping[str, str]) -> PackageManager | None:
    """Match the runner's user agent, e.g. ``pnpm/9.1.0 npm/? node/v20``."""
    agent = env.get(USER_AGENT_ENV)
    if not agent:
        return None
    for manager in _USER_AGENT_PREFIXES:
        if agent.startswith(manager.value):
            return manager
    return None


def detect_package_manager(
    project: ProjectContext,
    env: Mapping[str, str] | None = None,
) -> PackageManager:
    """Detect which package manager governs the project.

    Args:
        project: Project to inspect.
        env: Environment mapping (uses os.environ if None).

    Returns:
        The detected manager; npm when nothing else matched.
    """
    environ = os.environ if env is None else env
    probes: list[Probe] = [
        lambda: probe_lockfiles(project),
        lambda: probe_manifest_field(project),
        lambda: probe_user_agent(environ),
    ]
    return first_match(probes) or PackageManager.NPM
