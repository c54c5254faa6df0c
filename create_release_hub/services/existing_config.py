"""Detect a release-hub config that already exists in the project.

A config counts as existing when the project directory holds a dedicated
config file (``release-hub.json``, ``.release-hub.config.ts``, ...) or when
``package.json`` carries a truthy top-level ``release-hub`` field.
"""

from __future__ import annotations

import re

from create_release_hub.core.constants import (
    CONFIG_EXTENSIONS,
    MANIFEST_CONFIG_KEY,
    MANIFEST_FILE,
)
from create_release_hub.core.project import ProjectContext
from create_release_hub.core.result import Err
from create_release_hub.core.structured import is_truthy
from create_release_hub.output.console import ConsoleProtocol

__all__ = ["find_config_files", "has_existing_config"]

_CONFIG_NAME = re.compile(
    r"^\.?release-hub(?:\.config)?\.(?:" + "|".join(CONFIG_EXTENSIONS) + r")$"
)


def find_config_files(project: ProjectContext) -> list[str]:
    """Names of dedicated config files in the project directory, sorted."""
    try:
        names = [entry.name for entry in project.root.iterdir()]
    except OSError:
        return []
    return sorted(name for name in names if _CONFIG_NAME.match(name))


def has_existing_config(project: ProjectContext, console: ConsoleProtocol) -> bool:
    console.info(f"Checking config files in: {project.root}")

    matches = find_config_files(project)
    if matches:
        console.message(f"Found config file(s): {', '.join(matches)}")
        return True

    console.message(f"No config files found, checking {MANIFEST_FILE}")

    manifest = project.manifest()
    if isinstance(manifest, Err):
        console.message(f"{MANIFEST_FILE} not found or unreadable")
        return False

    if is_truthy(manifest.value.get(MANIFEST_CONFIG_KEY)):
        console.message(f'Found config under "{MANIFEST_CONFIG_KEY}" in {MANIFEST_FILE}')
        return True

    console.message(f'"{MANIFEST_CONFIG_KEY}" field not found in {MANIFEST_FILE}')
    return False
