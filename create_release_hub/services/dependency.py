from __future__ import annotations

from create_release_hub.core.constants import LIBRARY_NAME, MANIFEST_FILE
from create_release_hub.core.project import ProjectContext
from create_release_hub.core.result import Err
from create_release_hub.core.structured import get_table
from create_release_hub.output.console import ConsoleProtocol

__all__ = ["DEPENDENCY_FIELDS", "is_library_installed"]

DEPENDENCY_FIELDS = ("dependencies", "devDependencies")


def is_library_installed(project: ProjectContext, console: ConsoleProtocol) -> bool:
    """Check whether package.json declares the library.

    Only the manifest is consulted; node_modules is not inspected.
    """
    console.info(f"Checking whether you have {LIBRARY_NAME}")

    manifest = project.manifest()
    if isinstance(manifest, Err):
        console.message(f"Cannot check dependencies: {manifest.error.message}")
        return False

    for field_name in DEPENDENCY_FIELDS:
        table = get_table(manifest.value, field_name)
        if table is not None and LIBRARY_NAME in table:
            console.message(f"Found {LIBRARY_NAME} in {MANIFEST_FILE} {field_name}")
            return True

    return False
