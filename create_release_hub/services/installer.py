from __future__ import annotations

from create_release_hub.core.constants import LIBRARY_NAME
from create_release_hub.core.project import ProjectContext
from create_release_hub.core.result import Err, Ok, Result
from create_release_hub.output.console import ConsoleProtocol
from create_release_hub.platform.process import ProcessError, run_inherited
from create_release_hub.services.package_manager import PackageManager

__all__ = ["install_dependency"]


def install_dependency(
    manager: PackageManager,
    project: ProjectContext,
    console: ConsoleProtocol,
    env: dict[str, str] | None = None,
) -> Result[None, ProcessError]:
    """Add the library as a dev dependency using ``manager``.

    Blocks until the package manager exits. Its output streams straight to
    the terminal.
    """
    cmd = manager.install_command

    console.step(f"Installing {LIBRARY_NAME} using {manager}")
    console.info(f"Command: {' '.join(cmd)}")

    result = run_inherited(cmd, cwd=project.root, env=env)
    if isinstance(result, Err):
        return result

    console.success(f"{LIBRARY_NAME} installed successfully")
    return Ok(None)
