from __future__ import annotations

from pathlib import Path

import pytest

from create_release_hub.core.project import ProjectContext
from create_release_hub.core.result import Err, Ok, Result
from create_release_hub.output.console import MockConsole
from create_release_hub.platform.process import ProcessError
from create_release_hub.services.package_manager import PackageManager


def test_runs_manager_command_in_project(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    import create_release_hub.services.installer as installer

    calls: list[tuple[list[str], Path]] = []

    def fake_run(
        cmd: list[str], cwd: Path, env: dict[str, str] | None = None
    ) -> Result[None, ProcessError]:
        calls.append((cmd, cwd))
        return Ok(None)

    monkeypatch.setattr(installer, "run_inherited", fake_run)
    console = MockConsole()

    result = installer.install_dependency(
        PackageManager.PNPM, ProjectContext(root=tmp_path), console
    )

    assert isinstance(result, Ok)
    assert calls == [(["pnpm", "add", "-D", "release-hub"], tmp_path)]
    assert console.find("Installing release-hub using pnpm")
    assert console.find("Command: pnpm add -D release-hub")
    assert console.has_success()


def test_failure_is_returned(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    import create_release_hub.services.installer as installer

    error = ProcessError(command=("yarn", "add", "-D", "release-hub"), returncode=1)
    monkeypatch.setattr(installer, "run_inherited", lambda *a, **k: Err(error))
    console = MockConsole()

    result = installer.install_dependency(
        PackageManager.YARN, ProjectContext(root=tmp_path), console
    )

    assert result == Err(error)
    assert not console.has_success()
