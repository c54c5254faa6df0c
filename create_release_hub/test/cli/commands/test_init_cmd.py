from __future__ import annotations

import json
from pathlib import Path

import pytest
from typer.testing import CliRunner

from create_release_hub import __version__
from create_release_hub.cli.app import app
from create_release_hub.core.errors import ErrorCode, InitError
from create_release_hub.core.release_config import ReleaseConfig
from create_release_hub.core.result import Err, Ok

runner = CliRunner()


def _interactive(monkeypatch: pytest.MonkeyPatch) -> None:
    import create_release_hub.cli.commands.init_cmd as init_cmd

    monkeypatch.setattr(init_cmd, "is_interactive_terminal", lambda: True)


def test_version() -> None:
    result = runner.invoke(app, ["--version"])

    assert result.exit_code == 0
    assert __version__ in result.output


def test_requires_terminal(tmp_path: Path) -> None:
    result = runner.invoke(app, ["--cwd", str(tmp_path)])

    assert result.exit_code == int(ErrorCode.ENV_ERROR)
    assert "interactive terminal" in result.output
    assert not (tmp_path / "release-hub.json").exists()


def test_cwd_must_be_directory(tmp_path: Path) -> None:
    result = runner.invoke(app, ["--cwd", str(tmp_path / "missing")])

    assert result.exit_code == int(ErrorCode.USER_ERROR)
    assert "not a directory" in result.output


def test_success_exits_zero(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    import create_release_hub.cli.commands.init_cmd as init_cmd

    _interactive(monkeypatch)
    seen: list[Path] = []

    def fake_run_init(**kwargs: object):
        project = kwargs["project"]
        seen.append(project.root)  # type: ignore[attr-defined]
        return Ok(ReleaseConfig())

    monkeypatch.setattr(init_cmd, "run_init", fake_run_init)

    result = runner.invoke(app, ["--cwd", str(tmp_path)])

    assert result.exit_code == 0
    assert seen == [tmp_path.resolve()]


@pytest.mark.parametrize(
    ("kind", "code"),
    [
        ("config_exists", ErrorCode.USER_ERROR),
        ("cancelled", ErrorCode.CANCELLED),
        ("install_failed", ErrorCode.INSTALL_ERROR),
        ("write_failed", ErrorCode.IO_ERROR),
    ],
)
def test_errors_map_to_exit_codes(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch, kind: str, code: ErrorCode
) -> None:
    import create_release_hub.cli.commands.init_cmd as init_cmd

    _interactive(monkeypatch)
    monkeypatch.setattr(
        init_cmd,
        "run_init",
        lambda **_: Err(InitError(kind=kind, message=f"failed: {kind}")),  # type: ignore[arg-type]
    )

    result = runner.invoke(app, ["--cwd", str(tmp_path)])

    assert result.exit_code == int(code)
    assert f"failed: {kind}" in result.output


def test_existing_config_end_to_end(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    _interactive(monkeypatch)
    (tmp_path / "package.json").write_text(
        json.dumps({"name": "demo", "release-hub": {"sync": False}}), encoding="utf-8"
    )

    result = runner.invoke(app, ["--cwd", str(tmp_path)])

    assert result.exit_code == int(ErrorCode.USER_ERROR)
    assert "already exists" in result.output
    assert not (tmp_path / "release-hub.json").exists()


def test_existing_config_reported_without_terminal(tmp_path: Path) -> None:
    (tmp_path / "release-hub.json").write_text("{}\n", encoding="utf-8")

    result = runner.invoke(app, ["--cwd", str(tmp_path)])

    assert result.exit_code == int(ErrorCode.USER_ERROR)
    assert "already exists" in result.output
