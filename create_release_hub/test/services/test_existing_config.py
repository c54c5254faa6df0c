from __future__ import annotations

import json
from pathlib import Path

import pytest

from create_release_hub.core.project import ProjectContext
from create_release_hub.output.console import MockConsole
from create_release_hub.services.existing_config import find_config_files, has_existing_config


def _manifest(root: Path, data: object) -> None:
    (root / "package.json").write_text(json.dumps(data), encoding="utf-8")


@pytest.mark.parametrize(
    "name",
    [
        "release-hub.json",
        ".release-hub.json",
        "release-hub.config.ts",
        ".release-hub.config.mjs",
        "release-hub.cjs",
        "release-hub.config.cts",
        "release-hub.mts",
        "release-hub.js",
    ],
)
def test_config_file_names_detected(tmp_path: Path, name: str) -> None:
    (tmp_path / name).write_text("{}", encoding="utf-8")
    console = MockConsole()

    assert has_existing_config(ProjectContext(root=tmp_path), console) is True
    assert console.find(f"Found config file(s): {name}")


@pytest.mark.parametrize(
    "name",
    [
        "release-hub.yaml",
        "release-hub.config.json.bak",
        "my-release-hub.json",
        "release-hub.conf.json",
        "..release-hub.json",
    ],
)
def test_similar_names_ignored(tmp_path: Path, name: str) -> None:
    (tmp_path / name).write_text("{}", encoding="utf-8")

    assert find_config_files(ProjectContext(root=tmp_path)) == []


def test_lists_all_matches_sorted(tmp_path: Path) -> None:
    for name in ("release-hub.ts", ".release-hub.json"):
        (tmp_path / name).write_text("", encoding="utf-8")

    assert find_config_files(ProjectContext(root=tmp_path)) == [
        ".release-hub.json",
        "release-hub.ts",
    ]


def test_manifest_field_detected(tmp_path: Path) -> None:
    _manifest(tmp_path, {"name": "demo", "release-hub": {"sync": True}})
    console = MockConsole()

    assert has_existing_config(ProjectContext(root=tmp_path), console) is True
    assert console.find('Found config under "release-hub" in package.json')


@pytest.mark.parametrize("value", [None, False, 0, ""])
def test_falsy_manifest_field_ignored(tmp_path: Path, value: object) -> None:
    _manifest(tmp_path, {"release-hub": value})

    assert has_existing_config(ProjectContext(root=tmp_path), MockConsole()) is False


def test_empty_object_field_counts(tmp_path: Path) -> None:
    _manifest(tmp_path, {"release-hub": {}})

    assert has_existing_config(ProjectContext(root=tmp_path), MockConsole()) is True


def test_neither_present(tmp_path: Path) -> None:
    _manifest(tmp_path, {"name": "demo"})
    console = MockConsole()

    assert has_existing_config(ProjectContext(root=tmp_path), console) is False
    assert console.find('"release-hub" field not found in package.json')


def test_missing_manifest_is_not_an_error(tmp_path: Path) -> None:
    console = MockConsole()

    assert has_existing_config(ProjectContext(root=tmp_path), console) is False
    assert console.find("package.json not found or unreadable")
    assert not console.has_error()


def test_broken_manifest_is_not_an_error(tmp_path: Path) -> None:
    (tmp_path / "package.json").write_text("{oops", encoding="utf-8")

    assert has_existing_config(ProjectContext(root=tmp_path), MockConsole()) is False
