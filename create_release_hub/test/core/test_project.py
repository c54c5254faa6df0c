"""Tests for create_release_hub.core.project module."""

from __future__ import annotations

import json
from pathlib import Path

from create_release_hub.core.project import ProjectContext, load_manifest
from create_release_hub.core.result import Err, Ok


class TestLoadManifest:
    def test_missing(self, tmp_path: Path) -> None:
        result = load_manifest(tmp_path / "package.json")

        assert isinstance(result, Err)
        assert result.error.kind == "missing"

    def test_invalid_json(self, tmp_path: Path) -> None:
        path = tmp_path / "package.json"
        path.write_text("{ not json", encoding="utf-8")

        result = load_manifest(path)

        assert isinstance(result, Err)
        assert result.error.kind == "invalid"
        assert "Invalid JSON" in result.error.message

    def test_non_object(self, tmp_path: Path) -> None:
        path = tmp_path / "package.json"
        path.write_text("[1, 2]", encoding="utf-8")

        result = load_manifest(path)

        assert isinstance(result, Err)
        assert result.error.kind == "invalid"

    def test_valid(self, tmp_path: Path) -> None:
        path = tmp_path / "package.json"
        path.write_text(json.dumps({"name": "demo"}), encoding="utf-8")

        result = load_manifest(path)

        assert result == Ok({"name": "demo"})


class TestProjectContext:
    def test_manifest_path(self, tmp_path: Path) -> None:
        assert ProjectContext(root=tmp_path).manifest_path == tmp_path / "package.json"

    def test_manifest_is_cached(self, tmp_path: Path) -> None:
        path = tmp_path / "package.json"
        path.write_text(json.dumps({"name": "first"}), encoding="utf-8")
        project = ProjectContext(root=tmp_path)

        first = project.manifest()
        path.write_text(json.dumps({"name": "second"}), encoding="utf-8")
        second = project.manifest()

        assert first is second
        assert isinstance(second, Ok)
        assert second.value["name"] == "first"

    def test_absent_manifest_is_cached_as_err(self, tmp_path: Path) -> None:
        project = ProjectContext(root=tmp_path)

        assert isinstance(project.manifest(), Err)
        (tmp_path / "package.json").write_text("{}", encoding="utf-8")
        assert isinstance(project.manifest(), Err)

    def test_has_file(self, tmp_path: Path) -> None:
        (tmp_path / "yarn.lock").write_text("", encoding="utf-8")
        project = ProjectContext(root=tmp_path)

        assert project.has_file("yarn.lock")
        assert not project.has_file("pnpm-lock.yaml")

    def test_equality_ignores_cache(self, tmp_path: Path) -> None:
        a = ProjectContext(root=tmp_path)
        b = ProjectContext(root=tmp_path)
        a.manifest()

        assert a == b
