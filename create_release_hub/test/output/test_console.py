"""Tests for create_release_hub.output.console module."""

from __future__ import annotations

import pytest

from create_release_hub.output.console import (
    ConsoleProtocol,
    MockConsole,
    OutputRecord,
    RichConsole,
    Style,
)


class TestStyle:
    def test_str_conversion(self) -> None:
        assert str(Style.SUCCESS) == "success"
        assert str(Style.STEP) == "step"

    def test_all_styles_exist(self) -> None:
        expected = {"DEFAULT", "SUCCESS", "ERROR", "WARNING", "INFO", "STEP", "DIM", "HEADER"}
        assert {s.name for s in Style} == expected


class TestMockConsole:
    def test_levels(self) -> None:
        console = MockConsole()
        console.intro("create-release-hub")
        console.step("Installing")
        console.message("detail")
        console.info("checking")
        console.warning("careful")
        console.success("done")
        console.error("failed")
        console.outro("bye")

        assert console.outputs == [
            OutputRecord("create-release-hub", Style.HEADER),
            OutputRecord("Installing", Style.STEP),
            OutputRecord("detail", Style.DIM),
            OutputRecord("info: checking", Style.INFO),
            OutputRecord("warning: careful", Style.WARNING),
            OutputRecord("OK done", Style.SUCCESS),
            OutputRecord("error: failed", Style.ERROR),
            OutputRecord("bye", Style.HEADER),
        ]

    def test_helpers(self) -> None:
        console = MockConsole()
        console.print("one")
        console.error("two")

        assert console.messages == ["one", "error: two"]
        assert console.text == "one\nerror: two"
        assert console.has_error()
        assert not console.has_warning()
        assert console.count(Style.DEFAULT) == 1
        assert len(console.find("two")) == 1

        console.clear()
        assert console.outputs == []

    def test_satisfies_protocol(self) -> None:
        console: ConsoleProtocol = MockConsole()
        console.step("Installing")


class TestRichConsole:
    def test_prints_to_stdout(self, capsys: pytest.CaptureFixture[str]) -> None:
        console = RichConsole()
        console.success("Created configuration file: ./release-hub.json")
        console.error("boom")

        out = capsys.readouterr().out
        assert "OK" in out
        assert "release-hub.json" in out
        assert "error:" in out
