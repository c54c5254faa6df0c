from __future__ import annotations

import pytest

from create_release_hub.core.errors import ErrorCode, InitError, InitErrorKind
from create_release_hub.output.console import MockConsole, Style
from create_release_hub.output.errors import init_error_exit_code, print_init_error


@pytest.mark.parametrize(
    ("kind", "code"),
    [
        ("config_exists", ErrorCode.USER_ERROR),
        ("not_interactive", ErrorCode.ENV_ERROR),
        ("install_failed", ErrorCode.INSTALL_ERROR),
        ("write_failed", ErrorCode.IO_ERROR),
        ("cancelled", ErrorCode.CANCELLED),
    ],
)
def test_exit_codes(kind: InitErrorKind, code: ErrorCode) -> None:
    assert init_error_exit_code(InitError(kind=kind, message="x")) == int(code)


def test_every_failure_is_nonzero() -> None:
    assert all(code != 0 for code in ErrorCode if code is not ErrorCode.OK)


def test_print_with_hint() -> None:
    console = MockConsole()

    print_init_error(InitError(kind="install_failed", message="npm failed", hint="retry"), console)

    assert console.messages == ["error: npm failed", "hint: retry"]
    assert console.outputs[1].style == Style.DIM


def test_print_without_hint() -> None:
    console = MockConsole()

    print_init_error(InitError(kind="cancelled", message="Operation cancelled"), console)

    assert console.messages == ["error: Operation cancelled"]
