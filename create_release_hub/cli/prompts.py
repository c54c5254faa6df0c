"""Terminal prompts for the init wizard.

Every prompt returns a ``PromptResult``. ``action == "cancel"`` means the user
interrupted (Esc, q, Ctrl+C, or end of input); it is never confused with an
empty answer, which selects the default.
"""

from __future__ import annotations

import os
import shutil
import sys
from collections.abc import Callable, Sequence
from dataclasses import dataclass
from typing import Literal, TypeVar

import typer

T = TypeVar("T")

__all__ = [
    "PromptOption",
    "PromptResult",
    "confirm",
    "is_interactive_terminal",
    "prompt_text",
    "select_many",
    "select_one",
]


@dataclass(frozen=True, slots=True)
class PromptOption[T]:
    value: T
    label: str
    detail: str | None = None


@dataclass(frozen=True, slots=True)
class PromptResult[T]:
    action: Literal["select", "cancel"]
    value: T | None

    @property
    def cancelled(self) -> bool:
        return self.action == "cancel"


def selected[T](value: T) -> PromptResult[T]:
    return PromptResult(action="select", value=value)


def cancelled[T]() -> PromptResult[T]:
    return PromptResult(action="cancel", value=None)


def is_interactive_terminal() -> bool:
    return bool(sys.stdin.isatty() and sys.stdout.isatty())


def _color_enabled() -> bool:
    if not is_interactive_terminal():
        return False
    if os.getenv("NO_COLOR") is not None:
        return False
    term = os.getenv("TERM", "")
    return term.lower() != "dumb"


def _paint(text: str, *codes: str) -> str:
    if not _color_enabled() or not codes:
        return text
    return f"\x1b[{';'.join(codes)}m{text}\x1b[0m"


def _clear() -> None:
    sys.stdout.write("\x1b[2J\x1b[H")


def _read_char() -> str:
    if os.name == "nt":
        import msvcrt

        return msvcrt.getwch()

    import termios
    import tty

    fd = sys.stdin.fileno()
    old = termios.tcgetattr(fd)
    try:
        tty.setraw(fd)
        ch = sys.stdin.read(1)
        if ch == "\x1b":
            # Arrow keys arrive as ESC [ A/B; a lone ESC is a cancel.
            c2 = sys.stdin.read(1)
            if c2 == "[":
                return "\x1b[" + sys.stdin.read(1)
        return ch
    finally:
        termios.tcsetattr(fd, termios.TCSADRAIN, old)


def _read_key() -> str:
    ch = _read_char()
    if ch in ("\r", "\n"):
        return "enter"
    if ch == " ":
        return "space"
    if ch in ("\x1b[A", "k"):
        return "up"
    if ch in ("\x1b[B", "j"):
        return "down"
    if os.name == "nt" and ch in ("\x00", "\xe0"):
        ch2 = _read_char()
        return {"H": "up", "P": "down"}.get(ch2, "other")
    if ch in ("\x1b", "\x03", "\x04", "q", "Q", ""):
        return "cancel"
    return ch.lower()


def _truncate(text: str, width: int) -> str:
    if width <= 0:
        return ""
    if len(text) <= width:
        return text
    if width <= 3:
        return text[:width]
    return text[: width - 3] + "..."


def _pad(text: str, width: int) -> str:
    return _truncate(text, width).ljust(width)


def _cols() -> int:
    return max(60, min(120, shutil.get_terminal_size((100, 30)).columns))


def _line(widths: list[int]) -> str:
    return "+" + "+".join("-" * (w + 2) for w in widths) + "+"


def _row(cells: list[str]) -> str:
    return "| " + " | ".join(cells) + " |"


def _print_header(*, title: str, subtitle: str | None) -> None:
    print(_paint(title, "1", "96"))
    if subtitle is not None:
        print(_paint(subtitle, "2", "37"))
    print()


def _style_selected(text: str) -> str:
    return _paint(text, "1", "30", "46")


def _render(
    *,
    title: str,
    subtitle: str | None,
    options: Sequence[PromptOption[object]],
    index: int,
    checked: Sequence[int] | None,
    keys: str,
) -> None:
    _clear()
    _print_header(title=title, subtitle=subtitle)

    cols = _cols()
    sel_w = 5
    option_w = max(16, min(36, int(cols * 0.3)))
    detail_w = max(18, cols - (sel_w + option_w + 10))
    widths = [sel_w, option_w, detail_w]

    print(_line(widths))
    print(
        _row(
            [
                _paint(_pad("Sel", sel_w), "1", "95"),
                _paint(_pad("Option", option_w), "1", "95"),
                _paint(_pad("Details", detail_w), "1", "95"),
            ]
        )
    )
    print(_line(widths))

    for i, opt in enumerate(options):
        if checked is None:
            marker = ">>" if i == index else "  "
        else:
            box = "[x]" if i in checked else "[ ]"
            marker = f"{'>' if i == index else ' '}{box}"
        c1 = _pad(marker, sel_w)
        c2 = _pad(opt.label.strip(), option_w)
        c3 = _pad((opt.detail or "").strip(), detail_w)

        if i == index:
            print(_row([_style_selected(c1), _style_selected(c2), _style_selected(c3)]))
        else:
            print(_row([_paint(c1, "36"), _paint(c2, "97"), _paint(c3, "2", "37")]))

    print(_line(widths))
    print()
    print(_paint("Keys:", "1", "96") + " " + keys)
    sys.stdout.flush()


def _require_tty(what: str) -> None:
    if not is_interactive_terminal():
        raise RuntimeError(f"interactive {what} requires a TTY")


def select_one[T](
    *,
    title: str,
    options: list[PromptOption[T]],
    subtitle: str | None = None,
    initial_index: int = 0,
) -> PromptResult[T]:
    """Pick exactly one option with Up/Down + Enter."""
    if not options:
        raise ValueError("selector requires at least one option")
    _require_tty("selector")

    idx = max(0, min(initial_index, len(options) - 1))
    keys = _paint("Up/Down", "1", "97") + " + Enter, " + _paint("q/Esc", "1", "97") + ": cancel"

    while True:
        casted: list[PromptOption[object]] = [
            PromptOption(value=o.value, label=o.label, detail=o.detail) for o in options
        ]
        _render(
            title=title, subtitle=subtitle, options=casted, index=idx, checked=None, keys=keys
        )
        key = _read_key()

        if key == "up":
            idx = (idx - 1) % len(options)
        elif key == "down":
            idx = (idx + 1) % len(options)
        elif key == "enter":
            return selected(options[idx].value)
        elif key == "cancel":
            return cancelled()


def select_many[T](
    *,
    title: str,
    options: list[PromptOption[T]],
    subtitle: str | None = None,
    initial: Sequence[T] = (),
) -> PromptResult[list[T]]:
    """Toggle any number of options with Space, confirm with Enter.

    The returned list follows toggle order. Pre-selected values come first,
    in the order given by ``initial``.
    """
    if not options:
        raise ValueError("selector requires at least one option")
    _require_tty("selector")

    idx = 0
    checked: list[int] = []
    for value in initial:
        for i, o in enumerate(options):
            if o.value == value and i not in checked:
                checked.append(i)
    keys = (
        _paint("Up/Down", "1", "97")
        + " move, "
        + _paint("Space", "1", "97")
        + " toggle, "
        + _paint("a", "1", "97")
        + " all, Enter confirm, "
        + _paint("q/Esc", "1", "97")
        + ": cancel"
    )

    while True:
        casted: list[PromptOption[object]] = [
            PromptOption(value=o.value, label=o.label, detail=o.detail) for o in options
        ]
        _render(
            title=title, subtitle=subtitle, options=casted, index=idx, checked=checked, keys=keys
        )
        key = _read_key()

        if key == "up":
            idx = (idx - 1) % len(options)
        elif key == "down":
            idx = (idx + 1) % len(options)
        elif key == "space":
            if idx in checked:
                checked.remove(idx)
            else:
                checked.append(idx)
        elif key == "a":
            if len(checked) == len(options):
                checked = []
            else:
                checked.extend([i for i in range(len(options)) if i not in checked])
        elif key == "enter":
            return selected([options[i].value for i in checked])
        elif key == "cancel":
            return cancelled()


def confirm(*, prompt: str, default: bool) -> PromptResult[bool]:
    """Ask a yes/no question. Enter takes the default."""
    _require_tty("confirmation")

    hint = "Y/n" if default else "y/N"
    while True:
        _clear()
        print(_paint(prompt, "1", "97") + " " + _paint(f"({hint})", "2", "37"))
        print()
        print(
            f"{_paint('y', '1', '32')} = yes, {_paint('n', '1', '31')} = no, "
            f"{_paint('Esc', '1', '97')} = cancel"
        )
        sys.stdout.flush()

        key = _read_key()
        if key == "enter":
            return selected(default)
        if key == "y":
            return selected(True)
        if key == "n":
            return selected(False)
        if key == "cancel":
            return cancelled()


def prompt_text(
    *,
    message: str,
    default: str,
    validate: Callable[[str], str | None] | None = None,
) -> PromptResult[str]:
    """Read a line of text, re-asking until ``validate`` returns None.

    ``validate`` returns an error message for a rejected value. Empty input
    takes ``default``.
    """
    while True:
        try:
            raw: str = typer.prompt(message, default=default, show_default=True)
        except typer.Abort:
            return cancelled()

        value = raw.strip() or default
        problem = validate(value) if validate is not None else None
        if problem is None:
            return selected(value)
        typer.echo(f"error: {problem}", err=True)
