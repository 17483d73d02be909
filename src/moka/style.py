"""Terminal decoration for report output."""

from __future__ import annotations

from enum import Enum

import typer


class Style(str, Enum):
    BOLD = "bold"
    PASS = "pass"
    MAYBE = "maybe"
    ERROR = "error"
    FAIL = "fail"
    EXPECTED = "expected"
    ACTUAL = "actual"


_STYLES: dict[Style, dict[str, object]] = {
    Style.BOLD: {"bold": True},
    Style.PASS: {"fg": typer.colors.GREEN, "bold": True},
    Style.MAYBE: {"fg": typer.colors.YELLOW, "bold": True},
    Style.ERROR: {"fg": typer.colors.MAGENTA, "bold": True},
    Style.FAIL: {"fg": typer.colors.RED, "bold": True},
    Style.EXPECTED: {"fg": typer.colors.GREEN},
    Style.ACTUAL: {"fg": typer.colors.RED},
}


def decorate(style: Style, text: str, color: bool = True) -> str:
    """Return ``text`` wrapped in the ANSI codes for ``style``.

    With ``color=False`` the text is returned untouched.
    """
    if not color:
        return text
    return typer.style(text, **_STYLES[style])
