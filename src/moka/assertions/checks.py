"""Comparison and invocation checks.

Each check returns None when it holds and raises a Failure otherwise. The
same checks exist in two severities: ``must`` raises hard failures that fail
the run, ``would_be_nice_to`` raises advisory ones that are only reported.
"""

from __future__ import annotations

import sys
from collections.abc import Callable
from typing import Any

from moka.assertions.base import Location, Part, Severity, failure_class
from moka.style import Style

_PREFIXES = {
    Severity.HARD: "Expected",
    Severity.ADVISORY: "Would have been nice",
}


def render(value: Any) -> str:
    """Render an operand the way failure messages show it."""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (bytes, bytearray)):
        return bytes(value).decode("utf-8", errors="replace")
    return str(value)


def _as_content(a: Any, b: Any) -> tuple[Any, Any]:
    # str vs bytes compares by encoded content
    if isinstance(a, str) and isinstance(b, (bytes, bytearray)):
        return a.encode("utf-8"), bytes(b)
    if isinstance(a, (bytes, bytearray)) and isinstance(b, str):
        return bytes(a), b.encode("utf-8")
    return a, b


def _caller_location() -> Location:
    # 0: this function, 1: the check, 2: its caller
    frame = sys._getframe(2)
    return Location(frame.f_code.co_filename, frame.f_lineno)


def _expected(value: Any) -> Part:
    return (Style.EXPECTED, render(value))


def _actual(value: Any) -> Part:
    return (Style.ACTUAL, render(value))


class Checker:
    """A family of checks raising failures of a single severity."""

    def __init__(self, severity: Severity):
        self.severity = severity
        self.prefix = _PREFIXES[severity]
        self._failure = failure_class(severity)

    def __repr__(self) -> str:
        return f"Checker({self.severity.value})"

    def _raise(self, parts: list[Part], msg: str, location: Location | None) -> None:
        if msg:
            parts.insert(0, (None, f"{msg} | "))
        raise self._failure.from_parts(parts, location)

    def contain(
        self, needle: Any, haystack: Any, msg: str = "", *, location: Location | None = None
    ) -> None:
        location = location or _caller_location()
        a, b = _as_content(needle, haystack)
        if a not in b:
            self._raise(
                [
                    (None, f"{self.prefix} "),
                    _expected(haystack),
                    (None, " to contain "),
                    _actual(needle),
                ],
                msg,
                location,
            )

    def _but_got(self, expected: Any, actual: Any, lead: str = "") -> list[Part]:
        return [
            (None, f"{self.prefix} {lead}"),
            _expected(expected),
            (None, " but got "),
            _actual(actual),
        ]

    def be_equal(
        self, actual: Any, expected: Any, msg: str = "", *, location: Location | None = None
    ) -> None:
        location = location or _caller_location()
        a, b = _as_content(actual, expected)
        if a != b:
            self._raise(self._but_got(expected, actual), msg, location)

    def be_less(
        self, actual: Any, bound: Any, msg: str = "", *, location: Location | None = None
    ) -> None:
        location = location or _caller_location()
        a, b = _as_content(actual, bound)
        if not a < b:
            self._raise(self._but_got(bound, actual), msg, location)

    def be_greater(
        self, actual: Any, bound: Any, msg: str = "", *, location: Location | None = None
    ) -> None:
        location = location or _caller_location()
        a, b = _as_content(actual, bound)
        if not a > b:
            self._raise(self._but_got(bound, actual), msg, location)

    def be_not_equal(
        self, actual: Any, other: Any, msg: str = "", *, location: Location | None = None
    ) -> None:
        location = location or _caller_location()
        a, b = _as_content(actual, other)
        if a == b:
            self._raise(self._but_got(other, actual, lead="anything but "), msg, location)

    def fail(self, message: str, *, location: Location | None = None) -> None:
        location = location or _caller_location()
        raise self._failure.from_parts([(Style.ACTUAL, message)], location)

    def throws(
        self,
        kind: type[BaseException],
        action: Callable[[], Any],
        msg: str = "",
        *,
        location: Location | None = None,
    ) -> None:
        """Invoke ``action`` and require it to raise ``kind``.

        A different ``Exception`` fails with its message; returning normally
        fails with "nothing was thrown!". Interrupts are not intercepted.
        """
        location = location or _caller_location()
        lead = [(None, f"{self.prefix} to catch a "), (Style.EXPECTED, kind.__name__)]
        try:
            action()
        except kind:
            return
        except Exception as exc:
            self._raise([*lead, (None, " but got "), _actual(exc)], msg, location)
        self._raise([*lead, (None, " but nothing was thrown!")], msg, location)


must = Checker(Severity.HARD)
would_be_nice_to = Checker(Severity.ADVISORY)

__all__ = ["Checker", "must", "render", "would_be_nice_to"]
