"""Execution log of test outcomes and console reporting."""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass
from enum import Enum

import typer

from moka.assertions.base import Failure, Severity
from moka.style import Style, decorate

INDENT = "  "

_log = logging.getLogger(__name__)


class Outcome(str, Enum):
    PASS = "pass"
    MAYBE = "maybe"
    ERROR = "error"
    FAIL = "fail"


_GLYPHS: dict[Outcome, tuple[str, Style]] = {
    Outcome.PASS: ("✔", Style.PASS),
    Outcome.MAYBE: ("●", Style.MAYBE),
    Outcome.ERROR: ("▲", Style.ERROR),
    Outcome.FAIL: ("✘", Style.FAIL),
}


@dataclass(frozen=True)
class ReportItem:
    """Outcome of one executed test.

    Attributes:
        id: Sequence number within the report, starting at 1.
        qualified_name: Enclosing context names and the test name, space-joined.
        name: The test's own name.
        failure: The failure raised by the test, or None when it passed.
    """

    id: int
    qualified_name: str
    name: str
    failure: Failure | None = None

    @property
    def passed(self) -> bool:
        return self.failure is None

    @property
    def is_hard_failure(self) -> bool:
        return self.failure is not None and self.failure.severity is Severity.HARD

    @property
    def outcome(self) -> Outcome:
        if self.failure is None:
            return Outcome.PASS
        if self.failure.severity is Severity.ADVISORY:
            return Outcome.MAYBE
        if self.failure.location is None:
            return Outcome.ERROR
        return Outcome.FAIL


class Report:
    """Append-only log of test outcomes for a single run.

    Lines are echoed as the tree executes; ``print()`` writes the details of
    every failing item once execution is over.
    """

    def __init__(
        self,
        echo: Callable[[str], object] = typer.echo,
        color: bool = True,
        logger: logging.Logger | None = None,
    ):
        self._echo = echo
        self.color = color
        self.logger = logger or _log
        self._items: list[ReportItem] = []
        self._stack: list[str] = []
        self._next_id = 1

    @property
    def items(self) -> tuple[ReportItem, ...]:
        return tuple(self._items)

    @property
    def depth(self) -> int:
        return len(self._stack)

    @property
    def failures(self) -> list[ReportItem]:
        return [item for item in self._items if not item.passed]

    @property
    def hard_failures(self) -> list[ReportItem]:
        return [item for item in self._items if item.is_hard_failure]

    @property
    def advisories(self) -> list[ReportItem]:
        return [item for item in self._items if item.outcome is Outcome.MAYBE]

    @property
    def passed(self) -> bool:
        """True when no item failed, advisory failures included."""
        return not self.failures

    def _glyph(self, outcome: Outcome) -> str:
        glyph, style = _GLYPHS[outcome]
        return decorate(style, glyph, self.color)

    def enter(self, name: str) -> None:
        self._echo(INDENT * self.depth + decorate(Style.BOLD, name, self.color))
        self._stack.append(name)
        self.logger.debug(f"Entering context '{name}' at depth {self.depth}")

    def leave(self) -> None:
        if not self._stack:
            raise RuntimeError("leave() called with no active context")
        name = self._stack.pop()
        self.logger.debug(f"Leaving context '{name}'")

    def push(self, name: str, failure: Failure | None = None) -> ReportItem:
        item = ReportItem(
            id=self._next_id,
            qualified_name=" ".join([*self._stack, name]),
            name=name,
            failure=failure,
        )
        self._next_id += 1
        self._items.append(item)

        self._echo(
            f"{INDENT * self.depth}{self._glyph(item.outcome)} {item.id}) {name}"
        )
        if failure is None:
            self.logger.debug(f"[{item.id}] {item.qualified_name}: passed")
        else:
            self.logger.debug(
                f"[{item.id}] {item.qualified_name}: {item.outcome.value}: {failure.message}"
            )
        return item

    def _message(self, failure: Failure) -> str:
        return "".join(
            text if style is None else decorate(style, text, self.color)
            for style, text in failure.parts
        )

    def print(self) -> int:
        """Write the detail block for every failing item.

        Returns the number of hard failures; advisory failures are listed but
        not counted.
        """
        for item in self.failures:
            failure = item.failure
            self._echo(f"{self._glyph(item.outcome)} {item.id}) {item.qualified_name}:")
            self._echo(f"{INDENT}{self._message(failure)}")
            if failure.location is not None:
                self._echo(
                    f"{INDENT}in {decorate(Style.BOLD, failure.location.file, self.color)}"
                    f":{failure.location.line}"
                )
            self._echo("")

        return len(self.hard_failures)

    def summary(self) -> str:
        """One-line totals, e.g. ``"4 tests, 1 passed, 2 failed, 1 advisory"``."""
        return (
            f"{len(self._items)} tests, "
            f"{len(self._items) - len(self.failures)} passed, "
            f"{len(self.hard_failures)} failed, "
            f"{len(self.advisories)} advisory"
        )
