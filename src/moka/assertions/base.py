"""Failure signals raised by assertions and caught by tests."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from enum import Enum

from moka.style import Style

# Message fragments; the style is applied only when a report prints them.
Part = tuple[Style | None, str]


class Severity(str, Enum):
    HARD = "hard"
    ADVISORY = "advisory"


@dataclass(frozen=True)
class Location:
    """Source position an assertion was called from."""

    file: str
    line: int

    def __str__(self) -> str:
        return f"{self.file}:{self.line}"


class Failure(Exception):
    """Outcome of a violated assertion.

    Attributes:
        severity: HARD failures count towards the failure total, ADVISORY
            ones are reported but never counted.
        location: Where the assertion was made, or None for errors that did
            not come from an assertion.
        message: Human-readable description of the violation.
        parts: The message split into styled fragments; joined, they equal
            ``message``.
    """

    _severity: Severity = Severity.HARD

    def __init__(
        self,
        message: str,
        location: Location | None = None,
        parts: Iterable[Part] | None = None,
    ):
        super().__init__(message)
        self._message = message
        self._location = location
        self._parts = tuple(parts) if parts is not None else ((None, message),)

    @classmethod
    def from_parts(cls, parts: Iterable[Part], location: Location | None = None) -> Failure:
        parts = tuple(parts)
        return cls("".join(text for _, text in parts), location, parts)

    @property
    def severity(self) -> Severity:
        return self._severity

    @property
    def message(self) -> str:
        return self._message

    @property
    def location(self) -> Location | None:
        return self._location

    @property
    def parts(self) -> tuple[Part, ...]:
        return self._parts

    @property
    def is_hard(self) -> bool:
        return self._severity is Severity.HARD

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(severity={self._severity.value!r}, "
            f"location={self._location!r}, message={self._message!r})"
        )


class AssertionFailure(Failure):
    _severity = Severity.HARD


class AdvisoryFailure(Failure):
    _severity = Severity.ADVISORY


class UncaughtError(Failure):
    """An unexpected exception escaping a test action."""

    _severity = Severity.HARD

    def __init__(self, message: str, original: BaseException | None = None):
        super().__init__(message, location=None)
        self.original = original

    @classmethod
    def wrap(cls, exc: BaseException) -> UncaughtError:
        error = cls(f"Unexpected error: {exc}", original=exc)
        error._parts = ((None, "Unexpected error: "), (Style.MAYBE, str(exc)))
        error.__cause__ = exc
        return error


def failure_class(severity: Severity) -> type[Failure]:
    if severity is Severity.ADVISORY:
        return AdvisoryFailure
    return AssertionFailure
