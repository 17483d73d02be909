"""Assertion system for test actions."""

from moka.assertions.base import (
    AdvisoryFailure,
    AssertionFailure,
    Failure,
    Location,
    Severity,
    UncaughtError,
)
from moka.assertions.checks import Checker, must, would_be_nice_to

__all__ = [
    "AdvisoryFailure",
    "AssertionFailure",
    "Checker",
    "Failure",
    "Location",
    "Severity",
    "UncaughtError",
    "must",
    "would_be_nice_to",
]
