"""Behavior-driven test trees with hard and advisory assertions."""

from moka.assertions import (
    AdvisoryFailure,
    AssertionFailure,
    Failure,
    Location,
    Severity,
    UncaughtError,
    must,
    would_be_nice_to,
)
from moka.report import Outcome, Report, ReportItem
from moka.runner import Runner, hard_failure_count, run
from moka.tree import Context, Node, Test, describe

__version__ = "0.1.0"

__all__ = [
    "AdvisoryFailure",
    "AssertionFailure",
    "Context",
    "Failure",
    "Location",
    "Node",
    "Outcome",
    "Report",
    "ReportItem",
    "Runner",
    "Severity",
    "Test",
    "UncaughtError",
    "describe",
    "hard_failure_count",
    "must",
    "run",
    "would_be_nice_to",
]
