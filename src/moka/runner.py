"""Top-level driver: execute a tree into a fresh report and summarize it."""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import Any

import typer

from moka.config import RunConfig
from moka.report import Report
from moka.tree import Node

_log = logging.getLogger(__name__)


class Runner:
    """Orchestrates a single pass over a test tree."""

    def __init__(
        self,
        config: RunConfig | None = None,
        echo: Callable[[str], object] = typer.echo,
        logger: logging.Logger | None = None,
    ):
        self.config = config or RunConfig()
        self.echo = echo
        self.logger = logger or _log
        self.hard_failures: int | None = None

    def execute(self, root: Node) -> Report:
        """Run ``root`` into a new Report, print the details and return it."""
        report = Report(echo=self.echo, color=self.config.color, logger=self.logger)
        self.logger.debug(f"Starting run of '{root.name}'")

        try:
            root.execute(report)
        except Exception as e:
            self.logger.error(f"Run of '{root.name}' aborted: {e}")
            raise

        self.echo("")
        self.hard_failures = report.print()
        self.logger.debug(
            f"Run of '{root.name}' completed: {len(report.items)} tests, "
            f"{len(report.failures)} failing, {self.hard_failures} hard"
        )
        return report


def run(root: Node, **kwargs: Any) -> bool:
    """Execute ``root`` and return True iff no test failed, advisories included.

    Use ``hard_failure_count`` when advisory failures must not fail the run.
    """
    return Runner(**kwargs).execute(root).passed


def hard_failure_count(root: Node, **kwargs: Any) -> int:
    """Execute ``root`` and return the number of hard failures."""
    runner = Runner(**kwargs)
    runner.execute(root)
    return runner.hard_failures
