"""Tests for report bookkeeping and console output."""

import pytest
import typer

from moka.assertions import AdvisoryFailure, AssertionFailure, Location, UncaughtError, must
from moka.report import Outcome, Report


def test_enter_prints_indented_header(report, lines):
    report.enter("Outer")
    report.enter("Inner")
    assert lines == ["Outer", "  Inner"]
    assert report.depth == 2


def test_leave_pops_stack(report):
    report.enter("Outer")
    report.leave()
    assert report.depth == 0


def test_leave_on_empty_stack_raises(report):
    with pytest.raises(RuntimeError):
        report.leave()


def test_push_builds_qualified_name_and_ids(report):
    report.enter("Math")
    first = report.push("should add")
    report.enter("division")
    second = report.push("should divide")
    report.leave()
    third = report.push("should multiply")

    assert (first.id, second.id, third.id) == (1, 2, 3)
    assert first.qualified_name == "Math should add"
    assert second.qualified_name == "Math division should divide"
    assert third.qualified_name == "Math should multiply"


def test_push_prints_status_line(report, lines):
    report.enter("Math")
    report.push("should add")
    report.push("should divide", AssertionFailure("Expected 2 but got 1", Location("m.py", 3)))
    report.push("should round", AdvisoryFailure("Would have been nice 1 but got 2", Location("m.py", 9)))
    report.push("should parse", UncaughtError("Unexpected error: boom"))
    assert lines == [
        "Math",
        "  ✔ 1) should add",
        "  ✘ 2) should divide",
        "  ● 3) should round",
        "  ▲ 4) should parse",
    ]


def test_outcomes(report):
    assert report.push("a").outcome is Outcome.PASS
    assert report.push("b", AssertionFailure("x", Location("f", 1))).outcome is Outcome.FAIL
    assert report.push("c", AdvisoryFailure("x", Location("f", 1))).outcome is Outcome.MAYBE
    assert report.push("d", UncaughtError("x")).outcome is Outcome.ERROR


def test_print_details_and_hard_count(report, lines):
    report.enter("Math")
    report.push("should add")
    report.push("should divide", AssertionFailure("Expected 2 but got 1", Location("m.py", 3)))
    report.push("should round", AdvisoryFailure("Would have been nice 1 but got 2", Location("m.py", 9)))
    report.push("should parse", UncaughtError("Unexpected error: boom"))
    report.leave()
    lines.clear()

    hard = report.print()

    assert hard == 2
    assert lines == [
        "✘ 2) Math should divide:",
        "  Expected 2 but got 1",
        "  in m.py:3",
        "",
        "● 3) Math should round:",
        "  Would have been nice 1 but got 2",
        "  in m.py:9",
        "",
        "▲ 4) Math should parse:",
        "  Unexpected error: boom",
        "",
    ]
    assert report.summary() == "4 tests, 1 passed, 2 failed, 1 advisory"


def test_print_with_no_failures(report, lines):
    report.push("ok")
    lines.clear()
    assert report.print() == 0
    assert lines == []
    assert report.summary() == "1 tests, 1 passed, 0 failed, 0 advisory"


def test_advisory_only_report_is_not_passed(report):
    report.push("maybe", AdvisoryFailure("meh", Location("f", 1)))
    assert report.print() == 0
    assert report.passed is False
    assert len(report.advisories) == 1
    assert report.hard_failures == []


def test_items_is_immutable_snapshot(report):
    report.push("one")
    items = report.items
    report.push("two")
    assert len(items) == 1
    assert len(report.items) == 2


def test_color_decorates_glyphs():
    lines = []
    report = Report(echo=lines.append, color=True)
    report.push("ok")
    assert "\x1b[" in lines[0]
    assert lines[0].endswith("1) ok")


def test_print_colors_operands_but_keeps_message_plain():
    lines = []
    report = Report(echo=lines.append, color=True)
    try:
        must.be_equal(1, 2)
    except AssertionFailure as failure:
        report.push("should divide", failure)
    lines.clear()

    report.print()

    message_line = lines[1]
    assert typer.style("2", fg=typer.colors.GREEN) in message_line
    assert typer.style("1", fg=typer.colors.RED) in message_line
    assert report.items[0].failure.message == "Expected 2 but got 1"


def test_print_colors_uncaught_error_text():
    lines = []
    report = Report(echo=lines.append, color=True)
    report.push("explodes", UncaughtError.wrap(KeyError("missing")))
    lines.clear()

    report.print()

    assert lines[1] == "  Unexpected error: " + typer.style(
        "'missing'", fg=typer.colors.YELLOW, bold=True
    )
