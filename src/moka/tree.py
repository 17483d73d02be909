"""Test tree: leaf tests grouped into nested contexts."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Callable, Sequence
from typing import Any, TYPE_CHECKING

from moka.assertions.base import Failure, UncaughtError
from moka.naming import instantiate

if TYPE_CHECKING:
    from moka.report import Report

Action = Callable[[], Any]
ContextBody = Callable[["Context"], Any]


class Node(ABC):
    name: str

    @abstractmethod
    def execute(self, report: Report) -> None:
        """Run this node and record its outcomes in ``report``."""
        ...


class Test(Node):
    """A named action producing exactly one report item per execution."""

    __test__ = False  # not a pytest test class

    def __init__(self, name: str, action: Action):
        self.name = name
        self.action = action

    def __repr__(self) -> str:
        return f"Test({self.name!r})"

    def execute(self, report: Report) -> None:
        try:
            self.action()
        except Failure as failure:
            report.push(self.name, failure)
        except Exception as exc:
            report.push(self.name, UncaughtError.wrap(exc))
        else:
            report.push(self.name)


class Context(Node):
    """An ordered group of tests and nested contexts.

    ``body`` is called with the new context so it can declare its children::

        def math(ctx):
            @ctx.should("add")
            def _():
                must.be_equal(2 + 2, 4)

        root = Context("Math", math)

    Setup runs once before the first child and teardown once after the last.
    Errors raised by either are not caught here and abort the whole run.
    """

    def __init__(self, name: str, body: ContextBody | None = None):
        self.name = name
        self._children: list[Node] = []
        self._setup: Action | None = None
        self._teardown: Action | None = None
        self._executing = False
        if body is not None:
            body(self)

    def __repr__(self) -> str:
        return f"Context({self.name!r}, children={len(self._children)})"

    @property
    def children(self) -> tuple[Node, ...]:
        return tuple(self._children)

    def add(self, node: Node) -> Node:
        if self._executing:
            raise RuntimeError(f"Cannot add to context '{self.name}' while it executes")
        self._children.append(node)
        return node

    def setup(self, fn: Action) -> Action:
        self._setup = fn
        return fn

    def teardown(self, fn: Action) -> Action:
        self._teardown = fn
        return fn

    def has(self, name: str, body: ContextBody | None = None):
        """Declare a nested context; usable as a decorator when ``body`` is omitted."""
        if body is None:
            return lambda fn: self.has(name, fn)
        return self.add(Context(name, body))

    describe = has

    def it(self, name: str, action: Action | None = None):
        if action is None:
            return lambda fn: self.it(name, fn)
        return self.add(Test(name, action))

    def should(self, name: str, action: Action | None = None):
        """Declare a test named ``"should " + name``."""
        return self.it(f"should {name}", action)

    def describe_for(
        self,
        template: str,
        cases: Sequence[tuple[Any, Any]],
        body: Callable[[Context, Any], Any] | None = None,
    ):
        """Declare one nested context per ``(payload, label)`` case.

        Each context is named by substituting the label into ``template`` and
        populated by ``body(context, payload)``.
        """
        if body is None:
            return lambda fn: self.describe_for(template, cases, fn)
        return [
            self.has(instantiate(template, label), _bind_context(body, payload))
            for payload, label in cases
        ]

    def should_for(
        self,
        template: str,
        cases: Sequence[tuple[Any, Any]],
        body: Callable[[Any], Any] | None = None,
    ):
        """Declare one ``should`` test per ``(payload, label)`` case."""
        if body is None:
            return lambda fn: self.should_for(template, cases, fn)
        return [
            self.should(instantiate(template, label), _bind_action(body, payload))
            for payload, label in cases
        ]

    def execute(self, report: Report) -> None:
        report.enter(self.name)
        self._executing = True
        try:
            if self._setup is not None:
                self._setup()
            for child in self._children:
                child.execute(report)
            if self._teardown is not None:
                self._teardown()
        finally:
            self._executing = False
            report.leave()

    def run(self, **kwargs: Any) -> bool:
        from moka.runner import run

        return run(self, **kwargs)


def _bind_context(body: Callable[[Context, Any], Any], payload: Any) -> ContextBody:
    return lambda ctx: body(ctx, payload)


def _bind_action(body: Callable[[Any], Any], payload: Any) -> Action:
    return lambda: body(payload)


def describe(name: str, body: ContextBody | None = None):
    """Build a root context; usable as a decorator when ``body`` is omitted."""
    if body is None:
        return lambda fn: Context(name, fn)
    return Context(name, body)
