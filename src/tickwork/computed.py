"""Computations — derived values recomputed by push.

A Computation wraps a zero-argument function. update() evaluates it with the
computation marked active, caches the result, then updates every dependent
recorded so far (depth-first, in first-registration order). get() returns
the cache and never evaluates; before the first update() it yields UNSET.

There is no cycle guard: a computation graph with a cycle recurses until the
interpreter's recursion limit is hit.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Callable, Generic, TypeVar

if TYPE_CHECKING:
    from tickwork._tracking import Tracker

T = TypeVar("T")


class _Unset:
    """Placeholder cached by a computation that has never been evaluated."""

    __slots__ = ()
    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __bool__(self) -> bool:
        return False

    def __repr__(self) -> str:
        return "UNSET"


UNSET = _Unset()


class Computation(Generic[T]):
    """A named derived value that records its readers and pushes updates."""

    __slots__ = ("name", "_fn", "_tracker", "_value", "_dependents")

    def __init__(self, name: str, fn: Callable[[], T], tracker: Tracker) -> None:
        self.name = name
        self._fn = fn
        self._tracker = tracker
        self._value: T | _Unset = UNSET
        self._dependents: list[Computation] = []

    @property
    def value(self) -> T | _Unset:
        """The cached value, read without registering a dependency."""
        return self._value

    @property
    def dependents(self) -> tuple[Computation, ...]:
        return tuple(self._dependents)

    def get(self) -> T | _Unset:
        """Read the cached value. If a computation is evaluating, registers it."""
        self._tracker.record(self._dependents)
        return self._value

    def update(self) -> None:
        """Re-evaluate, cache, then update dependents."""
        with self._tracker.evaluating(self):
            self._value = self._fn()
        for dependent in list(self._dependents):
            dependent.update()

    def __repr__(self) -> str:
        return f"Computation({self.name}, {self._value!r})"
