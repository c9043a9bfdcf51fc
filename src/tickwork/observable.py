"""State cells — mutable values that track their readers.

When a Cell is read while a computation is evaluating, that computation is
recorded as a dependent. Every write replaces the value and then updates
each dependent, in the order they first read the cell.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Generic, TypeVar

if TYPE_CHECKING:
    from tickwork._tracking import Tracker
    from tickwork.computed import Computation

T = TypeVar("T")


class Cell(Generic[T]):
    """A single named state value with dependency-tracked reads."""

    __slots__ = ("name", "_value", "_tracker", "_dependents")

    def __init__(self, name: str, value: T, tracker: Tracker) -> None:
        self.name = name
        self._value = value
        self._tracker = tracker
        self._dependents: list[Computation] = []

    @property
    def dependents(self) -> tuple[Computation, ...]:
        return tuple(self._dependents)

    def get(self) -> T:
        """Read the value. If a computation is evaluating, registers it."""
        self._tracker.record(self._dependents)
        return self._value

    def set(self, value: T) -> None:
        """Write a new value and update every dependent synchronously.

        There is no equality check: writing the current value notifies too.
        """
        self._value = value
        for dependent in list(self._dependents):
            dependent.update()

    def __repr__(self) -> str:
        return f"Cell({self.name}={self._value!r})"
