"""Dependency tracking engine — the heart of tickwork.

Each component owns one Tracker. The tracker's active slot names the
computation currently evaluating; any Cell.get() or Computation.get()
performed while it is set records that computation as a dependent.

Evaluation is synchronous and non-reentrant, so a single slot is enough.
"""

from __future__ import annotations

from contextlib import contextmanager
from typing import TYPE_CHECKING, Iterator

if TYPE_CHECKING:
    from tickwork.computed import Computation


class Tracker:
    """Active-computation marker scoped to one component instance."""

    __slots__ = ("active",)

    def __init__(self) -> None:
        self.active: Computation | None = None

    @contextmanager
    def evaluating(self, computation: Computation) -> Iterator[None]:
        """Attribute every read inside the block to computation.

        The marker is cleared on exit, not restored: reads made by an outer
        computation after a nested update are not attributed.
        """
        self.active = computation
        try:
            yield
        finally:
            self.active = None

    def record(self, dependents: list[Computation]) -> None:
        """Append the active computation to dependents unless already there.

        First read wins: an existing entry keeps its position.
        """
        computation = self.active
        if computation is not None and computation not in dependents:
            dependents.append(computation)
