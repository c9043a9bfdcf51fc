"""Computation graph — the ordered set of a component's computations."""

from __future__ import annotations

from typing import Callable, Iterator, Mapping

from tickwork._tracking import Tracker
from tickwork.computed import Computation


class Graph:
    """Ordered name -> Computation mapping sharing one Tracker.

    Iteration follows the order of the mapping the graph was built from.
    """

    def __init__(self, expressions: Mapping[str, Callable[[], object]], tracker: Tracker) -> None:
        self._computations: dict[str, Computation] = {
            name: Computation(name, fn, tracker) for name, fn in expressions.items()
        }

    def computation(self, name: str) -> Computation | None:
        return self._computations.get(name)

    def get(self, name: str) -> object:
        computation = self._computations.get(name)
        return computation.get() if computation is not None else None

    def update_all(self) -> None:
        """First evaluation: update every computation once, in order."""
        for computation in self._computations.values():
            computation.update()

    def __contains__(self, name: object) -> bool:
        return name in self._computations

    def __iter__(self) -> Iterator[str]:
        return iter(self._computations)

    def __len__(self) -> int:
        return len(self._computations)
