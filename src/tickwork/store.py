"""Store — name-keyed container of state cells.

Built once from a component's initial state mapping. Unknown names read as
None and writes to them are ignored. update() is a convenience for
application code writing several cells at once.
"""

from __future__ import annotations

from typing import Iterator, Mapping

from tickwork._tracking import Tracker
from tickwork.observable import Cell


class Store:
    """Name-keyed Cell container sharing one Tracker."""

    def __init__(self, state: Mapping[str, object], tracker: Tracker) -> None:
        self._cells: dict[str, Cell] = {
            name: Cell(name, value, tracker) for name, value in state.items()
        }

    def cell(self, name: str) -> Cell | None:
        return self._cells.get(name)

    def get(self, name: str) -> object:
        cell = self._cells.get(name)
        return cell.get() if cell is not None else None

    def set(self, name: str, value: object) -> None:
        cell = self._cells.get(name)
        if cell is not None:
            cell.set(value)

    def update(self, values: Mapping[str, object]) -> None:
        """Write several cells in mapping order. Each write notifies on its own."""
        for name, value in values.items():
            self.set(name, value)

    def __contains__(self, name: object) -> bool:
        return name in self._cells

    def __iter__(self) -> Iterator[str]:
        return iter(self._cells)

    def __len__(self) -> int:
        return len(self._cells)
