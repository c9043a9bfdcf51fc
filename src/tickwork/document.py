"""Output targets — where rendered markup is published.

The core only ever asks a Document for the Target matching a selector and
replaces its whole content. MemoryDocument is an in-process Document that
records every replacement.
"""

from __future__ import annotations

from typing import Protocol


class Target(Protocol):
    def replace(self, content: str) -> None: ...


class Document(Protocol):
    def query(self, selector: str) -> Target | None: ...


class Element:
    """In-memory output target. Keeps the full replacement history."""

    __slots__ = ("selector", "content", "history")

    def __init__(self, selector: str, content: str = "") -> None:
        self.selector = selector
        self.content = content
        self.history: list[str] = []

    def replace(self, content: str) -> None:
        self.content = content
        self.history.append(content)

    def __repr__(self) -> str:
        return f"Element({self.selector!r}, {self.content!r})"


class MemoryDocument:
    """Selector-keyed set of Elements."""

    def __init__(self) -> None:
        self._elements: dict[str, Element] = {}

    def add(self, selector: str, content: str = "") -> Element:
        element = Element(selector, content)
        self._elements[selector] = element
        return element

    def remove(self, selector: str) -> None:
        self._elements.pop(selector, None)

    def query(self, selector: str) -> Element | None:
        return self._elements.get(selector)
