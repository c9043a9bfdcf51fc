"""Component — abstract base wiring state, computations and rendering.

A concrete component declares:

- ``el``: selector of the output target, resolved at publish time
- ``get_state()``: initial state, name -> value
- ``get_expressions()``: computations, name -> zero-argument function
- ``created()``: hook run once after every computation has a value
- ``render()``: markup built from state and computations

Construction and start are separate phases. The constructor builds the
store, the computation graph (with a synthesized ``render`` computation last)
and the render scheduler, but evaluates nothing. ``start()`` evaluates every
computation once in declaration order and then calls ``created()``.

Declared names must be unique across state and computations, must not start
with an underscore and must not shadow a class attribute. ``render`` is
reserved. A violation raises TypeError at construction.

Usage:
    class Counter(Component):
        el = "#counter"

        def get_state(self):
            return {"count": 0}

        def get_expressions(self):
            return {"doubled": lambda: self.count * 2}

        def created(self):
            pass

        def render(self):
            return f"<span>{self.doubled}</span>"

    counter = Counter.mount(document)
    counter.count = 5   # doubled and render recompute before this returns
"""

from __future__ import annotations

import abc
import asyncio
import logging
from typing import Callable, Mapping

from tickwork._tracking import Tracker
from tickwork.computed import Computation
from tickwork.document import Document
from tickwork.graph import Graph
from tickwork.observable import Cell
from tickwork.scheduler import RenderScheduler
from tickwork.store import Store

logger = logging.getLogger("tickwork.component")

RENDER = "render"


class Component(abc.ABC):
    """Base class for reactive components."""

    el: str

    def __init__(
        self,
        document: Document,
        *,
        loop: asyncio.AbstractEventLoop | None = None,
    ) -> None:
        el = getattr(type(self), "el", None)
        if not isinstance(el, str):
            raise TypeError(f"{type(self).__name__} must define a string 'el' selector")

        tracker = Tracker()
        self._tracker = tracker
        self._started = False
        self._store = Store(self.get_state(), tracker)
        self._scheduler = RenderScheduler(document, el, loop)

        expressions = dict(self.get_expressions())
        self._check_names(self._store, expressions)
        expressions[RENDER] = self._render_then_publish
        self._graph = Graph(expressions, tracker)

    @classmethod
    def mount(cls, document: Document, **kwargs) -> Component:
        """Construct and start in one call."""
        component = cls(document, **kwargs)
        component.start()
        return component

    @property
    def loop(self) -> asyncio.AbstractEventLoop:
        return self._scheduler.loop

    @property
    def started(self) -> bool:
        return self._started

    def start(self) -> None:
        """Evaluate every computation once, then run created()."""
        if self._started:
            raise RuntimeError(f"{type(self).__name__} already started")
        self._started = True
        logger.debug("Starting %s (%d computations)", type(self).__name__, len(self._graph))
        self._graph.update_all()
        self.created()

    def dispose(self) -> None:
        """Cancel the pending publish. Later renders publish nothing."""
        logger.debug("Disposing %s", type(self).__name__)
        self._scheduler.cancel()

    def cell(self, name: str) -> Cell | None:
        return self._store.cell(name)

    def computation(self, name: str) -> Computation | None:
        return self._graph.computation(name)

    def _check_names(self, store: Store, expressions: Mapping[str, Callable[[], object]]) -> None:
        """Every declared name must resolve to its cell or computation."""
        cls = type(self)
        if RENDER in expressions:
            raise TypeError(f"{cls.__name__}: {RENDER!r} is reserved for the render computation")
        for name in expressions:
            if name in store:
                raise TypeError(f"{cls.__name__}: {name!r} is both state and a computation")
        for name in (*store, *expressions):
            if name.startswith("_") or hasattr(cls, name) or name in self.__dict__:
                raise TypeError(f"{cls.__name__}: {name!r} is not usable as an accessor name")

    def _render_then_publish(self) -> str:
        output = self.render()
        self._scheduler.arm(output)
        return output

    # --- Named accessors ---

    def __getattr__(self, name: str):
        # Only reached when normal lookup fails.
        if not name.startswith("_"):
            store = self.__dict__.get("_store")
            if store is not None and name in store:
                return store.get(name)
            graph = self.__dict__.get("_graph")
            if graph is not None and name in graph:
                return graph.get(name)
        raise AttributeError(f"{type(self).__name__!r} object has no attribute {name!r}")

    def __setattr__(self, name: str, value) -> None:
        store = self.__dict__.get("_store")
        if store is not None and name in store:
            store.set(name, value)
            return
        graph = self.__dict__.get("_graph")
        if graph is not None and name in graph:
            raise AttributeError(f"computation {name!r} is read-only")
        object.__setattr__(self, name, value)

    # --- Definitions supplied by concrete components ---

    @abc.abstractmethod
    def get_state(self) -> Mapping[str, object]:
        """Initial state, name -> value."""

    @abc.abstractmethod
    def get_expressions(self) -> Mapping[str, Callable[[], object]]:
        """Computations, name -> zero-argument function."""

    @abc.abstractmethod
    def created(self) -> None:
        """Run once after the first evaluation of every computation."""

    @abc.abstractmethod
    def render(self) -> str:
        """Markup for the output target."""
