"""tickwork: reactive state-to-render components for Python."""

from importlib.metadata import version as _version

__version__ = _version("tickwork")

from tickwork.observable import Cell
from tickwork.computed import Computation, UNSET
from tickwork.store import Store
from tickwork.graph import Graph
from tickwork.scheduler import RenderScheduler
from tickwork.document import Document, Target, MemoryDocument, Element
from tickwork.component import Component
from tickwork.clock import Clock
# textual NOT auto-imported — opt-in only

__all__ = [
    "Cell",
    "Computation",
    "UNSET",
    "Store",
    "Graph",
    "RenderScheduler",
    "Document",
    "Target",
    "MemoryDocument",
    "Element",
    "Component",
    "Clock",
]
