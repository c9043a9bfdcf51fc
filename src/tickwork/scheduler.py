"""Render scheduler — coalesces render recomputations into one publish.

Each arm() cancels the pending publish, if any, and schedules a new one with
loop.call_soon. Every render within one event-loop iteration therefore
produces a single publish carrying the last output. The target is looked up
when the publish fires; a missing target skips the publish silently.
"""

from __future__ import annotations

import asyncio
import logging

from tickwork.document import Document

logger = logging.getLogger("tickwork.scheduler")


class RenderScheduler:
    """Owns the one pending publish of a component."""

    __slots__ = ("_document", "_selector", "_loop", "_handle", "_disposed")

    def __init__(
        self,
        document: Document,
        selector: str,
        loop: asyncio.AbstractEventLoop | None = None,
    ) -> None:
        self._document = document
        self._selector = selector
        self._loop = loop
        self._handle: asyncio.Handle | None = None
        self._disposed = False

    @property
    def loop(self) -> asyncio.AbstractEventLoop:
        """The explicit loop, else the running loop."""
        if self._loop is None:
            self._loop = asyncio.get_running_loop()
        return self._loop

    @property
    def pending(self) -> bool:
        return self._handle is not None

    def arm(self, output: str) -> None:
        """Replace any pending publish with one carrying output."""
        if self._disposed:
            return
        if self._handle is not None:
            self._handle.cancel()
        self._handle = self.loop.call_soon(self._publish, output)

    def cancel(self) -> None:
        """Drop the pending publish and ignore later arm() calls."""
        self._disposed = True
        if self._handle is not None:
            self._handle.cancel()
            self._handle = None

    def _publish(self, output: str) -> None:
        self._handle = None
        target = self._document.query(self._selector)
        if target is None:
            return
        logger.debug("Publishing %d chars to %s", len(output), self._selector)
        target.replace(output)
