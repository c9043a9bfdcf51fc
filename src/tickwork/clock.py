"""Analog clock component.

Ticks once per ``interval`` seconds by writing ``timestamp``; every derived
angle and the markup follow from that one cell.
"""

from __future__ import annotations

import asyncio
import time
from datetime import datetime
from typing import Callable

from tickwork.component import Component
from tickwork.document import Document

_ARROW = (
    '<div class="arrow-layout" style="transform: rotateZ({degrees}deg)">'
    '<div class="arrow"></div>'
    "</div>"
)


class Clock(Component):
    el = "#clock"
    interval = 1.0

    def __init__(
        self,
        document: Document,
        *,
        loop: asyncio.AbstractEventLoop | None = None,
        now: Callable[[], float] = time.time,
    ) -> None:
        self._now = now
        self._ticker: asyncio.TimerHandle | None = None
        super().__init__(document, loop=loop)

    def get_state(self):
        return {"timestamp": self._now()}

    def get_expressions(self):
        return {
            "date_object": lambda: datetime.fromtimestamp(self.timestamp),
            "hours": lambda: self.date_object.hour,
            "minutes": lambda: self.date_object.minute,
            "seconds": lambda: self.date_object.second,
            "hours_degrees": lambda: (360 / 12) * self.hours,
            "minutes_degrees": lambda: (360 / 60) * self.minutes,
            "seconds_degrees": lambda: (360 / 60) * self.seconds,
        }

    def created(self) -> None:
        self._schedule_tick()

    def tick(self) -> None:
        self.timestamp = self._now()

    def dispose(self) -> None:
        if self._ticker is not None:
            self._ticker.cancel()
            self._ticker = None
        super().dispose()

    def _schedule_tick(self) -> None:
        self._ticker = self.loop.call_later(self.interval, self._on_tick)

    def _on_tick(self) -> None:
        self.tick()
        self._schedule_tick()

    def render(self) -> str:
        arrows = "".join(
            _ARROW.format(degrees=degrees)
            for degrees in (self.hours_degrees, self.minutes_degrees, self.seconds_degrees)
        )
        return (
            f'<div class="clock">{arrows}'
            f'<span class="label">H: {self.hours} M: {self.minutes} S: {self.seconds}</span>'
            "</div>"
        )
