"""
Auto-advancing carousel (Pongal festival photos).

Manual navigation (prev/next/dot) moves immediately and pauses the
auto-advance; it resumes once the carousel has been left alone for
``idle_resume`` seconds.
"""
import asyncio
import time
from typing import Callable, Optional


class Carousel:
    def __init__(
        self,
        length: int = 0,
        interval: float = 5.0,
        idle_resume: float = 10.0,
        clock: Callable[[], float] = time.monotonic,
    ):
        self.length = length
        self.interval = interval
        self.idle_resume = idle_resume
        self.clock = clock
        self.current_index = 0
        self._last_move = clock()
        self._paused_until: Optional[float] = None

    @property
    def is_paused(self) -> bool:
        return self._paused_until is not None

    def _now(self, now: Optional[float]) -> float:
        return self.clock() if now is None else now

    def _touch(self, now: float):
        self._last_move = now
        self._paused_until = now + self.idle_resume

    def tick(self, now: Optional[float] = None) -> bool:
        """Timer callback. Returns True when the carousel advanced."""
        now = self._now(now)
        if self.length <= 1:
            return False
        if self._paused_until is not None:
            if now < self._paused_until:
                return False
            self._paused_until = None
        if now - self._last_move < self.interval:
            return False
        self.current_index = (self.current_index + 1) % self.length
        self._last_move = now
        return True

    def next(self, now: Optional[float] = None):
        if self.length > 0:
            self.current_index = (self.current_index + 1) % self.length
            self._touch(self._now(now))

    def prev(self, now: Optional[float] = None):
        if self.length > 0:
            self.current_index = (self.current_index - 1 + self.length) % self.length
            self._touch(self._now(now))

    def go_to(self, index: int, now: Optional[float] = None) -> bool:
        """Dot click"""
        if not 0 <= index < self.length:
            return False
        self.current_index = index
        self._touch(self._now(now))
        return True

    def resize(self, length: int):
        self.length = length
        if length <= 0 or self.current_index >= length:
            self.current_index = 0

    async def autoplay(self, stop: asyncio.Event):
        """Drive tick() every interval until stop is set"""
        while not stop.is_set():
            try:
                await asyncio.wait_for(stop.wait(), timeout=self.interval)
            except asyncio.TimeoutError:
                self.tick()
