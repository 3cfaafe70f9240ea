"""
Minesweeper Game Timer
Counts elapsed seconds on the tkinter event loop
"""

import logging
from typing import TYPE_CHECKING, Callable, Optional

from .config import TIMER_DELAY_MS

if TYPE_CHECKING:
    import tkinter as tk


logger = logging.getLogger(__name__)


class GameTimer:
    """One-second tick scheduled with ``after`` on a tkinter widget"""

    def __init__(self, master: 'tk.Misc', interval_ms: int = TIMER_DELAY_MS,
                 on_tick: Optional[Callable[[int], None]] = None):
        self.master = master
        self.interval_ms = interval_ms
        self.on_tick = on_tick
        self.elapsed = 0
        self._after_id: Optional[str] = None

    @property
    def is_running(self) -> bool:
        return self._after_id is not None

    def start(self):
        """Start ticking; does nothing if already running"""
        if self.is_running:
            return
        logger.debug("Timer started at %ds", self.elapsed)
        self._schedule()

    def stop(self):
        """Cancel the pending tick"""
        if self._after_id is not None:
            self.master.after_cancel(self._after_id)
            self._after_id = None
            logger.debug("Timer stopped at %ds", self.elapsed)

    def reset(self):
        """Stop and zero the elapsed time"""
        self.stop()
        self.elapsed = 0

    def pause(self):
        self.stop()

    def resume(self):
        self.start()

    def _schedule(self):
        self._after_id = self.master.after(self.interval_ms, self._tick)

    def _tick(self):
        self.elapsed += 1
        self._schedule()
        if self.on_tick:
            self.on_tick(self.elapsed)
