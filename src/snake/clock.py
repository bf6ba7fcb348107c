# clock.py
from __future__ import annotations
from typing import Optional
import logging

log = logging.getLogger(__name__)


class GameClock:
    """
    Repeating tick timer gated on a millisecond clock.

    The main loop calls poll() every frame with pygame.time.get_ticks();
    poll() fires at most once per elapsed period. A stopped clock never
    fires. Use it as a context manager so it is stopped when the owning
    game goes away.
    """

    def __init__(self, period_ms: int):
        if period_ms <= 0:
            raise ValueError("period_ms must be positive")
        self._period_ms = period_ms
        self._last_fire: Optional[int] = None   # None -> stopped

    @property
    def period_ms(self) -> int:
        return self._period_ms

    @period_ms.setter
    def period_ms(self, value: int) -> None:
        if value <= 0:
            raise ValueError("period_ms must be positive")
        self._period_ms = value

    @property
    def running(self) -> bool:
        return self._last_fire is not None

    def start(self, now_ms: int, period_ms: Optional[int] = None) -> None:
        if period_ms is not None:
            self.period_ms = period_ms
        self._last_fire = now_ms
        log.debug("clock started at %d (period %dms)", now_ms, self._period_ms)

    def stop(self) -> None:
        if self._last_fire is not None:
            log.debug("clock stopped")
        self._last_fire = None

    def poll(self, now_ms: int) -> bool:
        """True if a tick is due; re-arms from now_ms when it fires."""
        if self._last_fire is None:
            return False
        if now_ms - self._last_fire < self._period_ms:
            return False
        self._last_fire = now_ms
        return True

    def __enter__(self) -> "GameClock":
        return self

    def __exit__(self, *exc) -> None:
        self.stop()
