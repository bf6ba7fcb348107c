# session.py
from __future__ import annotations
from dataclasses import dataclass
from typing import Optional, Tuple, Union
import logging
import random

from .clock import GameClock
from .config import GRID_SIZE, START_FOOD, RUNNING, CFG, Config
from .game import (
    Cell, Direction, GameState,
    new_game_state, step_game,
    request_direction as _request_direction,
    toggle_pause as _toggle_pause,
    resume as _resume,
)
from .storage import HighScoreStore

log = logging.getLogger(__name__)


@dataclass(frozen=True)
class Snapshot:
    """Read-only view of one frame, handed to the renderer."""
    grid_size: int
    snake: Tuple[Cell, ...]
    food: Cell
    score: int
    high_score: int
    run_state: str


class GameSession:
    """
    One game window's worth of state: the GameState, the clock that
    drives it, and the high score with its store.

    The clock is stopped by close() (or on leaving a `with` block) and
    whenever the game is paused or over.
    """

    def __init__(
        self,
        store: Optional[HighScoreStore] = None,
        cfg: Config = CFG,
        rng: Optional[random.Random] = None,
        now_ms: int = 0,
    ):
        self.cfg = cfg
        self.store = store if store is not None else HighScoreStore(cfg.scores_path)
        self.rng = rng or random.Random(cfg.seed)
        self.high_score = self.store.get_high_score()
        self.state: GameState = new_game_state(self.rng, food=START_FOOD, cfg=cfg)
        self.clock = GameClock(self.state.speed_ms)
        self.closed = False
        self.clock.start(now_ms)
        log.info("new session (high score %d)", self.high_score)

    # ---- lifecycle -----------------------------------------------------
    def close(self) -> None:
        """Stop the clock for good; the session ignores input and ticks afterwards."""
        self.closed = True
        self.clock.stop()

    def __enter__(self) -> "GameSession":
        return self

    def __exit__(self, *exc) -> None:
        self.close()

    # ---- ticking -------------------------------------------------------
    def update(self, now_ms: int) -> bool:
        """Run one tick if the clock says one is due. Returns True if it did."""
        if self.closed:
            return False
        if not self.clock.poll(now_ms):
            return False
        self.tick()
        return True

    def tick(self) -> bool:
        """Advance one step regardless of the clock. Returns False on game over."""
        if self.closed or self.state.run_state != RUNNING:
            return not self.state.is_over
        alive = step_game(self.state, self.cfg)
        if not alive:
            self.clock.stop()
            self._record_score()
            return False
        if self.clock.period_ms != self.state.speed_ms:
            self.clock.period_ms = self.state.speed_ms
        return True

    def _record_score(self) -> None:
        score = self.state.score
        log.info("game over: score=%d", score)
        if score > self.high_score:
            self.high_score = score
            self.store.set_high_score(score)

    # ---- input ---------------------------------------------------------
    def request_direction(self, direction: Union[str, Direction]) -> bool:
        if self.closed:
            return False
        return _request_direction(self.state, direction)

    def toggle_pause(self, now_ms: int) -> str:
        if self.closed:
            return self.state.run_state
        before = self.state.run_state
        after = _toggle_pause(self.state)
        if after != before:
            self._sync_clock(now_ms)
            log.debug("%s -> %s", before, after)
        return after

    def resume(self, now_ms: int) -> str:
        if self.closed:
            return self.state.run_state
        before = self.state.run_state
        after = _resume(self.state)
        if after != before:
            self._sync_clock(now_ms)
        return after

    def reset(self, now_ms: int) -> None:
        if self.closed:
            return
        self.state = new_game_state(self.rng, cfg=self.cfg)
        self.clock.start(now_ms, self.state.speed_ms)
        log.info("game reset, food at %s", self.state.food)

    def _sync_clock(self, now_ms: int) -> None:
        if self.state.run_state == RUNNING:
            self.clock.start(now_ms, self.state.speed_ms)
        else:
            self.clock.stop()

    # ---- rendering -----------------------------------------------------
    def snapshot(self) -> Snapshot:
        return Snapshot(
            grid_size=GRID_SIZE,
            snake=tuple(self.state.snake),
            food=self.state.food,
            score=self.state.score,
            high_score=self.high_score,
            run_state=self.state.run_state,
        )
