# game.py
from __future__ import annotations
from dataclasses import dataclass, field
from typing import List, Optional, Tuple, Union
import logging
import random

from .config import (
    GRID_SIZE, DIRECTIONS, RIGHT,
    RUNNING, PAUSED, OVER,
    START_CELL,
    CFG, Config,
)

log = logging.getLogger(__name__)

Cell = Tuple[int, int]
Direction = Tuple[int, int]

# ---------- Helpers ----------
def in_bounds(x: int, y: int) -> bool:
    return 0 <= x < GRID_SIZE and 0 <= y < GRID_SIZE

def is_opposite(a: Direction, b: Direction) -> bool:
    return a[0] == -b[0] and a[1] == -b[1]

def as_direction(d: Union[str, Direction]) -> Direction:
    """Accept either a direction name ("UP") or a (dx, dy) tuple."""
    if isinstance(d, str):
        try:
            return DIRECTIONS[d.upper()]
        except KeyError:
            raise ValueError(f"Unknown direction: {d!r}") from None
    if tuple(d) not in DIRECTIONS.values():
        raise ValueError(f"Unknown direction: {d!r}")
    return tuple(d)

def spawn_food(snake: List[Cell], rng: Optional[random.Random] = None) -> Cell:
    # No bound on retries: a snake covering the whole grid never returns.
    rng = rng or random
    while True:
        fx = rng.randrange(GRID_SIZE)
        fy = rng.randrange(GRID_SIZE)
        if (fx, fy) not in snake:
            return (fx, fy)

# ---------- State ----------
@dataclass
class GameState:
    snake: List[Cell]              # head at index 0
    direction: Direction           # committed at the last tick
    pending: Direction             # latest accepted intent
    food: Cell
    score: int
    speed_ms: int                  # current tick interval
    run_state: str = RUNNING
    rng: random.Random = field(default_factory=random.Random, repr=False)

    @property
    def head(self) -> Cell:
        return self.snake[0]

    @property
    def is_over(self) -> bool:
        return self.run_state == OVER

    @property
    def is_paused(self) -> bool:
        return self.run_state == PAUSED

def new_game_state(
    rng: Optional[random.Random] = None,
    food: Optional[Cell] = None,
    cfg: Config = CFG,
) -> GameState:
    """
    Fresh single-cell snake heading RIGHT. Food is random unless given
    (a brand new session starts with it at START_FOOD).
    """
    rng = rng or random.Random(cfg.seed)
    snake = [START_CELL]
    if food is None:
        food = spawn_food(snake, rng)
    return GameState(
        snake=snake,
        direction=RIGHT,
        pending=RIGHT,
        food=food,
        score=0,
        speed_ms=cfg.initial_speed,
        run_state=RUNNING,
        rng=rng,
    )

# ---------- Input / Update ----------
def request_direction(state: GameState, cand: Union[str, Direction]) -> bool:
    """
    Record a direction intent for the next tick (no 180° turns).

    The comparison is against the direction committed at the last tick,
    so several requests in between all share the same baseline and the
    last accepted one wins. Returns True if the intent was updated.
    """
    cand = as_direction(cand)
    if is_opposite(cand, state.direction):
        return False
    state.pending = cand
    return True

def toggle_pause(state: GameState) -> str:
    if state.run_state == RUNNING:
        state.run_state = PAUSED
    elif state.run_state == PAUSED:
        state.run_state = RUNNING
    return state.run_state

def resume(state: GameState) -> str:
    if state.run_state == PAUSED:
        state.run_state = RUNNING
    return state.run_state

def step_game(state: GameState, cfg: Config = CFG) -> bool:
    """
    Advance the game by exactly one grid step.
    Returns True if alive, False if this tick ended the game.
    Ticks on a paused or finished game change nothing.
    """
    if state.run_state != RUNNING:
        return not state.is_over
    assert state.snake, "snake must have at least one segment"

    # Commit direction once per tick
    state.direction = state.pending

    hx, hy = state.snake[0]
    dx, dy = state.direction
    nx, ny = hx + dx, hy + dy
    new_head = (nx, ny)

    # Wall collision, then body collision against the pre-move body.
    # The tail counts even though it would move away this tick.
    if not in_bounds(nx, ny) or new_head in state.snake:
        state.run_state = OVER
        log.debug("collision at %s, score=%d", new_head, state.score)
        return False

    state.snake.insert(0, new_head)

    # Move / grow
    if new_head == state.food:
        state.score += 1
        state.speed_ms = max(cfg.min_speed, state.speed_ms - cfg.speed_increment)
        state.food = spawn_food(state.snake, state.rng)
        log.debug("ate food: score=%d speed=%dms next=%s",
                  state.score, state.speed_ms, state.food)
    else:
        state.snake.pop()

    return True
