# controls.py
"""
Input adapter: turns pygame events into session actions.

Keyboard arrows and the on-screen d-pad both end in
GameSession.request_direction, so the no-reversal rule is applied the
same way whichever one the player uses.
"""
from __future__ import annotations
from typing import Optional, Tuple
import logging
import pygame  # type: ignore

from .config import WIDTH, HEIGHT, OVER, PAUSED
from .render import button_rects, OVERLAY_BUTTON, FULLSCREEN_BUTTON, DPAD
from .session import GameSession

log = logging.getLogger(__name__)

KEY_DIRECTIONS = {
    pygame.K_UP: "UP",
    pygame.K_DOWN: "DOWN",
    pygame.K_LEFT: "LEFT",
    pygame.K_RIGHT: "RIGHT",
}
RESTART_KEYS = (pygame.K_r, pygame.K_RETURN)

# Event results
QUIT, FULLSCREEN = "quit", "fullscreen"


def pointer_pos(event: pygame.event.Event) -> Optional[Tuple[int, int]]:
    """Window position of a mouse click or touch, None for other events."""
    if event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
        return event.pos
    if event.type == pygame.FINGERDOWN:
        # touch coordinates are normalised to [0, 1]
        return int(event.x * WIDTH), int(event.y * HEIGHT)
    return None


def handle_key(session: GameSession, key: int, now_ms: int) -> Optional[str]:
    if key == pygame.K_F11:
        return FULLSCREEN
    if session.state.run_state == OVER:
        if key in RESTART_KEYS:
            session.reset(now_ms)
        return None
    if key == pygame.K_SPACE:
        session.toggle_pause(now_ms)
    elif key in KEY_DIRECTIONS:
        session.request_direction(KEY_DIRECTIONS[key])
    return None


def handle_pointer(session: GameSession, pos: Tuple[int, int], now_ms: int) -> Optional[str]:
    rects = button_rects()
    if rects[FULLSCREEN_BUTTON].collidepoint(pos):
        return FULLSCREEN
    run_state = session.state.run_state
    if run_state in (OVER, PAUSED) and rects[OVERLAY_BUTTON].collidepoint(pos):
        if run_state == OVER:
            session.reset(now_ms)
        else:
            session.resume(now_ms)
        return None
    for name in DPAD:
        if rects[name].collidepoint(pos):
            log.debug("d-pad %s at %s", name, pos)
            session.request_direction(name)
            break
    return None


def handle_event(session: GameSession, event: pygame.event.Event, now_ms: int) -> Optional[str]:
    """Apply one event. Returns QUIT or FULLSCREEN when the loop must act."""
    if event.type == pygame.QUIT:
        return QUIT
    if event.type == pygame.KEYDOWN:
        return handle_key(session, event.key, now_ms)
    pos = pointer_pos(event)
    if pos is not None:
        return handle_pointer(session, pos, now_ms)
    return None
