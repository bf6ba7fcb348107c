# render.py
from __future__ import annotations
from typing import Dict, Tuple
import numpy as np  # type: ignore
import pygame       # type: ignore

from .config import (
    WIDTH, HEIGHT, CELL_SIZE, HEADER_H, BOARD_PX, PAD_H,
    BG, BOARD_BG, GRID_LINE, HEAD, BODY, FOOD, TEXT, MUTED, BUTTON,
    PAUSED, OVER,
)
from .session import Snapshot

# ---------- Cell classification ----------
EMPTY, HEAD_CELL, BODY_CELL, FOOD_CELL = 0, 1, 2, 3
CELL_COLORS = {HEAD_CELL: HEAD, BODY_CELL: BODY, FOOD_CELL: FOOD}

def classify_cells(snap: Snapshot) -> np.ndarray:
    """
    Grid of cell kinds indexed [y, x].
    Precedence where cells coincide: head, then food, then body.
    """
    grid = np.full((snap.grid_size, snap.grid_size), EMPTY, dtype=np.int8)
    for x, y in snap.snake[1:]:
        grid[y, x] = BODY_CELL
    fx, fy = snap.food
    grid[fy, fx] = FOOD_CELL
    if snap.snake:
        hx, hy = snap.snake[0]
        grid[hy, hx] = HEAD_CELL
    return grid

# ---------- Layout ----------
BUTTON_SIZE = 48
OVERLAY_BUTTON = "OVERLAY"
FULLSCREEN_BUTTON = "FULLSCREEN"
DPAD = ("UP", "DOWN", "LEFT", "RIGHT")
FS_SIZE = 36

def board_rect() -> pygame.Rect:
    return pygame.Rect(0, HEADER_H, BOARD_PX, BOARD_PX)

def button_rects() -> Dict[str, pygame.Rect]:
    """Hit boxes for the d-pad, the overlay button and the fullscreen toggle."""
    cx = WIDTH // 2
    cy = HEADER_H + BOARD_PX + PAD_H // 2 - 8
    s, gap = BUTTON_SIZE, 6
    rects = {
        "UP":    pygame.Rect(cx - s // 2, cy - s - s // 2 - gap, s, s),
        "DOWN":  pygame.Rect(cx - s // 2, cy + s // 2 + gap, s, s),
        "LEFT":  pygame.Rect(cx - s - s // 2 - gap, cy - s // 2, s, s),
        "RIGHT": pygame.Rect(cx + s // 2 + gap, cy - s // 2, s, s),
    }
    board = board_rect()
    overlay = pygame.Rect(0, 0, 200, 44)
    overlay.center = (board.centerx, board.centery + 30)
    rects[OVERLAY_BUTTON] = overlay
    rects[FULLSCREEN_BUTTON] = pygame.Rect(WIDTH - FS_SIZE - 8, (HEADER_H - FS_SIZE) // 2, FS_SIZE, FS_SIZE)
    return rects

# ---------- Drawing ----------
def _blit_center(screen, font, text: str, color, center: Tuple[int, int]) -> None:
    surf = font.render(text, True, color)
    screen.blit(surf, surf.get_rect(center=center))

def draw_header(screen: pygame.Surface, font: pygame.font.Font, snap: Snapshot) -> None:
    box_w = (WIDTH - FS_SIZE - 16) // 2
    for i, (label, value) in enumerate((("SCORE", snap.score), ("HIGH SCORE", snap.high_score))):
        box = pygame.Rect(8 + i * box_w, 8, box_w - 8, HEADER_H - 16)
        pygame.draw.rect(screen, BUTTON, box, border_radius=6)
        _blit_center(screen, font, label, MUTED, (box.centerx, box.top + 12))
        _blit_center(screen, font, str(value), TEXT, (box.centerx, box.bottom - 14))
    fs = button_rects()[FULLSCREEN_BUTTON]
    pygame.draw.rect(screen, BUTTON, fs, border_radius=6)
    pygame.draw.rect(screen, TEXT, fs.inflate(-16, -16), width=2)

def draw_board(screen: pygame.Surface, snap: Snapshot) -> None:
    board = board_rect()
    pygame.draw.rect(screen, BOARD_BG, board)
    cells = classify_cells(snap)
    for y, x in zip(*np.nonzero(cells)):
        x, y = int(x), int(y)
        rect = pygame.Rect(board.x + x * CELL_SIZE, board.y + y * CELL_SIZE, CELL_SIZE, CELL_SIZE)
        pygame.draw.rect(screen, CELL_COLORS[int(cells[y, x])], rect.inflate(-2, -2))
    for i in range(1, snap.grid_size):
        pygame.draw.line(screen, GRID_LINE, (board.x + i * CELL_SIZE, board.y), (board.x + i * CELL_SIZE, board.bottom))
        pygame.draw.line(screen, GRID_LINE, (board.x, board.y + i * CELL_SIZE), (board.right, board.y + i * CELL_SIZE))

def draw_overlay(screen: pygame.Surface, font: pygame.font.Font, snap: Snapshot) -> None:
    if snap.run_state == OVER:
        title, label = "GAME OVER", "RESTART SYSTEM"
    elif snap.run_state == PAUSED:
        title, label = "PAUSED", "RESUME"
    else:
        return

    board = board_rect()
    # Dim with translucent overlay
    overlay = pygame.Surface(board.size, pygame.SRCALPHA)
    overlay.fill((0, 0, 0, 150))
    screen.blit(overlay, board.topleft)

    _blit_center(screen, font, title, (240, 240, 250), (board.centerx, board.centery - 20))
    button = button_rects()[OVERLAY_BUTTON]
    pygame.draw.rect(screen, BUTTON, button, border_radius=6)
    _blit_center(screen, font, label, TEXT, button.center)

def draw_controls(screen: pygame.Surface, font: pygame.font.Font) -> None:
    arrows = {"UP": "^", "DOWN": "v", "LEFT": "<", "RIGHT": ">"}
    rects = button_rects()
    for name in DPAD:
        rect = rects[name]
        pygame.draw.rect(screen, BUTTON, rect, border_radius=8)
        _blit_center(screen, font, arrows[name], TEXT, rect.center)
    _blit_center(screen, font, "Desktop: Use Arrows | Mobile: Tap Buttons", MUTED,
                 (WIDTH // 2, HEIGHT - 14))

def draw_game(screen: pygame.Surface, font: pygame.font.Font, snap: Snapshot) -> None:
    screen.fill(BG)
    draw_header(screen, font, snap)
    draw_board(screen, snap)
    draw_overlay(screen, font, snap)
    draw_controls(screen, font)
