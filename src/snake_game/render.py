# render.py
from __future__ import annotations
from typing import Dict, Optional, Tuple

import numpy as np  # type: ignore
import pygame       # type: ignore

from .config import (
    WIDTH, HEIGHT, CELL_SIZE, GRID_SIZE, BOARD_PX, HUD_H, DPAD_H,
    BG, GRID, GREEN, HEAD, RED, TEXT, BUTTON,
)
from .game import GameState

# Board snapshot codes
EMPTY, BODY, SNAKE_HEAD, FOOD = 0, 1, 2, 3


def board_array(state: GameState) -> np.ndarray:
    """
    Grid snapshot indexed [y, x]. Food is left out once the game is over,
    the final frame only shows where the snake died.
    """
    board = np.zeros((GRID_SIZE, GRID_SIZE), dtype=np.int8)
    if state.running:
        fx, fy = state.food
        board[fy, fx] = FOOD
    for x, y in state.snake[1:]:
        board[y, x] = BODY
    hx, hy = state.snake[0]
    board[hy, hx] = SNAKE_HEAD
    return board


def _dpad_rects() -> Dict[str, pygame.Rect]:
    size = DPAD_H // 3
    cx = WIDTH // 2
    top = HUD_H + BOARD_PX
    return {
        "up":    pygame.Rect(cx - size // 2, top, size, size),
        "left":  pygame.Rect(cx - size // 2 - size, top + size, size, size),
        "right": pygame.Rect(cx + size // 2, top + size, size, size),
        "down":  pygame.Rect(cx - size // 2, top + 2 * size, size, size),
    }

RESTART_RECT = pygame.Rect(WIDTH // 2 - 70, HUD_H + BOARD_PX // 2 + 64, 140, 36)
ARROWS = {"up": "^", "down": "v", "left": "<", "right": ">"}


class Renderer:
    def __init__(self, screen: pygame.Surface, font: pygame.font.Font):
        self.screen = screen
        self.font = font
        self.dpad = _dpad_rects()
        self.restart_visible = False

    def button_at(self, pos: Tuple[int, int]) -> Optional[str]:
        """Which on-screen button (if any) sits under a click."""
        if self.restart_visible and RESTART_RECT.collidepoint(pos):
            return "restart"
        for name, rect in self.dpad.items():
            if rect.collidepoint(pos):
                return name
        return None

    def draw(self, state: GameState, high_score: int, speed_label: str, difficulty: str) -> None:
        self.screen.fill(BG)
        self._draw_hud(state.score, high_score, speed_label, difficulty)
        self._draw_board(board_array(state))
        self._draw_dpad()
        self.restart_visible = not state.running
        if self.restart_visible:
            self._draw_game_over(state.score)

    # ---------- pieces ----------
    def _draw_cell(self, gx: int, gy: int, color: Tuple[int, int, int]) -> None:
        rect = pygame.Rect(gx * CELL_SIZE, HUD_H + gy * CELL_SIZE, CELL_SIZE, CELL_SIZE)
        pygame.draw.rect(self.screen, color, rect)

    def _draw_board(self, board: np.ndarray) -> None:
        pygame.draw.rect(self.screen, GRID, pygame.Rect(0, HUD_H, BOARD_PX, BOARD_PX), 1)
        colors = {BODY: GREEN, SNAKE_HEAD: HEAD, FOOD: RED}
        for gy, gx in zip(*np.nonzero(board)):
            self._draw_cell(int(gx), int(gy), colors[int(board[gy, gx])])

    def _draw_hud(self, score: int, high_score: int, speed_label: str, difficulty: str) -> None:
        left = self.font.render(f"Score: {score}   Best: {high_score}", True, TEXT)
        right = self.font.render(f"{difficulty.upper()}  {speed_label}", True, TEXT)
        self.screen.blit(left, (8, 10))
        self.screen.blit(right, right.get_rect(topright=(WIDTH - 8, 10)))

    def _draw_dpad(self) -> None:
        for name, rect in self.dpad.items():
            pygame.draw.rect(self.screen, BUTTON, rect, border_radius=6)
            label = self.font.render(ARROWS[name], True, TEXT)
            self.screen.blit(label, label.get_rect(center=rect.center))

    def _draw_game_over(self, score: int) -> None:
        # Dim the board with a translucent overlay
        overlay = pygame.Surface((BOARD_PX, BOARD_PX), pygame.SRCALPHA)
        overlay.fill((0, 0, 0, 140))  # RGBA
        self.screen.blit(overlay, (0, HUD_H))

        mid = HUD_H + BOARD_PX // 2
        title = self.font.render("GAME OVER", True, (240, 240, 250))
        sco   = self.font.render(f"Score: {score}", True, TEXT)
        sub   = self.font.render("Space / Enter to restart", True, TEXT)
        self.screen.blit(title, title.get_rect(center=(WIDTH // 2, mid - 24)))
        self.screen.blit(sco, sco.get_rect(center=(WIDTH // 2, mid + 4)))
        self.screen.blit(sub, sub.get_rect(center=(WIDTH // 2, mid + 32)))

        pygame.draw.rect(self.screen, BUTTON, RESTART_RECT, border_radius=6)
        label = self.font.render("Restart", True, TEXT)
        self.screen.blit(label, label.get_rect(center=RESTART_RECT.center))
