"""
view.py — View layer.

Draws one frame from a GameSnapshot. Reads nothing else, mutates nothing,
and leaves pygame.display.flip() to the controller so it can render onto
any surface.

Screen layout, top to bottom:
  - score panel
  - the GRID_SIZE x GRID_SIZE board (food, snake, phase overlays)
  - on-screen controls: d-pad plus START / PLAY AGAIN / RESET buttons

Public API:
    window_size(grid_size)         — pixel size the window must have
    GameView(screen, grid_size)    — bind to a pygame surface
    view.render(snapshot)          — draw the current frame
    view.button_at(pos, phase)     — action name under a click, or None
"""

import logging
from typing import Optional

import pygame

from .config import (
    CELL, PANEL_H, MARGIN, CONTROLS_H, BOARD_MAX_PX, MIN_WIDTH,
    BG, BOARD_BG, GRID_COL, HEAD_COL, BODY_COL, FOOD_COL,
    TEXT_COL, PANEL_BG, BORDER_COL,
    BUTTON_COL, START_COL, RESET_COL, OVERLAY_COL,
    ACTION_UP, ACTION_DOWN, ACTION_LEFT, ACTION_RIGHT,
    ACTION_START, ACTION_RESET,
)
from .model import GamePhase, GameSnapshot

logger = logging.getLogger(__name__)

DPAD_SIZE = 44
DPAD_GAP  = 4
BUTTON_W, BUTTON_H = 150, 40


def cell_size(grid_size: int) -> int:
    return max(4, min(CELL, BOARD_MAX_PX // grid_size))


def window_size(grid_size: int) -> tuple[int, int]:
    board = grid_size * cell_size(grid_size)
    width = max(MIN_WIDTH, board + 2 * MARGIN)
    height = PANEL_H + MARGIN + board + MARGIN + CONTROLS_H
    return width, height


# ─────────────────────────── Layout ──────────────────────────────
class Layout:
    """Pixel rectangles for the board and every on-screen control."""

    def __init__(self, grid_size: int):
        self.grid_size = grid_size
        self.cell = cell_size(grid_size)
        self.width, self.height = window_size(grid_size)

        board_px = grid_size * self.cell
        self.board = pygame.Rect((self.width - board_px) // 2, PANEL_H + MARGIN, board_px, board_px)

        top = self.board.bottom + MARGIN
        cx = self.width // 3
        row2 = top + DPAD_SIZE + DPAD_GAP
        step = DPAD_SIZE + DPAD_GAP
        self.dpad = {
            ACTION_UP:    pygame.Rect(cx - DPAD_SIZE // 2, top, DPAD_SIZE, DPAD_SIZE),
            ACTION_LEFT:  pygame.Rect(cx - DPAD_SIZE // 2 - step, row2, DPAD_SIZE, DPAD_SIZE),
            ACTION_DOWN:  pygame.Rect(cx - DPAD_SIZE // 2, row2, DPAD_SIZE, DPAD_SIZE),
            ACTION_RIGHT: pygame.Rect(cx - DPAD_SIZE // 2 + step, row2, DPAD_SIZE, DPAD_SIZE),
        }

        bx = 2 * self.width // 3 - BUTTON_W // 2
        self.primary = pygame.Rect(bx, top + 2, BUTTON_W, BUTTON_H)
        self.reset = pygame.Rect(bx, top + 2 + BUTTON_H + 8, BUTTON_W, BUTTON_H)

    def cell_rect(self, x: int, y: int, inset: int = 0) -> pygame.Rect:
        return pygame.Rect(
            self.board.x + x * self.cell + inset,
            self.board.y + y * self.cell + inset,
            self.cell - 2 * inset,
            self.cell - 2 * inset,
        )

    def buttons(self, phase: GamePhase) -> dict[str, pygame.Rect]:
        """Controls that are live in the given phase."""
        if phase is GamePhase.NOT_STARTED:
            return {ACTION_START: self.primary}
        if phase is GamePhase.RUNNING:
            return {**self.dpad, ACTION_RESET: self.reset}
        return {ACTION_START: self.primary, ACTION_RESET: self.reset}


# ─────────────────────────── GameView ────────────────────────────
class GameView:
    """Renders the complete game frame from a GameSnapshot."""

    def __init__(self, screen: pygame.Surface, grid_size: int):
        self.screen = screen
        self.layout = Layout(grid_size)
        self._init_fonts()
        self._build_static_surfaces()

    # ── Main entry ───────────────────────────────────────────────
    def render(self, snapshot: GameSnapshot) -> None:
        self.screen.fill(BG)
        self._draw_panel(snapshot)
        self.screen.blit(self._board_surf, self.layout.board.topleft)

        if snapshot.phase is not GamePhase.NOT_STARTED and snapshot.food is not None:
            self._draw_food(snapshot.food)
        self._draw_snake(snapshot)

        pygame.draw.rect(self.screen, BORDER_COL, self.layout.board.inflate(4, 4), 2)

        if snapshot.phase is GamePhase.NOT_STARTED:
            self._draw_overlay("SNAKE", HEAD_COL, ["PRESS ENTER OR START"])
        elif snapshot.phase is GamePhase.GAME_OVER:
            self._draw_overlay(
                "GAME OVER", FOOD_COL,
                [f"FINAL SCORE: {snapshot.score}", "ENTER — PLAY AGAIN   R — RESET"],
            )

        self._draw_controls(snapshot.phase)

    def button_at(self, pos: tuple[int, int], phase: GamePhase) -> Optional[str]:
        for action, rect in self.layout.buttons(phase).items():
            if rect.collidepoint(pos):
                return action
        return None

    # ── Static surface pre-builds ─────────────────────────────────
    def _build_static_surfaces(self) -> None:
        board = self.layout.board
        cell = self.layout.cell
        self._board_surf = pygame.Surface(board.size)
        self._board_surf.fill(BOARD_BG)
        for i in range(self.layout.grid_size + 1):
            pygame.draw.line(self._board_surf, GRID_COL, (i * cell, 0), (i * cell, board.h))
            pygame.draw.line(self._board_surf, GRID_COL, (0, i * cell), (board.w, i * cell))

    # ── Board contents ───────────────────────────────────────────
    def _draw_food(self, food) -> None:
        rect = self.layout.cell_rect(food.x, food.y)
        pygame.draw.circle(self.screen, FOOD_COL, rect.center, max(2, rect.w // 2 - 1))

    def _draw_snake(self, snapshot: GameSnapshot) -> None:
        inset = 1 if self.layout.cell > 6 else 0
        # Tail first so the head is always painted on top.
        for i in range(len(snapshot.snake) - 1, -1, -1):
            seg = snapshot.snake[i]
            color = HEAD_COL if i == 0 else BODY_COL
            pygame.draw.rect(self.screen, color, self.layout.cell_rect(seg.x, seg.y, inset), border_radius=2)
        if snapshot.snake:
            self._draw_eyes(snapshot)

    def _draw_eyes(self, snapshot: GameSnapshot) -> None:
        rect = self.layout.cell_rect(*snapshot.head)
        if rect.w < 10:
            return
        dx, dy = snapshot.direction.dx, snapshot.direction.dy
        px, py = -dy, dx  # perpendicular
        off = rect.w // 4
        for sign in (+1, -1):
            ex = rect.centerx + dx * off + sign * px * off
            ey = rect.centery + dy * off + sign * py * off
            pygame.draw.circle(self.screen, TEXT_COL, (ex, ey), 2)

    # ── HUD Panel ─────────────────────────────────────────────────
    def _draw_panel(self, snapshot: GameSnapshot) -> None:
        width = self.layout.width
        pygame.draw.rect(self.screen, PANEL_BG, (0, 0, width, PANEL_H))
        pygame.draw.line(self.screen, BORDER_COL, (0, PANEL_H - 1), (width, PANEL_H - 1), 1)

        title = self.font_med.render("SNAKE", True, HEAD_COL)
        self.screen.blit(title, title.get_rect(midleft=(MARGIN + 4, PANEL_H // 2)))

        score = self.font_med.render(f"SCORE {snapshot.score}", True, TEXT_COL)
        self.screen.blit(score, score.get_rect(midright=(width - MARGIN - 4, PANEL_H // 2)))

    # ── Overlays & controls ───────────────────────────────────────
    def _draw_overlay(self, title: str, color: tuple, lines: list[str]) -> None:
        board = self.layout.board
        shade = pygame.Surface(board.size, pygame.SRCALPHA)
        shade.fill(OVERLAY_COL)
        self.screen.blit(shade, board.topleft)

        surf = self.font_title.render(title, True, color)
        cy = board.centery - surf.get_height()
        self.screen.blit(surf, surf.get_rect(center=(board.centerx, cy)))
        cy += surf.get_height()
        for line in lines:
            text = self.font_small.render(line, True, TEXT_COL)
            self.screen.blit(text, text.get_rect(center=(board.centerx, cy)))
            cy += text.get_height() + 8

    def _draw_controls(self, phase: GamePhase) -> None:
        labels = {
            ACTION_UP: "▲", ACTION_DOWN: "▼", ACTION_LEFT: "◄", ACTION_RIGHT: "►",
            ACTION_START: "START" if phase is GamePhase.NOT_STARTED else "PLAY AGAIN",
            ACTION_RESET: "RESET",
        }
        colors = {ACTION_START: START_COL, ACTION_RESET: RESET_COL}
        for action, rect in self.layout.buttons(phase).items():
            self._draw_button(rect, labels[action], colors.get(action, BUTTON_COL))

    def _draw_button(self, rect: pygame.Rect, label: str, color: tuple) -> None:
        radius = rect.h // 2 if rect.w == rect.h else 8
        pygame.draw.rect(self.screen, color, rect, border_radius=radius)
        text = self.font_small.render(label, True, TEXT_COL)
        self.screen.blit(text, text.get_rect(center=rect.center))

    # ── Font init ─────────────────────────────────────────────────
    def _init_fonts(self) -> None:
        specs = [
            ("font_title", "dejavusans", 36, True),
            ("font_med",   "dejavusans", 20, True),
            ("font_small", "dejavusans", 14, True),
        ]
        for attr, name, size, bold in specs:
            try:
                setattr(self, attr, pygame.font.SysFont(name, size, bold=bold))
            except Exception:
                logger.warning("Font %r unavailable, using the pygame default.", name)
                setattr(self, attr, pygame.font.SysFont(None, size))
