"""
controller.py — Controller layer.

Responsibilities:
  - Own the pygame event loop.
  - Translate keyboard events and clicks on the on-screen controls into
    engine commands.
  - Own the tick source: arm it when a game starts, disarm it as soon as
    the phase leaves RUNNING.
  - Know nothing about rendering details (that's the View's job).
  - Know nothing about game rules (that's the Model's job).

The controller is the only layer that imports pygame directly for events.
"""

import logging
from typing import Optional

import pygame

from .config import (
    FPS, GameConfig,
    ACTION_UP, ACTION_DOWN, ACTION_LEFT, ACTION_RIGHT,
    ACTION_START, ACTION_RESET, ACTION_QUIT,
)
from .model import Direction, GameEngine, GamePhase
from .ticker import Ticker
from .view import GameView, window_size

logger = logging.getLogger(__name__)

ACTION_DIRECTIONS = {
    ACTION_UP:    Direction.UP,
    ACTION_DOWN:  Direction.DOWN,
    ACTION_LEFT:  Direction.LEFT,
    ACTION_RIGHT: Direction.RIGHT,
}

_DIRECTION_KEYS = {
    pygame.K_UP:    ACTION_UP,
    pygame.K_DOWN:  ACTION_DOWN,
    pygame.K_LEFT:  ACTION_LEFT,
    pygame.K_RIGHT: ACTION_RIGHT,
    pygame.K_w:     ACTION_UP,
    pygame.K_s:     ACTION_DOWN,
    pygame.K_a:     ACTION_LEFT,
    pygame.K_d:     ACTION_RIGHT,
}
_START_KEYS = (pygame.K_RETURN, pygame.K_KP_ENTER, pygame.K_SPACE)


def resolve_key(phase: GamePhase, key: int) -> Optional[str]:
    """Map a key press to an action name for the given phase."""
    # Q quits from any state
    if key == pygame.K_q:
        return ACTION_QUIT

    if phase is GamePhase.NOT_STARTED:
        if key in _START_KEYS:
            return ACTION_START
    elif phase is GamePhase.RUNNING:
        if key in _DIRECTION_KEYS:
            return _DIRECTION_KEYS[key]
        if key == pygame.K_r:
            return ACTION_RESET
    elif phase is GamePhase.GAME_OVER:
        if key in _START_KEYS:
            return ACTION_START
        if key == pygame.K_r:
            return ACTION_RESET
    return None


class GameController:
    """
    Owns the main loop.
    Glues Model <-> View without them knowing about each other.
    Also owns the ticker so the engine never touches a clock.
    """

    def __init__(self, config: Optional[GameConfig] = None, engine: Optional[GameEngine] = None):
        self.config = config or GameConfig()
        self.engine = engine or GameEngine(self.config)
        self.ticker = Ticker(self.config.tick_ms, self._on_tick)
        self._running = False
        self.screen: Optional[pygame.Surface] = None
        self.view: Optional[GameView] = None
        self.clock: Optional[pygame.time.Clock] = None

    # ── Public entry point ────────────────────────────────────────
    def run(self) -> None:
        """Open the window and run the game loop until the player quits."""
        pygame.init()
        try:
            self.screen = pygame.display.set_mode(window_size(self.config.grid_size))
            pygame.display.set_caption("Snake")
            self.clock = pygame.time.Clock()
            self.view = GameView(self.screen, self.config.grid_size)
            logger.info("Window opened for a %dx%d grid.", self.config.grid_size, self.config.grid_size)

            self._running = True
            while self._running:
                dt_ms = self.clock.tick(FPS)
                self._handle_events()
                self.ticker.advance(dt_ms)
                self.view.render(self.engine.snapshot())
                pygame.display.flip()
        finally:
            self.ticker.stop()
            pygame.quit()
            logger.info("Shut down.")

    # ── Commands ──────────────────────────────────────────────────
    def dispatch(self, action: Optional[str]) -> None:
        """Apply one player action to the engine."""
        if action is None:
            return
        if action == ACTION_QUIT:
            self._running = False
        elif action == ACTION_START:
            self.engine.start()
            self.ticker.start()
        elif action == ACTION_RESET:
            self.ticker.stop()
            self.engine.reset()
        elif action in ACTION_DIRECTIONS:
            self.engine.request_direction(ACTION_DIRECTIONS[action])

    def _on_tick(self) -> None:
        if self.engine.tick() is not GamePhase.RUNNING:
            self.ticker.stop()

    # ── Event dispatch ────────────────────────────────────────────
    def _handle_events(self) -> None:
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                self.dispatch(ACTION_QUIT)
            elif event.type == pygame.KEYDOWN:
                self.dispatch(resolve_key(self.engine.phase, event.key))
            elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
                self.dispatch(self.view.button_at(event.pos, self.engine.phase))
