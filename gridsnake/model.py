"""
model.py — Model layer.

Owns ALL game state and rules. Zero rendering, zero input handling,
zero timers: the controller decides when a tick happens.

Classes:
    Direction     — the four unit moves over the grid
    GamePhase     — NOT_STARTED / RUNNING / GAME_OVER
    Segment       — one occupied grid cell
    GameSnapshot  — frozen view of the state handed to the renderer
    GameEngine    — the tick-driven state machine
"""

import logging
import random
import threading
from collections import deque
from dataclasses import dataclass
from enum import Enum
from typing import NamedTuple, Optional

from .config import GameConfig

logger = logging.getLogger(__name__)


# ─────────────────────────── Direction ───────────────────────────
class Direction(Enum):
    """Unit move over the grid; y grows downward."""

    UP    = (0, -1)
    DOWN  = (0,  1)
    LEFT  = (-1, 0)
    RIGHT = (1,  0)

    @property
    def dx(self) -> int:
        return self.value[0]

    @property
    def dy(self) -> int:
        return self.value[1]

    @property
    def opposite(self) -> "Direction":
        return Direction((-self.dx, -self.dy))

    def is_opposite(self, other: "Direction") -> bool:
        return other is self.opposite


class GamePhase(Enum):
    NOT_STARTED = "not_started"
    RUNNING     = "running"
    GAME_OVER   = "game_over"


class Segment(NamedTuple):
    x: int
    y: int

    def moved(self, direction: Direction) -> "Segment":
        return Segment(self.x + direction.dx, self.y + direction.dy)


@dataclass(frozen=True)
class GameSnapshot:
    """Everything the renderer needs, detached from the engine."""

    snake: tuple[Segment, ...]      # head first
    food: Optional[Segment]
    direction: Direction
    pending_direction: Direction
    score: int
    phase: GamePhase
    grid_size: int

    @property
    def head(self) -> Segment:
        return self.snake[0]


# ─────────────────────────── GameEngine ──────────────────────────
class GameEngine:
    """
    Single-snake game state machine.

    The driver calls tick() at a fixed cadence while the phase is RUNNING and
    forwards player input through request_direction(). Collisions never raise;
    they move the phase to GAME_OVER and freeze the state until start().
    """

    def __init__(self, config: Optional[GameConfig] = None, rng: Optional[random.Random] = None):
        self.config: GameConfig = config or GameConfig()
        self._rng = rng or random.Random()
        # tick() and request_direction() both read-modify-write the snake and
        # the direction pair, so they share one lock.
        self._lock = threading.Lock()
        self._phase: GamePhase = GamePhase.NOT_STARTED
        self._snake: deque[Segment] = deque()
        self._food: Optional[Segment] = None
        self._direction: Direction = Direction[self.config.start_direction]
        self._pending: Direction = self._direction
        self._score: int = 0
        self._reset_entities()

    # ── Accessors ────────────────────────────────────────────────
    @property
    def phase(self) -> GamePhase:
        return self._phase

    @property
    def score(self) -> int:
        return self._score

    @property
    def direction(self) -> Direction:
        return self._direction

    @property
    def pending_direction(self) -> Direction:
        return self._pending

    @property
    def head(self) -> Segment:
        return self._snake[0]

    @property
    def food(self) -> Optional[Segment]:
        return self._food

    def snapshot(self) -> GameSnapshot:
        with self._lock:
            return GameSnapshot(
                snake=tuple(self._snake),
                food=self._food,
                direction=self._direction,
                pending_direction=self._pending,
                score=self._score,
                phase=self._phase,
                grid_size=self.config.grid_size,
            )

    # ── Commands ─────────────────────────────────────────────────
    def start(self) -> None:
        """Begin a fresh game, from NOT_STARTED or after GAME_OVER."""
        with self._lock:
            self._reset_entities()
            self._food = self._spawn_food()
            self._phase = GamePhase.RUNNING
            origin, heading, food = self._snake[0], self._direction, self._food
        logger.info("Game started at %s heading %s, food at %s.", origin, heading.name, food)

    def reset(self) -> None:
        """Return to NOT_STARTED with the initial snake and no food."""
        with self._lock:
            self._reset_entities()
            self._phase = GamePhase.NOT_STARTED
        logger.info("Game reset.")

    def request_direction(self, direction: Direction) -> bool:
        """
        Buffer a direction for the next tick.
        Ignored outside RUNNING and when it would reverse the committed
        direction. Returns True if the request was accepted.
        """
        with self._lock:
            if self._phase is not GamePhase.RUNNING:
                return False
            if direction.is_opposite(self._direction):
                logger.debug("Rejected %s while moving %s.", direction.name, self._direction.name)
                return False
            self._pending = direction
            return True

    def tick(self) -> GamePhase:
        """Advance the snake one cell. Returns the phase after the step."""
        with self._lock:
            if self._phase is GamePhase.RUNNING:
                self._step()
            return self._phase

    # ── Private helpers ──────────────────────────────────────────
    def _reset_entities(self) -> None:
        self._snake = deque([Segment(*self.config.start)])
        self._direction = Direction[self.config.start_direction]
        self._pending = self._direction
        self._score = 0
        self._food = None

    def _in_bounds(self, cell: Segment) -> bool:
        size = self.config.grid_size
        return 0 <= cell.x < size and 0 <= cell.y < size

    def _spawn_food(self) -> Segment:
        # Rejection sampling; never returns if the snake fills the board.
        occupied = set(self._snake)
        size = self.config.grid_size
        while True:
            pos = Segment(self._rng.randrange(size), self._rng.randrange(size))
            if pos not in occupied:
                return pos

    def _game_over(self, cause: str) -> None:
        self._phase = GamePhase.GAME_OVER
        logger.info("Game over (%s) with score %d, length %d.", cause, self._score, len(self._snake))

    def _step(self) -> None:
        new_head = self._snake[0].moved(self._pending)

        if not self._in_bounds(new_head):
            self._game_over("wall")
            return

        # Checked against the pre-move body, tail included.
        if new_head in self._snake:
            self._game_over("self")
            return

        self._direction = self._pending
        self._snake.appendleft(new_head)

        if new_head == self._food:
            self._score += self.config.food_reward
            self._food = self._spawn_food()
            logger.debug("Food eaten at %s, score %d, next food at %s.", new_head, self._score, self._food)
        else:
            self._snake.pop()
