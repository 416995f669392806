"""
config.py — Shared constants and engine configuration.
No logic beyond validation, no imports from internal modules.
"""

from dataclasses import dataclass
from typing import Optional

# ── Gameplay ──────────────────────────────────────────────────────
GRID_SIZE       = 20
TICK_MS         = 150        # one snake step every 150 ms
FOOD_REWARD     = 10         # points per food eaten
START_DIRECTION = "RIGHT"
DIRECTION_NAMES = ("UP", "DOWN", "LEFT", "RIGHT")

# ── Window & Layout ───────────────────────────────────────────────
CELL            = 24
PANEL_H         = 56
MARGIN          = 12
CONTROLS_H      = 110
BOARD_MAX_PX    = 600        # cells shrink on large grids
MIN_WIDTH       = 360
FPS             = 60

# ── Colors ────────────────────────────────────────────────────────
BG          = (10,  10,  15)
BOARD_BG    = (16,  18,  26)
GRID_COL    = (26,  30,  44)
HEAD_COL    = (46,  204, 113)
BODY_COL    = (39,  174, 96)
FOOD_COL    = (231, 76,  60)
TEXT_COL    = (236, 240, 241)
PANEL_BG    = (12,  12,  20)
BORDER_COL  = (52,  73,  94)
BUTTON_COL  = (52,  152, 219)
START_COL   = (46,  204, 113)
RESET_COL   = (149, 165, 166)
OVERLAY_COL = (0,   0,   0,   180)

# ── Player Actions ────────────────────────────────────────────────
ACTION_UP    = "up"
ACTION_DOWN  = "down"
ACTION_LEFT  = "left"
ACTION_RIGHT = "right"
ACTION_START = "start"
ACTION_RESET = "reset"
ACTION_QUIT  = "quit"


class ConfigError(ValueError):
    """Raised when a GameConfig describes an unplayable board."""


@dataclass(frozen=True)
class GameConfig:
    """Engine settings. Defaults reproduce the classic 20x20 board."""

    grid_size: int = GRID_SIZE
    tick_ms: int = TICK_MS
    food_reward: int = FOOD_REWARD
    start: Optional[tuple[int, int]] = None    # None = grid centre
    start_direction: str = START_DIRECTION

    def __post_init__(self):
        for name in ("grid_size", "tick_ms", "food_reward"):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, int):
                raise ConfigError(f"{name} must be an integer, got {value!r}")
        if self.grid_size <= 0:
            raise ConfigError(f"grid_size must be positive, got {self.grid_size}")
        if self.tick_ms <= 0:
            raise ConfigError(f"tick_ms must be positive, got {self.tick_ms}")
        if self.food_reward < 0:
            raise ConfigError(f"food_reward must not be negative, got {self.food_reward}")
        if self.start_direction not in DIRECTION_NAMES:
            raise ConfigError(f"unknown start_direction {self.start_direction!r}")
        if self.start is None:
            centre = self.grid_size // 2
            object.__setattr__(self, "start", (centre, centre))
        start = tuple(self.start)
        if len(start) != 2 or not all(isinstance(v, int) and not isinstance(v, bool) for v in start):
            raise ConfigError(f"start must be an (x, y) pair of integers, got {self.start!r}")
        object.__setattr__(self, "start", start)
        x, y = start
        if not (0 <= x < self.grid_size and 0 <= y < self.grid_size):
            raise ConfigError(f"start cell {self.start} lies outside a {self.grid_size}x{self.grid_size} grid")
