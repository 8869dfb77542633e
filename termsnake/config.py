"""
config.py - Shared constants and the run settings.
No game logic. The only internal import is timing, for interval math.
"""

from dataclasses import dataclass
from typing import Optional

from .timing import interval_us

# ── Board defaults ────────────────────────────────────────────────
DEFAULT_BOARD_W        = 40
DEFAULT_BOARD_H        = 20
TERMINAL_WIDTH_MARGIN  = 4
TERMINAL_HEIGHT_MARGIN = 6

# ── Timing ────────────────────────────────────────────────────────
DEFAULT_RENDER_FPS = 30
DEFAULT_MOVE_FPS   = 6
LOOP_SLEEP_SECONDS = 0.001

# ── Gameplay ──────────────────────────────────────────────────────
START_LENGTH       = 3
POINTS_PER_FOOD    = 10
FOOD_ATTEMPTS_MULT = 2   # food sampling gives up after MULT * cells tries

MODE_REGULAR = "regular"
MODE_GREEDY  = "greedy"
GAME_MODES   = (MODE_REGULAR, MODE_GREEDY)

# ── Game States ───────────────────────────────────────────────────
STATE_RUNNING = "running"
STATE_PAUSED  = "paused"
STATE_OVER    = "over"

# ── Input actions ─────────────────────────────────────────────────
ACTION_PAUSE = "pause"
ACTION_QUIT  = "quit"

# ── Glyphs ────────────────────────────────────────────────────────
ASCII_GLYPHS = {
    "wall":  "#",
    "head":  "@",
    "body":  "o",
    "food":  "*",
    "empty": " ",
}
EMOJI_GLYPHS = {
    "wall":  "\U0001F9F1",   # brick
    "head":  "\U0001F40D",   # snake
    "body":  "\U0001F7E2",   # green circle
    "food":  "\U0001F34E",   # red apple
    "empty": "  ",
}

# ── ANSI escape codes ─────────────────────────────────────────────
CLEAR_SCREEN = "\x1b[2J\x1b[H"
CURSOR_HOME  = "\x1b[H"
CLEAR_EOL    = "\x1b[K"
HIDE_CURSOR  = "\x1b[?25l"
SHOW_CURSOR  = "\x1b[?25h"

# ── Text ──────────────────────────────────────────────────────────
CONTROLS_HINT = "Use WASD or arrow keys to move, SPACE to pause, Q to quit"
PAUSED_HINT   = "PAUSED (Press SPACE to resume)"
EXIT_PROMPT   = "Press Enter to exit..."


@dataclass(frozen=True)
class Config:
    """Settings for one run. Built once at startup, never mutated."""

    board_width: int = DEFAULT_BOARD_W
    board_height: int = DEFAULT_BOARD_H
    render_fps: int = DEFAULT_RENDER_FPS
    move_fps: int = DEFAULT_MOVE_FPS
    wraparound: bool = False
    emoji: bool = False
    game_mode: str = MODE_REGULAR
    seed: Optional[int] = None

    def __post_init__(self):
        if self.board_width < 1 or self.board_height < 1:
            raise ValueError(
                f"board must be at least 1x1, got {self.board_width}x{self.board_height}"
            )
        if self.render_fps <= 0 or self.move_fps <= 0:
            raise ValueError("render_fps and move_fps must be positive")
        # Both intervals must come out non-zero; interval_us raises otherwise.
        interval_us(self.render_fps)
        interval_us(self.move_fps)
        if self.game_mode not in GAME_MODES:
            raise ValueError(f"unknown game mode {self.game_mode!r}")

    @property
    def render_interval_us(self) -> int:
        return interval_us(self.render_fps)

    @property
    def move_interval_us(self) -> int:
        return interval_us(self.move_fps)

    @property
    def cells(self) -> int:
        return self.board_width * self.board_height

    @property
    def glyphs(self) -> dict:
        return EMOJI_GLYPHS if self.emoji else ASCII_GLYPHS
