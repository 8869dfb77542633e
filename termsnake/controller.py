"""
controller.py - Controller layer.

Responsibilities:
  - Own the game loop: poll input, run move and render ticks, sleep.
  - Translate decoded keystrokes into model commands.
  - Show the end-of-game screen once the terminal is restored.
  - Know nothing about rendering details (that's the View's job).
  - Know nothing about game rules (that's the Model's job).

Move and render ticks have separate TickTimers, so input stays
responsive at a high render rate while the snake moves at its own pace.
"""

import logging
import time
from typing import Callable, Optional

from .config import (
    Config,
    LOOP_SLEEP_SECONDS, EXIT_PROMPT,
    ACTION_PAUSE, ACTION_QUIT,
)
from .keys import Action, KeyDecoder
from .model import Direction, GameModel
from .timing import TickTimer, monotonic_us
from .view import GameView

logger = logging.getLogger(__name__)


class GameController:
    """
    Owns the main loop.
    Glues Model <-> View without them knowing about each other.
    """

    def __init__(
        self,
        config: Config,
        terminal,
        model: Optional[GameModel] = None,
        clock: Callable[[], int] = monotonic_us,
        sleep: Callable[[float], None] = time.sleep,
    ):
        self.config   = config
        self.terminal = terminal
        self.model    = model if model is not None else GameModel(config)
        self.view     = GameView(terminal, config)
        self.decoder  = KeyDecoder()
        self._clock   = clock
        self._sleep   = sleep
        self.move_timer   = TickTimer(config.move_interval_us)
        self.render_timer = TickTimer(config.render_interval_us)

    # ── Public entry point ────────────────────────────────────────
    def run(self) -> int:
        """Play until game over, show the final score. Returns the score."""
        logger.info("starting game: %s", self.config)
        with self.terminal.session():
            self._loop()
        self._show_game_over()
        return self.model.score

    # ── Loop ──────────────────────────────────────────────────────
    def _loop(self) -> None:
        start = self._clock()
        while not self.model.game_over:
            elapsed = self._clock() - start
            self.tick(elapsed)
            self._sleep(LOOP_SLEEP_SECONDS)

    def tick(self, elapsed_us: int) -> None:
        """One loop iteration at `elapsed_us` since the loop started."""
        self._handle_input()

        if not self.model.paused and self.move_timer.due(elapsed_us):
            self.model.move()
            self.move_timer.fire(elapsed_us)

        if self.render_timer.due(elapsed_us):
            self.view.render(self.model)
            self.render_timer.fire(elapsed_us)

    # ── Input dispatch ────────────────────────────────────────────
    def _handle_input(self) -> None:
        action = self.decoder.decode(self.terminal.read_key())
        if action is not None:
            self.dispatch(action)

    def dispatch(self, action: Action) -> None:
        if isinstance(action, Direction):
            self.model.set_direction(action)
        elif action == ACTION_PAUSE:
            self.model.toggle_pause()
        elif action == ACTION_QUIT:
            self.model.quit()

    # ── End screen ────────────────────────────────────────────────
    def _show_game_over(self) -> None:
        self.terminal.clear()
        self.terminal.write(f"Game Over! Final Score: {self.model.score}\n{EXIT_PROMPT}")
        self.terminal.wait_for_enter()
