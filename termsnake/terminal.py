"""
terminal.py - Terminal I/O.

The only module that talks to the terminal. Wraps a blessed.Terminal for
cbreak mode, non-blocking key reads and the size query; frames and cursor
control go out as raw ANSI codes.
"""

import logging
import signal
from contextlib import contextmanager
from typing import Callable, Optional, Tuple

import blessed

from .config import CLEAR_SCREEN, HIDE_CURSOR, SHOW_CURSOR

logger = logging.getLogger(__name__)


def _terminate(signum, frame):
    raise SystemExit(128 + signum)


class TerminalIO:
    """Raw-mode session, key polling and frame output."""

    def __init__(self, term: Optional[blessed.Terminal] = None,
                 input_fn: Callable[[], str] = input):
        self.term = term if term is not None else blessed.Terminal()
        self._input = input_fn

    # ── Session ──────────────────────────────────────────────────
    @contextmanager
    def session(self):
        """
        Enter cbreak mode with the cursor hidden. The cursor and the
        original terminal mode come back on every way out of the block,
        SIGTERM included.
        """
        previous = signal.signal(signal.SIGTERM, _terminate)
        try:
            with self.term.cbreak():
                self.write(HIDE_CURSOR + CLEAR_SCREEN)
                try:
                    yield self
                finally:
                    self.write(SHOW_CURSOR)
        finally:
            signal.signal(signal.SIGTERM, previous)
            logger.debug("terminal mode restored")

    # ── Input ────────────────────────────────────────────────────
    def read_key(self) -> Optional[str]:
        """Return the next keystroke's text, or None if nothing is waiting."""
        key = self.term.inkey(timeout=0, esc_delay=0)
        if not key:
            return None
        return str(key)

    def wait_for_enter(self) -> None:
        try:
            self._input()
        except EOFError:
            pass

    # ── Output ───────────────────────────────────────────────────
    def write(self, text: str) -> None:
        stream = self.term.stream
        stream.write(text)
        stream.flush()

    def clear(self) -> None:
        self.write(CLEAR_SCREEN)

    # ── Queries ──────────────────────────────────────────────────
    def query_size(self) -> Optional[Tuple[int, int]]:
        """(columns, rows) of the controlling terminal, None if unknown."""
        if not self.term.is_a_tty:
            return None
        cols, rows = self.term.width, self.term.height
        if cols <= 0 or rows <= 0:
            return None
        return cols, rows
