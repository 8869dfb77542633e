"""
keys.py - Keystroke decoding.

Turns the characters of one keystroke into a game action: a Direction,
ACTION_PAUSE or ACTION_QUIT. Arrow keys arrive as ANSI sequences
(ESC [ A..D) and go through a three-state machine; anything it does not
recognise is dropped.
"""

import logging
from typing import Optional, Union

from .config import ACTION_PAUSE, ACTION_QUIT
from .model import Direction

logger = logging.getLogger(__name__)

Action = Union[Direction, str]

ESC = "\x1b"

IDLE        = "idle"
SAW_ESC     = "saw_esc"
SAW_BRACKET = "saw_bracket"

CHAR_ACTIONS = {
    "w": Direction.UP,
    "s": Direction.DOWN,
    "a": Direction.LEFT,
    "d": Direction.RIGHT,
    "q": ACTION_QUIT,
    " ": ACTION_PAUSE,
}

ARROW_ACTIONS = {
    "A": Direction.UP,
    "B": Direction.DOWN,
    "C": Direction.RIGHT,
    "D": Direction.LEFT,
}


class KeyDecoder:
    """
    Feed characters one by one with `feed()`, or a whole keystroke with
    `decode()`. A sequence still incomplete when `decode()` reaches the end
    of its input is discarded, so nothing carries over between calls.
    """

    def __init__(self):
        self.state = IDLE

    def reset(self) -> None:
        self.state = IDLE

    def feed(self, ch: str) -> Optional[Action]:
        if self.state == IDLE:
            if ch == ESC:
                self.state = SAW_ESC
                return None
            return CHAR_ACTIONS.get(ch.lower())

        if self.state == SAW_ESC:
            self.state = SAW_BRACKET if ch == "[" else IDLE
            return None

        # SAW_BRACKET
        self.state = IDLE
        return ARROW_ACTIONS.get(ch)

    def decode(self, text: Optional[str]) -> Optional[Action]:
        """Decode one keystroke. Returns the first action it yields."""
        if not text:
            return None
        action = None
        for ch in text:
            action = self.feed(ch)
            if action is not None:
                break
        if action is None:
            logger.debug("ignored keystroke %r", text)
        self.reset()
        return action
