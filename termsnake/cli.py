"""
cli.py - Command line parsing and board sizing.

`-h` is the board height here, so argparse's automatic help is switched
off and only `--help` prints usage. Any parse error prints the usage and
exits with status 1.
"""

import argparse
import logging
import sys
from typing import List, Optional, Tuple

from .config import (
    Config,
    DEFAULT_BOARD_W, DEFAULT_BOARD_H,
    DEFAULT_RENDER_FPS, DEFAULT_MOVE_FPS,
    TERMINAL_WIDTH_MARGIN, TERMINAL_HEIGHT_MARGIN,
    GAME_MODES, MODE_REGULAR,
)
from .timing import MICROSECONDS_PER_SECOND

logger = logging.getLogger(__name__)

USAGE_NOTES = """\
Note: For best visual experience, use a width:height ratio of approximately 2:1
      (e.g., -w 40 -h 20 or -w 60 -h 30)
      Higher render FPS makes input more responsive, higher move FPS makes game faster
      Default mode: hitting walls causes death. Use --wraparound to pass through walls
      Game modes: regular (classic snake), greedy (grows every move, find shortest path!)
"""


class SnakeArgumentParser(argparse.ArgumentParser):
    """ArgumentParser that reports errors with exit status 1."""

    def error(self, message):
        self.print_usage(sys.stderr)
        self.exit(1, f"Error: {message}\n")


def positive_int(value: str) -> int:
    try:
        number = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"expected a positive integer, got {value!r}")
    if number <= 0:
        raise argparse.ArgumentTypeError(f"expected a positive integer, got {value!r}")
    return number


def fps_value(value: str) -> int:
    number = positive_int(value)
    if number > MICROSECONDS_PER_SECOND:
        raise argparse.ArgumentTypeError(
            f"FPS must be at most {MICROSECONDS_PER_SECOND}, got {value!r}"
        )
    return number


def build_parser(prog: Optional[str] = None) -> SnakeArgumentParser:
    parser = SnakeArgumentParser(
        prog=prog,
        description="Terminal snake.",
        epilog=USAGE_NOTES,
        formatter_class=argparse.RawDescriptionHelpFormatter,
        add_help=False,
        allow_abbrev=False,
    )
    parser.add_argument("-w", dest="width", type=positive_int, metavar="WIDTH",
                        help="board width (default: terminal width)")
    parser.add_argument("-h", dest="height", type=positive_int, metavar="HEIGHT",
                        help="board height (default: terminal height)")
    parser.add_argument("-r", dest="render_fps", type=fps_value, metavar="FPS",
                        default=DEFAULT_RENDER_FPS,
                        help=f"render frequency in FPS (default: {DEFAULT_RENDER_FPS})")
    parser.add_argument("-m", dest="move_fps", type=fps_value, metavar="FPS",
                        default=DEFAULT_MOVE_FPS,
                        help=f"move frequency in FPS (default: {DEFAULT_MOVE_FPS})")
    parser.add_argument("--mode", choices=GAME_MODES, default=MODE_REGULAR,
                        help="game mode (default: regular)")
    parser.add_argument("--wraparound", action="store_true",
                        help="walls teleport to the opposite side")
    parser.add_argument("--emoji", action="store_true",
                        help="use emojis for game elements")
    parser.add_argument("--seed", type=int,
                        help="seed for food placement")
    parser.add_argument("--log-file", metavar="PATH",
                        help="write debug logging to PATH")
    parser.add_argument("--help", action="help",
                        help="show this help message and exit")
    return parser


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    return build_parser().parse_args(argv)


def resolve_board_size(
    size: Optional[Tuple[int, int]],
    width: Optional[int] = None,
    height: Optional[int] = None,
    emoji: bool = False,
) -> Tuple[int, int]:
    """
    Board size from the terminal's (columns, rows) and explicit overrides.
    Without a terminal size, overrides or the built-in defaults apply.
    """
    if size is None:
        if width is None or height is None:
            logger.warning("terminal size unavailable, falling back to %dx%d defaults",
                           DEFAULT_BOARD_W, DEFAULT_BOARD_H)
        return width or DEFAULT_BOARD_W, height or DEFAULT_BOARD_H

    cols, rows = size
    if width is None:
        width = cols - TERMINAL_WIDTH_MARGIN
        if emoji:
            width //= 2  # emoji glyphs are double width
        width = max(1, width)
    if height is None:
        height = max(1, rows - TERMINAL_HEIGHT_MARGIN)
    return width, height


def build_config(args: argparse.Namespace, size: Optional[Tuple[int, int]]) -> Config:
    width, height = resolve_board_size(size, args.width, args.height, args.emoji)
    return Config(
        board_width=width,
        board_height=height,
        render_fps=args.render_fps,
        move_fps=args.move_fps,
        wraparound=args.wraparound,
        emoji=args.emoji,
        game_mode=args.mode,
        seed=args.seed,
    )
