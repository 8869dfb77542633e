"""
main.py - Entry point.

Run with:
    python main.py [options]      (python main.py --help for the list)

Requires:
    pip install blessed
"""

import logging
import sys
from typing import List, Optional

from termsnake.cli import build_config, parse_args
from termsnake.controller import GameController
from termsnake.terminal import TerminalIO


def setup_logging(log_file: Optional[str]) -> logging.Handler:
    # The board owns stdout, so only warnings reach stderr unless a file is given.
    root = logging.getLogger()
    if log_file:
        handler = logging.FileHandler(log_file)
        handler.setFormatter(logging.Formatter("%(asctime)s %(levelname)s %(name)s: %(message)s"))
        root.setLevel(logging.DEBUG)
    else:
        handler = logging.StreamHandler()
        handler.setLevel(logging.WARNING)
        handler.setFormatter(logging.Formatter("%(levelname)s: %(message)s"))
    root.addHandler(handler)
    return handler


def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)
    root = logging.getLogger()
    level = root.level
    handler = setup_logging(args.log_file)

    try:
        terminal = TerminalIO()
        config = build_config(args, terminal.query_size())
        GameController(config, terminal).run()
    except KeyboardInterrupt:
        return 130
    finally:
        root.removeHandler(handler)
        handler.close()
        root.setLevel(level)
    return 0


if __name__ == "__main__":
    sys.exit(main())
