"""
view.py - View layer.

Builds a full text frame from the model and hands it to the terminal.
No diffing: the cursor goes home and every row is redrawn each render
tick.

Public API:
    GameView(terminal, config)  - bind to a terminal and glyph set
    view.frame(model)           - the frame as a string
    view.render(model)          - write the frame
"""

from typing import Dict, List

from .config import (
    Config,
    CURSOR_HOME, CLEAR_EOL,
    CONTROLS_HINT, PAUSED_HINT,
)
from .model import GameModel, Point


class GameView:
    """Renders the complete game frame from a GameModel snapshot."""

    # ── Construction ─────────────────────────────────────────────
    def __init__(self, terminal, config: Config):
        self.terminal = terminal
        self.config = config
        self.glyphs = config.glyphs
        self._build_static_rows()

    # ── Main entry ───────────────────────────────────────────────
    def render(self, model: GameModel) -> None:
        self.terminal.write(self.frame(model))

    def frame(self, model: GameModel) -> str:
        lines = [self._status_line(model), ""]
        lines.extend(self._board_rows(model))
        lines.append("")
        lines.append(CONTROLS_HINT)
        return CURSOR_HOME + "\n".join(lines) + "\n"

    # ── Static rows (built once) ─────────────────────────────────
    def _build_static_rows(self) -> None:
        wall = self.glyphs["wall"]
        self._wall_row = wall * (self.config.board_width + 2)

    # ── Status ───────────────────────────────────────────────────
    def _status_line(self, model: GameModel) -> str:
        if model.paused:
            return f"Score: {model.score} - {PAUSED_HINT}{CLEAR_EOL}"
        return f"Score: {model.score}{CLEAR_EOL}"

    # ── Board ────────────────────────────────────────────────────
    def _board_rows(self, model: GameModel) -> List[str]:
        g = self.glyphs
        cells = self._occupancy(model)
        rows = [self._wall_row]
        for y in range(self.config.board_height):
            row = [g["wall"]]
            for x in range(self.config.board_width):
                row.append(cells.get(Point(x, y), g["empty"]))
            row.append(g["wall"])
            rows.append("".join(row))
        rows.append(self._wall_row)
        return rows

    def _occupancy(self, model: GameModel) -> Dict[Point, str]:
        """Glyph per occupied cell. Head beats body beats food."""
        g = self.glyphs
        cells = {model.food: g["food"]}
        body = model.snake.body
        for p in body[1:]:
            cells[p] = g["body"]
        if body:
            cells[body[0]] = g["head"]
        return cells
