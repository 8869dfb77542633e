"""
model.py - Model layer.

Owns ALL game state and rules. Zero rendering, zero input handling.
Exposes a clean API for the Controller to read/write.

Classes:
    Point       - (x, y) grid cell
    Direction   - immutable (dx, dy) value object
    Snake       - body in a preallocated buffer, heading, queued heading
    GameModel   - top-level model; owns the snake, food, score and state
"""

import logging
import random
from typing import List, NamedTuple, Optional

from .config import (
    Config,
    START_LENGTH, POINTS_PER_FOOD, FOOD_ATTEMPTS_MULT,
    MODE_GREEDY,
    STATE_RUNNING, STATE_PAUSED, STATE_OVER,
)

logger = logging.getLogger(__name__)


class Point(NamedTuple):
    x: int
    y: int


# ─────────────────────────── Direction ───────────────────────────
class Direction:
    """Immutable 2-D unit direction."""
    LEFT  = None  # filled below after class definition
    RIGHT = None
    UP    = None
    DOWN  = None

    def __init__(self, x: int, y: int, name: str = ""):
        self.x = x
        self.y = y
        self.name = name

    def is_opposite(self, other: "Direction") -> bool:
        return self.x == -other.x and self.y == -other.y

    def step(self, p: Point) -> Point:
        return Point(p.x + self.x, p.y + self.y)

    def __eq__(self, other):
        return isinstance(other, Direction) and self.x == other.x and self.y == other.y

    def __hash__(self):
        return hash((self.x, self.y))

    def __repr__(self):
        return f"Direction.{self.name}" if self.name else f"Direction({self.x}, {self.y})"


Direction.LEFT  = Direction(-1,  0, "LEFT")
Direction.RIGHT = Direction( 1,  0, "RIGHT")
Direction.UP    = Direction( 0, -1, "UP")
Direction.DOWN  = Direction( 0,  1, "DOWN")


# ──────────────────────────── Snake ──────────────────────────────
class Snake:
    """
    Body segments live in a buffer sized once to `capacity`; only the
    first `length` slots are part of the snake. Head is slot 0.

    `direction` is the heading of the last move, `next_direction` the
    latest accepted request, which the next move commits. Requests are
    checked against `next_direction`, so UP then DOWN within one tick
    keeps UP.
    """

    def __init__(self, head: Point, start_dir: Direction, capacity: int,
                 length: int = START_LENGTH):
        if length > capacity:
            raise ValueError(f"length {length} exceeds capacity {capacity}")
        self.capacity = capacity
        self._cells: List[Point] = [head] * capacity
        # Initial body trails straight behind the head.
        for i in range(length):
            self._cells[i] = Point(head.x - start_dir.x * i, head.y - start_dir.y * i)
        self.length = length
        self.direction = start_dir
        self.next_direction = start_dir

    @classmethod
    def from_body(cls, body: List[Point], direction: Direction,
                  capacity: int) -> "Snake":
        """Snake with an explicit body, head first."""
        snake = cls(Point(*body[0]), direction, capacity, length=len(body))
        for i, p in enumerate(body):
            snake._cells[i] = Point(*p)
        return snake

    # ── Accessors ────────────────────────────────────────────────
    @property
    def head(self) -> Point:
        return self._cells[0]

    @property
    def body(self) -> List[Point]:
        return self._cells[:self.length]

    @property
    def is_full(self) -> bool:
        return self.length >= self.capacity

    # ── Commands ─────────────────────────────────────────────────
    def request_direction(self, new_dir: Direction) -> bool:
        """Queue a direction change (ignored if it reverses the latest accepted one)."""
        if new_dir.is_opposite(self.next_direction):
            return False
        self.next_direction = new_dir
        return True

    def commit_direction(self) -> Direction:
        self.direction = self.next_direction
        return self.direction

    def advance(self, new_head: Point, grow: bool = False) -> None:
        """
        Shift every segment one slot toward the tail and put `new_head`
        in front. With `grow`, the vacated tail cell stays as the new last
        segment.
        """
        if grow and self.is_full:
            raise OverflowError("snake buffer is full")
        tail = self._cells[self.length - 1]
        for i in range(self.length - 1, 0, -1):
            self._cells[i] = self._cells[i - 1]
        self._cells[0] = new_head
        if grow:
            self._cells[self.length] = tail
            self.length += 1

    # ── Queries ──────────────────────────────────────────────────
    def occupies(self, p: Point) -> bool:
        return p in self._cells[:self.length]

    def hits_body(self, p: Point) -> bool:
        """True if `p` is on any segment but the head, tail included."""
        return p in self._cells[1:self.length]


# ─────────────────────────── GameModel ───────────────────────────
class GameModel:
    """
    Top-level model.  Owns all game state.
    The controller calls move() once per move tick.
    """

    def __init__(self, config: Config, rng: Optional[random.Random] = None):
        self.config = config
        self.rng = rng if rng is not None else random.Random(config.seed)
        self.state: str = STATE_RUNNING
        self.score: int = 0
        self.death_cause: Optional[str] = None

        w, h = config.board_width, config.board_height
        self.snake = Snake(
            Point(w // 2, h // 2),
            Direction.RIGHT,
            max(config.cells, START_LENGTH),
        )
        self.food = Point(0, 0)
        self.generate_food()

    # ── State ────────────────────────────────────────────────────
    @property
    def game_over(self) -> bool:
        return self.state == STATE_OVER

    @property
    def paused(self) -> bool:
        return self.state == STATE_PAUSED

    @property
    def running(self) -> bool:
        return self.state == STATE_RUNNING

    # ── Public API ───────────────────────────────────────────────
    def set_direction(self, direction: Direction) -> None:
        self.snake.request_direction(direction)

    def toggle_pause(self) -> None:
        if self.state == STATE_RUNNING:
            self.state = STATE_PAUSED
        elif self.state == STATE_PAUSED:
            self.state = STATE_RUNNING
        else:
            return
        logger.debug("paused=%s", self.paused)

    def quit(self) -> None:
        self._end("quit")

    def move(self) -> None:
        """Advance the snake one cell. No-op unless running."""
        if self.state != STATE_RUNNING:
            return

        snake = self.snake
        new_head = snake.commit_direction().step(snake.head)

        if self.config.wraparound:
            new_head = Point(new_head.x % self.config.board_width,
                             new_head.y % self.config.board_height)
        elif not self._in_bounds(new_head):
            self._end("wall")
            return

        if snake.hits_body(new_head):
            self._end("self")
            return

        ate_food = new_head == self.food

        if self.config.game_mode == MODE_GREEDY:
            if snake.is_full:
                self._end("full")
                return
            snake.advance(new_head, grow=True)
        else:
            snake.advance(new_head, grow=ate_food and not snake.is_full)

        if ate_food:
            self.score += POINTS_PER_FOOD
            logger.debug("food eaten at %s, score=%d length=%d",
                         new_head, self.score, snake.length)
            self.generate_food()

    def generate_food(self) -> bool:
        """
        Place food on a random free cell. Sampling is bounded; if no free
        cell turns up the board counts as full and the game ends.
        Returns True when food was placed.
        """
        w, h = self.config.board_width, self.config.board_height
        total = w * h
        if self.snake.length >= total:
            self._end("full")
            return False

        occupied = set(self.snake.body)
        for _ in range(total * FOOD_ATTEMPTS_MULT):
            candidate = Point(self.rng.randrange(w), self.rng.randrange(h))
            if candidate not in occupied:
                self.food = candidate
                return True

        self._end("full")
        return False

    # ── Private helpers ──────────────────────────────────────────
    def _in_bounds(self, p: Point) -> bool:
        return 0 <= p.x < self.config.board_width and 0 <= p.y < self.config.board_height

    def _end(self, cause: str) -> None:
        if self.state == STATE_OVER:
            return
        self.state = STATE_OVER
        self.death_cause = cause
        logger.info("game over (%s), score=%d length=%d",
                    cause, self.score, self.snake.length)
