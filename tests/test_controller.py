"""
Tests for termsnake.controller - the game loop, driven by a fake terminal
and a scripted clock.
"""

import itertools

import pytest

from termsnake.config import ACTION_PAUSE, ACTION_QUIT, Config, CURSOR_HOME, EXIT_PROMPT
from termsnake.controller import GameController
from termsnake.model import Direction, Point

from conftest import FakeTerminal

MOVE_US = 166_666     # 6 moves per second
RENDER_US = 33_333    # 30 frames per second


def make_controller(terminal, clock=None, **kwargs):
    config = Config(board_width=10, board_height=10, seed=5, **kwargs)
    controller = GameController(
        config, terminal,
        clock=clock or itertools.count(0, 10_000).__next__,
        sleep=lambda seconds: None,
    )
    controller.model.food = Point(0, 0)
    return controller


class TestTick:
    """Tests for a single loop iteration."""

    def test_no_move_before_first_interval(self, terminal):
        controller = make_controller(terminal)
        controller.tick(MOVE_US - 1)
        assert controller.model.snake.head == Point(5, 5)

    def test_move_when_due(self, terminal):
        controller = make_controller(terminal)
        controller.tick(MOVE_US)
        assert controller.model.snake.head == Point(6, 5)
        controller.tick(MOVE_US + 1)
        assert controller.model.snake.head == Point(6, 5)
        controller.tick(2 * MOVE_US)
        assert controller.model.snake.head == Point(7, 5)

    def test_render_when_due(self, terminal):
        controller = make_controller(terminal)
        controller.tick(RENDER_US - 1)
        assert terminal.output == []
        controller.tick(RENDER_US)
        assert len(terminal.output) == 1
        assert terminal.output[0].startswith(CURSOR_HOME)

    def test_paused_game_does_not_move(self, terminal):
        controller = make_controller(terminal)
        controller.model.toggle_pause()
        controller.tick(MOVE_US * 3)
        assert controller.model.snake.head == Point(5, 5)
        assert controller.move_timer.last_us == 0

    def test_keystroke_queues_direction(self):
        terminal = FakeTerminal(keys=["\x1b[B"])
        controller = make_controller(terminal)
        controller.tick(MOVE_US)
        assert controller.model.snake.head == Point(5, 6)

    def test_quit_key_ends_game(self):
        terminal = FakeTerminal(keys=["q"])
        controller = make_controller(terminal)
        controller.tick(1)
        assert controller.model.game_over
        assert controller.model.death_cause == "quit"


class TestDispatch:
    """Tests for routing decoded actions to the model."""

    def test_direction(self, terminal):
        controller = make_controller(terminal)
        controller.dispatch(Direction.UP)
        assert controller.model.snake.next_direction == Direction.UP

    def test_pause_toggles(self, terminal):
        controller = make_controller(terminal)
        controller.dispatch(ACTION_PAUSE)
        assert controller.model.paused
        controller.dispatch(ACTION_PAUSE)
        assert not controller.model.paused

    def test_quit(self, terminal):
        controller = make_controller(terminal)
        controller.dispatch(ACTION_QUIT)
        assert controller.model.game_over


class TestRun:
    """Tests for the full loop."""

    def test_runs_until_wall(self, terminal):
        controller = make_controller(terminal)
        score = controller.run()
        assert controller.model.game_over
        assert controller.model.death_cause == "wall"
        assert score == controller.model.score == 0
        assert terminal.events == ["enter", "exit", "clear", "wait"]
        assert terminal.text.endswith(f"Game Over! Final Score: 0\n{EXIT_PROMPT}")

    def test_quit_then_final_screen(self):
        terminal = FakeTerminal(keys=[None, None, "Q"])
        controller = make_controller(terminal)
        controller.run()
        assert controller.model.death_cause == "quit"
        assert terminal.events[-2:] == ["clear", "wait"]

    def test_pause_stops_snake_in_loop(self):
        """Paused right away then quit: the snake never moved."""
        terminal = FakeTerminal(keys=[" "] + [None] * 50 + ["q"])
        controller = make_controller(terminal)
        controller.run()
        assert controller.model.snake.head == Point(5, 5)

    def test_session_closed_on_error(self, terminal):
        def broken_clock():
            raise RuntimeError("clock failure")

        controller = make_controller(terminal, clock=broken_clock)
        with pytest.raises(RuntimeError):
            controller.run()
        assert terminal.events == ["enter", "exit"]
        assert not terminal.in_session

    def test_sleeps_between_iterations(self):
        terminal = FakeTerminal(keys=[None, None, "q"])
        sleeps = []
        config = Config(board_width=10, board_height=10, seed=5)
        controller = GameController(config, terminal,
                                    clock=itertools.count(0, 1).__next__,
                                    sleep=sleeps.append)
        controller.run()
        assert sleeps == [0.001, 0.001, 0.001]
