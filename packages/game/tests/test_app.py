"""Tests for snake_game.app — the game loop"""
import random

import pytest

from snake_tui.frame_buffer import SYNC_BEGIN, SYNC_END, FrameBuffer
from snake_tui.terminal import TerminalError

from snake_game.app import run, run_iteration
from snake_game.engine import new_session
from snake_game.geometry import Point
from snake_game.input_source import KeyboardInput
from snake_game.state import GameState


class _FarCorner(random.Random):
    """Always places food in the bottom-right interior cell."""

    def choice(self, seq):
        return seq[-1]


class TestRunIteration:
    def _parts(self, terminal, config=None):
        session = new_session(config)
        return session, FrameBuffer(terminal), KeyboardInput(terminal)

    def test_quit_stops_the_loop(self, make_terminal):
        terminal = make_terminal("q")
        session, frame, keyboard = self._parts(terminal)
        assert run_iteration(session, frame, keyboard) is False

    def test_timeout_keeps_going(self, make_terminal):
        terminal = make_terminal(None)
        session, frame, keyboard = self._parts(terminal)
        assert run_iteration(session, frame, keyboard) is True
        assert session.state is GameState.MENU

    def test_one_write_per_iteration(self, make_terminal):
        terminal = make_terminal(None)
        session, frame, keyboard = self._parts(terminal)
        run_iteration(session, frame, keyboard)
        assert len(terminal.writes) == 1
        assert terminal.writes[0].startswith(SYNC_BEGIN)
        assert terminal.writes[0].endswith(SYNC_END)
        assert "Welcome to snake in the terminal" in terminal.writes[0]

    def test_frame_drawn_before_input_applied(self, make_terminal, small_config):
        terminal = make_terminal(" ")
        session, frame, keyboard = self._parts(terminal, small_config)
        run_iteration(session, frame, keyboard)
        # the frame shows the menu; the start key is applied after it
        assert "Welcome to snake in the terminal" in terminal.writes[0]
        assert session.state is GameState.PLAY
        assert session.snake.head == Point(5, 5)


class TestRun:
    def test_start_play_quit(self, make_terminal, small_config):
        terminal = make_terminal(" ", None, "q")
        session = run(terminal, small_config, random.Random(3))
        assert terminal.starts == 1
        assert terminal.stops == 1
        assert not terminal.started
        assert len(terminal.writes) == 3
        assert session.state is GameState.PLAY
        assert session.ticks == 2
        assert session.snake.head == Point(3, 5)
        assert session.score == 0

    def test_quit_from_menu(self, make_terminal):
        terminal = make_terminal("q")
        session = run(terminal)
        assert session.state is GameState.MENU
        assert session.ticks == 0
        assert terminal.stops == 1

    def test_game_over_and_restart(self, make_terminal, small_config):
        # start, then four quiet ticks; the fifth tick runs into the left wall
        terminal = make_terminal(" ", None, None, None, None, "y", "q")
        session = run(terminal, small_config, _FarCorner())
        assert "Game over! Score: 1" in terminal.writes[5]
        assert session.rounds == 2
        assert session.state is GameState.PLAY
        assert session.ticks == 6
        assert len(session.snake) == 3
        assert session.score == 0
        assert session.food == Point(8, 9)

    def test_terminal_stopped_when_loop_raises(self, make_terminal):
        terminal = make_terminal("k")
        with pytest.raises(RuntimeError, match="exhausted"):
            run(terminal)
        assert terminal.starts == 1
        assert terminal.stops == 1
        assert not terminal.started

    def test_terminal_error_propagates_after_cleanup(self, make_terminal):
        class BrokenTerminal(make_terminal):
            def read(self, timeout_ms):
                raise TerminalError("stdin closed")

        terminal = BrokenTerminal()
        with pytest.raises(TerminalError):
            run(terminal)
        assert terminal.stops == 1
