"""Tests for the ``snake`` command"""
import pytest
from typer.testing import CliRunner

from snake_tui.terminal import TerminalError

from snake_game import cli
from snake_game.config import DEFAULT_CONFIG

runner = CliRunner()


@pytest.fixture
def fake_tty(monkeypatch):
    monkeypatch.setattr(cli, "_stdin_is_tty", lambda: True)


def _use_terminal(monkeypatch, terminal):
    monkeypatch.setattr(cli, "ProcessTerminal", lambda: terminal)


class TestCheckTerminal:
    def test_big_enough(self, make_terminal):
        assert cli.check_terminal(make_terminal(columns=101, rows=61), DEFAULT_CONFIG) is None

    def test_too_narrow(self, make_terminal):
        problem = cli.check_terminal(make_terminal(columns=100, rows=61), DEFAULT_CONFIG)
        assert problem == "Terminal too small: need at least 101x61, got 100x61"

    def test_too_short(self, make_terminal):
        assert cli.check_terminal(make_terminal(columns=200, rows=60), DEFAULT_CONFIG)


class TestPlayCommand:
    def test_needs_a_tty(self):
        result = runner.invoke(cli.app, [])
        assert result.exit_code == 1
        assert "interactive terminal" in result.output

    def test_quit_from_menu(self, monkeypatch, fake_tty, make_terminal):
        terminal = make_terminal("q")
        _use_terminal(monkeypatch, terminal)
        result = runner.invoke(cli.app, [])
        assert result.exit_code == 0
        assert "Final score: 0" in result.output
        assert terminal.starts == 1
        assert terminal.stops == 1

    def test_small_terminal_refused(self, monkeypatch, fake_tty, make_terminal):
        terminal = make_terminal("q", columns=80, rows=24)
        _use_terminal(monkeypatch, terminal)
        result = runner.invoke(cli.app, [])
        assert result.exit_code == 1
        assert "Terminal too small" in result.output
        assert terminal.starts == 0

    def test_terminal_error_reported(self, monkeypatch, fake_tty, make_terminal):
        class BrokenTerminal(make_terminal):
            def start(self):
                raise TerminalError("not a terminal")

        _use_terminal(monkeypatch, BrokenTerminal())
        result = runner.invoke(cli.app, [])
        assert result.exit_code == 1
        assert "not a terminal" in result.output
