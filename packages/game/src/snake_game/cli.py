"""
CLI entry point — ``snake``.
"""
from __future__ import annotations

import sys

import typer
from rich.console import Console

from snake_tui.terminal import ProcessTerminal, Terminal, TerminalError

from .app import run
from .config import APP_NAME, DEFAULT_CONFIG, GameConfig

app = typer.Typer(
    name=APP_NAME,
    help="Snake in the terminal.",
    add_completion=False,
)

console = Console()
err_console = Console(stderr=True)


def _stdin_is_tty() -> bool:
    try:
        return sys.stdin.isatty()
    except (AttributeError, ValueError):
        return False


def check_terminal(terminal: Terminal, config: GameConfig) -> str | None:
    """Return why the game cannot be shown on *terminal*, or None if it can."""
    if terminal.columns < config.min_columns or terminal.rows < config.min_rows:
        return (
            f"Terminal too small: need at least {config.min_columns}x{config.min_rows}, "
            f"got {terminal.columns}x{terminal.rows}"
        )
    return None


@app.command()
def play() -> None:
    """Steer the snake, eat the food, avoid the walls and yourself."""
    config = DEFAULT_CONFIG

    if not _stdin_is_tty():
        err_console.print("[red]snake needs an interactive terminal[/red]")
        raise typer.Exit(1)

    terminal = ProcessTerminal()
    problem = check_terminal(terminal, config)
    if problem:
        err_console.print(f"[red]{problem}[/red]")
        raise typer.Exit(1)

    try:
        session = run(terminal, config)
    except TerminalError as e:
        err_console.print(f"[red]Terminal error:[/red] {e}")
        raise typer.Exit(1)

    console.print(f"Final score: [bold]{session.score}[/bold]")


def main() -> None:
    """Main CLI entrypoint."""
    app()


if __name__ == "__main__":
    main()
