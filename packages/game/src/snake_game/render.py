"""
Frame composition.

``compose_frame()`` turns the current session into the ordered draw commands
for one frame. Every frame starts the same way (clear, hide cursor, score
line, arena border) and then adds what the active state shows.
Composition is pure: it never touches the session.
"""
from __future__ import annotations

from snake_tui.commands import ClearScreen, DrawCommand, HideCursor, MoveTo, Print, SetStyle

from .geometry import Arena
from .state import GameSession, GameState

MENU_LINES: tuple[str, ...] = (
    "Welcome to snake in the terminal",
    "h/j/k/l or arrow keys to move",
    "SPACE to start game",
    "q to quit",
)

# Offset of the menu / game-over text block from the arena's top-left corner.
TEXT_OFFSET = 10


def render_border(arena: Arena) -> list[DrawCommand]:
    """Hollow reverse-video rectangle on the arena's edge cells."""
    run = " " * arena.width
    commands: list[DrawCommand] = [
        MoveTo(col=arena.left, row=arena.top),
        Print(text=run, style="reverse"),
        MoveTo(col=arena.left, row=arena.bottom),
        Print(text=run, style="reverse"),
    ]
    for row in range(arena.top, arena.bottom + 1):
        commands += [
            MoveTo(col=arena.left, row=row),
            Print(text=" ", style="reverse"),
            MoveTo(col=arena.right, row=row),
            Print(text=" ", style="reverse"),
        ]
    commands.append(SetStyle(style="plain"))
    return commands


def render_text_block(arena: Arena, lines: tuple[str, ...] | list[str]) -> list[DrawCommand]:
    col = arena.left + TEXT_OFFSET
    row = arena.top + TEXT_OFFSET
    commands: list[DrawCommand] = []
    for i, line in enumerate(lines):
        commands += [MoveTo(col=col, row=row + i), Print(text=line)]
    return commands


def render_header(session: GameSession) -> list[DrawCommand]:
    arena = session.arena
    return [
        ClearScreen(),
        HideCursor(),
        MoveTo(col=arena.left, row=arena.top - 1),
        Print(text=f"Score: {session.score}"),
    ]


def render_menu(session: GameSession) -> list[DrawCommand]:
    return render_text_block(session.arena, MENU_LINES)


def render_play(session: GameSession) -> list[DrawCommand]:
    config = session.config
    commands: list[DrawCommand] = []
    for cell in session.snake.body:
        commands += [MoveTo(col=cell.x, row=cell.y), Print(text=config.snake_glyph)]
    food = session.food
    commands += [MoveTo(col=food.x, row=food.y), Print(text=config.food_glyph)]
    return commands


def render_game_over(session: GameSession) -> list[DrawCommand]:
    return render_text_block(
        session.arena,
        [f"Game over! Score: {session.score}", "Play again? Y/N"],
    )


_STATE_RENDERERS = {
    GameState.MENU: render_menu,
    GameState.PLAY: render_play,
    GameState.GAME_OVER: render_game_over,
}


def compose_frame(session: GameSession) -> list[DrawCommand]:
    """All draw commands for the current frame, in paint order."""
    return (
        render_header(session)
        + render_border(session.arena)
        + _STATE_RENDERERS[session.state](session)
    )
