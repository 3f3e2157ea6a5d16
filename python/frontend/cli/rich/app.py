"""Rich terminal frontend built on styled tables and panels.

Uses the ``rich`` library for styled output. Arrow keys move a selection
cursor and Enter slides the whole line between the cursor and the blank;
WASD slides the single tile next to the blank. Includes a menu for the
board shape and a ranking view for the current session.
"""

from __future__ import annotations

import random
import sys

import rich.box
from rich.align import Align
from rich.console import Console, Group
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from backend.engine.gameclock import PolledTicker
from backend.engine.gameplay import GamePlay
from backend.engine.gamemoves import MoveEngine
from backend.models.board import (
    BLANK,
    DEFAULT_SIZE,
    MAX_SIZE,
    MIN_SIZE,
    Board,
    Direction,
    Position,
)
from backend.models.ranking import RankingEntry
from frontend.cli.input_handler import get_key, get_key_timeout

console = Console()

_POLL_SECONDS = 0.25

_SLIDE_KEYS = {
    "up": Direction.UP,
    "down": Direction.DOWN,
    "left": Direction.LEFT,
    "right": Direction.RIGHT,
}

_CURSOR_KEYS = {
    "cursor_up": (-1, 0),
    "cursor_down": (1, 0),
    "cursor_left": (0, -1),
    "cursor_right": (0, 1),
}


# -- helpers ------------------------------------------------------------------


def _format_time(seconds: int) -> str:
    m, s = divmod(seconds, 60)
    return f"{m:02d}:{s:02d}"


def _step_cursor(board: Board, cursor: Position, key: str) -> Position:
    dr, dc = _CURSOR_KEYS[key]
    r = min(max(cursor[0] + dr, 0), board.rows - 1)
    c = min(max(cursor[1] + dc, 0), board.columns - 1)
    return (r, c)


# -- board rendering ----------------------------------------------------------


def _render_board(board: Board, cursor: Position | None = None) -> Table:
    """Return a Rich Table representing the puzzle grid."""
    width = len(str(board.cell_count - 1))
    table = Table(
        show_header=False,
        show_edge=True,
        pad_edge=True,
        box=rich.box.HEAVY,
        border_style="bright_blue",
        padding=(0, 1),
    )
    for _ in range(board.columns):
        table.add_column(width=width + 1, justify="center")

    legal = set(MoveEngine.line_targets(board)) if cursor else set()
    for r, row in enumerate(board.tiles):
        cells: list[str] = []
        for c, val in enumerate(row):
            text = "·" if val == BLANK else f"{val:>{width}}"
            if (r, c) == cursor:
                style = "bold black on cyan" if (r, c) in legal else "bold black on red"
            elif val == BLANK:
                style = "dim"
            elif board.is_tile_correct(r, c):
                style = "bold green"
            else:
                style = "bold white"
            cells.append(f"[{style}]{text}[/{style}]")
        table.add_row(*cells)

    return table


def _render_rankings(entries: tuple[RankingEntry, ...]) -> Table:
    table = Table(
        box=rich.box.ROUNDED,
        border_style="dim",
        title="Rankings",
        title_style="bold cyan",
    )
    table.add_column("#", justify="right", style="dim", width=3)
    table.add_column("Grid", justify="center", style="dim")
    table.add_column("Moves", justify="right", style="yellow")
    table.add_column("Time", justify="right", style="yellow")
    for rank, e in enumerate(entries, 1):
        table.add_row(
            str(rank), f"{e.rows}×{e.columns}", str(e.moves), f"{e.time}s"
        )
    return table


# -- menu screen --------------------------------------------------------------


def _draw_menu(rows: int, columns: int) -> None:
    console.clear()

    shape = Text()
    shape.append("Rows ", style="dim")
    shape.append(f" {rows} ", style="bold green on #313244")
    shape.append("   Columns ", style="dim")
    shape.append(f" {columns} ", style="bold green on #313244")

    nav = Text(
        f"↑ ↓  rows    ← →  columns    ({MIN_SIZE}-{MAX_SIZE})",
        style="dim",
    )

    opts = Text()
    opts.append("  Enter", style="bold cyan")
    opts.append("  Play    ")
    opts.append("K", style="bold yellow")
    opts.append("  Rankings    ")
    opts.append("Q", style="dim bold")
    opts.append("  Quit", style="dim")

    body = Group(
        Text(""),
        Align.center(shape),
        Align.center(nav),
        Text(""),
        Align.center(opts),
        Text(""),
    )

    panel = Panel(
        body,
        title="[bold]1 5   P U Z Z L E[/bold]",
        border_style="bright_blue",
        padding=(1, 4),
    )

    console.print()
    console.print(Align.center(panel))


# -- game screens -------------------------------------------------------------


def _stats_text(game: GamePlay) -> Text:
    stats = Text()
    stats.append("  Moves: ", style="dim")
    stats.append(str(game.moves), style="bold yellow")
    stats.append("    Time: ", style="dim")
    stats.append(_format_time(game.time), style="bold yellow")
    return stats


def _draw_game(game: GamePlay, cursor: Position, status: str = "") -> None:
    console.clear()

    controls = Text()
    controls.append("  ↑↓←→", style="bold cyan")
    controls.append(" select  ", style="dim")
    controls.append("Enter", style="bold cyan")
    controls.append(" slide line  ", style="dim")
    controls.append("WASD", style="bold cyan")
    controls.append(" slide tile  ", style="dim")
    controls.append("N", style="bold cyan")
    controls.append(" new  ", style="dim")
    controls.append("X", style="bold cyan")
    controls.append(" reset  ", style="dim")
    controls.append("Q", style="bold cyan")
    controls.append(" back", style="dim")

    panel = Panel(
        Align.center(_render_board(game.board, cursor)),
        title=(
            f"[bold cyan]15 Puzzle  {game.rows}×{game.columns}[/bold cyan]"
        ),
        border_style="bright_blue",
        padding=(1, 2),
    )

    console.print()
    console.print(Align.center(panel))
    # Save the cursor position right before the stats line so
    # _update_time() can come back and overwrite only this line.
    sys.stdout.write("\033[s")
    sys.stdout.flush()
    console.print(Align.center(_stats_text(game)))
    if status:
        console.print(Align.center(Text.from_markup(f"  {status}")))
    console.print(Align.center(controls))


def _update_time(game: GamePlay) -> None:
    """Repaint just the stats line from the saved cursor position."""
    _DIM = "\033[2m"
    _YB = "\033[33;1m"
    _RS = "\033[0m"

    clock = _format_time(game.time)
    stats_raw = (
        f"{_DIM}Moves: {_RS}{_YB}{game.moves}{_RS}"
        f"    {_DIM}Time: {_RS}{_YB}{clock}{_RS}"
    )
    visible_len = len(f"Moves: {game.moves}    Time: {clock}")
    pad = max(0, (console.width - visible_len) // 2)

    sys.stdout.write(f"\033[u\033[K{' ' * pad}{stats_raw}")
    sys.stdout.flush()


def _draw_win(game: GamePlay) -> None:
    console.clear()

    congrats = Text()
    congrats.append("\n  ★ ", style="bold yellow")
    congrats.append("CLEARED!", style="bold green")
    congrats.append("  Congratulations!  ", style="green")
    congrats.append("★\n", style="bold yellow")

    group = Group(
        Align.center(_render_board(game.board)),
        Align.center(congrats),
        Align.center(_stats_text(game)),
        Text(""),
        Align.center(_render_rankings(game.rankings)),
    )

    panel = Panel(
        group,
        title=(
            f"[bold green]15 Puzzle  {game.rows}×{game.columns}[/bold green]"
        ),
        border_style="bold green",
        padding=(1, 2),
    )

    console.print()
    console.print(Align.center(panel))
    console.print(
        Align.center(
            Text("\n  N  new game    X  reset    Q  back\n", style="dim")
        )
    )


def _draw_rankings(game: GamePlay) -> None:
    console.clear()
    if game.rankings:
        body: Table | Text = _render_rankings(game.rankings)
    else:
        body = Text("No cleared games yet.", style="dim")
    panel = Panel(
        Align.center(body),
        title="[bold]R A N K I N G S[/bold]",
        border_style="bright_blue",
        padding=(1, 2),
    )
    console.print()
    console.print(Align.center(panel))
    console.print(Align.center(Text("\n  Press any key to go back.\n", style="dim")))
    get_key()


# -- game loop ----------------------------------------------------------------


def _wait_for_key(game: GamePlay, ticker: PolledTicker) -> str:
    """Wait for a keypress, repainting the clock whenever a second passes."""
    while True:
        key = get_key_timeout(_POLL_SECONDS)
        if ticker.poll():
            _update_time(game)
        if key is not None:
            return key


def _play_game(game: GamePlay, ticker: PolledTicker) -> None:
    cursor = game.board.blank_pos
    status = ""

    while True:
        if game.cleared:
            _draw_win(game)
            key = get_key()
        else:
            _draw_game(game, cursor, status)
            status = ""
            key = _wait_for_key(game, ticker)

        if key == "quit":
            game.new_game()
            return
        if key == "new":
            game.new_game()
            cursor = game.board.blank_pos
        elif key == "reset":
            game.reset()
            cursor = game.board.blank_pos
        elif game.cleared:
            continue
        elif key in _CURSOR_KEYS:
            cursor = _step_cursor(game.board, cursor, key)
        elif key == "select":
            if not game.apply_move(cursor):
                status = "[red]Pick a tile in the blank's row or column.[/red]"
        elif key in _SLIDE_KEYS:
            game.move(_SLIDE_KEYS[key])


# -- menu loop ----------------------------------------------------------------


def _menu_loop(game: GamePlay, ticker: PolledTicker) -> None:
    rows, columns = game.rows, game.columns

    while True:
        _draw_menu(rows, columns)
        key = get_key()

        if key == "quit":
            console.clear()
            console.print(Align.center(Text("\nGoodbye!\n", style="bold cyan")))
            return
        elif key == "cursor_up":
            rows = min(MAX_SIZE, rows + 1)
        elif key == "cursor_down":
            rows = max(MIN_SIZE, rows - 1)
        elif key == "cursor_right":
            columns = min(MAX_SIZE, columns + 1)
        elif key == "cursor_left":
            columns = max(MIN_SIZE, columns - 1)
        elif key == "select":
            if (rows, columns) != (game.rows, game.columns):
                game.resize(rows, columns)
            _play_game(game, ticker)
            rows, columns = game.rows, game.columns
        elif key == "rankings":
            _draw_rankings(game)


# -- public entry point -------------------------------------------------------


def run(
    rows: int = DEFAULT_SIZE,
    columns: int = DEFAULT_SIZE,
    seed: int | None = None,
) -> None:
    """Launch the Rich CLI with interactive menu."""
    ticker = PolledTicker()
    game = GamePlay(rows, columns, rng=random.Random(seed), ticker=ticker)
    _menu_loop(game, ticker)
