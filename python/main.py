#!/usr/bin/env python3
"""15 Puzzle.

Usage::

    python main.py                          # interactive menu
    python main.py -f rich -r 3 -c 5        # Rich terminal, 3×5
    python main.py -f pyqt -m image         # PyQt GUI, picture tiles
    python main.py -f pygame -i photo.png   # Pygame GUI with a picture
"""

import dataclasses
import importlib
import logging
import sys
from enum import StrEnum
from pathlib import Path
from typing import Optional

import typer
from rich.logging import RichHandler

ROOT = Path(__file__).resolve().parent  # python/

if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from backend.models.board import DEFAULT_SIZE, MAX_SIZE, MIN_SIZE  # noqa: E402
from backend.models.display import DisplayConfig, Mode  # noqa: E402

logger = logging.getLogger("puzzle")


# -- frontend registry -------------------------------------------------------


class Frontend(StrEnum):
    rich = "rich"
    pygame = "pygame"
    pyqt = "pyqt"


_RUNNERS = {
    Frontend.rich: "frontend.cli.rich.app",
    Frontend.pygame: "frontend.gui.pygame.app",
    Frontend.pyqt: "frontend.gui.pyqt.app",
}

_GUI = {Frontend.pygame, Frontend.pyqt}


# -- helpers ------------------------------------------------------------------


def _setup_logging(level: str) -> None:
    logging.basicConfig(
        level=level.upper(),
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(rich_tracebacks=True, show_path=False)],
    )


def _launch(
    frontend: Frontend,
    rows: int,
    columns: int,
    display: DisplayConfig,
    image: Optional[Path],
    seed: Optional[int],
) -> None:
    mod = importlib.import_module(_RUNNERS[frontend])
    logger.debug("Launching %s frontend (%dx%d)", frontend, rows, columns)
    # each run gets its own copy; sessions write the chosen picture into it
    display = dataclasses.replace(display)
    if frontend in _GUI:
        mod.run(rows=rows, columns=columns, display=display, image=image, seed=seed)
    else:
        mod.run(rows=rows, columns=columns, seed=seed)


def _menu_loop(
    rows: int,
    columns: int,
    display: DisplayConfig,
    image: Optional[Path],
    seed: Optional[int],
) -> None:
    choices = {"1": Frontend.rich, "2": Frontend.pygame, "3": Frontend.pyqt}
    while True:
        print()
        print("  ====================================")
        print("          1 5   P U Z Z L E           ")
        print("  ====================================")
        print()
        print("  1.  Play  (Rich Terminal)")
        print("  2.  Play  (Pygame GUI)")
        print("  3.  Play  (PyQt GUI)")
        print("  0.  Quit")
        print()

        choice = input("  Select: ").strip()

        if choice == "0":
            print("\n  Goodbye!\n")
            return
        if choice in choices:
            _launch(choices[choice], rows, columns, display, image, seed)
        else:
            print("  Unknown option.")


# -- CLI entry point ----------------------------------------------------------

app = typer.Typer(add_completion=False)


@app.command()
def main(
    frontend: Optional[Frontend] = typer.Option(
        None, "-f", "--frontend",
        help="Frontend to launch. Omit for interactive menu.",
    ),
    rows: int = typer.Option(
        DEFAULT_SIZE, "-r", "--rows",
        min=MIN_SIZE, max=MAX_SIZE,
        help=f"Grid rows ({MIN_SIZE}-{MAX_SIZE}).",
    ),
    columns: int = typer.Option(
        DEFAULT_SIZE, "-c", "--columns",
        min=MIN_SIZE, max=MAX_SIZE,
        help=f"Grid columns ({MIN_SIZE}-{MAX_SIZE}).",
    ),
    mode: Mode = typer.Option(
        Mode.NORMAL, "-m", "--mode",
        help="Numbered tiles or picture tiles (GUI frontends).",
    ),
    image: Optional[Path] = typer.Option(
        None, "-i", "--image",
        exists=True, dir_okay=False, readable=True,
        help="Picture for image mode (GUI frontends).",
    ),
    assist: bool = typer.Option(
        False, "--assist",
        help="Print tile numbers over the picture.",
    ),
    seed: Optional[int] = typer.Option(
        None, "--seed",
        help="Seed the shuffle for reproducible boards.",
    ),
    log_level: str = typer.Option(
        "WARNING", "--log-level",
        help="Logging level (DEBUG, INFO, WARNING, ...).",
    ),
) -> None:
    """15 Puzzle."""
    _setup_logging(log_level)
    display = DisplayConfig(
        mode=Mode.IMAGE if image is not None else mode,
        assist=assist,
    )

    if frontend is None:
        _menu_loop(rows, columns, display, image, seed)
        return

    _launch(frontend, rows, columns, display, image, seed)


if __name__ == "__main__":
    app()
