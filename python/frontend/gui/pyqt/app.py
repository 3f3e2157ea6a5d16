"""PyQt6 GUI frontend — fully self-contained.

One window: mode switch, board shape, picture chooser, the puzzle grid,
live stats, completion message, and the session ranking table. Ticks come
from a ``QTimer`` on the same event loop as the clicks.
"""

from __future__ import annotations

import logging
import random
import sys
from collections.abc import Callable
from pathlib import Path

from PyQt6.QtCore import QSize, Qt, QTimer
from PyQt6.QtGui import QFont, QIcon, QKeyEvent, QPixmap
from PyQt6.QtWidgets import (
    QApplication,
    QCheckBox,
    QFileDialog,
    QFrame,
    QGridLayout,
    QHBoxLayout,
    QHeaderView,
    QLabel,
    QMainWindow,
    QPushButton,
    QSpinBox,
    QTableWidget,
    QTableWidgetItem,
    QVBoxLayout,
    QWidget,
)

from backend.engine.gameplay import GamePlay
from backend.models.board import BLANK, DEFAULT_SIZE, MAX_SIZE, MIN_SIZE, Direction
from backend.models.display import DisplayConfig, Mode
from frontend.gui.slicing import fit_size, tile_source_rect

logger = logging.getLogger(__name__)

# ---------------------------------------------------------------------------
# Catppuccin Mocha CSS colours
# ---------------------------------------------------------------------------
_BASE = "#1e1e2e"
_MANTLE = "#181825"
_SURFACE0 = "#313244"
_SURFACE1 = "#45475a"
_OVERLAY0 = "#6c7086"
_TEXT = "#cdd6f4"
_SUBTEXT = "#a6adc8"
_BLUE = "#89b4fa"
_BLUE_H = "#a4c4fc"
_GREEN = "#a6e3a1"
_GREEN_H = "#b8ecb4"
_PINK = "#f5c2e7"
_YELLOW = "#f9e2af"
_RED = "#f38ba8"
_RED_H = "#f5a0b8"
_LAVENDER = "#b4befe"

_GLOBAL_CSS = f"""
    QMainWindow, QWidget#page {{ background: {_BASE}; }}
    QLabel, QCheckBox {{ color: {_TEXT}; }}
    QSpinBox {{ background: {_SURFACE0}; color: {_TEXT}; padding: 4px; }}
    QTableWidget {{ background: {_MANTLE}; color: {_SUBTEXT}; border: none; }}
    QHeaderView::section {{ background: {_SURFACE0}; color: {_TEXT}; border: none; }}
"""

_BOARD_PX = 420
_TICK_MS = 1000


def _styled_btn(
    text: str,
    *,
    bg: str = _SURFACE0,
    hover: str = _SURFACE1,
    fg: str = _TEXT,
    font_size: int = 13,
    min_w: int = 0,
    min_h: int = 38,
) -> QPushButton:
    btn = QPushButton(text)
    btn.setFont(QFont("Helvetica", font_size, QFont.Weight.Bold))
    btn.setMinimumHeight(min_h)
    if min_w:
        btn.setMinimumWidth(min_w)
    btn.setFocusPolicy(Qt.FocusPolicy.NoFocus)
    btn.setCursor(Qt.CursorShape.PointingHandCursor)
    btn.setStyleSheet(
        f"QPushButton {{ background:{bg}; color:{fg};"
        f" border:none; border-radius:8px; padding:6px 14px; }}"
        f" QPushButton:hover {{ background:{hover}; }}"
    )
    return btn


def _fmt(secs: int) -> str:
    m, s = divmod(secs, 60)
    return f"{m:02d}:{s:02d}"


# ---------------------------------------------------------------------------
# Tick source
# ---------------------------------------------------------------------------
class _QtTicker:
    """Repeating one-second tick on the Qt event loop."""

    def __init__(self, parent: QWidget) -> None:
        self._timer = QTimer(parent)
        self._timer.setInterval(_TICK_MS)
        self._callback: Callable[[], None] | None = None
        self._timer.timeout.connect(self._fire)

    @property
    def active(self) -> bool:
        return self._timer.isActive()

    def start(self, callback: Callable[[], None]) -> None:
        self._callback = callback
        self._timer.start()

    def stop(self) -> None:
        self._timer.stop()
        self._callback = None

    def _fire(self) -> None:
        if self._callback is not None:
            self._callback()


# ---------------------------------------------------------------------------
# Main window
# ---------------------------------------------------------------------------
class _MainWindow(QMainWindow):
    def __init__(
        self,
        rows: int,
        columns: int,
        display: DisplayConfig,
        image: Path | None,
        seed: int | None,
    ) -> None:
        super().__init__()
        self.setWindowTitle("15 Puzzle")
        self.setStyleSheet(_GLOBAL_CSS)
        self.setMinimumSize(560, 820)

        self._ticker = _QtTicker(self)
        self.game = GamePlay(
            rows,
            columns,
            rng=random.Random(seed),
            ticker=self._ticker,
            display=display,
        )
        self._pixmap: QPixmap | None = None
        self._btns: list[list[QPushButton]] = []

        page = QWidget()
        page.setObjectName("page")
        self.setCentralWidget(page)
        root = QVBoxLayout(page)
        root.setSpacing(8)
        root.setContentsMargins(16, 12, 16, 12)

        title = QLabel("15 Puzzle Game")
        title.setFont(QFont("Helvetica", 22, QFont.Weight.Bold))
        title.setAlignment(Qt.AlignmentFlag.AlignCenter)
        root.addWidget(title)

        root.addLayout(self._build_mode_row())
        root.addLayout(self._build_controls_row())

        # board
        self._frame = QFrame()
        self._frame.setStyleSheet(f"background:{_MANTLE}; border-radius:10px;")
        self._grid = QGridLayout(self._frame)
        self._grid.setSpacing(3)
        self._grid.setContentsMargins(8, 8, 8, 8)
        root.addWidget(self._frame, alignment=Qt.AlignmentFlag.AlignCenter)

        # stats
        self._stats = QLabel()
        self._stats.setFont(QFont("Helvetica", 13))
        self._stats.setStyleSheet(f"color:{_PINK};")
        self._stats.setAlignment(Qt.AlignmentFlag.AlignCenter)
        root.addWidget(self._stats)

        self._message = QLabel()
        self._message.setFont(QFont("Helvetica", 15, QFont.Weight.Bold))
        self._message.setAlignment(Qt.AlignmentFlag.AlignCenter)
        root.addWidget(self._message)

        # rankings
        ranking_title = QLabel("Rankings")
        ranking_title.setFont(QFont("Helvetica", 14, QFont.Weight.Bold))
        root.addWidget(ranking_title)
        self._table = QTableWidget(0, 3)
        self._table.setHorizontalHeaderLabels(["Rank", "Moves", "Time"])
        self._table.verticalHeader().setVisible(False)
        self._table.horizontalHeader().setSectionResizeMode(
            QHeaderView.ResizeMode.Stretch
        )
        self._table.setEditTriggers(QTableWidget.EditTrigger.NoEditTriggers)
        self._table.setMaximumHeight(160)
        root.addWidget(self._table)

        self._stats_timer = QTimer(self)
        self._stats_timer.timeout.connect(self._refresh_stats)
        self._stats_timer.start(200)

        if image is not None:
            self._load_image(str(image))
        self._rebuild_board()

    # -- layout builders ---

    def _build_mode_row(self) -> QHBoxLayout:
        row = QHBoxLayout()
        row.setAlignment(Qt.AlignmentFlag.AlignCenter)
        self._normal_btn = _styled_btn("Normal mode", min_w=150)
        self._image_btn = _styled_btn("Image mode", min_w=150)
        self._normal_btn.clicked.connect(lambda: self._set_mode(Mode.NORMAL))
        self._image_btn.clicked.connect(lambda: self._set_mode(Mode.IMAGE))
        row.addWidget(self._normal_btn)
        row.addWidget(self._image_btn)
        return row

    def _build_controls_row(self) -> QHBoxLayout:
        row = QHBoxLayout()
        row.setAlignment(Qt.AlignmentFlag.AlignCenter)
        row.setSpacing(8)

        self._rows_lbl = QLabel("Rows:")
        self._rows_spin = QSpinBox()
        self._cols_lbl = QLabel("Columns:")
        self._cols_spin = QSpinBox()
        for spin in (self._rows_spin, self._cols_spin):
            spin.setRange(MIN_SIZE, MAX_SIZE)
            spin.valueChanged.connect(self._on_shape_changed)
        for w in (self._rows_lbl, self._rows_spin, self._cols_lbl, self._cols_spin):
            row.addWidget(w)

        new_btn = _styled_btn("New game", bg=_BLUE, hover=_LAVENDER, fg=_BASE)
        new_btn.clicked.connect(self._new_game)
        row.addWidget(new_btn)

        reset_btn = _styled_btn("Reset", bg=_RED, hover=_RED_H, fg=_BASE)
        reset_btn.clicked.connect(self._reset)
        row.addWidget(reset_btn)

        self._choose_btn = _styled_btn("Change image", bg=_YELLOW, hover=_GREEN_H, fg=_BASE)
        self._choose_btn.clicked.connect(self._choose_image)
        row.addWidget(self._choose_btn)

        self._assist_box = QCheckBox("Assist")
        self._assist_box.setFocusPolicy(Qt.FocusPolicy.NoFocus)
        self._assist_box.toggled.connect(self._on_assist)
        row.addWidget(self._assist_box)
        return row

    # -- picture ---

    def _choose_image(self) -> None:
        path, _ = QFileDialog.getOpenFileName(
            self, "Choose a picture", "", "Images (*.png *.jpg *.jpeg *.bmp *.gif)"
        )
        if path:
            self._load_image(path)
            self._rebuild_board()

    def _load_image(self, path: str) -> None:
        pixmap = QPixmap(path)
        if pixmap.isNull():
            logger.warning("Could not load image %s", path)
            self._message.setText(f"Could not load {Path(path).name}")
            self._message.setStyleSheet(f"color:{_RED};")
            return
        self._pixmap = pixmap
        self.game.set_image(path, pixmap.width(), pixmap.height())

    def _tile_pixmaps(self, tile_w: int, tile_h: int) -> dict[int, QPixmap]:
        game = self.game
        if game.display.mode is not Mode.IMAGE or self._pixmap is None:
            return {}
        rows, cols = game.rows, game.columns
        full = self._pixmap.scaled(
            cols * tile_w,
            rows * tile_h,
            Qt.AspectRatioMode.IgnoreAspectRatio,
            Qt.TransformationMode.SmoothTransformation,
        )
        return {
            val: full.copy(*tile_source_rect(val, rows, cols, full.width(), full.height()))
            for val in range(1, rows * cols)
        }

    # -- board ---

    def _tile_size(self) -> tuple[int, int]:
        rows, cols = self.game.rows, self.game.columns
        if self.game.display.mode is Mode.IMAGE and self._pixmap is not None:
            bw, bh = fit_size(self._pixmap.width(), self._pixmap.height(), _BOARD_PX, _BOARD_PX)
            return max(24, bw // cols), max(24, bh // rows)
        side = max(32, min(84, _BOARD_PX // max(rows, cols)))
        return side, side

    def _rebuild_board(self) -> None:
        """Recreate the tile buttons for the current board shape."""
        for row in self._btns:
            for b in row:
                self._grid.removeWidget(b)
                b.deleteLater()
        self._btns = []

        tile_w, tile_h = self._tile_size()
        f_sz = max(10, min(tile_w, tile_h) // 3)
        for r in range(self.game.rows):
            row: list[QPushButton] = []
            for c in range(self.game.columns):
                b = QPushButton()
                b.setFixedSize(tile_w, tile_h)
                b.setIconSize(QSize(tile_w, tile_h))
                b.setFont(QFont("Helvetica", f_sz, QFont.Weight.Bold))
                b.setFocusPolicy(Qt.FocusPolicy.NoFocus)
                b.clicked.connect(lambda _, rr=r, cc=c: self._click(rr, cc))
                self._grid.addWidget(b, r, c)
                row.append(b)
            self._btns.append(row)
        self._pixmaps = self._tile_pixmaps(tile_w, tile_h)
        self._sync()

    def _sync(self) -> None:
        game = self.game
        board = game.board
        display = game.display
        image_mode = display.mode is Mode.IMAGE

        for spin, value in ((self._rows_spin, game.rows), (self._cols_spin, game.columns)):
            spin.blockSignals(True)
            spin.setValue(value)
            spin.blockSignals(False)
        for w in (self._rows_lbl, self._rows_spin, self._cols_lbl, self._cols_spin):
            w.setVisible(not image_mode)
        self._choose_btn.setVisible(image_mode)
        self._assist_box.setVisible(image_mode)
        self._mark_mode_buttons()

        for r in range(board.rows):
            for c in range(board.columns):
                self._paint_tile(self._btns[r][c], board.tiles[r][c], board.is_tile_correct(r, c))

        if game.cleared:
            self._message.setText("Cleared! Congratulations!")
            self._message.setStyleSheet(f"color:{_GREEN};")
        elif display.awaiting_image:
            self._message.setText("Choose a picture to start.")
            self._message.setStyleSheet(f"color:{_SUBTEXT};")
        else:
            self._message.setText("")
        self._refresh_rankings()
        self._refresh_stats()

    def _paint_tile(self, b: QPushButton, val: int, correct: bool) -> None:
        display = self.game.display
        if val == BLANK or display.awaiting_image:
            b.setText("")
            b.setIcon(QIcon())
            b.setStyleSheet(
                f"QPushButton{{background:{_MANTLE};border:none;border-radius:6px;}}"
            )
            return

        b.setText(str(val) if display.show_numbers else "")
        pixmap = self._pixmaps.get(val)
        if pixmap is not None:
            b.setIcon(QIcon(pixmap))
            border = "1px solid #000" if display.assist else "none"
            b.setStyleSheet(
                f"QPushButton{{background:{_MANTLE};color:#fff;border:{border};"
                f"font-weight:bold;}}"
            )
            return

        b.setIcon(QIcon())
        bg, hv = (_GREEN, _GREEN_H) if correct else (_BLUE, _BLUE_H)
        b.setStyleSheet(
            f"QPushButton{{background:{bg};color:{_BASE};"
            f"border:none;border-radius:6px;font-weight:bold;}}"
            f"QPushButton:hover{{background:{hv};}}"
        )

    def _mark_mode_buttons(self) -> None:
        for btn, mode in ((self._normal_btn, Mode.NORMAL), (self._image_btn, Mode.IMAGE)):
            active = self.game.display.mode is mode
            bg, fg = (_GREEN, _BASE) if active else (_SURFACE0, _TEXT)
            btn.setStyleSheet(
                f"QPushButton {{ background:{bg}; color:{fg};"
                f" border:none; border-radius:8px; padding:6px 14px; }}"
            )

    def _refresh_stats(self) -> None:
        self._stats.setText(
            f"Moves: {self.game.moves}    Time: {_fmt(self.game.time)}"
        )

    def _refresh_rankings(self) -> None:
        entries = self.game.rankings
        self._table.setRowCount(len(entries))
        for i, e in enumerate(entries):
            for j, text in enumerate((str(i + 1), str(e.moves), f"{e.time}s")):
                item = QTableWidgetItem(text)
                item.setTextAlignment(Qt.AlignmentFlag.AlignCenter)
                self._table.setItem(i, j, item)

    # -- actions ---

    def _click(self, r: int, c: int) -> None:
        if self.game.apply_move((r, c)):
            self._sync()

    def move(self, d: Direction) -> None:
        if self.game.move(d):
            self._sync()

    def _new_game(self) -> None:
        self.game.new_game()
        self._sync()

    def _reset(self) -> None:
        self.game.reset()
        self._pixmap = None
        self._rebuild_board()

    def _set_mode(self, mode: Mode) -> None:
        self.game.set_mode(mode)
        self._pixmap = None
        self._rebuild_board()

    def _on_shape_changed(self, _value: int) -> None:
        self.game.resize(self._rows_spin.value(), self._cols_spin.value())
        self._rebuild_board()

    def _on_assist(self, checked: bool) -> None:
        self.game.set_assist(checked)
        self._sync()

    # -- keyboard ---

    def keyPressEvent(self, event: QKeyEvent | None) -> None:  # noqa: N802
        if event is None:
            return
        key = event.key()
        _dirs = {
            Qt.Key.Key_Up: Direction.UP,
            Qt.Key.Key_W: Direction.UP,
            Qt.Key.Key_Down: Direction.DOWN,
            Qt.Key.Key_S: Direction.DOWN,
            Qt.Key.Key_Left: Direction.LEFT,
            Qt.Key.Key_A: Direction.LEFT,
            Qt.Key.Key_Right: Direction.RIGHT,
            Qt.Key.Key_D: Direction.RIGHT,
        }
        if key in _dirs:
            self.move(_dirs[key])
        elif key == Qt.Key.Key_N:
            self._new_game()
        elif key in (Qt.Key.Key_Q, Qt.Key.Key_Escape):
            self.close()
        else:
            super().keyPressEvent(event)

    def closeEvent(self, event) -> None:  # noqa: N802
        self._ticker.stop()
        super().closeEvent(event)


# ---------------------------------------------------------------------------
# Public entry point
# ---------------------------------------------------------------------------
def run(
    rows: int = DEFAULT_SIZE,
    columns: int = DEFAULT_SIZE,
    display: DisplayConfig | None = None,
    image: Path | None = None,
    seed: int | None = None,
) -> None:
    """Launch the PyQt6 GUI."""
    qapp = QApplication.instance() or QApplication(sys.argv)
    window = _MainWindow(rows, columns, display or DisplayConfig(), image, seed)
    window.show()
    qapp.exec()
