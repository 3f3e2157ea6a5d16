"""Pygame GUI frontend — fully self-contained.

Click a tile to slide its whole row or column segment toward the blank;
arrows / WASD slide single tiles. Supports numbered tiles and picture
tiles (``--image``), with an assist overlay that prints the numbers on
top of the picture.
"""

from __future__ import annotations

import enum
import logging
import random
from pathlib import Path

import pygame

from backend.engine.gameclock import PolledTicker
from backend.engine.gameplay import GamePlay
from backend.models.board import BLANK, DEFAULT_SIZE, MAX_SIZE, MIN_SIZE, Direction
from backend.models.display import DisplayConfig, Mode
from frontend.gui.slicing import fit_size, tile_source_rect

logger = logging.getLogger(__name__)

# ---------------------------------------------------------------------------
# Catppuccin Mocha palette
# ---------------------------------------------------------------------------
COL_BASE = (30, 30, 46)
COL_MANTLE = (24, 24, 37)
COL_SURFACE0 = (49, 50, 68)
COL_SURFACE1 = (69, 71, 90)
COL_OVERLAY0 = (108, 112, 134)
COL_TEXT = (205, 214, 244)
COL_SUBTEXT = (166, 173, 200)
COL_BLUE = (137, 180, 250)
COL_LAVENDER = (180, 190, 254)
COL_GREEN = (166, 227, 161)
COL_PINK = (245, 194, 231)
COL_YELLOW = (249, 226, 175)
COL_RED = (243, 139, 168)

# ---------------------------------------------------------------------------
# Layout
# ---------------------------------------------------------------------------
WIN_W, WIN_H = 560, 680
TILE_GAP = 4
MARGIN = 20
BOARD_TOP = 76
BOARD_MAX_W = WIN_W - 2 * MARGIN
BOARD_MAX_H = 440


class _Screen(enum.Enum):
    MENU = "menu"
    PLAYING = "playing"
    RANKINGS = "rankings"


# ---------------------------------------------------------------------------
# Simple clickable button
# ---------------------------------------------------------------------------
class _Btn:
    __slots__ = ("rect", "text", "font", "bg", "hover", "fg", "radius", "_hot")

    def __init__(
        self,
        rect: tuple[int, int, int, int],
        text: str,
        font: pygame.font.Font,
        *,
        bg: tuple = COL_SURFACE0,
        hover: tuple = COL_SURFACE1,
        fg: tuple = COL_TEXT,
        radius: int = 8,
    ) -> None:
        self.rect = pygame.Rect(rect)
        self.text = text
        self.font = font
        self.bg = bg
        self.hover = hover
        self.fg = fg
        self.radius = radius
        self._hot = False

    def draw(self, surf: pygame.Surface) -> None:
        c = self.hover if self._hot else self.bg
        pygame.draw.rect(surf, c, self.rect, border_radius=self.radius)
        lbl = self.font.render(self.text, True, self.fg)
        surf.blit(
            lbl,
            (
                self.rect.centerx - lbl.get_width() // 2,
                self.rect.centery - lbl.get_height() // 2,
            ),
        )

    def motion(self, pos: tuple[int, int]) -> None:
        self._hot = self.rect.collidepoint(pos)

    def hit(self, pos: tuple[int, int]) -> bool:
        return self.rect.collidepoint(pos)


def _cx(w: int) -> int:
    return (WIN_W - w) // 2


def _blit_center(surf: pygame.Surface, rendered: pygame.Surface, y: int) -> None:
    surf.blit(rendered, (_cx(rendered.get_width()), y))


def _fmt(seconds: int) -> str:
    m, s = divmod(seconds, 60)
    return f"{m:02d}:{s:02d}"


# ---------------------------------------------------------------------------
# Main application
# ---------------------------------------------------------------------------
class PygameApp:
    def __init__(
        self,
        rows: int,
        columns: int,
        display: DisplayConfig,
        image_path: Path | None = None,
        seed: int | None = None,
    ) -> None:
        pygame.init()
        self._surf = pygame.display.set_mode((WIN_W, WIN_H))
        pygame.display.set_caption("15 Puzzle")
        self._clock = pygame.time.Clock()

        self._f_big = pygame.font.SysFont("Helvetica", 38, bold=True)
        self._f_title = pygame.font.SysFont("Helvetica", 22, bold=True)
        self._f_body = pygame.font.SysFont("Helvetica", 16)
        self._f_btn = pygame.font.SysFont("Helvetica", 17, bold=True)
        self._f_btn_sm = pygame.font.SysFont("Helvetica", 14, bold=True)
        self._f_small = pygame.font.SysFont("Helvetica", 13)

        self._ticker = PolledTicker()
        self._game = GamePlay(
            rows,
            columns,
            rng=random.Random(seed),
            ticker=self._ticker,
            display=display,
        )
        self._sel_rows = rows
        self._sel_cols = columns
        self._tile_images: dict[int, pygame.Surface] = {}
        self._ref_image: pygame.Surface | None = None
        self._screen = _Screen.MENU
        self._status_msg = ""
        self._image_path = image_path

        if image_path is not None:
            self._load_image(image_path)

        self._build_menu_btns()
        self._build_game_btns()
        self._build_rank_btns()

    # ── buttons ─────────────────────────────────────────────────────────────

    def _build_menu_btns(self) -> None:
        sw = 44
        self._rows_dec = _Btn((_cx(200) - 10, 250, sw, 40), "−", self._f_btn)
        self._rows_inc = _Btn((_cx(200) + 166, 250, sw, 40), "+", self._f_btn)
        self._cols_dec = _Btn((_cx(200) - 10, 304, sw, 40), "−", self._f_btn)
        self._cols_inc = _Btn((_cx(200) + 166, 304, sw, 40), "+", self._f_btn)

        bw_lg = 220
        self._play_btn = _Btn(
            (_cx(bw_lg), 380, bw_lg, 50),
            "P L A Y",
            self._f_btn,
            bg=COL_BLUE,
            hover=COL_LAVENDER,
            fg=COL_BASE,
        )
        self._rank_btn = _Btn(
            (_cx(bw_lg), 444, bw_lg, 42), "RANKINGS", self._f_btn_sm
        )
        self._quit_btn = _Btn(
            (_cx(bw_lg), 500, bw_lg, 42),
            "Q U I T",
            self._f_btn_sm,
            bg=COL_RED,
            hover=(255, 170, 185),
            fg=COL_BASE,
        )
        self._menu_all: list[_Btn] = [
            self._rows_dec,
            self._rows_inc,
            self._cols_dec,
            self._cols_inc,
            self._play_btn,
            self._rank_btn,
            self._quit_btn,
        ]

    def _build_game_btns(self) -> None:
        bw, gap = 118, 10
        sx = _cx(3 * bw + 2 * gap)
        self._new_btn = _Btn(
            (sx, 0, bw, 36), "NEW (N)", self._f_btn_sm,
            bg=COL_BLUE, hover=COL_LAVENDER, fg=COL_BASE,
        )
        self._reset_btn = _Btn(
            (sx + bw + gap, 0, bw, 36), "RESET (X)", self._f_btn_sm,
            bg=COL_PINK, hover=(245, 210, 227), fg=COL_BASE,
        )
        self._assist_btn = _Btn(
            (sx + 2 * (bw + gap), 0, bw, 36), "ASSIST (H)", self._f_btn_sm,
            bg=COL_YELLOW, hover=(255, 240, 200), fg=COL_BASE,
        )
        self._game_action_btns = [self._new_btn, self._reset_btn, self._assist_btn]

    def _build_rank_btns(self) -> None:
        self._rank_back = _Btn(
            (_cx(180), WIN_H - 64, 180, 46), "B A C K", self._f_btn_sm
        )

    # ── layout ──────────────────────────────────────────────────────────────

    def _tile_layout(self) -> tuple[int, int, int, int, int]:
        """Return (tile_w, tile_h, origin_x, origin_y, total_w) for the board."""
        rows, cols = self._game.rows, self._game.columns
        image = self._game.display.image
        if self._game.display.mode is Mode.IMAGE and image is not None:
            # keep the picture's proportions across the whole board
            bw, bh = fit_size(*image.get_size(), BOARD_MAX_W, BOARD_MAX_H)
            tile_w = (bw - (cols + 1) * TILE_GAP) // cols
            tile_h = (bh - (rows + 1) * TILE_GAP) // rows
        else:
            side = min(
                (BOARD_MAX_W - (cols + 1) * TILE_GAP) // cols,
                (BOARD_MAX_H - (rows + 1) * TILE_GAP) // rows,
            )
            tile_w = tile_h = side
        total_w = cols * tile_w + (cols + 1) * TILE_GAP
        return tile_w, tile_h, _cx(total_w) + TILE_GAP, BOARD_TOP + TILE_GAP, total_w

    def _tile_rect(self, r: int, c: int) -> pygame.Rect:
        tw, th, ox, oy, _ = self._tile_layout()
        return pygame.Rect(ox + c * (tw + TILE_GAP), oy + r * (th + TILE_GAP), tw, th)

    def _board_height(self) -> int:
        _, th, _, _, _ = self._tile_layout()
        return self._game.rows * th + (self._game.rows + 1) * TILE_GAP

    # ── picture tiles ───────────────────────────────────────────────────────

    _REF_SIZE = 64

    def _load_image(self, path: Path) -> None:
        try:
            image = pygame.image.load(str(path)).convert()
        except (pygame.error, FileNotFoundError) as exc:
            logger.warning("Could not load image %s: %s", path, exc)
            self._status_msg = f"Could not load {path.name}"
            return
        self._game.set_image(image, *image.get_size())
        self._sel_rows, self._sel_cols = self._game.rows, self._game.columns
        self._prepare_tile_images()

    def _prepare_tile_images(self) -> None:
        """Slice the current picture into per-tile surfaces."""
        self._tile_images = {}
        self._ref_image = None
        image = self._game.display.image
        if self._game.display.mode is not Mode.IMAGE or image is None:
            return

        rows, cols = self._game.rows, self._game.columns
        tw, th, _, _, _ = self._tile_layout()
        full = pygame.transform.smoothscale(image, (cols * tw, rows * th))
        self._ref_image = pygame.transform.smoothscale(
            image, fit_size(*image.get_size(), self._REF_SIZE, self._REF_SIZE)
        )
        self._f_badge = pygame.font.SysFont("Helvetica", max(10, th // 5), bold=True)

        for val in range(1, rows * cols):
            rect = tile_source_rect(val, rows, cols, *full.get_size())
            self._tile_images[val] = full.subsurface(pygame.Rect(rect)).copy()

    # ── drawing ─────────────────────────────────────────────────────────────

    def _draw_menu(self) -> None:
        self._surf.fill(COL_BASE)
        _blit_center(self._surf, self._f_big.render("1 5   P U Z Z L E", True, COL_TEXT), 80)
        _blit_center(
            self._surf,
            self._f_body.render(
                f"Board shape ({MIN_SIZE}-{MAX_SIZE})", True, COL_SUBTEXT
            ),
            200,
        )
        for label, value, y in (
            ("Rows", self._sel_rows, 250),
            ("Columns", self._sel_cols, 304),
        ):
            txt = self._f_title.render(f"{label}: {value}", True, COL_TEXT)
            self._surf.blit(txt, (_cx(txt.get_width()) + 10, y + 8))

        for b in self._menu_all:
            b.draw(self._surf)

        mode = self._game.display.mode
        _blit_center(
            self._surf,
            self._f_small.render(
                f"Mode: {mode}   (I  toggle image mode)", True, COL_OVERLAY0
            ),
            WIN_H - 60,
        )

    def _draw_tile(self, r: int, c: int, val: int, f_tile: pygame.font.Font) -> None:
        game = self._game
        board = game.board
        rect = self._tile_rect(r, c)
        if val in self._tile_images:
            self._surf.blit(self._tile_images[val], rect.topleft)
            if game.display.assist:
                num_lbl = self._f_badge.render(str(val), True, (255, 255, 255))
                badge = pygame.Surface(
                    (num_lbl.get_width() + 8, num_lbl.get_height() + 4), pygame.SRCALPHA
                )
                badge.fill((0, 0, 0, 150))
                badge.blit(num_lbl, (4, 2))
                self._surf.blit(badge, (rect.x + 2, rect.y + 2))
                pygame.draw.rect(self._surf, (0, 0, 0), rect, width=1)
            return

        col = COL_GREEN if board.is_tile_correct(r, c) else COL_BLUE
        pygame.draw.rect(self._surf, col, rect, border_radius=6)
        if game.display.show_numbers:
            lbl = f_tile.render(str(val), True, COL_BASE)
            self._surf.blit(
                lbl,
                (rect.centerx - lbl.get_width() // 2, rect.centery - lbl.get_height() // 2),
            )

    def _draw_game(self) -> None:
        self._surf.fill(COL_BASE)
        game = self._game
        board = game.board
        tw, th, _, _, total_w = self._tile_layout()
        total_h = self._board_height()
        f_tile = pygame.font.SysFont("Helvetica", max(14, min(tw, th) // 3), bold=True)

        _blit_center(
            self._surf,
            self._f_title.render(
                f"15 Puzzle  {game.rows}×{game.columns}", True, COL_TEXT
            ),
            14,
        )
        _blit_center(
            self._surf,
            self._f_body.render(
                f"Moves: {game.moves}    Time: {_fmt(game.time)}", True, COL_PINK
            ),
            44,
        )

        pygame.draw.rect(
            self._surf,
            COL_MANTLE,
            pygame.Rect(_cx(total_w), BOARD_TOP, total_w, total_h),
            border_radius=10,
        )
        if game.display.awaiting_image:
            _blit_center(
                self._surf,
                self._f_body.render(
                    "Press L to load the picture" if self._image_path
                    else "Start with --image PATH to play",
                    True,
                    COL_SUBTEXT,
                ),
                BOARD_TOP + total_h // 2,
            )
        else:
            for r in range(board.rows):
                for c in range(board.columns):
                    val = board.tiles[r][c]
                    if val != BLANK:
                        self._draw_tile(r, c, val, f_tile)

        if self._ref_image is not None:
            rx = WIN_W - self._ref_image.get_width() - MARGIN
            self._surf.blit(self._ref_image, (rx, 8))

        btn_y = BOARD_TOP + total_h + 12
        for btn in self._game_action_btns:
            btn.rect.y = btn_y
            btn.draw(self._surf)

        footer_y = btn_y + 48
        if game.cleared:
            _blit_center(
                self._surf,
                self._f_title.render("★  CLEARED!  ★", True, COL_GREEN),
                footer_y,
            )
            footer_y += 32
        elif self._status_msg:
            _blit_center(
                self._surf,
                self._f_small.render(self._status_msg, True, COL_YELLOW),
                footer_y,
            )
            footer_y += 22

        _blit_center(
            self._surf,
            self._f_small.render(
                "Click  slide line     WASD / Arrows  slide tile     M  menu",
                True,
                COL_OVERLAY0,
            ),
            footer_y,
        )

    def _draw_rankings(self) -> None:
        self._surf.fill(COL_BASE)
        _blit_center(self._surf, self._f_big.render("RANKINGS", True, COL_TEXT), 24)
        entries = self._game.rankings
        y = 96
        if not entries:
            _blit_center(
                self._surf,
                self._f_body.render("No cleared games yet.", True, COL_OVERLAY0),
                y + 30,
            )
        for rank, e in enumerate(entries, 1):
            row = f"{rank:>2}.   {e.rows}×{e.columns}   {e.moves} moves   {e.time}s"
            self._surf.blit(self._f_body.render(row, True, COL_SUBTEXT), (80, y))
            y += 24
            if y > WIN_H - 100:
                break
        self._rank_back.draw(self._surf)

    # ── event handling ──────────────────────────────────────────────────────

    def _ev_menu(self, ev: pygame.event.Event) -> bool:
        if ev.type == pygame.MOUSEMOTION:
            for b in self._menu_all:
                b.motion(ev.pos)
        elif ev.type == pygame.MOUSEBUTTONDOWN and ev.button == 1:
            if self._rows_dec.hit(ev.pos):
                self._sel_rows = max(MIN_SIZE, self._sel_rows - 1)
            elif self._rows_inc.hit(ev.pos):
                self._sel_rows = min(MAX_SIZE, self._sel_rows + 1)
            elif self._cols_dec.hit(ev.pos):
                self._sel_cols = max(MIN_SIZE, self._sel_cols - 1)
            elif self._cols_inc.hit(ev.pos):
                self._sel_cols = min(MAX_SIZE, self._sel_cols + 1)
            elif self._play_btn.hit(ev.pos):
                self._start_game()
            elif self._rank_btn.hit(ev.pos):
                self._screen = _Screen.RANKINGS
            elif self._quit_btn.hit(ev.pos):
                return False
        elif ev.type == pygame.KEYDOWN:
            if ev.key == pygame.K_RETURN:
                self._start_game()
            elif ev.key == pygame.K_i:
                self._toggle_mode()
            elif ev.key in (pygame.K_q, pygame.K_ESCAPE):
                return False
        return True

    def _ev_game(self, ev: pygame.event.Event) -> bool:
        game = self._game
        if ev.type == pygame.MOUSEMOTION:
            for btn in self._game_action_btns:
                btn.motion(ev.pos)
        elif ev.type == pygame.MOUSEBUTTONDOWN and ev.button == 1:
            if self._new_btn.hit(ev.pos):
                self._new_game()
            elif self._reset_btn.hit(ev.pos):
                self._reset()
            elif self._assist_btn.hit(ev.pos):
                game.set_assist(not game.display.assist)
            else:
                for r in range(game.rows):
                    for c in range(game.columns):
                        if self._tile_rect(r, c).collidepoint(ev.pos):
                            game.move_tile(r, c)
                            self._status_msg = ""
                            return True
        elif ev.type == pygame.KEYDOWN:
            _dirs = {
                pygame.K_UP: Direction.UP,
                pygame.K_w: Direction.UP,
                pygame.K_DOWN: Direction.DOWN,
                pygame.K_s: Direction.DOWN,
                pygame.K_LEFT: Direction.LEFT,
                pygame.K_a: Direction.LEFT,
                pygame.K_RIGHT: Direction.RIGHT,
                pygame.K_d: Direction.RIGHT,
            }
            if ev.key in _dirs:
                game.move(_dirs[ev.key])
                self._status_msg = ""
            elif ev.key == pygame.K_n:
                self._new_game()
            elif ev.key == pygame.K_x:
                self._reset()
            elif ev.key == pygame.K_h:
                game.set_assist(not game.display.assist)
            elif ev.key == pygame.K_l and self._image_path is not None:
                self._load_image(self._image_path)
            elif ev.key in (pygame.K_m, pygame.K_ESCAPE):
                self._game.new_game()
                self._screen = _Screen.MENU
        return True

    def _ev_rankings(self, ev: pygame.event.Event) -> bool:
        if ev.type == pygame.MOUSEMOTION:
            self._rank_back.motion(ev.pos)
        elif ev.type == pygame.MOUSEBUTTONDOWN and ev.button == 1:
            if self._rank_back.hit(ev.pos):
                self._screen = _Screen.MENU
        elif ev.type == pygame.KEYDOWN:
            if ev.key in (pygame.K_ESCAPE, pygame.K_BACKSPACE, pygame.K_m):
                self._screen = _Screen.MENU
        return True

    # ── session actions ─────────────────────────────────────────────────────

    def _start_game(self) -> None:
        game = self._game
        if (self._sel_rows, self._sel_cols) != (game.rows, game.columns):
            game.resize(self._sel_rows, self._sel_cols)
        else:
            game.new_game()
        self._prepare_tile_images()
        self._status_msg = ""
        self._screen = _Screen.PLAYING

    def _new_game(self) -> None:
        self._game.new_game()
        self._status_msg = ""

    def _reset(self) -> None:
        self._game.reset()
        self._sel_rows = self._sel_cols = DEFAULT_SIZE
        self._prepare_tile_images()
        self._status_msg = ""

    def _toggle_mode(self) -> None:
        mode = Mode.NORMAL if self._game.display.mode is Mode.IMAGE else Mode.IMAGE
        self._game.set_mode(mode)
        self._sel_rows = self._sel_cols = DEFAULT_SIZE
        if mode is Mode.IMAGE and self._image_path is not None:
            self._load_image(self._image_path)
        self._prepare_tile_images()

    # ── main loop ───────────────────────────────────────────────────────────

    def run_loop(self) -> None:
        _dispatch = {
            _Screen.MENU: self._ev_menu,
            _Screen.PLAYING: self._ev_game,
            _Screen.RANKINGS: self._ev_rankings,
        }
        _draw = {
            _Screen.MENU: self._draw_menu,
            _Screen.PLAYING: self._draw_game,
            _Screen.RANKINGS: self._draw_rankings,
        }

        running = True
        while running:
            for ev in pygame.event.get():
                if ev.type == pygame.QUIT:
                    running = False
                    break
                handler = _dispatch.get(self._screen)
                if handler and not handler(ev):
                    running = False
                    break

            # ticks are dispatched on the same loop as the moves above
            self._ticker.poll()

            drawer = _draw.get(self._screen)
            if drawer:
                drawer()
            pygame.display.flip()
            self._clock.tick(30)

        self._ticker.stop()
        pygame.quit()


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
    """Launch the Pygame GUI (opens directly to the menu)."""
    app = PygameApp(rows, columns, display or DisplayConfig(), image, seed)
    app.run_loop()
