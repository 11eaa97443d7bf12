
"""
Rendering helpers for the Tetris project.

- Pre-render block cell Surfaces per color (solid, ghost outline, cleared-row highlight).
- Pre-render static background (grid + panel frames) once per Dims.
- Cache HUD text surfaces; re-render only when values change.
- Cache a BOARD SURFACE with all *locked* blocks; rebuild it only when the well changes.
"""
from __future__ import annotations
import pygame
from dataclasses import dataclass
from typing import Dict, Tuple, List, Optional
from tetris_layout import Dims, VISIBLE_ROWS
from tetris_config import WELL_WIDTH, HIDDEN_ROWS
from tetris_piece import TETRIS, Piece

# RGB per color value stored in the well
COLORS: Dict[int, Tuple[int,int,int]] = {
    1: (255,224,102),   # O
    2: (94,224,142),    # S
    3: (255,102,119),   # Z
    4: (102,224,255),   # I
    5: (255,158,94),    # L
    6: (200,119,255),   # T
    7: (106,119,255),   # J
}
HIGHLIGHT = (245,245,245)
TEXT = (200,210,240)
TITLE_COLORS = [(255,102,119), (200,119,255), (106,119,255), (94,224,142), (255,158,94), (102,224,255)]

@dataclass
class HudCache:
    score: int = -1
    level: int = -1
    preview: str = ""
    score_s: Optional[pygame.Surface] = None
    level_s: Optional[pygame.Surface] = None
    preview_s: Optional[pygame.Surface] = None

class RenderAssets:
    """Holds all pre-rendered assets for fast blitting."""
    def __init__(self, dims: Dims, font: pygame.font.Font, big_font: pygame.font.Font):
        self.dims = dims
        self.font = font
        self.big_font = big_font
        self._make_static()
        self._make_cells()
        self.hud = HudCache()
        # Board surface cache (only locked blocks)
        self.board_surface = pygame.Surface((dims.board_w, dims.board_h), pygame.SRCALPHA)

    # ---------- Static background (grid + panels) ----------
    def _make_static(self):
        d = self.dims
        self.bg = pygame.Surface((d.total_w, d.total_h))
        self.bg.fill((10,13,34))
        grid_col = (40,50,90)
        for x in range(WELL_WIDTH+1):
            X = d.board_x + x*d.cell
            pygame.draw.line(self.bg, grid_col, (X, d.board_y), (X, d.board_y + d.board_h))
        for y in range(VISIBLE_ROWS+1):
            Y = d.board_y + y*d.cell
            pygame.draw.line(self.bg, grid_col, (d.board_x, Y), (d.board_x + d.board_w, Y))
        for x, w in ((d.info_x, d.info_w), (d.panel_x, d.panel_w)):
            rect = pygame.Rect(x, d.panel_y, w, d.board_h)
            pygame.draw.rect(self.bg, (21,25,53), rect)
            pygame.draw.rect(self.bg, (50,60,100), rect, 1)
        # Preview frame
        self.pv_cell = max(14, int(d.cell*0.75))
        self.pv_x = d.panel_x + 12
        self.pv_y = d.panel_y + 40
        frame = pygame.Rect(self.pv_x-6, self.pv_y-6, self.pv_cell*4+12, self.pv_cell*4+12)
        pygame.draw.rect(self.bg, (15,18,40), frame)
        pygame.draw.rect(self.bg, (55,65,110), frame, 1)

    # ---------- Small cell sprites ----------
    def _make_cells(self):
        self.cell_surf: Dict[int, pygame.Surface] = {}
        self.ghost_surf: Dict[int, pygame.Surface] = {}
        c = self.dims.cell
        for v, col in COLORS.items():
            s = pygame.Surface((c-2, c-2))
            s.fill(col)
            self.cell_surf[v] = s
            g = pygame.Surface((c-8, c-8), pygame.SRCALPHA)
            pygame.draw.rect(g, col, (0,0,c-8,c-8), 2)
            self.ghost_surf[v] = g
        self.highlight_surf = pygame.Surface((c-2, c-2))
        self.highlight_surf.fill(HIGHLIGHT)

    def mini_shape(self, kind: str, cell: int) -> pygame.Surface:
        """A kind in spawn rotation, drawn into a 4x4 box of `cell` sized blocks."""
        s = pygame.Surface((cell*4, cell*4), pygame.SRCALPHA)
        for y, row in enumerate(TETRIS[kind][0]):
            for x, v in enumerate(row):
                if v:
                    block = pygame.Surface((cell-2, cell-2))
                    block.fill(COLORS[v])
                    s.blit(block, (x*cell+1, y*cell+1))
        return s

    # ---------- Board surface cache ----------
    def rebuild_board_surface(self, board: List[List[int]], cleared_rows: List[int]):
        """Rebuilds the locked-blocks surface; rows awaiting compaction are drawn white."""
        self.board_surface.fill((0,0,0,0))
        c = self.dims.cell
        for y in range(HIDDEN_ROWS, len(board)):
            for x, v in enumerate(board[y]):
                if v:
                    surf = self.highlight_surf if y in cleared_rows else self.cell_surf[v]
                    self.board_surface.blit(surf, (x*c + 1, (y-HIDDEN_ROWS)*c + 1))

    # ---------- Per-cell helpers for moving/ghost piece ----------
    def draw_cell(self, screen: pygame.Surface, v: int, bx: int, by: int):
        if by < HIDDEN_ROWS: return
        rx = self.dims.board_x + bx*self.dims.cell + 1
        ry = self.dims.board_y + (by-HIDDEN_ROWS)*self.dims.cell + 1
        screen.blit(self.cell_surf[v], (rx, ry))

    def draw_ghost_cell(self, screen: pygame.Surface, v: int, bx: int, by: int):
        if by < HIDDEN_ROWS: return
        rx = self.dims.board_x + bx*self.dims.cell + 4
        ry = self.dims.board_y + (by-HIDDEN_ROWS)*self.dims.cell + 4
        screen.blit(self.ghost_surf[v], (rx, ry))

    def draw_piece(self, screen: pygame.Surface, piece: Piece, ghost_y: Optional[int] = None):
        if ghost_y is not None:
            for x, y, v in piece.cells():
                self.draw_ghost_cell(screen, v, x, y - piece.y + ghost_y)
        for x, y, v in piece.cells():
            self.draw_cell(screen, v, x, y)

    # ---------- Title (shown on pause) ----------
    def draw_title(self, screen: pygame.Surface):
        d = self.dims
        w = d.cell * 2
        x0 = d.board_x + (d.board_w - w*6)//2
        y0 = d.board_y + d.board_h//2 - w//2
        for i, (ch, col) in enumerate(zip("TETRIS", TITLE_COLORS)):
            box = pygame.Rect(x0 + i*w, y0, w, w)
            pygame.draw.rect(screen, col, box)
            t = self.big_font.render(ch, True, (230,230,230))
            screen.blit(t, t.get_rect(center=box.center))

    # ---------- HUD / Panel ----------
    def draw_panel_hud(self, screen: pygame.Surface, score: int, level: int, preview: str):
        d = self.dims
        f = self.font
        if score != self.hud.score:
            self.hud.score = score
            self.hud.score_s = f.render(f"Score: {score}", True, TEXT)
        if level != self.hud.level:
            self.hud.level = level
            self.hud.level_s = f.render(f"Level: {level}", True, TEXT)
        if preview != self.hud.preview:
            self.hud.preview = preview
            self.hud.preview_s = self.mini_shape(preview, self.pv_cell)
        screen.blit(f.render("Next:", True, TEXT), (d.panel_x + 12, d.panel_y + 12))
        screen.blit(self.hud.preview_s, (self.pv_x, self.pv_y))
        y = self.pv_y + self.pv_cell*4 + 24
        screen.blit(self.hud.score_s, (d.panel_x + 12, y))
        screen.blit(self.hud.level_s, (d.panel_x + 12, y + 24))

    def draw_banner(self, screen: pygame.Surface, text: str, dy: int = 0):
        d = self.dims
        msg = self.big_font.render(text, True, (255,220,220))
        screen.blit(msg, msg.get_rect(center=(d.board_x + d.board_w//2, d.board_y + d.board_h//2 + dy)))

    def draw(self, screen: pygame.Surface, game, paused: bool):
        """Full frame: background, well, pieces, HUD and status banners."""
        screen.blit(self.bg, (0,0))
        if paused:
            self.draw_title(screen)
        else:
            screen.blit(self.board_surface, (self.dims.board_x, self.dims.board_y))
            self.draw_piece(screen, game.current, None if game.game_over else game.ghost)
        self.draw_panel_hud(screen, game.score, game.level, game.preview)
        if paused:
            self.draw_banner(screen, "PAUSED", 3*self.dims.cell)
        if game.game_over:
            self.draw_banner(screen, "GAME OVER")
            self.draw_banner(screen, "R restart / Esc quit", 40)
