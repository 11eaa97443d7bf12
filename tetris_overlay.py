
from tetris_piece import PIECES, color_of
from tetris_render import COLORS

HELP_LINES = [
    ("LEFT", "Move left"),
    ("RIGHT", "Move right"),
    ("UP", "Rotate clockwise"),
    ("DOWN", "Soft drop"),
    ("ENTER", "Hard drop"),
    ("P", "Pause"),
    ("R", "Restart"),
    ("ESC", "Exit"),
    ("S", "Toggle statistics"),
    ("D", "Toggle debug info"),
    ("H", "Toggle help"),
]

class InfoPanel:
    """Left-hand panel showing exactly one of help, statistics or debug info.
    Help is the resting mode: toggling the shown mode off falls back to it."""
    MODES = ("help", "stats", "debug")

    def __init__(self):
        self.mode = "help"

    def toggle(self, mode):
        if mode not in self.MODES: raise ValueError(mode)
        self.mode = "help" if self.mode == mode else mode

    def lines(self, game, clock_info=None):
        """Text rows for help and debug modes."""
        if self.mode == "help":
            return [f"{k:<6} - {v}" for k, v in HELP_LINES]
        if self.mode == "debug":
            p = game.current
            rows = [
                f"kind,rot,cur: {p.kind},{p.rotation},{game.bag.cursor}",
                f"x,y,ghost: {p.x},{p.y},{game.ghost}",
                f"bag: {' '.join(game.bag.items)}",
                f"speed: {game.speed}",
                f"rows this level: {game.level_rows}",
                f"cleared: {game.cleared_rows}",
            ]
            for k, v in (clock_info or {}).items():
                rows.append(f"{k}: {v}")
            return rows
        return []

    def draw(self, screen, render, game, clock_info=None):
        d = render.dims
        f = render.font
        x, y = d.info_x + 12, d.panel_y + 12
        if self.mode == "stats":
            cell = max(8, d.cell // 3)
            for t in PIECES:
                screen.blit(render.mini_shape(t, cell), (x, y))
                screen.blit(f.render(str(game.stats[t]), True, COLORS[color_of(t)]), (x + cell*5, y + cell))
                y += cell*3 + 4
            return
        for line in self.lines(game, clock_info):
            screen.blit(f.render(line, True, (165,175,215)), (x, y)); y += 22
