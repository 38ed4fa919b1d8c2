#!/usr/bin/env python3
"""
Dijkstra vs BFS Viewer: paint terrain, run both, compare the paths

- Mouse:
    [LEFT]  (held)   -> paint walls
    [RIGHT] (held)   -> paint mud (entry cost 5)
- Keyboard:
    [SPACE]      -> run Dijkstra (weighted)
    [B]          -> run BFS (unweighted)
    [R]          -> full reset
    [Q]/[ESC]    -> quit

Settings (presentation only):
- ENV: MUDPATH_CELL=<px>, MUDPATH_FPS=<n>
- CLI: --cell=<px> --fps=<n>
"""

import sys, os
from typing import List, Tuple
import pygame

from mudpath.core.controller import Controller
from mudpath.core.model import RenderModel
from mudpath.core.types import (
    Cell, EditTerrain, Run, FullReset, RunMetrics, DIJKSTRA, BFS, WALL, MUD,
    MODE_IDLE, MODE_BOTH,
)

# ---------- Settings resolution ----------
def resolve_int(env_key: str, flag: str, default: int, lo: int, hi: int) -> int:
    raw = os.getenv(env_key)
    for arg in sys.argv:
        if arg.startswith(f"--{flag}="):
            raw = arg.split("=", 1)[1]
    try:
        value = int(raw) if raw is not None else default
    except ValueError:
        print(f"Ignoring bad {flag} value {raw!r}, using {default}")
        value = default
    return max(lo, min(hi, value))

CELL_SIZE = resolve_int("MUDPATH_CELL", "cell", 20, 8, 48)
FPS       = resolve_int("MUDPATH_FPS", "fps", 60, 10, 240)
BAR_H     = 140   # dashboard, five text rows
FONT_NAME = None  # default pygame font

# Colors
WHITE       = (255,255,255)
GREEN       = (  0,228, 48)
RED         = (255, 51, 51)
END_RED     = (230, 41, 55)
YELLOW      = (253,249,  0)   # current path
ORANGE      = (255,140,  0)   # previous path
AMBER       = (255,204, 68)
GRAY        = (136,136,136)
DIM_GRAY    = ( 68, 68, 68)
DIVIDER     = ( 42, 42, 42)
BAR_BG      = ( 10, 10, 10)
BG          = ( 24, 24, 24)
WALL_DARK   = ( 34, 34, 34)
MUD_BROWN   = (139, 94, 60)
VISITED     = ( 58,126,191)
OPEN_LIGHT  = (221,221,221)


class Viewer:
    def __init__(self, controller: Controller):
        pygame.init()

        self.controller = controller
        self.cell_size = CELL_SIZE
        grid = controller.model.grid

        self.font_small = pygame.font.Font(FONT_NAME, 16)
        self.font = pygame.font.Font(FONT_NAME, 19)
        self.font_big = pygame.font.Font(FONT_NAME, 24)

        self.win_w = grid.width * self.cell_size
        self.win_h = grid.height * self.cell_size + BAR_H
        self.screen = pygame.display.set_mode((self.win_w, self.win_h))
        pygame.display.set_caption("Pathfinding: Dijkstra vs BFS")

        self.clock = pygame.time.Clock()

    def run(self):
        while True:
            self._handle_events()
            self._paint_terrain()
            self._draw()
            self.clock.tick(FPS)

    # ---------- input -> commands ----------
    def _cell_under_mouse(self) -> Cell:
        mx, my = pygame.mouse.get_pos()
        return (mx // self.cell_size, my // self.cell_size)

    def _paint_terrain(self):
        # held buttons keep painting every frame; the grid drops off-board cells
        left, _, right = pygame.mouse.get_pressed()[:3]
        x, y = self._cell_under_mouse()
        if left:
            self.controller.dispatch(EditTerrain(WALL, x, y))
        if right:
            self.controller.dispatch(EditTerrain(MUD, x, y))

    def _run(self, algorithm: str):
        res = self.controller.dispatch(Run(algorithm))
        m = self.controller.model.history.metrics_for(algorithm)
        if not res.found:
            print(f"{algorithm}: no path ({m.visited_count} visited, {m.time_seconds:.6f} s)")
        elif algorithm == DIJKSTRA:
            print(f"{algorithm}: cost {m.weighted_cost} ({m.visited_count} visited, {m.time_seconds:.6f} s)")
        else:
            print(f"{algorithm}: {m.hops} hops, true cost {m.true_cost} "
                  f"({m.visited_count} visited, {m.time_seconds:.6f} s)")

    def _handle_events(self):
        for e in pygame.event.get():
            if e.type == pygame.QUIT:
                pygame.quit(); sys.exit(0)
            elif e.type == pygame.KEYDOWN:
                if e.key in (pygame.K_ESCAPE, pygame.K_q):
                    pygame.quit(); sys.exit(0)
                elif e.key == pygame.K_SPACE:
                    self._run(DIJKSTRA)
                elif e.key == pygame.K_b:
                    self._run(BFS)
                elif e.key == pygame.K_r:
                    self.controller.dispatch(FullReset())

    # ---------- drawing ----------
    def _draw(self):
        view = self.controller.model.render_model()
        self.screen.fill(BG)
        self._draw_grid(view)
        self._draw_dashboard(view)
        pygame.display.flip()

    def _cell_rect(self, col: int, row: int) -> pygame.Rect:
        cs = self.cell_size
        return pygame.Rect(col*cs, row*cs, cs - 1, cs - 1)

    def _draw_grid(self, view: RenderModel):
        grid = view.grid
        for node in grid:
            c = node.pos
            if c == grid.start:   color = GREEN
            elif c == grid.end:   color = END_RED
            elif node.is_wall:    color = WALL_DARK
            elif node.is_mud:     color = MUD_BROWN
            elif node.visited:    color = VISITED
            else:                 color = OPEN_LIGHT
            pygame.draw.rect(self.screen, color, self._cell_rect(*c))

        # previous under current
        for bitmap, color in ((view.previous, ORANGE), (view.current, YELLOW)):
            for row, cols in enumerate(bitmap):
                for col, on in enumerate(cols):
                    if on:
                        pygame.draw.rect(self.screen, color, self._cell_rect(col, row))

    # ---------- dashboard ----------
    def _text(self, text: str, pos: Tuple[int, int], color=WHITE, font=None, bold=False):
        f = font or self.font
        surf = f.render(text, True, color)
        if bold:
            self.screen.blit(surf, (pos[0] + 1, pos[1]))
        self.screen.blit(surf, pos)

    def _draw_dashboard(self, view: RenderModel):
        bar_y = view.grid.height * self.cell_size
        rows = [bar_y + 6, bar_y + 32, bar_y + 54, bar_y + 80, bar_y + 108]
        px = 20
        cx = self.win_w // 2 + 20

        pygame.draw.rect(self.screen, BAR_BG, pygame.Rect(0, bar_y, self.win_w, BAR_H))
        pygame.draw.line(self.screen, DIVIDER, (0, bar_y), (self.win_w, bar_y))
        self._draw_legend(rows[4], px)

        if view.mode == MODE_IDLE:
            self._text("SPACE = Run Dijkstra (Weighted)     B = Run BFS (Unweighted)",
                       (px, rows[0]), GRAY, self.font_big)
            self._text("Left Click = Wall     Right Click = Mud     R = Full Reset",
                       (px, rows[1]), DIM_GRAY)
            self._text("Run both algorithms to see a live side-by-side comparison.",
                       (px, rows[2]), DIM_GRAY, self.font_small)
            return

        if view.mode == MODE_BOTH:
            pygame.draw.line(self.screen, DIVIDER, (self.win_w // 2, bar_y + 4),
                             (self.win_w // 2, rows[4] - 10))
            self._draw_column(view, view.dijkstra, px, rows)
            self._draw_column(view, view.bfs, cx, rows)
            found_both = view.dijkstra.found and view.bfs.found
            self._text(view.summary, (px, rows[3]),
                       AMBER if found_both else DIM_GRAY, self.font_small)
            return

        m = view.dijkstra if view.last_algorithm == DIJKSTRA else view.bfs
        self._draw_column(view, m, px, rows)
        if m.algo == DIJKSTRA:
            hint = "Press  B  to run BFS - both paths will appear side by side."
        else:
            hint = "Press  SPACE  to run Dijkstra - both paths will appear side by side."
        self._text(hint, (px, rows[3]), DIM_GRAY, self.font_small)

    def _draw_column(self, view: RenderModel, m: RunMetrics, x: int, rows: List[int]):
        is_current = m.algo == view.last_algorithm
        header = f">> CURRENT  ({m.algo.upper()})" if is_current else f"   PREVIOUS ({m.algo.upper()})"
        self._text(header, (x, rows[0]), YELLOW if is_current else ORANGE, self.font_big, bold=True)

        self._text("Time:", (x, rows[1]), GRAY)
        self._text(f"{m.time_seconds:.6f} s", (x + 48, rows[1]))
        self._text("Visited:", (x + 155, rows[1]), GRAY)
        self._text(str(m.visited_count), (x + 220, rows[1]))
        self._text("Path:", (x + 275, rows[1]), GRAY)
        self._text("YES" if m.found else "NO", (x + 315, rows[1]), GREEN if m.found else RED)

        if m.algo == DIJKSTRA:
            self._text("Weighted Cost:", (x, rows[2]), GRAY)
            self._text(str(m.weighted_cost), (x + 125, rows[2]))
            return

        self._text("Hops:", (x, rows[2]), GRAY)
        self._text(str(m.hops), (x + 48, rows[2]))
        self._text("True Cost:", (x + 100, rows[2]), GRAY)
        worse = view.mode == MODE_BOTH and m.true_cost > view.dijkstra.weighted_cost
        self._text(str(m.true_cost), (x + 190, rows[2]), RED if worse else WHITE)
        if worse:
            self._text("(!)", (x + 225, rows[2]), RED)

    def _draw_legend(self, y: int, px: int):
        pygame.draw.line(self.screen, DIVIDER, (0, y - 6), (self.win_w, y - 6))
        self._text("Normal=1  Mud=5", (px, y), DIM_GRAY, self.font_small)
        self._text("Dijkstra=cheapest path   BFS=fewest steps, ignores mud",
                   (px + 125, y), DIM_GRAY, self.font_small)
        for label, color, x in (("Current", YELLOW, self.win_w - 155),
                                ("Previous", ORANGE, self.win_w - 75)):
            pygame.draw.rect(self.screen, color, pygame.Rect(x, y, 11, 11))
            self._text(label, (x + 14, y), GRAY, self.font_small)

# ---------- main ----------
def main():
    try:
        viewer = Viewer(Controller())
    except pygame.error as ex:
        print(f"Failed to open the viewer: {ex}")
        sys.exit(1)
    viewer.run()

if __name__ == "__main__":
    main()
