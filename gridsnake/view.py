"""
view.py — View layer.

Draws a Snapshot onto the window: checkerboard playfield, apple, a
connected snake whose segments follow sprites.segment_shapes(), the score
HUD and the paused / game-over overlays.  The playfield is centred in
whatever window size pygame currently reports.

Public API:
    GameView(screen)       — bind to a pygame surface
    view.bind(screen)      — rebind after the window was resized
    view.render(snapshot)  — draw the current frame
"""

import math
from typing import Optional

import pygame

from .config import (
    BG, DARK_GREEN, LIGHT_GREEN, SNAKE_COL, SNAKE_DIM, EYE_COL,
    APPLE_COL, LEAF_COL, TEXT_COL, OVERLAY_COL, TITLE_COL, UI_COL,
)
from .model import Snapshot
from .sprites import SHAPE_SIDES, segment_shapes

_SIDE_DELTA = {"up": (0, -1), "down": (0, 1), "left": (-1, 0), "right": (1, 0)}
_OPPOSITE = {"up": "down", "down": "up", "left": "right", "right": "left"}


# ─────────────────────── colour helpers ──────────────────────────
def _lerp_color(c1: tuple, c2: tuple, t: float) -> tuple:
    t = max(0.0, min(1.0, t))
    return tuple(int(c1[i] + (c2[i] - c1[i]) * t) for i in range(3))


def _brighten(color: tuple, factor: float) -> tuple:
    return tuple(min(255, int(c * factor)) for c in color[:3])


# ─────────────────────────── GameView ────────────────────────────
class GameView:
    """Renders the complete game frame from a Snapshot."""

    def __init__(self, screen: pygame.Surface):
        self.screen = screen
        self._init_fonts()
        self._board_key = None
        self._board_surf: Optional[pygame.Surface] = None
        self._anim_tick: int = 0

    def bind(self, screen: pygame.Surface) -> None:
        self.screen = screen

    # ── Main entry ───────────────────────────────────────────────
    def render(self, snap: Snapshot) -> None:
        self._anim_tick += 1
        field = self._field_rect(snap)

        self.screen.fill(BG)
        self.screen.blit(self._board(snap), field.topleft)

        if snap.food is not None:
            self._draw_food(field, snap.food, snap.cell_size)
        self._draw_snake(field, snap)
        self._draw_hud(field, snap)

        if snap.paused:
            self._draw_paused_overlay(field)
        elif snap.game_over:
            self._draw_game_over_overlay(field, snap)

        pygame.display.flip()

    # ── Geometry ─────────────────────────────────────────────────
    def _field_rect(self, snap: Snapshot) -> pygame.Rect:
        w, h = snap.cols * snap.cell_size, snap.rows * snap.cell_size
        sw, sh = self.screen.get_size()
        return pygame.Rect((sw - w) // 2, (sh - h) // 2, w, h)

    @staticmethod
    def _cell_rect(field: pygame.Rect, cell: tuple[int, int], size: int) -> pygame.Rect:
        return pygame.Rect(field.x + cell[0] * size, field.y + cell[1] * size, size, size)

    # ── Checkerboard (rebuilt only when the grid changes) ────────
    def _board(self, snap: Snapshot) -> pygame.Surface:
        key = (snap.cols, snap.rows, snap.cell_size)
        if key != self._board_key:
            size = snap.cell_size
            surf = pygame.Surface((snap.cols * size, snap.rows * size))
            for col in range(snap.cols):
                for row in range(snap.rows):
                    color = DARK_GREEN if (col + row) % 2 == 0 else LIGHT_GREEN
                    surf.fill(color, (col * size, row * size, size, size))
            self._board_key, self._board_surf = key, surf
        return self._board_surf

    # ── Food ─────────────────────────────────────────────────────
    def _draw_apple(self, rect: pygame.Rect) -> None:
        r = max(2, rect.width // 2 - 2)
        cx, cy = rect.centerx, rect.centery + 1
        pygame.draw.circle(self.screen, APPLE_COL, (cx, cy), r)
        pygame.draw.circle(self.screen, _brighten(APPLE_COL, 1.5),
                           (cx - r // 3, cy - r // 3), max(1, r // 4))
        leaf = pygame.Rect(0, 0, max(2, r // 2), max(2, r // 3))
        leaf.midbottom = (cx + r // 4, cy - r + 2)
        pygame.draw.ellipse(self.screen, LEAF_COL, leaf)

    def _draw_food(self, field: pygame.Rect, food: tuple[int, int], size: int) -> None:
        self._draw_apple(self._cell_rect(field, food, size))

    # ── Snake ────────────────────────────────────────────────────
    def _draw_snake(self, field: pygame.Rect, snap: Snapshot) -> None:
        cells = list(snap.snake)
        size = snap.cell_size
        pad = max(1, size // 6)
        length = len(cells)

        for i, (cell, (kind, shape)) in enumerate(zip(cells, segment_shapes(cells, snap.direction))):
            t = 1.0 - (i / max(length - 1, 1)) * 0.6
            color = _lerp_color(SNAKE_DIM, SNAKE_COL, t)
            rect = self._cell_rect(field, cell, size)
            core = rect.inflate(-2 * pad, -2 * pad)

            if kind == "body":
                sides = SHAPE_SIDES[shape]
            elif kind == "head":
                sides = (_OPPOSITE[shape],) if length > 1 else ()
            else:
                sides = (_OPPOSITE[shape],)

            pygame.draw.rect(self.screen, color, core,
                             border_radius=max(1, core.width // (2 if kind != "body" else 4)))
            # bridge toward each connected neighbour
            for side in sides:
                dx, dy = _SIDE_DELTA[side]
                bridge = core.copy()
                bridge.move_ip(dx * pad, dy * pad)
                pygame.draw.rect(self.screen, color, bridge.clip(rect))

            if kind == "head":
                self._draw_eyes(core, _SIDE_DELTA[shape])

    def _draw_eyes(self, head: pygame.Rect, facing: tuple[int, int]) -> None:
        dx, dy = facing
        px, py = -dy, dx  # perpendicular
        cx, cy = head.center
        off = max(2, head.width // 4)
        dot = max(1, head.width // 8)
        for sign in (+1, -1):
            ex = int(cx + dx * off + sign * px * off)
            ey = int(cy + dy * off + sign * py * off)
            pygame.draw.circle(self.screen, EYE_COL, (ex, ey), dot + 1)
            pygame.draw.circle(self.screen, TEXT_COL, (ex + dx, ey + dy), max(1, dot // 2))

    # ── HUD ──────────────────────────────────────────────────────
    def _draw_hud(self, field: pygame.Rect, snap: Snapshot) -> None:
        icon = pygame.Rect(field.x + 10, field.y + 12, 25, 25)
        self._draw_apple(icon)
        score = self.font_big.render(str(snap.score), True, TEXT_COL)
        self.screen.blit(score, score.get_rect(midleft=(icon.right + 6, icon.centery)))
        if snap.high_score > 0:
            best = self.font_tiny.render(f"BEST {snap.high_score}", True, TEXT_COL)
            self.screen.blit(best, best.get_rect(topright=(field.right - 10, field.y + 10)))

    # ── Overlay infrastructure ────────────────────────────────────
    def _draw_overlay_base(self, field: pygame.Rect) -> None:
        surf = pygame.Surface(field.size, pygame.SRCALPHA)
        surf.fill(OVERLAY_COL)
        self.screen.blit(surf, field.topleft)

    def _draw_title(self, title: str, color: tuple, cx: int, cy: int) -> int:
        pulse = 0.82 + 0.18 * math.sin(self._anim_tick * 0.05)
        surf = self.font_title.render(title, True, _brighten(color, pulse))
        self.screen.blit(surf, surf.get_rect(midtop=(cx, cy)))
        return cy + surf.get_height() + 14

    def _draw_text_line(self, text: str, color: tuple, cx: int, cy: int,
                        font: pygame.font.Font) -> int:
        surf = font.render(text, True, color)
        self.screen.blit(surf, surf.get_rect(midtop=(cx, cy)))
        return cy + surf.get_height() + 8

    # ── State overlays ────────────────────────────────────────────
    def _draw_paused_overlay(self, field: pygame.Rect) -> None:
        self._draw_overlay_base(field)
        cy = field.centery - 40
        cy = self._draw_title("PAUSED", TITLE_COL, field.centerx, cy)
        self._draw_text_line("SPACE / P / ENTER  TO RESUME", UI_COL, field.centerx, cy, self.font_med)

    def _draw_game_over_overlay(self, field: pygame.Rect, snap: Snapshot) -> None:
        self._draw_overlay_base(field)
        title = "BOARD CLEARED!" if snap.cleared else "GAME OVER"
        cy = field.centery - 80
        cy = self._draw_title(title, TITLE_COL, field.centerx, cy)
        cy = self._draw_text_line(f"SCORE  {snap.score}", UI_COL, field.centerx, cy, self.font_big)
        if snap.new_record:
            cy = self._draw_text_line("NEW HIGH SCORE", TITLE_COL, field.centerx, cy, self.font_med)
        else:
            cy = self._draw_text_line(f"BEST  {snap.high_score}", UI_COL, field.centerx, cy, self.font_med)
        cy += 10
        self._draw_text_line("SPACE / ENTER  TO PLAY AGAIN", UI_COL, field.centerx, cy, self.font_small)

    # ── Font init ─────────────────────────────────────────────────
    def _init_fonts(self) -> None:
        specs = [
            ("font_title", "courier", 46, True),
            ("font_big",   "courier", 26, True),
            ("font_med",   "courier", 18, False),
            ("font_small", "courier", 14, True),
            ("font_tiny",  "courier", 12, False),
        ]
        for attr, name, size, bold in specs:
            try:
                setattr(self, attr, pygame.font.SysFont(name, size, bold=bold))
            except (pygame.error, OSError):
                setattr(self, attr, pygame.font.SysFont(None, size))
