# render.py
import math
from dataclasses import dataclass
from typing import Dict, List, Tuple

import pygame  # type: ignore

from .config import (
    HUD_HEIGHT, DPAD_HEIGHT,
    GRID_A, GRID_B, SNAKE, SNAKE_HEAD, FOOD, PANEL, BUTTON, TEXT, MUTED, SHADE,
)
from .game import GameState, HudView, hud_view

HEAD_RADIUS = 0.35
BODY_RADIUS = 0.25
FOOD_RADIUS = 0.25

DPAD_LABELS = {"up": "^", "down": "v", "left": "<", "right": ">"}


# ---------- Layout ----------
@dataclass(frozen=True)
class Layout:
    width: int
    height: int
    columns: int
    rows: int
    cell: int                      # square cell size in px
    offset_x: int                  # top-left of the grid in px
    offset_y: int
    buttons: Dict[str, pygame.Rect]

    @property
    def board(self) -> pygame.Rect:
        return pygame.Rect(self.offset_x, self.offset_y,
                           self.cell * self.columns, self.cell * self.rows)

    def cell_rect(self, x: int, y: int) -> pygame.Rect:
        return pygame.Rect(self.offset_x + x * self.cell,
                           self.offset_y + y * self.cell, self.cell, self.cell)

def compute_layout(width: int, height: int, columns: int, rows: int) -> Layout:
    """
    HUD bar on top, d-pad strip at the bottom, the grid centred in between
    with square cells of floor(min(area_w / columns, area_h / rows)) px.
    """
    area_h = max(height - HUD_HEIGHT - DPAD_HEIGHT, 0)
    cell = math.floor(min(width / columns, area_h / rows))
    offset_x = (width - cell * columns) // 2
    offset_y = HUD_HEIGHT + (area_h - cell * rows) // 2

    buttons: Dict[str, pygame.Rect] = {}

    # HUD buttons, right aligned
    pad, bw = 10, 84
    bh = HUD_HEIGHT - 2 * pad
    buttons["restart"] = pygame.Rect(width - pad - bw, pad, bw, bh)
    buttons["pause"] = pygame.Rect(width - 2 * (pad + bw), pad, bw, bh)

    # D-pad, a plus shape centred in the bottom strip
    s = (DPAD_HEIGHT - 12) // 3
    cx, cy = width // 2, height - DPAD_HEIGHT // 2
    buttons["up"] = pygame.Rect(cx - s // 2, cy - s // 2 - s, s, s)
    buttons["down"] = pygame.Rect(cx - s // 2, cy + s // 2, s, s)
    buttons["left"] = pygame.Rect(cx - s // 2 - s, cy - s // 2, s, s)
    buttons["right"] = pygame.Rect(cx + s // 2, cy - s // 2, s, s)

    # Overlay panel buttons, centred on the board area
    panel = overlay_panel(width, HUD_HEIGHT + area_h // 2)
    ow, oh = 110, 36
    buttons["overlay_resume"] = pygame.Rect(panel.centerx - ow - 6, panel.bottom - oh - 14, ow, oh)
    buttons["overlay_restart"] = pygame.Rect(panel.centerx + 6, panel.bottom - oh - 14, ow, oh)

    return Layout(width, height, columns, rows, cell, offset_x, offset_y, buttons)

def overlay_panel(width: int, center_y: int) -> pygame.Rect:
    panel = pygame.Rect(0, 0, min(320, max(width - 20, 0)), 150)
    panel.center = (width // 2, center_y)
    return panel


# ---------- Drawing ----------
def draw_rounded_cell(surface: pygame.Surface, layout: Layout, x: int, y: int,
                      color: Tuple[int, int, int], radius_frac: float) -> None:
    r = max(2, math.floor(layout.cell * radius_frac))
    rect = layout.cell_rect(x, y).inflate(-2, -2)   # 1 px gap on each side
    pygame.draw.rect(surface, color, rect, border_radius=r)

def draw_board(surface: pygame.Surface, state: GameState, layout: Layout) -> None:
    """Checker background, food, then the snake from tail to head."""
    if layout.cell <= 0:
        return
    surface.fill(GRID_A, layout.board)
    for y in range(layout.rows):
        for x in range(layout.columns):
            if (x + y) % 2 == 1:
                surface.fill(GRID_B, layout.cell_rect(x, y))

    draw_rounded_cell(surface, layout, state.food[0], state.food[1], FOOD, FOOD_RADIUS)

    # head last so it sits on top
    for i in range(len(state.snake) - 1, -1, -1):
        x, y = state.snake[i]
        if i == 0:
            draw_rounded_cell(surface, layout, x, y, SNAKE_HEAD, HEAD_RADIUS)
        else:
            draw_rounded_cell(surface, layout, x, y, SNAKE, BODY_RADIUS)

def draw_button(surface: pygame.Surface, font: pygame.font.Font,
                rect: pygame.Rect, label: str) -> None:
    pygame.draw.rect(surface, BUTTON, rect, border_radius=8)
    txt = font.render(label, True, TEXT)
    surface.blit(txt, txt.get_rect(center=rect.center))

def hud_stats(font: pygame.font.Font, hud: HudView,
              limit: int) -> List[Tuple[str, str, int]]:
    """(label, value, x) for each stat that fits left of `limit`, in order."""
    stats = []
    x = 12
    for label, value in (("Score", hud.score), ("Best", hud.best), ("Speed", hud.speed)):
        w = max(font.size(label)[0], font.size(value)[0])
        if x + w > limit:
            break
        stats.append((label, value, x))
        x += w + 18
    return stats

def draw_hud(surface: pygame.Surface, font: pygame.font.Font,
             state: GameState, layout: Layout) -> None:
    hud = hud_view(state)
    surface.fill(PANEL, pygame.Rect(0, 0, layout.width, HUD_HEIGHT))

    for label, value, x in hud_stats(font, hud, layout.buttons["pause"].left - 8):
        cap = font.render(label, True, MUTED)
        val = font.render(value, True, TEXT)
        surface.blit(cap, (x, 6))
        surface.blit(val, (x, 6 + cap.get_height()))

    draw_button(surface, font, layout.buttons["pause"], hud.pause_label)
    draw_button(surface, font, layout.buttons["restart"], "Restart")

def draw_controls(surface: pygame.Surface, font: pygame.font.Font, layout: Layout) -> None:
    surface.fill(PANEL, pygame.Rect(0, layout.height - DPAD_HEIGHT, layout.width, DPAD_HEIGHT))
    for name, label in DPAD_LABELS.items():
        draw_button(surface, font, layout.buttons[name], label)

def draw_overlay(surface: pygame.Surface, font: pygame.font.Font,
                 state: GameState, layout: Layout) -> None:
    if state.overlay is None:
        return
    # Dim with translucent overlay
    area = pygame.Rect(0, HUD_HEIGHT, layout.width,
                       max(layout.height - HUD_HEIGHT - DPAD_HEIGHT, 0))
    shade = pygame.Surface(area.size, pygame.SRCALPHA)
    shade.fill(SHADE)
    surface.blit(shade, area.topleft)

    panel = overlay_panel(layout.width, area.centery)
    pygame.draw.rect(surface, PANEL, panel, border_radius=12)

    title = font.render(state.overlay.title, True, TEXT)
    sub = font.render(state.overlay.subtitle, True, MUTED)
    surface.blit(title, title.get_rect(center=(panel.centerx, panel.top + 28)))
    surface.blit(sub, sub.get_rect(center=(panel.centerx, panel.top + 58)))

    if state.paused:
        draw_button(surface, font, layout.buttons["overlay_resume"], "Resume")
    draw_button(surface, font, layout.buttons["overlay_restart"], "Restart")

def draw_game(surface: pygame.Surface, font: pygame.font.Font,
              state: GameState, layout: Layout) -> None:
    surface.fill(GRID_A)
    draw_board(surface, state, layout)
    draw_hud(surface, font, state, layout)
    draw_controls(surface, font, layout)
    draw_overlay(surface, font, state, layout)
