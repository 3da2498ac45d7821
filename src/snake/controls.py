# controls.py
from typing import Optional, Tuple

import pygame  # type: ignore

from .game import GameState, reset_game, set_direction, toggle_pause
from .grid import Direction
from .render import Layout

KEY_TO_DIR = {
    pygame.K_UP: Direction.UP,
    pygame.K_w: Direction.UP,
    pygame.K_DOWN: Direction.DOWN,
    pygame.K_s: Direction.DOWN,
    pygame.K_LEFT: Direction.LEFT,
    pygame.K_a: Direction.LEFT,
    pygame.K_RIGHT: Direction.RIGHT,
    pygame.K_d: Direction.RIGHT,
}

BUTTON_TO_DIR = {
    "up": Direction.UP,
    "down": Direction.DOWN,
    "left": Direction.LEFT,
    "right": Direction.RIGHT,
}


def button_at(state: GameState, layout: Layout, pos: Tuple[int, int]) -> Optional[str]:
    """Name of the on-screen button under pos, if any."""
    # the overlay sits on top of everything else while it is shown
    if state.overlay is not None:
        if state.paused and layout.buttons["overlay_resume"].collidepoint(pos):
            return "overlay_resume"
        if layout.buttons["overlay_restart"].collidepoint(pos):
            return "overlay_restart"
    for name in ("pause", "restart", "up", "down", "left", "right"):
        if layout.buttons[name].collidepoint(pos):
            return name
    return None

def press_button(state: GameState, name: Optional[str], now_ms: float) -> None:
    if name in BUTTON_TO_DIR:
        set_direction(state, BUTTON_TO_DIR[name])
    elif name in ("pause", "overlay_resume"):
        toggle_pause(state, now_ms)
    elif name in ("restart", "overlay_restart"):
        reset_game(state, now_ms)

def handle_event(state: GameState, event: pygame.event.Event,
                 layout: Layout, now_ms: float) -> bool:
    """Apply one event to the game. Return False to quit."""
    if event.type == pygame.QUIT:
        return False
    if event.type == pygame.KEYDOWN:
        if event.key == pygame.K_ESCAPE:
            return False
        if event.key in KEY_TO_DIR:
            set_direction(state, KEY_TO_DIR[event.key])
        elif event.key == pygame.K_SPACE:
            toggle_pause(state, now_ms)
        elif event.key == pygame.K_r:
            reset_game(state, now_ms)
    elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
        # SDL mirrors touches as mouse clicks; those are handled as FINGERDOWN
        if getattr(event, "touch", False):
            return True
        press_button(state, button_at(state, layout, event.pos), now_ms)
    elif event.type == pygame.FINGERDOWN:
        # touch coordinates come normalised to [0, 1]
        pos = (int(event.x * layout.width), int(event.y * layout.height))
        press_button(state, button_at(state, layout, pos), now_ms)
    return True

def handle_input(state: GameState, layout: Layout, now_ms: float) -> bool:
    """Drain the pygame event queue. Return False to quit."""
    for event in pygame.event.get():
        if not handle_event(state, event, layout, now_ms):
            return False
    return True
