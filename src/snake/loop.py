# loop.py
from .game import GameState, step_game


def advance(state: GameState, now_ms: float) -> int:
    """
    Fixed-timestep catch-up: bank the time since the last frame and run one
    tick per full interval in the bank. Called once per frame, before drawing.

    The interval is sampled once per frame, so a speed-up earned mid-frame
    applies from the next frame on. Returns the number of ticks run.
    """
    dt = now_ms - state.last_tick_at
    state.last_tick_at = now_ms
    state.accumulator += dt

    interval = state.speed_ms
    ticks = 0
    while state.accumulator >= interval:
        state.accumulator -= interval
        step_game(state)
        ticks += 1
    return ticks
