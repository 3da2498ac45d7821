# game.py
import math
import random
from dataclasses import dataclass, field
from typing import List, Optional

from .config import Config, CFG
from .grid import Direction, Position, all_cells, in_bounds, is_opposite, step
from .storage import BestScoreStore

PAUSED_OVERLAY = ("Paused", "Press Space or tap Resume")
GAME_OVER_OVERLAY = ("Game Over", "Press R to restart or tap Restart")
WIN_OVERLAY = ("You Win", "Board cleared! Press R to play again")


# ---------- Helpers ----------
def spawn_food(snake: List[Position], columns: int, rows: int,
               rng: random.Random) -> Position:
    """Uniform pick among free cells; (0, 0) when the snake covers the grid."""
    occupied = set(snake)
    empty = [cell for cell in all_cells(columns, rows) if cell not in occupied]
    if not empty:
        return (0, 0)
    return empty[rng.randrange(len(empty))]

def initial_snake(cfg: Config) -> List[Position]:
    # a third of the way in, but far enough right for the whole body to fit
    hx, hy = max(cfg.columns // 3, cfg.initial_length - 1), cfg.rows // 2
    return [(hx - i, hy) for i in range(cfg.initial_length)]


# ---------- State ----------
@dataclass(frozen=True)
class Overlay:
    title: str
    subtitle: str

@dataclass(frozen=True)
class HudView:
    score: str
    best: str
    speed: str
    pause_label: str

@dataclass
class GameState:
    cfg: Config
    snake: List[Position] = field(default_factory=list)   # head at index 0
    direction: Direction = Direction.RIGHT
    pending: Direction = Direction.RIGHT
    food: Position = (0, 0)
    score: int = 0
    best_score: int = 0                # survives resets
    speed_ms: int = 0                  # current tick interval
    paused: bool = False
    over: bool = False
    won: bool = False
    overlay: Optional[Overlay] = None  # None = hidden
    last_tick_at: float = 0.0          # ms timestamp of last frame
    accumulator: float = 0.0           # ms not yet consumed by ticks
    rng: random.Random = field(default_factory=random.Random)
    store: Optional[BestScoreStore] = None

def new_game_state(now_ms: float, cfg: Config = CFG,
                   store: Optional[BestScoreStore] = None,
                   rng: Optional[random.Random] = None) -> GameState:
    state = GameState(
        cfg=cfg,
        best_score=store.load() if store is not None else 0,
        rng=rng if rng is not None else random.Random(cfg.seed),
        store=store,
    )
    reset_game(state, now_ms)
    return state

def reset_game(state: GameState, now_ms: float) -> None:
    """Back to a fresh Running game; best score, rng and store are kept."""
    cfg = state.cfg
    state.snake = initial_snake(cfg)
    state.direction = Direction.RIGHT
    state.pending = Direction.RIGHT
    state.score = 0
    state.speed_ms = cfg.base_speed_ms
    state.paused = False
    state.over = False
    state.won = False
    state.overlay = None
    state.food = spawn_food(state.snake, cfg.columns, cfg.rows, state.rng)
    state.last_tick_at = now_ms
    state.accumulator = 0.0


# ---------- Commands ----------
def set_direction(state: GameState, direction: Optional[Direction]) -> None:
    """Stage a turn for the next tick. Reversing into the neck is ignored."""
    if direction is None or is_opposite(direction, state.direction):
        return
    state.pending = direction

def toggle_pause(state: GameState, now_ms: float) -> None:
    if state.over:
        return
    state.paused = not state.paused
    if state.paused:
        state.overlay = Overlay(*PAUSED_OVERLAY)
    else:
        state.overlay = None
        # resync so the time spent paused is not replayed as ticks
        state.last_tick_at = now_ms

def game_over(state: GameState, won: bool = False) -> None:
    state.over = True
    state.won = won
    if state.score > state.best_score:
        state.best_score = state.score
        if state.store is not None:
            state.store.save(state.best_score)
    state.overlay = Overlay(*(WIN_OVERLAY if won else GAME_OVER_OVERLAY))


# ---------- Update ----------
def step_game(state: GameState) -> bool:
    """
    Advance the game by one tick.
    Returns True while the game is still alive, False once it is over.
    Does nothing while paused.
    """
    if state.over:
        return False
    if state.paused:
        return True

    cfg = state.cfg
    # Commit direction once per tick
    state.direction = state.pending
    new_head = step(state.snake[0], state.direction)

    # Wall collision
    if not in_bounds(new_head, cfg.columns, cfg.rows):
        game_over(state)
        return False

    # Self collision (tail included, it has not moved yet)
    if new_head in state.snake:
        game_over(state)
        return False

    state.snake.insert(0, new_head)
    if new_head == state.food:
        state.score += 1
        if state.score % cfg.speedup_every == 0:
            state.speed_ms = max(cfg.min_speed_ms,
                                 math.floor(state.speed_ms * cfg.speedup_factor))
        if len(state.snake) >= cfg.columns * cfg.rows:
            game_over(state, won=True)
            return False
        state.food = spawn_food(state.snake, cfg.columns, cfg.rows, state.rng)
    else:
        state.snake.pop()
    return True


# ---------- Display ----------
def speed_multiplier(state: GameState) -> float:
    cfg = state.cfg
    return min(cfg.max_speed_multiplier, cfg.base_speed_ms / state.speed_ms)

def hud_view(state: GameState) -> HudView:
    return HudView(
        score=str(state.score),
        best=str(state.best_score),
        speed=f"{speed_multiplier(state):.2f}x",
        pause_label="Resume" if state.paused else "Pause",
    )
