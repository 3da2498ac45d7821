# main.py
import argparse
import dataclasses
from pathlib import Path
from typing import List, Optional

import pygame # type: ignore
from .config import CFG, Config, WIDTH, HEIGHT
from .controls import handle_input
from .game import GameState, new_game_state
from .loop import advance
from .render import compute_layout, draw_game
from .storage import BestScoreStore


def parse_args(argv: Optional[List[str]] = None) -> Config:
    parser = argparse.ArgumentParser(prog="snake", description="Grid Snake")
    parser.add_argument("--columns", type=int, default=CFG.columns)
    parser.add_argument("--rows", type=int, default=CFG.rows)
    parser.add_argument("--seed", type=int, default=CFG.seed,
                        help="seed the food RNG for reproducible games")
    parser.add_argument("--fps", type=int, default=CFG.fps)
    parser.add_argument("--best-file", type=Path, default=CFG.best_score_file,
                        help="where the best score is kept")
    parser.add_argument("--debug", action="store_true")
    args = parser.parse_args(argv)

    if args.rows < 1 or args.columns < CFG.initial_length:
        parser.error(f"grid must be at least {CFG.initial_length}x1 to hold the snake")
    if args.columns * args.rows <= CFG.initial_length:
        parser.error("grid needs at least one free cell besides the snake")
    if args.fps < 1:
        parser.error("--fps must be positive")

    return dataclasses.replace(
        CFG,
        columns=args.columns,
        rows=args.rows,
        seed=args.seed,
        fps=args.fps,
        best_score_file=args.best_file,
        debug=args.debug,
    )

def run_frame(screen: pygame.Surface, font: pygame.font.Font,
              state: GameState, now_ms: float) -> bool:
    """One frame: input, catch-up ticks, one draw. Return False to quit."""
    cfg = state.cfg
    # layout follows the window, so resizes apply on the next frame
    width, height = screen.get_size()
    layout = compute_layout(width, height, cfg.columns, cfg.rows)

    # 1) input
    if not handle_input(state, layout, now_ms):
        return False

    # 2) update, as many ticks as the elapsed time covers
    was_over = state.over
    ticks = advance(state, now_ms)
    if cfg.debug and ticks > 1:
        print(f"[SNAKE] caught up {ticks} ticks")
    if state.over and not was_over:
        print(f"[SNAKE] {'win' if state.won else 'game over'}: "
              f"score={state.score}, best={state.best_score}")

    # 3) render, once however many ticks ran
    draw_game(screen, font, state, layout)
    return True

def main(argv: Optional[List[str]] = None) -> None:
    cfg = parse_args(argv)

    pygame.init()
    font = pygame.font.SysFont(None, 24)
    screen = pygame.display.set_mode((WIDTH, HEIGHT), pygame.RESIZABLE)
    pygame.display.set_caption("Snake")
    clock = pygame.time.Clock()

    store = BestScoreStore(cfg.best_score_file, debug=cfg.debug)
    state = new_game_state(pygame.time.get_ticks(), cfg, store)
    print(f"[SNAKE] {cfg.columns}x{cfg.rows} grid, best score {state.best_score} "
          f"({cfg.best_score_file})")

    while run_frame(screen, font, state, pygame.time.get_ticks()):
        pygame.display.flip()
        clock.tick(cfg.fps)

    pygame.quit()

if __name__ == "__main__":
    main()
