"""Tests for command line parsing and the per-frame driver."""

import random
from pathlib import Path

import pygame
import pytest

import snake.main as snake_main
from snake.config import CFG, Config
from snake.game import new_game_state
from snake.grid import Direction
from snake.main import parse_args, run_frame


def test_defaults():
    cfg = parse_args([])
    assert cfg == CFG


def test_overrides():
    cfg = parse_args(["--columns", "30", "--rows", "12", "--seed", "3",
                      "--fps", "30", "--best-file", "scores.json", "--debug"])
    assert (cfg.columns, cfg.rows, cfg.seed, cfg.fps) == (30, 12, 3, 30)
    assert cfg.best_score_file == Path("scores.json")
    assert cfg.debug
    assert cfg.base_speed_ms == CFG.base_speed_ms


@pytest.mark.parametrize("argv", [
    ["--columns", "3"],
    ["--rows", "0"],
    ["--fps", "0"],
    ["--columns", "4", "--rows", "1"],
])
def test_rejects_bad_sizes(argv):
    with pytest.raises(SystemExit):
        parse_args(argv)


def test_smallest_accepted_grid_leaves_room_for_food():
    cfg = parse_args(["--columns", "5", "--rows", "1"])
    s = new_game_state(0, cfg, rng=random.Random(0))
    assert s.food not in s.snake


@pytest.fixture
def display(monkeypatch):
    monkeypatch.setenv("SDL_VIDEODRIVER", "dummy")
    pygame.display.init()
    pygame.font.init()
    yield
    pygame.display.quit()


@pytest.fixture
def events(monkeypatch):
    """Queue handed to the input adapter on the next frame."""
    queue = []
    monkeypatch.setattr(pygame.event, "get", lambda: list(queue))
    return queue


@pytest.fixture
def draws(monkeypatch):
    calls = []
    real = snake_main.draw_game

    def counting(*args):
        calls.append(args)
        real(*args)

    monkeypatch.setattr(snake_main, "draw_game", counting)
    return calls


class TestRunFrame:
    def _setup(self, size):
        screen = pygame.display.set_mode(size)
        font = pygame.font.Font(None, 22)
        state = new_game_state(0, Config(seed=7), rng=random.Random(7))
        state.food = (0, 0)
        return screen, font, state

    def test_one_draw_after_catch_up(self, display, events, draws):
        screen, font, state = self._setup((560, 700))
        assert run_frame(screen, font, state, 360)
        assert state.snake[0] == (10, 10)   # three ticks
        assert len(draws) == 1

    def test_one_draw_without_ticks(self, display, events, draws):
        screen, font, state = self._setup((560, 700))
        assert run_frame(screen, font, state, 50)
        assert state.snake[0] == (7, 10)
        assert len(draws) == 1

    def test_quit_skips_update_and_draw(self, display, events, draws):
        screen, font, state = self._setup((560, 700))
        events.append(pygame.event.Event(pygame.QUIT))
        assert not run_frame(screen, font, state, 360)
        assert state.snake[0] == (7, 10)
        assert draws == []

    def test_input_applies_before_the_ticks(self, display, events, draws):
        screen, font, state = self._setup((560, 700))
        events.append(pygame.event.Event(pygame.KEYDOWN, key=pygame.K_UP))
        run_frame(screen, font, state, 120)
        assert state.snake[0] == (7, 9)

    def test_touch_in_small_window_hits_the_right_button(self, display, events, draws):
        screen, font, state = self._setup((200, 300))
        # up button of a 200x300 layout is centred on (100, 194)
        events.append(pygame.event.Event(pygame.FINGERDOWN, x=100 / 200, y=194 / 300))
        run_frame(screen, font, state, 0)
        assert state.pending is Direction.UP
        assert draws[0][3].width == 200
