"""Tests for the fixed-timestep loop driver."""

from snake.game import reset_game, set_direction, step_game, toggle_pause
from snake.grid import Direction
from snake.loop import advance


class TestAdvance:
    def test_no_tick_before_interval(self, state):
        assert advance(state, 119) == 0
        assert state.snake[0] == (7, 10)
        assert state.accumulator == 119

    def test_leftover_time_carries_over(self, state):
        assert advance(state, 100) == 0
        assert advance(state, 250) == 2
        assert state.accumulator == 10
        assert state.snake[0] == (9, 10)

    def test_catch_up_after_slow_frame(self, state):
        assert advance(state, 360) == 3
        assert state.snake[0] == (10, 10)
        assert state.accumulator == 0

    def test_interval_sampled_once_per_frame(self, state):
        state.score = 4
        state.food = (8, 10)  # eaten on the first tick, triggers a speed-up
        assert advance(state, 240) == 2
        assert state.speed_ms == 110
        assert state.accumulator == 0

    def test_last_tick_at_follows_frames(self, state):
        advance(state, 16)
        advance(state, 33)
        assert state.last_tick_at == 33

    def test_turn_is_applied_by_next_tick(self, state):
        set_direction(state, Direction.UP)
        assert state.snake[0] == (7, 10)
        advance(state, 120)
        assert state.snake[0] == (7, 9)


class TestPausedLoop:
    def test_paused_time_drains_without_moving(self, state):
        toggle_pause(state, 0)
        before = list(state.snake)
        assert advance(state, 600) == 5
        assert state.snake == before

    def test_resume_does_not_burst(self, state):
        toggle_pause(state, 0)
        toggle_pause(state, 10_000)
        assert advance(state, 10_050) == 0
        assert state.snake[0] == (7, 10)

    def test_over_game_stays_put(self, state):
        state.snake = [(20, 10), (19, 10), (18, 10), (17, 10)]
        step_game(state)
        before = list(state.snake)
        advance(state, 1000)
        assert state.snake == before

    def test_reset_clears_accumulator(self, state):
        advance(state, 100)
        reset_game(state, 100)
        assert state.accumulator == 0
        assert advance(state, 200) == 0
