"""Tests for the game session driver."""

import asyncio

import pytest

from micro_snake.autoplay import AutoplayConfig, DifficultyPreset
from micro_snake.config import GameConfig
from micro_snake.grid import GridPoint
from micro_snake.rng import default_rng
from micro_snake.session import KEY_BINDINGS, Action, GameSession
from micro_snake.snake import Direction


class TestSessionInit:
    def test_new_game_from_config(self):
        session = GameSession(GameConfig(columns=10, rows=8, seed=0))
        assert session.state.columns == 10
        assert session.state.rows == 8
        assert session.ticks == 0
        assert not session.autoplay

    def test_seeded_sessions_match(self):
        a = GameSession(GameConfig(seed=9))
        b = GameSession(GameConfig(seed=9))
        assert a.state == b.state

    def test_explicit_rng(self):
        session = GameSession(GameConfig(), rng=default_rng(4))
        assert session.state.food == GameSession(GameConfig(seed=4)).state.food

    def test_tick_interval_from_preset(self):
        assert GameSession(GameConfig(seed=0)).tick_interval == 0.18
        assert GameSession(
            GameConfig(seed=0, difficulty="intense"),
        ).tick_interval == 0.12

    def test_tick_interval_override(self):
        session = GameSession(GameConfig(seed=0, tick_interval=0.05))
        assert session.tick_interval == 0.05

    def test_custom_presets(self):
        presets = AutoplayConfig(presets={
            "normal": DifficultyPreset(commit_probability=1.0, tick_interval=0.3),
        })
        session = GameSession(GameConfig(seed=0), presets=presets)
        assert session.preset.commit_probability == 1.0

    def test_custom_difficulty_name(self):
        presets = AutoplayConfig(presets={
            "frantic": DifficultyPreset(
                commit_probability=1.0, tick_interval=0.05,
            ),
        })
        session = GameSession(
            GameConfig(seed=0, difficulty="frantic"), presets=presets,
        )
        assert session.preset.tick_interval == 0.05
        assert session.tick_interval == 0.05

    def test_loaded_preset_file(self, tmp_path):
        path = tmp_path / "presets.json"
        presets = AutoplayConfig.default()
        presets.presets["frantic"] = DifficultyPreset(
            commit_probability=1.0, tick_interval=0.05, keep_heading=True,
        )
        presets.save(path)
        session = GameSession(
            GameConfig(seed=0, difficulty="frantic", autoplay=True),
            presets=AutoplayConfig.load(path),
        )
        assert session.preset.keep_heading

    def test_difficulty_missing_from_presets(self):
        with pytest.raises(ValueError, match="frantic"):
            GameSession(GameConfig(seed=0, difficulty="frantic"))


class TestHandleKey:
    def test_bindings_cover_arrows_and_wasd(self):
        for key in ("up", "arrowup", "w"):
            assert KEY_BINDINGS[key] == Direction.UP
        for key in ("a", "s", "d"):
            assert isinstance(KEY_BINDINGS[key], Direction)

    def test_command_bindings(self):
        assert KEY_BINDINGS[" "] is Action.PAUSE
        assert KEY_BINDINGS["space"] is Action.PAUSE
        assert KEY_BINDINGS["r"] is Action.RESTART

    def test_direction_keys(self):
        session = GameSession(GameConfig(seed=0))
        assert session.handle_key("W")
        assert session.state.pending_direction == Direction.UP
        assert session.handle_key("ArrowDown")
        assert session.state.pending_direction == Direction.DOWN

    def test_reverse_key_ignored(self):
        session = GameSession(GameConfig(seed=0))
        assert session.handle_key("a")
        assert session.state.pending_direction is None

    def test_pause_key(self):
        session = GameSession(GameConfig(seed=0))
        assert session.handle_key(" ")
        assert session.state.is_paused
        assert session.handle_key("space")
        assert not session.state.is_paused

    def test_unknown_key(self):
        session = GameSession(GameConfig(seed=0))
        before = session.state.copy()
        assert not session.handle_key("q")
        assert session.state == before

    def test_restart_key(self):
        session = GameSession(GameConfig(seed=0))
        session.step()
        session.step()
        assert session.handle_key("r")
        assert session.ticks == 0
        assert session.state.head == GridPoint(9, 9)


class TestStep:
    def test_manual_step_moves_right(self):
        session = GameSession(GameConfig(seed=0))
        assert session.step()
        assert session.state.head == GridPoint(10, 9)
        assert session.ticks == 1

    def test_paused_steps_not_counted(self):
        session = GameSession(GameConfig(seed=0, autoplay=True))
        session.handle_key("space")
        before = session.state.copy()
        for _ in range(5):
            assert not session.step()
        assert session.ticks == 0
        assert session.state == before

    def test_steps_after_game_over_not_counted(self):
        session = GameSession(GameConfig(columns=6, rows=6, seed=0))
        while session.step():
            pass
        assert session.state.is_game_over
        assert session.ticks == 3
        assert not session.step()
        assert session.ticks == 3

    def test_autoplay_step_requests_direction(self):
        session = GameSession(GameConfig(seed=2, autoplay=True))
        for _ in range(200):
            session.step()
            if session.state.is_game_over:
                break
            assert len(set(session.state.snake)) == len(session.state.snake)
        assert session.ticks > 0

    def test_restart_after_game_over(self):
        session = GameSession(GameConfig(columns=6, rows=6, seed=0))
        while not session.state.is_game_over:
            session.step()
        session.restart()
        assert not session.state.is_game_over
        assert session.state.score == 0


class TestRun:
    def test_stops_after_max_ticks(self):
        session = GameSession(GameConfig(seed=0, tick_interval=0.001))
        seen = []
        asyncio.run(session.run(max_ticks=5, on_tick=seen.append))
        assert len(seen) == 5
        assert session.ticks == 5
        assert session.state.head == GridPoint(14, 9)

    def test_stops_on_game_over(self):
        session = GameSession(
            GameConfig(columns=6, rows=6, seed=0, tick_interval=0.001),
        )
        state = asyncio.run(session.run())
        assert state.is_game_over
        assert session.ticks == 3

    def test_paused_intervals_do_not_use_up_max_ticks(self):
        session = GameSession(GameConfig(seed=0, tick_interval=0.001))
        session.handle_key("space")
        frames = []

        def resume_after_two_frames(state):
            frames.append(state.head)
            if len(frames) == 2:
                session.handle_key("space")

        asyncio.run(session.run(max_ticks=3, on_tick=resume_after_two_frames))
        assert len(frames) == 5
        assert session.ticks == 3
        assert session.state.head == GridPoint(12, 9)
