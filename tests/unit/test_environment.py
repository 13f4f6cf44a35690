"""
Unit tests for the Gymnasium environment.
"""
import numpy as np
import pytest
from minesweeper import Board, BoardConfig, MinesweeperEnv


@pytest.fixture
def env() -> MinesweeperEnv:
    return MinesweeperEnv(BoardConfig(3, 1), render_mode="ansi")


@pytest.fixture
def corner_env(env: MinesweeperEnv, corner_mine_board: Board) -> MinesweeperEnv:
    """Environment reset, then pinned to the single corner-mine layout."""
    env.reset(seed=0)
    env.board = corner_mine_board
    return env


class TestSpaces:
    """Test observation and action spaces."""

    def test_spaces_match_board(self, env: MinesweeperEnv) -> None:
        assert env.action_space.n == 9
        assert env.observation_space.shape == (3, 3)

    def test_reset_returns_hidden_board(self, env: MinesweeperEnv) -> None:
        obs, info = env.reset(seed=42)
        assert obs.dtype == np.int8
        assert np.all(obs == -1)
        assert info["game_state"] == "PLAYING"
        assert info["total_safe"] == 8
        assert env.observation_space.contains(obs)

    def test_same_seed_same_layout(self, env: MinesweeperEnv) -> None:
        env.reset(seed=5)
        first = env.board.mines
        env.reset(seed=5)
        assert env.board.mines == first


class TestStep:
    """Test rewards and termination."""

    def test_step_before_reset_raises(self, env: MinesweeperEnv) -> None:
        with pytest.raises(RuntimeError):
            env.step(0)

    def test_safe_reveal(self, corner_env: MinesweeperEnv) -> None:
        obs, reward, terminated, truncated, info = corner_env.step(4)
        assert reward == 1.0
        assert terminated is False
        assert obs[1, 1] == 1
        assert info["revealed"] == 1

    def test_invalid_reveal_penalized(self, corner_env: MinesweeperEnv) -> None:
        corner_env.step(4)
        _, reward, terminated, _, _ = corner_env.step(4)
        assert reward == -0.1
        assert terminated is False

    def test_mine_ends_game(self, corner_env: MinesweeperEnv) -> None:
        obs, reward, terminated, _, info = corner_env.step(0)
        assert reward == -10.0
        assert terminated is True
        assert info["game_state"] == "LOST"
        assert obs[0, 0] == 9

    def test_cascade_wins(self, corner_env: MinesweeperEnv) -> None:
        _, reward, terminated, _, info = corner_env.step(8)
        assert reward == 10.0
        assert terminated is True
        assert info["game_state"] == "WON"
        assert "*" in corner_env.render()

    def test_step_after_game_over_raises(
        self, corner_env: MinesweeperEnv
    ) -> None:
        corner_env.step(0)
        with pytest.raises(RuntimeError):
            corner_env.step(4)

    def test_action_mask_tracks_hidden_cells(
        self, corner_env: MinesweeperEnv
    ) -> None:
        assert corner_env.get_action_mask().sum() == 9
        corner_env.step(4)
        mask = corner_env.get_action_mask()
        assert mask.sum() == 8
        assert not mask[4]
