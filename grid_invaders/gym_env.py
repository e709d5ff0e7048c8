"""Gymnasium environment wrapper for Grid Invaders.

Provides an observation that pairs the rasterized board (as a ``uint8``
array of :class:`~grid_invaders.types.Cell` values) with an info dictionary
(score, lives, tick, phase, shot interval). Reward is the delta of
``state.score`` per step. ``terminated`` is ``True`` once the game-over latch
closes; episodes are never truncated by the environment itself.

Observation schema:

``{"board": np.ndarray(N,N), "info": {"score": int, "lives": int, "tick": int, "phase": str, "shot_interval": int}}``

Usage:

``env = GridInvadersEnv(seed=7)``

Each ``step`` feeds one tick to :func:`grid_invaders.step.advance`; the tick
counter is owned by the environment.
"""

import gymnasium as gym
import numpy as np
from typing import Any, Dict, Optional, Tuple

from grid_invaders.actions import GymAction, Input
from grid_invaders.config import DEFAULT_CONFIG, GameConfig
from grid_invaders.levels.wave import initial_state
from grid_invaders.state import State
from grid_invaders.step import advance
from grid_invaders.types import Cell
from grid_invaders.utils.board import board_to_array, board_to_str

ObsType = Dict[str, Any]


def env_status_observation_dict(state: State) -> Dict[str, Any]:
    """Status portion of observation (score, lives, phase, tick).

    ``phase`` is ``"ongoing"`` or ``"lose"``; both fit the default
    alphanumeric ``spaces.Text`` charset.
    """
    return {
        "score": int(state.score),
        "lives": int(state.player_lives),
        "tick": int(state.tick),
        "phase": "lose" if state.is_game_over else "ongoing",
        "shot_interval": int(state.shot_interval),
    }


class GridInvadersEnv(gym.Env[ObsType, np.integer]):
    """Gymnasium ``Env`` implementation for Grid Invaders.

    The action space is ``Discrete(len(GymAction))``; see
    :mod:`grid_invaders.actions`.
    """

    metadata = {"render_modes": ["ansi"]}

    def __init__(
        self,
        render_mode: str = "ansi",
        config: GameConfig = DEFAULT_CONFIG,
        seed: Optional[int] = None,
    ):
        """Create a new environment instance.

        Arguments:
            render_mode: Only "ansi" (text board) is supported.
            config: Game parameters forwarded to ``initial_state``.
            seed: Base seed for invader fire targeting.
        """
        from gymnasium import spaces

        self.render_mode = render_mode
        self.config = config
        self._seed = seed
        self.state: Optional[State] = None

        size = config.board_size

        def int_box(low: int, high: int) -> spaces.Box:
            return spaces.Box(
                low=np.array(low, dtype=np.int64),
                high=np.array(high, dtype=np.int64),
                shape=(),
                dtype=np.int64,
            )

        self.observation_space = spaces.Dict(
            {
                "board": spaces.Box(
                    low=0,
                    high=int(max(Cell)),
                    shape=(size, size),
                    dtype=np.uint8,
                ),
                "info": spaces.Dict(
                    {
                        "score": int_box(0, 1_000_000_000),
                        "lives": int_box(-1_000_000, 1_000_000),
                        "tick": int_box(0, 1_000_000_000),
                        "phase": spaces.Text(max_length=32),
                        "shot_interval": int_box(1, 1_000_000),
                    }
                ),
            }
        )
        self.action_space = spaces.Discrete(len(GymAction))

        self.reset()

    def reset(
        self, *, seed: Optional[int] = None, options: Optional[Dict[str, object]] = None
    ) -> Tuple[ObsType, Dict[str, object]]:
        """Start a new episode.

        Arguments:
            seed: Overrides the construction-time seed when given.
            options: Gymnasium options (unused).

        Returns:
            Observation dict and info dict per Gymnasium API.
        """
        super().reset(seed=seed)
        if seed is not None:
            self._seed = seed
        self.state = initial_state(self.config, seed=self._seed)
        return self._get_obs(), self._get_info()

    def step(
        self, action: np.integer
    ) -> Tuple[ObsType, float, bool, bool, Dict[str, object]]:
        """Apply one environment step.

        Arguments:
            action: Integer index into the ``GymAction`` enum.

        Returns:
            (observation, reward, terminated, truncated, info)
        """
        assert self.state is not None

        if not 0 <= int(action) < len(GymAction):
            raise ValueError(f"Invalid action: {action}")
        key = GymAction(int(action)).key

        prev_score = self.state.score
        self.state = advance(self.state, Input(tick=self.state.tick + 1, key=key))
        reward = float(self.state.score - prev_score)
        terminated = self.state.is_game_over
        return self._get_obs(), reward, terminated, False, self._get_info()

    def render(self, mode: Optional[str] = None) -> Optional[str]:  # type: ignore
        """Render the current board as text."""
        render_mode = mode or self.render_mode
        assert self.state is not None
        if render_mode == "ansi":
            return board_to_str(self.state.board)
        raise NotImplementedError(f"Render mode '{render_mode}' not supported.")

    def _get_obs(self) -> ObsType:
        assert self.state is not None
        return {
            "board": board_to_array(self.state.board),
            "info": env_status_observation_dict(self.state),
        }

    def _get_info(self) -> Dict[str, object]:
        return {}
