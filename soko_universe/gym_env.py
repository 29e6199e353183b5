"""Gymnasium environment wrapper for the crate-pushing puzzle.

Provides a structured observation that pairs a rendered RGBA image with a
small status dictionary. Reward is the change in the number of crates on
goals per step, plus a bonus on the step that solves the level.
``terminated`` is ``True`` once the level is solved; ``truncated`` is ``True``
when the optional ``max_steps`` budget runs out.

Observation schema:

``{"image": np.ndarray(H,W,4), "info": {"crates_on_goal", "crate_count", "turn", "pushes", "phase"}}``

Usage:

``env = SokobanEnv(level_name="classic")``

Blocked moves are valid actions: they leave the puzzle unchanged and earn no
reward.
"""

from typing import Any, Dict, Optional, Tuple

import gymnasium as gym
import numpy as np
from gymnasium import spaces
from PIL.Image import Image as PILImage

from soko_universe.actions import GymAction, gym_action_to_action
from soko_universe.levels.builtin import DEFAULT_LEVEL_NAME, get_level
from soko_universe.levels.codec import LevelData
from soko_universe.renderer.texture import (
    DEFAULT_ASSET_ROOT,
    DEFAULT_RESOLUTION,
    TextureMap,
    TextureRenderer,
)
from soko_universe.universe import Universe

ObsType = Dict[str, Any]

SOLVED_BONUS = 1.0


def status_observation_dict(universe: Universe) -> Dict[str, Any]:
    """Status portion of the observation."""
    return {
        "crates_on_goal": universe.count_crates_on_goal(),
        "crate_count": universe.crate_count(),
        "turn": universe.turn(),
        "pushes": universe.pushes(),
        "phase": "win" if universe.has_won() else "ongoing",
    }


class SokobanEnv(gym.Env[ObsType, np.integer]):
    """Gymnasium ``Env`` around a :class:`Universe`.

    The action space is ``Discrete(len(GymAction))``; see
    :mod:`soko_universe.actions`.
    """

    metadata = {"render_modes": ["human", "texture"]}

    def __init__(
        self,
        level: Optional[LevelData] = None,
        level_name: str = DEFAULT_LEVEL_NAME,
        render_mode: str = "texture",
        render_resolution: int = DEFAULT_RESOLUTION,
        render_texture_map: Optional[TextureMap] = None,
        asset_root: str = DEFAULT_ASSET_ROOT,
        max_steps: Optional[int] = None,
    ):
        """Create a new environment instance.

        Arguments:
            level: Level rows or string. Overrides ``level_name`` when given.
            level_name: Built-in level to play when ``level`` is None.
            render_mode: "texture" to return PIL images, "human" to open a window.
            render_resolution: Target image width in pixels.
            render_texture_map: Tile name to asset path mapping.
            asset_root: Directory the texture paths are relative to.
            max_steps: Truncate episodes after this many steps if given.
        """
        if level is None:
            level = get_level(level_name)
        self._level = level
        self._render_mode = render_mode
        self._max_steps = max_steps
        self._steps = 0
        self._renderer = TextureRenderer(
            resolution=render_resolution,
            texture_map=render_texture_map,
            asset_root=asset_root,
        )

        self.universe: Universe = Universe.from_level(self._level)
        width, height = self.universe.width(), self.universe.height()
        cell_size = max(1, render_resolution // width)

        def int_box(low: int, high: int) -> spaces.Box:
            return spaces.Box(
                low=np.array(low, dtype=np.int64),
                high=np.array(high, dtype=np.int64),
                shape=(),
                dtype=np.int64,
            )

        self.observation_space = spaces.Dict(
            {
                "image": spaces.Box(
                    low=0,
                    high=255,
                    shape=(height * cell_size, width * cell_size, 4),
                    dtype=np.uint8,
                ),
                "info": spaces.Dict(
                    {
                        "crates_on_goal": int_box(0, width * height),
                        "crate_count": int_box(0, width * height),
                        "turn": int_box(0, 1_000_000_000),
                        "pushes": int_box(0, 1_000_000_000),
                        "phase": spaces.Text(max_length=32),
                    }
                ),
            }
        )

        self.action_space = spaces.Discrete(len(GymAction))

    def reset(
        self, *, seed: Optional[int] = None, options: Optional[Dict[str, Any]] = None
    ) -> Tuple[ObsType, Dict[str, Any]]:
        """Start a new episode on a fresh copy of the level.

        Arguments:
            seed: Forwarded to Gymnasium's RNG seeding; levels are deterministic.
            options: Gymnasium options (unused).
        """
        super().reset(seed=seed)
        self.universe = Universe.from_level(self._level)
        self._steps = 0
        return self._get_obs(), self._get_info()

    def step(
        self, action: np.integer
    ) -> Tuple[ObsType, float, bool, bool, Dict[str, Any]]:
        """Apply one environment step.

        Arguments:
            action: Integer index into the ``GymAction`` enum.

        Returns:
            (observation, reward, terminated, truncated, info)
        """
        if not 0 <= int(action) < len(GymAction):
            raise ValueError(f"Invalid action: {action}")

        was_won = self.universe.has_won()
        prev_on_goal = self.universe.count_crates_on_goal()
        accepted = self.universe.move(gym_action_to_action(int(action)))
        self._steps += 1

        reward = float(self.universe.count_crates_on_goal() - prev_on_goal)
        terminated = self.universe.has_won()
        if terminated and not was_won:
            reward += SOLVED_BONUS
        truncated = (
            not terminated
            and self._max_steps is not None
            and self._steps >= self._max_steps
        )
        info = self._get_info()
        info["accepted"] = accepted
        return self._get_obs(), reward, terminated, truncated, info

    def render(self, mode: Optional[str] = None) -> Optional[PILImage]:  # type: ignore
        """Render the current frame.

        Args:
            mode: "human" to display, "texture" to return a PIL image. Defaults to
                the instance's configured render mode.
        """
        render_mode = mode or self._render_mode
        img = self._renderer.render(self.universe)
        if render_mode == "human":
            img.show()
            return None
        elif render_mode == "texture":
            return img
        else:
            raise NotImplementedError(f"Render mode '{render_mode}' not supported.")

    def _get_obs(self) -> ObsType:
        img = self._renderer.render(self.universe)
        return {"image": np.array(img), "info": status_observation_dict(self.universe)}

    def _get_info(self) -> Dict[str, Any]:
        return {"steps": self._steps}

    def close(self) -> None:
        pass
