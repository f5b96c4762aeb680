"""
StarshipEnv - the arcade shooter as a Gymnasium environment
-----------------------------------------------------------
- Headless: drives one ``Game`` directly, one frame per step
- MultiDiscrete action space: [move(5), fire(2)]
- Vector observation: player state + K nearest enemies
- Reward: kills, survival, shot cost, death penalty
- ``rgb_array`` rendering through the numpy rasterizer, ``human`` through
  the arcade window

Quick test:
    python -m starship.shooter_env
"""

from __future__ import annotations

from typing import Any, Dict, Optional

import numpy as np
import gymnasium as gym
from gymnasium import spaces

from .audio import CueRecorder, Cue
from .configs import GameConfig, REWARD_CONFIG
from .controls import InputSnapshot
from .game import Game
from .raster import rasterize
from .renderer import build_frame
from .utils import clamp

# move: 0 stay, 1 up, 2 down, 3 left, 4 right
_MOVES = (
    InputSnapshot(),
    InputSnapshot(up=True),
    InputSnapshot(down=True),
    InputSnapshot(left=True),
    InputSnapshot(right=True),
)


class StarshipEnv(gym.Env):
    """Gymnasium wrapper around a single game"""

    metadata = {"render_modes": ["human", "rgb_array"], "render_fps": 60}

    def __init__(
        self,
        render_mode: Optional[str] = None,
        max_steps: int = 3600,
        k_enemies: int = 5,
        reward_config: Optional[Dict[str, float]] = None,
        game_config: Optional[GameConfig] = None,
    ):
        super().__init__()

        if render_mode is not None and render_mode not in self.metadata["render_modes"]:
            raise ValueError(f"Unknown render mode: {render_mode}")
        self.render_mode = render_mode

        self.max_steps = max_steps
        self.k_enemies = k_enemies
        self.rewards = {**REWARD_CONFIG, **(reward_config or {})}

        self.config = game_config or GameConfig()
        self.metadata = {**self.metadata, "render_fps": self.config.fps}

        self.action_space = spaces.MultiDiscrete([5, 2])

        # Player: pos(2) cooldown(1)
        # Each enemy: rel pos(2) size(1) vy(1)
        obs_dim = 3 + self.k_enemies * 4
        self.observation_space = spaces.Box(
            low=-1.0, high=1.0, shape=(obs_dim,), dtype=np.float32
        )

        self._cues = CueRecorder()
        self.game = Game(self.config, audio=self._cues)
        self._step_count = 0
        self._window = None

    # ----------------------------
    # Gym API
    # ----------------------------

    def reset(self, seed: Optional[int] = None, options: Optional[dict] = None):
        super().reset(seed=seed)
        if seed is not None:
            self.game.seed(seed)

        self.game.restart()
        self._cues.clear()
        self._step_count = 0

        return self._get_obs(), self._get_info()

    def step(self, action):
        move, fire = int(action[0]), int(action[1])
        base = _MOVES[move]
        controls = InputSnapshot(
            up=base.up, down=base.down, left=base.left, right=base.right, fire=bool(fire)
        )

        self._cues.clear()
        self.game.update(controls)

        reward = self._compute_reward()

        terminated = self.game.ctx.game_over
        self._step_count += 1
        truncated = self._step_count >= self.max_steps

        if self.render_mode == "human":
            self.render()

        return self._get_obs(), reward, terminated, truncated, self._get_info()

    # ----------------------------
    # Observation / reward / info
    # ----------------------------

    def _get_obs(self) -> np.ndarray:
        cfg = self.config
        player = self.game.player
        px = player.x + player.w / 2
        py = player.y + player.h / 2

        obs_parts = [
            px / cfg.width * 2 - 1,
            py / cfg.height * 2 - 1,
            player.cooldown / max(1, player.cooldown_max) * 2 - 1,
        ]

        max_size = cfg.enemy_min_size + cfg.enemy_size_range
        max_speed = cfg.enemy_min_speed + cfg.enemy_speed_range

        enemies = sorted(
            self.game.enemies.active(),
            key=lambda e: (e.x + e.w / 2 - px) ** 2 + (e.y + e.h / 2 - py) ** 2,
        )
        for i in range(self.k_enemies):
            if i < len(enemies):
                e = enemies[i]
                dx = (e.x + e.w / 2 - px) / cfg.width
                dy = (e.y + e.h / 2 - py) / cfg.height
                obs_parts += [
                    clamp(dx, -1, 1),
                    clamp(dy, -1, 1),
                    clamp(e.w / max_size, -1, 1),
                    clamp(e.vy / max_speed, -1, 1),
                ]
            else:
                obs_parts += [0.0, 0.0, 0.0, 0.0]

        return np.array(obs_parts, dtype=np.float32)

    def _compute_reward(self) -> float:
        r = self.rewards
        reward = 0.0
        reward += r["R_KILL"] * self._cues.count(Cue.HIT)
        reward -= r["R_SHOT"] * self._cues.count(Cue.SHOT)
        if self.game.ctx.game_over:
            reward -= r["R_DEATH"]
        else:
            reward += r["R_ALIVE"]
        return float(reward)

    def _get_info(self) -> Dict[str, Any]:
        return {
            "score": self.game.score,
            "cooldown": self.game.player.cooldown,
            "num_enemies": self.game.enemies.count_active(),
            "num_projectiles": self.game.projectiles.count_active(),
            "step": self._step_count,
        }

    # ----------------------------
    # Rendering
    # ----------------------------

    def render(self):
        if self.render_mode is None:
            return None

        if self.render_mode == "rgb_array":
            frame = build_frame(self.game.snapshot())
            return rasterize(frame, self.config.width, self.config.height)

        if self._window is None:
            from .window import StarshipWindow
            self._window = StarshipWindow(game=self.game)

        self._window.dispatch_events()
        self._window.on_draw()
        self._window.flip()
        return None

    def close(self):
        if self._window is not None:
            self._window.close()
            self._window = None


# ----------------------------
# Quick sanity test
# ----------------------------

def run_random_episode(render: bool = False, seed: int = 42) -> float:
    """Run one episode with random actions and return its total reward"""
    env = StarshipEnv(render_mode="human" if render else None)
    obs, info = env.reset(seed=seed)
    env.action_space.seed(seed)

    terminated = False
    truncated = False
    total = 0.0

    while not (terminated or truncated):
        action = env.action_space.sample()
        obs, reward, terminated, truncated, info = env.step(action)
        total += reward

    print(f"Random episode return: {total:.2f}  score: {info['score']}  steps: {info['step']}")
    env.close()
    return total


if __name__ == "__main__":
    run_random_episode(render=True)
