"""
Scripted baseline policies

Both take the environment observation and return a MultiDiscrete action
``[move, fire]`` (move: 0 stay, 1 up, 2 down, 3 left, 4 right).
"""

from typing import Optional

import numpy as np

STAY, UP, DOWN, LEFT, RIGHT = range(5)


class RandomPolicy:
    """Uniform random actions"""

    def __init__(self, action_space, seed: Optional[int] = None):
        self.action_space = action_space
        if seed is not None:
            self.action_space.seed(seed)

    def __call__(self, obs: np.ndarray) -> np.ndarray:
        return self.action_space.sample()


class DodgePolicy:
    """Keeps firing; sidesteps the nearest enemy above when it gets close,
    otherwise lines up under it.

    Reads the layout produced by ``StarshipEnv``: three player values, then
    (dx, dy, size, vy) per enemy sorted nearest first.
    """

    def __init__(self, danger_dy: float = 0.35, danger_dx: float = 0.08, align_dx: float = 0.01):
        self.danger_dy = danger_dy
        self.danger_dx = danger_dx
        self.align_dx = align_dx

    def __call__(self, obs: np.ndarray) -> np.ndarray:
        enemies = np.asarray(obs[3:], dtype=np.float32).reshape(-1, 4)
        # Empty slots are all zeros
        present = np.any(enemies != 0.0, axis=1)
        above = present & (enemies[:, 1] < 0)

        move = STAY
        if np.any(above):
            dx, dy = enemies[above][0][:2]
            if -dy < self.danger_dy and abs(dx) < self.danger_dx:
                move = LEFT if dx > 0 else RIGHT
            elif dx > self.align_dx:
                move = RIGHT
            elif dx < -self.align_dx:
                move = LEFT
        return np.array([move, 1], dtype=np.int64)


def make_policy(name: str, env, seed: Optional[int] = None):
    if name == "random":
        return RandomPolicy(env.action_space, seed=seed)
    elif name == "dodge":
        return DodgePolicy()
    raise ValueError(f"Unknown policy: {name}")
