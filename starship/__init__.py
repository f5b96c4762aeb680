"""Starship - single-screen arcade shooter"""

from .configs import GameConfig
from .game import Game, GameState, Snapshot
from .shooter_env import StarshipEnv, run_random_episode

__all__ = ['Game', 'GameConfig', 'GameState', 'Snapshot', 'StarshipEnv', 'run_random_episode']
