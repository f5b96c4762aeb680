"""Game, environment and sound configuration"""

from .game_config import (
    GameConfig,
    GAME_CONFIG,
    ENV_CONFIG,
    REWARD_CONFIG,
    SOUND_CONFIG,
)

__all__ = ['GameConfig', 'GAME_CONFIG', 'ENV_CONFIG', 'REWARD_CONFIG', 'SOUND_CONFIG']
