"""
Configuration for the starship game
Fixed gameplay constants, environment and reward settings
"""

from dataclasses import dataclass, fields
from typing import Any, Dict, Tuple


@dataclass
class GameConfig:
    """All speeds are in pixels (or radians) per frame"""
    # Viewport (supplied by the host surface)
    width: int = 800
    height: int = 600
    fps: int = 60

    # Player
    player_width: float = 36.0
    player_height: float = 48.0
    player_speed: float = 4.2
    player_bottom_offset: float = 80.0  # initial y is height - offset
    margin: float = 4.0
    cooldown_frames: int = 12

    # Projectiles
    projectile_width: float = 4.0
    projectile_height: float = 10.0
    projectile_speed: float = 7.0
    projectile_speed_jitter: float = 1.5
    projectile_gap: float = 4.0  # spawn distance above the ship
    projectile_pool_size: int = 20

    # Enemies
    enemy_pool_size: int = 12
    spawn_interval: int = 60  # frames between spawns
    enemy_min_size: float = 24.0
    enemy_size_range: float = 20.0
    enemy_min_speed: float = 1.2
    enemy_speed_range: float = 1.8
    enemy_max_rotation_speed: float = 0.03
    enemy_spawn_gap: float = 10.0  # spawn distance above the top edge
    enemy_despawn_margin: float = 50.0

    # Scoring
    score_per_hit: int = 10

    # Parallax: one speed per layer, nearer layers last
    parallax_speeds: Tuple[float, ...] = (0.2, 0.6, 1.2)
    parallax_base_count: int = 60
    parallax_count_step: int = 20
    parallax_min_star_size: float = 0.3

    @classmethod
    def from_dict(cls, params: Dict[str, Any]) -> "GameConfig":
        """Build a config from a dict, ignoring unknown keys"""
        known = {f.name for f in fields(cls)}
        kwargs = {k: v for k, v in params.items() if k in known}
        if "parallax_speeds" in kwargs:
            kwargs["parallax_speeds"] = tuple(kwargs["parallax_speeds"])
        return cls(**kwargs)


# Game parameters
GAME_CONFIG = {
    "width": 800,
    "height": 600,
    "fps": 60,
    "spawn_interval": 60,
    "cooldown_frames": 12,
    "score_per_hit": 10,
}

# Environment parameters
ENV_CONFIG = {
    # "render_mode": None,  # rendering slows evaluation down considerably
    "max_steps": 3600,  # 60 seconds at 60 FPS
    "k_enemies": 5,
}

# ==============================================================================
# REWARD SHAPING
# ==============================================================================

REWARD_CONFIG = {
    "R_KILL": 1.0,      # Reward per enemy destroyed
    "R_SHOT": 0.01,     # Penalty per shot fired
    "R_ALIVE": 0.001,   # Small reward for every tick survived
    "R_DEATH": 5.0,     # Game over penalty
}

# ==============================================================================
# SOUND
# ==============================================================================

SOUND_CONFIG = {
    "sound_dir": "assets",
    "shot": "shoot-hit.mp3",
    "hit": "shoot-hit.mp3",
    "game_over": "game-over.mp3",
    "volume": 1.0,
}
