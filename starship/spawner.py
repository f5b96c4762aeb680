"""
Timer-driven enemy spawning and enemy motion
"""

import math
import random

from .configs import GameConfig
from .entities import Enemy
from .pool import Pool


class Spawner:
    """Spawns one enemy every ``spawn_interval`` updates"""

    def __init__(self, config: GameConfig, pool: Pool[Enemy], rng: random.Random):
        self.config = config
        self.pool = pool
        self.rng = rng
        self.timer = 0

    def reset(self):
        self.timer = 0

    def update(self):
        self.timer += 1
        if self.timer >= self.config.spawn_interval:
            self.timer = 0
            self.spawn()

    def spawn(self) -> Enemy:
        cfg = self.config
        rng = self.rng

        e = self.pool.acquire()
        e.active = True
        e.w = cfg.enemy_min_size + rng.random() * cfg.enemy_size_range
        e.h = e.w
        e.x = rng.random() * (cfg.width - e.w)
        e.y = -e.h - cfg.enemy_spawn_gap
        e.vy = cfg.enemy_min_speed + rng.random() * cfg.enemy_speed_range
        e.rotation_speed = (rng.random() - 0.5) * 2 * cfg.enemy_max_rotation_speed
        e.rotation = rng.random() * math.pi * 2
        return e


def update_enemies(pool: Pool[Enemy], config: GameConfig):
    """Move and spin enemies; retire those well below the screen"""
    limit = config.height + config.enemy_despawn_margin
    for e in pool.active():
        e.y += e.vy
        e.rotation += e.rotation_speed
        if e.y > limit:
            e.active = False
