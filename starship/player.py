"""
Player controller: movement, clamping and firing
"""

import random
from typing import Optional

from .configs import GameConfig
from .controls import InputSnapshot
from .entities import Player, Projectile
from .pool import Pool
from .utils import clamp


def make_player(config: GameConfig) -> Player:
    """Player at the initial centered position"""
    player = Player(
        x=0.0,
        y=0.0,
        w=config.player_width,
        h=config.player_height,
        speed=config.player_speed,
        cooldown_max=config.cooldown_frames,
    )
    reset_player(player, config)
    return player


def reset_player(player: Player, config: GameConfig):
    player.x = config.width / 2 - player.w / 2
    player.y = config.height - config.player_bottom_offset
    player.cooldown = 0
    player.alive = True


def move_player(player: Player, controls: InputSnapshot, config: GameConfig):
    """Apply held directions at full speed, then keep the ship on screen"""
    if controls.left:
        player.x -= player.speed
    if controls.right:
        player.x += player.speed
    if controls.up:
        player.y -= player.speed
    if controls.down:
        player.y += player.speed

    m = config.margin
    player.x = clamp(player.x, m, config.width - player.w - m)
    player.y = clamp(player.y, m, config.height - player.h - m)


def fire_projectile(
    player: Player,
    pool: Pool[Projectile],
    config: GameConfig,
    rng: random.Random,
) -> Optional[Projectile]:
    """Launch a shot from the nose of the ship; None while cooling down"""
    if player.cooldown > 0:
        return None

    p = pool.acquire()
    p.active = True
    p.w = config.projectile_width
    p.h = config.projectile_height
    p.x = player.x + player.w / 2 - p.w / 2
    p.y = player.y - p.h - config.projectile_gap
    p.vy = -config.projectile_speed - rng.random() * config.projectile_speed_jitter
    player.cooldown = player.cooldown_max
    return p


def tick_cooldown(player: Player):
    if player.cooldown > 0:
        player.cooldown -= 1


def update_projectiles(pool: Pool[Projectile]):
    """Move shots and retire the ones that left the top of the screen"""
    for p in pool.active():
        p.y += p.vy
        if p.y + p.h < 0:
            p.active = False
