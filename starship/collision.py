"""
AABB collision passes

Both passes scan in pool insertion order and stop at the first hit, so a
shot destroys at most one enemy and the player dies at most once per frame.
"""

from typing import Optional

from .entities import Enemy, Player, Projectile
from .pool import Pool
from .utils import rects_intersect


def resolve_projectile_hits(projectiles: Pool[Projectile], enemies: Pool[Enemy]) -> int:
    """Deactivate every colliding shot/enemy pair; returns the number of hits"""
    hits = 0
    for p in projectiles.active():
        for e in enemies.active():
            if rects_intersect(p, e):
                p.active = False
                e.active = False
                hits += 1
                break
    return hits


def find_player_hit(player: Player, enemies: Pool[Enemy]) -> Optional[Enemy]:
    """First active enemy overlapping the player, if any"""
    for e in enemies.active():
        if rects_intersect(player, e):
            return e
    return None
