"""Tests for the collision passes"""

from starship.audio import Cue
from starship.collision import find_player_hit, resolve_projectile_hits
from starship.controls import InputSnapshot
from starship.entities import Enemy, Player, Projectile
from starship.game import GameState
from starship.pool import Pool

from conftest import place_enemy, place_projectile


def make_pools():
    return Pool(Projectile, 2), Pool(Enemy, 2)


def activate(pool, **fields):
    item = pool.acquire()
    item.active = True
    for k, v in fields.items():
        setattr(item, k, v)
    return item


class TestProjectileHits:
    """Shot x enemy pass, first hit wins"""

    def test_hit_deactivates_both(self):
        shots, enemies = make_pools()
        p = activate(shots, x=10, y=10)
        e = activate(enemies, x=0, y=0, w=30, h=30)
        assert resolve_projectile_hits(shots, enemies) == 1
        assert not p.active
        assert not e.active

    def test_first_hit_wins(self):
        shots, enemies = make_pools()
        p = activate(shots, x=10, y=10)
        first = activate(enemies, x=0, y=0, w=30, h=30)
        second = activate(enemies, x=5, y=5, w=30, h=30)
        assert resolve_projectile_hits(shots, enemies) == 1
        assert not p.active
        assert not first.active
        assert second.active

    def test_two_shots_one_enemy(self):
        shots, enemies = make_pools()
        a = activate(shots, x=10, y=10)
        b = activate(shots, x=12, y=12)
        activate(enemies, x=0, y=0, w=30, h=30)
        assert resolve_projectile_hits(shots, enemies) == 1
        assert not a.active
        assert b.active

    def test_miss(self):
        shots, enemies = make_pools()
        p = activate(shots, x=100, y=100)
        e = activate(enemies, x=0, y=0, w=30, h=30)
        assert resolve_projectile_hits(shots, enemies) == 0
        assert p.active and e.active

    def test_inactive_entities_ignored(self):
        shots, enemies = make_pools()
        p = shots.items[0]
        p.x, p.y = 10, 10
        activate(enemies, x=0, y=0, w=30, h=30)
        assert resolve_projectile_hits(shots, enemies) == 0


class TestPlayerHit:
    def test_finds_first_overlap(self):
        _, enemies = make_pools()
        player = Player(x=100, y=100)
        activate(enemies, x=0, y=0, w=30, h=30)
        hit = activate(enemies, x=110, y=110, w=30, h=30)
        assert find_player_hit(player, enemies) is hit

    def test_no_overlap(self):
        _, enemies = make_pools()
        player = Player(x=100, y=100)
        activate(enemies, x=0, y=0, w=30, h=30)
        assert find_player_hit(player, enemies) is None


class TestCollisionsInGame:
    """Both passes wired into the update step"""

    def test_score_and_cue_on_hit(self, game, cues, scores):
        place_projectile(game, x=200, y=300)
        first = place_enemy(game, x=190, y=280)
        second = place_enemy(game, x=190, y=280)
        game.update(InputSnapshot())
        assert game.score == 10
        assert not first.active
        assert second.active
        assert cues.count(Cue.HIT) == 1
        assert scores[-1] == 10

    def test_destroyed_enemy_cannot_kill_player(self, game, cues):
        player = game.player
        enemy = place_enemy(game, x=player.x, y=player.y - 20)
        place_projectile(game, x=player.x + 8, y=player.y - 5)
        game.update(InputSnapshot())
        assert not enemy.active
        assert game.state is GameState.PLAYING
        assert game.score == 10
        assert cues.count(Cue.GAME_OVER) == 0

    def test_player_collision_ends_game(self, game, cues):
        player = game.player
        place_enemy(game, x=player.x, y=player.y)
        game.update(InputSnapshot())
        assert game.state is GameState.GAME_OVER
        assert not player.alive
        assert cues.count(Cue.GAME_OVER) == 1
