"""
Game loop and state machine
---------------------------
One ``Game`` owns a ``GameContext`` (player, pools, starfield, score and
game-over flag) and advances it one frame per ``update`` call.

- Playing: move the ship, fire, move shots, spawn and move enemies,
  resolve collisions, scroll the starfield
- GameOver: nothing moves; the game-over cue is guaranteed to have played
- Restart: back to Playing with every pooled entity deactivated; pools
  keep their size

Speeds are per frame, not per second, so the simulation runs at whatever
rate the host calls ``update``.
"""

from __future__ import annotations

import random
from dataclasses import dataclass, field
from enum import Enum
from typing import Callable, List, Optional, Tuple

from .audio import AudioSink, Cue, NullAudio
from .collision import find_player_hit, resolve_projectile_hits
from .configs import GameConfig
from .controls import InputSnapshot
from .entities import Enemy, ParallaxLayer, Player, Projectile
from .parallax import advance_parallax, init_parallax
from .player import (
    fire_projectile,
    make_player,
    move_player,
    reset_player,
    tick_cooldown,
    update_projectiles,
)
from .pool import Pool
from .spawner import Spawner, update_enemies


class GameState(Enum):
    PLAYING = "playing"
    GAME_OVER = "game_over"


@dataclass
class GameContext:
    """Everything the loop mutates"""
    config: GameConfig
    rng: random.Random
    player: Player
    projectiles: Pool[Projectile]
    enemies: Pool[Enemy]
    layers: List[ParallaxLayer]
    score: int = 0
    game_over: bool = False
    game_over_cue_played: bool = False


# ----------------------------
# Read-only views for rendering
# ----------------------------

@dataclass(frozen=True)
class BoxView:
    x: float
    y: float
    w: float
    h: float


@dataclass(frozen=True)
class EnemyView:
    x: float
    y: float
    w: float
    h: float
    rotation: float


@dataclass(frozen=True)
class LayerView:
    speed: float
    stars: Tuple[Tuple[float, float, float], ...]  # (x, y, size)


@dataclass(frozen=True)
class Snapshot:
    """Immutable copy of what the renderer needs for one frame"""
    width: int
    height: int
    score: int
    game_over: bool
    player: BoxView
    player_alive: bool
    projectiles: Tuple[BoxView, ...] = field(default_factory=tuple)
    enemies: Tuple[EnemyView, ...] = field(default_factory=tuple)
    layers: Tuple[LayerView, ...] = field(default_factory=tuple)


class Game:
    """Single-player arcade shooter"""

    def __init__(
        self,
        config: Optional[GameConfig] = None,
        audio: Optional[AudioSink] = None,
        on_score: Optional[Callable[[int], None]] = None,
        seed: Optional[int] = None,
    ):
        self.config = config or GameConfig()
        self.audio = audio if audio is not None else NullAudio()
        self.on_score = on_score

        cfg = self.config
        rng = random.Random(seed)
        self.ctx = GameContext(
            config=cfg,
            rng=rng,
            player=make_player(cfg),
            projectiles=Pool(Projectile, cfg.projectile_pool_size),
            enemies=Pool(Enemy, cfg.enemy_pool_size),
            layers=init_parallax(cfg, rng),
        )
        self.spawner = Spawner(cfg, self.ctx.enemies, rng)
        self.restart()

    # ----------------------------
    # State
    # ----------------------------

    @property
    def state(self) -> GameState:
        return GameState.GAME_OVER if self.ctx.game_over else GameState.PLAYING

    @property
    def score(self) -> int:
        return self.ctx.score

    @property
    def player(self) -> Player:
        return self.ctx.player

    @property
    def projectiles(self) -> Pool[Projectile]:
        return self.ctx.projectiles

    @property
    def enemies(self) -> Pool[Enemy]:
        return self.ctx.enemies

    def seed(self, seed: Optional[int]):
        self.ctx.rng.seed(seed)

    # ----------------------------
    # Transitions
    # ----------------------------

    def restart(self):
        """Back to Playing; pools are emptied, never shrunk"""
        ctx = self.ctx
        ctx.score = 0
        ctx.game_over = False
        ctx.game_over_cue_played = False
        reset_player(ctx.player, ctx.config)
        ctx.projectiles.deactivate_all()
        ctx.enemies.deactivate_all()
        self.spawner.reset()
        self._notify_score()

    def _end_game(self):
        ctx = self.ctx
        ctx.game_over = True
        ctx.player.alive = False
        self._play_game_over()

    def _play_game_over(self):
        if not self.ctx.game_over_cue_played:
            self.ctx.game_over_cue_played = True
            self.audio.emit(Cue.GAME_OVER)

    def _notify_score(self):
        if self.on_score is not None:
            self.on_score(self.ctx.score)

    # ----------------------------
    # Loop
    # ----------------------------

    def tick(self, controls: InputSnapshot):
        """One host frame: handle a restart request, then update"""
        if controls.restart:
            self.restart()
        self.update(controls)

    def update(self, controls: InputSnapshot):
        ctx = self.ctx
        cfg = ctx.config

        if ctx.game_over:
            self._play_game_over()
            return

        player = ctx.player
        move_player(player, controls, cfg)

        if controls.fire:
            if fire_projectile(player, ctx.projectiles, cfg, ctx.rng) is not None:
                self.audio.emit(Cue.SHOT)
        tick_cooldown(player)

        update_projectiles(ctx.projectiles)

        self.spawner.update()
        update_enemies(ctx.enemies, cfg)

        hits = resolve_projectile_hits(ctx.projectiles, ctx.enemies)
        if hits:
            for _ in range(hits):
                self.audio.emit(Cue.HIT)
            ctx.score += hits * cfg.score_per_hit
            self._notify_score()

        if find_player_hit(player, ctx.enemies) is not None:
            self._end_game()

        advance_parallax(ctx.layers, cfg.height)

    def snapshot(self) -> Snapshot:
        ctx = self.ctx
        p = ctx.player
        return Snapshot(
            width=ctx.config.width,
            height=ctx.config.height,
            score=ctx.score,
            game_over=ctx.game_over,
            player=BoxView(p.x, p.y, p.w, p.h),
            player_alive=p.alive,
            projectiles=tuple(BoxView(b.x, b.y, b.w, b.h) for b in ctx.projectiles.active()),
            enemies=tuple(
                EnemyView(e.x, e.y, e.w, e.h, e.rotation) for e in ctx.enemies.active()
            ),
            layers=tuple(
                LayerView(layer.speed, tuple((s.x, s.y, s.size) for s in layer.stars))
                for layer in ctx.layers
            ),
        )
