"""
Frame builder

Turns a ``Snapshot`` into a flat list of draw commands in screen pixels
(origin top-left, y down). The list is executed by the arcade window or
rasterized into a numpy image; building it never touches the game.
"""

from dataclasses import dataclass
from typing import List, Tuple, Union

from .game import Snapshot
from .utils import rotated_rect

Color = Tuple[int, int, int, int]

BACKGROUND: Color = (0, 0, 0, 255)
PROJECTILE_C: Color = (167, 255, 235, 255)
ENEMY_C: Color = (155, 143, 143, 255)
SHIP_C: Color = (104, 224, 207, 255)
COCKPIT_C: Color = (5, 63, 58, 255)
GAME_OVER_C: Color = (255, 69, 0, 255)
HUD_C: Color = (230, 238, 243, 230)

GAME_OVER_TEXT = "GAME OVER"
RESTART_TEXT = "Press R to restart"


@dataclass(frozen=True)
class FillRect:
    x: float
    y: float
    w: float
    h: float
    color: Color


@dataclass(frozen=True)
class FillCircle:
    x: float
    y: float
    radius: float
    color: Color


@dataclass(frozen=True)
class FillPolygon:
    points: Tuple[Tuple[float, float], ...]
    color: Color


@dataclass(frozen=True)
class DrawText:
    text: str
    x: float
    y: float  # baseline
    size: int
    color: Color
    anchor_x: str = "left"


DrawCommand = Union[FillRect, FillCircle, FillPolygon, DrawText]


def star_alpha(layer_index: int) -> int:
    """Nearer layers are more opaque"""
    return int(round(255 * (0.08 + layer_index * 0.06)))


def build_frame(snap: Snapshot) -> List[DrawCommand]:
    cmds: List[DrawCommand] = []

    # Starfield
    for i, layer in enumerate(snap.layers):
        color = (255, 255, 255, star_alpha(i))
        for x, y, size in layer.stars:
            cmds.append(FillCircle(x, y, size, color))

    # Shots
    for p in snap.projectiles:
        cmds.append(FillRect(round(p.x), round(p.y), p.w, p.h, PROJECTILE_C))

    # Asteroids, rotated about their center
    for e in snap.enemies:
        points = tuple(rotated_rect(e.x, e.y, e.w, e.h, e.rotation))
        cmds.append(FillPolygon(points, ENEMY_C))

    if snap.player_alive:
        cmds.extend(_ship(snap))
    else:
        cx = snap.width / 2
        cy = snap.height / 2
        cmds.append(DrawText(GAME_OVER_TEXT, cx, cy - 10, 30, GAME_OVER_C, "center"))
        cmds.append(DrawText(RESTART_TEXT, cx, cy + 18, 14, GAME_OVER_C, "center"))

    cmds.append(DrawText(f"Score: {snap.score}", 10, 22, 16, HUD_C))
    return cmds


def _ship(snap: Snapshot) -> List[DrawCommand]:
    p = snap.player
    cx = p.x + p.w / 2
    cy = p.y + p.h / 2
    hull = FillPolygon(
        ((cx, cy - p.h / 2), (cx + p.w / 2, cy + p.h / 2), (cx - p.w / 2, cy + p.h / 2)),
        SHIP_C,
    )
    cockpit = FillRect(cx - 6, cy - 2, 12, 6, COCKPIT_C)
    return [hull, cockpit]
