"""
Game entity dataclasses

Positions are the top-left corner of the bounding box, in pixels.
"""

from dataclasses import dataclass, field
from typing import List


@dataclass
class Projectile:
    """Player shot travelling upward"""
    x: float = 0.0
    y: float = 0.0
    w: float = 4.0
    h: float = 10.0
    vy: float = -7.0
    active: bool = False


@dataclass
class Enemy:
    """Descending asteroid"""
    x: float = 0.0
    y: float = 0.0
    w: float = 32.0
    h: float = 32.0
    vy: float = 1.2
    active: bool = False
    rotation: float = 0.0
    rotation_speed: float = 0.0


@dataclass
class Player:
    """The ship controlled by the player"""
    x: float
    y: float
    w: float = 36.0
    h: float = 48.0
    speed: float = 4.2
    cooldown: int = 0  # frames until the next shot is allowed
    cooldown_max: int = 12
    alive: bool = True


@dataclass
class Star:
    """Background point"""
    x: float
    y: float
    size: float


@dataclass
class ParallaxLayer:
    """Stars scrolling at one speed"""
    speed: float
    stars: List[Star] = field(default_factory=list)
