"""
Parallax starfield

Cosmetic only; nothing here touches gameplay state.
"""

import random
from typing import List

from .configs import GameConfig
from .entities import ParallaxLayer, Star


def init_parallax(config: GameConfig, rng: random.Random) -> List[ParallaxLayer]:
    """Build one layer per configured speed.

    Far layers (low index) get more, smaller stars; each nearer layer drops
    ``parallax_count_step`` stars and widens the size range by one pixel.
    """
    layers = []
    for i, speed in enumerate(config.parallax_speeds):
        count = max(0, config.parallax_base_count - i * config.parallax_count_step)
        stars = [
            Star(
                x=rng.random() * config.width,
                y=rng.random() * config.height,
                size=rng.random() * (i + 1) + config.parallax_min_star_size,
            )
            for _ in range(count)
        ]
        layers.append(ParallaxLayer(speed=speed, stars=stars))
    return layers


def advance_parallax(layers: List[ParallaxLayer], height: float):
    """Scroll every star down by its layer speed, wrapping to the top"""
    for layer in layers:
        for s in layer.stars:
            s.y += layer.speed
            if s.y > height:
                s.y = 0.0
