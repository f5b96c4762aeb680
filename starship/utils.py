"""
Utility functions for game mechanics
"""

from __future__ import annotations
import math
from typing import List, Tuple


def clamp(x: float, lo: float, hi: float) -> float:
    """Clamp value between low and high bounds"""
    return lo if x < lo else hi if x > hi else x


def rects_intersect(a, b) -> bool:
    """AABB overlap test; boxes that only touch do not intersect.

    Both arguments need ``x``, ``y``, ``w`` and ``h`` attributes.
    """
    return a.x < b.x + b.w and a.x + a.w > b.x and a.y < b.y + b.h and a.y + a.h > b.y


def rotated_rect(x: float, y: float, w: float, h: float, angle: float) -> List[Tuple[float, float]]:
    """Corners of a box rotated by ``angle`` radians about its center"""
    cx = x + w / 2
    cy = y + h / 2
    c = math.cos(angle)
    s = math.sin(angle)
    corners = [(-w / 2, -h / 2), (w / 2, -h / 2), (w / 2, h / 2), (-w / 2, h / 2)]
    return [(cx + px * c - py * s, cy + px * s + py * c) for px, py in corners]
