"""
Software rasterizer for ``rgb_array`` rendering

Fills draw commands into an ``(H, W, 3)`` uint8 array with alpha
blending. Polygons must be convex, which holds for everything
``build_frame`` emits. Text is skipped.
"""

from typing import Iterable, Sequence, Tuple

import numpy as np

from .renderer import BACKGROUND, DrawCommand, FillCircle, FillPolygon, FillRect


def rasterize(
    commands: Iterable[DrawCommand],
    width: int,
    height: int,
    background=BACKGROUND,
) -> np.ndarray:
    img = np.empty((height, width, 3), dtype=np.float32)
    img[:] = background[:3]

    for cmd in commands:
        if isinstance(cmd, FillRect):
            _fill_rect(img, cmd)
        elif isinstance(cmd, FillCircle):
            _fill_circle(img, cmd)
        elif isinstance(cmd, FillPolygon):
            _fill_polygon(img, cmd)

    return np.clip(img, 0, 255).astype(np.uint8)


def _bbox(img, x0, y0, x1, y1) -> Tuple[int, int, int, int]:
    h, w = img.shape[:2]
    return (
        max(0, int(np.floor(x0))),
        max(0, int(np.floor(y0))),
        min(w, int(np.ceil(x1))),
        min(h, int(np.ceil(y1))),
    )


def _blend(region: np.ndarray, mask, color):
    alpha = color[3] / 255.0
    rgb = np.asarray(color[:3], dtype=np.float32)
    if mask is None:
        region[:] = region * (1 - alpha) + rgb * alpha
    else:
        region[mask] = region[mask] * (1 - alpha) + rgb * alpha


def _pixel_centers(bx0, by0, bx1, by1):
    ys, xs = np.mgrid[by0:by1, bx0:bx1]
    return xs + 0.5, ys + 0.5


def _fill_rect(img, cmd: FillRect):
    bx0, by0, bx1, by1 = _bbox(img, cmd.x, cmd.y, cmd.x + cmd.w, cmd.y + cmd.h)
    if bx0 >= bx1 or by0 >= by1:
        return
    _blend(img[by0:by1, bx0:bx1], None, cmd.color)


def _fill_circle(img, cmd: FillCircle):
    r = cmd.radius
    bx0, by0, bx1, by1 = _bbox(img, cmd.x - r, cmd.y - r, cmd.x + r, cmd.y + r)
    if bx0 >= bx1 or by0 >= by1:
        return
    xs, ys = _pixel_centers(bx0, by0, bx1, by1)
    mask = (xs - cmd.x) ** 2 + (ys - cmd.y) ** 2 <= r * r
    _blend(img[by0:by1, bx0:bx1], mask, cmd.color)


def _fill_polygon(img, cmd: FillPolygon):
    pts: Sequence[Tuple[float, float]] = cmd.points
    if len(pts) < 3:
        return
    px = [p[0] for p in pts]
    py = [p[1] for p in pts]
    bx0, by0, bx1, by1 = _bbox(img, min(px), min(py), max(px), max(py))
    if bx0 >= bx1 or by0 >= by1:
        return
    xs, ys = _pixel_centers(bx0, by0, bx1, by1)

    # Inside a convex polygon: same side of every edge, either winding
    pos = np.ones(xs.shape, dtype=bool)
    neg = np.ones(xs.shape, dtype=bool)
    n = len(pts)
    for i in range(n):
        ax, ay = pts[i]
        bx, by = pts[(i + 1) % n]
        cross = (bx - ax) * (ys - ay) - (by - ay) * (xs - ax)
        pos &= cross >= 0
        neg &= cross <= 0
    _blend(img[by0:by1, bx0:bx1], pos | neg, cmd.color)
