"""
Segment geometry for ball-vs-stroke collisions.

All functions take plain (x, y) pairs or Points and return Python floats, so
the engine can call them per segment without building arrays.
"""

import numpy as np
from typing import Optional, Tuple

Vec2 = Tuple[float, float]


def segment_length(start, end) -> float:
    return float(np.hypot(end[0] - start[0], end[1] - start[1]))


def closest_point_on_segment(start, end, center) -> Optional[Vec2]:
    """
    Project `center` onto the segment, clamped to [0, length].
    Returns None for a zero-length segment.
    """
    length = segment_length(start, end)
    if length == 0.0:
        return None

    ux = (end[0] - start[0]) / length
    uy = (end[1] - start[1]) / length
    projection = (center[0] - start[0]) * ux + (center[1] - start[1]) * uy
    t = max(0.0, min(length, projection))
    return (start[0] + ux * t, start[1] + uy * t)


def segment_circle_collision(start, end, center, radius: float) -> bool:
    closest = closest_point_on_segment(start, end, center)
    if closest is None:
        return False
    distance = np.hypot(center[0] - closest[0], center[1] - closest[1])
    return bool(distance <= radius)


def segment_normal(start, end) -> Vec2:
    """Unit normal (sin a, -cos a) where a is the segment's heading."""
    angle = np.arctan2(end[1] - start[1], end[0] - start[0])
    return (float(np.sin(angle)), float(-np.cos(angle)))


def reflect(dx: float, dy: float, normal: Vec2) -> Vec2:
    """v' = v - 2(v.n)n"""
    dot = dx * normal[0] + dy * normal[1]
    return (dx - 2 * dot * normal[0], dy - 2 * dot * normal[1])
