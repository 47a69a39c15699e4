import numpy as np


def compute_speed(states):
    vel = states[:, 2:4]
    return np.linalg.norm(vel, axis=1)


def speed_drift(states):
    """Largest departure of |v| from its first-frame value."""
    speed = compute_speed(states)
    return float(np.max(np.abs(speed - speed[0])))


def containment_violations(states, radius, width, height):
    """Frame indices where the center left [-r, w+r] x [-r, h+r]."""
    x, y = states[:, 0], states[:, 1]
    outside = (x < -radius) | (x > width + radius) | (y < -radius) | (y > height + radius)
    return np.nonzero(outside)[0]


def moved_frames(states):
    """Boolean per transition: did the position change between frames t and t+1."""
    delta = np.abs(np.diff(states[:, :2], axis=0)).sum(axis=1)
    return delta > 0
