import os

os.environ.setdefault('SDL_VIDEODRIVER', 'dummy')
os.environ.setdefault('SDL_AUDIODRIVER', 'dummy')

import pytest

from sketchball.engine import Ball, SceneConfig, SceneSimulator


@pytest.fixture
def scene():
    """400x400 scene with a known ball, motion still off."""
    sim = SceneSimulator(SceneConfig(width=400, height=400, seed=0))
    sim.initialize(Ball(x=200.0, y=200.0, dx=2.0, dy=1.0, radius=10.0, color=(255, 0, 0)))
    return sim
