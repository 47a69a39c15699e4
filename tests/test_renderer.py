import numpy as np
import pygame
import pytest

import sketchball as S
from sketchball.engine import Ball, SceneConfig, SceneSimulator, replay_stroke
from sketchball.renderer import AppearanceConfig, Renderer


@pytest.fixture
def small_scene():
    sim = SceneSimulator(SceneConfig(width=400, height=300, seed=2))
    sim.initialize(Ball(x=200.0, y=220.0, dx=1.0, dy=0.0, radius=10.0, color=(200, 30, 30)))
    return sim


def test_render_frame_contents(small_scene):
    replay_stroke(small_scene, [(20, 270), (120, 270)])
    frame = Renderer(small_scene).render()
    assert frame.shape == (300, 400, 3)
    assert frame.dtype == np.uint8
    assert tuple(frame[299, 399]) == S.BG_COLOR
    assert tuple(frame[220, 200]) == (200, 30, 30)
    assert (frame[268:273, 70] == 0).all(axis=1).any()


def test_render_does_not_step_unless_asked(small_scene):
    replay_stroke(small_scene, [(20, 270), (120, 270)])
    renderer = Renderer(small_scene)
    renderer.render()
    assert small_scene.ball.x == 200.0
    renderer.render(advance=True)
    assert small_scene.ball.x == 201.0
    assert small_scene.frame == 1


def test_events_drive_stroke_capture(small_scene):
    renderer = Renderer(small_scene)
    assert renderer.handle_event(pygame.event.Event(pygame.MOUSEBUTTONDOWN, pos=(10, 10), button=1))
    assert renderer.handle_event(pygame.event.Event(pygame.MOUSEMOTION, pos=(20, 20), rel=(10, 10), buttons=(1, 0, 0)))
    assert renderer.handle_event(pygame.event.Event(pygame.MOUSEBUTTONUP, pos=(20, 20), button=1))
    assert [tuple(p) for p in small_scene.lines[0].points] == [(10, 10), (20, 20)]
    assert small_scene.is_moving


def test_right_button_is_ignored(small_scene):
    renderer = Renderer(small_scene)
    renderer.handle_event(pygame.event.Event(pygame.MOUSEBUTTONDOWN, pos=(10, 10), button=3))
    assert small_scene.current_line is None


def test_window_leave_commits_stroke(small_scene):
    renderer = Renderer(small_scene)
    small_scene.pointer_down(1, 1)
    small_scene.pointer_move(5, 5)
    renderer.handle_event(pygame.event.Event(pygame.WINDOWLEAVE))
    assert len(small_scene.lines) == 1


def test_resize_event_updates_bounds_only(small_scene):
    renderer = Renderer(small_scene)
    renderer.handle_event(pygame.event.Event(pygame.VIDEORESIZE, w=640, h=480, size=(640, 480)))
    assert (small_scene.width, small_scene.height) == (640, 480)
    assert (small_scene.ball.x, small_scene.ball.y) == (200.0, 220.0)


def test_quit_events_tear_down(small_scene):
    renderer = Renderer(small_scene)
    assert not renderer.handle_event(pygame.event.Event(pygame.QUIT))
    assert not renderer.handle_event(pygame.event.Event(pygame.KEYDOWN, key=pygame.K_q))


def test_play_runs_requested_frames(small_scene):
    frames = Renderer(small_scene, AppearanceConfig(fps=1000)).play(max_frames=3)
    assert frames == 3
    assert small_scene.frame == 3


def test_play_does_not_start_without_surface(small_scene, monkeypatch):
    def no_display(*args, **kwargs):
        raise pygame.error("no available video device")

    monkeypatch.setattr(pygame.display, 'set_mode', no_display)
    assert Renderer(small_scene).play(max_frames=3) == 0
    assert small_scene.frame == 0


def test_render_initializes_fresh_scene():
    scene = SceneSimulator(SceneConfig(width=200, height=150, seed=4))
    frame = Renderer(scene).render()
    assert frame.shape == (150, 200, 3)
    assert scene.ball is not None
    assert (scene.ball.x, scene.ball.y) == (100, 75)
