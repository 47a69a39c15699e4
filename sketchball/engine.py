"""
Scene simulator — one ball bouncing off the canvas walls and freehand strokes.

- Ball velocity is in pixels per frame; one step() per rendered frame
- Wall and segment checks use the pre-update position, then x += dx, y += dy
- Segment hits reflect velocity across the segment normal, one after another
- State per ball: (x, y, dx, dy, radius, color)
"""

import colorsys
import copy
import numpy as np
from dataclasses import dataclass
from typing import Dict, Iterator, List, NamedTuple, Optional, Sequence, Tuple

import sketchball as S
from sketchball.geometry import segment_circle_collision, segment_normal, reflect

Color = Tuple[int, int, int]


def hsl_color(hue: float, saturation: float, lightness: float) -> Color:
    """hue in degrees, saturation/lightness in percent → (r, g, b) 0-255."""
    r, g, b = colorsys.hls_to_rgb((hue % 360) / 360.0, lightness / 100.0, saturation / 100.0)
    return (int(round(r * 255)), int(round(g * 255)), int(round(b * 255)))


class Point(NamedTuple):
    x: float
    y: float


@dataclass
class Polyline:
    """One freehand stroke. Completed strokes hold a tuple and are never touched again."""
    points: Sequence[Point]
    color: Color = S.STROKE_COLOR

    def segments(self) -> Iterator[Tuple[Point, Point]]:
        for i in range(1, len(self.points)):
            yield self.points[i - 1], self.points[i]

    def freeze(self) -> "Polyline":
        return Polyline(points=tuple(self.points), color=self.color)


@dataclass
class Ball:
    x: float
    y: float
    dx: float
    dy: float
    radius: float
    color: Color

    @property
    def state(self) -> np.ndarray:
        return np.array([self.x, self.y, self.dx, self.dy])


@dataclass
class TextStyle:
    """The decorative word drawn over the scene."""
    text: str
    color: Color
    font_size: int


@dataclass
class SceneConfig:
    width: float = S.WIDTH
    height: float = S.HEIGHT
    radius_range: Tuple[float, float] = S.RADIUS_RANGE
    max_speed: float = S.MAX_SPEED
    stroke_color: Color = S.STROKE_COLOR
    words: Tuple[str, ...] = S.WORDS
    font_size_range: Tuple[int, int] = S.FONT_SIZE_RANGE
    seed: Optional[int] = None

    def __post_init__(self):
        if self.width <= 0 or self.height <= 0:
            raise ValueError(f"Canvas must have positive size, got {self.width}x{self.height}")
        lo, hi = self.radius_range
        if lo <= 0 or hi < lo:
            raise ValueError(f"Invalid radius range: {self.radius_range}")
        if not self.words:
            raise ValueError("Need at least one word to display")


class SceneSimulator:
    """
    Owns the whole scene: ball, completed strokes, the stroke being drawn.

    Step: wall collisions → segment collisions → position
    Pointer handlers and step() are called from the same thread.
    """

    def __init__(self, config: Optional[SceneConfig] = None):
        self.config = config or SceneConfig()
        self.rng = np.random.RandomState(self.config.seed)
        self.width = self.config.width
        self.height = self.config.height
        self.ball: Optional[Ball] = None
        self.text: Optional[TextStyle] = None
        self.lines: List[Polyline] = []
        self.current_line: Optional[Polyline] = None
        self.is_moving = False
        self.frame = 0
        self.collision_log: List[Dict] = []

    def initialize(self, ball: Optional[Ball] = None) -> Ball:
        self.text = self._create_random_text()
        self.ball = copy.deepcopy(ball) if ball is not None else self._create_random_ball()
        self.lines = []
        self.current_line = None
        self.is_moving = False
        self.frame = 0
        self.collision_log = []
        return self.ball

    def _create_random_ball(self) -> Ball:
        speed = self.config.max_speed
        dx = (self.rng.random_sample() - 0.5) * speed
        dy = (self.rng.random_sample() - 0.5) * speed
        radius = self.rng.uniform(*self.config.radius_range)
        color = hsl_color(self.rng.uniform(0, 360), S.BALL_SATURATION, S.BALL_LIGHTNESS)
        return Ball(x=self.width / 2, y=self.height / 2, dx=dx, dy=dy,
                    radius=radius, color=color)

    def _create_random_text(self) -> TextStyle:
        words = self.config.words
        lo, hi = self.config.font_size_range
        return TextStyle(
            text=words[self.rng.randint(len(words))],
            color=hsl_color(self.rng.uniform(0, 360), S.TEXT_SATURATION, S.TEXT_LIGHTNESS),
            font_size=int(np.floor(self.rng.uniform(lo, hi))),
        )

    def resize(self, width: float, height: float):
        # Only future wall checks see the new bounds.
        self.width = width
        self.height = height

    # Stroke capture

    def pointer_down(self, x: float, y: float):
        self.current_line = Polyline(points=[Point(x, y)], color=self.config.stroke_color)

    def pointer_move(self, x: float, y: float):
        if self.current_line is None:
            return
        self.current_line.points.append(Point(x, y))

    def pointer_up(self):
        if self.current_line is not None and len(self.current_line.points) > 1:
            self.lines.append(self.current_line.freeze())
        self.current_line = None
        self.is_moving = True

    pointer_leave = pointer_up

    def obstacles(self) -> List[Polyline]:
        if self.current_line is None:
            return list(self.lines)
        return self.lines + [self.current_line]

    # Simulation

    def step(self) -> Ball:
        self.frame += 1
        if not self.is_moving:
            return self.ball

        self._resolve_wall_collisions()
        self._resolve_segment_collisions()
        self.ball.x += self.ball.dx
        self.ball.y += self.ball.dy
        return self.ball

    def _resolve_wall_collisions(self):
        ball = self.ball
        if ball.x + ball.radius > self.width or ball.x - ball.radius < 0:
            ball.dx = -ball.dx
            self.collision_log.append({'frame': self.frame, 'kind': 'wall', 'axis': 'x'})
        if ball.y + ball.radius > self.height or ball.y - ball.radius < 0:
            ball.dy = -ball.dy
            self.collision_log.append({'frame': self.frame, 'kind': 'wall', 'axis': 'y'})

    def _resolve_segment_collisions(self):
        """
        Every touching segment reflects the velocity in turn. No contact
        ordering, no push-out: several hits in one frame compound.
        """
        ball = self.ball
        center = (ball.x, ball.y)
        for line_idx, line in enumerate(self.obstacles()):
            for seg_idx, (start, end) in enumerate(line.segments()):
                if not segment_circle_collision(start, end, center, ball.radius):
                    continue
                ball.dx, ball.dy = reflect(ball.dx, ball.dy, segment_normal(start, end))
                self.collision_log.append({
                    'frame': self.frame, 'kind': 'segment',
                    'line': line_idx, 'segment': seg_idx,
                })

    # State access

    def get_state(self) -> np.ndarray:
        """(4,) → [x, y, dx, dy]"""
        return self.ball.state


def replay_stroke(scene: SceneSimulator, points: Sequence[Tuple[float, float]]):
    """Feed a scripted stroke through the pointer handlers."""
    if not points:
        return
    scene.pointer_down(*points[0])
    for x, y in points[1:]:
        scene.pointer_move(x, y)
    scene.pointer_up()


def generate_trajectory(config: SceneConfig,
                        strokes: Sequence[Sequence[Tuple[float, float]]] = (),
                        n_steps: int = 600) -> Dict:
    """Returns dict with states, speed, collisions, lines, radius, config."""
    scene = SceneSimulator(config)
    scene.initialize()
    for stroke in strokes:
        replay_stroke(scene, stroke)

    states = [scene.get_state()]
    for _ in range(n_steps):
        scene.step()
        states.append(scene.get_state())
    states = np.array(states)

    return {
        'states': states,
        'speed': np.sqrt(states[:, 2]**2 + states[:, 3]**2),
        'radius': scene.ball.radius,
        'lines': scene.lines,
        'collisions': scene.collision_log,
        'config': config,
    }
