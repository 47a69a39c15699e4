import numpy as np
from typing import Dict, Optional, Tuple
from dataclasses import dataclass
import os

import sketchball as S
from sketchball.engine import SceneSimulator

os.environ['PYGAME_HIDE_SUPPORT_PROMPT'] = '1'
import pygame


@dataclass
class AppearanceConfig:
    """Everything about pixels that physics never reads."""
    bg_color: Tuple[int, int, int] = S.BG_COLOR
    stroke_width: int = S.STROKE_WIDTH
    font_name: str = S.FONT_NAME
    text_height_fraction: float = S.TEXT_HEIGHT_FRACTION
    fps: int = S.FPS
    caption: str = 'Sketchball'


class Renderer:
    """
    Draws a SceneSimulator and drives it, one step per frame.

    Frame: clear → word → strokes → step → ball
    """

    def __init__(self, scene: SceneSimulator, config: Optional[AppearanceConfig] = None):
        self.scene = scene
        self.config = config or AppearanceConfig()
        self._fonts: Dict[int, pygame.font.Font] = {}

    def _get_font(self, size: int) -> pygame.font.Font:
        if size not in self._fonts:
            self._fonts[size] = pygame.font.SysFont(self.config.font_name, size, bold=True)
        return self._fonts[size]

    def draw_text(self, surface: pygame.Surface):
        style = self.scene.text
        if style is None:
            return
        label = self._get_font(style.font_size).render(style.text, True, style.color)
        w, h = surface.get_size()
        rect = label.get_rect(center=(w / 2, h * self.config.text_height_fraction))
        surface.blit(label, rect)

    def draw_lines(self, surface: pygame.Surface):
        width = self.config.stroke_width
        for line in self.scene.obstacles():
            if len(line.points) < 2:
                continue
            pygame.draw.lines(surface, line.color, False, line.points, width)
            # round caps and joins
            for p in line.points:
                pygame.draw.circle(surface, line.color, p, width / 2)

    def draw_ball(self, surface: pygame.Surface):
        ball = self.scene.ball
        pygame.draw.circle(surface, ball.color, (ball.x, ball.y), ball.radius)

    def draw_frame(self, surface: pygame.Surface, advance: bool = True):
        surface.fill(self.config.bg_color)
        self.draw_text(surface)
        self.draw_lines(surface)
        if advance:
            self.scene.step()
        self.draw_ball(surface)

    def render(self, advance: bool = False) -> np.ndarray:
        """Draw one frame offscreen → (H, W, 3) uint8."""
        if self.scene.ball is None:
            self.scene.initialize()
        if not pygame.font.get_init():
            pygame.font.init()
        size = (int(self.scene.width), int(self.scene.height))
        surface = pygame.Surface(size)
        self.draw_frame(surface, advance=advance)
        return pygame.surfarray.array3d(surface).transpose(1, 0, 2)

    def handle_event(self, event: pygame.event.Event) -> bool:
        """Route one pygame event to the scene. False means tear down."""
        scene = self.scene
        if event.type == pygame.QUIT:
            return False
        if event.type == pygame.KEYDOWN and event.key in (pygame.K_q, pygame.K_ESCAPE):
            return False
        if event.type == pygame.VIDEORESIZE:
            scene.resize(event.w, event.h)
        elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
            scene.pointer_down(*event.pos)
        elif event.type == pygame.MOUSEMOTION:
            scene.pointer_move(*event.pos)
        elif event.type == pygame.MOUSEBUTTONUP and event.button == 1:
            scene.pointer_up()
        elif event.type == pygame.WINDOWLEAVE:
            scene.pointer_leave()
        return True

    def play(self, max_frames: Optional[int] = None) -> int:
        """Open a window and run until closed (or max_frames). Returns frames drawn."""
        try:
            pygame.init()
            pygame.display.set_mode((int(self.scene.width), int(self.scene.height)),
                                    pygame.RESIZABLE)
            pygame.display.set_caption(self.config.caption)
            pygame.font.init()
        except pygame.error as e:
            print(f"No drawing surface, not starting: {e}")
            pygame.quit()
            return 0

        if self.scene.ball is None:
            self.scene.initialize()

        clock = pygame.time.Clock()
        frames = 0
        running = True
        while running:
            for event in pygame.event.get():
                if not self.handle_event(event):
                    running = False
            if not running:
                break

            self.draw_frame(pygame.display.get_surface())
            pygame.display.flip()
            frames += 1
            if max_frames is not None and frames >= max_frames:
                break
            clock.tick(self.config.fps)

        pygame.quit()
        self._fonts = {}
        return frames
