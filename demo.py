"""
Draw on the canvas — the ball starts bouncing when you let go.
Run: python demo.py
Press Q or close window to exit.
"""
from sketchball.engine import SceneSimulator, SceneConfig
from sketchball.renderer import Renderer, AppearanceConfig

scene = SceneSimulator(SceneConfig())
ball = scene.initialize()

print(f"Ball: r={ball.radius:.1f}, v=({ball.dx:.2f}, {ball.dy:.2f})")

frames = Renderer(scene, AppearanceConfig()).play()

print(f"Frames: {frames}")
print(f"Strokes: {len(scene.lines)}, collisions: {len(scene.collision_log)}")
