"""
Headless bounce evaluation — scripted strokes, many seeds.

Metrics:
  1. Containment (center inside [-r, w+r] x [-r, h+r])
  2. Speed drift (segment reflections should preserve |v|, compounding may not)
  3. Wall vs segment collision counts
"""

import numpy as np
import matplotlib
matplotlib.use('Agg')
import matplotlib.pyplot as plt
import os
import sketchball as S
from sketchball.engine import generate_trajectory, SceneConfig
from sketchball.metrics import compute_speed, speed_drift, containment_violations


W, H = S.WIDTH, S.HEIGHT

STROKES = {
    'diagonal': [[(W * 0.2, H * 0.8), (W * 0.8, H * 0.3)]],
    'cup': [[(W * 0.3, H * 0.3), (W * 0.5, H * 0.7), (W * 0.7, H * 0.3)]],
    'zigzag': [[(W * (0.2 + 0.05 * i), H * (0.55 if i % 2 else 0.45)) for i in range(13)]],
}


def evaluate(n_seeds: int = 20, n_steps: int = 2000):
    os.makedirs('results/plots', exist_ok=True)

    print(f"Evaluating {len(STROKES)} layouts × {n_seeds} seeds × {n_steps} frames...")
    print(f"\n{'Layout':>10}  {'escapes':>8}  {'max drift':>10}  {'walls':>7}  {'segments':>9}")
    print("-" * 52)

    for name, strokes in STROKES.items():
        escapes, drifts, walls, segs = 0, [], 0, 0
        for seed in range(S.SEED, S.SEED + n_seeds):
            traj = generate_trajectory(SceneConfig(seed=seed), strokes, n_steps=n_steps)
            states = traj['states']
            escapes += len(containment_violations(states, traj['radius'], W, H)) > 0
            drifts.append(speed_drift(states))
            walls += sum(c['kind'] == 'wall' for c in traj['collisions'])
            segs += sum(c['kind'] == 'segment' for c in traj['collisions'])
        print(f"{name:>10}  {escapes:>8}  {max(drifts):>10.4f}  {walls:>7}  {segs:>9}")

    # ═══════════════════════════════════════════════════════════════
    # Single trajectory detail
    # ═══════════════════════════════════════════════════════════════
    traj = generate_trajectory(SceneConfig(seed=S.SEED), STROKES['cup'], n_steps=n_steps)
    states = traj['states']
    steps = np.arange(len(states))

    fig, axes = plt.subplots(1, 2, figsize=(14, 5))

    ax = axes[0]
    ax.plot(states[:, 0], states[:, 1], color='tab:blue', alpha=0.6, linewidth=0.8)
    for line in traj['lines']:
        pts = np.array(line.points)
        ax.plot(pts[:, 0], pts[:, 1], color='black', linewidth=2)
    ax.set_xlim(0, W)
    ax.set_ylim(H, 0)
    ax.set_aspect('equal')
    ax.set_title('Ball path (cup stroke)')

    ax = axes[1]
    ax.plot(steps, compute_speed(states), color='tab:red')
    for c in traj['collisions']:
        if c['kind'] == 'segment':
            ax.axvline(c['frame'], color='gray', linewidth=0.3, alpha=0.5)
    ax.set_xlabel('Frame')
    ax.set_ylabel('|v| (px/frame)')
    ax.set_title('Speed (grey: segment hits)')
    ax.grid(True, alpha=0.3)

    plt.tight_layout()
    plt.savefig('results/plots/bounce_cup.png', dpi=150)
    plt.close()

    print(f"\nPlot saved:")
    print(f"  results/plots/bounce_cup.png")


if __name__ == "__main__":
    evaluate()
