"""Motion Playground - Interactive closed-form motion visualizer.

Exercises tick-motion: springs, gravity, friction and easing curves.

Controls:
  Click   Retarget the marker to the cursor (keeps its velocity)
  Space   Launch a comparison race across the lanes
  1-4     Select spring preset for the marker
  B       Toggle the clamp that keeps the marker inside the arena
  Esc     Quit
"""
from __future__ import annotations

import logging
import sys

import pygame

from tick_motion import (
    EASINGS,
    ClampedMotion,
    CurveMotion,
    Friction,
    Gravity,
    MotionModel,
    Simulation2D,
    Spring,
    plan_leg,
    retarget,
)

SCREEN_W, SCREEN_H = 960, 640
ARENA_H = 400
FPS = 60
BG_COLOR = (18, 20, 28)
ARENA_COLOR = (28, 32, 44)
MARKER_COLOR = (240, 180, 60)
TARGET_COLOR = (90, 200, 120)
LANE_COLOR = (60, 66, 84)
TEXT_COLOR = (200, 204, 216)
PRESET_NAMES = ["swift", "elegant", "bob", "boingoingoing"]
LANE_LEFT, LANE_RIGHT = 140, SCREEN_W - 40
LANE_COLORS = [(240, 110, 110), (110, 170, 240), (200, 140, 240), (120, 220, 200)]


def make_lanes() -> list[tuple[str, MotionModel | CurveMotion]]:
    """One motion per lane, each running from LANE_LEFT to LANE_RIGHT."""
    span = LANE_RIGHT - LANE_LEFT
    return [
        ("spring", Spring.preset("elegant", start=LANE_LEFT, end=LANE_RIGHT)),
        ("gravity", Gravity(gravity=2 * span, start=LANE_LEFT, end=LANE_RIGHT)),
        ("friction", Friction.through(LANE_LEFT, LANE_RIGHT, 3 * span, 0.4 * span)),
        (
            "ease_out_cubic",
            plan_leg(EASINGS["ease_out_cubic"], LANE_LEFT, LANE_RIGHT, duration=0.8),
        ),
    ]


class Playground:
    """Holds the marker motion and the comparison race."""

    def __init__(self) -> None:
        self.preset = PRESET_NAMES[0]
        self.clamped = True
        self.target = (SCREEN_W / 2, ARENA_H / 2)
        self.motion = self._at_rest(self.target)
        self.elapsed = 0.0
        self.lanes = make_lanes()
        self.race_time: float | None = None

    def _spring(self, start: float, end: float, velocity: float = 0.0) -> MotionModel:
        return Spring.preset(self.preset, start=start, end=end, initial_velocity=velocity)

    def _wrap(self, model: MotionModel, low: float, high: float) -> MotionModel:
        if not self.clamped:
            return model
        return ClampedMotion(model, x_min=low, x_max=high)

    def _at_rest(self, point: tuple[float, float]) -> Simulation2D:
        x, y = point
        return Simulation2D(
            self._wrap(self._spring(x, x), 0.0, SCREEN_W),
            self._wrap(self._spring(y, y), 0.0, ARENA_H),
        )

    def retarget_to(self, point: tuple[float, float]) -> None:
        """Send the marker toward ``point`` without a jump in velocity."""
        self.target = point
        x, y = self.motion.x_physics, self.motion.y_physics
        self.motion = Simulation2D(
            retarget(x, self.elapsed, point[0]),
            retarget(y, self.elapsed, point[1]),
        )
        self.elapsed = 0.0

    def select_preset(self, index: int) -> None:
        self.preset = PRESET_NAMES[index]
        px, py = self.motion.position(self.elapsed)
        vx, vy = self.motion.velocity(self.elapsed)
        self.motion = Simulation2D(
            self._wrap(self._spring(px, self.target[0], vx), 0.0, SCREEN_W),
            self._wrap(self._spring(py, self.target[1], vy), 0.0, ARENA_H),
        )
        self.elapsed = 0.0

    def toggle_clamp(self) -> None:
        self.clamped = not self.clamped
        self.select_preset(PRESET_NAMES.index(self.preset))

    def update(self, dt: float) -> None:
        self.elapsed += dt
        if self.race_time is not None:
            self.race_time += dt


def draw_arena(screen: pygame.Surface, state: Playground, font: pygame.font.Font) -> None:
    pygame.draw.rect(screen, ARENA_COLOR, (0, 0, SCREEN_W, ARENA_H))
    tx, ty = state.target
    pygame.draw.circle(screen, TARGET_COLOR, (int(tx), int(ty)), 6, 1)
    x, y = state.motion.position(state.elapsed)
    pygame.draw.circle(screen, MARKER_COLOR, (int(x), int(y)), 12)

    speed = state.motion.speed(state.elapsed)
    done = state.motion.is_done(state.elapsed)
    info = (
        f"preset={state.preset}  clamp={'on' if state.clamped else 'off'}  "
        f"speed={speed:7.1f}px/s  settle={state.motion.duration:5.2f}s  "
        f"{'settled' if done else 'moving'}"
    )
    screen.blit(font.render(info, True, TEXT_COLOR), (10, 10))


def draw_lanes(screen: pygame.Surface, state: Playground, font: pygame.font.Font) -> None:
    lane_h = (SCREEN_H - ARENA_H - 20) // len(state.lanes)
    for i, (name, motion) in enumerate(state.lanes):
        y = ARENA_H + 20 + i * lane_h + lane_h // 2
        pygame.draw.line(screen, LANE_COLOR, (LANE_LEFT, y), (LANE_RIGHT, y), 2)
        screen.blit(font.render(name, True, TEXT_COLOR), (10, y - 7))
        t = 0.0 if state.race_time is None else state.race_time
        x = motion.position(t)
        color = LANE_COLORS[i % len(LANE_COLORS)]
        pygame.draw.circle(screen, color, (int(x), y), 8)
        if state.race_time is not None and motion.is_done(t):
            label = font.render(f"{motion.duration:.2f}s", True, color)
            screen.blit(label, (LANE_RIGHT - 60, y - 24))


def main() -> None:
    logging.basicConfig(level=logging.INFO)
    pygame.init()
    screen = pygame.display.set_mode((SCREEN_W, SCREEN_H))
    pygame.display.set_caption("Motion Playground - tick-motion demo")
    clock = pygame.time.Clock()
    font = pygame.font.SysFont("monospace", 13)

    state = Playground()
    running = True

    while running:
        dt = clock.tick(FPS) / 1000.0

        # --- Events ---
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                running = False

            elif event.type == pygame.KEYDOWN:
                if event.key == pygame.K_ESCAPE:
                    running = False
                elif event.key == pygame.K_SPACE:
                    state.race_time = 0.0
                elif event.key == pygame.K_b:
                    state.toggle_clamp()
                elif event.key in (pygame.K_1, pygame.K_2, pygame.K_3, pygame.K_4):
                    state.select_preset(event.key - pygame.K_1)

            elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
                mx, my = event.pos
                # Only retarget within the arena
                if my < ARENA_H:
                    state.retarget_to((float(mx), float(my)))

        state.update(dt)

        # --- Render ---
        screen.fill(BG_COLOR)
        draw_arena(screen, state, font)
        draw_lanes(screen, state, font)
        pygame.display.flip()

    pygame.quit()
    sys.exit()


if __name__ == "__main__":
    main()
