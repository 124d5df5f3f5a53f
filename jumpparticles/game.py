"""The full playground: colliding particles with control buttons and a magnet."""

from __future__ import annotations

import argparse
import time
from dataclasses import dataclass
from typing import Callable, Dict, List, Optional, Sequence, Tuple

import pygame
from pygame.math import Vector2

from jumpparticles.button import Button
from jumpparticles.magnet import Magnet
from jumpparticles.particle import Area
from jumpparticles.particle_system import ParticleSystem, SpawnRules
from jumpparticles.physics import PhysicsSolver

WINDOW_TITLE = "Jump Particles"
INITIAL_WINDOW_SIZE = (720, 480)
FRAME_RATE_LIMIT = 60

PARTICLE_COUNT = 100
PARTICLE_SPAWN_INTERVAL = 0.15
PARTICLE_SPAWN_POSITION = (39.0, 30.0)
GRAVITY = (0.0, 273.0)
PHYSICS_SUBSTEPS = 16

BACKGROUND_COLOR = (0, 0, 0)
BUTTON_DISTANCE = 10.0
BUTTON_Y = 10.0

STAGES = range(8, 11)

Layout = List[Tuple[str, Tuple[float, float], Tuple[float, float]]]


@dataclass(frozen=True)
class _StageSetup:
    button_size: Tuple[float, float]
    font_size: int
    rules: SpawnRules
    has_magnet: bool
    keeps_minimum_size: bool


_STAGE_SETUPS = {
    8: _StageSetup(
        button_size=(100.0, 30.0),
        font_size=20,
        rules=SpawnRules(follow_gravity_sign=False, reset_restores_total=False),
        has_magnet=False,
        keeps_minimum_size=False,
    ),
    9: _StageSetup(
        button_size=(80.0, 24.0),
        font_size=16,
        rules=SpawnRules(follow_gravity_sign=False, reset_restores_total=False),
        has_magnet=False,
        keeps_minimum_size=False,
    ),
    10: _StageSetup(
        button_size=(80.0, 24.0),
        font_size=16,
        rules=SpawnRules(),
        has_magnet=True,
        keeps_minimum_size=True,
    ),
}


def _check_stage(stage: int) -> _StageSetup:
    if stage not in STAGES:
        raise ValueError(f"stage must be between {STAGES.start} and {STAGES.stop - 1}")
    return _STAGE_SETUPS[stage]


def button_layout(stage: int, width: float) -> Layout:
    """Return ``(label, position, size)`` for each button of ``stage``.

    Buttons hug the right edge of a window ``width`` wide, in the order they
    receive clicks and are drawn.
    """
    setup = _check_stage(stage)
    bw, bh = setup.button_size
    d = BUTTON_DISTANCE
    right_col = width - bw - d
    left_col = width - 2 * bw - 2 * d

    if stage == 8:
        return [
            ("Reset", (left_col, BUTTON_Y), (bw, bh)),
            ("Clear", (right_col, BUTTON_Y), (bw, bh)),
        ]

    wide = (2 * bw + d, bh)
    wide_x = width - wide[0] - d

    def row(n: int) -> float:
        return BUTTON_Y + n * bh + n * d

    return [
        ("Reset", (left_col, row(0)), (bw, bh)),
        ("Clear", (right_col, row(0)), (bw, bh)),
        ("Positive Gravity", (wide_x, row(1)), wide),
        ("Disable Gravity", (wide_x, row(2)), wide),
        ("Negative Gravity", (wide_x, row(3)), wide),
        ("+10", (left_col, row(4)), (bw, bh)),
        ("+100", (right_col, row(4)), (bw, bh)),
    ]


class Game:
    """One of the later playground stages, numbered 8 to 10.

    8 adds Reset and Clear buttons, 9 adds gravity and particle-count
    buttons, and 10 adds a magnet that pulls particles towards the pointer
    while the left mouse button is held.
    """

    def __init__(
        self,
        stage: int = 10,
        title: str = WINDOW_TITLE,
        initial_size: Sequence[int] = INITIAL_WINDOW_SIZE,
        frame_rate_limit: int = FRAME_RATE_LIMIT,
    ) -> None:
        setup = _check_stage(stage)
        width, height = initial_size
        if width <= 0 or height <= 0:
            raise ValueError("window size must be positive")

        self.stage = stage
        self.title = title
        self.initial_size = (int(width), int(height))
        self.size = self.initial_size
        self.frame_rate_limit = frame_rate_limit
        self.font_size = setup.font_size
        self._keeps_minimum_size = setup.keeps_minimum_size
        self.area = Area(float(width), float(height))

        self.particle_system = ParticleSystem(
            PARTICLE_COUNT,
            PARTICLE_SPAWN_INTERVAL,
            PARTICLE_SPAWN_POSITION,
            GRAVITY,
            self.area,
            setup.rules,
        )
        self.solver = PhysicsSolver(self.particle_system.particles, True)
        self.magnet: Optional[Magnet] = (
            Magnet(self.particle_system.particles) if setup.has_magnet else None
        )

        actions = self._actions()
        self.buttons: List[Button] = [
            Button(label, position, size, self.font_size, actions[label])
            for label, position, size in button_layout(stage, width)
        ]

    def _actions(self) -> Dict[str, Callable[[], None]]:
        system = self.particle_system

        def positive_gravity() -> None:
            system.set_spawn_position(PARTICLE_SPAWN_POSITION)
            system.set_gravity(GRAVITY)

        def negative_gravity() -> None:
            x, y = PARTICLE_SPAWN_POSITION
            system.set_spawn_position((x, self.area.height - y))
            system.set_gravity(-Vector2(GRAVITY))

        return {
            "Reset": system.reset,
            "Clear": system.clear,
            "Positive Gravity": positive_gravity,
            "Disable Gravity": lambda: system.set_gravity((0.0, 0.0)),
            "Negative Gravity": negative_gravity,
            "+10": lambda: system.add_particles_to_spawn(10),
            "+100": lambda: system.add_particles_to_spawn(100),
        }

    def update(self, dt: float, mouse_position: Optional[Sequence[float]] = None) -> None:
        """Advance the scene by ``dt`` seconds in fixed substeps.

        ``mouse_position`` is where the pointer is while the left button is
        held, or ``None``; only the stage with a magnet uses it.
        """
        step = dt / PHYSICS_SUBSTEPS
        for _ in range(PHYSICS_SUBSTEPS):
            if self.magnet is not None:
                self.magnet.update(step, mouse_position)
            self.particle_system.update(step)
            self.solver.update(step)

    def handle_resize(self, width: int, height: int) -> None:
        """Match the walls to the new window size and move the buttons along."""
        if self._keeps_minimum_size:
            width = max(width, self.initial_size[0])
            height = max(height, self.initial_size[1])
        self.size = (int(width), int(height))
        self.area.width = float(width)
        self.area.height = float(height)
        for button, (_, position, _) in zip(self.buttons, button_layout(self.stage, width)):
            button.set_position(position)

    def handle_click(self, point: Sequence[float], mouse_button: int) -> bool:
        """Offer a mouse press to every button; return whether any was clicked."""
        clicked = [button.handle_click(point, mouse_button) for button in self.buttons]
        return any(clicked)

    def draw(self, surface: pygame.Surface, font) -> None:
        """Clear ``surface`` to black and draw the particles, then the buttons."""
        surface.fill(BACKGROUND_COLOR)
        self.particle_system.draw(surface)
        for button in self.buttons:
            button.draw(surface, font)

    def run(self) -> None:
        """Open a window and run the stage until it is closed."""
        pygame.init()
        try:
            screen = pygame.display.set_mode(self.size, pygame.RESIZABLE)
            pygame.display.set_caption(self.title)
            font = pygame.font.Font(None, self.font_size)
            clock = pygame.time.Clock()
            last = time.perf_counter()
            running = True
            while running:
                now = time.perf_counter()
                dt, last = now - last, now

                for event in pygame.event.get():
                    if event.type == pygame.QUIT:
                        running = False
                    elif event.type == pygame.VIDEORESIZE:
                        self.handle_resize(event.w, event.h)
                        if (event.w, event.h) != self.size:
                            screen = pygame.display.set_mode(self.size, pygame.RESIZABLE)
                        else:
                            screen = pygame.display.get_surface()
                    elif event.type == pygame.MOUSEBUTTONDOWN:
                        self.handle_click(event.pos, event.button)
                if not running:
                    break

                held = pygame.mouse.get_pressed()[0]
                mouse_position = pygame.mouse.get_pos() if held else None
                self.update(dt, mouse_position)
                self.draw(screen, font)
                pygame.display.flip()
                clock.tick(self.frame_rate_limit)
        finally:
            pygame.quit()


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run a playground stage from the command line."""
    parser = argparse.ArgumentParser(description="Bouncing, colliding particles.")
    parser.add_argument("--stage", type=int, choices=list(STAGES), default=STAGES.stop - 1)
    parser.add_argument("--title", default=WINDOW_TITLE)
    parser.add_argument("--width", type=int, default=INITIAL_WINDOW_SIZE[0])
    parser.add_argument("--height", type=int, default=INITIAL_WINDOW_SIZE[1])
    parser.add_argument("--fps", type=int, default=FRAME_RATE_LIMIT)
    args = parser.parse_args(argv)

    Game(args.stage, args.title, (args.width, args.height), args.fps).run()
    return 0