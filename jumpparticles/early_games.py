"""The first seven steps of the particle playground, from empty window to collisions."""

from __future__ import annotations

import time
from dataclasses import dataclass
from typing import List, Optional, Sequence, Tuple, Union

import pygame

from jumpparticles.early_particles import (
    BOUNCING_RULES,
    FreeParticle,
    StaticParticle,
    bouncing_particle,
)
from jumpparticles.particle import Area, Particle, ParticleRules
from jumpparticles.particle_system import ParticleSystem, SpawnRules
from jumpparticles.physics import PhysicsSolver

WINDOW_TITLE = "Jump Particles"
INITIAL_WINDOW_SIZE = (720, 480)
FRAME_RATE_LIMIT = 60

PARTICLE_RADIUS = 20.0
PARTICLE_COLOR = (0, 255, 0)
BACKGROUND_COLOR = (0, 0, 0)
PHYSICS_SUBSTEPS = 16

STAGES = range(1, 8)

AnyParticle = Union[StaticParticle, FreeParticle, Particle]


@dataclass(frozen=True)
class _SystemSetup:
    count: int
    interval: float
    spawn_position: Tuple[float, float]
    rules: SpawnRules
    substeps: int
    use_mass: Optional[bool]


_SYSTEM_SETUPS = {
    5: _SystemSetup(
        count=100,
        interval=0.1,
        spawn_position=(30.0, 30.0),
        rules=SpawnRules(
            base_radius=10.0,
            radius_spread=10.0,
            color_min=0,
            color_max=255,
            initial_velocity=(182.0, 136.5),
            follow_gravity_sign=False,
            reset_restores_total=False,
            particle_rules=BOUNCING_RULES,
        ),
        substeps=1,
        use_mass=None,
    ),
    6: _SystemSetup(
        count=100,
        interval=0.15,
        spawn_position=(39.0, 30.0),
        rules=SpawnRules(
            base_radius=10.0,
            radius_spread=10.0,
            color_min=0,
            color_max=255,
            initial_velocity=(227.5, 136.5),
            follow_gravity_sign=False,
            reset_restores_total=False,
            particle_rules=ParticleRules(),
        ),
        substeps=PHYSICS_SUBSTEPS,
        use_mass=False,
    ),
    7: _SystemSetup(
        count=100,
        interval=0.15,
        spawn_position=(39.0, 30.0),
        rules=SpawnRules(
            base_radius=8.0,
            radius_spread=10.0,
            color_min=25,
            color_max=255,
            initial_velocity=(227.5, 136.5),
            follow_gravity_sign=False,
            reset_restores_total=False,
            particle_rules=ParticleRules(),
        ),
        substeps=PHYSICS_SUBSTEPS,
        use_mass=True,
    ),
}

_SYSTEM_GRAVITY = (0.0, 273.0)


class EarlyGame:
    """One of the early playground stages, numbered 1 to 7.

    1 is an empty window, 2 a single still particle, 3 a particle falling
    freely, 4 a particle bouncing off the walls, 5 a stream of bouncing
    particles, 6 adds collisions between equal-mass particles and 7 gives
    particles a mass that follows their size.
    """

    def __init__(
        self,
        stage: int,
        title: str = WINDOW_TITLE,
        initial_size: Sequence[int] = INITIAL_WINDOW_SIZE,
        frame_rate_limit: int = FRAME_RATE_LIMIT,
    ) -> None:
        if stage not in STAGES:
            raise ValueError(f"stage must be between {STAGES.start} and {STAGES.stop - 1}")
        width, height = initial_size
        if width <= 0 or height <= 0:
            raise ValueError("window size must be positive")

        self.stage = stage
        self.title = title
        self.initial_size = (int(width), int(height))
        self.frame_rate_limit = frame_rate_limit
        self.area = Area(float(width), float(height))

        self.particle: Optional[AnyParticle] = None
        self.particle_system: Optional[ParticleSystem] = None
        self.solver: Optional[PhysicsSolver] = None
        self.substeps = 1

        center = (width / 2.0, height / 2.0)
        if stage == 2:
            self.particle = StaticParticle(center, PARTICLE_RADIUS, PARTICLE_COLOR)
        elif stage == 3:
            self.particle = FreeParticle(
                center, (60.0, 0.0), (0.0, 91.0), PARTICLE_RADIUS, PARTICLE_COLOR
            )
        elif stage == 4:
            self.particle = bouncing_particle(
                center, (120.0, 0.0), (0.0, 182.0), PARTICLE_RADIUS, PARTICLE_COLOR, self.area
            )
        elif stage in _SYSTEM_SETUPS:
            setup = _SYSTEM_SETUPS[stage]
            self.particle_system = ParticleSystem(
                setup.count,
                setup.interval,
                setup.spawn_position,
                _SYSTEM_GRAVITY,
                self.area,
                setup.rules,
            )
            self.substeps = setup.substeps
            if setup.use_mass is not None:
                self.solver = PhysicsSolver(self.particle_system.particles, setup.use_mass)

    @property
    def particles(self) -> List[AnyParticle]:
        """Every particle currently in the scene."""
        if self.particle_system is not None:
            return list(self.particle_system.particles)
        return [self.particle] if self.particle is not None else []

    def update(self, dt: float) -> None:
        """Advance the scene by ``dt`` seconds."""
        if self.stage <= 2:
            return
        if self.particle_system is None:
            self.particle.update(dt)
            return

        step = dt / self.substeps
        for _ in range(self.substeps):
            self.particle_system.update(step)
            if self.solver is not None:
                self.solver.update(step)

    def handle_resize(self, width: int, height: int) -> None:
        """Make the visible area, and so the walls, match the new window size."""
        self.area.width = float(width)
        self.area.height = float(height)

    def draw(self, surface: pygame.Surface) -> None:
        """Clear ``surface`` to black and draw the scene on it."""
        surface.fill(BACKGROUND_COLOR)
        if self.particle_system is not None:
            self.particle_system.draw(surface)
        elif self.particle is not None:
            self.particle.draw(surface)

    def run(self) -> None:
        """Open a window and run the stage until it is closed."""
        pygame.init()
        try:
            screen = pygame.display.set_mode(self.initial_size, pygame.RESIZABLE)
            pygame.display.set_caption(self.title)
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
                        screen = pygame.display.get_surface()
                if not running:
                    break

                self.update(dt)
                self.draw(screen)
                pygame.display.flip()
                clock.tick(self.frame_rate_limit)
        finally:
            pygame.quit()