"""Spawning and stepping a stream of particles."""

from __future__ import annotations

import math
import random
from dataclasses import dataclass, field
from typing import List, Optional, Sequence, Tuple

import pygame
from pygame.math import Vector2

from jumpparticles.particle import Area, Color, Particle, ParticleRules

PI = 3.1415926535


@dataclass(frozen=True)
class SpawnRules:
    """How new particles look and move, and how a reset behaves.

    ``follow_gravity_sign`` flips the vertical launch speed so particles are
    thrown against gravity. ``reset_restores_total`` makes :meth:`ParticleSystem.reset`
    forget particles added with :meth:`ParticleSystem.add_particles_to_spawn`.
    """

    base_radius: float = 8.0
    radius_spread: float = 10.0
    color_min: int = 25
    color_max: int = 255
    density: float = 1.0
    initial_velocity: Tuple[float, float] = (227.5, 136.5)
    follow_gravity_sign: bool = True
    reset_restores_total: bool = True
    particle_rules: ParticleRules = field(default_factory=ParticleRules)


class ParticleSystem:
    """Emits particles at a fixed interval until a target count is reached.

    The ``particles`` list is kept for the lifetime of the system and only
    modified in place, so solvers holding it stay in sync.
    """

    def __init__(
        self,
        total_to_spawn: int,
        spawn_interval: float,
        spawn_position: Sequence[float],
        gravity: Sequence[float] = (0.0, 273.0),
        area: Optional[Area] = None,
        rules: Optional[SpawnRules] = None,
        rng: Optional[random.Random] = None,
    ) -> None:
        if total_to_spawn < 0:
            raise ValueError("total_to_spawn must not be negative")
        self.total_to_spawn = total_to_spawn
        self._initial_total = total_to_spawn
        self.spawned_count = 0
        self.spawn_interval = float(spawn_interval)
        self._spawn_timer = 0.0
        self.gravity = Vector2(gravity)
        self._initial_gravity = Vector2(gravity)
        self.spawn_position = Vector2(spawn_position)
        self._initial_spawn_position = Vector2(spawn_position)
        self.area = area if area is not None else Area(720.0, 480.0)
        self.rules = rules if rules is not None else SpawnRules()
        self.rng = rng if rng is not None else random.Random()
        self.particles: List[Particle] = []

    def update(self, dt: float) -> None:
        """Spawn a particle if one is due, then advance every particle."""
        self._try_spawn(dt)
        for particle in self.particles:
            particle.update(dt)

    def draw(self, surface: pygame.Surface) -> None:
        """Draw every particle onto ``surface``."""
        for particle in self.particles:
            particle.draw(surface)

    def set_spawn_position(self, position: Sequence[float]) -> None:
        """Move the point new particles appear at."""
        self.spawn_position = Vector2(position)

    def set_gravity(self, gravity: Sequence[float]) -> None:
        """Change gravity for new particles and all existing ones."""
        self.gravity = Vector2(gravity)
        for particle in self.particles:
            particle.acceleration = self.gravity

    def add_particles_to_spawn(self, count: int) -> None:
        """Raise the number of particles the system will emit in total."""
        if count < 0:
            raise ValueError("count must not be negative")
        self.total_to_spawn += count

    def reset(self) -> None:
        """Remove all particles and start emitting from the beginning."""
        self.particles.clear()
        self.spawned_count = 0
        if self.rules.reset_restores_total:
            self.total_to_spawn = self._initial_total
        self._spawn_timer = 0.0
        self.gravity = Vector2(self._initial_gravity)
        self.spawn_position = Vector2(self._initial_spawn_position)

    def clear(self) -> None:
        """Remove all particles without granting new ones to spawn."""
        self.particles.clear()
        self._spawn_timer = 0.0

    def _try_spawn(self, dt: float) -> None:
        if self.spawned_count >= self.total_to_spawn:
            return
        self._spawn_timer += dt
        if self._spawn_timer >= self.spawn_interval:
            self._spawn()
            # Subtract rather than reset so overshoot carries over.
            self._spawn_timer -= self.spawn_interval

    def _spawn(self) -> None:
        if self.spawned_count >= self.total_to_spawn:
            return
        rules = self.rules
        radius = rules.base_radius + self.rng.uniform(0.0, rules.radius_spread)
        mass = radius**2 * PI * rules.density
        color = self._random_color()
        vx, vy = rules.initial_velocity
        if rules.follow_gravity_sign:
            vy *= math.copysign(1.0, self.gravity.y)

        self.particles.append(
            Particle(
                self.spawn_position,
                (vx, vy),
                self.gravity,
                mass,
                radius,
                color,
                self.area,
                rules.particle_rules,
            )
        )
        self.spawned_count += 1

    def _random_color(self) -> Color:
        lo, hi = self.rules.color_min, self.rules.color_max
        return (self.rng.randint(lo, hi), self.rng.randint(lo, hi), self.rng.randint(lo, hi))