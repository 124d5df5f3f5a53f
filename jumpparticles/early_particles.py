"""The simpler particles used before collisions between particles existed."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Sequence

import pygame
from pygame.math import Vector2

from jumpparticles.particle import Area, Color, Particle, ParticleRules

BOUNCING_RULES = ParticleRules(
    restitution=0.8,
    ground_friction=0.97,
    velocity_x_threshold=0.1,
    velocity_y_threshold=3.0,
    freeze_when_grounded=False,
)
"""Rules of the first bouncing particle: a coarse resting threshold, and
integration that goes on while the particle slides on the ground."""


@dataclass
class StaticParticle:
    """A circle that sits where it was placed."""

    position: Vector2
    radius: float
    color: Color = field(default=(0, 255, 0))

    def __post_init__(self) -> None:
        self.position = Vector2(self.position)
        self.radius = float(self.radius)
        self.color = tuple(self.color)

    def update(self) -> None:
        """Do nothing: a static particle never moves."""

    def draw(self, surface: pygame.Surface) -> None:
        """Draw the particle as a filled circle centred on its position."""
        pygame.draw.circle(surface, self.color, self.position, self.radius)


@dataclass
class FreeParticle:
    """A circle under constant acceleration with no walls to stop it."""

    position: Vector2
    velocity: Vector2
    acceleration: Vector2
    radius: float
    color: Color = field(default=(0, 255, 0))

    def __post_init__(self) -> None:
        self.position = Vector2(self.position)
        self.velocity = Vector2(self.velocity)
        self.acceleration = Vector2(self.acceleration)
        self.radius = float(self.radius)
        self.color = tuple(self.color)

    def update(self, dt: float) -> None:
        """Advance by ``dt`` seconds with semi-implicit Euler integration."""
        self.velocity += self.acceleration * dt
        self.position += self.velocity * dt

    def draw(self, surface: pygame.Surface) -> None:
        """Draw the particle as a filled circle centred on its position."""
        pygame.draw.circle(surface, self.color, self.position, self.radius)


def bouncing_particle(
    position: Sequence[float],
    velocity: Sequence[float],
    acceleration: Sequence[float],
    radius: float,
    color: Color,
    area: Area,
) -> Particle:
    """Build a massless-era particle that bounces off the walls of ``area``.

    The particle has unit mass, since nothing in this setting uses it.
    """
    return Particle(position, velocity, acceleration, 1.0, radius, color, area, BOUNCING_RULES)