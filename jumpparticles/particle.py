"""A bouncing particle confined to a rectangular area."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence, Tuple

import pygame
from pygame.math import Vector2

Color = Tuple[int, int, int]


@dataclass
class Area:
    """The rectangle particles live in, anchored at the origin.

    It is shared by reference, so resizing it moves the walls for every
    particle that holds it.
    """

    width: float
    height: float


@dataclass(frozen=True)
class ParticleRules:
    """Tuning values for boundary bounces, resting and ground friction."""

    restitution: float = 0.8
    ground_friction: float = 0.97
    velocity_x_threshold: float = 0.1
    velocity_y_threshold: float = 0.01
    freeze_when_grounded: bool = True


class Particle:
    """A circular particle with semi-implicit Euler motion and wall bounces."""

    def __init__(
        self,
        position: Sequence[float],
        velocity: Sequence[float],
        acceleration: Sequence[float],
        mass: float,
        radius: float,
        color: Color,
        area: Area,
        rules: ParticleRules | None = None,
    ) -> None:
        self.position = position
        self.velocity = velocity
        self.acceleration = acceleration
        self.mass = float(mass)
        self.radius = float(radius)
        self.color = tuple(color)
        self.area = area
        self.rules = rules if rules is not None else ParticleRules()
        self.is_grounded = False

    @property
    def position(self) -> Vector2:
        return self._position

    @position.setter
    def position(self, value: Sequence[float]) -> None:
        self._position = Vector2(value)

    @property
    def velocity(self) -> Vector2:
        return self._velocity

    @velocity.setter
    def velocity(self, value: Sequence[float]) -> None:
        self._velocity = Vector2(value)

    @property
    def acceleration(self) -> Vector2:
        return self._acceleration

    @acceleration.setter
    def acceleration(self, value: Sequence[float]) -> None:
        self._acceleration = Vector2(value)

    def update(self, dt: float) -> None:
        """Advance the particle by ``dt`` seconds and resolve wall contacts."""
        rules = self.rules
        if abs(self._velocity.x) < rules.velocity_x_threshold:
            self._velocity.x = 0.0
        if abs(self._velocity.y) < rules.velocity_y_threshold:
            self._velocity.y = 0.0

        # A particle sliding on the ground loses horizontal speed.
        if self.is_grounded:
            self._velocity.x *= rules.ground_friction

        if not self.is_grounded or not rules.freeze_when_grounded:
            self._velocity += self._acceleration * dt
            self._position = self._position + self._velocity * dt

        self.handle_boundary_collisions()

    def draw(self, surface: pygame.Surface) -> None:
        """Draw the particle as a filled circle centred on its position."""
        pygame.draw.circle(surface, self.color, self._position, self.radius)

    def handle_boundary_collisions(self) -> None:
        """Push the particle back inside the area, reflecting its velocity."""
        restitution = self.rules.restitution
        width, height = self.area.width, self.area.height
        r = self.radius

        if self._position.x - r < 0.0:
            self._position.x = r
            self._velocity.x *= -restitution
        elif self._position.x + r > width:
            self._position.x = width - r
            self._velocity.x *= -restitution

        if self._position.y - r < 0.0:
            self._position.y = r
            self._velocity.y *= -restitution
        elif self._position.y + r > height:
            self._position.y = height - r
            self._velocity.y *= -restitution
            if abs(self._velocity.y) < self.rules.velocity_y_threshold:
                self.is_grounded = True
        else:
            self.is_grounded = False