"""Pulling particles towards the mouse pointer."""

from __future__ import annotations

from typing import List, Optional, Sequence

from pygame.math import Vector2

from jumpparticles.particle import Particle

MAGNET_STRENGTH = 1250.0
"""Acceleration towards the pointer, in units per second squared."""

MAGNET_RADIUS = 150.0
"""Distance from a particle's edge to the pointer within which it is pulled."""


class Magnet:
    """Accelerates nearby particles towards a point while it is active.

    The magnet keeps a reference to the particle list, so it always acts on
    the particles currently in it.
    """

    def __init__(self, particles: List[Particle]) -> None:
        self.particles = particles

    def update(self, dt: float, mouse_position: Optional[Sequence[float]]) -> None:
        """Pull particles towards ``mouse_position`` for ``dt`` seconds.

        ``mouse_position`` is ``None`` when the left mouse button is not held,
        in which case nothing happens.
        """
        if mouse_position is None:
            return

        target = Vector2(mouse_position)
        for particle in self.particles:
            normal = target - particle.position
            length = normal.length()
            if length - particle.radius > MAGNET_RADIUS or length == 0.0:
                continue
            particle.velocity = particle.velocity + normal / length * MAGNET_STRENGTH * dt