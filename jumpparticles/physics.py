"""Pairwise collision detection and response between particles."""

from __future__ import annotations

from itertools import combinations
from typing import List

from pygame.math import Vector2

from jumpparticles.particle import Particle

DISTANCE_THRESHOLD = 0.1
"""Squared distance below which two particles count as sharing a spot."""

RESTITUTION_APPROXIMATION = 0.95
"""Damping applied to the impulse exchanged in a particle collision."""


def solve_penetration(p1: Particle, p2: Particle, normal: Vector2, depth: float) -> None:
    """Move both particles apart by half of ``depth`` each along ``normal``.

    ``normal`` is the unit vector pointing from ``p1`` towards ``p2``.
    """
    correction = Vector2(normal) * depth
    p1.position = p1.position - correction * 0.5
    p2.position = p2.position + correction * 0.5


def solve_collision(p1: Particle, p2: Particle, use_mass: bool = True) -> None:
    """Exchange velocities along the line of centres, as in an elastic bounce.

    With ``use_mass`` false both particles are treated as having unit mass.
    Raises ``ValueError`` if the particles share the same position.
    """
    v1, v2 = p1.velocity, p2.velocity
    m1, m2 = (p1.mass, p2.mass) if use_mass else (1.0, 1.0)

    diff = p1.position - p2.position
    dist_squared = diff.length_squared()
    if dist_squared == 0.0:
        raise ValueError("cannot resolve a collision between coincident particles")

    impact = (v1 - v2).dot(diff) / dist_squared
    total_mass = m1 + m2
    factor1 = 2.0 * m2 / total_mass * impact
    factor2 = 2.0 * m1 / total_mass * impact

    p1.velocity = v1 - diff * factor1 * RESTITUTION_APPROXIMATION
    p2.velocity = v2 - (-diff) * factor2 * RESTITUTION_APPROXIMATION


class PhysicsSolver:
    """Resolves overlaps and bounces between every pair of particles.

    The solver keeps a reference to the particle list, so particles added to
    or removed from it later are taken into account.
    """

    def __init__(self, particles: List[Particle], use_mass: bool = True) -> None:
        self.particles = particles
        self.use_mass = use_mass

    def update(self, dt: float) -> None:
        """Check each pair once and resolve any that overlap."""
        for p1, p2 in combinations(self.particles, 2):
            offset = p2.position - p1.position
            dist_squared = offset.length_squared()
            combined = p1.radius + p2.radius

            # Colliding, and not sitting on exactly the same spot.
            if DISTANCE_THRESHOLD < dist_squared < combined * combined:
                distance = offset.length()
                normal = offset / distance
                solve_penetration(p1, p2, normal, combined - distance)
                solve_collision(p1, p2, self.use_mass)