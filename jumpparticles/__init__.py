"""Bouncing particle simulation with gravity, collisions, buttons and a mouse magnet."""

__version__ = "0.1.0"

__all__ = [
    "button",
    "early_games",
    "early_particles",
    "game",
    "magnet",
    "particle",
    "particle_system",
    "physics",
]