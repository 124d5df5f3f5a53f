import random

import pygame
import pytest

from jumpparticles.early_games import EarlyGame
from jumpparticles.early_particles import FreeParticle, StaticParticle
from jumpparticles.particle import Particle


@pytest.mark.parametrize("stage", [0, 8, -1])
def test_unknown_stage_is_rejected(stage):
    with pytest.raises(ValueError):
        EarlyGame(stage)


def test_non_positive_size_is_rejected():
    with pytest.raises(ValueError):
        EarlyGame(3, "Jump Particles", (0, 480), 60)


def test_defaults_follow_source():
    game = EarlyGame(1)
    assert game.title == "Jump Particles"
    assert game.initial_size == (720, 480)
    assert game.frame_rate_limit == 60
    assert game.particles == []


def test_stage_one_resize_updates_area():
    game = EarlyGame(1)
    game.handle_resize(800, 600)
    assert (game.area.width, game.area.height) == (800.0, 600.0)


def test_stage_two_particle_is_centred_and_still():
    game = EarlyGame(2)
    particle = game.particle
    assert isinstance(particle, StaticParticle)
    assert tuple(particle.position) == (360.0, 240.0)
    assert particle.radius == 20.0
    game.update(1.0)
    assert tuple(particle.position) == (360.0, 240.0)


def test_stage_two_draws_green_particle_on_black():
    game = EarlyGame(2)
    surface = pygame.Surface((720, 480))
    surface.fill((255, 255, 255))
    game.draw(surface)
    assert tuple(surface.get_at((360, 240)))[:3] == (0, 255, 0)
    assert tuple(surface.get_at((0, 0)))[:3] == (0, 0, 0)


def test_stage_three_particle_falls_and_drifts_right():
    game = EarlyGame(3)
    particle = game.particle
    assert isinstance(particle, FreeParticle)
    start = particle.position.copy()
    game.update(0.5)
    assert particle.position.x > start.x
    assert particle.position.y > start.y
    assert particle.velocity.x == 60.0


def test_stage_three_has_no_walls():
    game = EarlyGame(3)
    for _ in range(200):
        game.update(0.1)
    assert game.particle.position.y > 480


def test_stage_four_particle_stays_inside_area():
    game = EarlyGame(4)
    particle = game.particle
    assert isinstance(particle, Particle)
    for _ in range(600):
        game.update(1 / 60)
        assert 20.0 <= particle.position.x <= 700.0
        assert 20.0 <= particle.position.y <= 460.0


def test_stage_four_resize_moves_walls():
    game = EarlyGame(4)
    game.handle_resize(200, 150)
    game.update(1 / 60)
    assert game.particle.position.x <= 180.0
    assert game.particle.position.y <= 130.0


def test_stage_five_spawns_after_interval():
    game = EarlyGame(5)
    game.particle_system.rng = random.Random(3)
    game.update(0.05)
    assert game.particles == []
    game.update(0.05)
    assert len(game.particles) == 1
    radius = game.particles[0].radius
    assert 10.0 <= radius <= 20.0
    assert game.solver is None


def test_stage_six_substeps_spawn_each_step():
    game = EarlyGame(6)
    game.particle_system.rng = random.Random(5)
    game.update(0.15 * 16)
    assert len(game.particles) == 16
    assert game.solver.use_mass is False
    for particle in game.particles:
        assert 10.0 <= particle.radius <= 20.0


def test_stage_seven_uses_mass_and_smaller_particles():
    game = EarlyGame(7)
    game.particle_system.rng = random.Random(11)
    game.update(0.15 * 16)
    assert game.solver.use_mass is True
    for particle in game.particles:
        assert 8.0 <= particle.radius <= 18.0
        assert all(25 <= channel <= 255 for channel in particle.color)


def test_solver_shares_system_particles():
    game = EarlyGame(7)
    assert game.solver.particles is game.particle_system.particles


def test_stage_seven_particles_stay_inside_after_long_run():
    game = EarlyGame(7)
    game.particle_system.rng = random.Random(2)
    for _ in range(300):
        game.update(1 / 60)
    assert len(game.particles) > 0
    for particle in game.particles:
        assert particle.radius - 1e-6 <= particle.position.x <= 720 - particle.radius + 1e-6
        assert particle.radius - 1e-6 <= particle.position.y <= 480 - particle.radius + 1e-6