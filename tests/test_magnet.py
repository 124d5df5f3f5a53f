import pytest

from jumpparticles.magnet import MAGNET_RADIUS, MAGNET_STRENGTH, Magnet
from jumpparticles.particle import Area, Particle


def make_particle(x, y, radius=10.0):
    return Particle((x, y), (0.0, 0.0), (0.0, 0.0), 1.0, radius, (255, 255, 255), Area(720.0, 480.0))


def test_no_pull_without_mouse():
    particle = make_particle(100.0, 100.0)
    Magnet([particle]).update(0.1, None)
    assert tuple(particle.velocity) == (0.0, 0.0)


def test_pulls_towards_pointer():
    particle = make_particle(100.0, 100.0)
    Magnet([particle]).update(0.01, (150.0, 100.0))
    assert particle.velocity.x == pytest.approx(MAGNET_STRENGTH * 0.01)
    assert particle.velocity.y == pytest.approx(0.0)


def test_pull_magnitude_independent_of_direction():
    particle = make_particle(100.0, 100.0)
    Magnet([particle]).update(0.01, (130.0, 140.0))
    assert particle.velocity.length() == pytest.approx(MAGNET_STRENGTH * 0.01)
    assert particle.velocity.x > 0.0 and particle.velocity.y > 0.0


def test_far_particle_is_ignored():
    particle = make_particle(100.0, 100.0, radius=10.0)
    Magnet([particle]).update(0.1, (100.0 + MAGNET_RADIUS + 10.0 + 1.0, 100.0))
    assert tuple(particle.velocity) == (0.0, 0.0)


def test_edge_of_radius_is_pulled():
    particle = make_particle(100.0, 100.0, radius=10.0)
    Magnet([particle]).update(0.1, (100.0 + MAGNET_RADIUS + 10.0, 100.0))
    assert particle.velocity.x > 0.0


def test_particle_under_pointer_is_left_alone():
    particle = make_particle(100.0, 100.0)
    Magnet([particle]).update(0.1, (100.0, 100.0))
    assert tuple(particle.velocity) == (0.0, 0.0)


def test_follows_live_particle_list():
    particles = []
    magnet = Magnet(particles)
    particles.append(make_particle(100.0, 100.0))
    magnet.update(0.01, (100.0, 50.0))
    assert particles[0].velocity.y < 0.0