import pygame
import pytest

from jumpparticles.particle import Area, Particle, ParticleRules

RED = (255, 0, 0)


def make(position, velocity=(0, 0), acceleration=(0, 0), radius=10, area=None, rules=None):
    return Particle(
        position,
        velocity,
        acceleration,
        1.0,
        radius,
        RED,
        area if area is not None else Area(200, 100),
        rules,
    )


def test_left_wall_clamps_and_reflects():
    p = make((5, 50), velocity=(-10, 0))
    p.handle_boundary_collisions()
    assert p.position.x == 10
    assert p.velocity.x == pytest.approx(8.0)


def test_right_wall_clamps_and_reflects():
    p = make((198, 50), velocity=(20, 0))
    p.handle_boundary_collisions()
    assert p.position.x == 190
    assert p.velocity.x < 0
    assert abs(p.velocity.x) < 20


def test_top_wall_clamps_and_reflects():
    p = make((100, 3), velocity=(0, -30))
    p.handle_boundary_collisions()
    assert p.position.y == 10
    assert p.velocity.y > 0
    assert abs(p.velocity.y) < 30


def test_slow_bottom_contact_grounds_particle():
    p = make((100, 95), velocity=(0, 0.005))
    p.handle_boundary_collisions()
    assert p.position.y == 90
    assert p.is_grounded is True


def test_fast_bottom_contact_bounces_without_grounding():
    p = make((100, 95), velocity=(0, 50))
    p.handle_boundary_collisions()
    assert p.position.y == 90
    assert p.velocity.y < 0
    assert p.is_grounded is False


def test_inside_area_clears_grounded_flag():
    p = make((100, 50))
    p.is_grounded = True
    p.handle_boundary_collisions()
    assert p.is_grounded is False
    assert p.position == pygame.math.Vector2(100, 50)


def test_tiny_horizontal_velocity_is_zeroed():
    p = make((100, 50), velocity=(0.05, 0))
    p.update(0.1)
    assert p.velocity.x == 0
    assert p.position == pygame.math.Vector2(100, 50)


def test_grounded_particle_slides_with_friction_and_stays_put():
    p = make((100, 90), velocity=(10, 0), acceleration=(0, 50))
    p.is_grounded = True
    p.update(0.1)
    assert p.velocity.x == pytest.approx(9.7)
    assert p.position == pygame.math.Vector2(100, 90)


def test_integrating_rules_move_grounded_particle():
    rules = ParticleRules(velocity_y_threshold=3.0, freeze_when_grounded=False)
    p = make((100, 50), velocity=(10, 0), rules=rules)
    p.is_grounded = True
    p.update(0.1)
    assert p.position.x > 100
    assert p.velocity.x < 10


def test_free_fall_uses_updated_velocity_for_position():
    p = make((100, 20), acceleration=(0, 100))
    old = pygame.math.Vector2(p.position)
    dt = 0.05
    p.update(dt)
    assert p.velocity.y > 0
    assert (p.position - old).y == pytest.approx(p.velocity.y * dt)


def test_shared_area_resize_moves_walls():
    area = Area(200, 100)
    p = make((150, 50), area=area)
    area.width = 120
    p.handle_boundary_collisions()
    assert p.position.x == 110


def test_vector_attributes_accept_sequences():
    p = make((1, 2))
    p.position = (30, 40)
    p.velocity = [5, 6]
    assert p.position.x == 30
    assert p.velocity + p.position == pygame.math.Vector2(35, 46)


def test_draw_fills_circle_with_color():
    surface = pygame.Surface((200, 100))
    surface.fill((0, 0, 0))
    p = make((50, 50))
    p.draw(surface)
    assert tuple(surface.get_at((50, 50)))[:3] == RED
    assert tuple(surface.get_at((150, 50)))[:3] == (0, 0, 0)