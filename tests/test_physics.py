import pytest

from pixelflap import physics
from pixelflap.constants import GRAVITY, LIFT
from pixelflap.entities import Bird


def test_integrate_adds_gravity_then_moves():
    bird = Bird(y=100.0, vy=1.0)
    physics.integrate(bird)
    assert bird.vy == pytest.approx(1.0 + GRAVITY)
    assert bird.y == pytest.approx(100.0 + 1.0 + GRAVITY)


def test_integrate_over_many_ticks_is_linear_in_velocity():
    bird = Bird(y=0.0, vy=0.0)
    previous = bird.vy
    for _ in range(50):
        physics.integrate(bird)
        assert bird.vy == pytest.approx(previous + GRAVITY)
        previous = bird.vy


@pytest.mark.parametrize("prior", [-20.0, -3.0, 0.0, 4.2, 15.0])
def test_flap_overrides_velocity(prior):
    bird = Bird(vy=prior)
    physics.flap(bird)
    assert bird.vy == LIFT


def test_rotation_follows_velocity_and_is_clamped():
    bird = Bird(vy=5.0 - GRAVITY)
    physics.integrate(bird)
    assert bird.rotation == pytest.approx(0.3)

    bird.vy = 100.0
    physics.integrate(bird)
    assert bird.rotation == 1.0

    bird.vy = -100.0
    physics.integrate(bird)
    assert bird.rotation == -1.0


def test_clamp():
    assert physics.clamp(5, 0, 3) == 3
    assert physics.clamp(-5, 0, 3) == 0
    assert physics.clamp(2, 0, 3) == 2
