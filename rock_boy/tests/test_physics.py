"""
Tests for rock kinematics: delta time, jumping, friction, landing, walls.
"""
import math

import pytest

from gameplay.input_state import FrameInput, InputState
from gameplay.physics import (
    PhysicsParams, RockBody, WorldBounds, compute_delta_multiplier, step_body,
)

PARAMS = PhysicsParams(ground_y=550)


def frame(jump_pressed=False, **held):
    return FrameInput(held=InputState(**held), jump_pressed=jump_pressed)


def grounded_body(rng, x=400.0, vx=0.0):
    """A rock resting on the ground line."""
    body = RockBody.create(x, 530, PARAMS, rng)
    body.vx = vx
    body.is_grounded = True
    body.can_jump = True
    return body


class TestDeltaMultiplier:
    """Tests for converting elapsed time into reference frames."""

    def test_reference_frame_is_one(self):
        assert compute_delta_multiplier(1000 / 60) == pytest.approx(1.0)

    def test_half_frame(self):
        assert compute_delta_multiplier(1000 / 120) == pytest.approx(0.5)

    def test_long_frame_is_capped(self):
        assert compute_delta_multiplier(1000) == 3.0

    def test_backwards_clock_is_zero(self):
        assert compute_delta_multiplier(0) == 0.0
        assert compute_delta_multiplier(-5) == 0.0


class TestJump:
    """Tests for edge-triggered jumping."""

    def test_jump_on_press(self, rng):
        body = grounded_body(rng)
        result = step_body(body, frame(jump_pressed=True, up=True), 1.0, PARAMS, rng)

        assert result.jumped
        assert body.vy == pytest.approx(-11.5)
        assert not body.is_grounded
        assert not body.can_jump

    def test_holding_does_not_jump(self, rng):
        body = grounded_body(rng)
        result = step_body(body, frame(up=True), 1.0, PARAMS, rng)
        assert not result.jumped
        assert body.is_grounded

    def test_no_jump_in_air(self, rng):
        body = RockBody.create(400, 100, PARAMS, rng)
        result = step_body(body, frame(jump_pressed=True, up=True), 1.0, PARAMS, rng)
        assert not result.jumped


class TestHorizontalMotion:
    """Tests for acceleration, air control and friction."""

    def test_acceleration_clamped(self, rng):
        body = grounded_body(rng, vx=7.9)
        step_body(body, frame(right=True), 1.0, PARAMS, rng)
        assert body.vx == 8.0

    def test_air_control_halves_acceleration(self, rng):
        body = RockBody.create(400, 100, PARAMS, rng)
        step_body(body, frame(right=True), 1.0, PARAMS, rng)
        assert body.vx == pytest.approx(0.4)

    def test_friction_scales_with_delta(self, rng):
        body = grounded_body(rng, vx=5.0)
        step_body(body, frame(), 2.0, PARAMS, rng)
        assert body.vx == pytest.approx(5.0 * 0.9 ** 2)

    def test_friction_snaps_to_zero(self, rng):
        body = grounded_body(rng, vx=0.105)
        body.rotation_velocity = 0.3
        step_body(body, frame(), 1.0, PARAMS, rng)
        assert body.vx == 0.0
        assert body.rotation_velocity == 0.0

    def test_rolling_spins(self, rng):
        body = grounded_body(rng, vx=4.0)
        step_body(body, frame(right=True), 1.0, PARAMS, rng)
        assert body.rotation_velocity == pytest.approx(4.8 * 0.05)
        assert body.rotation > 0


class TestLanding:
    """Tests for ground contact."""

    def test_soft_landing_rests(self, rng):
        body = RockBody.create(400, 529.8, PARAMS, rng)
        step_body(body, frame(), 1.0, PARAMS, rng)
        assert body.bottom == pytest.approx(550)
        assert body.is_grounded
        assert body.vy == 0.0

    def test_hard_landing_bounces(self, rng):
        body = RockBody.create(400, 529, PARAMS, rng)
        body.vy = 10.0
        result = step_body(body, frame(), 1.0, PARAMS, rng)

        assert result.hard_landing
        assert body.y == pytest.approx(530)
        assert body.vy == pytest.approx(-10.5 * 0.3)
        assert body.is_grounded


class TestWalls:
    """Tests for finite-world bounds."""

    def test_left_wall_reflects(self, rng):
        body = grounded_body(rng, x=15.0, vx=-4.0)
        step_body(body, frame(), 1.0, PARAMS, rng, WorldBounds(0, 2400))

        assert body.x == body.radius
        assert body.vx == pytest.approx(3.6 * 0.5)
        assert body.rotation_velocity == pytest.approx(-3.6 * 0.05 * -0.8)

    def test_right_wall_reflects(self, rng):
        body = grounded_body(rng, x=2390.0, vx=4.0)
        step_body(body, frame(), 1.0, PARAMS, rng, WorldBounds(0, 2400))
        assert body.right == 2400
        assert body.vx < 0

    def test_no_clamp_without_bounds(self, rng):
        body = grounded_body(rng, x=-5000.0, vx=-4.0)
        step_body(body, frame(), 1.0, PARAMS, rng)
        assert body.x == pytest.approx(-5003.6)


class TestShape:
    """Tests for the cosmetic outline."""

    def test_outline_follows_radius(self, rng):
        body = RockBody.create(0, 0, PARAMS, rng)
        body.set_radius(40, rng)

        assert body.radius == 40
        assert len(body.points) == 12
        for px, py in body.points:
            assert 0.8 * 40 - 1e-9 <= math.hypot(px, py) <= 1.2 * 40 + 1e-9
        assert 3 <= len(body.details) <= 5
