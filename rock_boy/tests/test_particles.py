"""
Tests for fixed-capacity particle pools.
"""
import pytest

from gameplay.constants import EVOLUTION_PARTICLES, ROCK_BREAK_PIECES, STAR_TRAIL_LENGTH
from gameplay.particles import Effects, ParticlePool, hue_to_rgb


class TestParticlePool:
    """Tests for spawning, aging and recycling."""

    def test_capacity_must_be_positive(self):
        with pytest.raises(ValueError):
            ParticlePool(0)

    def test_expires_after_life(self):
        pool = ParticlePool(4)
        pool.spawn(0, 0, vx=1, life=3)
        assert len(pool) == 1

        for _ in range(3):
            pool.step()
        assert pool.is_expired()

    def test_moves_with_gravity(self):
        pool = ParticlePool(1)
        particle = pool.spawn(0, 0, vx=2, vy=0, gravity=0.5, life=10)
        pool.step(2.0)
        assert particle.x == pytest.approx(4)
        assert particle.y == pytest.approx(2)
        assert particle.alpha == pytest.approx(0.8)

    def test_full_pool_recycles_shortest_life(self):
        pool = ParticlePool(2)
        pool.spawn(0, 0, life=10)
        pool.spawn(0, 0, life=5)
        pool.spawn(0, 0, life=20)

        lives = sorted(p.life for p in pool.alive())
        assert lives == [10, 20]

    def test_clear(self):
        pool = ParticlePool(3)
        pool.spawn(0, 0)
        pool.clear()
        assert pool.is_expired()


class TestEffects:
    """Tests for the named effect pools."""

    def test_trail_is_bounded(self, rng):
        effects = Effects(rng)
        for i in range(50):
            effects.trail_point(i, 0)
        assert len(effects.star_trail) == STAR_TRAIL_LENGTH

    def test_evolution_burst(self, rng):
        effects = Effects(rng)
        effects.evolution_burst(0, 0, (185, 242, 255))
        assert len(effects.evolution) == EVOLUTION_PARTICLES

    def test_step_and_clear_all(self, rng):
        effects = Effects(rng)
        effects.bounce_sparks(0, 0)
        effects.celebration_burst(0, 0)
        effects.step(1.0)
        assert not effects.sparks.is_expired()

        effects.clear()
        assert all(pool.is_expired() for pool in effects.pools)

    def test_shatter_rock(self, rng):
        effects = Effects(rng)
        effects.shatter_rock(100, 200, 30, (128, 128, 128))

        pieces = list(effects.rock_break.alive())
        assert len(pieces) == ROCK_BREAK_PIECES
        assert all(p.size == 15 for p in pieces)
        # Flung outward in every direction, with a slight upward kick
        assert sum(p.vx for p in pieces) == pytest.approx(0, abs=1e-9)
        assert sum(p.vy for p in pieces) == pytest.approx(-2 * ROCK_BREAK_PIECES)

        before = [p.rotation for p in pieces]
        effects.step(1.0)
        assert [p.rotation for p in pieces] == pytest.approx([r + 0.1 for r in before])

    def test_hue_to_rgb(self):
        assert hue_to_rgb(0.0) == (255, 0, 0)
        assert hue_to_rgb(0.5) == (0, 255, 255)
