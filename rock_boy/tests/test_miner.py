"""
Tests for miner NPCs: patrol, attack timing, knockback, cooldown.
"""
import pytest

from gameplay.constants import MINER_ATTACK_COOLDOWN, MINER_ATTACK_DURATION
from gameplay.miner import Miner, MinerState
from gameplay.physics import RockBody


def swing(miner, body, rng, frames=MINER_ATTACK_DURATION, can_hit=True):
    return [miner.update(body, rng, can_hit=can_hit) for _ in range(frames)]


class TestAttack:
    """Tests for starting and landing a swing."""

    def test_attacks_at_exact_range(self, rng):
        miner = Miner(x=100, y=550)
        body = RockBody(x=160, y=525)

        miner.update(body, rng)
        assert miner.is_attacking
        assert miner.cooldown_timer == MINER_ATTACK_COOLDOWN

    def test_ignores_rock_out_of_range(self, rng):
        miner = Miner(x=100, y=550)
        body = RockBody(x=161, y=525)
        miner.update(body, rng)
        assert miner.state == MinerState.PATROL

    def test_faces_the_rock(self, rng):
        miner = Miner(x=100, y=550, facing=1)
        miner.update(RockBody(x=60, y=525), rng)
        assert miner.facing == -1

    def test_hit_lands_once_at_midpoint(self, rng):
        miner = Miner(x=100, y=550)
        body = RockBody(x=160, y=525)
        hits = swing(miner, body, rng)

        landed = [i for i, hit in enumerate(hits) if hit is not None]
        assert landed == [MINER_ATTACK_DURATION // 2]
        hit = hits[landed[0]]
        assert hit.damage == 15
        assert hit.knockback_x == pytest.approx(10)
        assert hit.knockback_y == pytest.approx(-5)
        assert miner.state == MinerState.PATROL

    def test_no_hit_when_rock_cannot_be_hit(self, rng):
        miner = Miner(x=100, y=550)
        body = RockBody(x=160, y=525)
        hits = swing(miner, body, rng, can_hit=False)
        assert all(hit is None for hit in hits)
        assert not miner.is_attacking

    def test_zero_distance_uses_facing(self, rng):
        miner = Miner(x=100, y=550)
        body = RockBody(x=100, y=525)
        hit = next(h for h in swing(miner, body, rng) if h is not None)
        assert hit.knockback_x == pytest.approx(10)
        assert hit.knockback_y == pytest.approx(-5)

    def test_cooldown_between_swings(self, rng):
        miner = Miner(x=100, y=550, walk_speed=0.0)
        body = RockBody(x=140, y=525)
        swing(miner, body, rng)

        idle = MINER_ATTACK_COOLDOWN - MINER_ATTACK_DURATION
        for _ in range(idle):
            miner.update(body, rng)
            assert not miner.is_attacking

        miner.update(body, rng)
        assert miner.is_attacking


class TestPatrol:
    """Tests for walking around."""

    def test_walks_in_facing_direction(self, rng):
        miner = Miner(x=100, y=550, facing=1)
        far = RockBody(x=5000, y=525)
        miner.update(far, rng)
        assert miner.x != 100
        assert miner.walk_phase > 0


class TestDefeat:
    """Tests for miners taking damage."""

    def test_defeat_reported_once(self):
        miner = Miner(x=100, y=550)
        assert not miner.take_damage(15)
        assert miner.take_damage(15)
        assert not miner.is_alive
        assert not miner.take_damage(15)
