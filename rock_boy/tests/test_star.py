"""
Tests for the roaming star: movement, collection, respawn placement.
"""
import math

import pytest

from gameplay.constants import STAR_RESPAWN_FRAMES
from gameplay.hazards import Platform
from gameplay.physics import RockBody
from gameplay.star import RoamArea, Star, find_safe_star_position

AREA = RoamArea(left=0, right=800, top=0, bottom=550)


class TestMovement:
    """Tests for drifting inside the roam area."""

    def test_bounces_off_right_edge(self):
        star = Star(x=790, y=300)
        star.move(AREA, 1.0)
        assert star.vx < 0

    def test_bounces_off_top_edge(self):
        star = Star(x=400, y=15, vy=-2.0)
        star.move(AREA, 1.0)
        assert star.vy > 0

    def test_spins(self):
        star = Star(x=400, y=300)
        star.move(AREA, 2.0)
        assert star.rotation == pytest.approx(0.2)


class TestCollection:
    """Tests for touching and respawning."""

    def test_touch_is_strict(self):
        star = Star(x=100, y=100)
        assert star.touches(RockBody(x=130, y=100))
        assert not star.touches(RockBody(x=135, y=100))

    def test_respawn_timer(self):
        star = Star(x=100, y=100)
        star.collect()
        results = [star.tick_respawn() for _ in range(STAR_RESPAWN_FRAMES + 1)]

        assert not any(results[:STAR_RESPAWN_FRAMES])
        assert results[STAR_RESPAWN_FRAMES]

    def test_respawn_resets_state(self, rng):
        star = Star(x=100, y=100)
        star.collect()
        star.respawn((500, 200), rng)

        assert not star.collected
        assert (star.x, star.y) == (500, 200)
        assert math.hypot(star.vx, star.vy) == pytest.approx(3.0)


class TestSafePosition:
    """Tests for choosing a respawn point."""

    def test_away_from_rock(self, rng):
        body = RockBody(x=400, y=300)
        for _ in range(20):
            x, y = find_safe_star_position(body, [], AREA, rng)
            assert math.hypot(x - 400, y - 300) > 100
            assert 40 <= x <= 760
            assert 40 <= y <= 510

    def test_clear_of_platforms(self, rng):
        body = RockBody(x=50, y=500)
        platform = Platform(x=200, y=200, width=400)
        for _ in range(20):
            x, y = find_safe_star_position(body, [platform], AREA, rng)
            inside = 160 < x < 640 and 160 < y < 260
            assert not inside

    def test_fallback_when_nothing_fits(self, rng):
        body = RockBody(x=100, y=100)
        small = RoamArea(left=0, right=200, top=0, bottom=200)
        assert find_safe_star_position(body, [], small, rng) == (50, 50)
