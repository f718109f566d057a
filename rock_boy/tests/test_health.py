"""
Tests for the health component: damage, immunity window, game over.
"""
from gameplay.constants import DAMAGE_FLASH_FRAMES, IMMUNITY_FRAMES
from gameplay.health import Health


class TestDamage:
    """Tests for take_damage."""

    def test_starts_full(self):
        health = Health()
        assert health.current == 100
        assert health.max == 100
        assert not health.is_immune
        assert not health.is_game_over

    def test_damage_sets_flash_and_immunity(self):
        health = Health()
        assert health.take_damage(20)
        assert health.current == 80
        assert health.damage_flash_time == DAMAGE_FLASH_FRAMES
        assert health.immunity_frames == IMMUNITY_FRAMES

    def test_damage_ignored_while_immune(self):
        health = Health()
        health.take_damage(20)
        assert not health.take_damage(20)
        assert health.current == 80

    def test_immunity_wears_off(self):
        health = Health()
        health.take_damage(20)
        for _ in range(IMMUNITY_FRAMES):
            health.update()

        assert not health.is_immune
        assert health.damage_flash_time == 0
        assert health.take_damage(20)
        assert health.current == 60

    def test_two_quick_hits_count_once(self):
        health = Health()
        health.take_damage(30)
        health.update()
        health.take_damage(30)
        assert health.current == 70

        for _ in range(IMMUNITY_FRAMES):
            health.update()
        health.take_damage(30)
        assert health.current == 40


class TestGameOver:
    """Tests for reaching zero health."""

    def test_lethal_hit_clamps_to_zero(self):
        health = Health(10)
        health.take_damage(25)
        assert health.current == 0
        assert health.is_game_over

    def test_no_damage_after_game_over(self):
        health = Health(10)
        health.take_damage(25)
        for _ in range(IMMUNITY_FRAMES):
            health.update()
        assert not health.take_damage(5)
        assert health.current == 0


class TestMaxHealth:
    """Tests for changing the health cap."""

    def test_refill_on_new_max(self):
        health = Health()
        health.take_damage(50)
        health.set_max(120)
        assert health.max == 120
        assert health.current == 120

    def test_clamp_without_refill(self):
        health = Health()
        health.take_damage(20)
        health.set_max(30, refill=False)
        assert health.current == 30

    def test_ratio(self):
        health = Health(200)
        health.take_damage(50)
        assert health.ratio == 0.75
