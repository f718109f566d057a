"""
Tests for the fixed finite-world layout.
"""
from gameplay.hazards import SpikeOrientation
from gameplay.level import create_finite_level, level_bounds


class TestFiniteLevel:
    """Tests for the repeated per-screen layout."""

    def test_bounds_span_all_screens(self):
        bounds = level_bounds(800, 3)
        assert bounds.left == 0
        assert bounds.right == 2400

    def test_layout_repeats_per_screen(self):
        content = create_finite_level(800, 600, 550, screens=3)
        assert len(content.platforms) == 9
        assert len(content.spikes) == 6
        assert max(p.right for p in content.platforms) == 2400

    def test_spike_hangs_under_high_platform(self):
        content = create_finite_level(800, 600, 550)
        high = min(content.platforms, key=lambda p: p.y)
        hanging = [s for s in content.spikes if s.orientation == SpikeOrientation.DOWN]

        assert len(hanging) == 1
        assert hanging[0].y == high.y + high.height
        assert high.left <= hanging[0].left and hanging[0].right <= high.right

    def test_ground_spike_on_ground(self):
        content = create_finite_level(800, 600, 550)
        ground = [s for s in content.spikes if s.orientation == SpikeOrientation.UP]
        assert [s.y + s.height for s in ground] == [550]
