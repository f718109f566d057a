"""
Tests for the smoothed follow camera.
"""
import pytest

from gameplay.camera import Camera


class TestCamera:
    """Tests for easing toward the player."""

    def test_center_on(self):
        camera = Camera(800, 600)
        camera.center_on(400, 300)
        assert (camera.x, camera.y) == (0, 0)

    def test_closes_fraction_of_gap(self):
        camera = Camera(800, 600)
        camera.center_on(400, 300)
        camera.follow(500, 300)
        assert camera.x == pytest.approx(10)
        assert camera.y == pytest.approx(0)

    def test_delta_compounds_smoothing(self):
        camera = Camera(800, 600)
        camera.center_on(400, 300)
        camera.follow(500, 300, delta=2.0)
        assert camera.x == pytest.approx(19)

    def test_never_overshoots(self):
        camera = Camera(800, 600)
        camera.center_on(400, 300)
        for _ in range(200):
            camera.follow(500, 300, delta=3.0)
            assert camera.x <= 100
        assert camera.x == pytest.approx(100)

    @pytest.mark.parametrize("smoothing", [0.0, 1.0, -0.5, 2.0])
    def test_rejects_bad_smoothing(self, smoothing):
        with pytest.raises(ValueError):
            Camera(800, 600, smoothing=smoothing)

    def test_to_screen(self):
        camera = Camera(800, 600)
        camera.center_on(1000, 300)
        assert camera.to_screen(1000, 300) == (400, 300)
