"""
Camera that eases toward the player.
NO UI DEPENDENCIES.
"""
from .constants import CAMERA_SMOOTHING


class Camera:
    """
    Top-left corner of the viewport in world coordinates.

    Each update closes a fixed fraction of the gap to
    (player - viewport / 2); it never jumps straight there.
    """

    def __init__(self, width: float, height: float, smoothing: float = CAMERA_SMOOTHING):
        if not 0.0 < smoothing < 1.0:
            raise ValueError("smoothing must be between 0 and 1")
        self.width = width
        self.height = height
        self.smoothing = smoothing
        self.x = 0.0
        self.y = 0.0

    def target_for(self, px: float, py: float):
        return px - self.width / 2, py - self.height / 2

    def center_on(self, px: float, py: float) -> None:
        """Place the camera directly; used on reset, not per frame."""
        self.x, self.y = self.target_for(px, py)

    def follow(self, px: float, py: float, delta: float = 1.0) -> None:
        tx, ty = self.target_for(px, py)
        # Exponential approach, frame-rate independent. Stays < 1 for delta <= 3.
        factor = 1.0 - (1.0 - self.smoothing) ** delta
        self.x += (tx - self.x) * factor
        self.y += (ty - self.y) * factor

    def to_screen(self, wx: float, wy: float):
        return wx - self.x, wy - self.y
