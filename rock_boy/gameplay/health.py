"""
Health component for the rock.
NO UI DEPENDENCIES.
"""
import logging

from .constants import BASE_HEALTH, DAMAGE_FLASH_FRAMES, IMMUNITY_FRAMES

logger = logging.getLogger(__name__)


class Health:
    """
    Current/max health with an immunity window and a damage flash.

    Alive while current > 0. Reaching 0 sets is_game_over, which stays set
    until the owner builds a new Health. While the immunity countdown is
    running, damage is ignored entirely.
    """

    def __init__(self, max_health: float = BASE_HEALTH):
        self.max: float = float(max_health)
        self.current: float = self.max
        self.damage_flash_time: int = 0
        self.immunity_frames: int = 0
        self.is_game_over: bool = False

    @property
    def is_immune(self) -> bool:
        return self.immunity_frames > 0

    def take_damage(self, amount: float) -> bool:
        """
        Apply damage unless immune or already dead.
        Returns True if the hit registered.
        """
        if self.is_game_over or self.is_immune:
            return False

        self.current -= amount
        self.damage_flash_time = DAMAGE_FLASH_FRAMES
        self.immunity_frames = IMMUNITY_FRAMES

        if self.current <= 0:
            self.current = 0.0
            self.is_game_over = True
            logger.info("Health depleted, game over")
        return True

    def set_max(self, new_max: float, refill: bool = True) -> None:
        """Change the health cap; current is refilled or clamped to it."""
        self.max = float(new_max)
        if refill and not self.is_game_over:
            self.current = self.max
        else:
            self.current = min(self.current, self.max)

    def update(self) -> None:
        """Count both timers down by one frame."""
        if self.damage_flash_time > 0:
            self.damage_flash_time -= 1
        if self.immunity_frames > 0:
            self.immunity_frames -= 1

    @property
    def ratio(self) -> float:
        """Return health as 0.0 to 1.0."""
        return self.current / self.max if self.max > 0 else 0.0
