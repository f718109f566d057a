"""
The roaming star collectible.
NO UI DEPENDENCIES.
"""
import logging
import math
from dataclasses import dataclass
from typing import Iterable, Tuple

from .constants import (
    STAR_EDGE_MARGIN, STAR_MIN_SPAWN_DISTANCE, STAR_RESPAWN_FRAMES,
    STAR_SIZE, STAR_SPAWN_ATTEMPTS, STAR_SPAWN_PADDING, STAR_SPEED, STAR_SPIN,
)
from .hazards import Platform
from .physics import RockBody
from .rng import RandomSource

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RoamArea:
    """Region the star bounces around in, and respawns within."""
    left: float
    right: float
    top: float
    bottom: float

    def contains(self, x: float, y: float) -> bool:
        return self.left <= x <= self.right and self.top <= y <= self.bottom


@dataclass
class Star:
    x: float
    y: float
    vx: float = STAR_SPEED
    vy: float = -2.0
    size: float = STAR_SIZE
    rotation: float = 0.0
    collected: bool = False
    respawn_timer: int = 0

    def move(self, area: RoamArea, delta: float) -> None:
        """Drift, spin, and bounce off the edges of the roam area."""
        self.x += self.vx * delta
        self.y += self.vy * delta
        self.rotation += STAR_SPIN * delta

        if self.x < area.left + STAR_EDGE_MARGIN:
            self.vx = abs(self.vx)
        elif self.x > area.right - STAR_EDGE_MARGIN:
            self.vx = -abs(self.vx)
        if self.y < area.top + STAR_EDGE_MARGIN:
            self.vy = abs(self.vy)
        elif self.y > area.bottom - STAR_EDGE_MARGIN:
            self.vy = -abs(self.vy)

    def touches(self, body: RockBody) -> bool:
        """Circle-circle test against the rock."""
        dx = body.x - self.x
        dy = body.y - self.y
        reach = body.radius + self.size
        return dx * dx + dy * dy < reach * reach

    def collect(self) -> None:
        self.collected = True
        self.respawn_timer = STAR_RESPAWN_FRAMES

    def tick_respawn(self) -> bool:
        """
        Count down while collected.
        Returns True on the tick the star should reappear.
        """
        if not self.collected:
            return False
        if self.respawn_timer > 0:
            self.respawn_timer -= 1
            return False
        return True

    def respawn(self, position: Tuple[float, float], rng: RandomSource) -> None:
        self.x, self.y = position
        angle = rng.random() * math.pi * 2
        self.vx = math.cos(angle) * STAR_SPEED
        self.vy = math.sin(angle) * STAR_SPEED
        self.collected = False
        self.respawn_timer = 0


def find_safe_star_position(
    body: RockBody,
    platforms: Iterable[Platform],
    area: RoamArea,
    rng: RandomSource,
    max_attempts: int = STAR_SPAWN_ATTEMPTS,
) -> Tuple[float, float]:
    """
    Random point in the roam area, away from the rock and clear of platforms.

    Gives up after max_attempts and returns a fixed point a quarter of the
    way into the area.
    """
    pad = STAR_SPAWN_PADDING
    platforms = list(platforms)

    for _ in range(max_attempts):
        x = rng.uniform(area.left + pad, area.right - pad)
        y = rng.uniform(area.top + pad, area.bottom - pad)

        dx = body.x - x
        dy = body.y - y
        if math.hypot(dx, dy) <= STAR_MIN_SPAWN_DISTANCE:
            continue

        blocked = any(
            p.x - pad < x < p.x + p.width + pad and p.y - pad < y < p.y + p.height + pad
            for p in platforms
        )
        if not blocked:
            return (x, y)

    logger.debug(f"No safe star position after {max_attempts} attempts, using fallback")
    return (
        area.left + (area.right - area.left) / 4,
        area.top + (area.bottom - area.top) / 4,
    )
