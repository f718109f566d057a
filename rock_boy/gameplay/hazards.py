"""
Static world geometry (platforms, spikes) and collision against the rock.
NO UI DEPENDENCIES.

The rock is treated as a circle of its current radius, tested with the
bounding box of that circle: overlap on an axis means
bodyMax > rectMin and bodyMin < rectMax.
"""
from dataclasses import dataclass
from enum import Enum, auto
from typing import Iterable, Optional

from .constants import (
    PLATFORM_HEIGHT, SPIKE_BOUNCE_FACTOR, SPIKE_DAMAGE, SPIKE_HEIGHT,
    SPIKE_KNOCKBACK_X, SPIKE_WIDTH,
)
from .physics import PhysicsParams, RockBody


class SpikeOrientation(Enum):
    """Which way a spike points."""
    UP = auto()     # sits on the ground
    DOWN = auto()   # hangs under a platform


@dataclass
class Platform:
    x: float
    y: float
    width: float
    height: float = PLATFORM_HEIGHT

    @property
    def left(self) -> float:
        return self.x

    @property
    def right(self) -> float:
        return self.x + self.width


@dataclass
class Spike:
    x: float
    y: float
    width: float = SPIKE_WIDTH
    height: float = SPIKE_HEIGHT
    orientation: SpikeOrientation = SpikeOrientation.UP
    damage: float = SPIKE_DAMAGE

    @property
    def left(self) -> float:
        return self.x

    @property
    def right(self) -> float:
        return self.x + self.width

    @property
    def center_x(self) -> float:
        return self.x + self.width / 2


def ground_spike(x: float, ground_y: float) -> Spike:
    """A point-up spike standing on the ground line."""
    return Spike(x=x, y=ground_y - SPIKE_HEIGHT, orientation=SpikeOrientation.UP)


def platform_spike(x: float, platform: Platform) -> Spike:
    """A point-down spike hanging from the underside of a platform."""
    return Spike(x=x, y=platform.y + platform.height, orientation=SpikeOrientation.DOWN)


def body_overlaps_rect(body: RockBody, x: float, y: float, width: float, height: float) -> bool:
    return (
        body.right > x and body.left < x + width
        and body.bottom > y and body.top < y + height
    )


def resolve_platforms(body: RockBody, platforms: Iterable[Platform]) -> bool:
    """
    Land the rock on any platform it overlaps while falling.
    Returns True if it landed on at least one.
    """
    if body.vy < 0:
        return False

    landed = False
    for platform in platforms:
        if body_overlaps_rect(body, platform.x, platform.y, platform.width, platform.height):
            body.y = platform.y - body.radius
            body.vy = 0.0
            body.is_grounded = True
            body.can_jump = True
            landed = True
    return landed


def find_spike_hit(body: RockBody, spikes: Iterable[Spike]) -> Optional[Spike]:
    """First spike the rock overlaps, or None."""
    for spike in spikes:
        if body_overlaps_rect(body, spike.x, spike.y, spike.width, spike.height):
            return spike
    return None


def apply_spike_bounce(body: RockBody, spike: Spike, params: PhysicsParams) -> None:
    """Knock the rock up and away from the spike's center."""
    body.vy = params.jump_force * SPIKE_BOUNCE_FACTOR
    body.vx = -SPIKE_KNOCKBACK_X if body.x < spike.center_x else SPIKE_KNOCKBACK_X
    body.is_grounded = False
