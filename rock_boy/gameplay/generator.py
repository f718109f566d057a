"""
Procedural world generation and cleanup.
NO UI DEPENDENCIES.

The world is split into fixed-width segments aligned to an origin. Two
frontiers mark how far content exists on each side of it. Each tick the
frontiers are pushed out until [player - look_ahead, player + look_ahead]
is covered, and everything entirely outside
[player - cleanup_distance, player + cleanup_distance] is dropped.

Generated entities are placed strictly inside their segment, so once a
whole segment lies outside the cleanup window its content is gone and the
frontier can be pulled back over it. Walking back regenerates it fresh.
"""
import logging
import math
from dataclasses import dataclass, field
from typing import List

from .constants import (
    CLEANUP_DISTANCE, GENERATION_STEP, GROUND_SPIKE_CHANCE, LOOK_AHEAD,
    MAX_GENERATION_ITERATIONS, MAX_PLATFORMS_PER_SEGMENT, MINER_BASE_CHANCE,
    MINER_CHANCE_PER_WORLD, MINER_MAX_CHANCE, MINER_WIDTH, PLATFORM_MAX_RISE,
    PLATFORM_MAX_WIDTH, PLATFORM_MIN_RISE, PLATFORM_MIN_WIDTH,
    PLATFORM_SPIKE_CHANCE, SEGMENT_MARGIN, SPAWN_SAFE_RADIUS, SPIKE_WIDTH,
)
from .exceptions import GenerationConfigError
from .hazards import Platform, Spike, ground_spike, platform_spike
from .miner import Miner
from .rng import RandomSource

logger = logging.getLogger(__name__)


@dataclass
class WorldContent:
    """Every platform, spike and miner currently in the world."""
    platforms: List[Platform] = field(default_factory=list)
    spikes: List[Spike] = field(default_factory=list)
    miners: List[Miner] = field(default_factory=list)

    def clear(self) -> None:
        self.platforms.clear()
        self.spikes.clear()
        self.miners.clear()

    def __len__(self) -> int:
        return len(self.platforms) + len(self.spikes) + len(self.miners)


def miner_chance(world_level: int) -> float:
    """Per-roll chance of a miner in a segment; rises with world level."""
    chance = MINER_BASE_CHANCE + MINER_CHANCE_PER_WORLD * (world_level - 1)
    return min(chance, MINER_MAX_CHANCE)


class ProceduralGenerator:
    """
    Keeps content generated around the player in both directions.

    step must be > 0. A non-positive step is a configuration error: the
    pass is logged and skipped for that tick, the game keeps running.
    """

    def __init__(
        self,
        rng: RandomSource,
        ground_y: float,
        origin: float = 0.0,
        spawn_x: float = 0.0,
        step: float = GENERATION_STEP,
        look_ahead: float = LOOK_AHEAD,
        cleanup_distance: float = CLEANUP_DISTANCE,
        max_iterations: int = MAX_GENERATION_ITERATIONS,
    ):
        self.rng = rng
        self.ground_y = ground_y
        self.origin = origin
        self.spawn_x = spawn_x
        self.step = step
        self.look_ahead = look_ahead
        self.cleanup_distance = cleanup_distance
        self.max_iterations = max_iterations

        self.rightmost_generated: float = origin
        self.leftmost_generated: float = origin
        self.segments_generated: int = 0

    def reset(self, origin: float, spawn_x: float) -> None:
        """Forget all frontiers; used when the world is rebuilt."""
        self.origin = origin
        self.spawn_x = spawn_x
        self.rightmost_generated = origin
        self.leftmost_generated = origin
        self.segments_generated = 0

    # =========================================================================
    # PER-TICK UPDATE
    # =========================================================================

    def update(self, player_x: float, content: WorldContent, world_level: int = 1) -> bool:
        """
        Extend both frontiers, then clean up.
        Returns False if the pass was skipped.
        """
        try:
            self._check_config()
        except GenerationConfigError as e:
            logger.error(f"Skipping world generation this tick: {e}")
            return False

        self._extend_right(player_x, content, world_level)
        self._extend_left(player_x, content, world_level)
        self.cleanup(player_x, content)
        self._retract_frontiers(player_x)
        return True

    def _check_config(self) -> None:
        if not self.step > 0:
            raise GenerationConfigError(f"generation step must be > 0, got {self.step}")
        if self.cleanup_distance < self.look_ahead:
            raise GenerationConfigError(
                f"cleanup distance {self.cleanup_distance} is inside look-ahead {self.look_ahead}"
            )

    def _extend_right(self, player_x: float, content: WorldContent, world_level: int) -> None:
        target = player_x + self.look_ahead
        iterations = 0
        while self.rightmost_generated < target and iterations < self.max_iterations:
            start = self.rightmost_generated
            self.generate_segment(start, content, world_level)
            self.rightmost_generated = start + self.step
            iterations += 1

        if self.rightmost_generated < target:
            logger.warning(
                f"Right frontier {self.rightmost_generated:.0f} still short of "
                f"{target:.0f} after {iterations} segments"
            )

    def _extend_left(self, player_x: float, content: WorldContent, world_level: int) -> None:
        target = player_x - self.look_ahead
        iterations = 0
        while self.leftmost_generated > target and iterations < self.max_iterations:
            start = self.leftmost_generated - self.step
            self.generate_segment(start, content, world_level)
            self.leftmost_generated = start
            iterations += 1

        if self.leftmost_generated > target:
            logger.warning(
                f"Left frontier {self.leftmost_generated:.0f} still short of "
                f"{target:.0f} after {iterations} segments"
            )

    # =========================================================================
    # CLEANUP
    # =========================================================================

    def cleanup(self, player_x: float, content: WorldContent) -> int:
        """
        Remove everything entirely outside the retention window.
        An entity touching the window edge is kept. Returns how many were removed.
        """
        low = player_x - self.cleanup_distance
        high = player_x + self.cleanup_distance

        def keep(entity) -> bool:
            return not (entity.right < low or entity.left > high)

        before = len(content)
        content.platforms[:] = [p for p in content.platforms if keep(p)]
        content.spikes[:] = [s for s in content.spikes if keep(s)]
        content.miners[:] = [m for m in content.miners if keep(m)]
        return before - len(content)

    def _grid_floor(self, x: float) -> float:
        return self.origin + math.floor((x - self.origin) / self.step) * self.step

    def _grid_ceil(self, x: float) -> float:
        return self.origin + math.ceil((x - self.origin) / self.step) * self.step

    def _retract_frontiers(self, player_x: float) -> None:
        # Segments wholly beyond the cleanup window hold nothing any more.
        left_edge = min(
            self._grid_floor(player_x - self.cleanup_distance),
            self._grid_floor(player_x - self.look_ahead),
        )
        right_edge = max(
            self._grid_ceil(player_x + self.cleanup_distance),
            self._grid_ceil(player_x + self.look_ahead),
        )
        if self.leftmost_generated < left_edge:
            self.leftmost_generated = left_edge
        if self.rightmost_generated > right_edge:
            self.rightmost_generated = right_edge

    # =========================================================================
    # SEGMENT CONTENT
    # =========================================================================

    def generate_segment(self, start: float, content: WorldContent, world_level: int = 1) -> None:
        """Fill [start, start + step) with platforms, spikes and miners."""
        inner_left = start + SEGMENT_MARGIN
        inner_right = start + self.step - SEGMENT_MARGIN
        if inner_right <= inner_left:
            return

        self._place_platforms(inner_left, inner_right, content)
        self._place_ground_spike(inner_left, inner_right, content)
        self._place_miners(inner_left, inner_right, content, world_level)
        self.segments_generated += 1

    def _place_platforms(self, inner_left: float, inner_right: float, content: WorldContent) -> None:
        count = self.rng.randint(0, MAX_PLATFORMS_PER_SEGMENT)
        if count == 0:
            return

        # One slot per platform so platforms in a segment never overlap
        slot_width = (inner_right - inner_left) / count
        for i in range(count):
            slot_left = inner_left + i * slot_width
            max_width = min(PLATFORM_MAX_WIDTH, slot_width - SEGMENT_MARGIN)
            if max_width <= 0:
                continue
            width = self.rng.uniform(min(PLATFORM_MIN_WIDTH, max_width), max_width)
            x = self.rng.uniform(slot_left, slot_left + slot_width - SEGMENT_MARGIN - width)
            rise = self.rng.uniform(PLATFORM_MIN_RISE, PLATFORM_MAX_RISE)
            platform = Platform(x=x, y=self.ground_y - rise, width=width)
            content.platforms.append(platform)

            if width > SPIKE_WIDTH and self.rng.random() < PLATFORM_SPIKE_CHANCE:
                spike_x = self.rng.uniform(platform.x, platform.right - SPIKE_WIDTH)
                content.spikes.append(platform_spike(spike_x, platform))

    def _place_ground_spike(self, inner_left: float, inner_right: float, content: WorldContent) -> None:
        if inner_right - inner_left <= SPIKE_WIDTH:
            return
        if self.rng.random() >= GROUND_SPIKE_CHANCE:
            return
        x = self.rng.uniform(inner_left, inner_right - SPIKE_WIDTH)
        if self._near_spawn(x, x + SPIKE_WIDTH):
            return
        content.spikes.append(ground_spike(x, self.ground_y))

    def _place_miners(self, inner_left: float, inner_right: float,
                      content: WorldContent, world_level: int) -> None:
        half = MINER_WIDTH / 2
        if inner_right - inner_left <= MINER_WIDTH:
            return
        chance = miner_chance(world_level)
        for _ in range(max(1, world_level)):
            if self.rng.random() >= chance:
                continue
            x = self.rng.uniform(inner_left + half, inner_right - half)
            if self._near_spawn(x - half, x + half):
                continue
            facing = 1 if self.rng.random() < 0.5 else -1
            content.miners.append(Miner(x=x, y=self.ground_y, facing=facing))

    def _near_spawn(self, left: float, right: float) -> bool:
        return right > self.spawn_x - SPAWN_SAFE_RADIUS and left < self.spawn_x + SPAWN_SAFE_RADIUS
