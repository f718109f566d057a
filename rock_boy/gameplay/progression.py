"""
Leveling and evolution.
NO UI DEPENDENCIES.

The rock gains XP, levels up, and evolves through a fixed table of stages.
Stage is always derived from level, never stored independently of it.
"""
import math
from dataclasses import dataclass
from typing import List, Tuple

from .constants import (
    BASE_HEALTH, BASE_RADIUS, SIZE_PER_LEVEL, XP_GROWTH, XP_TO_FIRST_LEVEL
)


@dataclass(frozen=True)
class EvolutionStage:
    """One tier of the rock's evolution."""
    name: str
    min_level: int
    color: Tuple[int, int, int]
    strength: float


# Ordered by ascending min_level. The last entry is the terminal stage.
STAGES: Tuple[EvolutionStage, ...] = (
    EvolutionStage("pebble", 1, (128, 128, 128), 1.0),
    EvolutionStage("rock", 5, (96, 96, 96), 1.2),
    EvolutionStage("boulder", 10, (64, 64, 64), 1.5),
    EvolutionStage("granite", 15, (72, 61, 139), 1.8),
    EvolutionStage("diamond", 18, (185, 242, 255), 2.0),
)

TERMINAL_STAGE = STAGES[-1]


def stage_for_level(level: int) -> EvolutionStage:
    """Highest stage whose min_level is <= level."""
    current = STAGES[0]
    for stage in STAGES:
        if stage.min_level <= level:
            current = stage
    return current


def level_size_factor(level: int) -> float:
    return 1.0 + level * SIZE_PER_LEVEL


def radius_for(level: int, base_radius: float = BASE_RADIUS) -> float:
    """baseRadius * levelSizeFactor * evolutionStrength."""
    return base_radius * level_size_factor(level) * stage_for_level(level).strength


def max_health_for(level: int) -> float:
    return BASE_HEALTH * stage_for_level(level).strength * level_size_factor(level)


@dataclass
class LevelChange:
    """What happened when the level moved by one."""
    old_level: int
    new_level: int
    old_stage: EvolutionStage
    new_stage: EvolutionStage

    @property
    def evolved(self) -> bool:
        return self.old_stage != self.new_stage

    @property
    def reached_terminal(self) -> bool:
        return self.evolved and self.new_stage == TERMINAL_STAGE


class Progression:
    """
    XP, level and evolution stage for the current world.

    Leveling up resets XP to 0 (any excess is dropped) and grows the
    threshold geometrically.
    """

    def __init__(self):
        self.level: int = 1
        self.xp: float = 0.0
        self.xp_to_next: int = XP_TO_FIRST_LEVEL
        self.stage: EvolutionStage = stage_for_level(self.level)

    @property
    def evolution(self) -> str:
        return self.stage.name

    @property
    def is_terminal(self) -> bool:
        return self.stage == TERMINAL_STAGE

    def add_xp(self, amount: float) -> List[LevelChange]:
        """
        Add XP and level up if the threshold is reached.
        Returns the level changes that happened (empty or one entry).
        """
        self.xp += amount
        if self.xp >= self.xp_to_next:
            return [self.level_up()]
        return []

    def level_up(self) -> LevelChange:
        old_level, old_stage = self.level, self.stage
        self.level += 1
        self.xp = 0.0
        self.xp_to_next = math.floor(self.xp_to_next * XP_GROWTH)
        self.stage = stage_for_level(self.level)
        return LevelChange(old_level, self.level, old_stage, self.stage)

    def level_down(self) -> LevelChange:
        """
        Drop one level (debug). XP and threshold are left alone.
        At level 1 nothing changes.
        """
        old_level, old_stage = self.level, self.stage
        if self.level > 1:
            self.level -= 1
            self.stage = stage_for_level(self.level)
        return LevelChange(old_level, self.level, old_stage, self.stage)

    @property
    def xp_ratio(self) -> float:
        return self.xp / self.xp_to_next if self.xp_to_next > 0 else 0.0
