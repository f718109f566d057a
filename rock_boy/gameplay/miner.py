"""
Miners - wandering NPCs that swing pickaxes at the rock.
NO UI DEPENDENCIES.
"""
import math
from dataclasses import dataclass
from enum import Enum, auto
from typing import Optional

from .constants import (
    MINER_ATTACK_COOLDOWN, MINER_ATTACK_DAMAGE, MINER_ATTACK_DURATION,
    MINER_ATTACK_RANGE, MINER_HEALTH, MINER_HEIGHT, MINER_KNOCKBACK,
    MINER_TURN_CHANCE, MINER_WALK_SPEED, MINER_WIDTH,
)
from .physics import RockBody
from .rng import RandomSource


class MinerState(Enum):
    PATROL = auto()
    ATTACKING = auto()


@dataclass
class MinerHit:
    """A swing that connected: damage plus the knockback to apply."""
    damage: float
    knockback_x: float
    knockback_y: float


@dataclass
class Miner:
    """
    A miner standing on the ground line.

    x is the horizontal center; y is the feet. Patrols in its facing
    direction and occasionally turns around at random; there is no edge
    detection, cleanup removes miners that wander off.
    """
    x: float
    y: float
    facing: int = 1
    walk_speed: float = MINER_WALK_SPEED
    health: float = MINER_HEALTH
    attack_range: float = MINER_ATTACK_RANGE
    attack_damage: float = MINER_ATTACK_DAMAGE
    attack_cooldown: int = MINER_ATTACK_COOLDOWN
    attack_duration: int = MINER_ATTACK_DURATION
    width: float = MINER_WIDTH
    height: float = MINER_HEIGHT
    state: MinerState = MinerState.PATROL
    attack_timer: int = 0
    cooldown_timer: int = 0
    walk_phase: float = 0.0

    # =========================================================================
    # GEOMETRY
    # =========================================================================

    @property
    def left(self) -> float:
        return self.x - self.width / 2

    @property
    def right(self) -> float:
        return self.x + self.width / 2

    @property
    def top(self) -> float:
        return self.y - self.height

    @property
    def center_y(self) -> float:
        return self.y - self.height / 2

    @property
    def is_attacking(self) -> bool:
        return self.state == MinerState.ATTACKING

    @property
    def is_alive(self) -> bool:
        return self.health > 0

    @property
    def attack_progress(self) -> float:
        """0.0 at windup start, 1.0 at the end of the swing."""
        if not self.is_attacking or self.attack_duration <= 0:
            return 0.0
        return 1.0 - self.attack_timer / self.attack_duration

    def distance_to(self, body: RockBody) -> float:
        return math.hypot(body.x - self.x, body.y - self.center_y)

    # =========================================================================
    # BEHAVIOR
    # =========================================================================

    def update(self, body: RockBody, rng: RandomSource, delta: float = 1.0,
               can_hit: bool = True) -> Optional[MinerHit]:
        """
        Advance one tick. Returns a MinerHit on the frame a swing lands.

        can_hit is the caller's invulnerability gate; a swing that reaches
        its midpoint while the rock cannot be hit does nothing.
        """
        if self.cooldown_timer > 0:
            self.cooldown_timer -= 1

        if (not self.is_attacking and self.cooldown_timer == 0
                and self.distance_to(body) <= self.attack_range):
            self._start_attack(body)

        if self.is_attacking:
            return self._update_attack(body, can_hit)

        self._patrol(rng, delta)
        return None

    def _start_attack(self, body: RockBody) -> None:
        self.state = MinerState.ATTACKING
        self.attack_timer = self.attack_duration
        self.cooldown_timer = self.attack_cooldown
        self.facing = 1 if body.x >= self.x else -1

    def _update_attack(self, body: RockBody, can_hit: bool) -> Optional[MinerHit]:
        hit = None
        if self.attack_timer == self.attack_duration // 2 and can_hit:
            hit = self._knockback(body)

        self.attack_timer -= 1
        if self.attack_timer <= 0:
            self.attack_timer = 0
            self.state = MinerState.PATROL
        return hit

    def _knockback(self, body: RockBody) -> MinerHit:
        dx = body.x - self.x
        dy = body.y - self.center_y
        distance = math.hypot(dx, dy)
        if distance == 0:
            nx, ny = float(self.facing), 0.0
        else:
            nx, ny = dx / distance, dy / distance
        return MinerHit(
            damage=self.attack_damage,
            knockback_x=nx * MINER_KNOCKBACK,
            knockback_y=min(ny * MINER_KNOCKBACK, -MINER_KNOCKBACK * 0.5),
        )

    def _patrol(self, rng: RandomSource, delta: float) -> None:
        if rng.random() < MINER_TURN_CHANCE:
            self.facing = -self.facing
        self.x += self.facing * self.walk_speed * delta
        self.walk_phase = (self.walk_phase + 0.2 * delta) % (math.pi * 2)

    def take_damage(self, amount: float) -> bool:
        """Returns True if this hit defeated the miner."""
        was_alive = self.is_alive
        self.health = max(0.0, self.health - amount)
        return was_alive and not self.is_alive
