"""
Fixed-capacity particle pools for decorative effects.
NO UI DEPENDENCIES.

Every pool has the same contract: spawn() takes a free slot, step()
moves and ages live particles, is_expired() is True once nothing is
alive. Slots are reused rather than reallocated. A full pool recycles
the particle with the least life left, so a pool also works as a
bounded trail ring.
"""
import math
from dataclasses import dataclass
from typing import Iterator, List, Optional, Tuple

from .constants import (
    CELEBRATION_PARTICLES, COLLECT_PARTICLE_LIFE, COLLECT_PARTICLES,
    EVOLUTION_PARTICLE_LIFE, EVOLUTION_PARTICLE_SPEED, EVOLUTION_PARTICLES,
    PARTICLE_POOL_CAPACITY, ROCK_BREAK_PIECES, ROCK_PIECE_GRAVITY, ROCK_PIECE_LIFE,
    ROCK_PIECE_SPEED, ROCK_PIECE_SPIN, SPARK_PARTICLE_LIFE, SPARK_PARTICLES,
    STAR_TRAIL_LENGTH, STAR_TRAIL_LIFE,
)
from .rng import RandomSource

Color = Tuple[int, int, int]


@dataclass
class Particle:
    x: float = 0.0
    y: float = 0.0
    vx: float = 0.0
    vy: float = 0.0
    size: float = 3.0
    life: float = 0.0
    max_life: float = 1.0
    color: Color = (255, 255, 255)
    gravity: float = 0.0
    rotation: float = 0.0
    spin: float = 0.0
    alive: bool = False

    @property
    def alpha(self) -> float:
        """Remaining life as 0.0 to 1.0."""
        return max(0.0, min(1.0, self.life / self.max_life)) if self.max_life > 0 else 0.0


class ParticlePool:
    """A fixed set of particle slots with alive flags."""

    def __init__(self, capacity: int):
        if capacity <= 0:
            raise ValueError("capacity must be positive")
        self.capacity = capacity
        self._slots: List[Particle] = [Particle() for _ in range(capacity)]

    def spawn(
        self,
        x: float,
        y: float,
        vx: float = 0.0,
        vy: float = 0.0,
        life: float = 60.0,
        size: float = 3.0,
        color: Color = (255, 255, 255),
        gravity: float = 0.0,
        rotation: float = 0.0,
        spin: float = 0.0,
    ) -> Particle:
        slot = self._free_slot()
        slot.x, slot.y = x, y
        slot.vx, slot.vy = vx, vy
        slot.life = slot.max_life = life
        slot.size = size
        slot.color = color
        slot.gravity = gravity
        slot.rotation = rotation
        slot.spin = spin
        slot.alive = True
        return slot

    def _free_slot(self) -> Particle:
        oldest: Optional[Particle] = None
        for slot in self._slots:
            if not slot.alive:
                return slot
            if oldest is None or slot.life < oldest.life:
                oldest = slot
        return oldest

    def step(self, delta: float = 1.0) -> None:
        for p in self._slots:
            if not p.alive:
                continue
            p.vy += p.gravity * delta
            p.x += p.vx * delta
            p.y += p.vy * delta
            p.rotation += p.spin * delta
            p.life -= delta
            if p.life <= 0:
                p.alive = False

    def is_expired(self) -> bool:
        return not any(p.alive for p in self._slots)

    def clear(self) -> None:
        for p in self._slots:
            p.alive = False

    def alive(self) -> Iterator[Particle]:
        return (p for p in self._slots if p.alive)

    def __len__(self) -> int:
        return sum(1 for p in self._slots if p.alive)


def hue_to_rgb(hue: float) -> Color:
    """Fully saturated colour for a hue in [0, 1)."""
    h = (hue % 1.0) * 6.0
    i = int(h)
    f = h - i
    q, t = int(255 * (1 - f)), int(255 * f)
    return [
        (255, t, 0), (q, 255, 0), (0, 255, t),
        (0, q, 255), (t, 0, 255), (255, 0, q),
    ][i % 6]


class Effects:
    """The decorative pools owned by the simulation."""

    def __init__(self, rng: RandomSource):
        self.rng = rng
        self.evolution = ParticlePool(PARTICLE_POOL_CAPACITY)
        self.star_trail = ParticlePool(STAR_TRAIL_LENGTH)
        self.collect = ParticlePool(PARTICLE_POOL_CAPACITY)
        self.sparks = ParticlePool(PARTICLE_POOL_CAPACITY)
        self.celebration = ParticlePool(PARTICLE_POOL_CAPACITY)
        self.rock_break = ParticlePool(ROCK_BREAK_PIECES)

    @property
    def pools(self) -> Tuple[ParticlePool, ...]:
        return (
            self.evolution, self.star_trail, self.collect,
            self.sparks, self.celebration, self.rock_break,
        )

    def step(self, delta: float) -> None:
        for pool in self.pools:
            pool.step(delta)

    def clear(self) -> None:
        for pool in self.pools:
            pool.clear()

    def evolution_burst(self, x: float, y: float, color: Color) -> None:
        for i in range(EVOLUTION_PARTICLES):
            angle = (i / EVOLUTION_PARTICLES) * math.pi * 2
            self.evolution.spawn(
                x, y,
                math.cos(angle) * EVOLUTION_PARTICLE_SPEED,
                math.sin(angle) * EVOLUTION_PARTICLE_SPEED,
                life=EVOLUTION_PARTICLE_LIFE,
                color=color,
            )

    def trail_point(self, x: float, y: float) -> None:
        self.star_trail.spawn(x, y, life=STAR_TRAIL_LIFE, color=hue_to_rgb(self.rng.random()))

    def collect_burst(self, x: float, y: float) -> None:
        for i in range(COLLECT_PARTICLES):
            angle = (i / COLLECT_PARTICLES) * math.pi * 2
            speed = 2 + self.rng.random() * 3
            self.collect.spawn(
                x, y,
                math.cos(angle) * speed,
                math.sin(angle) * speed,
                life=COLLECT_PARTICLE_LIFE + self.rng.random() * 20,
                color=hue_to_rgb(i / COLLECT_PARTICLES),
            )

    def bounce_sparks(self, x: float, y: float) -> None:
        for _ in range(SPARK_PARTICLES):
            angle = math.pi + self.rng.random() * math.pi  # upward half
            speed = 1 + self.rng.random() * 3
            self.sparks.spawn(
                x, y,
                math.cos(angle) * speed,
                math.sin(angle) * speed,
                life=SPARK_PARTICLE_LIFE,
                size=2.0,
                color=(255, 220, 120),
                gravity=0.2,
            )

    def celebration_burst(self, x: float, y: float) -> None:
        for _ in range(CELEBRATION_PARTICLES):
            angle = self.rng.random() * math.pi * 2
            speed = 1 + self.rng.random() * 4
            self.celebration.spawn(
                x, y,
                math.cos(angle) * speed,
                math.sin(angle) * speed,
                life=120 + self.rng.random() * 60,
                size=3 + self.rng.random() * 3,
                color=hue_to_rgb(self.rng.random()),
            )

    def shatter_rock(self, x: float, y: float, radius: float, color: Color) -> None:
        """The rock shatters into pieces flung outward and slightly up."""
        for i in range(ROCK_BREAK_PIECES):
            angle = (i / ROCK_BREAK_PIECES) * math.pi * 2
            self.rock_break.spawn(
                x, y,
                math.cos(angle) * ROCK_PIECE_SPEED,
                math.sin(angle) * ROCK_PIECE_SPEED - 2,
                life=ROCK_PIECE_LIFE,
                size=radius / 2,
                color=color,
                gravity=ROCK_PIECE_GRAVITY,
                rotation=self.rng.random() * math.pi * 2,
                spin=ROCK_PIECE_SPIN,
            )
