"""
Rock body and kinematics.
NO UI DEPENDENCIES.

All rates are per reference frame (60 FPS) and scaled by a delta
multiplier, so 1.0 means "one reference frame elapsed".
"""
import math
from dataclasses import dataclass, field
from typing import List, Optional, Tuple

from .constants import (
    AIR_CONTROL, BASE_RADIUS, GRAVITY, GROUND_FRICTION, HARD_LANDING_SPEED,
    JUMP_FORCE, LANDING_RESTITUTION, LANDING_SPIN, MAX_DELTA_MULTIPLIER,
    MAX_SPEED_X, MOVE_SPEED, REFERENCE_FRAME_MS, ROCK_OUTLINE_POINTS,
    ROTATION_FACTOR, ROTATION_FRICTION, STOP_THRESHOLD, WALL_RESTITUTION,
    WALL_SPIN_REVERSAL,
)
from .input_state import FrameInput
from .rng import RandomSource


def compute_delta_multiplier(elapsed_ms: float) -> float:
    """
    Convert wall-clock elapsed time into reference frames.
    Capped at MAX_DELTA_MULTIPLIER; a clock going backwards yields 0.
    """
    if elapsed_ms <= 0:
        return 0.0
    return min(elapsed_ms / REFERENCE_FRAME_MS, MAX_DELTA_MULTIPLIER)


@dataclass(frozen=True)
class PhysicsParams:
    """Global physics constants. Defaults come from constants.py."""
    gravity: float = GRAVITY
    jump_force: float = JUMP_FORCE
    ground_y: float = 550.0
    move_speed: float = MOVE_SPEED
    max_speed_x: float = MAX_SPEED_X
    ground_friction: float = GROUND_FRICTION
    rotation_factor: float = ROTATION_FACTOR
    rotation_friction: float = ROTATION_FRICTION
    stop_threshold: float = STOP_THRESHOLD


@dataclass(frozen=True)
class RockDetail:
    """A crack drawn on the rock face."""
    start_angle: float
    length: float
    curve: float


@dataclass
class RockBody:
    """
    The player's rock.

    radius is the collision radius; points and details are cosmetic and
    must be regenerated whenever the radius changes (see set_radius).
    """
    x: float
    y: float
    radius: float = BASE_RADIUS
    vx: float = 0.0
    vy: float = 0.0
    rotation: float = 0.0
    rotation_velocity: float = 0.0
    is_grounded: bool = False
    can_jump: bool = False
    acceleration: float = MOVE_SPEED
    max_speed_x: float = MAX_SPEED_X
    friction: float = GROUND_FRICTION
    points: List[Tuple[float, float]] = field(default_factory=list)
    details: List[RockDetail] = field(default_factory=list)

    @classmethod
    def create(cls, x: float, y: float, params: PhysicsParams, rng: RandomSource,
               radius: float = BASE_RADIUS) -> "RockBody":
        body = cls(
            x=x,
            y=y,
            acceleration=params.move_speed,
            max_speed_x=params.max_speed_x,
            friction=params.ground_friction,
        )
        body.set_radius(radius, rng)
        return body

    @property
    def left(self) -> float:
        return self.x - self.radius

    @property
    def right(self) -> float:
        return self.x + self.radius

    @property
    def top(self) -> float:
        return self.y - self.radius

    @property
    def bottom(self) -> float:
        return self.y + self.radius

    def set_radius(self, radius: float, rng: RandomSource) -> None:
        self.radius = radius
        self.points = generate_rock_points(radius, rng)
        self.details = generate_rock_details(radius, rng)

    def stop(self) -> None:
        self.vx = 0.0
        self.vy = 0.0
        self.rotation_velocity = 0.0


def generate_rock_points(radius: float, rng: RandomSource,
                         count: int = ROCK_OUTLINE_POINTS) -> List[Tuple[float, float]]:
    """Irregular outline around the origin, 0.8-1.2x the radius."""
    points = []
    for i in range(count):
        angle = (i / count) * math.pi * 2
        variation = 0.8 + rng.random() * 0.4
        points.append((
            math.cos(angle) * radius * variation,
            math.sin(angle) * radius * variation,
        ))
    return points


def generate_rock_details(radius: float, rng: RandomSource) -> List[RockDetail]:
    count = 3 + int(rng.random() * 3)
    return [
        RockDetail(
            start_angle=rng.random() * math.pi * 2,
            length=radius * (0.3 + rng.random() * 0.4),
            curve=(rng.random() - 0.5) * 0.5,
        )
        for _ in range(count)
    ]


@dataclass(frozen=True)
class WorldBounds:
    """Horizontal limits of a finite level."""
    left: float
    right: float


@dataclass
class StepResult:
    """Notable things that happened during one integration step."""
    jumped: bool = False
    hard_landing: bool = False


def step_body(
    body: RockBody,
    frame: FrameInput,
    delta: float,
    params: PhysicsParams,
    rng: RandomSource,
    bounds: Optional[WorldBounds] = None,
) -> StepResult:
    """
    Advance the rock by one tick.

    bounds=None means the infinite world: no horizontal clamp at all.
    """
    result = StepResult()
    held = frame.held

    # Jump (edge-triggered)
    if frame.jump_pressed and body.can_jump and body.is_grounded:
        body.vy = params.jump_force
        body.can_jump = False
        body.is_grounded = False
        result.jumped = True

    # Horizontal acceleration
    accel = body.acceleration * delta
    if not body.is_grounded:
        accel *= AIR_CONTROL
    if held.left:
        body.vx = max(body.vx - accel, -body.max_speed_x)
    if held.right:
        body.vx = min(body.vx + accel, body.max_speed_x)

    body.vy += params.gravity * delta

    # Ground friction only when coasting
    if body.is_grounded and not held.horizontal:
        body.vx *= body.friction ** delta
        if abs(body.vx) < params.stop_threshold:
            body.vx = 0.0
            body.rotation_velocity = 0.0

    body.x += body.vx * delta
    body.y += body.vy * delta

    if abs(body.vx) >= params.stop_threshold:
        if body.is_grounded:
            body.rotation_velocity = body.vx * params.rotation_factor
        else:
            body.rotation_velocity *= params.rotation_friction ** delta
    else:
        body.rotation_velocity = 0.0

    _resolve_ground(body, params, rng, result)

    if bounds is not None:
        _resolve_walls(body, bounds)

    body.rotation += body.rotation_velocity * delta
    return result


def _resolve_ground(body: RockBody, params: PhysicsParams, rng: RandomSource,
                    result: StepResult) -> None:
    if body.bottom > params.ground_y:
        body.y = params.ground_y - body.radius

        if body.vy > HARD_LANDING_SPEED:
            if abs(body.vx) >= params.stop_threshold:
                body.rotation_velocity += (rng.random() - 0.5) * body.vy * LANDING_SPIN
            body.vy = -body.vy * LANDING_RESTITUTION
            result.hard_landing = True
        elif abs(body.vx) < params.stop_threshold:
            body.stop()

        body.is_grounded = True
        body.can_jump = True
    else:
        body.is_grounded = False


def _resolve_walls(body: RockBody, bounds: WorldBounds) -> None:
    if body.left < bounds.left:
        body.x = bounds.left + body.radius
        body.vx = abs(body.vx) * WALL_RESTITUTION
    elif body.right > bounds.right:
        body.x = bounds.right - body.radius
        body.vx = -abs(body.vx) * WALL_RESTITUTION
    else:
        return
    body.rotation_velocity *= WALL_SPIN_REVERSAL
