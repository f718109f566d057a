"""
Main Game class - orchestrates all gameplay systems.
NO UI DEPENDENCIES.

This is the central gameplay module. It owns every entity and component
and mutates them in place once per tick. It can be fully tested without
any UI framework: rendering, sound, input and time come in through the
interfaces in collaborators.py.
"""
import logging
import random
from dataclasses import dataclass
from enum import Enum, auto
from typing import List, Optional

from .camera import Camera
from .collaborators import (
    Clock, FrameRenderer, InputSource, MonotonicClock, NullRenderer,
    NullSoundPlayer, ScriptedInput, SoundName, SoundPlayer,
)
from .config import Settings, get_settings
from .constants import (
    GROUND_OFFSET, INTERSTITIAL_FRAMES, MINER_XP_REWARD,
    STAR_XP_REWARD, STOMP_BOUNCE_FACTOR, STOMP_DAMAGE, SURVIVAL_XP_PER_FRAME,
)
from .generator import ProceduralGenerator, WorldContent
from .hazards import apply_spike_bounce, body_overlaps_rect, find_spike_hit, resolve_platforms
from .health import Health
from .input_state import FrameInput, InputState, InputTracker
from .level import create_finite_level, level_bounds
from .miner import Miner
from .particles import Effects
from .physics import (
    PhysicsParams, RockBody, WorldBounds, compute_delta_multiplier, step_body
)
from .progression import (
    EvolutionStage, LevelChange, Progression, max_health_for, radius_for
)
from .rng import RandomSource
from .star import RoamArea, Star, find_safe_star_position

logger = logging.getLogger(__name__)


class GameMode(Enum):
    """Exactly one is active at a time."""
    PLAYING = auto()
    GAME_OVER = auto()
    INTERSTITIAL = auto()   # celebrating the final evolution


@dataclass
class Interstitial:
    """The celebration shown after reaching the final evolution."""
    timer: int
    message: str
    game_complete: bool  # True: wait for the player to restart, no countdown


# =============================================================================
# EVENTS
# =============================================================================

@dataclass
class GameEvent:
    """An event that occurred during gameplay (for UI to react to)."""
    pass


@dataclass
class ModeChangedEvent(GameEvent):
    old_mode: GameMode
    new_mode: GameMode


@dataclass
class DamageTakenEvent(GameEvent):
    """The rock took damage."""
    amount: float
    new_health: float
    source: str


@dataclass
class LevelUpEvent(GameEvent):
    old_level: int
    new_level: int


@dataclass
class EvolutionEvent(GameEvent):
    old_stage: EvolutionStage
    new_stage: EvolutionStage


@dataclass
class StarCollectedEvent(GameEvent):
    x: float
    y: float


@dataclass
class MinerDefeatedEvent(GameEvent):
    x: float


@dataclass
class WorldAdvancedEvent(GameEvent):
    world_level: int


class Game:
    """
    The main game class that orchestrates all gameplay.

    Usage (headless):
        game = Game(settings=Settings(), rng=random.Random(1))
        events = game.update(InputState(right=True))

    Usage (hosted):
        game = Game(renderer=..., sound=..., input_source=..., clock=...)
        while running:
            game.tick()
    """

    def __init__(
        self,
        settings: Optional[Settings] = None,
        rng: Optional[RandomSource] = None,
        renderer: Optional[FrameRenderer] = None,
        sound: Optional[SoundPlayer] = None,
        input_source: Optional[InputSource] = None,
        clock: Optional[Clock] = None,
    ):
        self.settings = settings if settings is not None else get_settings()
        self.rng = rng if rng is not None else random.Random(self.settings.seed)

        self.renderer = renderer or NullRenderer()
        self.sound = sound or NullSoundPlayer()
        self.input_source = input_source or ScriptedInput()
        self.clock = clock or MonotonicClock()

        self.params = PhysicsParams(ground_y=self.settings.viewport_height - GROUND_OFFSET)
        self.world_level: int = 1
        self.frame_count: int = 0

        self._tracker = InputTracker()
        self._last_time: Optional[float] = None
        self._events: List[GameEvent] = []
        self.show_debug_panel: bool = self.settings.debug_mode

        # Rebuilt in place by _build_world on every reset and world change
        self.effects = Effects(self.rng)
        self.content = WorldContent()
        self.generator = ProceduralGenerator(
            rng=self.rng,
            ground_y=self.params.ground_y,
            step=self.settings.generation_step,
            look_ahead=self.settings.look_ahead,
            cleanup_distance=self.settings.cleanup_distance,
            max_iterations=self.settings.max_generation_iterations,
        )

        self._build_world()

    # =========================================================================
    # WORLD CONSTRUCTION
    # =========================================================================

    @property
    def spawn_point(self):
        return (self.settings.viewport_width / 2, self.settings.viewport_height / 2)

    @property
    def bounds(self) -> Optional[WorldBounds]:
        """Horizontal limits, or None in the infinite world."""
        if self.settings.infinite_world:
            return None
        return level_bounds(self.settings.viewport_width, self.settings.level_width_screens)

    def _build_world(self) -> None:
        """(Re)create everything that belongs to one world level."""
        sx, sy = self.spawn_point
        vw, vh = self.settings.viewport_width, self.settings.viewport_height

        self.progression = Progression()
        self.body = RockBody.create(
            sx, sy, self.params, self.rng, radius=radius_for(self.progression.level)
        )
        self.health = Health()
        self.effects.clear()
        self.star = Star(x=vw / 4, y=vh / 2)
        self.camera = Camera(vw, vh)
        self.camera.center_on(sx, sy)
        self.mode = GameMode.PLAYING
        self.interstitial: Optional[Interstitial] = None

        step = self.settings.generation_step
        self.generator.reset(origin=sx - step / 2 if step > 0 else sx, spawn_x=sx)
        self.content.clear()

        if self.settings.infinite_world:
            self.generator.update(sx, self.content, self.world_level)
        else:
            layout = create_finite_level(
                vw, vh, self.params.ground_y, screens=self.settings.level_width_screens
            )
            self.content.platforms.extend(layout.platforms)
            self.content.spikes.extend(layout.spikes)
            self.content.miners.extend(layout.miners)

    def reset(self) -> None:
        """Full restart of the run, back to world level 1."""
        old_mode = self.mode
        self.world_level = 1
        self._build_world()
        logger.info("Run restarted")
        self._events.append(ModeChangedEvent(old_mode, self.mode))

    def advance_world(self) -> None:
        """Move on to a fresh world one level harder."""
        old_mode = self.mode
        self.world_level += 1
        self._build_world()
        logger.info(f"Advanced to world level {self.world_level}")
        self._events.append(WorldAdvancedEvent(self.world_level))
        self._events.append(ModeChangedEvent(old_mode, self.mode))

    # Entity shortcuts
    @property
    def platforms(self):
        return self.content.platforms

    @property
    def spikes(self):
        return self.content.spikes

    @property
    def miners(self) -> List[Miner]:
        return self.content.miners

    # =========================================================================
    # HOST LOOP
    # =========================================================================

    def tick(self) -> List[GameEvent]:
        """
        One host frame: poll input, measure time, update, render.
        """
        state = self.input_source.read_input()
        now = self.clock.now()
        if self._last_time is None:
            delta = 1.0
        else:
            delta = compute_delta_multiplier(now - self._last_time)
        self._last_time = now

        events = self.update(state, delta)
        self._render()
        return events

    def _render(self) -> None:
        try:
            self.renderer.render_frame(self)
        except Exception as e:
            logger.warning(f"Render failed: {e}")

    def _play_sound(self, name: str) -> None:
        try:
            self.sound.play_sound(name)
        except Exception as e:
            logger.warning(f"Sound '{name}' failed: {e}")

    # =========================================================================
    # UPDATE LOOP
    # =========================================================================

    def update(self, state: InputState, delta: float = 1.0) -> List[GameEvent]:
        """
        Advance the simulation by one tick of `delta` reference frames.
        Returns the events that occurred.
        """
        self._events = []
        frame = self._tracker.update(state)
        self.frame_count += 1

        if self.mode == GameMode.GAME_OVER:
            self._update_game_over(frame, delta)
        elif self.mode == GameMode.INTERSTITIAL:
            self._update_interstitial(frame, delta)
        else:
            self._update_playing(frame, delta)

        # Health timers run every tick, whatever the mode
        self.health.update()
        return self._events

    def _update_game_over(self, frame: FrameInput, delta: float) -> None:
        self.effects.step(delta)
        if frame.primary_pressed:
            self.reset()

    def _update_interstitial(self, frame: FrameInput, delta: float) -> None:
        self.effects.step(delta)
        interstitial = self.interstitial

        if interstitial.game_complete:
            if frame.primary_pressed:
                self.reset()
            return

        interstitial.timer -= 1
        if interstitial.timer <= 0:
            self.advance_world()

    def _update_playing(self, frame: FrameInput, delta: float) -> None:
        if self.settings.debug_mode:
            self._handle_debug(frame)
            if self.mode != GameMode.PLAYING:
                return

        # Movement
        result = step_body(self.body, frame, delta, self.params, self.rng, self.bounds)
        if result.jumped:
            self._play_sound(SoundName.JUMP)
        if result.hard_landing:
            self.effects.bounce_sparks(self.body.x, self.body.bottom)

        # Collision
        resolve_platforms(self.body, self.content.platforms)
        self._check_stomps()
        self._check_spikes()
        if self._check_game_over() or self.mode != GameMode.PLAYING:
            return

        # XP for surviving
        self._apply_level_changes(self.progression.add_xp(SURVIVAL_XP_PER_FRAME * delta))
        if self.mode != GameMode.PLAYING:
            return

        self._update_star(delta)
        if self.mode != GameMode.PLAYING:
            return

        self.camera.follow(self.body.x, self.body.y, delta)

        if self.settings.infinite_world:
            self.generator.update(self.body.x, self.content, self.world_level)

        self._update_miners(delta)
        if self._check_game_over():
            return

        self.effects.step(delta)

    # =========================================================================
    # COLLISION / DAMAGE
    # =========================================================================

    def _check_spikes(self) -> None:
        # Health's immunity counter is the single invulnerability signal
        if self.health.is_immune:
            return
        spike = find_spike_hit(self.body, self.content.spikes)
        if spike is None:
            return
        if self._damage(spike.damage, "spike"):
            apply_spike_bounce(self.body, spike, self.params)
            self.effects.bounce_sparks(self.body.x, self.body.y)

    def _check_stomps(self) -> None:
        body = self.body
        if body.vy <= 0:
            return
        for miner in list(self.content.miners):
            if not body_overlaps_rect(body, miner.left, miner.top, miner.width, miner.height):
                continue
            if body.bottom > miner.top + miner.height / 2:
                continue

            body.vy = self.params.jump_force * STOMP_BOUNCE_FACTOR
            body.is_grounded = False
            if miner.take_damage(STOMP_DAMAGE * self.progression.stage.strength):
                self.content.miners.remove(miner)
                self._events.append(MinerDefeatedEvent(miner.x))
                self._apply_level_changes(self.progression.add_xp(MINER_XP_REWARD))
            break

    def _update_miners(self, delta: float) -> None:
        for miner in self.content.miners:
            hit = miner.update(self.body, self.rng, delta, can_hit=not self.health.is_immune)
            if hit is not None and self._damage(hit.damage, "miner"):
                self.body.vx = hit.knockback_x
                self.body.vy = hit.knockback_y
                self.body.is_grounded = False

    def _damage(self, amount: float, source: str) -> bool:
        if not self.health.take_damage(amount):
            return False
        self._events.append(DamageTakenEvent(amount, self.health.current, source))
        self._play_sound(SoundName.DAMAGE)
        return True

    def _check_game_over(self) -> bool:
        if not self.health.is_game_over:
            return False
        self._set_mode(GameMode.GAME_OVER)
        self.effects.bounce_sparks(self.body.x, self.body.y)
        self.effects.shatter_rock(
            self.body.x, self.body.y, self.body.radius, self.progression.stage.color
        )
        logger.info(
            f"Game over at level {self.progression.level} (world {self.world_level})"
        )
        return True

    def _set_mode(self, mode: GameMode) -> None:
        if mode == self.mode:
            return
        old_mode = self.mode
        self.mode = mode
        self._events.append(ModeChangedEvent(old_mode, mode))

    # =========================================================================
    # STAR
    # =========================================================================

    def roam_area(self) -> RoamArea:
        ground = self.params.ground_y
        bounds = self.bounds
        if bounds is not None:
            return RoamArea(bounds.left, bounds.right, 0.0, ground)
        half = self.settings.viewport_width / 2
        return RoamArea(self.body.x - half, self.body.x + half, 0.0, ground)

    def _update_star(self, delta: float) -> None:
        star = self.star
        if not star.collected:
            area = self.roam_area()
            if not area.contains(star.x, star.y):
                # Left behind by the moving window
                self.effects.star_trail.clear()
                star.respawn(
                    find_safe_star_position(
                        self.body, self.content.platforms, area, self.rng
                    ),
                    self.rng,
                )
            star.move(area, delta)
            self.effects.trail_point(star.x, star.y)

            if star.touches(self.body):
                star.collect()
                self.effects.collect_burst(star.x, star.y)
                self._events.append(StarCollectedEvent(star.x, star.y))
                self._play_sound(SoundName.STAR_COLLECT)
                self._apply_level_changes(self.progression.add_xp(STAR_XP_REWARD))
            return

        if star.tick_respawn():
            self.effects.star_trail.clear()
            position = find_safe_star_position(
                self.body, self.content.platforms, self.roam_area(), self.rng
            )
            star.respawn(position, self.rng)

    # =========================================================================
    # PROGRESSION
    # =========================================================================

    def _apply_level_changes(self, changes: List[LevelChange]) -> None:
        for change in changes:
            self._events.append(LevelUpEvent(change.old_level, change.new_level))
            self._rescale()

            if change.evolved:
                logger.info(f"Evolved from {change.old_stage.name} to {change.new_stage.name}")
                self._events.append(EvolutionEvent(change.old_stage, change.new_stage))
                self.effects.evolution_burst(self.body.x, self.body.y, change.new_stage.color)

            if change.reached_terminal:
                self._start_interstitial()

    def _rescale(self) -> None:
        """Size and health cap follow the current level and stage."""
        level = self.progression.level
        self.body.set_radius(radius_for(level), self.rng)
        self.health.set_max(max_health_for(level), refill=True)

    def _start_interstitial(self) -> None:
        complete = self.world_level >= self.settings.max_world_level
        if complete:
            message = "You've become a diamond! Press the action key to play again"
        else:
            message = f"You've become a diamond! World {self.world_level + 1} awaits"
        self.interstitial = Interstitial(
            timer=INTERSTITIAL_FRAMES, message=message, game_complete=complete
        )
        self.body.stop()
        self.effects.celebration_burst(self.body.x, self.body.y)
        self._set_mode(GameMode.INTERSTITIAL)

    def _handle_debug(self, frame: FrameInput) -> None:
        if frame.debug_toggle_panel_pressed:
            self.show_debug_panel = not self.show_debug_panel
        if frame.debug_level_up_pressed:
            self.debug_level_up()
        elif frame.debug_level_down_pressed:
            self.debug_level_down()

    def debug_level_up(self) -> None:
        """Fill the XP bar and level up."""
        self.progression.xp = self.progression.xp_to_next
        self._apply_level_changes([self.progression.level_up()])

    def debug_level_down(self) -> None:
        change = self.progression.level_down()
        if change.old_level == change.new_level:
            return
        self._rescale()
        if change.evolved:
            self._events.append(EvolutionEvent(change.old_stage, change.new_stage))

    # =========================================================================
    # STATE QUERIES (for UI to read)
    # =========================================================================

    def get_hud_state(self) -> dict:
        """Plain values for the HUD."""
        return {
            'health': self.health.current,
            'max_health': self.health.max,
            'level': self.progression.level,
            'xp': self.progression.xp,
            'xp_to_next': self.progression.xp_to_next,
            'evolution': self.progression.evolution,
            'world_level': self.world_level,
            'mode': self.mode.name,
        }

    # =========================================================================
    # CONVENIENCE METHODS FOR TESTING
    # =========================================================================

    def simulate(self, frames: int, state: Optional[InputState] = None,
                 delta: float = 1.0) -> List[GameEvent]:
        """
        Run a number of ticks holding the same input.
        Returns all events that occurred.
        """
        state = state or InputState()
        all_events = []
        for _ in range(frames):
            all_events.extend(self.update(state, delta))
        return all_events
