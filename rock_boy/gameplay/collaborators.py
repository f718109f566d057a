"""
Interfaces the simulation calls out through, and headless implementations.
NO UI DEPENDENCIES.

The core never imports a presentation or device API. The host injects
implementations of these protocols; the null versions here make the
game steppable in tests.
"""
import time
from typing import TYPE_CHECKING, Iterable, List, Optional, Protocol, runtime_checkable

from .input_state import InputState

if TYPE_CHECKING:
    from .game import Game


class SoundName:
    """Names accepted by SoundPlayer.play_sound."""
    JUMP = "jump"
    DAMAGE = "damage"
    STAR_COLLECT = "starCollect"

    ALL = (JUMP, DAMAGE, STAR_COLLECT)


@runtime_checkable
class FrameRenderer(Protocol):
    """Draw-only consumer of the game state."""

    def render_frame(self, game: "Game") -> None:
        ...


@runtime_checkable
class SoundPlayer(Protocol):
    """Fire-and-forget sound playback."""

    def play_sound(self, name: str) -> None:
        ...


@runtime_checkable
class InputSource(Protocol):
    """Polled once per tick."""

    def read_input(self) -> InputState:
        ...


@runtime_checkable
class Clock(Protocol):
    """Monotonic time in milliseconds."""

    def now(self) -> float:
        ...


class NullRenderer:
    def render_frame(self, game: "Game") -> None:
        pass


class NullSoundPlayer:
    def play_sound(self, name: str) -> None:
        pass


class RecordingSoundPlayer:
    """Keeps the names of every sound requested, in order."""

    def __init__(self):
        self.played: List[str] = []

    def play_sound(self, name: str) -> None:
        self.played.append(name)


class ScriptedInput:
    """
    Replays a fixed sequence of input states, then holds nothing.

    States can also be queued while running with push().
    """

    def __init__(self, states: Optional[Iterable[InputState]] = None):
        self._queue: List[InputState] = list(states or [])

    def push(self, state: InputState, frames: int = 1) -> None:
        self._queue.extend([state] * frames)

    def read_input(self) -> InputState:
        if self._queue:
            return self._queue.pop(0)
        return InputState()


class ManualClock:
    """A clock that only moves when told to."""

    def __init__(self, start_ms: float = 0.0):
        self._now = start_ms

    def advance(self, ms: float) -> None:
        self._now += ms

    def now(self) -> float:
        return self._now


class MonotonicClock:
    def now(self) -> float:
        return time.monotonic() * 1000.0
