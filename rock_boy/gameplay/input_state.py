"""
Input snapshots and edge tracking.
NO UI DEPENDENCIES.

Input sources only report what is held right now. Turning that into
"pressed this frame" is done here, by the core.
"""
from dataclasses import dataclass


@dataclass(frozen=True)
class InputState:
    """What the player is holding during one frame."""
    left: bool = False
    right: bool = False
    up: bool = False
    jump_held: bool = False
    primary_action: bool = False
    debug_level_up: bool = False
    debug_level_down: bool = False
    debug_toggle_panel: bool = False

    @property
    def jump(self) -> bool:
        return self.up or self.jump_held

    @property
    def horizontal(self) -> bool:
        return self.left or self.right


@dataclass(frozen=True)
class FrameInput:
    """Held state plus the rising edges detected for this frame."""
    held: InputState
    jump_pressed: bool = False
    primary_pressed: bool = False
    debug_level_up_pressed: bool = False
    debug_level_down_pressed: bool = False
    debug_toggle_panel_pressed: bool = False


class InputTracker:
    """
    Remembers the previous frame's input to detect presses.

    A key that stays held produces exactly one press, on the first frame.
    """

    def __init__(self):
        self._previous = InputState()

    def update(self, state: InputState) -> FrameInput:
        prev = self._previous
        self._previous = state
        return FrameInput(
            held=state,
            jump_pressed=state.jump and not prev.jump,
            primary_pressed=state.primary_action and not prev.primary_action,
            debug_level_up_pressed=state.debug_level_up and not prev.debug_level_up,
            debug_level_down_pressed=state.debug_level_down and not prev.debug_level_down,
            debug_toggle_panel_pressed=state.debug_toggle_panel and not prev.debug_toggle_panel,
        )
