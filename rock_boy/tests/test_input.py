"""
Tests for input snapshots, edge detection and scripted input.
"""
from gameplay.collaborators import ScriptedInput
from gameplay.input_state import InputState, InputTracker


class TestInputTracker:
    """Tests for turning held keys into presses."""

    def test_press_fires_once_while_held(self):
        tracker = InputTracker()
        frames = [tracker.update(InputState(up=True)) for _ in range(3)]
        assert [f.jump_pressed for f in frames] == [True, False, False]

    def test_release_and_press_again(self):
        tracker = InputTracker()
        tracker.update(InputState(primary_action=True))
        tracker.update(InputState())
        assert tracker.update(InputState(primary_action=True)).primary_pressed

    def test_either_jump_key(self):
        tracker = InputTracker()
        assert tracker.update(InputState(jump_held=True)).jump_pressed
        # Switching keys while one is held is not a new press
        assert not tracker.update(InputState(up=True)).jump_pressed

    def test_debug_edges(self):
        tracker = InputTracker()
        frame = tracker.update(InputState(debug_level_up=True, debug_level_down=True))
        assert frame.debug_level_up_pressed
        assert frame.debug_level_down_pressed

    def test_panel_toggle_fires_once(self):
        tracker = InputTracker()
        frames = [tracker.update(InputState(debug_toggle_panel=True)) for _ in range(2)]
        assert [f.debug_toggle_panel_pressed for f in frames] == [True, False]


class TestScriptedInput:
    """Tests for the replayed input source."""

    def test_replays_then_idles(self):
        source = ScriptedInput([InputState(left=True)])
        source.push(InputState(right=True), frames=2)

        assert source.read_input().left
        assert source.read_input().right
        assert source.read_input().right
        assert source.read_input() == InputState()
