"""
Input Handler - Samples the keyboard into an InputState.
This is a THIN ADAPTER - no game logic here.
"""
import pygame

from gameplay.input_state import InputState


class PygameInputSource:
    """
    Reports which keys are held right now.

    Edge detection happens in the core; this only polls.
    Arrows move and jump, Space is the action key, [ and ] are the
    debug level controls and \\ toggles the debug panel.
    """

    def __init__(self):
        self.quit_requested = False

    def pump_events(self) -> None:
        """Drain the pygame event queue, noting window close and Escape."""
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                self.quit_requested = True
            elif event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE:
                self.quit_requested = True

    def read_input(self) -> InputState:
        keys = pygame.key.get_pressed()
        return InputState(
            left=bool(keys[pygame.K_LEFT]),
            right=bool(keys[pygame.K_RIGHT]),
            up=bool(keys[pygame.K_UP]),
            jump_held=bool(keys[pygame.K_w]),
            primary_action=bool(keys[pygame.K_SPACE]),
            debug_level_up=bool(keys[pygame.K_RIGHTBRACKET]),
            debug_level_down=bool(keys[pygame.K_LEFTBRACKET]),
            debug_toggle_panel=bool(keys[pygame.K_BACKSLASH]),
        )
