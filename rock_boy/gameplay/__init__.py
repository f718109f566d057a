"""
Rock Boy gameplay core. No UI dependencies.
"""

from .game import Game, GameMode, GameEvent
from .input_state import InputState
from .config import Settings, get_settings

__all__ = ["Game", "GameMode", "GameEvent", "InputState", "Settings", "get_settings"]
