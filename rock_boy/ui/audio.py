"""
Sound playback through pygame.mixer.
This is a THIN ADAPTER - no game logic here.
"""
import logging
from pathlib import Path
from typing import Dict, Optional

import pygame

from gameplay.collaborators import SoundName

logger = logging.getLogger(__name__)

SOUND_FILES = {
    SoundName.JUMP: "jump.wav",
    SoundName.DAMAGE: "damage.wav",
    SoundName.STAR_COLLECT: "star_collect.wav",
}


class PygameSoundPlayer:
    """
    Plays named sounds loaded from a directory.

    Missing files are skipped at load time. play_sound raises KeyError
    for a name that was not loaded; the game recovers from that.
    """

    def __init__(self, sound_dir: Optional[Path] = None, volume: float = 0.5):
        self.sounds: Dict[str, pygame.mixer.Sound] = {}
        if sound_dir is None:
            return

        if not pygame.mixer.get_init():
            try:
                pygame.mixer.init()
            except pygame.error as e:
                logger.warning(f"Audio unavailable: {e}")
                return

        for name, filename in SOUND_FILES.items():
            path = sound_dir / filename
            if not path.exists():
                logger.info(f"No sound file for '{name}' at {path}")
                continue
            sound = pygame.mixer.Sound(str(path))
            sound.set_volume(volume)
            self.sounds[name] = sound

    def play_sound(self, name: str) -> None:
        self.sounds[name].play()
