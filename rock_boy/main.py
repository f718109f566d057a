#!/usr/bin/env python3
"""
Rock Boy - Main Entry Point

A side-scrolling platformer: roll a rock through an endless world,
collect the star, dodge spikes and miners, and evolve from pebble to
diamond.

Usage:
    python main.py

Controls:
    Left/Right: Roll
    Up (or W): Jump
    Space: Restart after game over / after the final world
    [ and ]: Level down / up (when ROCK_BOY_DEBUG_MODE=true)
    Escape: Quit

Settings come from ROCK_BOY_* environment variables (see gameplay/config.py).
"""
import logging
import random
import sys
from pathlib import Path

# Add this directory to path for imports
sys.path.insert(0, str(Path(__file__).parent))

import pygame

from gameplay.collaborators import MonotonicClock
from gameplay.config import get_settings
from gameplay.game import Game
from ui.audio import PygameSoundPlayer
from ui.input_handler import PygameInputSource
from ui.renderer import PygameRenderer

logger = logging.getLogger(__name__)


def main():
    """Main entry point."""
    settings = get_settings()

    logging.basicConfig(
        level=settings.log_level.upper(),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    pygame.init()
    screen = pygame.display.set_mode((settings.viewport_width, settings.viewport_height))
    pygame.display.set_caption("Rock Boy")
    clock = pygame.time.Clock()

    input_source = PygameInputSource()
    game = Game(
        settings=settings,
        rng=random.Random(settings.seed),
        renderer=PygameRenderer(screen),
        sound=PygameSoundPlayer(Path(__file__).parent / "sounds"),
        input_source=input_source,
        clock=MonotonicClock(),
    )
    world = "infinite" if settings.infinite_world else "finite"
    logger.info(f"Rock Boy started ({world} world, seed={settings.seed})")

    # Runs until the window is closed
    while not input_source.quit_requested:
        input_source.pump_events()
        game.tick()
        clock.tick(settings.target_fps)

    logger.info("Rock Boy stopped")
    pygame.quit()


if __name__ == "__main__":
    main()
