"""
Gameplay exceptions.
NO UI DEPENDENCIES.
"""


class RockBoyError(Exception):
    """Base class for gameplay errors."""


class GenerationConfigError(RockBoyError):
    """The procedural generator was configured with unusable parameters."""
