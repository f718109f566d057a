"""
Pygame adapters for the Rock Boy core.
"""
