"""
four_in_a_row - Connect-Four rules engine

This package provides the game-state and win-detection engine for
Connect-Four, along with a text renderer, a command-line interface and a
Gymnasium environment that drive it.
"""

# Version number
__version__ = '0.1.0'
