"""
Snake Arcade

Grid snake with manual play, greedy self-play and a player-vs-bot mode.
"""

from .config import GameConfig
from .errors import ExhaustedGrid, SnakeArcadeError

__all__ = ['GameConfig', 'ExhaustedGrid', 'SnakeArcadeError']
