"""
Snake Game Module

This module contains the simulation core: grid geometry, spawning, the
single-player and competitive games, and the mode controller.
"""

from .grid import Grid, Direction, manhattan_distance
from .spawner import Spawner
from .snake import Snake
from .snake_game_single import SnakeGameSingle
from .snake_game_pvp import SnakeGamePvP, Outcome
from .arcade import ArcadeController, InputEvent, Mode, Snapshot, transition

__all__ = [
    'Grid', 'Direction', 'manhattan_distance',
    'Spawner',
    'Snake',
    'SnakeGameSingle',
    'SnakeGamePvP', 'Outcome',
    'ArcadeController', 'InputEvent', 'Mode', 'Snapshot', 'transition',
]
