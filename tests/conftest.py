"""Shared fixtures for the snake arcade tests."""

from collections import deque

import numpy as np
import pytest

from snake_arcade.config import GameConfig


@pytest.fixture
def config():
    return GameConfig(seed=1234)


@pytest.fixture
def rng():
    return np.random.default_rng(42)


def place_snake(snake, positions, direction=None):
    """Put a snake on explicit cells, head first"""
    snake.positions = deque(positions)
    if direction is not None:
        snake.direction = direction
        snake.pending_direction = direction


def place_items(game, food, hazard):
    game.food_position = food
    game.hazard_position = hazard
