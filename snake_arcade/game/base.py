"""
Shared board state and consumption rules for the snake games.

A game owns one grid, one food cell and one hazard cell. Subclasses own the
snakes and implement tick().
"""

import logging

import numpy as np

from ..config import GameConfig
from ..errors import ExhaustedGrid
from .grid import Grid
from .spawner import Spawner

logger = logging.getLogger(__name__)


class SnakeGameBase:
    """Board, food and hazard bookkeeping common to every mode"""

    # Competitive play moves the hazard whenever food is eaten
    reposition_hazard_on_food = False

    def __init__(self, config=None, rng=None):
        self.config = config or GameConfig()
        self.grid = Grid(self.config.grid_width, self.config.grid_height)
        if rng is None:
            rng = np.random.default_rng(self.config.seed)
        self.spawner = Spawner(self.grid, rng=rng, max_attempts=self.config.max_spawn_attempts)

        self.food_position = None
        self.hazard_position = None
        self.steps = 0
        self.done = False
        self.exhausted = False

    @property
    def snakes(self):
        raise NotImplementedError

    def bodies(self):
        return [snake.positions for snake in self.snakes]

    def _place_items(self):
        """Place food, then the hazard, clear of every snake.

        A board too small to hold both ends the game before its first tick.
        """
        try:
            self.food_position = self.spawner.spawn_food(self.bodies())
            self.hazard_position = self.spawner.spawn_hazard(self.bodies(), self.food_position)
        except ExhaustedGrid as e:
            logger.warning("Game over before the first move: %s", e)
            self.exhausted = True
            self.done = True

    def _consume(self, snake, new_head):
        """Move snake onto new_head and apply the food and hazard rules.

        Food grows the snake and scores the reward. Stepping on the hazard
        (checked after growth) halves the body and costs the penalty.
        """
        ate = new_head == self.food_position
        snake.advance(new_head, grow=ate)

        if ate:
            snake.reward(self.config.food_reward)
            if self.reposition_hazard_on_food:
                self.food_position = self.spawner.spawn_food(self.bodies())
                self.hazard_position = self.spawner.spawn_hazard(self.bodies(), self.food_position)
            else:
                self.food_position = self.spawner.spawn_food(self.bodies(), self.hazard_position)
            logger.debug("Snake %s ate food at %s, score %d", snake.snake_id, new_head, snake.score)

        if new_head == self.hazard_position:
            snake.shrink()
            self.hazard_position = self.spawner.spawn_hazard(self.bodies(), self.food_position)
            snake.penalize(self.config.hazard_penalty)
            logger.debug("Snake %s hit the hazard at %s, length %d", snake.snake_id, new_head, len(snake))

    def tick(self):
        raise NotImplementedError
