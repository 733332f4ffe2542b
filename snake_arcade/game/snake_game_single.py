"""
Single snake game: manual play or self-play with the greedy mover.
"""

import logging

from ..ai import greedy
from ..config import WHITE
from ..errors import ExhaustedGrid
from .base import SnakeGameBase
from .grid import Direction
from .snake import Snake

logger = logging.getLogger(__name__)


class SnakeGameSingle(SnakeGameBase):
    """One snake, one food, one hazard"""

    def __init__(self, config=None, autoplay=False, rng=None):
        super().__init__(config, rng=rng)
        self.autoplay = autoplay
        self.reset()

    @property
    def snakes(self):
        return [self.snake]

    def reset(self):
        self.snake = Snake(snake_id=0, start_pos=self.grid.center(), color=WHITE, autopilot=self.autoplay)
        self.steps = 0
        self.done = False
        self.exhausted = False
        self._place_items()

    @property
    def score(self):
        return self.snake.score

    def steer(self, direction):
        return self.snake.steer(direction)

    def _next_head(self):
        snake = self.snake
        if not self.autoplay:
            return snake.next_head()

        new_head = greedy.choose_move(snake.head, snake.positions, (), self.food_position, self.grid)
        if new_head is not None:
            snake.direction = snake.pending_direction = Direction(
                (new_head[0] - snake.head[0], new_head[1] - snake.head[1])
            )
        return new_head

    def tick(self):
        """Advance the game by one step. Returns False once the snake is dead."""
        if self.done:
            return False

        self.steps += 1
        snake = self.snake
        new_head = self._next_head()

        if new_head is None:
            snake.kill('trapped')
        elif not self.grid.in_bounds(new_head):
            snake.kill('wall')
        elif new_head in snake.positions:
            snake.kill('self')

        if not snake.alive:
            self.done = True
            logger.info("Snake died (%s) after %d steps with score %d", snake.death_reason, self.steps, snake.score)
            return False

        try:
            self._consume(snake, new_head)
        except ExhaustedGrid as e:
            logger.warning("Ending game: %s", e)
            self.exhausted = True
            self.done = True
            return False
        return True
