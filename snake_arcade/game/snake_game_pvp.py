"""
Competitive Snake Game Implementation

The player's snake against a greedy bot on one board, sharing a single food
and a single hazard. Snakes are updated one after the other (player first),
so the bot already sees where the player moved this tick while the player
only sees where the bot was before it.
"""

import logging
from enum import Enum

from ..ai import greedy
from ..config import WHITE, YELLOW
from ..errors import ExhaustedGrid
from .base import SnakeGameBase
from .grid import Direction
from .snake import Snake

logger = logging.getLogger(__name__)

PLAYER_ID = 0
BOT_ID = 1


class Outcome(Enum):
    FINAL_SCORE = "final_score"  # single-player game ended
    TIE = "tie"
    PLAYER_WINS = "player_wins"
    BOT_WINS = "bot_wins"


class SnakeGamePvP(SnakeGameBase):
    """Player vs. bot snake game"""

    reposition_hazard_on_food = True

    def __init__(self, config=None, rng=None):
        super().__init__(config, rng=rng)
        self.reset()

    @property
    def snakes(self):
        return [self.player, self.bot]

    def reset(self):
        """Reset the game with both snakes at their starting cells"""
        start_positions = self._get_start_positions()
        self.player = Snake(snake_id=PLAYER_ID, start_pos=start_positions[0], color=WHITE)
        self.bot = Snake(snake_id=BOT_ID, start_pos=start_positions[1], color=YELLOW, autopilot=True)

        self.steps = 0
        self.done = False
        self.exhausted = False
        self._place_items()

    def _get_start_positions(self):
        """Player on the left quarter line, bot on the right, both mid-height"""
        width, height = self.grid.width, self.grid.height
        player_start = (width // 4, height // 2)
        bot_start = (3 * width // 4, height // 2)
        if bot_start == player_start:
            # One-column board: put the bot on the first cell next to the player
            bot_start = next(cell for cell in self.grid.neighbors(player_start) if self.grid.in_bounds(cell))
        return [player_start, bot_start]

    def steer(self, direction):
        return self.player.steer(direction)

    def _move_player(self):
        player, bot = self.player, self.bot
        new_head = player.next_head()

        # Bot has not moved yet, so this is its body from the previous tick
        if not self.grid.in_bounds(new_head):
            player.kill('wall')
        elif new_head in player.positions:
            player.kill('self')
        elif new_head in bot.positions:
            player.kill('collision')

        if player.alive:
            self._consume(player, new_head)

    def _move_bot(self):
        player, bot = self.player, self.bot
        obstacles = set(bot.positions) | set(player.positions)
        new_head = greedy.choose_move(bot.head, bot.positions, obstacles, self.food_position, self.grid)

        if new_head is None:
            bot.kill('trapped')
        elif not self.grid.in_bounds(new_head):
            bot.kill('wall')
        elif new_head in bot.positions:
            bot.kill('self')
        elif new_head in player.positions:
            bot.kill('collision')

        if bot.alive:
            bot.direction = bot.pending_direction = Direction(
                (new_head[0] - bot.head[0], new_head[1] - bot.head[1])
            )
            self._consume(bot, new_head)

    def tick(self):
        """Execute one game step: player first, then bot.

        Returns False once the match is over.
        """
        if self.done:
            return False

        self.steps += 1
        try:
            self._move_player()
            self._move_bot()
        except ExhaustedGrid as e:
            logger.warning("Ending match: %s", e)
            self.exhausted = True

        if not self.player.alive or not self.bot.alive or self.exhausted:
            self.done = True
            logger.info("Match over after %d steps: %s (player %d, bot %d)",
                        self.steps, self.outcome.value, self.player.score, self.bot.score)
        return not self.done

    @property
    def outcome(self):
        """Result of a finished match, None while it is still running"""
        if not self.done:
            return None
        if not self.player.alive and not self.bot.alive:
            return Outcome.TIE
        if not self.player.alive:
            return Outcome.BOT_WINS
        if not self.bot.alive:
            return Outcome.PLAYER_WINS
        # Board filled up with both snakes alive
        if self.player.score > self.bot.score:
            return Outcome.PLAYER_WINS
        if self.bot.score > self.player.score:
            return Outcome.BOT_WINS
        return Outcome.TIE
