"""
Tests for the competitive player-vs-bot game.
"""

from unittest.mock import patch

import numpy as np
import pytest

from snake_arcade.config import GameConfig
from snake_arcade.game.grid import Direction
from snake_arcade.game.snake_game_pvp import Outcome, SnakeGamePvP

from conftest import place_items, place_snake


class TestReset:
    """Tests for the initial layout."""

    def test_start_positions(self, config):
        game = SnakeGamePvP(config)
        assert list(game.player.positions) == [(12, 20)]
        assert list(game.bot.positions) == [(37, 20)]
        assert game.bot.autopilot is True
        assert game.player.autopilot is False

    def test_items_clear_of_both_snakes(self, config):
        game = SnakeGamePvP(config)
        occupied = set(game.player.positions) | set(game.bot.positions)
        assert game.food_position not in occupied
        assert game.hazard_position not in occupied
        assert game.food_position != game.hazard_position
        assert game.outcome is None

    def test_one_column_board_starts_apart(self):
        """On a single-column board the bot starts next to the player, not on it."""
        game = SnakeGamePvP(GameConfig(grid_width=1, grid_height=5, seed=0))
        assert game.player.head == (0, 2)
        assert game.bot.head == (0, 1)
        assert game.done is False

    def test_no_room_for_items_ends_match(self):
        """Two snakes fill a 2x1 board, so the match is over before it starts."""
        game = SnakeGamePvP(GameConfig(grid_width=2, grid_height=1, seed=0))
        assert game.player.head != game.bot.head
        assert game.done is True
        assert game.exhausted is True
        assert game.outcome == Outcome.TIE
        assert game.tick() is False


class TestUpdateOrder:
    """The player moves first; the bot reacts to the player's new position."""

    def test_bot_sees_player_new_head(self, config):
        """The bot's best cell is where the player just moved, so it goes elsewhere."""
        game = SnakeGamePvP(config)
        place_snake(game.player, [(10, 10)], Direction.RIGHT)
        place_snake(game.bot, [(12, 10)])
        place_items(game, food=(0, 10), hazard=(40, 30))

        game.tick()

        assert game.player.head == (11, 10)
        assert game.bot.head == (12, 9)
        assert game.player.alive and game.bot.alive

    def test_player_checked_against_bot_old_body(self, config):
        """The player dies on the bot's pre-tick cell even though the bot moves away."""
        game = SnakeGamePvP(config)
        place_snake(game.player, [(10, 10)], Direction.RIGHT)
        place_snake(game.bot, [(11, 10)])
        place_items(game, food=(20, 10), hazard=(40, 30))

        game.tick()

        assert game.player.alive is False
        assert game.player.death_reason == 'collision'
        assert game.bot.alive is True
        assert game.bot.head == (12, 10)
        assert game.done is True
        assert game.outcome == Outcome.BOT_WINS

    def test_bot_avoids_dead_player_body(self, config):
        """A player that died this tick still blocks the bot.

        Up would bring the bot closest to the food but runs into the dead
        body; the remaining moves tie, so Down wins on neighbour order.
        """
        game = SnakeGamePvP(config)
        place_snake(game.player, [(49, 10), (48, 10)], Direction.RIGHT)
        place_snake(game.bot, [(48, 11)])
        place_items(game, food=(48, 0), hazard=(40, 30))

        game.tick()

        assert game.player.alive is False
        assert game.bot.head == (48, 12)
        assert game.bot.alive is True


class TestDeaths:
    """Tests for match endings."""

    def test_bot_trapped_player_wins(self, config):
        game = SnakeGamePvP(config)
        place_snake(game.player, [(10, 20)], Direction.RIGHT)
        place_snake(game.bot, [(0, 0), (1, 0), (0, 1)])
        place_items(game, food=(30, 30), hazard=(40, 30))

        assert game.tick() is False
        assert game.bot.death_reason == 'trapped'
        assert game.outcome == Outcome.PLAYER_WINS

    def test_both_die_is_tie(self, config):
        game = SnakeGamePvP(config)
        place_snake(game.player, [(49, 20)], Direction.RIGHT)
        place_snake(game.bot, [(0, 0), (1, 0), (0, 1)])
        place_items(game, food=(30, 30), hazard=(40, 30))

        game.tick()

        assert game.player.death_reason == 'wall'
        assert game.bot.death_reason == 'trapped'
        assert game.outcome == Outcome.TIE

    def test_player_self_collision(self, config):
        game = SnakeGamePvP(config)
        place_snake(game.player, [(10, 10), (11, 10), (11, 11), (10, 11)], Direction.DOWN)
        place_items(game, food=(30, 30), hazard=(40, 30))

        game.tick()

        assert game.player.death_reason == 'self'
        assert game.outcome == Outcome.BOT_WINS

    def test_reverse_input_ignored(self, config):
        game = SnakeGamePvP(config)
        place_items(game, food=(30, 30), hazard=(40, 30))
        game.steer(Direction.LEFT)
        game.tick()
        assert game.player.direction == Direction.RIGHT
        assert game.player.head == (13, 20)


class TestConsumption:
    """Food and hazard rules in competitive play."""

    def test_player_eats_and_both_items_move(self, config):
        """Eating repositions the hazard too. The bot is boxed in so it cannot eat as well."""
        game = SnakeGamePvP(config)
        place_snake(game.player, [(10, 10)], Direction.RIGHT)
        place_snake(game.bot, [(0, 0), (1, 0), (0, 1)])
        place_items(game, food=(11, 10), hazard=(30, 30))

        with patch.object(game.spawner, 'spawn_hazard', wraps=game.spawner.spawn_hazard) as spawn_hazard:
            game.tick()

        assert game.player.score == 10
        assert list(game.player.positions) == [(11, 10), (10, 10)]
        assert spawn_hazard.call_count == 1
        occupied = set(game.player.positions) | set(game.bot.positions)
        assert game.food_position not in occupied
        assert game.hazard_position not in occupied
        assert game.food_position != game.hazard_position

    def test_bot_eats(self, config):
        game = SnakeGamePvP(config)
        place_snake(game.player, [(5, 5)], Direction.RIGHT)
        place_snake(game.bot, [(12, 10)])
        place_items(game, food=(13, 10), hazard=(30, 30))

        game.tick()

        assert game.bot.score == 10
        assert list(game.bot.positions) == [(13, 10), (12, 10)]
        assert game.player.score == 0

    def test_player_hits_hazard(self, config):
        game = SnakeGamePvP(config)
        place_snake(game.player, [(10, 10), (9, 10), (8, 10), (7, 10)], Direction.RIGHT)
        place_snake(game.bot, [(40, 35)])
        place_items(game, food=(30, 30), hazard=(11, 10))
        game.player.score = 10

        game.tick()

        assert list(game.player.positions) == [(11, 10), (10, 10)]
        assert game.player.score == 5
        assert game.hazard_position not in game.player.positions
        assert game.hazard_position not in game.bot.positions

    def test_exhausted_grid_scores_decide(self):
        game = SnakeGamePvP(GameConfig(grid_width=4, grid_height=1, seed=0))
        place_snake(game.player, [(0, 0)], Direction.RIGHT)
        place_snake(game.bot, [(3, 0)])
        place_items(game, food=(1, 0), hazard=(2, 0))

        game.tick()

        assert game.exhausted is True
        assert game.done is True
        assert game.player.alive is True
        assert game.outcome == Outcome.PLAYER_WINS


class TestInvariants:
    """Properties checked on every tick of seeded matches."""

    @pytest.mark.parametrize("seed", [0, 1, 2])
    def test_match_run(self, seed):
        config = GameConfig(grid_width=12, grid_height=10)
        game = SnakeGamePvP(config, rng=np.random.default_rng(seed))
        turns = [Direction.DOWN, Direction.LEFT, Direction.UP, Direction.RIGHT]

        for step in range(200):
            if step % 3 == 0:
                game.steer(turns[(step // 3) % 4])
            game.tick()

            for snake in game.snakes:
                if snake.alive:
                    body = list(snake.positions)
                    assert len(body) == len(set(body))
                    assert game.food_position not in body
                    assert game.hazard_position not in body
                assert snake.score >= 0
            assert game.food_position != game.hazard_position
            if game.done:
                assert game.outcome is not None
                break
