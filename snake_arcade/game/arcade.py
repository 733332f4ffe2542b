"""
Mode state machine, game clock and render snapshot.

The controller owns whichever game is active. Mode changes go through the
pure transition() function; the controller only reacts to the new mode
(starting a fresh game when a play mode is entered).
"""

import logging
from dataclasses import dataclass
from enum import Enum, auto
from typing import Optional, Tuple

from ..config import GameConfig
from .grid import Coordinate, Direction
from .snake_game_pvp import Outcome, SnakeGamePvP
from .snake_game_single import SnakeGameSingle

logger = logging.getLogger(__name__)


class Mode(Enum):
    MENU = auto()
    SINGLE_PLAYER = auto()
    COMPETITIVE = auto()
    GAME_OVER = auto()


class InputEvent(Enum):
    UP = auto()
    DOWN = auto()
    LEFT = auto()
    RIGHT = auto()
    SELECT_MANUAL = auto()
    SELECT_AUTOPLAY = auto()
    SELECT_COMPETITIVE = auto()
    RESTART = auto()
    QUIT = auto()
    TOGGLE_FULLSCREEN = auto()


DIRECTION_EVENTS = {
    InputEvent.UP: Direction.UP,
    InputEvent.DOWN: Direction.DOWN,
    InputEvent.LEFT: Direction.LEFT,
    InputEvent.RIGHT: Direction.RIGHT,
}

_TRANSITIONS = {
    (Mode.MENU, InputEvent.SELECT_MANUAL): Mode.SINGLE_PLAYER,
    (Mode.MENU, InputEvent.SELECT_AUTOPLAY): Mode.SINGLE_PLAYER,
    (Mode.MENU, InputEvent.SELECT_COMPETITIVE): Mode.COMPETITIVE,
    (Mode.GAME_OVER, InputEvent.RESTART): Mode.MENU,
}


def transition(mode: Mode, event: InputEvent) -> Mode:
    """Return the mode after event; events that do not apply leave mode unchanged"""
    return _TRANSITIONS.get((mode, event), mode)


MENU_TEXT = (
    "Self-Playing Snake\n\n"
    "Press 1 for Manual Play\n"
    "Press 2 for Self-Play\n"
    "Press 3 for Competitive Mode\n\n"
    "Press F11 to toggle Full Screen"
)

GAME_OVER_FOOTER = "\nPress Y to Play Again\nPress N to Quit\n\nPress F11 to toggle Full Screen"


def game_over_text(outcome: Outcome, score=0) -> str:
    if outcome == Outcome.TIE:
        headline = "Game Over! It's a tie!"
    elif outcome == Outcome.BOT_WINS:
        headline = "Game Over! Bot wins!"
    elif outcome == Outcome.PLAYER_WINS:
        headline = "Game Over! You win!"
    else:
        headline = f"Game Over! Final Score: {score}"
    return headline + GAME_OVER_FOOTER


@dataclass(frozen=True)
class Snapshot:
    """Read-only view of the controller handed to the renderer each frame"""
    mode: Mode
    autoplay: bool = False
    snakes: Tuple[Tuple[Coordinate, ...], ...] = ()
    food: Optional[Coordinate] = None
    hazard: Optional[Coordinate] = None
    colors: Tuple[Tuple[int, int, int], ...] = ()
    scores: Tuple[int, ...] = ()
    outcome: Optional[Outcome] = None
    text: str = ""

    @property
    def hud_text(self) -> str:
        if self.mode == Mode.SINGLE_PLAYER:
            return f"Score: {self.scores[0]}"
        if self.mode == Mode.COMPETITIVE:
            return f"Player: {self.scores[0]}   Bot: {self.scores[1]}"
        return ""


class ArcadeController:
    """Owns the active game and drives it from input events and elapsed time"""

    def __init__(self, config=None, rng=None):
        self.config = config or GameConfig()
        self.rng = rng
        self.mode = Mode.MENU
        self.autoplay = False
        self.game = None
        self.timer = 0.0
        self.outcome = None
        self.quit_requested = False

    def handle(self, event: InputEvent):
        """Apply one input event"""
        if event == InputEvent.TOGGLE_FULLSCREEN:
            return  # presentation only

        if event == InputEvent.QUIT:
            if self.mode == Mode.GAME_OVER:
                self.quit_requested = True
            return

        if event in DIRECTION_EVENTS:
            if self.mode in (Mode.SINGLE_PLAYER, Mode.COMPETITIVE):
                self.game.steer(DIRECTION_EVENTS[event])
            return

        new_mode = transition(self.mode, event)
        if new_mode == self.mode:
            logger.debug("Ignoring %s in %s", event.name, self.mode.name)
            return
        self._enter(new_mode, event)

    def _enter(self, mode, event):
        logger.info("Mode %s -> %s", self.mode.name, mode.name)
        self.mode = mode
        self.timer = 0.0
        if mode == Mode.SINGLE_PLAYER:
            self.autoplay = event == InputEvent.SELECT_AUTOPLAY
            self.game = SnakeGameSingle(self.config, autoplay=self.autoplay, rng=self.rng)
            self.outcome = None
        elif mode == Mode.COMPETITIVE:
            self.autoplay = False
            self.game = SnakeGamePvP(self.config, rng=self.rng)
            self.outcome = None
        elif mode == Mode.MENU:
            self.game = None
            self.outcome = None

        if mode in (Mode.SINGLE_PLAYER, Mode.COMPETITIVE) and self.game.done:
            self._finish()

    def _finish(self):
        if isinstance(self.game, SnakeGamePvP):
            self.outcome = self.game.outcome
        else:
            self.outcome = Outcome.FINAL_SCORE
        self._enter(Mode.GAME_OVER, None)

    def update(self, dt: float):
        """Advance the game clock by dt seconds, running at most one tick"""
        if self.mode not in (Mode.SINGLE_PLAYER, Mode.COMPETITIVE):
            return

        self.timer += dt
        if self.timer >= self.config.move_interval:
            self.timer -= self.config.move_interval
            self.game.tick()

        if self.game.done:
            self._finish()

    def snapshot(self) -> Snapshot:
        if self.mode == Mode.MENU:
            return Snapshot(mode=self.mode, text=MENU_TEXT)

        game = self.game
        snakes = tuple(tuple(snake.positions) for snake in game.snakes)
        colors = tuple(snake.color for snake in game.snakes)
        scores = tuple(snake.score for snake in game.snakes)
        text = ""
        if self.mode == Mode.GAME_OVER:
            text = game_over_text(self.outcome, scores[0])
        return Snapshot(
            mode=self.mode,
            autoplay=self.autoplay,
            snakes=snakes,
            colors=colors,
            food=game.food_position,
            hazard=game.hazard_position,
            scores=scores,
            outcome=self.outcome,
            text=text,
        )
