"""
Pygame window for the snake arcade.

Turns keyboard events into InputEvents and draws controller snapshots. The
board is scaled to the current window size and centred, so it survives
resizing and fullscreen.
"""

import logging

import pygame

from .config import BLACK, BLUE, GREEN, ORANGE, RED, WHITE
from .game.arcade import InputEvent, Mode

logger = logging.getLogger(__name__)

KEY_BINDINGS = {
    pygame.K_UP: InputEvent.UP,
    pygame.K_DOWN: InputEvent.DOWN,
    pygame.K_LEFT: InputEvent.LEFT,
    pygame.K_RIGHT: InputEvent.RIGHT,
    pygame.K_1: InputEvent.SELECT_MANUAL,
    pygame.K_2: InputEvent.SELECT_AUTOPLAY,
    pygame.K_3: InputEvent.SELECT_COMPETITIVE,
    pygame.K_y: InputEvent.RESTART,
    pygame.K_n: InputEvent.QUIT,
    pygame.K_F11: InputEvent.TOGGLE_FULLSCREEN,
}


def translate_key(key):
    """Map a pygame key code to an InputEvent, or None for unbound keys"""
    return KEY_BINDINGS.get(key)


def board_layout(surface_size, grid_width, grid_height):
    """Cell size and top-left offset that fit the grid centred in surface_size"""
    screen_width, screen_height = surface_size
    cell_size = min(screen_width / grid_width, screen_height / grid_height)
    offset_x = (screen_width - cell_size * grid_width) / 2
    offset_y = (screen_height - cell_size * grid_height) / 2
    return cell_size, offset_x, offset_y


class GameWindow:
    """Resizable pygame window drawing one snapshot per frame"""

    def __init__(self, config):
        self.config = config
        pygame.init()
        self.fullscreen = False
        self.window = pygame.display.set_mode((config.window_width, config.window_height), pygame.RESIZABLE)
        pygame.display.set_caption("Self-Playing Snake")
        self.clock = pygame.time.Clock()
        self.font = pygame.font.Font(None, 32)
        self.closed = False

    def poll_events(self):
        """Return the InputEvents raised since the last frame"""
        events = []
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                self.closed = True
            elif event.type == pygame.KEYDOWN:
                input_event = translate_key(event.key)
                if input_event == InputEvent.TOGGLE_FULLSCREEN:
                    self.toggle_fullscreen()
                if input_event is not None:
                    events.append(input_event)
        return events

    def tick(self):
        """Wait for the next frame and return the elapsed time in seconds"""
        return self.clock.tick(self.config.fps) / 1000.0

    def toggle_fullscreen(self):
        self.fullscreen = not self.fullscreen
        if self.fullscreen:
            self.window = pygame.display.set_mode((0, 0), pygame.FULLSCREEN)
        else:
            self.window = pygame.display.set_mode(
                (self.config.window_width, self.config.window_height), pygame.RESIZABLE
            )
        logger.debug("Fullscreen %s", "on" if self.fullscreen else "off")

    def draw(self, snapshot):
        self.window.fill(BLACK)

        if snapshot.mode == Mode.MENU:
            self._draw_text(snapshot.text, WHITE)
        elif snapshot.mode == Mode.GAME_OVER:
            self._draw_text(snapshot.text, RED)
        else:
            self._draw_board(snapshot)
            hud = self.font.render(snapshot.hud_text, True, BLUE)
            self.window.blit(hud, (5, 5))

        pygame.display.flip()

    def _draw_board(self, snapshot):
        cell_size, offset_x, offset_y = board_layout(
            self.window.get_size(), self.config.grid_width, self.config.grid_height
        )

        def cell_rect(position):
            return pygame.Rect(
                offset_x + position[0] * cell_size,
                offset_y + position[1] * cell_size,
                cell_size,
                cell_size
            )

        if snapshot.food is not None:
            pygame.draw.rect(self.window, GREEN, cell_rect(snapshot.food))
        if snapshot.hazard is not None:
            pygame.draw.rect(self.window, ORANGE, cell_rect(snapshot.hazard))

        for body, color in zip(snapshot.snakes, snapshot.colors):
            for position in body:
                pygame.draw.rect(self.window, color, cell_rect(position))

    def _draw_text(self, text, color):
        screen_width, screen_height = self.window.get_size()
        x, y = screen_width // 4, screen_height // 4
        for line in text.split("\n"):
            if line:
                surface = self.font.render(line, True, color)
                self.window.blit(surface, (x, y))
            y += self.font.get_linesize()

    def close(self):
        pygame.quit()
