"""
Snake Arcade - Configuration

Board, timing and scoring parameters in one place.
"""

from dataclasses import dataclass
from typing import Optional


# Colors
BLACK = (0, 0, 0)
WHITE = (255, 255, 255)
RED = (255, 0, 0)
GREEN = (0, 255, 0)
BLUE = (0, 0, 255)
YELLOW = (255, 255, 0)
ORANGE = (255, 165, 0)


@dataclass
class GameConfig:
    """Grid size, tick rate and scoring rules shared by every mode."""

    # Board
    grid_width: int = 50
    grid_height: int = 40
    cell_size: int = 20  # pixels per cell in windowed mode

    # Time
    move_interval: float = 0.1  # seconds per simulation tick
    fps: int = 60

    # Scoring
    food_reward: int = 10
    hazard_penalty: int = 5

    # Spawning
    max_spawn_attempts: int = 1000
    seed: Optional[int] = None

    def __post_init__(self):
        if self.grid_width <= 0 or self.grid_height <= 0:
            raise ValueError(f"Grid must be non-empty, got {self.grid_width}x{self.grid_height}")
        if self.grid_width * self.grid_height < 2:
            raise ValueError("Grid needs at least two cells")
        if self.cell_size <= 0:
            raise ValueError(f"cell_size must be positive, got {self.cell_size}")
        if self.move_interval <= 0:
            raise ValueError(f"move_interval must be positive, got {self.move_interval}")
        if self.fps <= 0:
            raise ValueError(f"fps must be positive, got {self.fps}")
        if self.max_spawn_attempts < 0:
            raise ValueError("max_spawn_attempts cannot be negative")

    @property
    def window_width(self) -> int:
        return self.cell_size * self.grid_width

    @property
    def window_height(self) -> int:
        return self.cell_size * self.grid_height
