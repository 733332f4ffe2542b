"""
Food and hazard placement.

Cells are drawn uniformly at random with a bounded number of rejection
samples. If the board is too crowded for sampling to succeed, the free cells
are enumerated from an occupancy mask and one is chosen directly, so spawning
always terminates.
"""

import logging
from typing import Iterable, Optional

import numpy as np

from ..errors import ExhaustedGrid
from .grid import Coordinate, Grid

logger = logging.getLogger(__name__)


class Spawner:
    """Picks free cells on a grid for food and hazards"""

    def __init__(self, grid: Grid, rng: Optional[np.random.Generator] = None, max_attempts=1000):
        self.grid = grid
        self.rng = rng if rng is not None else np.random.default_rng()
        self.max_attempts = max_attempts

    def spawn_free_cell(self, excluded) -> Coordinate:
        """Return a uniformly chosen cell that is not in excluded.

        Raises:
            ExhaustedGrid: every cell of the grid is excluded
        """
        excluded = set(excluded)
        for _ in range(self.max_attempts):
            x = int(self.rng.integers(0, self.grid.width))
            y = int(self.rng.integers(0, self.grid.height))
            if (x, y) not in excluded:
                return (x, y)

        logger.debug("Rejection sampling failed after %d attempts, scanning free cells", self.max_attempts)
        free_cells = self._free_cells(excluded)
        if len(free_cells) == 0:
            raise ExhaustedGrid(f"No free cell left on {self.grid!r} ({len(excluded)} cells excluded)")
        x, y = free_cells[self.rng.integers(0, len(free_cells))]
        return (int(x), int(y))

    def _free_cells(self, excluded) -> np.ndarray:
        occupied = np.zeros((self.grid.width, self.grid.height), dtype=bool)
        for position in excluded:
            if self.grid.in_bounds(position):
                occupied[position[0], position[1]] = True
        return np.argwhere(~occupied)

    def spawn_food(self, bodies: Iterable[Iterable[Coordinate]], hazard: Optional[Coordinate] = None) -> Coordinate:
        """Place food away from every snake segment and the hazard"""
        excluded = _occupied(bodies)
        if hazard is not None:
            excluded.add(hazard)
        return self.spawn_free_cell(excluded)

    def spawn_hazard(self, bodies: Iterable[Iterable[Coordinate]], food: Coordinate) -> Coordinate:
        """Place the hazard away from every snake segment and the food"""
        excluded = _occupied(bodies)
        excluded.add(food)
        return self.spawn_free_cell(excluded)


def _occupied(bodies):
    occupied = set()
    for body in bodies:
        occupied.update(body)
    return occupied
