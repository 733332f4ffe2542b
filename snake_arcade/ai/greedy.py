"""
Greedy one-step mover used by the self-playing snake and the competitive bot.

The mover looks only at the four cells around the head and picks the safe
one closest to the food. It does not search ahead, so it can walk into a
dead end; callers treat a None result as death.
"""

from typing import Iterable, Optional

from ..game.grid import Coordinate, Grid, manhattan_distance


def safe_moves(head: Coordinate, own_body, obstacles, grid: Grid):
    """Neighbours of head that are inside the grid and not occupied, in Up, Down, Left, Right order"""
    moves = []
    for position in grid.neighbors(head):
        if not grid.in_bounds(position):
            continue
        if position in own_body:
            continue
        if position in obstacles:
            continue
        moves.append(position)
    return moves


def choose_move(head: Coordinate, own_body: Iterable[Coordinate], obstacles: Iterable[Coordinate],
                food: Coordinate, grid: Grid) -> Optional[Coordinate]:
    """Pick the next head position for an autonomous snake.

    Args:
        head: current head cell
        own_body: the snake's own segments, head included
        obstacles: other cells to avoid (the opponent's body in competitive play)
        food: target cell
        grid: board used for the bounds check

    Returns:
        The safe neighbour with the smallest Manhattan distance to food, ties
        going to the earliest of Up, Down, Left, Right; None if no neighbour
        is safe.
    """
    candidates = safe_moves(head, set(own_body), set(obstacles), grid)
    if not candidates:
        return None
    # min() keeps the first of equal keys, which preserves the candidate order
    return min(candidates, key=lambda position: manhattan_distance(position, food))
