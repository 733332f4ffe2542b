"""
Snake entity shared by the single-player and competitive games.

Each snake has its own body, direction, score and alive flag.
"""

from collections import deque

from .grid import Direction


class Snake:
    """A snake on the board, head first"""

    def __init__(self, snake_id, start_pos, color, autopilot=False):
        self.snake_id = snake_id
        self.color = color
        self.autopilot = autopilot

        # Snake state
        self.positions = deque([start_pos])
        self.direction = Direction.RIGHT
        self.pending_direction = Direction.RIGHT
        self.alive = True
        self.score = 0
        self.death_reason = None  # 'wall', 'self', 'collision' or 'trapped'

    @property
    def head(self):
        return self.positions[0]

    def __len__(self):
        return len(self.positions)

    def __contains__(self, position):
        return position in self.positions

    def steer(self, direction):
        """Queue a direction change for the next tick.

        Turning straight back along the current axis of travel is ignored.
        Returns True if the input was accepted.
        """
        if self.autopilot or not self.alive:
            return False
        if direction == self.direction.opposite:
            return False
        self.pending_direction = direction
        return True

    def next_head(self):
        """Commit the pending direction and return the cell the head moves to"""
        self.direction = self.pending_direction
        return self.direction.step(self.head)

    def advance(self, new_head, grow):
        """Move onto new_head, keeping the tail if grow is set"""
        self.positions.appendleft(new_head)
        if not grow:
            self.positions.pop()

    def shrink(self):
        """Halve the body (never below one segment)"""
        new_length = max(1, len(self.positions) // 2)
        while len(self.positions) > new_length:
            self.positions.pop()

    def reward(self, points):
        self.score += points

    def penalize(self, points):
        self.score = max(0, self.score - points)

    def kill(self, reason):
        self.alive = False
        self.death_reason = reason

    def __repr__(self):
        return f"<Snake {self.snake_id} head={self.head} len={len(self.positions)} alive={self.alive}>"
