"""Exceptions raised by the snake arcade core."""


class SnakeArcadeError(Exception):
    """Base class for errors raised by the simulation core"""


class ExhaustedGrid(SnakeArcadeError):
    """No free cell is left to place food or a hazard on"""
