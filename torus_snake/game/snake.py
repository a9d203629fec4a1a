"""
Value types shared by the snake engine and its renderer.

Positions are plain (x, y) pairs on a GRID_WIDTH x GRID_HEIGHT torus.
"""

from collections import namedtuple
from enum import Enum

from ..config import GRID_WIDTH, GRID_HEIGHT, START_POSITIONS


class Point(namedtuple('Point', ['x', 'y'])):
    """Grid coordinate. Adds componentwise and compares equal to (x, y) tuples."""

    __slots__ = ()

    def __add__(self, other):
        return Point(self[0] + other[0], self[1] + other[1])


class Direction(Enum):
    UP = (0, -1)
    DOWN = (0, 1)
    LEFT = (-1, 0)
    RIGHT = (1, 0)

    @property
    def vector(self):
        return Point(*self.value)

    @property
    def opposite(self):
        x, y = self.value
        return Direction((-x, -y))


class RunState(Enum):
    RUNNING = 'running'
    PAUSED = 'paused'


class Move(Enum):
    """Outcome of a single tick"""
    PAUSED = 'paused'
    ADVANCE = 'advance'
    GROW = 'grow'
    RESET = 'reset'
    BLOCKED = 'blocked'


INITIAL_BODY = tuple(Point(x, y) for x, y in START_POSITIONS)


def wrap(position):
    """Bring a position back onto the grid, re-entering at the opposite edge.

    Each coordinate is reduced modulo its axis length, so stepping up from
    y = 0 lands on y = GRID_HEIGHT - 1 and the head never leaves the grid.
    """
    return Point(position[0] % GRID_WIDTH, position[1] % GRID_HEIGHT)
