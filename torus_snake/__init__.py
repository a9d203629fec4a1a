"""
Toroidal Snake

A classic snake game on a wrap-around grid, played with pygame.
"""

from .game import SnakeGame, Direction, RunState, Move, Point
from .render import Renderer

__all__ = ['SnakeGame', 'Direction', 'RunState', 'Move', 'Point', 'Renderer']
