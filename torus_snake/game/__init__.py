"""
Snake Game Module

This module contains the simulation engine: value types and the per-tick
state transition.
"""

from .snake import Point, Direction, RunState, Move, INITIAL_BODY, wrap
from .snake_game import SnakeGame

__all__ = ['SnakeGame', 'Point', 'Direction', 'RunState', 'Move', 'INITIAL_BODY', 'wrap']
