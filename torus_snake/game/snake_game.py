"""
Snake Game Engine

Owns the authoritative game state (body, direction, food, run state) and
advances it one step per tick. No drawing or input handling happens here.
"""

import random

from ..config import GRID_WIDTH, GRID_HEIGHT
from .snake import Point, Direction, RunState, Move, INITIAL_BODY, wrap


class SnakeGame:
    """Single-player snake on a wrap-around grid"""

    def __init__(self, rng=None, body=None, direction=Direction.RIGHT, food=None,
                 run_state=RunState.PAUSED):
        """
        Args:
            rng: source of random integers with a randint(a, b) method
            body: starting segments, head first (defaults to INITIAL_BODY)
            direction: starting direction
            food: starting food position (random when omitted)
            run_state: RunState.PAUSED or RunState.RUNNING
        """
        self.rng = rng or random.Random()

        if body is None:
            body = INITIAL_BODY
        if len(body) < 1:
            raise ValueError("snake body needs at least one segment")

        self.body = [wrap(position) for position in body]
        self.direction = direction
        self.food = wrap(food) if food is not None else self._place_food()
        self.run_state = run_state

    def _place_food(self):
        # The body is not excluded, food may appear under the snake
        return Point(self.rng.randint(0, GRID_WIDTH - 1), self.rng.randint(0, GRID_HEIGHT - 1))

    # Read accessors

    @property
    def head(self):
        return self.body[0]

    @property
    def snake_positions(self):
        return tuple(self.body)

    @property
    def food_position(self):
        return self.food

    @property
    def is_paused(self):
        return self.run_state is RunState.PAUSED

    @property
    def is_running(self):
        return self.run_state is RunState.RUNNING

    # Commands

    def set_direction(self, direction):
        """Change direction; reversing into the body is blocked at tick time instead"""
        self.direction = direction

    def move_up(self):
        self.set_direction(Direction.UP)

    def move_down(self):
        self.set_direction(Direction.DOWN)

    def move_left(self):
        self.set_direction(Direction.LEFT)

    def move_right(self):
        self.set_direction(Direction.RIGHT)

    def toggle_pause(self):
        if self.run_state is RunState.RUNNING:
            self.run_state = RunState.PAUSED
        else:
            self.run_state = RunState.RUNNING

    def tick(self):
        """Advance the game by one step and report what happened.

        Returns:
            Move.PAUSED if the game is paused, Move.BLOCKED if the head would
            step back onto the segment behind it, Move.RESET after a
            self-collision, Move.GROW after eating food, Move.ADVANCE otherwise.
        """
        if self.run_state is RunState.PAUSED:
            return Move.PAUSED

        new_head = wrap(self.head + self.direction.vector)

        # Opposite key pressed: refuse to fold back onto the neck
        if len(self.body) > 1 and new_head == self.body[1]:
            return Move.BLOCKED

        # Check self collision against the body before it moves
        if new_head in self.body:
            self.body = list(INITIAL_BODY)
            return Move.RESET

        # Move snake
        self.body.pop()
        self.body.insert(0, new_head)

        # Check food collision
        if new_head != self.food:
            return Move.ADVANCE

        self.food = self._place_food()
        tail = self.body[-1]
        self.body.append(wrap(tail + self.direction.opposite.vector))
        return Move.GROW
