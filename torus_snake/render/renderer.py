"""
Presentation adapter for the snake engine.

Builds one RGB value per grid cell from the game state and draws every
non-background cell as a DOT_SIZE rectangle. The game state is only read,
never changed.
"""

import numpy as np
import pygame

from ..config import (
    GRID_WIDTH, GRID_HEIGHT, DOT_SIZE,
    RUNNING_BACKGROUND, PAUSED_BACKGROUND, SNAKE_COLOR, FOOD_COLOR,
)


class Renderer:
    def __init__(self, surface):
        self.surface = surface

    def background_color(self, game):
        return PAUSED_BACKGROUND if game.is_paused else RUNNING_BACKGROUND

    def frame(self, game):
        """Colour of every grid cell as a (GRID_HEIGHT, GRID_WIDTH, 3) uint8 array"""
        frame = np.empty((GRID_HEIGHT, GRID_WIDTH, 3), dtype=np.uint8)
        frame[:, :] = self.background_color(game)

        # Head and tail look the same
        for x, y in game.snake_positions:
            frame[y, x] = SNAKE_COLOR

        # Food is drawn last so it stays visible under the snake
        food_x, food_y = game.food_position
        frame[food_y, food_x] = FOOD_COLOR
        return frame

    def draw(self, game):
        """Draw the current state onto the surface.

        pygame errors raised by the surface are not caught.
        """
        background = self.background_color(game)
        frame = self.frame(game)
        self.surface.fill(background)

        occupied = np.any(frame != background, axis=2)
        for y, x in zip(*np.nonzero(occupied)):
            rect = pygame.Rect(int(x) * DOT_SIZE, int(y) * DOT_SIZE, DOT_SIZE, DOT_SIZE)
            pygame.draw.rect(self.surface, tuple(int(c) for c in frame[y, x]), rect)
