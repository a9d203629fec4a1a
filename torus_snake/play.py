#!/usr/bin/env python3
"""
Snake game entry point.

Polls pygame input, applies direction/pause commands immediately, ticks the
engine every TICK_INTERVAL frames and redraws every frame.
"""

import os

import pygame

from .config import WINDOW_WIDTH, WINDOW_HEIGHT, WINDOW_TITLE, FPS, TICK_INTERVAL
from .game import SnakeGame
from .render import Renderer

KEY_BINDINGS = {
    pygame.K_UP: SnakeGame.move_up,
    pygame.K_DOWN: SnakeGame.move_down,
    pygame.K_LEFT: SnakeGame.move_left,
    pygame.K_RIGHT: SnakeGame.move_right,
    pygame.K_ESCAPE: SnakeGame.toggle_pause,
}


class GameLoop:
    """One iteration of the driver loop per step() call"""

    def __init__(self, game, renderer, tick_interval=TICK_INTERVAL):
        self.game = game
        self.renderer = renderer
        self.tick_interval = tick_interval
        self.frame_counter = 0

    def handle_event(self, event):
        """Apply a single input event. Returns False when the window is closed."""
        if event.type == pygame.QUIT:
            return False

        if event.type == pygame.KEYDOWN:
            command = KEY_BINDINGS.get(event.key)
            if command is not None:
                command(self.game)
        return True

    def step(self, events):
        running = True
        for event in events:
            if not self.handle_event(event):
                running = False
                break

        if not running:
            return False

        self.frame_counter += 1
        if self.frame_counter % self.tick_interval == 0:
            self.frame_counter = 0
            self.game.tick()

        self.renderer.draw(self.game)
        return True


def main():
    print("Snake game")
    print("=" * 30)
    print("Arrow keys: steer")
    print("ESC: pause / resume (the game starts paused)")
    print("Close the window to quit")

    os.environ.setdefault('SDL_VIDEO_CENTERED', '1')
    pygame.init()
    try:
        window = pygame.display.set_mode((WINDOW_WIDTH, WINDOW_HEIGHT))
        pygame.display.set_caption(WINDOW_TITLE)
        clock = pygame.time.Clock()

        loop = GameLoop(SnakeGame(), Renderer(window))
        while loop.step(pygame.event.get()):
            pygame.display.flip()
            clock.tick(FPS)
    except KeyboardInterrupt:
        print("\n\nGame interrupted by user.")
    finally:
        pygame.quit()


if __name__ == "__main__":
    main()
