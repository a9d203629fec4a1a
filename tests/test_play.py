import pygame
import pytest

from torus_snake.game import SnakeGame, Direction, RunState
from torus_snake.play import GameLoop, KEY_BINDINGS


class RecordingRenderer:
    def __init__(self):
        self.frames = []

    def draw(self, game):
        self.frames.append(game.snake_positions)


def key(code):
    return pygame.event.Event(pygame.KEYDOWN, key=code)


@pytest.fixture
def loop():
    game = SnakeGame(food=(20, 20), run_state=RunState.RUNNING)
    return GameLoop(game, RecordingRenderer())


def test_key_bindings_cover_arrows_and_escape():
    assert set(KEY_BINDINGS) == {
        pygame.K_UP, pygame.K_DOWN, pygame.K_LEFT, pygame.K_RIGHT, pygame.K_ESCAPE,
    }


@pytest.mark.parametrize("code, direction", [
    (pygame.K_UP, Direction.UP),
    (pygame.K_DOWN, Direction.DOWN),
    (pygame.K_LEFT, Direction.LEFT),
    (pygame.K_RIGHT, Direction.RIGHT),
])
def test_arrow_keys_set_direction_immediately(loop, code, direction):
    loop.game.set_direction(Direction.UP if direction is not Direction.UP else Direction.DOWN)

    assert loop.handle_event(key(code))
    assert loop.game.direction is direction


def test_escape_toggles_pause(loop):
    loop.handle_event(key(pygame.K_ESCAPE))
    assert loop.game.is_paused
    loop.handle_event(key(pygame.K_ESCAPE))
    assert loop.game.is_running


def test_unbound_keys_are_ignored(loop):
    assert loop.handle_event(key(pygame.K_a))
    assert loop.game.direction is Direction.RIGHT
    assert loop.game.is_running


def test_quit_stops_loop_without_drawing(loop):
    assert loop.step([pygame.event.Event(pygame.QUIT)]) is False
    assert loop.renderer.frames == []


def test_ticks_once_every_interval(loop):
    start = loop.game.snake_positions

    for _ in range(9):
        assert loop.step([])
    assert loop.game.snake_positions == start

    assert loop.step([])
    assert loop.game.head == (4, 1)
    assert loop.frame_counter == 0
    assert len(loop.renderer.frames) == 10

    for _ in range(10):
        loop.step([])
    assert loop.game.head == (5, 1)


def test_direction_applied_before_tick(loop):
    for _ in range(9):
        loop.step([])

    loop.step([key(pygame.K_DOWN)])

    assert loop.game.head == (3, 2)
    assert loop.renderer.frames[-1][0] == (3, 2)


class FailingRenderer:
    def draw(self, game):
        raise pygame.error("display surface quit")


def test_render_errors_escape_step():
    game = SnakeGame(food=(20, 20), run_state=RunState.RUNNING)
    loop = GameLoop(game, FailingRenderer())

    with pytest.raises(pygame.error, match="display surface quit"):
        loop.step([])
