import os
import random
import struct

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")

import pygame
import pytest
from pygame.math import Vector2

from brickbreak.entities import Block, SuperBlock
from brickbreak.game import (
    BACKGROUND_FILE,
    BALL_FILE,
    BLOCK_FILE,
    PADDLE_FILE,
    BreakoutGame,
    GameState,
    main,
)
from brickbreak.texture import TextureError


class _FixedRandom(random.Random):
    def __init__(self, value):
        super().__init__()
        self._value = value

    def random(self):
        return self._value


def _write_dds(path, width, height, rgba):
    header = bytearray(128)
    header[0:4] = b"DDS "
    struct.pack_into("<I", header, 4, 124)
    struct.pack_into("<2I", header, 12, height, width)
    struct.pack_into(
        "<8I", header, 76, 32, 0x41, 0, 32, 0xFF, 0xFF00, 0xFF0000, 0xFF000000
    )
    path.write_bytes(bytes(header) + bytes(rgba) * (width * height))


def _write_png(path, size, color):
    surface = pygame.Surface(size, pygame.SRCALPHA)
    surface.fill(color)
    pygame.image.save(surface, str(path))


@pytest.fixture
def texture_dir(tmp_path):
    pygame.init()
    _write_dds(tmp_path / BACKGROUND_FILE, 8, 8, (255, 0, 0, 255))
    _write_png(tmp_path / BALL_FILE, (16, 16), (255, 255, 255, 255))
    _write_png(tmp_path / PADDLE_FILE, (40, 10), (255, 255, 255, 255))
    _write_png(tmp_path / BLOCK_FILE, (40, 20), (255, 255, 255, 255))
    return tmp_path


def _game(texture_dir, roll=0.0):
    game = BreakoutGame(rng=_FixedRandom(roll))
    game.screen = pygame.Surface((game.client_width, game.client_height))
    game.initialize_textures(texture_dir)
    return game


def test_mouse_down_cycles_states():
    game = BreakoutGame()
    assert game.current_state is GameState.MAIN_MENU
    game.on_mouse_down()
    assert game.current_state is GameState.GAME
    game.on_mouse_down()
    assert game.current_state is GameState.END_SCREEN
    game.on_mouse_down()
    assert game.current_state is GameState.MAIN_MENU


def test_left_button_event_records_position_and_advances():
    game = BreakoutGame()
    event = pygame.event.Event(pygame.MOUSEBUTTONDOWN, pos=(10, 20), button=1)
    assert game.process_event(event) is False
    assert game.mouse_pos == Vector2(10, 20)
    assert game.button_down is True
    assert game.current_state is GameState.GAME
    game.process_event(pygame.event.Event(pygame.MOUSEBUTTONUP, pos=(3, 4), button=1))
    assert game.button_down is False
    assert game.mouse_pos == Vector2(3, 4)


def test_mouse_motion_is_handled():
    game = BreakoutGame()
    assert game.process_event(pygame.event.Event(pygame.MOUSEMOTION, pos=(7, 9))) is True
    assert game.mouse_pos == Vector2(7, 9)


def test_digit_key_sets_present_interval():
    game = BreakoutGame()
    game.process_event(pygame.event.Event(pygame.KEYUP, key=pygame.K_3))
    assert game.present_interval == 3
    game.process_event(pygame.event.Event(pygame.KEYUP, key=pygame.K_0))
    assert game.present_interval == 0


def test_movement_keys_toggle_flags():
    game = BreakoutGame()
    game.process_event(pygame.event.Event(pygame.KEYDOWN, key=pygame.K_a))
    game.process_event(pygame.event.Event(pygame.KEYDOWN, key=pygame.K_d))
    assert (game.left, game.right) == (True, True)
    game.process_event(pygame.event.Event(pygame.KEYUP, key=pygame.K_a))
    assert (game.left, game.right) == (False, True)


def test_quit_event_requests_quit():
    game = BreakoutGame()
    assert game.process_event(pygame.event.Event(pygame.QUIT)) is True
    assert game.quit_requested is True


def test_block_grid_layout(texture_dir):
    game = _game(texture_dir)
    assert len(game.blocks) == BreakoutGame.NUM_COLUMNS
    assert all(len(col) == BreakoutGame.NUM_ROWS for col in game.blocks)
    assert game.blocks[0][0].position == Vector2(50, 100)
    assert game.blocks[0][1].position.y - game.blocks[0][0].position.y == 50
    assert not any(isinstance(b, SuperBlock) for col in game.blocks for b in col)


def test_high_rolls_make_super_blocks(texture_dir):
    game = _game(texture_dir, roll=0.99)
    assert all(isinstance(b, SuperBlock) for col in game.blocks for b in col)
    target = game.blocks[0][0]
    game.ball.position = Vector2(target.position)
    game.ball.velocity = Vector2(10, 20)
    game.game_screen_update(0.0)
    assert game.score == 1
    assert target.enabled is False
    assert game.ball.velocity.x == pytest.approx(11.5, rel=1e-6)
    assert game.ball.velocity.y == pytest.approx(23.0, rel=1e-6)


def test_ball_and_paddle_placement(texture_dir):
    game = _game(texture_dir)
    assert game.ball.position == Vector2(game.client_width // 2, 550)
    assert game.ball.velocity == Vector2(200, 200)
    assert game.paddle.position == Vector2(game.client_width // 2, 650)
    assert game.paddle.collider.center == game.paddle.position


def test_missing_textures_raise(tmp_path):
    game = BreakoutGame()
    with pytest.raises(TextureError):
        game.initialize_textures(tmp_path)


def test_paddle_moves_left(texture_dir):
    game = _game(texture_dir)
    game.current_state = GameState.GAME
    game.left = True
    start = game.paddle.position.x
    game.update(0.1)
    assert game.paddle.position.x == pytest.approx(start - BreakoutGame.PADDLE_SPEED * 0.1)
    assert game.paddle.collider.center == game.paddle.position


def test_ball_at_bottom_ends_game(texture_dir):
    game = _game(texture_dir)
    game.current_state = GameState.GAME
    game.ball.position = Vector2(300, game.client_height - 1)
    game.ball.velocity = Vector2(0, 0)
    game.update(0.0)
    assert game.current_state is GameState.END_SCREEN


def test_ball_bounces_off_left_wall(texture_dir):
    game = _game(texture_dir)
    game.ball.position = Vector2(0, 300)
    game.ball.velocity = Vector2(-200, 100)
    game.game_screen_update(0.0)
    assert game.ball.velocity == Vector2(200, 100)


def test_ball_breaks_block(texture_dir):
    game = _game(texture_dir)
    target = game.blocks[0][0]
    game.ball.position = Vector2(target.position)
    game.ball.velocity = Vector2(10, 20)
    game.game_screen_update(0.0)
    assert game.score == target.score_value
    assert target.enabled is False
    assert game.ball.velocity == Vector2(10, -20)
    assert sum(1 for col in game.blocks for b in col if not b.enabled) == 1


def test_update_in_menu_changes_nothing(texture_dir):
    game = _game(texture_dir)
    before = Vector2(game.ball.position)
    game.update(1.0)
    assert game.ball.position == before


def test_main_menu_render_draws_background(texture_dir):
    game = _game(texture_dir)
    game.screen.fill((0, 0, 0))
    game.render()
    assert game.screen.get_at((1, 1))[:3] == (255, 0, 0)


def test_game_and_end_screen_render_draw_background(texture_dir):
    for state in (GameState.GAME, GameState.END_SCREEN):
        game = _game(texture_dir)
        game.current_state = state
        game.screen.fill((0, 0, 0))
        game.render()
        assert game.screen.get_at((1, 1))[:3] == (255, 0, 0)


def test_game_render_draws_ball(texture_dir):
    game = _game(texture_dir)
    game.current_state = GameState.GAME
    game.screen.fill((0, 0, 0))
    game.render()
    x, y = int(game.ball.position.x), int(game.ball.position.y)
    assert game.screen.get_at((x, y))[:3] == (255, 255, 255)


def test_block_default_collider_is_empty():
    game = BreakoutGame()
    assert isinstance(game.block, Block)
    assert game.block.collider.extents == Vector2(0, 0)


def test_main_reports_missing_textures(tmp_path):
    assert main(["--textures", str(tmp_path / "none")]) == 1