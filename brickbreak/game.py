"""The breakout game: menus, the playing field and its rules."""

from __future__ import annotations

import argparse
import random
import sys
from enum import Enum
from pathlib import Path
from typing import List, Optional, Sequence, Union

import pygame
from pygame.math import Vector2

from brickbreak.app import GameWindow, GraphicsError
from brickbreak.collision import Box2D, box_circle_check
from brickbreak.entities import Ball, Block, Paddle, SuperBlock
from brickbreak.font import Font
from brickbreak.texture import Texture, TextureError
from brickbreak.timer import Timer

WINDOW_TITLE = "BREAKOUT!"

BACKGROUND_FILE = "starfield.dds"
BALL_FILE = "sphere-04.png"
PADDLE_FILE = "paddle.png"
BLOCK_FILE = "block_purple.png"

DARK_GRAY = (169 / 255, 169 / 255, 169 / 255, 1.0)
RED = (1.0, 0.0, 0.0, 1.0)
ORANGE = (1.0, 165 / 255, 0.0, 1.0)
WHITE = (1.0, 1.0, 1.0, 1.0)
YELLOW = (1.0, 1.0, 0.0, 1.0)

_DIGIT_KEYS = {getattr(pygame, f"K_{n}"): n for n in range(5)}


class GameState(Enum):
    """The screen the game is showing."""

    MAIN_MENU = "main_menu"
    GAME = "game"
    END_SCREEN = "end_screen"


class BreakoutGame(GameWindow):
    """Breakout: a ball, a paddle moved with A and D, and a wall of blocks."""

    NUM_ROWS = 8
    NUM_COLUMNS = 10
    PADDLE_SPEED = 400
    SUPER_BLOCK_THRESHOLD = 80

    def __init__(
        self,
        width: int = 1024,
        height: int = 768,
        *,
        font: Optional[Font] = None,
        timer: Optional[Timer] = None,
        rng: Optional[random.Random] = None,
    ) -> None:
        super().__init__(width, height, font=font, timer=timer)
        self.rng = rng if rng is not None else random.Random()
        self.mouse_pos = Vector2(self.client_width * 0.5, self.client_height * 0.5)
        self.button_down = False
        self.clear_color = DARK_GRAY

        self.current_state = GameState.MAIN_MENU
        self.score = 0

        self.background = Texture()
        self.ball_texture = Texture()
        self.block_texture = Texture()
        self.paddle_texture = Texture()

        self.block = Block()
        self.super_block = SuperBlock()
        self.blocks: List[List[Block]] = []
        self.ball = Ball()
        self.paddle = Paddle()

        self.left = False
        self.right = False

    def initialize_textures(self, texture_dir: Union[str, Path]) -> None:
        """Load the textures from texture_dir and lay out the ball, paddle and blocks."""
        texture_dir = Path(texture_dir)
        self.background.load(texture_dir / BACKGROUND_FILE)
        self.ball_texture.load(texture_dir / BALL_FILE)
        self.paddle_texture.load(texture_dir / PADDLE_FILE)
        self.block_texture.load(texture_dir / BLOCK_FILE)

        self.ball.initialize(
            self.ball_texture, (self.client_width // 2, 550), 0, 0.25, WHITE, 0
        )
        self.ball.velocity = Vector2(200, 200)

        self.paddle.initialize(
            self.paddle_texture, (self.client_width // 2, 650), 0, 0.35, YELLOW, 0
        )

        spacing = self.client_width // self.NUM_COLUMNS
        self.blocks = []
        for column in range(self.NUM_COLUMNS):
            column_blocks: List[Block] = []
            for row in range(self.NUM_ROWS):
                roll = int(self.rng.random() * 99 + 1)
                position = (spacing * column + 50, 100 + 50 * row)
                if roll > self.SUPER_BLOCK_THRESHOLD:
                    block: Block = SuperBlock()
                    color = RED
                else:
                    block = Block()
                    color = WHITE
                block.initialize(self.block_texture, position, 0, 0.20, color, 0)
                column_blocks.append(block)
            self.blocks.append(column_blocks)

    def _all_blocks(self):
        for column in self.blocks:
            yield from column

    def process_event(self, event: pygame.event.Event) -> bool:
        """Handle mouse and keyboard input, then pass the event to the window."""
        if event.type == pygame.MOUSEMOTION:
            self.mouse_pos = Vector2(event.pos)
            return True
        if event.type == pygame.MOUSEBUTTONUP and event.button == 1:
            self.button_down = False
            self.mouse_pos = Vector2(event.pos)
        elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
            self.button_down = True
            self.mouse_pos = Vector2(event.pos)
            self.on_mouse_down()
        elif event.type == pygame.KEYUP:
            if event.key in _DIGIT_KEYS:
                self.present_interval = _DIGIT_KEYS[event.key]
            if event.key == pygame.K_a:
                self.left = False
            if event.key == pygame.K_d:
                self.right = False
        elif event.type == pygame.KEYDOWN:
            if event.key == pygame.K_a:
                self.left = True
            if event.key == pygame.K_d:
                self.right = True
        return super().process_event(event)

    def render(self) -> None:
        """Draw the screen for the current state."""
        if self.current_state is GameState.MAIN_MENU:
            self.main_menu_render()
        elif self.current_state is GameState.GAME:
            self.game_screen_render()
        elif self.current_state is GameState.END_SCREEN:
            self.end_screen_render()

    def _screen(self) -> pygame.Surface:
        if self.screen is None:
            raise GraphicsError("no surface to render to")
        return self.screen

    def main_menu_render(self) -> None:
        screen = self._screen()
        self.background.draw(screen, 0, 0)
        self.font.print_message(screen, 0, 30, "Main Menu", RED)
        cx, cy = self.client_width // 2, self.client_height // 2
        self.font.print_message(screen, cx - 50, cy, "BREAKOUT", ORANGE)
        self.font.print_message(screen, cx - 75, cy + 50, "Left Click To Start", ORANGE)

    def game_screen_render(self) -> None:
        screen = self._screen()
        self.background.draw(screen, 0, 0)
        self.font.print_message(screen, 0, 30, "Game Menu", RED)

        sprites = [self.block, self.super_block, self.ball, self.paddle, *self._all_blocks()]
        # Higher layers are further back, so they are drawn first.
        for sprite in sorted(sprites, key=lambda s: s.layer, reverse=True):
            sprite.draw(screen)

        self.font.print_message(screen, 0, 60, f"SCORE: {self.score}", RED)

    def end_screen_render(self) -> None:
        screen = self._screen()
        self.background.draw(screen, 0, 0)
        self.font.print_message(screen, 0, 30, "End Menu", RED)
        self.font.print_message(
            screen, self.client_width // 2 - 50, self.client_height // 2, "GAME OVER", RED
        )
        self.font.print_message(screen, 0, 60, f"SCORE: {self.score}", RED)

    def update(self, delta_time: float) -> None:
        """Advance the current state by delta_time seconds."""
        if self.current_state is GameState.MAIN_MENU:
            self.main_menu_update(delta_time)
        elif self.current_state is GameState.GAME:
            self.game_screen_update(delta_time)
        elif self.current_state is GameState.END_SCREEN:
            self.end_screen_update(delta_time)

    def main_menu_update(self, delta_time: float) -> None:
        """The main menu has nothing to animate."""

    def game_screen_update(self, delta_time: float) -> None:
        """Move the ball and paddle and resolve every collision."""
        ball = self.ball
        ball.move_ball(delta_time)

        extents = ball.extents
        if ball.position.x <= extents.x or ball.position.x >= self.client_width - extents.x:
            ball.velocity = Vector2(-ball.velocity.x, ball.velocity.y)

        if ball.position.y <= extents.y:
            ball.velocity = Vector2(ball.velocity.x, -ball.velocity.y)

        if ball.position.y >= self.client_height - extents.x:
            self.current_state = GameState.END_SCREEN

        paddle = self.paddle
        if paddle.position.x >= paddle.extents.x and self.left:
            paddle.position = Vector2(
                paddle.position.x - self.PADDLE_SPEED * delta_time, paddle.position.y
            )
            paddle.collider = Box2D(paddle.position, paddle.extents)

        if paddle.position.x <= self.client_width - paddle.extents.x and self.right:
            paddle.position = Vector2(
                paddle.position.x + self.PADDLE_SPEED * delta_time, paddle.position.y
            )
            paddle.collider = Box2D(paddle.position, paddle.extents)

        if box_circle_check(self.block.collider, ball.collider):
            self.score = self.block.do_collision(self.score, ball)

        if box_circle_check(paddle.collider, ball.collider):
            paddle.do_collision(ball, delta_time)

        if box_circle_check(self.super_block.collider, ball.collider):
            self.score = self.super_block.do_super_block_collision(ball, self.score)

        for block in self._all_blocks():
            if box_circle_check(block.collider, ball.collider):
                if isinstance(block, SuperBlock):
                    self.score = block.do_super_block_collision(ball, self.score)
                else:
                    self.score = block.do_collision(self.score, ball)

    def end_screen_update(self, delta_time: float) -> None:
        """The end screen has nothing to animate."""

    def on_mouse_down(self) -> None:
        """Step to the next screen: menu, game, end, menu again."""
        if self.current_state is GameState.MAIN_MENU:
            self.current_state = GameState.GAME
        elif self.current_state is GameState.GAME:
            self.current_state = GameState.END_SCREEN
        elif self.current_state is GameState.END_SCREEN:
            self.current_state = GameState.MAIN_MENU


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Open the game window and play until it is closed."""
    parser = argparse.ArgumentParser(prog="brickbreak", description="Play breakout.")
    parser.add_argument(
        "--textures", type=Path, default=Path("Textures"), help="directory holding the textures"
    )
    parser.add_argument("--width", type=int, default=1024)
    parser.add_argument("--height", type=int, default=768)
    args = parser.parse_args(argv)

    pygame.init()
    try:
        game = BreakoutGame(args.width, args.height)
        game.init_window(WINDOW_TITLE)
        game.initialize_textures(args.textures)
        return game.message_loop()
    except (GraphicsError, TextureError) as exc:
        print(f"brickbreak: {exc}", file=sys.stderr)
        return 1
    finally:
        pygame.quit()


if __name__ == "__main__":
    sys.exit(main())