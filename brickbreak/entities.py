"""Game objects: the ball, the blocks and the paddle."""

from __future__ import annotations

from typing import Optional, Sequence

import pygame
from pygame.math import Vector2

from brickbreak.collision import Box2D, Circle
from brickbreak.sprite import Sprite
from brickbreak.texture import Texture


class Ball(Sprite):
    """A moving sprite with a circular collider."""

    def __init__(self) -> None:
        super().__init__()
        self.collider = Circle()
        self.velocity = Vector2(0.0, 0.0)

    def initialize(
        self,
        texture: Optional[Texture],
        position: Sequence[float],
        rotation_degrees: float,
        scale: float,
        color: Sequence[float],
        layer: float,
    ) -> None:
        super().initialize(texture, position, rotation_degrees, scale, color, layer)
        self.collider.center = Vector2(self.position)
        self.collider.radius = self.width / 2.0

    def move_ball(self, delta_time: float) -> None:
        """Move by the velocity for delta_time seconds, carrying the collider along."""
        self.position = self.position + self.velocity * delta_time
        self.collider.center = Vector2(self.position)


class Block(Sprite):
    """A breakable block worth score_value points."""

    def __init__(self) -> None:
        super().__init__()
        self.score_value = 1
        self.enabled = True
        self.collider = Box2D()

    def draw(self, target: pygame.Surface) -> Optional[pygame.Rect]:
        if not self.enabled:
            return None
        return super().draw(target)

    def initialize(
        self,
        texture: Optional[Texture],
        position: Sequence[float],
        rotation_degrees: float,
        scale: float,
        color: Sequence[float],
        layer: float,
    ) -> None:
        super().initialize(texture, position, rotation_degrees, scale, color, layer)
        self.collider.center = Vector2(self.position)
        self.collider.extents = self.extents

    def do_collision(self, score: int, ball: Ball) -> int:
        """Break the block, bouncing the ball vertically; returns the new score."""
        if self.enabled:
            score += self.score_value
            ball.velocity = Vector2(ball.velocity.x, -ball.velocity.y)
        self.enabled = False
        return score


class SuperBlock(Block):
    """A block that also speeds the ball up when broken."""

    def __init__(self) -> None:
        super().__init__()
        self.speed_multiplier = 1.15

    def do_super_block_collision(self, ball: Ball, score: int) -> int:
        """Break the block and speed up the ball; returns the new score."""
        if self.enabled:
            score = self.do_collision(score, ball)
            ball.velocity = ball.velocity * self.speed_multiplier
            ball.velocity = Vector2(ball.velocity.x, -ball.velocity.y)
        self.enabled = False
        return score


class Paddle(Sprite):
    """The player's paddle with a box collider."""

    def __init__(self) -> None:
        super().__init__()
        self.enabled = True
        self.collider = Box2D()

    def draw(self, target: pygame.Surface) -> Optional[pygame.Rect]:
        if not self.enabled:
            return None
        return super().draw(target)

    def initialize(
        self,
        texture: Optional[Texture],
        position: Sequence[float],
        rotation_degrees: float,
        scale: float,
        color: Sequence[float],
        layer: float,
    ) -> None:
        super().initialize(texture, position, rotation_degrees, scale, color, layer)
        self.collider.center = Vector2(self.position)
        self.collider.extents = self.extents

    def do_collision(self, ball: Ball, delta_time: float) -> None:
        """Bounce the ball vertically."""
        ball.velocity = Vector2(ball.velocity.x, -ball.velocity.y)