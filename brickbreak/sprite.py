"""A textured 2D sprite with a pivot, rotation, scale, tint and frame animation."""

from __future__ import annotations

import math
from enum import Enum
from typing import NamedTuple, Optional, Sequence, Tuple

import pygame
from pygame.math import Vector2

from brickbreak.texture import Texture

_PI = 3.141592
_TWO_PI = _PI * 2.0

Color = Tuple[float, float, float, float]
WHITE: Color = (1.0, 1.0, 1.0, 1.0)


def _deg_to_rad(degrees: float) -> float:
    return _PI * degrees / 180.0


def _rad_to_deg(radians: float) -> float:
    return radians * 180.0 / _PI


def _clamp(value: int, low: int, high: int) -> int:
    return max(low, min(value, high))


class _Region(NamedTuple):
    left: int
    top: int
    right: int
    bottom: int


class Pivot(Enum):
    """The point of the sprite that sits at its position."""

    UPPER_LEFT = "upper_left"
    UPPER_RIGHT = "upper_right"
    CENTER = "center"
    LOWER_LEFT = "lower_left"
    LOWER_RIGHT = "lower_right"


class Sprite:
    """A drawable piece of a texture placed, rotated and scaled in 2D."""

    def __init__(self) -> None:
        self.position = Vector2(0.0, 0.0)
        self._rotation = 0.0
        self.scale = 1.0
        self.layer = 0.0
        self.color: Color = WHITE
        self.texture: Optional[Texture] = None

        self.pivot = Pivot.CENTER
        self.origin = Vector2(0.0, 0.0)
        self.texture_region = _Region(0, 0, 0, 0)

        self._frame_width = 0
        self._frame_height = 0
        self._total_frames = 0
        self._current_frame = 0
        self._elapsed_time = 0.0
        self._frame_time = 0.0

        self.velocity = Vector2(0.0, 0.0)
        self._rotational_velocity = 0.0

    def initialize(
        self,
        texture: Optional[Texture],
        position: Sequence[float],
        rotation_degrees: float,
        scale: float,
        color: Sequence[float],
        layer: float,
    ) -> None:
        """Attach a texture and set the transform, tint and layer."""
        self.texture = texture
        self.position = Vector2(position)
        self._rotation = _deg_to_rad(rotation_degrees)
        self.scale = scale
        self.color = tuple(color)  # type: ignore[assignment]
        self.layer = layer
        if texture is not None:
            self.texture_region = _Region(0, 0, texture.width, texture.height)
        self.set_pivot(self.pivot)

    @property
    def rotation(self) -> float:
        """Rotation in degrees."""
        return _rad_to_deg(self._rotation)

    @rotation.setter
    def rotation(self, degrees: float) -> None:
        self._rotation = _deg_to_rad(degrees)

    @property
    def rotational_velocity(self) -> float:
        """Rotational velocity in degrees per second."""
        return _rad_to_deg(self._rotational_velocity)

    def set_pivot(self, pivot: Pivot) -> None:
        """Choose the pivot and recompute the origin from the texture region."""
        self.pivot = pivot
        if self.texture is None:
            return
        left, top, right, bottom = self.texture_region
        if pivot is Pivot.UPPER_LEFT:
            self.origin = Vector2(float(left), float(top))
        elif pivot is Pivot.UPPER_RIGHT:
            self.origin = Vector2(float(right), float(top))
        elif pivot is Pivot.CENTER:
            self.origin = Vector2((right - left) / 2.0, (bottom - top) / 2.0)
        elif pivot is Pivot.LOWER_RIGHT:
            self.origin = Vector2(float(right), float(bottom))
        elif pivot is Pivot.LOWER_LEFT:
            self.origin = Vector2(float(left), float(bottom))

    def set_texture_region(self, left: int, top: int, right: int, bottom: int) -> None:
        """Show only part of the texture, clamped to the texture's bounds."""
        if self.texture is not None:
            width, height = self.texture.width, self.texture.height
            left = _clamp(left, 0, width)
            top = _clamp(top, 0, height)
            right = _clamp(right, 0, width)
            bottom = _clamp(bottom, 0, height)
        self.texture_region = _Region(left, top, right, bottom)
        self.set_pivot(self.pivot)

    def draw(self, target: pygame.Surface) -> Optional[pygame.Rect]:
        """Draw the sprite onto target; returns the area drawn, or None."""
        if self.texture is None or self.texture.surface is None:
            return None
        source = self.texture.surface
        left, top, right, bottom = self.texture_region
        rect = pygame.Rect(left, top, max(right - left, 0), max(bottom - top, 0))
        rect = rect.clip(source.get_rect())
        if rect.width <= 0 or rect.height <= 0:
            return None

        image = source.subsurface(rect).copy()
        if tuple(self.color) != WHITE:
            tint = tuple(int(round(_clamp_unit(c) * 255)) for c in self.color)
            image.fill(tint, special_flags=pygame.BLEND_RGBA_MULT)

        size = Vector2(rect.width, rect.height)
        if self.scale != 1.0:
            scaled = (self.width, self.height)
            if scaled[0] <= 0 or scaled[1] <= 0:
                return None
            image = pygame.transform.scale(image, scaled)

        pivot_offset = (self.origin - size / 2.0) * self.scale
        if self._rotation != 0.0:
            image = pygame.transform.rotate(image, -_rad_to_deg(self._rotation))
            pivot_offset = pivot_offset.rotate_rad(self._rotation)

        image_center = self.position - pivot_offset
        dest = image.get_rect(center=(round(image_center.x), round(image_center.y)))
        return target.blit(image, dest)

    @property
    def width(self) -> int:
        """Scaled width, ignoring rotation, rounded up."""
        left, _, right, _ = self.texture_region
        return int(math.ceil((right - left) * self.scale))

    @property
    def height(self) -> int:
        """Scaled height, ignoring rotation, rounded up."""
        _, top, _, bottom = self.texture_region
        return int(math.ceil((bottom - top) * self.scale))

    @property
    def extents(self) -> Vector2:
        """Half width and half height of the scaled and rotated sprite."""
        left, top, right, bottom = self.texture_region
        extents = Vector2((right - left) * self.scale * 0.5, (bottom - top) * self.scale * 0.5)
        if self._rotation != 0:
            cos_t = math.cos(self._rotation)
            sin_t = math.sin(self._rotation)
            extents = Vector2(
                abs(extents.x * cos_t - extents.y * sin_t),
                abs(extents.x * sin_t + extents.y * cos_t),
            )
        return extents

    def set_velocity(self, velocity: Sequence[float], rotational_velocity: float) -> None:
        """Set velocity in pixels per second and spin in degrees per second."""
        self.velocity = Vector2(velocity)
        self._rotational_velocity = _deg_to_rad(rotational_velocity)

    def _center_no_rotation(self) -> Vector2:
        if self.pivot is Pivot.CENTER:
            return Vector2(self.position)
        return self.position + Vector2(-0.5 * self.width, -0.5 * self.height)

    def contains_point(self, point: Sequence[float]) -> bool:
        """Return True if the point lies within the sprite's bounds."""
        point = Vector2(point)
        half_width = 0.5 * self.width
        half_height = 0.5 * self.height
        center = self._center_no_rotation()
        if self._rotation != 0.0:
            direction = (point - self.position).rotate_rad(-self._rotation)
            point = center - direction
        return (
            center.x - half_width <= point.x <= center.x + half_width
            and center.y - half_height <= point.y <= center.y + half_height
        )

    def set_texture_animation(
        self, frame_width: int, frame_height: int, frames_per_second: float
    ) -> None:
        """Treat the whole texture as a sheet of equally sized frames."""
        if self.texture is None:
            return
        self._frame_width = frame_width
        self._frame_height = frame_height
        cols = self.texture.width // frame_width
        rows = self.texture.height // frame_height
        self._total_frames = rows * cols
        self._current_frame = 0
        self._elapsed_time = 0.0
        self._frame_time = 1.0 / frames_per_second
        self._set_texture_animation_region()

    def update_animation(self, delta_time: float) -> None:
        """Advance the animation and apply velocity and spin for delta_time seconds."""
        if self._total_frames > 0:
            self._elapsed_time += delta_time
            advance = int(self._elapsed_time / self._frame_time)
            self._elapsed_time = math.fmod(self._elapsed_time, self._frame_time)
            self._current_frame = (self._current_frame + advance) % self._total_frames
            self._set_texture_animation_region()

        self.position += self.velocity * delta_time
        self._rotation += self._rotational_velocity * delta_time
        while self._rotation > _TWO_PI:
            self._rotation -= _TWO_PI
        while self._rotation < -_TWO_PI:
            self._rotation += _TWO_PI

    def is_last_frame(self) -> bool:
        """Return True if the animation shows its last frame."""
        return self._current_frame == self._total_frames - 1

    def restart_animation(self) -> None:
        """Go back to the first frame."""
        self._current_frame = 0

    def _set_texture_animation_region(self) -> None:
        cols = self.texture.width // self._frame_width
        column = self._current_frame % cols
        row = self._current_frame // cols
        self.texture_region = _Region(
            column * self._frame_width,
            row * self._frame_height,
            (column + 1) * self._frame_width,
            (row + 1) * self._frame_height,
        )
        self.set_pivot(self.pivot)


def _clamp_unit(value: float) -> float:
    return max(0.0, min(float(value), 1.0))