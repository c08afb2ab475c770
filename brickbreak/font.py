"""Text drawing with a loaded font."""

from __future__ import annotations

from pathlib import Path
from typing import Optional, Sequence, Tuple, Union

import pygame
from pygame.math import Vector2

DEFAULT_SIZE = 16

BLACK = (0.0, 0.0, 0.0, 1.0)
RED = (1.0, 0.0, 0.0, 1.0)
GREEN = (0.0, 128 / 255, 0.0, 1.0)
BLUE = (0.0, 0.0, 1.0, 1.0)

ColorLike = Union[Sequence[float], pygame.Color]


def _rgba(color: ColorLike) -> Tuple[int, int, int, int]:
    if isinstance(color, pygame.Color):
        return color.r, color.g, color.b, color.a
    values = [float(c) for c in color]
    if len(values) == 3:
        values.append(1.0)
    if len(values) != 4:
        raise ValueError(f"a colour needs 3 or 4 components, got {len(values)}")
    r, g, b, a = (int(round(max(0.0, min(v, 1.0)) * 255)) for v in values)
    return r, g, b, a


class Font:
    """A font that draws strings onto surfaces and measures them."""

    def __init__(self, path: Optional[Union[str, Path]] = None, size: int = DEFAULT_SIZE) -> None:
        if not pygame.font.get_init():
            pygame.font.init()
        if path is not None:
            path = Path(path)
            if not path.is_file():
                raise FileNotFoundError(f"font file not found: {path}")
        self.path: Optional[Path] = path
        self.size = size
        self._font = pygame.font.Font(str(path) if path is not None else None, size)

    def print_message(
        self, target: pygame.Surface, x: int, y: int, message: str, color: ColorLike
    ) -> pygame.Rect:
        """Draw message with its top-left corner at (x, y); returns the area drawn."""
        r, g, b, a = _rgba(color)
        image = self._font.render(message, True, (r, g, b))
        if a < 255:
            image.set_alpha(a)
        return target.blit(image, (int(x), int(y)))

    def measure_string(self, message: str) -> Vector2:
        """Return the width and height the message takes when drawn."""
        return Vector2(self._font.size(message))