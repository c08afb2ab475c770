"""Loading images from disk and copying them onto a target surface."""

from __future__ import annotations

import struct
from pathlib import Path
from typing import Optional, Union

import pygame

_DDS_MAGIC = b"DDS "
_DDS_HEADER_SIZE = 128
_DDPF_ALPHAPIXELS = 0x1
_DDPF_FOURCC = 0x4


class TextureError(Exception):
    """Raised when a texture cannot be loaded."""


def _mask_byte(mask: int, bytes_per_pixel: int) -> int:
    for index in range(bytes_per_pixel):
        if mask == 0xFF << (8 * index):
            return index
    raise TextureError(f"unsupported DDS channel mask {mask:#x}")


def _load_dds(path: Path) -> pygame.Surface:
    data = path.read_bytes()
    if len(data) < _DDS_HEADER_SIZE or data[:4] != _DDS_MAGIC:
        raise TextureError(f"{path} is not a DDS file")
    height, width = struct.unpack_from("<2I", data, 12)
    _pf_size, pf_flags, _fourcc, bit_count, r_mask, g_mask, b_mask, a_mask = struct.unpack_from(
        "<8I", data, 76
    )
    if pf_flags & _DDPF_FOURCC:
        raise TextureError(f"{path}: compressed DDS textures are not supported")
    if bit_count not in (24, 32):
        raise TextureError(f"{path}: unsupported DDS bit depth {bit_count}")

    bpp = bit_count // 8
    size = width * height * bpp
    pixels = data[_DDS_HEADER_SIZE:_DDS_HEADER_SIZE + size]
    if len(pixels) < size:
        raise TextureError(f"{path}: truncated DDS pixel data")

    rgba = bytearray(b"\xff" * (width * height * 4))
    for channel, mask in enumerate((r_mask, g_mask, b_mask)):
        offset = _mask_byte(mask, bpp)
        rgba[channel::4] = pixels[offset::bpp]
    if a_mask and pf_flags & _DDPF_ALPHAPIXELS:
        offset = _mask_byte(a_mask, bpp)
        rgba[3::4] = pixels[offset::bpp]

    return pygame.image.frombuffer(bytes(rgba), (width, height), "RGBA").copy()


class Texture:
    """A 2D image that can be loaded from disk and drawn onto a surface."""

    def __init__(self) -> None:
        self.surface: Optional[pygame.Surface] = None
        self.path: Optional[Path] = None

    @property
    def loaded(self) -> bool:
        return self.surface is not None

    def load(self, path: Union[str, Path]) -> None:
        """Load an image file, replacing any texture already held."""
        if self.surface is not None:
            self.unload()
        self.path = Path(path)
        try:
            if self.path.suffix.lower() == ".dds":
                self.surface = _load_dds(self.path)
            else:
                self.surface = pygame.image.load(str(self.path))
        except (OSError, pygame.error) as exc:
            raise TextureError(f"could not load texture {self.path}: {exc}") from exc

    def unload(self) -> None:
        """Release the loaded image."""
        self.surface = None

    def draw(self, target: pygame.Surface, dest_x: int, dest_y: int) -> Optional[pygame.Rect]:
        """Copy the texture onto target at the given position, clipped to its edges.

        Returns the area of target that was drawn, or None if nothing was.
        """
        if self.surface is None:
            return None
        to_width, to_height = target.get_size()
        if dest_x >= to_width or dest_y >= to_height or dest_x <= -to_width or dest_y <= -to_height:
            return None

        width, height = self.surface.get_size()
        left = top = 0
        if dest_x < 0:
            left = -dest_x
            width += dest_x
        if dest_y < 0:
            top = -dest_y
            height += dest_y

        x = max(dest_x, 0)
        y = max(dest_y, 0)
        width = min(width, to_width - x)
        height = min(height, to_height - y)
        if width <= 0 or height <= 0:
            return None

        return target.blit(self.surface, (x, y), pygame.Rect(left, top, width, height))

    @property
    def width(self) -> int:
        return self.surface.get_width() if self.surface is not None else 0

    @property
    def height(self) -> int:
        return self.surface.get_height() if self.surface is not None else 0