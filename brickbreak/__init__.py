"""A brick-breaking arcade game on pygame, with 2D sprite, collision and frame-loop helpers."""

__version__ = "0.1.0"