"""A window with a frame loop: timing, clearing, drawing and event handling."""

from __future__ import annotations

from typing import Optional, Sequence

import pygame

from brickbreak.font import GREEN, Font
from brickbreak.timer import Timer

DEFAULT_WIDTH = 1024
DEFAULT_HEIGHT = 768
DEFAULT_CLEAR_COLOR = (0.0, 0.0, 0.3, 1.0)
_REFRESH_RATE = 60


class GraphicsError(Exception):
    """Raised when the window or its drawing surface cannot be set up."""


def _rgb(color: Sequence[float]) -> tuple:
    return tuple(int(round(max(0.0, min(float(c), 1.0)) * 255)) for c in tuple(color)[:3])


class GameWindow:
    """Owns the drawing surface and runs update and render once per frame.

    Subclasses override update and render to provide the scene.
    """

    def __init__(
        self,
        width: int = DEFAULT_WIDTH,
        height: int = DEFAULT_HEIGHT,
        *,
        font: Optional[Font] = None,
        timer: Optional[Timer] = None,
    ) -> None:
        self.client_width = width
        self.client_height = height
        self.screen: Optional[pygame.Surface] = None
        self.timer = timer if timer is not None else Timer()
        self.font = font if font is not None else Font()
        self.display_fps = True
        self.present_interval = 1
        self.clear_color = DEFAULT_CLEAR_COLOR
        self.quit_requested = False
        self._owns_display = False
        self._clock = pygame.time.Clock()

    def init_window(self, title: str) -> pygame.Surface:
        """Open a resizable window of the client size with the given title."""
        try:
            pygame.display.init()
            self.screen = pygame.display.set_mode(
                (self.client_width, self.client_height), pygame.RESIZABLE
            )
        except pygame.error as exc:
            raise GraphicsError(f"could not create window: {exc}") from exc
        self._owns_display = True
        pygame.display.set_caption(title)
        return self.screen

    def resize(self, width: int, height: int) -> None:
        """Change the client size and rebuild the drawing surface to match."""
        self.client_width = width
        self.client_height = height
        if self.screen is None:
            return
        try:
            if self._owns_display:
                self.screen = pygame.display.set_mode((width, height), pygame.RESIZABLE)
            else:
                self.screen = pygame.Surface((width, height), self.screen.get_flags(), self.screen)
        except pygame.error as exc:
            raise GraphicsError(f"could not resize surface: {exc}") from exc

    def process_event(self, event: pygame.event.Event) -> bool:
        """Handle a window event; returns True if it was handled."""
        if event.type == pygame.VIDEORESIZE:
            if self.screen is None:
                return False
            try:
                self.resize(event.w, event.h)
            except GraphicsError:
                self.quit_requested = True
            return True
        if event.type == pygame.QUIT:
            self.quit_requested = True
            return True
        return False

    def render_scene(self) -> None:
        """Run one frame: time it, update, clear, render and present."""
        if self.screen is None:
            raise GraphicsError("no surface to render to")
        self.timer.check_time()
        self.update(self.timer.delta_time)
        self.screen.fill(_rgb(self.clear_color))
        self.render()
        if self.display_fps:
            self.display_frames_per_second(5, 5)
        if self._owns_display:
            pygame.display.flip()
        if self.present_interval > 0:
            self._clock.tick(_REFRESH_RATE / self.present_interval)

    def message_loop(self) -> int:
        """Handle events and render frames until a quit is requested."""
        self.quit_requested = False
        while True:
            for event in pygame.event.get():
                self.process_event(event)
            if self.quit_requested:
                break
            self.render_scene()
        return 0

    def update(self, delta_time: float) -> None:
        """Advance the scene by delta_time seconds."""

    def render(self) -> None:
        """Draw the scene onto the screen."""

    def display_frames_per_second(self, x: int, y: int) -> pygame.Rect:
        """Draw the current frame rate at (x, y); returns the area drawn."""
        if self.screen is None:
            raise GraphicsError("no surface to render to")
        message = f"FPS.....{self.timer.frames_per_second}"
        return self.font.print_message(self.screen, x, y, message, GREEN)