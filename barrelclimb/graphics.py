"""Window, back buffer and drawing primitives."""

from __future__ import annotations

import os

import pygame

SCREEN_WIDTH = 1024
SCREEN_HEIGHT = 896
WINDOW_TITLE = "Galaga"

_WHITE = (255, 255, 255, 255)
_BLACK = (0, 0, 0, 255)


class GraphicsError(RuntimeError):
    """Raised when the display or an image cannot be set up."""


def _to_rect(rect) -> pygame.Rect:
    if isinstance(rect, pygame.Rect):
        return rect
    if isinstance(rect, (tuple, list)):
        return pygame.Rect(*rect)
    return pygame.Rect(rect.x, rect.y, rect.w, rect.h)


class Graphics:
    """Owns the window (or an off-screen buffer when headless) and draws to it."""

    SCREEN_WIDTH = SCREEN_WIDTH
    SCREEN_HEIGHT = SCREEN_HEIGHT

    def __init__(
        self,
        width: int = SCREEN_WIDTH,
        height: int = SCREEN_HEIGHT,
        title: str = WINDOW_TITLE,
        headless: bool = False,
    ) -> None:
        self.width = width
        self.height = height
        self.title = title
        self.headless = headless
        self._window = None
        try:
            if headless:
                self._target = pygame.Surface((width, height))
            else:
                pygame.display.init()
                self._window = pygame.display.set_mode((width, height))
                pygame.display.set_caption(title)
                self._target = self._window
            pygame.font.init()
        except pygame.error as exc:
            raise GraphicsError(f"Unable to initialize graphics: {exc}") from exc
        self._initialized = True
        self.clear_back_buffer()

    @property
    def initialized(self) -> bool:
        return self._initialized

    @property
    def surface(self) -> pygame.Surface:
        """The back buffer being drawn to."""
        return self._target

    def load_texture(self, path) -> pygame.Surface:
        try:
            surface = pygame.image.load(os.fspath(path))
        except (pygame.error, OSError) as exc:
            raise GraphicsError(f"Unable to load {path}: {exc}") from exc
        if self._window is not None:
            surface = surface.convert_alpha()
        return surface

    def create_text_texture(self, font: pygame.font.Font, text: str, color) -> pygame.Surface:
        try:
            return font.render(text, False, color)
        except pygame.error as exc:
            raise GraphicsError(f"Unable to render text: {exc}") from exc

    def draw_texture(self, surface: pygame.Surface, src_rect=None, dst_rect=None, angle: float = 0.0) -> None:
        """Copy surface (or its src_rect part) into dst_rect, rotated clockwise by angle degrees."""
        image = surface
        if src_rect is not None:
            try:
                image = surface.subsurface(_to_rect(src_rect))
            except (ValueError, pygame.error) as exc:
                raise GraphicsError(f"Source rectangle outside texture: {exc}") from exc
        dst = self._target.get_rect() if dst_rect is None else _to_rect(dst_rect)
        if dst.w <= 0 or dst.h <= 0:
            return
        if image.get_size() != dst.size:
            image = pygame.transform.scale(image, dst.size)
        if angle:
            image = pygame.transform.rotate(image, -angle)
            self._target.blit(image, image.get_rect(center=dst.center))
        else:
            self._target.blit(image, dst.topleft)

    def draw_line(self, start_x: float, start_y: float, end_x: float, end_y: float) -> None:
        pygame.draw.line(
            self._target,
            _WHITE,
            (int(start_x), int(start_y)),
            (int(end_x), int(end_y)),
        )

    def clear_back_buffer(self) -> None:
        self._target.fill(_BLACK)

    def render(self) -> None:
        if self._window is not None:
            pygame.display.flip()

    def close(self) -> None:
        if not self._initialized:
            return
        pygame.font.quit()
        if self._window is not None:
            pygame.display.quit()
            self._window = None
        self._initialized = False

    def __enter__(self) -> Graphics:
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()