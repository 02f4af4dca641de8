"""Drawable image entities."""

from __future__ import annotations

from dataclasses import dataclass

from .entity import GameEntity
from .vector import Vector2


@dataclass
class Rect:
    """An integer rectangle: top-left corner and size."""

    x: int = 0
    y: int = 0
    w: int = 0
    h: int = 0


class Texture(GameEntity):
    """An image (or a clipped part of one) drawn centred on the entity's position."""

    def __init__(
        self,
        width: int | None = None,
        height: int | None = None,
        clip: Rect | None = None,
        surface=None,
        graphics=None,
    ) -> None:
        super().__init__()
        if width is None or height is None:
            if clip is not None:
                width, height = clip.w, clip.h
            elif surface is not None:
                width, height = surface.get_size()
            else:
                raise ValueError("texture size needs width and height, a clip or a surface")
        self.width = int(width)
        self.height = int(height)
        self.clip = clip
        self.surface = surface
        self.graphics = graphics

    def scaled_dimensions(self) -> Vector2:
        scale = self.world_scale()
        return Vector2(scale.x * self.width, scale.y * self.height)

    def destination_rect(self) -> Rect:
        """Where the texture lands on screen, centred on its world position."""
        pos = self.world_position()
        scale = self.world_scale()
        return Rect(
            int(pos.x - self.width * scale.x * 0.5),
            int(pos.y - self.height * scale.y * 0.5),
            int(self.width * scale.x),
            int(self.height * scale.y),
        )

    def render(self) -> None:
        if self.graphics is None or self.surface is None:
            return
        self.graphics.draw_texture(
            self.surface, self.clip, self.destination_rect(), self.world_rotation()
        )