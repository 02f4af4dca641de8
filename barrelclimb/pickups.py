"""Hammer pick-ups and ladders."""

from __future__ import annotations

from .physics import CollisionLayer, PhysEntity, PhysicsManager
from .texture import Rect, Texture
from .vector import ZERO, Vector2

_BOX_SIZE = Vector2(32.0, 34.0)
_BOX_RADIUS = (_BOX_SIZE * 0.5).magnitude()
_SPRITE_SCALE = Vector2(3.5, 3.5)


class Item(PhysEntity):
    """A hammer lying on a girder, waiting to be picked up."""

    def __init__(self, physics: PhysicsManager | None = None) -> None:
        super().__init__(_BOX_RADIUS)
        self.visible = True
        self._animating = False
        self.score = 0

        self.hammer = Texture(clip=Rect(340, 96, 9, 10))
        self.hammer.scale = _SPRITE_SCALE
        self.hammer.reparent(self)
        self.hammer.position = ZERO

        if physics is not None:
            physics.register_entity(self, CollisionLayer.ITEM)

    @property
    def is_animating(self) -> bool:
        return self._animating

    def add_score(self, change: int) -> None:
        self.score += change

    def ignore_collisions(self) -> bool:
        return not self.visible

    def update(self) -> None:
        if self.active:
            self.hammer.update()

    def render(self) -> None:
        if self.active and self.visible:
            self.hammer.render()
        super().render()


class Ladder(PhysEntity):
    """A climbable ladder on the friendly layer."""

    def __init__(self, physics: PhysicsManager | None = None) -> None:
        super().__init__(_BOX_RADIUS)
        self.visible = True
        self.animating = False
        self.score = 0
        if physics is not None:
            physics.register_entity(self, CollisionLayer.FRIENDLY)

    @property
    def is_animating(self) -> bool:
        return self.animating

    def add_score(self, change: int) -> None:
        self.score += change

    def ignore_collisions(self) -> bool:
        return not self.visible or self.animating