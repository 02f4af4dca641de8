"""Scene-graph entities with position, rotation, scale and a parent."""

from __future__ import annotations

import enum

from .vector import ONE, Vector2, rotate_vector


class Space(enum.IntEnum):
    """Coordinate space for transforms."""

    LOCAL = 0
    WORLD = 1


class GameEntity:
    """A node in the scene graph whose transform is relative to its parent."""

    def __init__(self, x: float | Vector2 = 0.0, y: float = 0.0) -> None:
        if isinstance(x, Vector2):
            self._position = x
        else:
            self._position = Vector2(float(x), float(y))
        self._rotation = 0.0
        self._scale = ONE
        self.active = True
        self._parent: GameEntity | None = None
        self._children: list[GameEntity] = []

    @property
    def position(self) -> Vector2:
        """Position relative to the parent."""
        return self._position

    @position.setter
    def position(self, value: Vector2) -> None:
        self._position = value

    @property
    def rotation(self) -> float:
        """Rotation in degrees relative to the parent."""
        return self._rotation

    @rotation.setter
    def rotation(self, value: float) -> None:
        while value > 360.0:
            value -= 360.0
        while value < 0.0:
            value += 360.0
        self._rotation = value

    @property
    def scale(self) -> Vector2:
        """Scale relative to the parent."""
        return self._scale

    @scale.setter
    def scale(self, value: Vector2) -> None:
        self._scale = value

    @property
    def parent(self) -> GameEntity | None:
        return self._parent

    @property
    def children(self) -> list[GameEntity]:
        """Entities currently attached to this one, in attachment order."""
        return list(self._children)

    def world_position(self) -> Vector2:
        if self._parent is None:
            return self._position
        parent_scale = self._parent.world_scale()
        rotated = rotate_vector(self._position, self._parent.rotation)
        return self._parent.world_position() + Vector2(
            rotated.x * parent_scale.x, rotated.y * parent_scale.y
        )

    def world_rotation(self) -> float:
        if self._parent is None:
            return self._rotation
        return self._parent.world_rotation() + self._rotation

    def world_scale(self) -> Vector2:
        if self._parent is None:
            return self._scale
        parent_scale = self._parent.world_scale()
        return Vector2(parent_scale.x * self._scale.x, parent_scale.y * self._scale.y)

    def reparent(self, parent: GameEntity | None) -> None:
        """Attach to a new parent (or detach), keeping the world transform."""
        if parent is None:
            self._position = self.world_position()
            self._rotation = self.world_rotation()
            self._scale = self.world_scale()
        else:
            if self._parent is not None:
                self.reparent(None)
            parent_scale = parent.world_scale()
            relative = rotate_vector(
                self.world_position() - parent.world_position(),
                -parent.world_rotation(),
            )
            self._position = Vector2(
                relative.x / parent_scale.x, relative.y / parent_scale.y
            )
            self._rotation -= parent.world_rotation()
            self._scale = Vector2(
                self._scale.x / parent_scale.x, self._scale.y / parent_scale.y
            )
        if self._parent is not None and self in self._parent._children:
            self._parent._children.remove(self)
        self._parent = parent
        if parent is not None:
            parent._children.append(self)

    def translate(self, vec: Vector2, space: Space = Space.LOCAL) -> None:
        """Move by vec, either as given (world) or along the entity's rotation (local)."""
        if space == Space.WORLD:
            self._position = self._position + vec
        else:
            self._position = self._position + rotate_vector(vec, self.world_rotation())

    def rotate(self, amount: float) -> None:
        self.rotation = self._rotation + amount

    def update(self) -> None:
        """Advance the active attached entities by one frame."""
        for child in list(self._children):
            if child.active:
                child.update()

    def render(self) -> None:
        """Draw the entity."""