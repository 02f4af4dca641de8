"""Circle colliders, physics entities and layered collision dispatch."""

from __future__ import annotations

import enum

from .entity import GameEntity
from .vector import ZERO


class CollisionLayer(enum.IntEnum):
    """The layer an entity is registered on."""

    FRIENDLY = 0
    FRIENDLY_PROJECTILES = 1
    HOSTILE = 2
    HOSTILE_PROJECTILES = 3
    ITEM = 4


class CollisionFlag(enum.IntFlag):
    """Bit set of layers that a layer collides with."""

    NONE = 0x00
    FRIENDLY = 0x01
    FRIENDLY_PROJECTILES = 0x02
    HOSTILE = 0x04
    HOSTILE_PROJECTILES = 0x08
    ITEM = 0x10


class CircleCollider(GameEntity):
    """A circle of the given radius centred on the collider's position."""

    def __init__(self, radius: float, broad_phase: bool = False) -> None:
        super().__init__()
        self.radius = float(radius)
        self.broad_phase = broad_phase


def circle_vs_circle(c1: CircleCollider, c2: CircleCollider) -> bool:
    """True when the two circles overlap (touching does not count)."""
    distance = (c1.world_position() - c2.world_position()).magnitude()
    return distance < c1.radius + c2.radius


class PhysEntity(GameEntity):
    """An entity with a broad-phase circle that the physics manager can test."""

    def __init__(self, broad_phase_radius: float | None = None) -> None:
        super().__init__()
        self.id = 0
        self.tag = ""
        self.broad_phase_collider: CircleCollider | None = None
        if broad_phase_radius is not None:
            collider = CircleCollider(broad_phase_radius, broad_phase=True)
            collider.reparent(self)
            collider.position = ZERO
            self.broad_phase_collider = collider

    def ignore_collisions(self) -> bool:
        return False

    def check_collision(self, other: PhysEntity) -> bool:
        if self.ignore_collisions() or other.ignore_collisions():
            return False
        if self.broad_phase_collider is None or other.broad_phase_collider is None:
            return False
        return circle_vs_circle(self.broad_phase_collider, other.broad_phase_collider)

    def hit(self, other: PhysEntity) -> None:
        """Called when this entity collides with other."""

    def render(self) -> None:
        if self.broad_phase_collider is not None:
            self.broad_phase_collider.render()


class PhysicsManager:
    """Holds entities per layer and reports collisions between masked layers."""

    def __init__(self) -> None:
        self._layers: list[list[PhysEntity]] = [[] for _ in CollisionLayer]
        self._masks: list[CollisionFlag] = [CollisionFlag.NONE for _ in CollisionLayer]
        self._last_id = 0

    def layer_mask(self, layer: CollisionLayer) -> CollisionFlag:
        return self._masks[layer]

    def entities(self, layer: CollisionLayer) -> list[PhysEntity]:
        """A copy of the entities registered on a layer."""
        return list(self._layers[layer])

    def set_layer_collision_mask(self, layer: CollisionLayer, flags: CollisionFlag) -> None:
        self._masks[layer] = CollisionFlag(flags)

    def register_entity(self, entity: PhysEntity, layer: CollisionLayer) -> int:
        """Add entity to a layer, give it a fresh id and return that id."""
        self._layers[layer].append(entity)
        self._last_id += 1
        entity.id = self._last_id
        return self._last_id

    def unregister_entity(self, entity_id: int) -> None:
        """Remove the first entity with the given id; unknown ids are ignored."""
        for members in self._layers:
            for index, entity in enumerate(members):
                if entity.id == entity_id:
                    del members[index]
                    return

    def update(self) -> None:
        for i, mask in enumerate(self._masks):
            for j in range(len(self._layers)):
                if i > j or not mask & CollisionFlag(1 << j):
                    continue
                for first in list(self._layers[i]):
                    for second in list(self._layers[j]):
                        if first.check_collision(second):
                            first.hit(second)
                            second.hit(first)