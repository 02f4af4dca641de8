from barrelclimb.physics import CollisionFlag, CollisionLayer, PhysEntity, PhysicsManager
from barrelclimb.pickups import Item, Ladder
from barrelclimb.vector import Vector2


class Catcher(PhysEntity):
    def __init__(self, x):
        super().__init__(1.0)
        self.position = Vector2(x, 0.0)
        self.hits = []

    def hit(self, other):
        self.hits.append(other)


def test_item_registers_on_item_layer():
    physics = PhysicsManager()
    item = Item(physics)
    assert physics.entities(CollisionLayer.ITEM) == [item]
    assert item.id == 1


def test_ladder_registers_on_friendly_layer():
    physics = PhysicsManager()
    ladder = Ladder(physics)
    assert physics.entities(CollisionLayer.FRIENDLY) == [ladder]


def test_item_score_accumulates():
    item = Item()
    item.add_score(100)
    item.add_score(300)
    assert item.score == 400


def test_item_ignores_collisions_when_hidden():
    item = Item()
    assert not item.ignore_collisions()
    item.visible = False
    assert item.ignore_collisions()


def test_ladder_ignores_when_hidden_or_animating():
    ladder = Ladder()
    assert not ladder.ignore_collisions()
    ladder.animating = True
    assert ladder.ignore_collisions()
    ladder.animating = False
    ladder.visible = False
    assert ladder.ignore_collisions()


def test_ladder_score_accumulates():
    ladder = Ladder()
    ladder.add_score(5)
    ladder.add_score(-2)
    assert ladder.score == 3


def test_hammer_sprite_scale_and_position():
    item = Item()
    item.position = Vector2(100.0, 200.0)
    assert item.hammer.world_scale() == Vector2(3.5, 3.5)
    assert item.hammer.world_position() == Vector2(100.0, 200.0)
    assert item.hammer.width == 9 and item.hammer.height == 10


def test_friendly_entity_hits_item():
    physics = PhysicsManager()
    physics.set_layer_collision_mask(CollisionLayer.FRIENDLY, CollisionFlag.ITEM)
    item = Item(physics)
    item.tag = "Hammer"
    near = Catcher(10.0)
    far = Catcher(100.0)
    physics.register_entity(near, CollisionLayer.FRIENDLY)
    physics.register_entity(far, CollisionLayer.FRIENDLY)
    physics.update()
    assert [h.tag for h in near.hits] == ["Hammer"]
    assert far.hits == []


def test_hidden_item_is_not_hit():
    physics = PhysicsManager()
    physics.set_layer_collision_mask(CollisionLayer.FRIENDLY, CollisionFlag.ITEM)
    item = Item(physics)
    item.visible = False
    catcher = Catcher(0.0)
    physics.register_entity(catcher, CollisionLayer.FRIENDLY)
    physics.update()
    assert catcher.hits == []