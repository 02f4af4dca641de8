from types import SimpleNamespace

import pytest

from barrelclimb.input import InputManager
from barrelclimb.physics import PhysEntity, PhysicsManager
from barrelclimb.playfield import (
    BARREL_SPAWN,
    BarrelFire,
    PlayScreen,
    check_collision,
)
from barrelclimb.vector import Vector2


class FakeBarrel(PhysEntity):
    def __init__(self):
        super().__init__(12.0)
        self.visible = True
        self.updates = 0

    def update(self):
        self.updates += 1


@pytest.fixture
def timer():
    return SimpleNamespace(delta_time=0.0)


@pytest.fixture
def screen(timer):
    return PlayScreen(timer, InputManager(), PhysicsManager(), FakeBarrel)


def test_check_collision_overlap_and_touching():
    assert check_collision(0, 0, 10, 10, 5, 5, 10, 10)
    assert not check_collision(0, 0, 10, 10, 10, 0, 10, 10)
    assert not check_collision(0, 0, 10, 10, 0, 20, 5, 5)


def test_first_barrel_spawned(screen):
    assert len(screen.barrels) == 1
    barrel = screen.barrels[0]
    assert barrel.tag == "Enemy"
    assert barrel.world_position() == BARREL_SPAWN


def test_barrel_spawns_after_interval(screen, timer):
    timer.delta_time = 1.0
    screen.update()
    assert len(screen.barrels) == 1
    timer.delta_time = 2.0
    screen.update()
    assert len(screen.barrels) == 2
    assert screen.barrels[0].updates == 2


def test_smashing_barrel_scores_and_shows_popup(screen, timer):
    timer.delta_time = 0.5
    screen.player.destroy_barrel = True
    screen.update()
    assert screen.player.score == 300
    assert screen.player.destroy_barrel is False
    assert screen.popup_visible("300")
    assert not screen.popup_visible("100")
    assert screen.score_board.text == "300"

    timer.delta_time = 99.0
    screen.update()
    assert not screen.popup_visible("300")
    assert screen.active_popup is None


def test_barrel_reaching_drum_lights_fire(screen, timer):
    barrel = screen.barrels[0]
    barrel.position = Vector2(210.0, 860.0)
    timer.delta_time = 0.1
    screen.update()
    assert barrel.visible is False
    assert screen.fire == BarrelFire.IGNITING
    screen.render()
    assert screen.fire == BarrelFire.BURNING


def _airborne_over_barrel(screen):
    player = screen.player
    player.can_jump = False
    player.gravity = 0.0
    player.y_velocity = 0.0
    player.ground_level = 5000.0
    pos = player.world_position()
    screen.barrels[0].position = Vector2(pos.x + 20.0, pos.y)


def test_jumping_barrel_scores_after_cooldown(screen, timer):
    _airborne_over_barrel(screen)
    timer.delta_time = 1.0
    screen.update()
    assert screen.player.score == 100
    assert screen.popup_visible("100")


def test_no_jump_score_during_cooldown(screen, timer):
    _airborne_over_barrel(screen)
    timer.delta_time = 0.5
    screen.update()
    assert screen.player.score == 0
    assert screen.active_popup is None


def test_help_cycle(screen, timer):
    assert screen.toadstool_idle and not screen.play_help
    timer.delta_time = 200.0
    screen.update()
    assert screen.help_timer == 50
    assert screen.play_help and not screen.toadstool_idle
    timer.delta_time = 50.0
    screen.update()
    assert screen.help_timer == 250
    assert screen.play_help
    timer.delta_time = 1.0
    screen.update()
    assert screen.toadstool_idle and not screen.play_help


def test_hit_player_requests_reset(screen, timer):
    assert screen.reset_game is False
    screen.player.was_hit = True
    screen.update()
    assert screen.reset_game is True


def test_no_lives_hides_lives(screen, timer):
    screen.player.lives = 0
    screen.update()
    assert screen.render_lives is False


def test_items_are_hammers(screen):
    assert [item.tag for item in screen.items] == ["Hammer", "Hammer"]
    assert all(item.parent is screen for item in screen.items)