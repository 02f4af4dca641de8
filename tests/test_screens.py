import pygame
import pytest

from barrelclimb.input import InputManager
from barrelclimb.screens import (
    BACKGROUND_MUSIC,
    OPENING_MUSIC,
    Screen,
    ScreenManager,
)


class FakeScreen:
    def __init__(self):
        self.updates = 0
        self.renders = 0
        self.reset_game = False

    def update(self):
        self.updates += 1

    def render(self):
        self.renders += 1


class FakeAudio:
    def __init__(self):
        self.music = []
        self.sfx = []

    def play_music(self, path, loops):
        self.music.append((path, loops))

    def play_sfx(self, path, loops=0):
        self.sfx.append((path, loops))


class Factory:
    def __init__(self):
        self.made = []

    def __call__(self):
        screen = FakeScreen()
        self.made.append(screen)
        return screen


@pytest.fixture
def setup():
    input_manager = InputManager()
    start = FakeScreen()
    factory = Factory()
    audio = FakeAudio()
    manager = ScreenManager(input_manager, start, factory, audio)
    return manager, input_manager, start, factory, audio


def press_start(input_manager):
    input_manager.update(keys={pygame.K_RETURN})


def test_starts_on_start_screen_with_opening_music(setup):
    manager, _, _, factory, audio = setup
    assert manager.current is Screen.START
    assert audio.music == [(OPENING_MUSIC, 1)]
    assert len(factory.made) == 1
    assert manager.play_screen is factory.made[0]


def test_update_on_start_screen_only_updates_start(setup):
    manager, _, start, factory, _ = setup
    manager.update()
    assert start.updates == 1
    assert factory.made[0].updates == 0
    assert manager.current is Screen.START


def test_return_switches_to_play_and_starts_music(setup):
    manager, input_manager, _, _, audio = setup
    press_start(input_manager)
    manager.update()
    assert manager.current is Screen.PLAY
    assert audio.sfx == [(BACKGROUND_MUSIC, -1)]


def test_held_return_from_previous_frame_does_not_switch(setup):
    manager, input_manager, _, _, _ = setup
    press_start(input_manager)
    input_manager.update_prev_input()
    manager.update()
    assert manager.current is Screen.START


def test_play_screen_updates_after_switch(setup):
    manager, input_manager, start, factory, _ = setup
    press_start(input_manager)
    manager.update()
    manager.update()
    assert factory.made[0].updates == 1
    assert start.updates == 1


def test_render_follows_current_screen(setup):
    manager, input_manager, start, factory, _ = setup
    manager.render()
    assert start.renders == 1
    assert factory.made[0].renders == 0
    press_start(input_manager)
    manager.update()
    manager.render()
    assert factory.made[0].renders == 1
    assert start.renders == 1


def test_reset_request_replaces_play_screen(setup):
    manager, _, _, factory, _ = setup
    old = manager.play_screen
    old.reset_game = True
    manager.update()
    assert len(factory.made) == 2
    assert manager.play_screen is factory.made[1]
    assert manager.play_screen is not old
    assert manager.play_screen.reset_game is False


def test_reset_level_builds_new_screen(setup):
    manager, _, _, factory, _ = setup
    manager.reset_level()
    assert manager.play_screen is factory.made[-1]
    assert len(factory.made) == 2


def test_works_without_audio():
    input_manager = InputManager()
    factory = Factory()
    manager = ScreenManager(input_manager, FakeScreen(), factory)
    press_start(input_manager)
    manager.update()
    assert manager.current is Screen.PLAY