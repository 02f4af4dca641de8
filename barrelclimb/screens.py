"""Switching between the title screen and the play screen."""

from __future__ import annotations

import enum
from typing import Callable

import pygame

OPENING_MUSIC = "SFX/Opening.mp3"
BACKGROUND_MUSIC = "SFX/bacmusic.wav"
KEY_START = pygame.K_RETURN


class Screen(enum.Enum):
    """The screen currently shown."""

    START = "start"
    PLAY = "play"


class ScreenManager:
    """Shows the start screen until Return is pressed, then runs the play screen.

    Whenever the play screen asks for a reset, it is replaced with a fresh one.
    """

    def __init__(
        self,
        input,
        start_screen,
        play_screen_factory: Callable[[], object],
        audio=None,
    ) -> None:
        self._input = input
        self._audio = audio
        self._start_screen = start_screen
        self._play_screen_factory = play_screen_factory
        self._play_screen = play_screen_factory()
        self._current = Screen.START
        if audio is not None:
            audio.play_music(OPENING_MUSIC, 1)

    @property
    def current(self) -> Screen:
        return self._current

    @property
    def start_screen(self):
        return self._start_screen

    @property
    def play_screen(self):
        return self._play_screen

    def update(self) -> None:
        if self._current is Screen.START:
            self._start_screen.update()
            if self._input.key_pressed(KEY_START):
                self._current = Screen.PLAY
                if self._audio is not None:
                    self._audio.play_sfx(BACKGROUND_MUSIC, -1)
        else:
            self._play_screen.update()

        if self._play_screen.reset_game:
            self.reset_level()
            self._play_screen.reset_game = False

    def render(self) -> None:
        if self._current is Screen.START:
            self._start_screen.render()
        else:
            self._play_screen.render()

    def reset_level(self) -> None:
        """Throw away the play screen and build a new one."""
        self._play_screen = self._play_screen_factory()