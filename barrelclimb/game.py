"""The main loop: timing, input, screens, physics and drawing."""

from __future__ import annotations

import argparse
import sys
import time

import pygame

from .entity import GameEntity
from .graphics import Graphics, GraphicsError
from .input import InputManager, MouseButton
from .physics import CollisionFlag, CollisionLayer, PhysEntity, PhysicsManager
from .playfield import PlayScreen
from .screens import ScreenManager
from .timer import Timer

FRAME_RATE = 60

_BARREL_RADIUS = 12.0

# Order of pygame.mouse.get_pressed(num_buttons=5).
_MOUSE_ORDER = (
    MouseButton.LEFT,
    MouseButton.MIDDLE,
    MouseButton.RIGHT,
    MouseButton.BACK,
    MouseButton.FORWARD,
)


def configure_physics(physics: PhysicsManager) -> None:
    """Set which layers collide with which."""
    physics.set_layer_collision_mask(
        CollisionLayer.FRIENDLY,
        CollisionFlag.HOSTILE | CollisionFlag.HOSTILE_PROJECTILES | CollisionFlag.ITEM,
    )
    physics.set_layer_collision_mask(
        CollisionLayer.FRIENDLY_PROJECTILES, CollisionFlag.HOSTILE
    )
    physics.set_layer_collision_mask(
        CollisionLayer.HOSTILE,
        CollisionFlag.FRIENDLY | CollisionFlag.FRIENDLY_PROJECTILES,
    )
    physics.set_layer_collision_mask(
        CollisionLayer.HOSTILE_PROJECTILES, CollisionFlag.FRIENDLY
    )


class GameManager:
    """Runs frames at a fixed rate until told to quit."""

    def __init__(
        self,
        graphics: Graphics,
        timer: Timer,
        input: InputManager,
        physics: PhysicsManager,
        screens,
        frame_rate: int = FRAME_RATE,
    ) -> None:
        if frame_rate <= 0:
            raise ValueError(f"frame rate must be positive, got {frame_rate}")
        self.graphics = graphics
        self.timer = timer
        self.input = input
        self.physics = physics
        self.screens = screens
        self.frame_rate = frame_rate
        self._held_keys: set[int] = set()
        self._quit = not graphics.initialized

    @property
    def running(self) -> bool:
        return not self._quit

    def quit(self) -> None:
        self._quit = True

    def _poll_events(self) -> None:
        if not pygame.display.get_init():
            return
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                self.quit()
            elif event.type == pygame.KEYDOWN:
                self._held_keys.add(event.key)
            elif event.type == pygame.KEYUP:
                self._held_keys.discard(event.key)

    def run(self, max_frames: int | None = None) -> int:
        """Run until quit (or max_frames frames) and return the frames drawn."""
        frames = 0
        frame_time = 1.0 / self.frame_rate
        while not self._quit and (max_frames is None or frames < max_frames):
            self.timer.update()
            self._poll_events()
            if self.timer.delta_time >= frame_time:
                self.update()
                self.late_update()
                self.render()
                self.timer.reset()
                frames += 1
            else:
                time.sleep(0.001)
        return frames

    def update(self) -> None:
        buttons: list[MouseButton] = []
        position = (0, 0)
        if pygame.display.get_init():
            pressed = pygame.mouse.get_pressed(num_buttons=5)
            buttons = [b for b, down in zip(_MOUSE_ORDER, pressed) if down]
            position = pygame.mouse.get_pos()
        self.input.update(self._held_keys, buttons, position)
        self.screens.update()

    def late_update(self) -> None:
        self.input.update_prev_input()
        self.physics.update()

    def render(self) -> None:
        self.graphics.clear_back_buffer()
        self.screens.render()
        self.graphics.render()


class _Barrel(PhysEntity):
    """A plain hostile barrel used when no rolling behaviour is supplied."""

    def __init__(self, physics: PhysicsManager) -> None:
        super().__init__(_BARREL_RADIUS)
        self.visible = True
        physics.register_entity(self, CollisionLayer.HOSTILE)

    def ignore_collisions(self) -> bool:
        return not self.visible


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(prog="barrelclimb", description="Climb the girders.")
    parser.add_argument("--headless", action="store_true", help="draw off-screen")
    parser.add_argument("--frames", type=int, default=None, help="stop after this many frames")
    args = parser.parse_args(argv)

    try:
        graphics = Graphics(headless=args.headless)
    except GraphicsError as exc:
        print(exc, file=sys.stderr)
        return 1

    with graphics:
        timer = Timer()
        input_manager = InputManager()
        physics = PhysicsManager()
        configure_physics(physics)
        screens = ScreenManager(
            input_manager,
            GameEntity(),
            lambda: PlayScreen(timer, input_manager, physics, lambda: _Barrel(physics)),
        )
        game = GameManager(graphics, timer, input_manager, physics, screens)
        game.run(args.frames)
    return 0


if __name__ == "__main__":
    sys.exit(main())