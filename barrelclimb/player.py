"""The player character: walking, climbing, jumping and swinging the hammer."""

from __future__ import annotations

import logging

import pygame

from .entity import Space
from .physics import CollisionLayer, PhysEntity, PhysicsManager
from .texture import Rect, Texture
from .vector import RIGHT, UP, ZERO, Vector2

log = logging.getLogger(__name__)

SCREEN_WIDTH = 1024
SCREEN_HEIGHT = 896

KEY_CLIMB_UP = pygame.K_w
KEY_CLIMB_DOWN = pygame.K_s
KEY_RIGHT = pygame.K_d
KEY_LEFT = pygame.K_a
KEY_JUMP = pygame.K_SPACE

WALK_SOUND = "SFX/Sequence 01.wav"
SMASH_SOUND = "SFX/hammerSmash.wav"
DEATH_SOUND = "SFX/death.wav"

MOVE_SPEED = 150.0
GRAVITY = 500.0
JUMP_VELOCITY = -250.0
SLOPE_SPEED = 9.0
HAMMER_DURATION = 10.0
SPRITE_SIZE = 16

_BOX_SIZE = Vector2(45.0, 58.0)
_BOX_RADIUS = (_BOX_SIZE * 0.5).magnitude()
_SPRITE_SCALE = Vector2(3.5, 3.5)

_WIDE_BOUNDS = Vector2(140.0, 825.0)
_NARROW_BOUNDS = Vector2(197.0, 883.0)

# Ladder zones as (x, y, width, height) in screen coordinates.
LADDERS: tuple[tuple[float, float, float, float], ...] = tuple(
    ((x * 3.5) + 148, y * 3.5, 8 * 3.5, h * 3.5)
    for x, y, h in (
        (184, 216, 27),
        (96, 179, 35),
        (32, 183, 27),
        (112, 146, 35),
        (184, 150, 27),
        (72, 115, 31),
        (32, 117, 27),
        (184, 84, 27),
        (128, 53, 31),
    )
)


class Player(PhysEntity):
    """The player, registered on the friendly collision layer."""

    def __init__(
        self,
        timer,
        input,
        physics: PhysicsManager | None = None,
        audio=None,
    ) -> None:
        super().__init__(_BOX_RADIUS)
        self._timer = timer
        self._input = input
        self._audio = audio

        self.visible = True
        self._animating = False
        self._animating_right = False
        self.idle_left = False
        self.idle_right = True
        self.climbing = False
        self.stop_climbing = False
        self.was_hit = False

        self.can_climb = False
        self.can_pick_up = True

        self.incline = False
        self.decline = False

        self.gravity = GRAVITY
        self.can_jump = True
        self.y_velocity = 0.0

        self.hammering = False
        self.hammering_right = False
        self.hammering_left = False
        self.hammer_timer = HAMMER_DURATION

        self.score = 0
        self.lives = 1
        self.destroy_barrel = False

        self.move_speed = MOVE_SPEED
        self.move_bounds = Vector2(140.0, 883.0)

        self.idle_sprite = self._sprite(Rect(0, 0, 16, 16))
        self.idle_right_sprite = self._sprite(Rect(0, 0, 16, 16))
        self.running_sprite = self._sprite(Rect(0, 0, 16, 16))
        self.running_right_sprite = self._sprite(Rect(0, 0, 16, 16))
        self.climbing_sprite = self._sprite(Rect(112, 10, 16, 16))
        self.stop_climbing_sprite = self._sprite(Rect(153, 10, 16, 16))
        self.hammer_left_sprite = self._sprite(
            Rect(400, 0, 32, 26),
            Vector2(SCREEN_WIDTH * -0.026, SCREEN_HEIGHT * -0.02),
        )
        self.hammer_right_sprite = self._sprite(
            Rect(340, 0, 32, 26),
            Vector2(SCREEN_WIDTH * 0.026, SCREEN_HEIGHT * -0.02),
        )
        self.death_sprite = self._sprite(Rect(290, 1, 16, 16))
        self.jump_sprite = self._sprite(Rect(263, 20, 16, 15))

        self.ground_level = self.world_position().y

        if physics is not None:
            physics.register_entity(self, CollisionLayer.FRIENDLY)

    def _sprite(self, clip: Rect, offset: Vector2 = ZERO) -> Texture:
        sprite = Texture(clip=clip)
        sprite.scale = _SPRITE_SCALE
        sprite.reparent(self)
        sprite.position = offset
        return sprite

    def _play(self, sound: str) -> None:
        if self._audio is not None:
            self._audio.play_sfx(sound)

    def _set_y(self, y: float) -> None:
        self.position = Vector2(self.world_position().x, y)

    @property
    def is_animating(self) -> bool:
        return self._animating

    def add_score(self, change: int) -> None:
        self.score += change

    def ignore_collisions(self) -> bool:
        return not self.visible

    def hit(self, other: PhysEntity) -> None:
        if other.tag == "Hammer" and self.can_pick_up:
            other.active = False
            self.hammering = True
            self.can_pick_up = False

        if other.tag == "Enemy":
            if self.hammering:
                if self.can_jump:
                    self.destroy_barrel = True
                    self._play(SMASH_SOUND)
            else:
                self._play(DEATH_SOUND)
                self.was_hit = True
                self.lives -= 1

    def _handle_movement(self) -> None:
        dt = self._timer.delta_time
        keys = self._input

        if self.can_climb:
            if keys.key_down(KEY_CLIMB_UP):
                self.translate(-UP * (self.move_speed * dt), Space.WORLD)
                self._play(WALK_SOUND)
                self.climbing = True
            elif keys.key_down(KEY_CLIMB_DOWN):
                self.translate(UP * (self.move_speed * dt), Space.WORLD)
                self._play(WALK_SOUND)
                self.climbing = True
        else:
            self.climbing = False

        if not self.climbing:
            if keys.key_down(KEY_RIGHT):
                self.translate(RIGHT * (self.move_speed * dt), Space.WORLD)
                self._play(WALK_SOUND)
                if self.incline:
                    self._set_y(self.world_position().y - SLOPE_SPEED * dt)
                if self.decline:
                    self._set_y(self.world_position().y + SLOPE_SPEED * dt)
                if self.can_jump:
                    self._animating = False
                    self._animating_right = True
                    self.idle_left = False
                    self.idle_right = True
                if self.hammering:
                    self._animating = False
                    self._animating_right = False
                    self.hammering_left = False
                    self.hammering_right = True
            elif keys.key_down(KEY_LEFT):
                self.translate(-RIGHT * (self.move_speed * dt), Space.WORLD)
                self._play(WALK_SOUND)
                if self.incline:
                    self._set_y(self.world_position().y + SLOPE_SPEED * dt)
                if self.decline:
                    self._set_y(self.world_position().y - SLOPE_SPEED * dt)
                if self.can_jump:
                    self._animating_right = False
                    self._animating = True
                    self.idle_right = False
                    self.idle_left = True
                if self.hammering:
                    self._animating = False
                    self._animating_right = False
                    self.hammering_right = False
                    self.hammering_left = True
            else:
                self._animating = False
                self._animating_right = False

            if keys.key_down(KEY_JUMP) and self.can_jump:
                self.y_velocity = JUMP_VELOCITY
                self.ground_level = self.world_position().y
                self.can_jump = False

        pos = self.position
        x = min(max(pos.x, self.move_bounds.x), self.move_bounds.y)
        self.position = Vector2(x, pos.y)

    def _update_bounds(self) -> None:
        pos = self.world_position()
        x, y = pos.x, pos.y
        if y < 278 and x != 640:
            self.move_bounds = _WIDE_BOUNDS
            platform = 6
        elif 278 <= y < 395:
            self.move_bounds = _NARROW_BOUNDS
            platform = 5
        elif 395 <= y < 510:
            self.move_bounds = _WIDE_BOUNDS
            platform = 4
        elif 510 <= y < 629:
            self.move_bounds = _NARROW_BOUNDS
            platform = 3
        elif 629 <= y < 741:
            self.move_bounds = _WIDE_BOUNDS
            platform = 2
        else:
            platform = 1
        log.debug("platform %d", platform)

    def _update_slope(self) -> None:
        pos = self.world_position()
        x, y = pos.x, pos.y
        if y < 278 and x < 640:
            slope = (False, False)
        elif y < 278 and x > 640:
            slope = (False, True)
        elif y < 395 and x < 870:
            slope = (True, False)
        elif y < 510 and x > 16 + 148:
            slope = (False, True)
        elif y < 629 and x < 870:
            slope = (True, False)
        elif y < 741 and x > 16 + 148:
            slope = (False, True)
        elif (112 * 3.5) + 148 < x < 870 and y > 741:
            slope = (True, False)
        else:
            slope = (False, False)
        self.incline, self.decline = slope

    def update(self) -> None:
        dt = self._timer.delta_time

        if self.active:
            self._handle_movement()
            for sprite in (
                self.running_sprite,
                self.running_right_sprite,
                self.climbing_sprite,
                self.stop_climbing_sprite,
                self.hammer_left_sprite,
                self.hammer_right_sprite,
            ):
                sprite.update()
            if self.was_hit:
                self.death_sprite.update()
            if not self.can_jump:
                self.jump_sprite.update()

        self.can_climb = any(self.check_collision(*zone) for zone in LADDERS)

        if not self.can_jump:
            self.y_velocity += self.gravity * dt
            pos = self.world_position()
            self._set_y(pos.y + self.y_velocity * dt)
            if self.world_position().y > self.ground_level:
                self.y_velocity = 0.0
                self.can_jump = True
                self._set_y(self.ground_level)

        self._update_bounds()
        self._update_slope()

        if self.hammering:
            self.can_climb = False
            self.hammer_timer -= dt
            if self.hammer_timer <= 0:
                self.hammering = False
                self.hammer_timer = HAMMER_DURATION
                self.hammering_left = False
                self.hammering_right = False
                self.can_climb = True
                self.can_pick_up = True

        log.debug("score %d", self.score)

    def _current_sprite(self) -> Texture | None:
        if self._animating:
            return self.running_sprite
        if self._animating_right:
            return self.running_right_sprite
        if self.climbing:
            return self.climbing_sprite
        if self.stop_climbing:
            return self.stop_climbing_sprite
        if self.hammering_left:
            return self.hammer_left_sprite
        if self.hammering_right:
            return self.hammer_right_sprite
        if self.was_hit:
            return self.death_sprite
        if not self.can_jump:
            return self.jump_sprite
        if self.idle_left:
            return self.idle_sprite
        if self.idle_right:
            return self.idle_right_sprite
        return None

    def render(self) -> None:
        if self.visible:
            sprite = self._current_sprite()
            if sprite is not None:
                sprite.render()
        super().render()

    def check_collision(self, x: float, y: float, w: float, h: float) -> bool:
        """True when the player's sprite box overlaps the rectangle (x, y, w, h)."""
        pos = self.world_position()
        p_left = pos.x
        p_right = p_left + self.running_right_sprite.width
        p_top = pos.y
        p_bottom = p_top + self.running_right_sprite.height
        return p_right > x and p_left < x + w and p_bottom > y and p_top < y + h