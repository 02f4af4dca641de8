"""The play screen: girders, rolling barrels, hammers and scoring."""

from __future__ import annotations

import enum
import logging
from typing import Callable

from .entity import GameEntity
from .graphics import SCREEN_HEIGHT, SCREEN_WIDTH
from .physics import PhysEntity, PhysicsManager
from .pickups import Item
from .player import Player
from .scoreboard import Scoreboard
from .texture import Rect, Texture
from .vector import Vector2

log = logging.getLogger(__name__)

BARREL_SPAWN_INTERVAL = 2.0
BARREL_JUMPED_DELAY = 1.0
POPUP_LENGTH = 100
HELP_PERIOD = 250
HELP_START = 50
HELP_END = 200
JUMP_SCORE = 100
SMASH_SCORE = 300
RESET_HEIGHT = 168

BARREL_SPAWN = Vector2(SCREEN_WIDTH * 0.3, SCREEN_HEIGHT * 0.31)
# The oil drum at the bottom left that lights up when a barrel reaches it.
OIL_DRUM = (200.0, 850.0, 16 * 3.5, 16 * 3.5)
BARREL_SIZE = 12.0

_SPRITE_SCALE = Vector2(3.5, 3.5)


def check_collision(x1, y1, w1, h1, x2, y2, w2, h2) -> bool:
    """True when two axis-aligned rectangles overlap (shared edges do not count)."""
    return x1 + w1 > x2 and x1 < x2 + w2 and y1 + h1 > y2 and y1 < y2 + h2


class BarrelFire(enum.IntEnum):
    """State of the oil drum at the bottom of the screen."""

    UNLIT = 1
    IGNITING = 2
    BURNING = 3


class PlayScreen(GameEntity):
    """Runs one level: spawns barrels, scores jumps and smashes, tracks resets."""

    def __init__(
        self,
        timer,
        input,
        physics: PhysicsManager | None,
        barrel_factory: Callable[[], PhysEntity],
    ) -> None:
        super().__init__()
        self._timer = timer
        self._input = input
        self._barrel_factory = barrel_factory
        self.barrels: list[PhysEntity] = []

        self._barrel_spawn_timer = 0.0
        self._barrel_jumped = False
        self._barrel_jumped_timer = 0.0
        self._timer_length = POPUP_LENGTH
        self._popup: str | None = None
        self.can_jump_score = True
        self.fire = BarrelFire.UNLIT
        self._help_timer = HELP_PERIOD
        self.toadstool_idle = True
        self.play_help = False
        self.reset_game = False
        self.render_lives = True

        self.player = Player(timer, input, physics)
        self.player.reparent(self)
        self.player.position = Vector2(SCREEN_WIDTH * 0.30, SCREEN_HEIGHT * 0.937)
        self.player.active = True

        self.items = [
            self._hammer(physics, Vector2(SCREEN_WIDTH * 0.72, SCREEN_HEIGHT * 0.75)),
            self._hammer(physics, Vector2(SCREEN_WIDTH * 0.19, SCREEN_HEIGHT * 0.39)),
        ]

        self.background = self._sprite(
            Rect(8, 176, 224, 256), Vector2(SCREEN_WIDTH * 0.5, SCREEN_HEIGHT * 0.5)
        )

        self.score_board = Scoreboard()
        self.score_board.position = Vector2(SCREEN_WIDTH * 0.295, SCREEN_HEIGHT * 0.0455)
        self.score_board.scale = Vector2(0.87, 0.87)

        self.high_score = Scoreboard((255, 255, 255))
        self.high_score.set_score(999999)
        self.high_score.reparent(self)
        self.high_score.position = Vector2(SCREEN_WIDTH * 0.5, SCREEN_HEIGHT * 0.045)
        self.high_score.scale = Vector2(0.93, 0.93)

        self.lives_sprite = Texture(clip=Rect(553, 94, 7, 8))
        self.lives_sprite.position = Vector2(SCREEN_WIDTH * 0.160, SCREEN_HEIGHT * 0.11)
        self.lives_sprite.scale = _SPRITE_SCALE

        self.barrel_stack = self._sprite(
            Rect(210, 122, 20, 32), Vector2(SCREEN_WIDTH * 0.150, SCREEN_HEIGHT * 0.265)
        )
        self.donkey_kong = self._sprite(
            Rect(173, 42, 43, 32), Vector2(SCREEN_WIDTH * 0.260, SCREEN_HEIGHT * 0.265)
        )

        popup_offset = Vector2(0.0, SCREEN_HEIGHT * -0.06)
        self.popups = {
            "100": self._sprite(Rect(433, 94, 15, 7), popup_offset, self.player),
            "300": self._sprite(Rect(481, 94, 15, 7), popup_offset, self.player),
        }

        self.bottom_barrel = self._sprite(
            Rect(504, 122, 24, 32), Vector2(SCREEN_WIDTH * 0.213, SCREEN_HEIGHT * 0.907)
        )
        self.bottom_barrel_ignite = self._sprite(
            Rect(452, 122, 24, 32), Vector2(SCREEN_WIDTH * 0.20, SCREEN_HEIGHT * 0.907)
        )
        self.bottom_barrel_flaming = self._sprite(
            Rect(404, 122, 24, 32), Vector2(SCREEN_WIDTH * 0.20, SCREEN_HEIGHT * 0.907)
        )
        self.toadstool = self._sprite(
            Rect(103, 89, 16, 22), Vector2(SCREEN_WIDTH * 0.45, SCREEN_HEIGHT * 0.175)
        )
        self.toadstool_help = self._sprite(
            Rect(103, 89, 16, 22), Vector2(SCREEN_WIDTH * 0.45, SCREEN_HEIGHT * 0.175)
        )
        self.toadstool_help.scale = Vector2(3.5, 3.05)
        self.help_sign = self._sprite(
            Rect(224, 94, 23, 8), Vector2(SCREEN_WIDTH * 0.53, SCREEN_HEIGHT * 0.12)
        )

        self.spawn_barrel()

    def _sprite(self, clip: Rect, position: Vector2, parent: GameEntity | None = None) -> Texture:
        sprite = Texture(clip=clip)
        sprite.reparent(parent if parent is not None else self)
        sprite.position = position
        sprite.scale = _SPRITE_SCALE
        return sprite

    def _hammer(self, physics: PhysicsManager | None, position: Vector2) -> Item:
        item = Item(physics)
        item.reparent(self)
        item.position = position
        item.tag = "Hammer"
        return item

    @property
    def help_timer(self) -> int:
        return self._help_timer

    @property
    def active_popup(self) -> str | None:
        """The name of the score popup being shown, if any."""
        return self._popup

    def spawn_barrel(self) -> PhysEntity:
        """Create a barrel at the top of the girders and return it."""
        barrel = self._barrel_factory()
        barrel.reparent(self)
        barrel.position = BARREL_SPAWN
        barrel.tag = "Enemy"
        self.barrels.append(barrel)
        return barrel

    def start_texture_timer(self, name: str) -> None:
        """Count down the popup called name, clearing it when time runs out."""
        if self._popup != name:
            return
        self._timer_length = int(self._timer_length - self._timer.delta_time)
        if self._timer_length <= 0:
            self._timer_length = POPUP_LENGTH
            self._popup = None

    def popup_visible(self, name: str) -> bool:
        return self._popup == name and self._timer_length != 0

    def update(self) -> None:
        dt = self._timer.delta_time

        for item in self.items:
            item.update()

        self._barrel_spawn_timer += dt
        if self._barrel_spawn_timer >= BARREL_SPAWN_INTERVAL:
            self.spawn_barrel()
            self._barrel_spawn_timer = 0.0

        for barrel in list(self.barrels):
            barrel.update()

        # The jump cooldown is re-armed every frame and only lapses once the
        # delay has accumulated, leaving a one-frame scoring window.
        self._barrel_jumped = True
        self._barrel_jumped_timer += dt
        if self._barrel_jumped_timer >= BARREL_JUMPED_DELAY:
            self._barrel_jumped = False
            self._barrel_jumped_timer = 0.0

        player = self.player
        player.update()
        self.score_board.set_score(player.score)

        pos = player.world_position()
        log.debug("player at (%s, %s)", pos.x, pos.y)

        for barrel in self.barrels:
            bpos = barrel.world_position()
            ppos = player.world_position()
            if check_collision(
                ppos.x + 16, ppos.y - 16, ppos.x + 32, ppos.y - 16,
                bpos.x, bpos.y, BARREL_SIZE, BARREL_SIZE,
            ):
                if not player.can_jump and not self._barrel_jumped and self.can_jump_score:
                    player.add_score(JUMP_SCORE)
                    self._barrel_jumped = True
                    self._popup = "100"

        if player.destroy_barrel:
            player.add_score(SMASH_SCORE)
            self._popup = "300"
            player.destroy_barrel = False

        for barrel in self.barrels:
            bpos = barrel.world_position()
            if check_collision(*OIL_DRUM, bpos.x, bpos.y, BARREL_SIZE, BARREL_SIZE):
                barrel.visible = False
                self.fire = BarrelFire.IGNITING

        self.start_texture_timer("100")
        self.start_texture_timer("300")

        self._help_timer = int(self._help_timer - dt)
        if self._help_timer <= 0:
            self._help_timer = HELP_PERIOD
        elif self._help_timer <= HELP_START:
            self.play_help = True
            self.toadstool_idle = False
        elif self._help_timer > HELP_END:
            self.play_help = False
            self.toadstool_idle = True

        if player.world_position().y <= RESET_HEIGHT or player.was_hit:
            self.reset_game = True

        if player.lives <= 0:
            self.render_lives = False

    def render(self) -> None:
        self.background.render()
        self.score_board.render()
        for item in self.items:
            item.render()
        for barrel in self.barrels:
            barrel.render()
        self.player.render()
        self.barrel_stack.render()
        self.donkey_kong.render()
        self.high_score.render()

        for name, sprite in self.popups.items():
            if self.popup_visible(name):
                sprite.render()

        if self.toadstool_idle:
            self.toadstool.render()
        if self.play_help:
            self.toadstool_help.render()
            self.help_sign.render()
        if self.render_lives:
            self.lives_sprite.render()

        if self.fire == BarrelFire.UNLIT:
            self.bottom_barrel.render()
        elif self.fire == BarrelFire.IGNITING:
            self.bottom_barrel_ignite.render()
            self.fire = BarrelFire.BURNING
        else:
            self.bottom_barrel_flaming.render()