"""A row of digit sprites showing a score, right-aligned on the board's position."""

from __future__ import annotations

from .entity import GameEntity
from .texture import Texture
from .vector import Vector2

DEFAULT_COLOR = (230, 230, 230)
FONT_PATH = "emulogic.ttf"
FONT_SIZE = 32
DIGIT_SPACING = 32.0
ZERO_PADDING = 6


def score_digits(score: int) -> list[tuple[str, float]]:
    """Return (character, x offset) pairs laying out a score right to left.

    A zero score is shown as six zeros; any other score is shown as its
    decimal text. The last character sits at offset 0, earlier ones step
    left by the digit spacing.
    """
    if score == 0:
        return [("0", -DIGIT_SPACING * i) for i in range(ZERO_PADDING)]
    text = str(score)
    last = len(text) - 1
    return [(char, -DIGIT_SPACING * (last - i)) for i, char in enumerate(text)]


class Scoreboard(GameEntity):
    """Displays a score as one texture per character."""

    def __init__(self, color=DEFAULT_COLOR) -> None:
        super().__init__()
        self.color = tuple(color)
        self._graphics = None
        self._font = None
        self._digits: list[Texture] = []
        self._text = ""
        self._score = 0
        self.set_score(0)

    @property
    def text(self) -> str:
        """The characters currently shown, left to right."""
        return self._text

    @property
    def digits(self) -> list[Texture]:
        """The digit textures, left to right."""
        return list(self._digits)

    def attach_renderer(self, graphics, font) -> None:
        """Draw digits with graphics and font from now on, redrawing the current score."""
        self._graphics = graphics
        self._font = font
        self.set_score(self._score)

    def _make_digit(self, char: str) -> Texture:
        if self._graphics is not None and self._font is not None:
            surface = self._graphics.create_text_texture(self._font, char, self.color)
            return Texture(surface=surface, graphics=self._graphics)
        return Texture(width=FONT_SIZE, height=FONT_SIZE)

    def set_score(self, score: int) -> None:
        """Replace the shown digits with those of score."""
        for digit in self._digits:
            digit.reparent(None)
        self._digits.clear()
        self._score = score
        layout = score_digits(score)
        for char, offset in layout:
            digit = self._make_digit(char)
            digit.reparent(self)
            digit.position = Vector2(offset, 0.0)
            self._digits.append(digit)
        self._text = "".join(char for char, _ in layout)

    def render(self) -> None:
        for digit in self._digits:
            digit.render()