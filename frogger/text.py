"""Bitmap-font text: glyph lookup, placement, drawing and selectable labels."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, Sequence

import pygame

from .assets import Sprite, draw_sprite
from .config import resize

Font = Sequence[Sprite]

_LETTER_OFFSET = 10


def char_index(ch: str) -> int | None:
    """Index of ``ch`` in a glyph font, or None when it is drawn as a blank."""
    if "0" <= ch <= "9":
        return ord(ch) - ord("0")
    if "a" <= ch <= "z":
        return ord(ch) - ord("a") + _LETTER_OFFSET
    if "A" <= ch <= "Z":
        return ord(ch) - ord("A") + _LETTER_OFFSET
    return None


def format_score(points: int) -> str:
    """Three-digit, zero-padded score."""
    if not 0 <= points <= 999:
        raise ValueError(f"score out of range: {points}")
    return f"{points:03d}"


def glyph_placements(
    text: str, font: Font, x: float, y: float, font_size: float
) -> list[tuple[Sprite, float, float]]:
    """The glyph and screen position of every drawable character of ``text``."""
    placements = []
    for position, ch in enumerate(text):
        index = char_index(ch)
        if index is not None:
            placements.append((font[index], x + font_size * position, y))
    return placements


def sprite_to_text(
    target: pygame.Surface,
    sheet: pygame.Surface,
    text: str,
    font: Font,
    x: float,
    y: float,
    font_size: float,
) -> None:
    """Draw ``text`` with each glyph as a ``font_size`` square."""
    for sprite, dx, dy in glyph_placements(text, font, x, y, font_size):
        draw_sprite(target, sheet, sprite, dx, dy, font_size, font_size)


@dataclass
class Text:
    """A positioned label that can be drawn and clicked."""

    text: str
    font: Font
    x: float
    y: float
    font_size: int
    centered: bool = False
    was_clicked: bool = field(default=False)

    @classmethod
    def create(
        cls, text: str, font: Font, x: float, y: float, font_size: float, centered: bool
    ) -> "Text":
        """Build a label; a centered one is shifted left by half its width."""
        size = int(font_size)
        if centered:
            x -= (len(text) * size) // 2
        return cls(text=text, font=font, x=x, y=y, font_size=size, centered=bool(centered))

    def draw(self, target: pygame.Surface, sheet: pygame.Surface) -> None:
        sprite_to_text(target, sheet, self.text, self.font, self.x, self.y, self.font_size)

    def contains(self, x: float, y: float) -> bool:
        """Whether the point (x, y) falls on the label's hit box."""
        right = self.x + len(self.text) * resize(self.font_size)
        return self.x <= x <= right and self.y <= y <= self.y + self.font_size

    def update(self, new_text: str) -> None:
        self.text = new_text


def twinkle(
    texts: Iterable[Text], selected: int, normal_font: Font, selected_font: Font
) -> list[Text]:
    """Blink the selected label between fonts and reset the others.

    Returns the labels so the caller can redraw them.
    """
    labels = list(texts)
    for position, label in enumerate(labels):
        if position == selected:
            label.font = normal_font if label.font == selected_font else selected_font
        else:
            label.font = normal_font
    return labels