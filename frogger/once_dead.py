"""Game-over screen where the player enters three initials for the score table."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable, List, Optional

import pygame

from .assets import char_assets
from .config import NORMAL_SIZE, TOTAL_HEIGHT, TOTAL_WIDTH, WALL_SIZE, resize
from .engine import TIMER_EVENT, WindowClosed
from .text import Text, twinkle

TWINKLE_TICKS = 8
INITIALS = 3


@dataclass
class InitialsEntry:
    """Three letters A-Z edited one at a time with a cursor."""

    characters: List[str] = field(default_factory=lambda: ["A"] * INITIALS)
    selected: int = 0

    def up(self) -> None:
        """Step the selected letter back, wrapping from A to Z."""
        current = self.characters[self.selected]
        self.characters[self.selected] = "Z" if current == "A" else chr(ord(current) - 1)

    def down(self) -> None:
        """Step the selected letter forward, wrapping from Z to A."""
        current = self.characters[self.selected]
        self.characters[self.selected] = "A" if current == "Z" else chr(ord(current) + 1)

    def left(self) -> None:
        self.selected = max(self.selected - 1, 0)

    def right(self) -> None:
        self.selected = min(self.selected + 1, INITIALS - 1)

    def initials(self) -> str:
        return "".join(self.characters)


def once_dead(
    context,
    score_text: str,
    points: int,
    save: Optional[Callable[[str, int], None]] = None,
) -> str:
    """Show the final score, let the player enter initials and return them.

    When Enter is pressed, ``save`` is called with the initials and ``points``.
    Closing the window shuts the context down and raises WindowClosed.
    """
    yellow_font = char_assets("y")
    red_font = char_assets("r")
    big = resize(WALL_SIZE)
    letter_size = resize(NORMAL_SIZE)
    center = TOTAL_WIDTH / 2
    score_label = Text.create("SCORE", yellow_font, center, TOTAL_HEIGHT / 4, big, True)
    points_label = Text.create(score_text, red_font, center, TOTAL_HEIGHT / 4 + big, big, True)

    entry = InitialsEntry()
    letters = [
        Text.create(ch, yellow_font, center + offset * letter_size, TOTAL_HEIGHT / 2, letter_size, True)
        for ch, offset in zip(entry.characters, (-1, 0, 1))
    ]

    def blink() -> None:
        for label in twinkle(letters, entry.selected, yellow_font, red_font):
            label.draw(context.screen, context.sheet)

    counter = 0
    context.play_lose_life()
    editing = True
    while editing:
        context.screen.fill((0, 0, 0))
        score_label.draw(context.screen, context.sheet)
        points_label.draw(context.screen, context.sheet)
        event = context.wait_event()
        if event.type == pygame.QUIT:
            context.close()
            raise WindowClosed()
        if event.type == TIMER_EVENT:
            counter += 1
            if counter == TWINKLE_TICKS:
                blink()
                counter = 0
        elif event.type == pygame.KEYDOWN:
            if event.key == pygame.K_UP:
                entry.up()
            elif event.key == pygame.K_DOWN:
                entry.down()
            elif event.key == pygame.K_RIGHT:
                entry.right()
                blink()
            elif event.key == pygame.K_LEFT:
                entry.left()
                blink()
            elif event.key == pygame.K_RETURN:
                editing = False
            for label, ch in zip(letters, entry.characters):
                label.update(ch)
        for label in letters:
            label.draw(context.screen, context.sheet)
        context.flip()

    initials = entry.initials()
    if save is not None:
        save(initials, points)
    return initials