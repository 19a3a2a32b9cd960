"""Top-ten table screen."""

from __future__ import annotations

from itertools import islice
from typing import Iterable, Optional, Tuple

import pygame

from .assets import char_assets
from .config import NORMAL_SIZE, SHORT_SIZE, TOTAL_WIDTH, resize, row
from .engine import TIMER_EVENT, WindowClosed
from .text import Text, twinkle

TOP_10 = 10
TWINKLE_TICKS = 5
_SHOWN_CHARS = 3


def _table(players: Iterable[Tuple[Optional[str], Optional[str]]]):
    """Up to ten (name, score) pairs, stopping at the first missing name."""
    for name, score in islice(players, TOP_10):
        if name is None:
            return
        yield name[:_SHOWN_CHARS], (score or "")[:_SHOWN_CHARS]


def top_ten(context, players) -> None:
    """Show the best players and wait until the player goes back to the menu.

    ``players`` holds (name, score) string pairs, best first; names and scores
    are shown cut to three characters. Closing the window shuts the context
    down and raises WindowClosed.
    """
    context.screen.fill((0, 0, 0))
    yellow_font = char_assets("y")
    red_font = char_assets("r")
    left = TOTAL_WIDTH * (1.0 / 4)
    right = TOTAL_WIDTH * (3 / 4.0)
    small = resize(SHORT_SIZE)

    labels = []
    for position, (name, score) in enumerate(_table(players)):
        labels.append(Text.create(name, yellow_font, left, row(position + 4), small, True))
        labels.append(Text.create(score, red_font, right, row(position + 4), small, True))
    labels.append(Text.create("Nombre", yellow_font, left, row(3), small, True))
    labels.append(Text.create("Puntaje", red_font, right, row(3), small, True))
    labels.append(
        Text.create("Top 10", yellow_font, TOTAL_WIDTH / 2, row(1), resize(NORMAL_SIZE), True)
    )
    back_to_menu = Text.create(
        "BACK TO MENU", yellow_font, TOTAL_WIDTH / 2, row(15), resize(8), True
    )
    labels.append(back_to_menu)

    for label in labels:
        label.draw(context.screen, context.sheet)
    context.flip()

    counter = 0
    while True:
        event = context.wait_event()
        if event.type == pygame.MOUSEBUTTONDOWN:
            if back_to_menu.contains(*event.pos):
                return
        elif event.type == pygame.KEYDOWN:
            if event.key == pygame.K_RETURN:
                return
        elif event.type == TIMER_EVENT:
            counter += 1
            if counter == TWINKLE_TICKS:
                for label in twinkle((back_to_menu,), 0, yellow_font, red_font):
                    label.draw(context.screen, context.sheet)
                context.flip()
                counter = 0
        elif event.type == pygame.QUIT:
            context.close()
            raise WindowClosed()