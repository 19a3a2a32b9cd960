"""Main menu screen: title, background and the three main options."""

from __future__ import annotations

from enum import IntEnum

import pygame

from .assets import (
    FrogCharSprite,
    SpecialSprite,
    Sprite,
    char_assets,
    draw_sprite,
    frog_char_assets,
    special_assets,
    wall_assets,
)
from .config import NORMAL_SIZE, TOTAL_HEIGHT, TOTAL_WIDTH, WALL_SIZE, resize, row
from .drawing import draw_finish_line, draw_full_line
from .engine import RIVER_COLOR, TIMER_EVENT
from .text import Text, twinkle

FONT_TITLE_SIZE = 50
TWINKLE_TICKS = 5

_TITLE = (
    FrogCharSprite.F,
    FrogCharSprite.R,
    FrogCharSprite.O,
    FrogCharSprite.G,
    FrogCharSprite.G,
    FrogCharSprite.E,
    FrogCharSprite.R,
)


class MenuChoice(IntEnum):
    START = 1
    TOP = 2
    END = 3


_OPTIONS = (MenuChoice.START, MenuChoice.TOP, MenuChoice.END)


def set_title(context, title_font, x: float, y: float) -> None:
    """Draw the FROGGER title with its first letter at (x, y)."""
    for position, letter in enumerate(_TITLE):
        sprite: Sprite = title_font[letter]
        draw_sprite(
            context.screen,
            context.sheet,
            sprite,
            x + position * FONT_TITLE_SIZE,
            y,
            FONT_TITLE_SIZE,
            FONT_TITLE_SIZE,
        )


def set_background(context, walls, street: Sprite) -> None:
    """Draw the river, the finish wall and the two grass strips."""
    river_height = resize(WALL_SIZE + 7 * NORMAL_SIZE + 2)
    pygame.draw.rect(
        context.screen, RIVER_COLOR, pygame.Rect(0, 0, round(TOTAL_WIDTH), round(river_height))
    )
    draw_finish_line(context, walls)
    draw_full_line(context, street, row(8))
    draw_full_line(context, street, row(15))


def _redraw(context, labels, selected, font, selected_font) -> None:
    for label in twinkle(labels, selected, font, selected_font):
        label.draw(context.screen, context.sheet)
    context.flip()


def menu(context) -> MenuChoice:
    """Show the main menu and return the option the player picks.

    Closing the window counts as choosing END.
    """
    context.screen.fill((0, 0, 0))
    font = char_assets("y")
    selected_font = char_assets("r")
    set_background(context, wall_assets(), special_assets()[SpecialSprite.STREET])
    set_title(
        context, frog_char_assets(), TOTAL_WIDTH / 2.0 - 3.5 * FONT_TITLE_SIZE, TOTAL_HEIGHT / 6
    )
    center = TOTAL_WIDTH / 2
    size = resize(8)
    labels = [
        Text.create("Play", font, center, resize(WALL_SIZE + 9.5 * NORMAL_SIZE), size, True),
        Text.create(
            "Highscores", font, center, resize(WALL_SIZE + 10.75 * NORMAL_SIZE), size, True
        ),
        Text.create("Quit Game", font, center, resize(WALL_SIZE + 12.0 * NORMAL_SIZE), size, True),
    ]
    for label in labels:
        label.draw(context.screen, context.sheet)
    context.flip()

    selected = 0
    counter = 0
    selected_change = False
    while True:
        event = context.wait_event()
        if event.type == TIMER_EVENT:
            counter += 1
            if counter == TWINKLE_TICKS or selected_change:
                _redraw(context, labels, selected, font, selected_font)
                counter = 0
                selected_change = False
        elif event.type == pygame.MOUSEBUTTONDOWN:
            x, y = event.pos
            for label, choice in zip(labels, _OPTIONS):
                if label.contains(x, y):
                    return choice
        elif event.type == pygame.KEYDOWN:
            if event.key == pygame.K_RETURN:
                return _OPTIONS[selected]
            if event.key == pygame.K_DOWN:
                selected = min(selected + 1, len(_OPTIONS) - 1)
                selected_change = True
            elif event.key == pygame.K_UP:
                selected = max(selected - 1, 0)
                selected_change = True
        elif event.type == pygame.QUIT:
            return MenuChoice.END