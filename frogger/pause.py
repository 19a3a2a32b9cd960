"""Pause screen with continue, restart and back-to-menu options."""

from __future__ import annotations

from enum import IntEnum

import pygame

from .assets import char_assets
from .config import TOTAL_WIDTH, row
from .engine import TIMER_EVENT, WindowClosed
from .text import Text, twinkle

TWINKLE_TICKS = 5
# The cursor may step one place past the last option; Enter then does nothing.
_MAX_SELECTED = 3


class PauseChoice(IntEnum):
    CONTINUE = 1
    RESTART = 2
    QUIT = 3


def pause(context) -> PauseChoice:
    """Show the pause screen and return the option picked.

    Closing the window shuts the context down and raises WindowClosed.
    """
    context.screen.fill((0, 0, 0))
    violet_font = char_assets("v")
    blue_font = char_assets("b")
    center = TOTAL_WIDTH / 2
    pause_text = Text.create("PAUSA", violet_font, center, row(2), 55, True)
    continue_text = Text.create("CONTINUE", blue_font, center, row(5), 30, True)
    restart_text = Text.create("RESTART", blue_font, center, row(7), 30, True)
    quit_text = Text.create("MENU", blue_font, center, row(9), 30, True)
    for label in (continue_text, restart_text, quit_text, pause_text):
        label.draw(context.screen, context.sheet)
    context.flip()

    options = (PauseChoice.CONTINUE, PauseChoice.RESTART, PauseChoice.QUIT)
    selected = 0
    counter = 0
    selected_change = False
    while True:
        event = context.wait_event()
        if event.type == pygame.MOUSEBUTTONDOWN:
            x, y = event.pos
            if continue_text.contains(x, y):
                return PauseChoice.CONTINUE
            if quit_text.contains(x, y):
                return PauseChoice.QUIT
            if restart_text.contains(x, y):
                return PauseChoice.RESTART
        elif event.type == TIMER_EVENT:
            counter += 1
            if counter == TWINKLE_TICKS or selected_change:
                labels = twinkle(
                    (continue_text, restart_text, quit_text), selected, blue_font, violet_font
                )
                for label in labels:
                    label.draw(context.screen, context.sheet)
                counter = 0
                selected_change = False
                context.flip()
        elif event.type == pygame.KEYDOWN:
            if event.key == pygame.K_RETURN:
                if selected < len(options):
                    return options[selected]
            elif event.key == pygame.K_DOWN:
                selected = min(selected + 1, _MAX_SELECTED)
                selected_change = True
            elif event.key == pygame.K_UP:
                selected = max(selected - 1, 0)
                selected_change = True
        elif event.type == pygame.QUIT:
            context.close()
            raise WindowClosed()