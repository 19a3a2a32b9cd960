"""Translation of keyboard events into player actions."""

from __future__ import annotations

from collections import deque
from enum import IntEnum

import pygame

from .engine import WindowClosed


class Action(IntEnum):
    EMPTY = 0
    LEFT = 1
    RIGHT = 2
    PAUSE = 3
    UP = 4
    DOWN = 5


_KEY_ACTIONS = {
    pygame.K_w: Action.UP,
    pygame.K_UP: Action.UP,
    pygame.K_s: Action.DOWN,
    pygame.K_DOWN: Action.DOWN,
    pygame.K_a: Action.LEFT,
    pygame.K_LEFT: Action.LEFT,
    pygame.K_d: Action.RIGHT,
    pygame.K_RIGHT: Action.RIGHT,
    pygame.K_SPACE: Action.PAUSE,
}


def action_for_key(key: int) -> Action:
    """The action bound to ``key``, or EMPTY for unbound keys."""
    return _KEY_ACTIONS.get(key, Action.EMPTY)


def read_input(context) -> Action:
    """Consume queued events up to the first key press that maps to an action.

    Returns EMPTY when the queue runs out first. Closing the window shuts the
    context down and raises WindowClosed.
    """
    for event in context.pending_events():
        if event.type == pygame.QUIT:
            context.close()
            raise WindowClosed()
        if event.type == pygame.KEYDOWN:
            action = action_for_key(event.key)
            if action is not Action.EMPTY:
                return action
    return Action.EMPTY


def flush_input(context) -> None:
    """Discard every queued event."""
    deque(context.pending_events(), maxlen=0)