"""Drawing of the game's objects, board decorations, HUD and level transition."""

from __future__ import annotations

import time
from enum import IntEnum

import pygame

from .assets import (
    DEATH_ASSETS,
    CarSprite,
    FrogSprite,
    LogSprite,
    SnakeSprite,
    SpecialSprite,
    Sprite,
    WallSprite,
    car_assets,
    char_assets,
    death_assets,
    draw_sprite,
    frog_assets,
    life_assets,
    log_assets,
    snake_assets,
    special_assets,
    turtle_assets,
)
from .config import (
    BIG_SIZE,
    NORMAL_SIZE,
    SHORT_SIZE,
    TOTAL_HEIGHT,
    TOTAL_WIDTH,
    WALL_SIZE,
    resize,
    row,
)
from .controls import flush_input
from .engine import TIMER_EVENT
from .text import Text

TIMER_SIZE = 5.0
TIMER_COLOR = (0, 150, 0)
BLACK = (0, 0, 0)

_DEATH_FRAME_DELAY = 0.1
# The dying animation uses the last frames of the death strip.
_FIRST_DEATH_FRAME = 3
_TURTLE_FRAME_OFFSET = 2
_WIPE_STEP = 8
_NEXT_LEVEL_TICKS = 100


class FrogState(IntEnum):
    ALIVE = 0
    DEATH = 1


def _blit(context, sprite: Sprite, dx: float, dy: float, flip: bool = False) -> None:
    draw_sprite(
        context.screen, context.sheet, sprite, dx, dy, resize(sprite.sw), resize(sprite.sh), flip
    )


def draw_dead_animation(context, dx: float, dy: float) -> None:
    """Play the frog's death frames in place, one every 0.2 seconds."""
    for sprite in death_assets()[_FIRST_DEATH_FRAME:DEATH_ASSETS]:
        time.sleep(_DEATH_FRAME_DELAY)
        _blit(context, sprite, dx, dy)
        context.flip()
        time.sleep(_DEATH_FRAME_DELAY)


def draw_car_v1(context, direction: int, dx: float, dy: float) -> None:
    sprite = CarSprite.CAR3_RIGHT if direction == 1 else CarSprite.CAR1_LEFT
    _blit(context, car_assets()[sprite], dx, dy)


def draw_car_v2(context, direction: int, dx: float, dy: float) -> None:
    sprite = CarSprite.CAR4_RIGHT if direction == 1 else CarSprite.CAR2_LEFT
    _blit(context, car_assets()[sprite], dx, dy)


def draw_log(context, size: int, dx: float, dy: float) -> None:
    """A log of ``size`` middle pieces between a start and an end piece."""
    logs = log_assets()
    dx -= resize(8)
    _blit(context, logs[LogSprite.START], dx, dy)
    middle = logs[LogSprite.MIDDLE]
    for piece in range(1, size + 1):
        _blit(context, middle, dx + piece * resize(middle.sw), dy)
    end = logs[LogSprite.END]
    _blit(context, end, dx + (max(size, 0) + 1) * resize(end.sw), dy)


def draw_snake(context, dx: float, dy: float, direction: int) -> None:
    _blit(context, snake_assets()[SnakeSprite.SNAKE1], dx, dy, flip=direction == 1)


def draw_bus(context, dx: float, dy: float) -> None:
    _blit(context, car_assets()[CarSprite.TRUCK_LEFT], dx, dy)


def draw_final_frog(context, dx: float, dy: float) -> None:
    """A frog resting in a home slot, centred on ``dx``."""
    sprite = special_assets()[SpecialSprite.HAPPY_FROG]
    _blit(context, sprite, dx - resize(sprite.sw / 2), dy)


def draw_frog(context, dx: float, dy: float, frame: int, state: int) -> None:
    """The player's frog, or death frame ``frame`` when ``state`` is DEATH."""
    state = FrogState(state)
    if state is FrogState.ALIVE:
        sprite = frog_assets()[FrogSprite.FROG_TOP]
    else:
        frames = death_assets()[_FIRST_DEATH_FRAME:]
        if not 0 <= frame < len(frames):
            raise ValueError(f"death frame out of range: {frame}")
        sprite = frames[frame]
    _blit(context, sprite, dx, dy + resize(sprite.sw / 2))


def draw_turtle_squad(context, state: int, dx: float, dy: float, direction: int) -> None:
    """Three turtles side by side showing animation ``state``."""
    sprites = turtle_assets()
    index = state + _TURTLE_FRAME_OFFSET
    if not 0 <= index < len(sprites):
        raise ValueError(f"turtle state out of range: {state}")
    sprite = sprites[index]
    for position in range(3):
        _blit(context, sprite, dx + position * resize(sprite.sw), dy, flip=direction == 1)


def draw_lifes(context, dx: float, dy: float, lifes: int) -> None:
    sprite = life_assets()[0]
    for position in range(lifes):
        _blit(context, sprite, dx + position * resize(sprite.sw), dy)


def draw_full_line(context, sprite: Sprite, y: float) -> None:
    """Tile ``sprite`` across the whole board width at height ``y``."""
    dw = resize(sprite.sw)
    tile = 0
    while tile * resize(NORMAL_SIZE) < TOTAL_WIDTH:
        _blit(context, sprite, tile * dw, y)
        tile += 1


def draw_finish_line(context, walls) -> None:
    """The top wall: alternating big and small wall pieces across the board."""
    big = walls[WallSprite.BIG]
    small = walls[WallSprite.SMALL]
    dwb = resize(big.sw)
    dws = resize(small.sw)
    piece = 0
    while piece * resize(BIG_SIZE + SHORT_SIZE) < TOTAL_WIDTH:
        left = (dws + dwb) * piece
        _blit(context, big, left, 0)
        _blit(context, small, left + dwb, 0)
        piece += 1


def draw_timer_bar(context, time_ms: int) -> None:
    """Green bar at the bottom whose length follows the time left."""
    left = WALL_SIZE
    top = TOTAL_HEIGHT - WALL_SIZE
    width = (time_ms * TIMER_SIZE) / 1000
    height = WALL_SIZE - SHORT_SIZE
    if width <= 0:
        return
    pygame.draw.rect(
        context.screen, TIMER_COLOR, pygame.Rect(left, round(top), round(width), height)
    )


def draw_score(context, score: str) -> None:
    label = Text.create(
        f"SCORE {score}", char_assets("y"), TOTAL_WIDTH * (3.0 / 4), row(16.5), 20, True
    )
    label.draw(context.screen, context.sheet)


def animation_level(context) -> None:
    """Wipe the screen to black and show NEXT LEVEL for a while."""
    flush_input(context)
    context.play_level()
    width = 0
    while width <= TOTAL_WIDTH:
        if context.wait_event().type == TIMER_EVENT:
            width += _WIPE_STEP
            pygame.draw.rect(context.screen, BLACK, pygame.Rect(0, 0, width, round(TOTAL_HEIGHT)))
            context.flip()
    label = Text.create(
        "NEXT LEVEL",
        char_assets("y"),
        TOTAL_WIDTH / 2,
        TOTAL_HEIGHT / 2 - resize(SHORT_SIZE),
        40,
        True,
    )
    ticks = 0
    while ticks < _NEXT_LEVEL_TICKS:
        if context.wait_event().type == TIMER_EVENT:
            ticks += 1
            label.draw(context.screen, context.sheet)
            context.flip()