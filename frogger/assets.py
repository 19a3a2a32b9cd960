"""Sprite-sheet coordinates for every drawable element."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from functools import lru_cache

import pygame

from .config import BIG_SIZE, GIGANT_SIZE, NORMAL_SIZE, SHORT_SIZE, WALL_SIZE

WALL_ASSETS = 2
WALL_ASSETS_Y = 188

FROG_ASSETS_X = 8
FROG_ASSETS_Y = 3

FROG_CHARS_ASSETS = 5
FROG_CHARS_ASSETS_Y = 232
DEATH_ASSETS = 7
DEATH_Y = 80

CAR_ASSETS = 5
CAR_Y = 116

SNAKE_ASSETS = 3
SNAKE_Y = 170

CROCODILE_ASSETS = 2
CROCODILE_Y = 134
CROCODILE_X = 55

TURTLE_ASSETS = 5
TURTLE_Y = 152

LOG_ASSETS = 3
LOG_Y = 134

OTTER_X = 91
OTTER_Y = 152
OTTER_ASSETS = 2

CHARS_ASSETS_X = 17
CHARS_ASSETS_Y = 3
CHARS_ASSETS = 36

LIFE_ASSET_Y = 215

SPECIAL_ASSETS = 6
SPECIAL_ASSETS_X = 45
SPECIAL_ASSETS_Y = 196

CHAR_ROWS_Y = {"w": 250, "y": 278, "r": 306, "v": 334, "b": 362}

# Sprites on the sheet are separated by a gap of this many pixels.
_GAP = 2


@dataclass(frozen=True)
class Sprite:
    """A rectangle on the sprite sheet."""

    sx: float
    sy: float
    sw: float
    sh: float

    @property
    def rect(self) -> pygame.Rect:
        return pygame.Rect(int(self.sx), int(self.sy), int(self.sw), int(self.sh))


class SpecialSprite(IntEnum):
    HAPPY_FROG = 0
    HAPPY_FROG_OPEN = 1
    FLY = 2
    CROCO_CLOSE = 3
    CROCO_OPEN = 4
    STREET = 5


class FrogSprite(IntEnum):
    FROG_TOP = 0
    FROG_JUMPING_TOP = 1
    FROG_TO_LEFT = 2
    FROG_JUMPING_LEFT = 3
    FROG_TO_BOTTOM = 4
    FROG_JUMPING_BOTTOM = 5
    FROG_TO_RIGHT = 6
    FROG_JUMPING_RIGHT = 7
    VIOLET_FROG_TOP = 8
    VIOLET_FROG_JUMPING_TOP = 9
    VIOLET_FROG_TO_LEFT = 10
    VIOLET_FROG_JUMPING_LEFT = 11
    VIOLET_FROG_TO_BOTTOM = 12
    VIOLET_FROG_JUMPING_BOTTOM = 13
    VIOLET_FROG_TO_RIGHT = 14
    VIOLET_FROG_JUMPING_RIGHT = 15
    RED_FROG_TOP = 16
    RED_FROG_JUMPING_TOP = 17
    RED_FROG_TO_LEFT = 18
    RED_FROG_JUMPING_LEFT = 19
    RED_FROG_TO_BOTTOM = 20
    RED_FROG_JUMPING_BOTTOM = 21
    RED_FROG_TO_RIGHT = 22
    RED_FROG_JUMPING_RIGHT = 23


class DeathSprite(IntEnum):
    DEATH_1 = 0
    DEATH_2 = 1
    DEATH_3 = 2
    DEATH_4 = 3
    DEATH_5 = 4
    DEATH_6 = 5
    DEATH_7 = 6
    DEATH_8 = 7


class CarSprite(IntEnum):
    CAR1_LEFT = 0
    CAR2_LEFT = 1
    CAR3_RIGHT = 2
    CAR4_RIGHT = 3
    TRUCK_LEFT = 4


class CrocodileSprite(IntEnum):
    CROCODILE = 0
    CROCODILE_OPEN = 1


class TurtleSprite(IntEnum):
    TURTLE1 = 0
    TURTLE2 = 1
    TURTLE3 = 2
    TURTLE_FADE1 = 3
    TURTLE_FADE2 = 4


class LogSprite(IntEnum):
    START = 0
    MIDDLE = 1
    END = 2


class OtterSprite(IntEnum):
    DOWN = 0
    UP = 1


class WallSprite(IntEnum):
    BIG = 0
    SMALL = 1


class FrogCharSprite(IntEnum):
    F = 0
    R = 1
    O = 2
    G = 3
    E = 4


class SnakeSprite(IntEnum):
    SNAKE1 = 0
    SNAKE2 = 1


def _strip(count: int, width: float, height: float, y: float, x0: float = 1) -> tuple[Sprite, ...]:
    """Sprites laid out left to right with the standard gap."""
    return tuple(
        Sprite(sx=x0 + i * (width + _GAP), sy=y, sw=width, sh=height) for i in range(count)
    )


@lru_cache(maxsize=None)
def frog_assets() -> tuple[Sprite, ...]:
    """All frog poses, row by row (normal, violet, red)."""
    step = NORMAL_SIZE + _GAP
    return tuple(
        Sprite(sx=j * step + 1, sy=i * step + 1, sw=NORMAL_SIZE, sh=NORMAL_SIZE)
        for i in range(FROG_ASSETS_Y)
        for j in range(FROG_ASSETS_X)
    )


@lru_cache(maxsize=None)
def death_assets() -> tuple[Sprite, ...]:
    return _strip(DEATH_ASSETS, NORMAL_SIZE, NORMAL_SIZE, DEATH_Y)


@lru_cache(maxsize=None)
def car_assets() -> tuple[Sprite, ...]:
    """Vehicles; the last one is the wide truck."""
    step = NORMAL_SIZE + _GAP
    return tuple(
        Sprite(
            sx=i * step + 1,
            sy=CAR_Y,
            sw=BIG_SIZE if i == CAR_ASSETS - 1 else NORMAL_SIZE,
            sh=NORMAL_SIZE,
        )
        for i in range(CAR_ASSETS)
    )


@lru_cache(maxsize=None)
def life_assets() -> tuple[Sprite, ...]:
    return (Sprite(sx=5 + NORMAL_SIZE * 2, sy=LIFE_ASSET_Y, sw=SHORT_SIZE, sh=SHORT_SIZE),)


@lru_cache(maxsize=None)
def snake_assets() -> tuple[Sprite, ...]:
    return _strip(SNAKE_ASSETS, BIG_SIZE, NORMAL_SIZE, SNAKE_Y)


@lru_cache(maxsize=None)
def crocodile_assets() -> tuple[Sprite, ...]:
    return _strip(CROCODILE_ASSETS, GIGANT_SIZE, NORMAL_SIZE, CROCODILE_Y, x0=CROCODILE_X)


@lru_cache(maxsize=None)
def turtle_assets() -> tuple[Sprite, ...]:
    return _strip(TURTLE_ASSETS, NORMAL_SIZE, NORMAL_SIZE, TURTLE_Y)


@lru_cache(maxsize=None)
def log_assets() -> tuple[Sprite, ...]:
    return _strip(LOG_ASSETS, NORMAL_SIZE, NORMAL_SIZE, LOG_Y)


@lru_cache(maxsize=None)
def otter_assets() -> tuple[Sprite, ...]:
    return _strip(OTTER_ASSETS, NORMAL_SIZE, NORMAL_SIZE, OTTER_Y, x0=OTTER_X)


@lru_cache(maxsize=None)
def char_assets(color: str) -> tuple[Sprite, ...]:
    """The 36 glyphs (digits then letters) of a font colour: w, y, r, v or b."""
    try:
        base_y = CHAR_ROWS_Y[color]
    except KeyError:
        raise ValueError(f"unknown font colour: {color!r}") from None
    step = SHORT_SIZE + 1
    return tuple(
        Sprite(
            sx=(index % CHARS_ASSETS_X) * step + 1,
            sy=base_y + (index // CHARS_ASSETS_X) * step,
            sw=SHORT_SIZE,
            sh=SHORT_SIZE,
        )
        for index in range(CHARS_ASSETS)
    )


@lru_cache(maxsize=None)
def frog_char_assets() -> tuple[Sprite, ...]:
    """Title letters F, R, O, G, E."""
    return _strip(FROG_CHARS_ASSETS, NORMAL_SIZE, NORMAL_SIZE, FROG_CHARS_ASSETS_Y)


@lru_cache(maxsize=None)
def wall_assets() -> tuple[Sprite, ...]:
    return (
        Sprite(sx=1, sy=WALL_ASSETS_Y, sw=BIG_SIZE, sh=WALL_SIZE),
        Sprite(sx=BIG_SIZE + 1 + _GAP, sy=WALL_ASSETS_Y, sw=SHORT_SIZE, sh=WALL_SIZE),
    )


@lru_cache(maxsize=None)
def special_assets() -> tuple[Sprite, ...]:
    return _strip(SPECIAL_ASSETS, NORMAL_SIZE, NORMAL_SIZE, SPECIAL_ASSETS_Y, x0=SPECIAL_ASSETS_X)


def draw_sprite(
    target: pygame.Surface,
    sheet: pygame.Surface,
    sprite: Sprite,
    dx: float,
    dy: float,
    dw: float,
    dh: float,
    flip_horizontal: bool = False,
) -> None:
    """Blit ``sprite`` from ``sheet`` onto ``target`` scaled to ``dw`` x ``dh``."""
    size = (round(dw), round(dh))
    if size[0] <= 0 or size[1] <= 0:
        return
    image = pygame.transform.scale(sheet.subsurface(sprite.rect), size)
    if flip_horizontal:
        image = pygame.transform.flip(image, True, False)
    target.blit(image, (round(dx), round(dy)))