import itertools

import pygame
import pytest

from frogger.assets import (
    CarSprite,
    LogSprite,
    SnakeSprite,
    SpecialSprite,
    WallSprite,
    car_assets,
    char_assets,
    death_assets,
    frog_assets,
    life_assets,
    log_assets,
    snake_assets,
    special_assets,
    turtle_assets,
    wall_assets,
)
from frogger.config import NORMAL_SIZE, TOTAL_HEIGHT, TOTAL_WIDTH, WALL_SIZE, resize, row
from frogger.drawing import (
    TIMER_COLOR,
    FrogState,
    animation_level,
    draw_bus,
    draw_car_v1,
    draw_car_v2,
    draw_dead_animation,
    draw_finish_line,
    draw_frog,
    draw_full_line,
    draw_lifes,
    draw_log,
    draw_score,
    draw_snake,
    draw_timer_bar,
    draw_turtle_squad,
)
from frogger.engine import TIMER_EVENT
from frogger.text import Text, char_index

WHITE = (255, 255, 255)


def _coded_sheet():
    width, height = 200, 400
    cols = pygame.Surface((width, height), 0, 32)
    for x in range(width):
        cols.fill((x & 255, 0, (x >> 8) << 4), pygame.Rect(x, 0, 1, height))
    rows = pygame.Surface((width, height), 0, 32)
    for y in range(height):
        rows.fill((0, y & 255, y >> 8), pygame.Rect(0, y, width, 1))
    cols.blit(rows, (0, 0), special_flags=pygame.BLEND_ADD)
    return cols


SHEET = _coded_sheet()


def decode(color):
    r, g, b = color[0], color[1], color[2]
    return r + ((b >> 4) << 8), g + ((b & 15) << 8)


class FakeContext:
    def __init__(self, events=()):
        self.screen = pygame.Surface((int(TOTAL_WIDTH), int(TOTAL_HEIGHT)), 0, 32)
        self.screen.fill(WHITE)
        self.sheet = SHEET
        self.flips = 0
        self.level_sounds = 0
        self._events = iter(events)

    def flip(self):
        self.flips += 1

    def play_level(self):
        self.level_sounds += 1

    def pending_events(self):
        return iter(())

    def wait_event(self):
        return next(self._events)


@pytest.fixture
def context():
    return FakeContext()


def origin_at(context, x, y):
    return decode(context.screen.get_at((round(x), round(y))))


def origin(sprite):
    return (sprite.sx, sprite.sy)


@pytest.mark.parametrize(
    "draw, direction, sprite",
    [
        (draw_car_v1, 1, CarSprite.CAR3_RIGHT),
        (draw_car_v1, 0, CarSprite.CAR1_LEFT),
        (draw_car_v2, 1, CarSprite.CAR4_RIGHT),
        (draw_car_v2, -1, CarSprite.CAR2_LEFT),
    ],
)
def test_cars_pick_sprite_by_direction(context, draw, direction, sprite):
    draw(context, direction, 100, 100)
    assert origin_at(context, 100, 100) == origin(car_assets()[sprite])


def test_bus_uses_truck(context):
    draw_bus(context, 50, 60)
    truck = car_assets()[CarSprite.TRUCK_LEFT]
    assert origin_at(context, 50, 60) == origin(truck)
    assert origin_at(context, 50 + resize(truck.sw) - 1, 60) == (truck.sx + truck.sw - 1, truck.sy)


def test_log_pieces(context):
    draw_log(context, 2, 100, 100)
    logs = log_assets()
    start = 100 - resize(8)
    step = resize(NORMAL_SIZE)
    assert origin_at(context, start, 100) == origin(logs[LogSprite.START])
    assert origin_at(context, start + step, 100) == origin(logs[LogSprite.MIDDLE])
    assert origin_at(context, start + 2 * step, 100) == origin(logs[LogSprite.MIDDLE])
    assert origin_at(context, start + 3 * step, 100) == origin(logs[LogSprite.END])


def test_snake_flips_when_going_right(context):
    snake = snake_assets()[SnakeSprite.SNAKE1]
    draw_snake(context, 100, 100, 1)
    assert origin_at(context, 100, 100) == (snake.sx + snake.sw - 1, snake.sy)
    draw_snake(context, 100, 300, 0)
    assert origin_at(context, 100, 300) == origin(snake)


def test_final_frog_is_centred(context):
    frog = special_assets()[SpecialSprite.HAPPY_FROG]
    draw_final_frog_x = 200
    from frogger.drawing import draw_final_frog

    draw_final_frog(context, draw_final_frog_x, 100)
    assert origin_at(context, draw_final_frog_x - resize(frog.sw / 2), 100) == origin(frog)


def test_frog_alive_and_dead(context):
    draw_frog(context, 100, 100, 0, FrogState.ALIVE)
    assert origin_at(context, 100, 100 + resize(NORMAL_SIZE / 2)) == origin(frog_assets()[0])
    draw_frog(context, 300, 100, 1, FrogState.DEATH)
    assert origin_at(context, 300, 100 + resize(NORMAL_SIZE / 2)) == origin(death_assets()[4])


def test_frog_bad_frame_and_state(context):
    with pytest.raises(ValueError):
        draw_frog(context, 0, 0, 4, FrogState.DEATH)
    with pytest.raises(ValueError):
        draw_frog(context, 0, 0, 0, 7)


def test_turtle_squad(context):
    sprite = turtle_assets()[2]
    draw_turtle_squad(context, 0, 10, 100, 0)
    for position in range(3):
        assert origin_at(context, 10 + position * resize(sprite.sw), 100) == origin(sprite)
    assert context.screen.get_at((round(10 + 3 * resize(sprite.sw)), 100))[:3] == WHITE


def test_turtle_squad_flipped_and_invalid(context):
    sprite = turtle_assets()[1]
    draw_turtle_squad(context, -1, 10, 100, 1)
    assert origin_at(context, 10, 100) == (sprite.sx + sprite.sw - 1, sprite.sy)
    with pytest.raises(ValueError):
        draw_turtle_squad(context, 3, 10, 100, 0)


def test_lifes(context):
    life = life_assets()[0]
    draw_lifes(context, 40, 500, 3)
    for position in range(3):
        assert origin_at(context, 40 + position * resize(life.sw), 500) == origin(life)
    assert context.screen.get_at((round(40 + 3 * resize(life.sw)), 500))[:3] == WHITE


def test_full_line_spans_width(context):
    street = special_assets()[SpecialSprite.STREET]
    y = row(8)
    draw_full_line(context, street, y)
    assert origin_at(context, 0, y) == origin(street)
    x, sy = origin_at(context, int(TOTAL_WIDTH) - 1, y)
    assert street.sx <= x < street.sx + street.sw
    assert sy == street.sy


def test_finish_line(context):
    walls = wall_assets()
    draw_finish_line(context, walls)
    big = walls[WallSprite.BIG]
    small = walls[WallSprite.SMALL]
    assert origin_at(context, 0, 0) == origin(big)
    assert origin_at(context, resize(big.sw), 0) == origin(small)
    assert context.screen.get_at((int(TOTAL_WIDTH) - 1, 0))[:3] != WHITE


def test_timer_bar(context):
    draw_timer_bar(context, 60000)
    top = round(TOTAL_HEIGHT - WALL_SIZE)
    assert context.screen.get_at((WALL_SIZE + 1, top + 1))[:3] == TIMER_COLOR
    assert context.screen.get_at((WALL_SIZE - 1, top + 1))[:3] == WHITE


def test_timer_bar_zero_draws_nothing(context):
    draw_timer_bar(context, 0)
    top = round(TOTAL_HEIGHT - WALL_SIZE)
    assert context.screen.get_at((WALL_SIZE, top))[:3] == WHITE


def test_score_text(context):
    draw_score(context, "042")
    font = char_assets("y")
    label = Text.create("SCORE 042", font, TOTAL_WIDTH * 0.75, row(16.5), 20, True)
    assert origin_at(context, label.x, label.y) == origin(font[char_index("S")])


def test_dead_animation_shows_last_frame(context):
    draw_dead_animation(context, 100, 100)
    assert context.flips == 4
    assert origin_at(context, 100, 100) == origin(death_assets()[6])


def _timer_events():
    return itertools.repeat(pygame.event.Event(TIMER_EVENT))


def test_animation_level_wipes_screen():
    context = FakeContext(_timer_events())
    animation_level(context)
    assert context.level_sounds == 1
    assert context.flips > 100
    assert context.screen.get_at((0, 0))[:3] == (0, 0, 0)
    assert context.screen.get_at((int(TOTAL_WIDTH) - 1, int(TOTAL_HEIGHT) - 1))[:3] == (0, 0, 0)


def test_animation_level_ignores_other_events():
    plain = FakeContext(_timer_events())
    animation_level(plain)
    other = pygame.event.Event(pygame.KEYDOWN, key=pygame.K_w)
    mixed = FakeContext(
        itertools.chain.from_iterable(zip(itertools.repeat(other), _timer_events()))
    )
    animation_level(mixed)
    assert mixed.flips == plain.flips