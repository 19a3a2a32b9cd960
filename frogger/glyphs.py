"""Letters, digits and hearts drawn on a 16x16 dot-matrix display."""

from __future__ import annotations

from typing import NamedTuple

DISP_CANT_X_DOTS = 16
DISP_CANT_Y_DOTS = 16
DISP_MIN = 0
DISP_MAX_X = DISP_MIN + DISP_CANT_X_DOTS - 1
DISP_MAX_Y = DISP_MIN + DISP_CANT_Y_DOTS - 1


class Display:
    """A buffered dot-matrix display.

    Writes go to a buffer; ``update`` copies the buffer to what is shown.
    """

    def __init__(self) -> None:
        self._buffer: set[tuple[int, int]] = set()
        self.shown: frozenset[tuple[int, int]] = frozenset()

    def clear(self) -> None:
        """Turn every dot of the buffer off, leaving what is shown alone."""
        self._buffer.clear()

    def write(self, x: int, y: int, on: bool) -> None:
        """Set one dot of the buffer."""
        if not (DISP_MIN <= x <= DISP_MAX_X and DISP_MIN <= y <= DISP_MAX_Y):
            raise IndexError(f"dot ({x}, {y}) is outside the display")
        if on:
            self._buffer.add((x, y))
        else:
            self._buffer.discard((x, y))

    def update(self) -> None:
        """Show the current contents of the buffer."""
        self.shown = frozenset(self._buffer)

    def is_on(self, x: int, y: int) -> bool:
        return (x, y) in self._buffer

    def lit(self) -> frozenset[tuple[int, int]]:
        """Every dot that is on in the buffer."""
        return frozenset(self._buffer)


class _Stroke(NamedTuple):
    """A run of dots relative to a glyph's anchor."""

    dx: int
    dy: int
    length: int = 1
    horizontal: bool = False
    on: bool = True


def _draw(display: Display, strokes: tuple[_Stroke, ...], x: int, y: int) -> None:
    for stroke in strokes:
        for step in range(stroke.length):
            display.write(
                x + stroke.dx + (step if stroke.horizontal else 0),
                y + stroke.dy + (0 if stroke.horizontal else step),
                stroke.on,
            )


def _v(n: int, dx: int, dy: int) -> _Stroke:
    return _Stroke(dx, dy, n)


def _h(n: int, dx: int, dy: int) -> _Stroke:
    return _Stroke(dx, dy, n, horizontal=True)


def _dots(*points: tuple[int, int]) -> tuple[_Stroke, ...]:
    return tuple(_Stroke(dx, dy) for dx, dy in points)


def _gaps(*points: tuple[int, int]) -> tuple[_Stroke, ...]:
    return tuple(_Stroke(dx, dy, on=False) for dx, dy in points)


def vertical_line(display: Display, n: int, x: int, y: int) -> None:
    """Light ``n`` dots downwards from (x, y)."""
    _draw(display, (_v(n, 0, 0),), x, y)


def horizontal_line(display: Display, n: int, x: int, y: int) -> None:
    """Light ``n`` dots rightwards from (x, y)."""
    _draw(display, (_h(n, 0, 0),), x, y)


def horizontal_line_off(display: Display, n: int, x: int, y: int) -> None:
    """Turn off ``n`` dots rightwards from (x, y)."""
    _draw(display, (_Stroke(0, 0, n, horizontal=True, on=False),), x, y)


# Each glyph is anchored at its top-right dot (x, y) and spans three
# columns to the left and five rows down. Strokes are applied in order,
# so a later gap turns off a dot an earlier stroke lit.
_SIDES = (_v(5, 0, 0), _v(5, -2, 0))
_BOX = _SIDES + (_h(3, -2, 0), _h(3, -2, 4))
_THREE_COLUMNS = (_v(5, 0, 0), _v(5, -1, 0), _v(5, -2, 0))

_LETTERS: dict[str, tuple[_Stroke, ...]] = {
    "A": _SIDES + (_h(3, -2, 2), _h(3, -2, 4)),
    "B": (_v(5, 0, 0),) + _dots((-1, 0), (-1, 4), (-2, 1), (-2, 3), (-1, 2)),
    "C": (_v(5, 0, 0), _h(2, -2, 0), _h(2, -2, 4)),
    "D": (_v(5, 0, 0),) + _dots((-1, 0), (-1, 4)) + (_v(3, -2, 1),),
    "E": (_v(5, 0, 0), _h(2, -2, 0), _h(2, -2, 2), _h(2, -2, 4)),
    "F": (_v(5, 0, 0), _h(2, -2, 2), _h(2, -2, 4)),
    "G": (_v(5, 0, 0), _h(2, -2, 0), _v(3, -2, 0), _h(2, -2, 4)),
    "H": _SIDES + (_h(3, -2, 2),),
    "I": (_v(5, -1, 0),),
    "J": (_v(5, -1, 0), _h(2, -1, 0), _h(3, -2, 4)),
    "K": _SIDES + _gaps((-2, 2)) + _dots((-1, 2)),
    "L": (_v(5, 0, 0), _h(2, -2, 0)),
    "M": _SIDES + _dots((-1, 3)),
    "N": (_v(5, 0, 0), _v(4, -2, 0)) + _dots((-1, 4)),
    "O": _BOX,
    "P": (_v(5, 0, 0), _h(3, -2, 2)) + _dots((-2, 3)) + (_h(3, -2, 4),),
    "Q": (_v(5, -2, 0),) + _dots((-1, 1), (-1, 4)) + (_v(4, 0, 1),),
    "R": _SIDES + _gaps((-2, 2)) + _dots((-1, 2), (-1, 4)),
    "S": _THREE_COLUMNS
    + _gaps((-2, 0), (-2, 2), (-2, 3), (-1, 3), (-1, 1), (0, 1), (0, 2), (0, 4)),
    "T": (_v(5, -1, 0), _h(3, -2, 4)),
    "U": (_v(5, 0, 0),) + _dots((-1, 0)) + (_v(5, -2, 0),),
    "V": (_v(4, 0, 1), _v(4, -2, 1)) + _dots((-1, 0)),
    "W": _SIDES + _dots((-1, 1)),
    "X": _SIDES + _gaps((-2, 2)) + _dots((-1, 2)) + _gaps((0, 2)),
    "Y": (_v(4, -1, 0),) + _dots((-2, 4), (0, 4)),
    "Z": (_h(3, -2, 0),) + _dots((-2, 3)) + (_h(3, -2, 4),) + _dots((-1, 2), (0, 1)),
}

_DIGITS: tuple[tuple[_Stroke, ...], ...] = (
    _BOX,
    (_v(5, -1, 0), _h(3, -2, 0)) + _dots((0, 3)),
    _dots((0, 0), (0, 1), (0, 3), (-1, 4), (-1, 2), (-1, 0), (-2, 0), (-2, 3)),
    _dots((0, 0), (0, 4), (-1, 4), (-1, 2), (-1, 0), (-2, 1), (-2, 3)),
    (_v(3, 0, 2), _h(3, -2, 2), _v(5, -2, 0)),
    _THREE_COLUMNS + _gaps((-2, 3), (-1, 3), (-1, 1), (0, 1)),
    (_v(5, 0, 0), _h(2, -2, 0), _v(3, -2, 0), _h(2, -2, 4)) + _dots((-1, 2)),
    (_v(5, -2, 0), _h(3, -2, 2), _h(3, -2, 4)),
    _BOX + (_h(3, -2, 2),),
    (_v(3, 0, 2), _v(5, -2, 0), _h(3, -2, 2), _h(3, -2, 4)),
)

_EMPTY_HEART = _dots(
    (0, 2), (0, 3), (-1, 4), (-1, 1), (-2, 0), (-2, 3), (-3, 4), (-3, 1), (-4, 2), (-4, 3)
)
_FULL_HEART = (_v(2, 0, 2), _v(4, -1, 1), _v(4, -2, 0), _v(4, -3, 1), _v(2, -4, 2))


def _show(display: Display, strokes: tuple[_Stroke, ...], x: int, y: int) -> None:
    _draw(display, strokes, x, y)
    display.update()


def draw_letter(display: Display, letter: str, x: int, y: int) -> None:
    """Draw an A-Z letter with its top-right dot at (x, y) and show it."""
    strokes = _LETTERS.get(letter.upper()) if len(letter) == 1 else None
    if strokes is None:
        raise ValueError(f"not a letter: {letter!r}")
    _show(display, strokes, x, y)


def draw_digit(display: Display, digit: int | str, x: int, y: int) -> None:
    """Draw a digit 0-9 with its top-right dot at (x, y) and show it."""
    if isinstance(digit, str):
        if len(digit) != 1 or not "0" <= digit <= "9":
            raise ValueError(f"not a digit: {digit!r}")
        digit = ord(digit) - ord("0")
    if not 0 <= digit <= 9:
        raise ValueError(f"not a digit: {digit!r}")
    _show(display, _DIGITS[digit], x, y)


def empty_heart(display: Display, x: int, y: int) -> None:
    """Draw a heart outline whose rightmost column is x, and show it."""
    _show(display, _EMPTY_HEART, x, y)


def full_heart(display: Display, x: int, y: int) -> None:
    """Draw a filled heart whose rightmost column is x, and show it."""
    _show(display, _FULL_HEART, x, y)