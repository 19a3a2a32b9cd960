"""Window, event queue, sprite sheet and sound effects of a running game."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntEnum
from pathlib import Path
from typing import Any, Iterator

import pygame

from .config import TOTAL_HEIGHT, TOTAL_WIDTH

STREET_COLOR = (0, 0, 0)
RIVER_COLOR = (2, 11, 88)

TICKS_PER_SECOND = 30
TIMER_EVENT = pygame.USEREVENT + 1

SHEET_FILE = "assets.png"


class WindowClosed(Exception):
    """The player closed the game window."""


class SoundEffect(IntEnum):
    STEP = 0
    LOSE_LIFE = 1
    TIME = 2
    LEVEL = 3
    MUSIC = 4


SOUND_FILES = {
    SoundEffect.STEP: "audio/src/step.wav",
    SoundEffect.LOSE_LIFE: "audio/src/looseLife.wav",
    SoundEffect.TIME: "audio/src/runningOutOfTime.wav",
    SoundEffect.LEVEL: "audio/src/nextLevel.wav",
    SoundEffect.MUSIC: "audio/src/music.wav",
}


@dataclass
class GameContext:
    """Everything the screens need to draw, listen for events and play sounds."""

    screen: pygame.Surface
    sheet: pygame.Surface
    sounds: dict[SoundEffect, Any] = field(default_factory=dict)
    windowed: bool = False
    song: Any = None
    closed: bool = False

    def wait_event(self) -> pygame.event.Event:
        """Block until the next event arrives and return it."""
        return pygame.event.wait()

    def pending_events(self) -> Iterator[pygame.event.Event]:
        """Yield queued events one by one; events not consumed stay queued."""
        while True:
            event = pygame.event.poll()
            if event.type == pygame.NOEVENT:
                return
            yield event

    def flip(self) -> None:
        """Show what has been drawn on the window."""
        if self.windowed and pygame.display.get_init():
            pygame.display.flip()

    def close(self) -> None:
        """Stop the timer and every sound and shut the window down."""
        if self.closed:
            return
        self.closed = True
        if pygame.get_init():
            pygame.time.set_timer(TIMER_EVENT, 0)
        for sound in self.sounds.values():
            sound.stop()
        if self.song is not None:
            self.song.stop()
            self.song = None
        if self.windowed:
            pygame.quit()

    def _play(self, effect: SoundEffect) -> None:
        sound = self.sounds.get(effect)
        if sound is not None:
            sound.play()

    def play_step(self) -> None:
        self._play(SoundEffect.STEP)

    def play_level(self) -> None:
        self._play(SoundEffect.LEVEL)

    def play_time(self) -> None:
        self._play(SoundEffect.TIME)

    def play_lose_life(self) -> None:
        self._play(SoundEffect.LOSE_LIFE)

    def play_music(self) -> None:
        self._play(SoundEffect.MUSIC)


def _load_sounds(base: Path) -> dict[SoundEffect, Any]:
    try:
        pygame.mixer.init()
    except pygame.error:
        return {}
    sounds = {}
    for effect, name in SOUND_FILES.items():
        path = base / name
        if path.is_file():
            try:
                sounds[effect] = pygame.mixer.Sound(str(path))
            except pygame.error:
                continue
    return sounds


def init_game(asset_dir: str | Path = ".") -> GameContext:
    """Open the window, load the sprite sheet and sounds and start the tick timer.

    Raises FileNotFoundError when the sprite sheet is missing.
    """
    base = Path(asset_dir)
    sheet_path = base / SHEET_FILE
    if not sheet_path.is_file():
        raise FileNotFoundError(f"sprite sheet not found: {sheet_path}")
    pygame.init()
    screen = pygame.display.set_mode((int(TOTAL_WIDTH), int(TOTAL_HEIGHT)))
    pygame.display.set_caption("Frogger")
    sheet = pygame.image.load(str(sheet_path)).convert()
    sounds = _load_sounds(base)
    pygame.time.set_timer(TIMER_EVENT, round(1000 / TICKS_PER_SECOND))
    context = GameContext(screen=screen, sheet=sheet, sounds=sounds, windowed=True)
    music = sounds.get(SoundEffect.MUSIC)
    if music is not None:
        context.song = music.play(loops=-1)
    return context