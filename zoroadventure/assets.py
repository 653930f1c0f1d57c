"""Loading of images, fonts and music with graceful fallbacks."""

from __future__ import annotations

from pathlib import Path

import pygame

ASSETS_DIR = Path("assets")
IMAGES_DIR = ASSETS_DIR / "images"
FONTS_DIR = ASSETS_DIR / "fonts"
MUSIC_DIR = ASSETS_DIR / "music"

SPRITE_SHEET = IMAGES_DIR / "zoro.png"
INTRO_IMAGE = IMAGES_DIR / "intro.png"
GAME_OVER_IMAGE = IMAGES_DIR / "nada.jpg"
BACKGROUND_IMAGE = IMAGES_DIR / "fondo.png"
DVD_IMAGE = IMAGES_DIR / "dvd.jpeg"

PIXEL_FONT = FONTS_DIR / "Pixel.ttf"
TITLE_FONT = FONTS_DIR / "OP.ttf"
PROMPT_FONT = FONTS_DIR / "Ring.ttf"

INTRO_MUSIC = MUSIC_DIR / "Intro.mp3"
START_MUSIC = MUSIC_DIR / "start.mp3"
ATTACK_MUSIC = MUSIC_DIR / "atack.mp3"
HIT_MUSIC = MUSIC_DIR / "golpe.mp3"

WHITE = (255, 255, 255)
BLACK = (0, 0, 0)
RED = (255, 0, 0)


def load_image(path: str | Path) -> pygame.Surface | None:
    """Load an image, or return None when it is missing or unreadable."""
    path = Path(path)
    if not path.is_file():
        return None
    try:
        return pygame.image.load(str(path))
    except (pygame.error, OSError):
        return None


def load_font(path: str | Path, size: int) -> pygame.font.Font:
    """Load a TrueType font, falling back to pygame's default font."""
    if not pygame.font.get_init():
        pygame.font.init()
    path = Path(path)
    if path.is_file():
        try:
            return pygame.font.Font(str(path), size)
        except (pygame.error, OSError):
            pass
    return pygame.font.Font(None, size)


def play_music(path: str | Path, loop: bool = False) -> bool:
    """Stream a music file; return whether playback started."""
    path = Path(path)
    if not path.is_file():
        return False
    try:
        if not pygame.mixer.get_init():
            pygame.mixer.init()
        pygame.mixer.music.load(str(path))
        pygame.mixer.music.play(loops=-1 if loop else 0)
    except pygame.error:
        return False
    return True