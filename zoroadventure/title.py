"""Title screen shown before each game."""

from __future__ import annotations

import pygame

from .assets import (
    BLACK,
    INTRO_IMAGE,
    INTRO_MUSIC,
    PROMPT_FONT,
    START_MUSIC,
    TITLE_FONT,
    load_font,
    load_image,
    play_music,
)


class TitleScreen:
    """Background art, the game title and the prompt to start."""

    BACKGROUND_AREA = (0, 0, 1080, 540)
    TITLE_POSITION = (100, 50)
    PROMPT_POSITION = (70, 200)

    def __init__(self) -> None:
        self.background = load_image(INTRO_IMAGE)
        self.title_font = load_font(TITLE_FONT, 90)
        self.prompt_font = load_font(PROMPT_FONT, 30)
        self.title_text = "ONE PIECE"
        self.prompt_text = "Presiona Enter para comenzar"

    def draw(self, surface: pygame.Surface) -> None:
        """Clear the surface and draw the title screen."""
        surface.fill(BLACK)
        if self.background is not None:
            surface.blit(self.background, (0, 0), pygame.Rect(self.BACKGROUND_AREA))
        surface.blit(
            self.title_font.render(self.title_text, True, BLACK), self.TITLE_POSITION
        )
        surface.blit(
            self.prompt_font.render(self.prompt_text, True, BLACK), self.PROMPT_POSITION
        )

    def play_intro(self) -> bool:
        """Start the title music; return whether it is playing."""
        return play_music(INTRO_MUSIC, loop=False)

    def play_start(self) -> bool:
        """Start the music that opens a game; return whether it is playing."""
        return play_music(START_MUSIC, loop=False)