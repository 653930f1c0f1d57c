"""On-screen score and life counters and the game-over screen."""

from __future__ import annotations

import pygame

from .assets import BLACK, GAME_OVER_IMAGE, PIXEL_FONT, RED, WHITE, load_font, load_image


def score_text(score: int) -> str:
    return f"Puntaje: {score}"


def life_text(life: int) -> str:
    return f"Vida: {life}"


def final_score_text(score: int) -> str:
    return f"Puntaje Final: {score}"


def _blit_text(
    surface: pygame.Surface,
    font: pygame.font.Font,
    text: str,
    color: tuple[int, int, int],
    position: tuple[int, int],
) -> None:
    if text:
        surface.blit(font.render(text, True, color), position)


class _Label:
    def __init__(self, position: tuple[int, int], size: int = 25) -> None:
        self.font = load_font(PIXEL_FONT, size)
        self.position = position
        self.color = WHITE
        self.text = ""


class ScoreLabel(_Label):
    """Score counter in the top-left corner."""

    def __init__(self) -> None:
        super().__init__((10, 10))

    def update(self, score: int) -> None:
        self.text = score_text(score)

    def draw(self, surface: pygame.Surface) -> None:
        _blit_text(surface, self.font, self.text, self.color, self.position)


class LifeLabel(_Label):
    """Life counter below the score."""

    def __init__(self) -> None:
        super().__init__((10, 40))

    def update(self, life: int) -> None:
        self.text = life_text(life)

    def draw(self, surface: pygame.Surface) -> None:
        _blit_text(surface, self.font, self.text, self.color, self.position)


class GameOverScreen:
    """Final screen showing 'Game Over' and the final score."""

    BACKGROUND_POSITION = (200, 10)
    TITLE_POSITION = (300, 270)
    SCORE_POSITION = (200, 20)

    def __init__(self) -> None:
        self.score = 0
        self.background = load_image(GAME_OVER_IMAGE)
        self.title_font = load_font(PIXEL_FONT, 80)
        self.score_font = load_font(PIXEL_FONT, 40)
        self.title_text = "Game Over"
        self.score_text = ""

    def final_score(self, score: int) -> None:
        """Record the final score and update its caption."""
        self.score = score
        self.score_text = final_score_text(score)

    def draw(self, surface: pygame.Surface) -> None:
        """Clear the surface and draw the screen; the caller flips the display."""
        surface.fill(BLACK)
        if self.background is not None:
            surface.blit(self.background, self.BACKGROUND_POSITION)
        _blit_text(surface, self.title_font, self.title_text, RED, self.TITLE_POSITION)
        _blit_text(surface, self.score_font, self.score_text, WHITE, self.SCORE_POSITION)