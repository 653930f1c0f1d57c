"""Animated sprites: the player character and the bouncing obstacles."""

from __future__ import annotations

from dataclasses import dataclass

import pygame

FRAME_TIME = 0.1

Rect = tuple[int, int, int, int]


@dataclass(frozen=True)
class FloatRect:
    """Axis-aligned rectangle in window coordinates."""

    left: float
    top: float
    width: float
    height: float

    @property
    def right(self) -> float:
        return self.left + self.width

    @property
    def bottom(self) -> float:
        return self.top + self.height

    def intersects(self, other: FloatRect) -> bool:
        """True when the two rectangles overlap by a non-zero area."""
        return (
            max(self.left, other.left) < min(self.right, other.right)
            and max(self.top, other.top) < min(self.bottom, other.bottom)
        )


@dataclass
class Animation:
    """Cycles through frames laid out in one row of a sprite sheet."""

    num_frames: int
    step: int
    x_offset: int
    y: int
    width: int
    height: int
    frame_time: float = FRAME_TIME
    started: float = 0.0
    current: int = 0

    def advance(self, now: float) -> bool:
        """Move to the next frame if enough time has passed."""
        if now - self.started < self.frame_time:
            return False
        self.current = (self.current + 1) % self.num_frames
        self.started = now
        return True

    def frame_rect(self) -> Rect:
        """Sheet rectangle of the current frame."""
        return (
            self.current * self.step + self.x_offset,
            self.y,
            self.width,
            self.height,
        )


def _blit_frame(
    surface: pygame.Surface,
    sheet: pygame.Surface | None,
    x: float,
    y: float,
    rect: Rect,
) -> None:
    if sheet is not None:
        surface.blit(sheet, (round(x), round(y)), pygame.Rect(rect))


class Character:
    """The player-controlled swordsman."""

    START_RECT: Rect = (0, 60, 35, 57)
    IDLE_RECT: Rect = (15, 60, 35, 57)

    def __init__(self, x: float, y: float, started: float = 0.0) -> None:
        self.x = float(x)
        self.y = float(y)
        self.rect = self.START_RECT
        self.animation = Animation(6, 35, 15, 0, 35, 57, started=started)

    def bounds(self) -> FloatRect:
        """Rectangle the character occupies in the window."""
        return FloatRect(self.x, self.y, self.rect[2], self.rect[3])

    def move(self, dx: float, dy: float) -> None:
        self.x += dx
        self.y += dy

    def update(self, now: float) -> None:
        """Advance the walking animation."""
        if self.animation.advance(now):
            self.rect = self.animation.frame_rect()

    def stand(self) -> None:
        """Show the idle frame."""
        self.rect = self.IDLE_RECT

    def draw(self, surface: pygame.Surface, sheet: pygame.Surface | None) -> None:
        """Blit the current frame; nothing is drawn without a sheet."""
        _blit_frame(surface, sheet, self.x, self.y, self.rect)


class Obstacle:
    """An enemy that bounces around the window."""

    START_RECT: Rect = (13, 422, 41, 57)

    def __init__(
        self, x: float, y: float, vx: float, vy: float, started: float = 0.0
    ) -> None:
        self.x = float(x)
        self.y = float(y)
        self.rect = self.START_RECT
        self.animation = Animation(4, 50, 13, 422, 41, 57, started=started)
        self.vx = vx
        self.vy = vy

    def bounds(self) -> FloatRect:
        """Rectangle the obstacle occupies in the window."""
        return FloatRect(self.x, self.y, self.rect[2], self.rect[3])

    def move(self, dx: float, dy: float) -> None:
        self.x += dx
        self.y += dy

    def update(self, now: float) -> None:
        """Advance the running animation."""
        if self.animation.advance(now):
            self.rect = self.animation.frame_rect()

    def bounce(self, width: float, height: float) -> None:
        """Reverse velocity on touching the edges of a width x height area."""
        box = self.bounds()
        if box.left <= 0 or box.right >= width:
            self.vx = -self.vx
        if box.top <= 0 or box.bottom >= height:
            self.vy = -self.vy

    def draw(self, surface: pygame.Surface, sheet: pygame.Surface | None) -> None:
        """Blit the current frame; nothing is drawn without a sheet."""
        _blit_frame(surface, sheet, self.x, self.y, self.rect)