"""The bouncing logo screensaver: the background changes colour on each bounce."""

from __future__ import annotations

import argparse
import random
import sys
from dataclasses import dataclass, field

import pygame

from .assets import DVD_IMAGE, WHITE, load_image

WIDTH = 1000
HEIGHT = 600
FPS = 60


@dataclass
class Bouncer:
    """A sprite moving at constant speed inside a box, reflecting off its edges."""

    sprite_width: int
    sprite_height: int
    width: int = WIDTH
    height: int = HEIGHT
    x: int = 500
    y: int = 0
    vx: int = 5
    vy: int = 3
    background: tuple[int, int, int] = field(default=WHITE)

    def step(self, rng: random.Random) -> bool:
        """Advance one frame; on a bounce pick a random background colour."""
        self.x += self.vx
        self.y += self.vy
        bounced = False
        if self.x < 0 or self.x + self.sprite_width > self.width:
            self.vx = -self.vx
            bounced = True
        if self.y < 0 or self.y + self.sprite_height > self.height:
            self.vy = -self.vy
            bounced = True
        if bounced:
            self.background = (rng.randrange(256), rng.randrange(256), rng.randrange(256))
        return bounced


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="zoroadventure-dvd", description="Bouncing logo screensaver."
    )
    parser.parse_args(argv)
    image = load_image(DVD_IMAGE)
    if image is None:
        print(f"cannot load {DVD_IMAGE}", file=sys.stderr)
        return 1

    pygame.init()
    try:
        window = pygame.display.set_mode((WIDTH, HEIGHT))
        pygame.display.set_caption("SFML Window")
        ticker = pygame.time.Clock()
        bouncer = Bouncer(image.get_width(), image.get_height())
        rng = random.Random()
        while not any(event.type == pygame.QUIT for event in pygame.event.get()):
            window.fill(bouncer.background)
            window.blit(image, (bouncer.x, bouncer.y))
            pygame.display.flip()
            bouncer.step(rng)
            ticker.tick(FPS)
    finally:
        pygame.quit()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())