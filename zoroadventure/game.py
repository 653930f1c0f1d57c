"""The main game: dodge the bouncing enemies for as long as possible."""

from __future__ import annotations

import argparse
import random
import time
from collections.abc import Callable, Iterable
from enum import Enum
from pathlib import Path

import pygame

from .assets import (
    ATTACK_MUSIC,
    BACKGROUND_IMAGE,
    BLACK,
    HIT_MUSIC,
    SPRITE_SHEET,
    START_MUSIC,
    load_image,
    play_music,
)
from .entities import Character, Obstacle
from .hud import GameOverScreen, LifeLabel, ScoreLabel
from .title import TitleScreen

WINDOW_WIDTH = 1080
WINDOW_HEIGHT = 540
WINDOW_TITLE = "Las flipantes aventuras de Zoro el cazador de piratas"
FPS = 60

START_LIFE = 100
HIT_DAMAGE = 20
SCORE_STEP = 100
SCORE_INTERVAL = 1.0
SPAWN_INTERVAL = 2.0
SPAWN_MARGIN = 50
PLAYER_SPEED = 6.0
PLAYER_START = (417, 271)
OBSTACLE_VELOCITY = (2, 4)
GAME_OVER_PAUSE_MS = 3000


class Direction(Enum):
    """Arrow-key directions as unit steps in window coordinates."""

    LEFT = (-1, 0)
    RIGHT = (1, 0)
    UP = (0, -1)
    DOWN = (0, 1)

    @property
    def dx(self) -> int:
        return self.value[0]

    @property
    def dy(self) -> int:
        return self.value[1]


class GameState:
    """Everything that changes during one game, free of any drawing."""

    def __init__(
        self,
        width: int = WINDOW_WIDTH,
        height: int = WINDOW_HEIGHT,
        now: float = 0.0,
    ) -> None:
        self.width = width
        self.height = height
        self.speed = PLAYER_SPEED
        self.life = START_LIFE
        self.score = 0
        self.character = Character(*PLAYER_START, started=now)
        self.obstacles: list[Obstacle] = []
        self.obstacle_velocity = OBSTACLE_VELOCITY
        self.score_started = now
        self.spawn_started = now

    def steer(self, directions: Iterable[Direction], now: float) -> bool:
        """Move the character for the held directions; stand still if none."""
        held = set(directions)
        moved = False
        for direction in Direction:
            if direction in held:
                self.character.move(direction.dx * self.speed, direction.dy * self.speed)
                self.character.update(now)
                moved = True
        if not moved:
            self.character.stand()
        return moved

    def resolve_collisions(self) -> int:
        """Remove obstacles touching the character; return how many hit."""
        player = self.character.bounds()
        survivors = [o for o in self.obstacles if not player.intersects(o.bounds())]
        hits = len(self.obstacles) - len(survivors)
        self.obstacles = survivors
        self.life -= hits * HIT_DAMAGE
        return hits

    def tick_score(self, now: float) -> bool:
        """Award points once a second; return whether the score changed."""
        if now - self.score_started < SCORE_INTERVAL:
            return False
        self.score += SCORE_STEP
        self.score_started = now
        return True

    def maybe_spawn(self, now: float, rng: random.Random) -> Obstacle | None:
        """Add an obstacle at a random place when the spawn interval is up."""
        if now - self.spawn_started < SPAWN_INTERVAL:
            return None
        x = rng.randrange(self.width - SPAWN_MARGIN)
        y = rng.randrange(self.height - SPAWN_MARGIN)
        obstacle = Obstacle(x, y, *self.obstacle_velocity, started=now)
        self.obstacles.append(obstacle)
        self.spawn_started = now
        return obstacle

    def move_obstacles(self, now: float) -> None:
        """Animate, bounce off the window edges and move every obstacle."""
        for obstacle in self.obstacles:
            obstacle.update(now)
            obstacle.bounce(self.width, self.height)
            obstacle.move(obstacle.vx, obstacle.vy)

    def is_over(self) -> bool:
        return self.life <= 0


_KEY_DIRECTIONS = {
    pygame.K_LEFT: Direction.LEFT,
    pygame.K_RIGHT: Direction.RIGHT,
    pygame.K_UP: Direction.UP,
    pygame.K_DOWN: Direction.DOWN,
}


def _play_sound(path: str | Path) -> pygame.mixer.Sound | None:
    """Play a short sound alongside the music stream."""
    path = Path(path)
    if not path.is_file():
        return None
    try:
        if not pygame.mixer.get_init():
            pygame.mixer.init()
        sound = pygame.mixer.Sound(str(path))
        sound.play()
    except pygame.error:
        return None
    return sound


class ZoroAdventures:
    """Window, title screen and game loop."""

    BACKGROUND_AREA = (350, 306, WINDOW_WIDTH, WINDOW_HEIGHT)

    def __init__(
        self,
        rng: random.Random | None = None,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        self.rng = rng if rng is not None else random.Random()
        self.clock = clock
        self._sounds: list[pygame.mixer.Sound] = []

    def run(self) -> None:
        """Alternate title screen and game until the window is closed."""
        pygame.init()
        try:
            window = pygame.display.set_mode((WINDOW_WIDTH, WINDOW_HEIGHT))
            pygame.display.set_caption(WINDOW_TITLE)
            ticker = pygame.time.Clock()
            sheet = load_image(SPRITE_SHEET)
            background = load_image(BACKGROUND_IMAGE)
            while self._title_screen(window, ticker):
                if not self._play(window, ticker, sheet, background):
                    break
        finally:
            pygame.quit()

    def _title_screen(self, window: pygame.Surface, ticker: pygame.time.Clock) -> bool:
        """Show the title until Enter (True) or the window closes (False)."""
        title = TitleScreen()
        title.play_intro()
        while True:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    return False
                if event.type == pygame.KEYDOWN and event.key in (
                    pygame.K_RETURN,
                    pygame.K_KP_ENTER,
                ):
                    return True
            title.draw(window)
            pygame.display.flip()
            ticker.tick(FPS)

    def _remember(self, sound: pygame.mixer.Sound | None) -> None:
        if sound is not None:
            self._sounds = [sound]

    def _play(
        self,
        window: pygame.Surface,
        ticker: pygame.time.Clock,
        sheet: pygame.Surface | None,
        background: pygame.Surface | None,
    ) -> bool:
        """Run one game; False if the window was closed, True on game over."""
        self._remember(_play_sound(START_MUSIC))
        state = GameState(WINDOW_WIDTH, WINDOW_HEIGHT, now=self.clock())
        play_music(ATTACK_MUSIC, loop=True)
        score_label = ScoreLabel()
        life_label = LifeLabel()
        life_label.update(state.life)

        while True:
            if any(event.type == pygame.QUIT for event in pygame.event.get()):
                return False

            now = self.clock()
            pressed = pygame.key.get_pressed()
            state.steer(
                (direction for key, direction in _KEY_DIRECTIONS.items() if pressed[key]),
                now,
            )
            if state.resolve_collisions():
                self._remember(_play_sound(HIT_MUSIC))
            state.tick_score(now)
            state.maybe_spawn(now, self.rng)

            window.fill(BLACK)
            if background is not None:
                window.blit(background, (0, 0), pygame.Rect(self.BACKGROUND_AREA))
            state.move_obstacles(now)
            for obstacle in state.obstacles:
                obstacle.draw(window, sheet)

            if state.is_over():
                screen = GameOverScreen()
                screen.final_score(state.score)
                screen.draw(window)
                pygame.display.flip()
                pygame.time.wait(GAME_OVER_PAUSE_MS)
                return True

            score_label.update(state.score)
            life_label.update(state.life)
            life_label.draw(window)
            state.character.draw(window, sheet)
            score_label.draw(window)
            pygame.display.flip()
            ticker.tick(FPS)


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="zoroadventure", description="Dodge the enemies and survive."
    )
    parser.parse_args(argv)
    ZoroAdventures().run()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())