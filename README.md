# zoroadventure

A small arcade game in which a swordsman dodges enemies that bounce around the
screen. A bouncing-logo screensaver comes with it.

## Installing

```
pip install .
```

The game needs pygame. It loads its images, fonts and music from an `assets/`
directory in the current working directory:

- `assets/images/`: `intro.png`, `fondo.png`, `zoro.png`, `nada.jpg`, `dvd.jpeg`
- `assets/fonts/`: `OP.ttf`, `Ring.ttf`, `Pixel.ttf`
- `assets/music/`: `Intro.mp3`, `start.mp3`, `atack.mp3`, `golpe.mp3`

The game still runs if one of these files is missing. A missing image is not
drawn. Without the sprite sheet `zoro.png`, the character and the enemies are
invisible. A missing font is replaced by pygame's default font, and missing
music is skipped. The screensaver is different: it needs `dvd.jpeg`.

## Playing

```
zoroadventure
```

On the title screen, press Enter to start. Move with the arrow keys.

- Your score goes up by 100 every second.
- A new enemy appears every two seconds at a random place and bounces off the
  window edges.
- Each enemy you touch disappears and takes 20 points off your life, which
  starts at 100.

When your life reaches zero, the Game Over screen shows your final score for
three seconds. The game then goes back to the title screen. Close the window to
quit.

## Screensaver

```
zoroadventure-dvd
```

This opens a 1000×600 window with a logo that bounces off the edges. Each time
the logo hits an edge, the background changes to a random colour. If
`assets/images/dvd.jpeg` cannot be loaded, the command prints an error and exits
with status 1.

## Using it as a library

The game rules live in `zoroadventure.game.GameState` and do not need a window:

- `steer(directions, now)` moves the character for the held `Direction`s, or
  shows it standing still when no direction is held.
- `resolve_collisions()` removes the enemies that touch the character and
  returns how many there were.
- `tick_score(now)` adds to the score once a second.
- `maybe_spawn(now, rng)` adds an enemy once the spawn interval has passed.
- `move_obstacles(now)` animates the enemies, bounces them off the edges and
  moves them.
- `is_over()` tells whether the life has run out.

The sprites are `zoroadventure.entities.Character` and
`zoroadventure.entities.Obstacle`. Collisions are tested with
`FloatRect.intersects`. The screensaver's motion is
`zoroadventure.dvd.Bouncer`, and its `step(rng)` advances it by one frame.