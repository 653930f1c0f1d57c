"""An arcade dodging game with bouncing enemies, plus a bouncing-logo screensaver."""

__version__ = "0.1.0"