[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "zoroadventure"
version = "0.1.0"
description = "A small arcade dodging game with a swordsman, bouncing enemies and a bouncing-logo screensaver"
requires-python = ">=3.10"
dependencies = ["pygame"]
keywords = ["game", "arcade", "pygame", "dodge", "screensaver"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: MacOS X",
    "Environment :: Win32 (MS Windows)",
    "Environment :: X11 Applications",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Arcade",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
zoroadventure = "zoroadventure.game:main"
zoroadventure-dvd = "zoroadventure.dvd:main"

[tool.hatch.build.targets.wheel]
packages = ["zoroadventure"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
