[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "sineengine"
version = "0.1.0"
description = "A small 2D game framework on pygame with states, entities, LDtk tile-map collisions and letterboxed rendering"
requires-python = ">=3.10"
keywords = ["game", "2d", "engine", "platformer", "ldtk", "pygame", "tilemap", "letterbox"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Games/Entertainment :: Side-Scrolling/Arcade Games",
    "Topic :: Software Development :: Libraries :: pygame",
]
dependencies = [
    "pygame",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
sineengine-game = "sineengine.game.main:main"

[tool.hatch.build.targets.wheel]
packages = ["sineengine"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
