[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "consolearcade"
version = "0.1.0"
description = "A small collection of terminal arcade games: pixel bird, brick breaker, plane shooter and snake."
requires-python = ">=3.10"
dependencies = []
keywords = ["game", "terminal", "console", "arcade", "snake", "breakout", "shooter"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
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
consolearcade = "consolearcade.menu:main"
consolearcade-bird = "consolearcade.bird:main"
consolearcade-brick = "consolearcade.brick:main"
consolearcade-plane = "consolearcade.plane:main"
consolearcade-snake = "consolearcade.snake:main"

[tool.hatch.build.targets.wheel]
packages = ["consolearcade"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
