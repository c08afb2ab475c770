[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "brickbreak"
version = "0.1.0"
description = "A small brick-breaking arcade game with simple 2D sprite and collision helpers"
requires-python = ">=3.10"
dependencies = [
    "pygame",
]
keywords = ["breakout", "arcade", "game", "pygame", "collision", "sprite"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: End Users/Desktop",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Games/Entertainment :: Arcade",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
brickbreak = "brickbreak.game:main"

[tool.hatch.build.targets.wheel]
packages = ["brickbreak"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
