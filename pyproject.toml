[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "barrelclimb"
version = "0.1.0"
description = "Game logic for a barrel-jumping, ladder-climbing arcade game on pygame"
requires-python = ">=3.10"
keywords = ["game", "arcade", "platformer", "pygame", "barrels", "game-loop"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
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
barrelclimb = "barrelclimb.game:main"

[tool.hatch.build.targets.wheel]
packages = ["barrelclimb"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
