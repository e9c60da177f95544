[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "consolegames"
version = "0.1.0"
description = "Small console exercises and games: calculators, dice, cards, puzzles and a walking adventure"
requires-python = ">=3.10"
dependencies = []
keywords = ["console", "games", "dice", "puzzle", "terminal"]
classifiers = [
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Natural Language :: Korean",
    "Operating System :: OS Independent",
    "Topic :: Games/Entertainment",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
consolegames-basics = "consolegames.basics:main"
consolegames-chars = "consolegames.chars:main"
consolegames-chance = "consolegames.chance:main"
consolegames-boards = "consolegames.boards:main"
consolegames-minigame = "consolegames.minigame:main"

[tool.hatch.build.targets.wheel]
packages = ["consolegames"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
