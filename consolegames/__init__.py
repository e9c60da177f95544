"""Small console exercises and games: arithmetic, characters, chance, grids and a walking adventure."""

__version__ = "0.1.0"