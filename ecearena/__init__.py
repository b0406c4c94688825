"""Turn-based arena game for two to four players on a tile grid, with a pygame window."""

__version__ = "0.1.0"