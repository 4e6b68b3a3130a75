"""A tile-based puzzle game: gather every collectible, then reach the exit."""

__version__ = "0.1.0"