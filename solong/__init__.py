"""Tile-based puzzle game: collect the tickets, avoid the enemy, reach the exit."""

__version__ = "0.1.0"