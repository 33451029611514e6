"""Dungeon rooms, tiles, items, generation, text rendering and key mapping for a history-driven roguelike."""

__version__ = "0.1.0"