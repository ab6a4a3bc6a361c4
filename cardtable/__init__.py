"""Scenes, layers, game objects, components, input, timing and resources for a card-table game."""

__version__ = "0.1.0"