"""Layers of game objects and the scenes made of them."""

from __future__ import annotations

from typing import Any

from .components import Entity
from .enums import LayerType
from .gameobject import GameObject


class Layer(Entity):
    """An ordered collection of game objects drawn together."""

    def __init__(self, name: str = "") -> None:
        super().__init__(name)
        self._game_objects: list[GameObject] = []

    @property
    def game_objects(self) -> tuple[GameObject, ...]:
        return tuple(self._game_objects)

    def initialize(self) -> None:
        for obj in self._game_objects:
            obj.initialize()

    def update(self) -> None:
        for obj in self._game_objects:
            obj.update()

    def render(self, surface: Any) -> None:
        for obj in self._game_objects:
            obj.render(surface)

    def release(self) -> None:
        for obj in self._game_objects:
            obj.release()

    def add_game_object(self, game_object: GameObject | None) -> None:
        """Append a game object; None is ignored."""
        if game_object is None:
            return
        self._game_objects.append(game_object)


class Scene(Entity):
    """A screen of the game: one layer per layer type, drawn back to front."""

    def __init__(self, name: str = "") -> None:
        super().__init__(name)
        self._layers: dict[LayerType, Layer] = {kind: Layer() for kind in LayerType}

    def layer(self, layer: LayerType) -> Layer:
        """Return the layer of the given type."""
        return self._layers[LayerType(layer)]

    def initialize(self) -> None:
        for layer in self._layers.values():
            layer.initialize()

    def update(self) -> None:
        for layer in self._layers.values():
            layer.update()

    def render(self, surface: Any) -> None:
        for layer in self._layers.values():
            layer.render(surface)

    def release(self) -> None:
        """Release the scene; its layers are left as they are."""

    def on_enter(self) -> None:
        """Called when the scene becomes active."""

    def on_exit(self) -> None:
        """Called when the scene stops being active."""

    def add_game_object(self, game_object: GameObject, layer: LayerType) -> None:
        self.layer(layer).add_game_object(game_object)