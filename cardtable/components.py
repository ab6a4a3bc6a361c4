"""Named entities and the components attached to game objects."""

from __future__ import annotations

from typing import Any

from .enums import CardObjectKind, ComponentType
from .vector import Vector2


class Entity:
    """Base of everything that carries a name."""

    def __init__(self, name: str = "") -> None:
        self.name = name


class Component(Entity):
    """A behaviour attached to a game object, of a fixed kind."""

    def __init__(self, kind: ComponentType, name: str = "") -> None:
        super().__init__(name)
        self._kind = ComponentType(kind)

    @property
    def kind(self) -> ComponentType:
        return self._kind

    def initialize(self) -> None:
        """Prepare the component; does nothing by default."""

    def update(self) -> None:
        """Advance the component by one frame; does nothing by default."""

    def render(self, surface: Any) -> None:
        """Draw the component; does nothing by default."""

    def release(self) -> None:
        """Free what the component holds; does nothing by default."""


class Transform(Component):
    """Position and size of a game object."""

    def __init__(self, pos: Vector2 | None = None, size: Vector2 | None = None) -> None:
        super().__init__(ComponentType.TRANSFORM)
        self.pos = pos if pos is not None else Vector2()
        self.size = size if size is not None else Vector2()


class CardObject(Entity):
    """One visual part of a card."""

    def __init__(self, kind: CardObjectKind, name: str = "") -> None:
        super().__init__(name)
        self._kind = CardObjectKind(kind)

    @property
    def kind(self) -> CardObjectKind:
        return self._kind

    def initialize(self) -> None:
        """Prepare the part; does nothing by default."""

    def update(self) -> None:
        """Advance the part by one frame; does nothing by default."""

    def render(self, surface: Any) -> None:
        """Draw the part; does nothing by default."""

    def release(self) -> None:
        """Free what the part holds; does nothing by default."""