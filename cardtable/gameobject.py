"""Game objects built from components."""

from __future__ import annotations

from typing import Any

from .components import Component, Entity, Transform
from .enums import ComponentType
from .vector import Vector2


class GameObject(Entity):
    """An object in a scene holding at most one component of each kind."""

    def __init__(self, name: str = "") -> None:
        super().__init__(name)
        self._components: dict[ComponentType, Component] = {}
        self.add_component(Transform())

    @property
    def components(self) -> tuple[Component, ...]:
        """The attached components in component-type order."""
        return tuple(self._ordered())

    def _ordered(self):
        for kind in ComponentType:
            comp = self._components.get(kind)
            if comp is not None:
                yield comp

    def add_component(self, component: Component) -> Component:
        """Attach a component in the slot of its kind and return it."""
        self._components[component.kind] = component
        return component

    def get_component(self, kind: ComponentType) -> Component | None:
        """Return the component of the given kind, or None."""
        return self._components.get(ComponentType(kind))

    def initialize(self) -> None:
        for comp in self._ordered():
            comp.initialize()

    def update(self) -> None:
        for comp in self._ordered():
            comp.update()

    def render(self, surface: Any) -> None:
        for comp in self._ordered():
            comp.render(surface)

    def release(self) -> None:
        """Release the object; components are left as they are."""


class Background(GameObject):
    """The table background."""

    def __init__(self, name: str = "") -> None:
        super().__init__(name)
        self.pos = Vector2()