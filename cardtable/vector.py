"""Two-dimensional vector value."""

from dataclasses import dataclass


@dataclass(frozen=True)
class Vector2:
    """A point or size in screen space, stored as floats."""

    x: float = 0.0
    y: float = 0.0

    def __post_init__(self) -> None:
        object.__setattr__(self, "x", float(self.x))
        object.__setattr__(self, "y", float(self.y))