"""Keyboard state tracking across frames."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Callable


class KeyCode(Enum):
    """Tracked keys, valued by the character on the key."""

    Q = "Q"
    W = "W"
    E = "E"
    R = "R"
    T = "T"
    Y = "Y"
    U = "U"
    I = "I"  # noqa: E741
    O = "O"  # noqa: E741
    P = "P"
    A = "A"
    S = "S"
    D = "D"
    F = "F"
    G = "G"
    H = "H"
    J = "J"
    K = "K"
    L = "L"
    Z = "Z"
    X = "X"
    C = "C"
    V = "V"
    B = "B"
    N = "N"
    M = "M"


class KeyState(Enum):
    """State of a key in the current frame."""

    DOWN = 0
    PRESSED = 1
    UP = 2
    NONE = 3


@dataclass
class Key:
    """Tracked state of one key."""

    key: KeyCode
    state: KeyState = KeyState.NONE
    pressed: bool = False


class Input:
    """Per-frame keyboard state for every tracked key."""

    def __init__(self) -> None:
        self._keys: dict[KeyCode, Key] = {}

    @property
    def keys(self) -> tuple[Key, ...]:
        return tuple(self._keys.values())

    def initialize(self) -> None:
        """Start tracking every key in the released state."""
        self._keys = {code: Key(code) for code in KeyCode}

    def update(self, is_down: Callable[[KeyCode], bool]) -> None:
        """Advance one frame; is_down tells whether a key is held now."""
        for key in self._keys.values():
            if is_down(key.key):
                key.state = KeyState.PRESSED if key.pressed else KeyState.DOWN
                key.pressed = True
            else:
                key.state = KeyState.UP if key.pressed else KeyState.NONE
                key.pressed = False

    def get_key_state(self, key_code: KeyCode) -> KeyState:
        """Return the state of a key; raises KeyError before initialize."""
        return self._keys[key_code].state