"""Enumerations shared by scenes, layers, components and cards."""

from enum import IntEnum


class SceneType(IntEnum):
    """Scenes the game can switch between."""

    TITLE = 0
    PLAY = 1
    ENDING = 2


class LayerType(IntEnum):
    """Drawing layers of a scene, from back to front."""

    BG = 0
    CARD = 1
    EFFECT = 2
    UI = 3


class ComponentType(IntEnum):
    """Component slots of a game object, in update order."""

    TRANSFORM = 0
    COLLIDER = 1
    SPRITE_RENDERER = 2
    ANIMATOR = 3
    AUDIO = 4


class CardType(IntEnum):
    """Kinds of card on the table."""

    PLAYER = 0
    MONEY = 1
    BASIC_RESOURCE = 2
    EQUIPMENT = 3
    FOOD = 4
    BUILDING = 5
    MONSTER = 6
    FORTAL = 7
    ANIMAL = 8
    IDEA = 9
    RUMOUR = 10


class CardObjectKind(IntEnum):
    """Visual parts a card is drawn from."""

    OUTLINE = 0
    FRAME = 1
    INLINE = 2
    DETAIL = 3
    VALUE = 4
    HEALTH = 5