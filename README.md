# cardtable

The building blocks of a card-table game loop. It provides scenes made of layers and game objects that own components. It also tracks keyboard state from frame to frame, measures frame timing and keeps a keyed cache of loaded images.

## Installing

```
pip install .
```

To run the test suite, install with the `test` extra:

```
pip install ".[test]"
pytest
```

## Pieces

- `cardtable.enums`
  - Holds `SceneType`, `LayerType`, `ComponentType`, `CardType` and `CardObjectKind`.
  - All of them are integer enums.
- `cardtable.vector`
  - `Vector2` is a frozen two-dimensional vector.
  - It stores `x` and `y` as floats and both default to `0.0`.
- `cardtable.components`
  - `Entity` carries a `name`.
  - `Component` has a fixed `kind` and empty `initialize`, `update`, `render` and `release` hooks.
  - `Transform` is the `ComponentType.TRANSFORM` component. It holds `pos` and `size`.
  - `CardObject` is one visual part of a card, of a given `CardObjectKind`.
- `cardtable.gameobject`
  - `GameObject` holds at most one component per `ComponentType` and starts out with a `Transform`.
  - `add_component` puts a component in the slot of its kind, replacing any component already there. `get_component` returns the component of a kind, or `None`.
  - `initialize`, `update` and `render` run the components in `ComponentType` order.
  - `Background` is a game object used as a scene backdrop.
- `cardtable.scene`
  - `Layer` is an ordered list of game objects. `add_game_object` ignores `None`.
  - `Scene` holds one layer per `LayerType` and runs them back to front.
  - `Scene.layer` returns the layer of a type. `Scene.add_game_object(obj, layer)` appends to that layer.
- `cardtable.input`
  - `Input` tracks the 26 letter keys (`KeyCode`). Call `initialize` first.
  - Each call to `update(is_down)` sets every key to one of these states:
    - `KeyState.DOWN` on the first frame the key is held.
    - `PRESSED` while it stays held.
    - `UP` on the frame it is let go.
    - `NONE` otherwise.
  - `get_key_state` reads a key's state. It raises `KeyError` before `initialize`.
- `cardtable.timer`
  - `Time` measures the seconds between `update` calls and exposes them as `delta_time`. The clock function can be passed in.
  - `render(set_title)` adds up the deltas. Once more than a second has gone by, it passes text such as `"FPS:60"` to `set_title`, returns that text and starts counting again. Otherwise it returns `None`.
- `cardtable.resources`
  - `Resources.load(kind, key, path)` creates and loads a resource the first time a key is asked for. Later calls for the same key and kind return the cached object.
  - `find(key, kind)` returns a cached resource of that kind, or `None`.
  - `release` empties the cache.
  - `Image` loads a bitmap file with Pillow and keeps `bitmap`, `width` and `height`.
  - A file that cannot be loaded raises `ResourceLoadError`.

## Example

```python
from cardtable.enums import LayerType
from cardtable.gameobject import Background
from cardtable.input import Input, KeyCode, KeyState
from cardtable.scene import Scene

scene = Scene()
scene.add_game_object(Background(), LayerType.BG)
scene.initialize()

keys = Input()
keys.initialize()
keys.update(lambda code: code is KeyCode.N)
assert keys.get_key_state(KeyCode.N) is KeyState.DOWN

scene.update()
```

`Input.update` takes a function that reports whether a given key is held down at that moment. It can be fed from any windowing library or from test data.

## What it does not do

- It opens no window, and there is no command to start a game.
- The `render` methods pass a surface object down through scenes, layers, game objects and components, but none of the built-in classes draws anything. Drawing is left to subclasses.
- There is no scene manager for switching between scenes and no main loop. `on_enter` and `on_exit` are hooks for the caller to invoke.
- There are no card-game rules. `CardType` and `CardObjectKind` only name the kinds of card and card parts.