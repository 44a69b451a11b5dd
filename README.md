# hogengine

hogengine is a small 2D game engine built on pygame and numpy. It runs a frame loop
that does the following on each frame:

1. Clears the window to white.
2. Polls pygame events.
3. Updates the current game state.
4. Draws one textured sprite through an orthographic projection.
5. Flips the display.
6. Sleeps out whatever is left of the frame budget.

The loop continues until the window is closed or a state calls `shut_down()`. After
that, every manager is torn down.

## Installation

```
pip install .
```

To run the tests as well:

```
pip install ".[test]"
pytest
```

## Writing a game state

Subclass `GameState` from `hogengine.state`. It is an abstract class, and you must
implement all four hooks:

- `load()` and `init()` run once each, in that order, when the state becomes current.
- `update()` runs once per frame.
- `destroy()` runs when the state is replaced or when the engine shuts down.

```python
from hogengine.engine import get_dt, get_fps, run, set_window_title, shut_down
from hogengine.state import GameState


class Title(GameState):
    def __init__(self):
        self.elapsed = 0.0

    def load(self):
        pass

    def init(self):
        self.elapsed = 0.0

    def update(self):
        self.elapsed += get_dt()
        set_window_title(f"FPS: {int(get_fps())}")
        if self.elapsed > 10.0:
            shut_down()

    def destroy(self):
        pass


run("My Game", 1600, 900, 100, 1, Title())
```

To switch states, call `set_next_game_state(state)`. On the next frame, the state manager
calls `destroy()` on the current state, then `load()` and `init()` on the new one, and
then `update()` on the new one.

## Engine functions

All of these are in `hogengine.engine`:

| Function | Purpose |
| --- | --- |
| `run(title, width, height, target_fps, vsync, target_state)` | Open the window and run the frame loop until it quits |
| `set_next_game_state(state)` | Queue a state to become current on the next frame |
| `set_window_title(title)` | Change the window caption. Raises `RuntimeError` if there is no window yet |
| `get_fps()` | Frames per second, measured once each full second has passed |
| `get_dt()` | Duration of the last frame, in seconds |
| `shut_down()` | Stop the loop after the current frame |

Notes on `run`:

- It raises `ValueError` if `target_fps` is zero.
- It tries to load `Assets/yujin.png`, relative to the working directory, as the sprite's
  texture. If that fails, it logs the error and runs without drawing the sprite.
- When it returns, the engine is replaced with a fresh one. This means `run` can be
  called again.

The class `HogEngine` owns the managers and the frame timing. Its clock and sleep
functions can be passed in, for example to drive `frame_end()` in tests.

## Building blocks

Each of these can be used on its own.

`hogengine.state.StateManager`

- Provides `set_next_state`, `update` and `destroy`.
- Provides the `current_state` property.

`hogengine.input.InputManager`

- Call `init()` first. Every other method raises `RuntimeError` until you do.
- `update()` drains the pygame event queue.
- `handle_event(event)` records a single event.
- `is_key_down(scancode)` reports whether a key is held.
- `quit_requested` becomes true once a quit event has been seen.

`hogengine.objects`

- `ObjectManager` keeps `Actor`s in the order they were added. It supports `len()` and
  iteration.
- `Actor` has a position and a size, each a `Vec2`.

`hogengine.window.WindowManager`

- `init(title, width, height, vsync)` opens the pygame window. It returns `False` if the
  window could not be created.
- `set_title(title)` changes the caption.
- `current_window` holds the window.
- `destroy()` closes the window.

`hogengine.render`

- The matrix helpers are `ortho`, `translate`, `scale` and `model_to_ndc`. They return
  4×4 numpy arrays.
- `RenderManager` blits one texture into the window. Where it is placed is set by its
  `sprite_rect` attribute, which defaults to `(100, 0, 1100, 1466)`: centre x, centre y,
  width and height, in pixels from the screen centre. The texture is tinted by its
  `color` attribute.
- `load_texture` raises `TextureError` if the image cannot be loaded.

## Demo

The package includes a demo state, `hogengine.mainmenu.MainMenu`. It shows the frame rate
in the window title once a second has passed, and it quits after 30 seconds. To start it:

```
hogengine-demo
```

The demo opens a 1600×900 window with a target of 100 frames per second.

## What it does not do

- Rendering uses plain pygame surface blitting. It does not use OpenGL or shaders.
- The renderer draws only the single sprite described above. The actors held by
  `ObjectManager` are stored but never drawn.
- There is no way to load textures other than calling `RenderManager.load_texture`.
- There are no audio, collision or scene-file features.