# cogame

`cogame` is a small game framework that does not depend on any renderer. It
comes with the pieces of a side-scrolling "streaming" game built on that
framework. In the game, viewers steer a runner by sending comments, and every
comment stresses the streamer's avatar.

There are no dependencies beyond the standard library.

## The framework

### Game objects: `cogame.objects`

A `GameObject` registers itself with the `ObjectManager` it is given.

Each frame, `ObjectManager.update()` calls `update()` on every object.

- Objects created during the update are first updated on the next frame.
- An object that has called `destroy_me()` is removed right after its own update.

`ObjectManager.draw(canvas)` draws objects in descending `draw_order`. An object
with a higher order is drawn first, so it appears further back. Use
`set_draw_order()` to change an object's order.

Objects also support:

- A `tag`, checked with `is_tag()`.
- `stay_on_scene_change()`, which keeps the object alive through `delete_all()`.

To look objects up, use `ObjectManager.find(cls, tag=None)` and
`find_all(cls, tag=None)`. They select by class and, if a tag is given, by tag as
well. `delete_all()` raises `RuntimeError` if it is called while an object is
being updated or drawn.

All drawing goes through a `Canvas`, which has three methods: `draw_box`,
`draw_string` and `draw_image`. `RecordingCanvas` stores every call as a tuple in
`calls`. You can inspect that list in tests, or replay it on a real renderer.

### Scenes: `cogame.scenes`

A `SceneManager` runs the current `SceneBase`. A `SceneFactory` creates scenes:

- It is built with the scene to start with.
- `register(name, scene_class)` adds a named scene.

`change_scene(name)` does not switch scenes immediately. At the start of the next
`update()`, the manager:

1. deletes every object that is not marked to stay;
2. builds the new scene from the factory;
3. runs the new scene.

An unregistered name raises `UnknownSceneError`. `exit()` sets `exit_requested`.

### Input: `cogame.input`

`Input` is built from a polling function that returns the codes of the keys held
right now. The `Key` enum lists the codes the game uses.

- Call `update()` once per frame.
- `is_key(key)` is true while the key is held.
- `is_key_down(key)` is true on the frame the key was pressed.
- `is_key_up(key)` is true on the frame the key was released.
- A key code outside 0–255 raises `ValueError`.

### Timing: `cogame.clock`

`Clock(counter=time.perf_counter)` measures time between calls. Each `refresh()`
returns the seconds since the previous reading and also stores that value in
`delta_time`.

### Application: `cogame.app`

`App(factory, poll)` owns the objects, the input and the scenes, and passes
itself to each scene as its `context`.

- `update()` refreshes the input, then updates the scene and the objects.
- `draw(canvas)` draws the scene and then the objects.
- `is_exit()` reports whether a scene has asked to exit.
- `release()` drops everything.

### CSV: `cogame.csvreader`

`CsvReader(filename)` reads a whole file and skips a leading UTF-8 BOM. A file
that cannot be opened gives zero lines. `CsvReader.from_text()` and
`parse_csv(text)` work on a string instead of a file.

Quoting rules:

- A line with an odd number of quote characters continues on the next line.
- Quote characters are then removed, and a doubled quote becomes a single one.
- Commas inside the former quotes still split cells.

Reading cells:

- `lines` and `columns(line)` give the size of the data.
- `get_string`, `get_int` and `get_float` read a cell.
- A cell past the end of a line reads as `""`, `0` or `0.0`, and so does an empty cell.
- `get_int` and `get_float` parse the leading number of the cell. They raise
  `ValueError` if there is none.
- A line number out of range raises `IndexError`.

## The game pieces

### Stage: `cogame.stage`

`Stage` is a tile grid; use `Stage.from_csv(manager, filename)` to load one from
a file.

- Tiles 0, 8 and 9 are open; every other value is wall.
- Tile 9 marks a player start, and `spawn_points()` returns those positions.
- `is_wall(pos)` tests a point.
- `check_right`, `check_left`, `check_up` and `check_down` return how far a point
  must be pushed back out of a wall, or 0 if the point is not in a wall.
- `scroll_x` is the horizontal scroll.

### Sprites: `cogame.sprites`

This module holds the screen layout constants, `Vector2` and `Object2D`.
`Object2D` is a sprite drawn centred on its `position` and shifted by the stage
scroll.

### Player: `cogame.player`

`Player` runs right on its own.

- **D** starts the automatic run and **A** moves it left; **A** also stops the
  automatic run.
- **Space** jumps.
- When **Return** is pressed, the player follows the current comment selection:
  walk, run, jump or stop, possibly towards a direction.
- Each comment adds stress to the avatar: 1, 5 or 10 by level.
- Falling below the screen adds 10 stress and changes to the `"RETRY"` scene.

`PlayerParams` holds gravity, jump height, walk speed and dash speed. It can be
read with `PlayerParams.from_csv()` from `name,value` lines named `Gravity`,
`JumpHeight`, `MoveSpeed` and `DashSpeed`.

### Comments: `cogame.comments`

`CommentSelect` is a three-field selector.

- Left and right move the focus.
- Up and down cycle the value in the focused field: `Direction`, `State` or
  `Level`.
- Return sends a comment. Its wording comes from `get_comment()`, which picks at
  random with an optional `rng`.
- The sent comment scrolls left in a `CommentOutput`.

`CommentArea` draws the input strip and send button, and creates a selector.

### Avatar: `cogame.avatar`

`Avatar` shows a face for every 10 points of stress. Stress is shared by all
avatars.

- When the face changes to one of the four angry faces, the avatar calls
  `on_voice` with a voice clip path.
- At 40 stress, it resets the stress to 0 and changes to the `"GAMEOVER"` scene.

### Scenes: `cogame.game`

`cogame.game` provides these scenes:

- `BootScene`, which goes straight on to the title.
- `TitleScene`, where **P** plays and **Esc** exits.
- `ClearScene` and `GameOverScene`, where **T** returns to the title and **Esc** exits.
- `RetryScene`, where **P** plays, **G** gives up and **Esc** exits. It also
  builds a `BackGround`, the stream page with an `Avatar` and a `CommentArea`.

`make_factory()` registers all of these scenes except `"PLAY"`.

## What the package does not provide

- **No play scene.** `make_factory()` has no `"PLAY"` scene, so pressing **P**
  raises `UnknownSceneError` until you register one. The example below shows one
  way to write it.
- **No window, renderer or sound.** Images and voice clips appear only as path
  strings passed to the canvas and to `on_voice`. You need to supply code that
  draws and plays them.
- **No game data.** No stage maps, parameter files, images or audio are included.
- **No command.** There is nothing to run from the shell; you drive the frame loop
  yourself.

## Example

```python
from cogame.app import App
from cogame.game import BackGround, make_factory
from cogame.objects import RecordingCanvas
from cogame.player import Player, PlayerParams
from cogame.scenes import SceneBase
from cogame.stage import Stage

GRID = [
    [0, 0, 0, 0, 0, 0],
    [0, 9, 0, 0, 0, 0],
    [1, 1, 1, 1, 1, 1],
]
PARAMS = PlayerParams(gravity=0.5, jump_height=150, move_speed=3, dash_speed=6)


class PlayScene(SceneBase):
    def __init__(self, context):
        super().__init__(context)
        stage = Stage(context.objects, GRID)
        BackGround(context.objects, context)
        for point in stage.spawn_points():
            Player(context.objects, context.input, context.scenes, point, PARAMS)


factory = make_factory()
factory.register("PLAY", PlayScene)

held_keys = set()
app = App(factory, lambda: held_keys)
canvas = RecordingCanvas()

for _ in range(3):
    if app.is_exit():
        break
    app.update()
    app.draw(canvas)   # hand canvas.calls to a renderer here

app.release()
```