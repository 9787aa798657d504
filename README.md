# gamecore

`gamecore` is the core of a small 3D game engine: the parts that do not
need a window or a graphics driver. Matrices and vectors are `numpy`
arrays, and texture images are decoded with Pillow.

| Module | What it holds |
| --- | --- |
| `gamecore.debug` | `Debug`, a severity-filtered log file, and `MessageType` |
| `gamecore.timer` | `Timer`, frame delta and sleep times from a millisecond clock |
| `gamecore.transforms` | `perspective`, `ortho`, `look_at`, `translate`, `rotate`, `scale`, `model_transform` |
| `gamecore.camera` | `Camera`, steered by yaw, pitch, mouse movement and scroll |
| `gamecore.geometry` | `BoundingBox`, `Ray`, `ray_obb_intersection`, `screen_pos_to_world_ray` |
| `gamecore.assets` | `Material`, `MaterialLibrary`, `Texture`, `TextureLibrary`, `load_material_library` |
| `gamecore.obj_loader` | `ObjLoader`, `Vertex`, `SubMesh` |
| `gamecore.model` | `Model`, sub-meshes with per-instance transforms |
| `gamecore.game_object` | `GameObject`, one placed instance of a model |
| `gamecore.octree` | `OctNode`, `OctChild`, `OctSpatialPartition` |
| `gamecore.collision` | `CollisionHandler`, mouse picking through the octree |
| `gamecore.scene_graph` | `SceneGraph`, named game objects and models grouped by shader id |
| `gamecore.mouse` | `EventType`, `InputEvent`, `MouseListener` |
| `gamecore.engine` | `CoreEngine`, `GameInterface`, `Scene` |
| `gamecore.game` | `Game1`, `StartScene`, `GameScene`: a two-scene sample game |

## Matrices

```python
import numpy as np
from gamecore.transforms import model_transform, perspective

proj = perspective(0.785, 800 / 600, 2.0, 50.0)   # field of view in radians
model = model_transform(
    np.array([0.0, 0.0, -4.0]),   # position
    0.5,                          # angle, radians
    np.array([0.0, 1.0, 0.0]),    # rotation axis
    np.array([1.0, 1.0, 1.0]),    # scale factors
)
```

Matrices act on column vectors (`m @ v`). A model transform is built by
translating, then rotating about the axis, then scaling.

## Camera

```python
import numpy as np
from gamecore.camera import Camera

camera = Camera((800, 600))
camera.set_position(np.array([0.0, 0.0, 4.0]))
camera.process_mouse_movement(10.0, -4.0)   # offsets applied at half speed
camera.process_mouse_zoom(1)                # move two units along the view direction
view = camera.view()
near, far = camera.clipping_planes()        # (2.0, 50.0)
```

Pitch is clamped to -89..89 degrees. After a mouse movement, a yaw below 0
has 360 added and a yaw above 360 has 360 taken off. The camera's
`field_of_view` (45.0) is passed to `perspective` as it is.

## Logging

```python
from gamecore.debug import Debug, MessageType

log = Debug("engine.log")        # default file: GAME301EngineLog.txt
log.init()                       # empties the file, allows fatal errors only
log.set_severity(MessageType.INFO)
log.error("could not open file", "loader.py", 42)
```

Entries are written as `<LEVEL>: <message> in: <file> on line: <line>`.
A message is written only when its type is at or below the current
severity. A fresh `Debug` has severity `NONE` and writes nothing.

## Assets

`TextureLibrary.create(name, file)` decodes an image and registers it
under a new id. Ids start at 1; 0 means "no texture".
`load_material_library(path, materials, textures, texture_dir)` reads the
`newmtl` lines of an MTL file. For each one it loads
`<texture_dir>/<name>.jpg` and registers a `Material` only if that texture
loaded.

`ObjLoader.load_model(obj, mtl)` reads `v`, `vn`, `vt` and triangle `f`
lines (`p/t/n` corners). Each `usemtl` starts a new `SubMesh`, textured
with `<texture_dir>/<name>.jpg`. `Model.from_files(...)` wraps this and
keeps the loader's bounding box.

## Picking

`CollisionHandler(world_size)` builds an octree three levels deep, centred
on the origin. To pick:

1. Register objects with `add_game_object`.
2. Call `update(mouse_position, button_type, screen_size, camera)`.

`update` returns the nearest object under the cursor and marks it as hit
(`GameObject.set_hit`). The object picked before is released. Mouse
positions have their origin at the bottom left of the screen.

## Engine and sample game

```python
from gamecore.engine import CoreEngine
from gamecore.game import Game1

engine = CoreEngine(Game1(asset_root="."), (800, 600))
if engine.on_create():
    frames = engine.run(max_frames=300)
```

`run` does the following once per frame:

1. Polls an optional `event_source` for `InputEvent`s and hands them to
   the engine's `MouseListener`.
2. Updates the game.
3. Calls the game's render step.
4. Sleeps according to `Timer.sleep_time`.

It stops when the engine stops running or after `max_frames`, then shuts
the game down.

`Game1` starts with `StartScene`, which switches the engine to scene 1.
`GameScene` then loads these files under `asset_root`:

- `Engine/models/Apple.obj` and `Engine/this/Apple.mtl`
- `Engine/models/Dice.obj` and `Engine/this/Dice.mtl`
- textures from `Engine/Textures`

It adds both objects to a scene graph and to picking, and moves the apple
to (-4, -4, -4). If a file is missing, the engine stops running.

## What the package does not do

There is no window, no input device handling and no GPU drawing. Shader
programs are only names mapped to integer ids (`CoreEngine.shader_programs`).
A scene's render step collects what would be drawn, for example
`GameScene.draw_list`, but draws nothing. Input arrives only as
`InputEvent` values that the caller supplies. The package installs no
command.

## Tests

The test suite runs under pytest. Install the `test` extra to get it.