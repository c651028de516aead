# meshcook

A small toolkit for building and reshaping polygon meshes in procedural
steps ("cooking"), and for turning the result into data ready to draw.

## What is in it

- `meshcook.shapes`: the `Mesh` container (a list of points and a list of
  faces, each face a tuple of point indices with a closed/open flag) with
  `add_point`, `add_face`, `copy`, `vertex_count` and `solo_points`, plus the
  generators `house(size)`, `cube(size, base)` and `grid(size, rows, columns)`.
  A grid with a single row or column is a polyline; with no rows or columns it
  is empty.
- `meshcook.deform`: `transform(mesh, translate, rotate)` (rotation in
  radians about X, Y and Z, then translation), `sine_wave(mesh, frequency,
  radial, center)` which lifts points by a sine of their X coordinate or of
  their distance to `center`, and `ocean_surface(mesh)` /
  `ocean_surface_position(position)`, a fixed sum of directional waves. Each
  returns a new mesh and leaves its input untouched.
- `meshcook.objimport`: `parse_obj(lines)` reads `v`, `f` and `l` lines into
  a `Mesh`; `import_obj(path, size)` reads a `.obj` file and scales it.
  Paths shorter than four characters, paths not ending in `.obj`, files that
  cannot be opened and faces naming missing points raise `ObjImportError`.
- `meshcook.parameters`: `ParmType`, `RangeFlag`, `ParmRange` (with
  `clamp`), `ParmTemplate` and `Parameter` (`get` / `set` per component,
  converting to the parameter's kind). `Slider` holds the value logic of a
  numeric slider: clamping to locked range ends, `set_from_position`,
  `fill_fraction` and a four-character `label_text`. `label_padding(labels)`
  gives a shared label column width.
- `meshcook.camera`: `OrbitCamera` with `set_pos`, `move_pos`,
  `set_center`, `change_center`, `rotate_around_center`, `change_radius`,
  `view_matrix`, `forward`, `right` and `up`.
- `meshcook.navigation`: `ViewportNavigator` turns wheel steps and mouse
  presses, drags and releases (`MouseButton.LEFT` orbits, `MIDDLE` pans,
  `RIGHT` dollies) into movements of an `OrbitCamera`.
- `meshcook.render`: `vertex_buffer(mesh)` (one `RenderVertex` per face
  corner with a flat face normal), `index_buffers(mesh)` (triangle-fan and
  line index lists), `grid_lines(length, lines)` for a ground grid, and
  `point_sprites(mesh, camera_position)` giving a `PointSprite` for each point
  no face uses, scaled by its distance to the camera.
- `meshcook.registry`: `operator_table()` returns the available operators
  (`transform`, `geometryImport`, `grid`, `sineWave`, `oceanSurface`) keyed
  by name as `OperatorInfo` entries, which can `create_parameters()` and
  `cook(parameters, inputs)`.

## Installation

```
pip install meshcook
```

numpy is the only runtime dependency.

## Examples

```python
from meshcook.shapes import grid
from meshcook.deform import sine_wave, transform
from meshcook.render import vertex_buffer, index_buffers

mesh = grid((10.0, 10.0), rows=10, columns=10)
mesh = sine_wave(mesh, frequency=1.0, radial=True, center=(0.0, 0.0, 0.0))
mesh = transform(mesh, translate=(0.0, 1.0, 0.0), rotate=(0.0, 0.5, 0.0))

vertices = vertex_buffer(mesh)
triangles, lines = index_buffers(mesh)
```

Operators are looked up by name and cooked; parameters that are not passed
keep their defaults:

```python
from meshcook.registry import operator_table

operators = operator_table()

grid_op = operators["grid"]
params = grid_op.create_parameters()
params["rows"].set(4)
flat = grid_op.cook(params)

wavy = operators["sineWave"].cook(inputs=[flat])
```

Driving a camera from mouse input:

```python
from meshcook.camera import OrbitCamera
from meshcook.navigation import MouseButton, ViewportNavigator

camera = OrbitCamera(-10.0, 5.0, -10.0)
nav = ViewportNavigator(camera)
nav.press(MouseButton.LEFT, 100, 100)
nav.move(120, 90)
nav.release(MouseButton.LEFT)
nav.wheel(120)
view = camera.view_matrix()
```

## What it does not do

meshcook has no window, widgets or command-line program, and it does not
talk to a graphics API: it prepares vertex, index, grid and sprite data and
camera matrices, but drawing them, and any interactive editor around them,
is left to the caller. There is no node network for chaining operators; each
`OperatorInfo.cook` call runs one operator on the meshes it is given.

## Running the tests

```
pip install meshcook[test]
pytest
```