# meshview

meshview opens an OpenGL 3.3 core profile window and draws a Wavefront OBJ
mesh as a wireframe on a white background. The mesh rotates slowly about the
Y and X axes. Pressing Escape closes the window.

## Installing

```
pip install .
```

You need a display that can give an OpenGL 3.3 core profile context. Windowing
and GL calls go through pyglet. The matrix maths uses numpy.

## Running the viewer

```
meshview
meshview --width 1024 --height 768
```

`--width` and `--height` set the window size in pixels. Both default to 800
and must be positive. The command prints the current working directory, then
opens the window. It exits when the window is closed or Escape is pressed.

The viewer reads three files. Their paths are relative to the working
directory:

- `../../objects/monkey.obj`, the mesh
- `../../shaders/default.vert`, the vertex shader
- `../../shaders/default.frag`, the fragment shader

The shader program must declare a `mat4` uniform named `transform`. The
vertex attribute with the lowest location receives the three-component vertex
positions. On each frame the rotation advances by 0.1 degrees about Y and
0.03 degrees about X, and the viewer uploads the new matrix to `transform`.

## Using the library

`meshview.objloader` needs no window or GL context:

```python
from meshview.objloader import load_obj, parse_obj

model = parse_obj([
    "# a single triangle",
    "v 0.0 0.0 0.0",
    "v 1.0 0.0 0.0",
    "v 0.0 1.0 0.0",
    "vn 0.0 0.0 1.0",
    "f 1//1 2//1 3//1",
])
model.vertices  # [0.0, 0.0, 0.0, 1.0, 0.0, 0.0, 0.0, 1.0, 0.0]
model.indices   # [0, 1, 2]

model = load_obj("model.obj")
```

`parse_obj` accepts a string or an iterable of lines. The loader reads `v`
positions, `vn` normals and `f` faces into the flat lists
`ObjModel.vertices`, `ObjModel.normals` and `ObjModel.indices`. In each face
entry it keeps only the part before the first `/`. It converts face indices
from OBJ's 1-based numbering to 0-based. Comment lines, blank lines and
records with any other keyword (`vt`, `o`, `s` and so on) are skipped. A
record with no values, a number that does not parse, or a face index that is
not an integer raises `ObjParseError`, a `ValueError` that carries the line
number.

Other parts that work without a window:

- `meshview.renderer.build_buffers(model)` packs the positions as a
  `float32` array and the face indices as a `uint32` array in a `MeshBuffers`.
  It raises `ValueError` if any index is negative.
- `meshview.shader.rotation(angle_degrees, axis)` returns a 4x4 rotation
  matrix. `meshview.shader.Transform` holds the model matrix, and each call to
  `step()` turns it one increment further.
- `meshview.shader.read_shader_sources(vertex_path, fragment_path)` returns
  both shader texts. If a file cannot be read, it raises `ShaderSourceError`.
- `meshview.application.handle_key(window, symbol, modifiers)` sets
  `window.has_exit` when the symbol is Escape.

## What it does not do

The command has no option to choose a different mesh or other shader files.
The three paths above are fixed. No shaders or meshes come with the package.
Normals are read but not used for drawing. The viewer always draws a
wireframe, with no lighting and no camera controls.

## Running the tests

```
pip install ".[test]"
pytest
```