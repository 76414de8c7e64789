# minirt

A small ray tracer. It reads a scene description from a `.rt` file and
renders it to an image file, with ambient and diffuse (Phong) lighting and
hard shadows from a single spot light. Spheres, planes and cylinders are
supported.

## Installation

```
pip install .
```

## Usage

```
minirt scene.rt
```

This writes `scene.png` next to the scene file. Options:

- `-o PATH`, `--output PATH` — image file to write; the image format follows
  the file extension (anything Pillow can save).
- `--height N` — image height in pixels (default 756). The width is
  `int(N * 16 / 9)`, so the default image is 1344 x 756.

Exactly one scene file must be given. The file name must end in `.rt`. If the
file cannot be read or parsed, a message is printed and nothing is rendered.
The command exits with status 0 on success and 1 on any error.

## Scene format

One element per line. Values are separated by commas or whitespace; by
convention, components of one group (a position, a colour) are joined by
commas and groups are separated by spaces. Empty lines are ignored; any other
line that does not start with one of the identifiers below is an error.

| Element       | Line                                              |
|---------------|---------------------------------------------------|
| Ambient light | `A  <ratio> <r,g,b>`                              |
| Camera        | `C  <x,y,z> <dx,dy,dz> <fov>`                     |
| Spot light    | `L  <x,y,z> <ratio> <r,g,b>`                      |
| Sphere        | `sp <x,y,z> <radius> <r,g,b>`                     |
| Plane         | `pl <x,y,z> <nx,ny,nz> <r,g,b>`                   |
| Cylinder      | `cy <x,y,z> <dx,dy,dz> <radius> <height> <r,g,b>` |

Each of `A`, `C` and `L` has to appear exactly once. Ratios lie in
`[0, 1]`, direction components in `[-1, 1]`, colour channels in `[0, 255]`
(integers) and the field of view in `[0, 180]` degrees (integer). Numbers are
plain decimals such as `-12.5`; exponents are not accepted.

Example:

```
A 0.2 255,255,255
C 0,0,-10 0,0,1 70
L -5,5,-5 0.7 255,255,255
sp 0,0,5 4 255,0,0
pl 0,-3,0 0,1,0 100,100,100
cy 4,0,6 0,1,0 1 3 0,0,255
```

Notes on rendering:

- A cylinder is drawn as its side surface only, from its base point along its
  direction for `height`; it has no end caps.
- Objects that exactly repeat the geometry of an earlier object are hidden.
- A point is shadowed when any other object lies between it and the spot
  light; shadowed colours are darkened by the difference between the spot and
  ambient ratios.
- Pixels with no hit are black. The top row and the left column of the image
  are never drawn and stay black.

## Library use

```python
from minirt.overlapping import hide_overlapping
from minirt.render import render_scene
from minirt.scene_file import load_scene

scene = load_scene("scene.rt")
scene.camera.setup(640 / 360)
hide_overlapping(scene.objects)
canvas = render_scene(scene, 640, 360)
canvas.save("scene.png")
```

- `minirt.scene_file.load_scene(path)` reads a file; `parse_scene(lines)`
  parses any iterable of lines. Both raise
  `minirt.parsing_utils.SceneParseError` (a `ValueError`) on malformed input.
- `Camera.setup(aspect_ratio)` must be called before rendering; it computes
  the camera basis and the virtual screen.
- `render_scene(scene, width, height)` returns a `Canvas`; use
  `get_pixel(x, y)` for a `0xRRGGBB` value, `to_image()` for a Pillow image or
  `save(path)` to write a file.
- `minirt.render.primary_ray`, `minirt.intersection.find_intersection` and
  `minirt.lighting.phong` expose the individual steps.

## What it does not do

There is no interactive window: the scene is rendered once and written to an
image file. There is no antialiasing, no specular highlight, no reflection and
only one spot light per scene.