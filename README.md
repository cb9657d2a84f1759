# shapelab

A small geometry workbench in three parts:

- **`shapelab.figures`** – plane figures (circles, rectangles, triangles,
  polygons) kept in a collection, with an interactive console to add, list,
  sort and delete them by perimeter.
- **`shapelab.surface`** – a height grid read from a CSV file, normalised into
  a 3D wire mesh that can be rotated, moved and scaled with 4×4 affine
  matrices, plus an isometric projection and a visibility check.
- **`shapelab.matrix`** – a dense row-major `Matrix` with element access,
  element-wise and matrix arithmetic and scalar operations.

No third-party dependencies; Python 3.10 or newer.

## Installation

```
pip install .
```

For running the tests:

```
pip install ".[test]"
pytest
```

## The figures console

```
shapelab-figures
```

The console shows a menu and reads a command number:

| Number | Action |
|-------:|--------|
| 1 | Add a figure (circle, rectangle, triangle or polygon) |
| 2 | Print every figure with its parameters |
| 3 | Print every figure with its perimeter |
| 4 | Print the sum of all perimeters |
| 5 | Sort figures by perimeter, ascending |
| 6 | Delete a figure by its number |
| 7 | Delete every figure whose perimeter is greater than a limit |
| 0 | Exit |

Points are entered as `X;Y`. A figure that fails validation is asked for
again until it is valid: a circle whose radius is not positive, a rectangle
whose first point is not strictly above and to the left of the second, a
triangle whose vertices lie on one line, or a polygon with fewer than three
vertices or rejected by its convexity check. Numbers that cannot be read, or
that are out of range for the question, are rejected and asked for again.
The console ends on command 0 or when input runs out.

### Using the figures from code

```python
from shapelab.figures.geometry import Point, line_length, parse_point
from shapelab.figures.shapes import Circle, FigureCollection, Rectangle

figures = FigureCollection()
figures.add(Circle("wheel", Point(0, 0), 2.0))
figures.add(Rectangle("box", [Point(0, 2), Point(3, 0)]))

print(len(figures), figures.total_perimeter())
figures.sort_by_perimeter()
removed = figures.remove_longer_than(11.0)   # number of figures dropped

print(line_length(Point(0, 0), Point(3, 4)))   # 5.0
print(parse_point("1.5; -2"))                  # ( 1.5 , -2 )
```

Every figure has `is_valid()`, `perimeter()`, `describe()` and
`describe_perimeter()`. `Polygon.validation_problem()` returns the reason a
polygon is rejected, or `None`. `Point` supports `+`, `-`, `dot()`,
`cross()` and `polar_angle()`, and orders by `y`, then `x`.

The console pieces can be driven from any text streams:
`shapelab.figures.prompts.Prompter(stdin, stdout)` reads validated values,
`shapelab.figures.factory.FigureFactory` builds figures through a prompter,
and `shapelab.figures.commands.Facade(prompter).run()` runs the menu loop.

## The surface scene

`shapelab.surface.loader.read_scene(path, parameters)` reads a square CSV
grid of integer heights, maps the heights linearly into the range
`minimum`..`maximum` of a `NormalizationParameters` value, lays the grid out
with its `dx_step` and `dy_step` and joins each vertex to its neighbours in
the next row and column. An empty path gives `None`. Bad input – a file that
cannot be opened, an empty line, a grid that is not square, a maximum not
above the minimum, non-positive steps – raises `SceneLoadError`. A grid whose
heights are all equal normalises to NaN.

`shapelab.surface.facade.SceneFacade` keeps the loaded scene and applies
transforms to it:

- `load_scene(path, parameters)`
- `rotate_scene(x, y, z)` – degrees about each axis, applied X, then Y, then Z
- `move_scene(x, y, z)`
- `scale_scene(x, y, z)` – percentages, so `100` leaves the scene unchanged;
  a non-positive factor is reported in the result but still applied
- `clear_scene()` – after this, transforms raise `SceneLoadError`

Each operation returns an `OperationResult` whose `is_success()` tells whether
it went without complaint. `project_isometric(point)` gives the 2D drawing
coordinates of a point, and `scene_is_visible(scene, height, width)` checks
whether any edge of the first mesh starts inside the drawing area.

Matrices from `shapelab.surface.geometry` compose with `@`:

```python
from shapelab.surface.geometry import Point3, rotation_x, translation

matrix = translation(1, 2, 3) @ rotation_x(90)
print(matrix.transform_point(Point3(0, 1, 0)))
```

## The matrix type

```python
from shapelab.matrix import Matrix

m = Matrix.from_rows([[1, 2], [3, 4, 2], [5, 6, 7, 8]])   # short rows padded with 0
print(m)
print(m.row_count(), m.column_count(), m.is_square())
print(m[0, 1], m(1, 2))   # zero-based and one-based access to the same element

p = Matrix.from_rows([[1, 2], [3, 4]])
print(p + p)
print(p * p)
print(p * 2)
print(p / 2)
```

Shapes that do not match raise `ValueError`; indices outside the matrix raise
`IndexError`. A short demonstration runs with:

```
shapelab-matrix
```

## What it does not do

The surface scene has no command and no window: it does not draw or save
pictures. It offers the transforms, the isometric projection and the
visibility check, and leaves rendering to the caller.