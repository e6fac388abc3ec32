# terrainpath

`terrainpath` measures the distance over the ground between two cells of a
gridded elevation map. It also reports how much that distance changes between
two surveys of the same area.

## Input data

Each elevation file is a raw grid of unsigned 8-bit heights. The grid has
`num_x` columns and `num_y` rows and is stored row by row. Each cell spans
30 m horizontally, and each height unit stands for 11 m vertically.

The first `num_x * num_y` bytes of the file are read. Any bytes after them are
ignored.

## How the distance is found

The grid is turned into points and split into two triangles per cell. A
vertical plane is laid through the start and end cells. The distance is the
total length of all the line segments where that plane crosses the triangles.
The plane runs across the whole grid, so the segments are not cut off at the
two chosen cells.

## Command line

```
terrainpath <num x> <num y> <x1> <y1> <x2> <y2> <input file before> <input file after>
```

`terrainpath` is installed as a console script. `python -m terrainpath.cli`
runs the same command.

Each point is given as a pair. The first number of the pair is the row index
and the second is the column index.

The command does the following:

1. Reads each file in turn and prints `Processing input file: <path>`.
2. Prints `Path distance: <d> m` for that file.
3. Prints `Change in distance: <d> m`, the absolute difference between the two
   distances.

If fewer than eight arguments are given, the command prints a usage line to
standard error and exits with status 1. Any other error is printed to standard
error as `Exception caught: <message>`, and the exit status is again 1. On
success the exit status is 0.

Numbers on the command line go through `terrainpath.tools.get_uint`. Its
parsing is lenient:

- Leading whitespace is skipped.
- Anything after the leading digits is ignored.
- Text that does not start with a number counts as 0.
- A negative number raises `ValueError`.
- `None` raises `ValueError`.

Example:

```
terrainpath 512 512 10 20 300 400 before.data after.data
```

## Library use

```python
from terrainpath.terrain import Terrain

terrain = Terrain(512, 512, 10, 20, 300, 400, "before.data")
print(terrain.get_distance())
```

The arguments are `Terrain(num_x, num_y, i1, j1, i2, j2, path)`. Here `(i1, j1)`
and `(i2, j2)` are the (row, column) indices of the two cells.

The constructor checks its arguments and reads the file. It raises:

| Case | Exception |
| --- | --- |
| `num_x` or `num_y` smaller than 2 | `ValueError` |
| Start and end are the same cell | `ValueError` |
| `i1` or `i2` not smaller than `num_x` | `IndexError` |
| File cannot be opened | `OSError` |
| File holds fewer than `num_x * num_y` bytes | `ValueError` |

`get_distance()` computes the distance on its first call and caches the result.
It raises `IndexError` if a start or end index lies outside the grid.

`terrainpath.cli.run(argv)` takes the eight command arguments, without the
program name. It prints the same lines as the command and returns the change
in distance. `terrainpath.cli.main(argv=None)` returns the exit status.

## Limits

The package works only with raw 8-bit height grids at the fixed resolutions
given above. It reports distances as numbers. It does not save, export or plot
the path segments.

## Tests

```
pip install -e .[test]
pytest
```