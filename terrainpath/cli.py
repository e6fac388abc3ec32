"""Command that compares the path distance over two terrain files."""

from __future__ import annotations

import sys
from collections.abc import Sequence

from terrainpath.terrain import Terrain
from terrainpath.tools import get_uint

_USAGE = (
    "Usage: terrainpath <num x> <num y> <x1> <y1> <x2> <y2> "
    "<input file before> <input file after>"
)


def run(argv: Sequence[str]) -> float:
    """Print both path distances and return the change between them."""
    num_x, num_y, i1, j1, i2, j2 = (get_uint(arg) for arg in argv[:6])
    distances = []
    for path in (argv[6], argv[7]):
        print(f"Processing input file: {path}")
        distance = Terrain(num_x, num_y, i1, j1, i2, j2, path).get_distance()
        print(f"Path distance: {distance:g} m")
        distances.append(distance)

    change = abs(distances[0] - distances[1])
    print(f"Change in distance: {change:g} m")
    return change


def main(argv: Sequence[str] | None = None) -> int:
    """Entry point; returns the process exit status."""
    args = list(sys.argv[1:] if argv is None else argv)
    if len(args) < 8:
        print(_USAGE, file=sys.stderr)
        return 1

    try:
        run(args)
    except Exception as exc:  # report any failure as the command's error
        print(f"Exception caught: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())