"""Length of the cut made by a vertical plane through a height-grid terrain."""

from __future__ import annotations

import math
import os
from collections.abc import Iterator, Sequence

HORIZONTAL_RESOLUTION = 30.0
VERTICAL_RESOLUTION = 11.0

Point = tuple[float, float, float]
Triangle = tuple[Point, Point, Point]
Segment = tuple[Point, Point]


def _sub(a: Point, b: Point) -> Point:
    return (a[0] - b[0], a[1] - b[1], a[2] - b[2])


def _dot(a: Point, b: Point) -> float:
    return a[0] * b[0] + a[1] * b[1] + a[2] * b[2]


def _crossing(a: Point, da: float, b: Point, db: float) -> Point:
    t = da / (da - db)
    return (
        a[0] + t * (b[0] - a[0]),
        a[1] + t * (b[1] - a[1]),
        a[2] + t * (b[2] - a[2]),
    )


def _cut(triangle: Triangle, origin: Point, normal: Point) -> Segment | None:
    """Return the segment where the plane crosses the triangle, if any.

    Point contacts, coplanar triangles and misses give None.
    """
    signed = [(vertex, _dot(normal, _sub(vertex, origin))) for vertex in triangle]
    on_plane = [vertex for vertex, d in signed if d == 0]

    if len(on_plane) == 3:
        return None
    if len(on_plane) == 2:
        return (on_plane[0], on_plane[1])

    above = [(vertex, d) for vertex, d in signed if d > 0]
    below = [(vertex, d) for vertex, d in signed if d < 0]
    if not above or not below:
        return None

    ends = on_plane + [
        _crossing(a, da, b, db) for a, da in above for b, db in below
    ]
    return (ends[0], ends[1])


class Terrain:
    """A grid of 8-bit heights and a path between two of its cells.

    The distance is the total length of the lines where the vertical plane
    through the two cells crosses the triangulated terrain.
    """

    def __init__(
        self,
        num_x: int,
        num_y: int,
        i1: int,
        j1: int,
        i2: int,
        j2: int,
        path: str | os.PathLike[str],
    ) -> None:
        if num_x < 2 or num_y < 2:
            raise ValueError(
                "Number of pixels in the x and y directions must be at least 2"
            )
        if i1 == i2 and j1 == j2:
            raise ValueError("Path start and end points are the same")
        if i1 >= num_x or i2 >= num_x:
            raise IndexError("Given indices are greater than the size")

        self._num_x = num_x
        self._num_y = num_y
        self._start = (i1, j1)
        self._end = (i2, j2)
        self._heights = self._read_heights(path)
        self._segments: list[Segment] = []
        self._distance: float | None = None

    def _read_heights(self, path: str | os.PathLike[str]) -> bytes:
        try:
            with open(path, "rb") as stream:
                expected = self._num_x * self._num_y
                data = stream.read(expected)
        except OSError as exc:
            raise OSError(f"Could not open input file: {os.fspath(path)}") from exc

        if len(data) != expected:
            raise ValueError(f"Read {len(data)} bytes but expected {expected}")
        return data

    def _index(self, i: int, j: int) -> int:
        if i >= self._num_y or j >= self._num_x:
            raise IndexError(
                f"When getting 1D index, input indices i = {i} and j = {j} are out "
                f"of range for numX = {self._num_x} and numY = {self._num_y}"
            )
        return i * self._num_x + j

    def _ground_points(self) -> list[Point]:
        return [
            (
                j * HORIZONTAL_RESOLUTION,
                i * HORIZONTAL_RESOLUTION,
                self._heights[self._index(i, j)] * VERTICAL_RESOLUTION,
            )
            for i in range(self._num_y)
            for j in range(self._num_x)
        ]

    def _triangles(self, points: Sequence[Point]) -> Iterator[Triangle]:
        for row in range(self._num_y - 1):
            for col in range(self._num_x - 1):
                top_left = points[self._index(row, col)]
                top_right = points[self._index(row, col + 1)]
                bottom_left = points[self._index(row + 1, col)]
                bottom_right = points[self._index(row + 1, col + 1)]
                yield (top_left, bottom_left, top_right)
                yield (bottom_right, top_right, bottom_left)

    def _plane(self, points: Sequence[Point]) -> tuple[Point, Point]:
        p1 = points[self._index(*self._start)]
        p2 = points[self._index(*self._end)]
        if p1 == p2:
            raise ValueError("Input points are equal when calculating plane")

        dx = p2[0] - p1[0]
        dy = p2[1] - p1[1]
        length = math.hypot(dx, dy)
        if length == 0:
            raise ValueError("Plane normal vector length is zero")

        # Horizontal direction crossed with the vertical axis.
        normal = (dy / length, -dx / length, 0.0)
        return p1, normal

    def get_distance(self) -> float:
        """Return the path distance, computing it on first use."""
        if self._distance is None:
            points = self._ground_points()
            origin, normal = self._plane(points)
            self._segments = [
                segment
                for triangle in self._triangles(points)
                if (segment := _cut(triangle, origin, normal)) is not None
            ]
            self._distance = sum(math.dist(a, b) for a, b in self._segments)
        return self._distance