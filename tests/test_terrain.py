import math

import pytest

from terrainpath.terrain import Terrain


def _write(tmp_path, heights, name="heights.bin"):
    path = tmp_path / name
    path.write_bytes(bytes(heights))
    return path


def test_flat_grid_along_column(tmp_path):
    path = _write(tmp_path, [10] * 20)
    terrain = Terrain(4, 5, 1, 1, 2, 1, path)
    assert terrain.get_distance() == pytest.approx(240.0)


def test_flat_diagonal_of_single_cell(tmp_path):
    path = _write(tmp_path, [5] * 4)
    terrain = Terrain(2, 2, 0, 0, 1, 1, path)
    assert terrain.get_distance() == pytest.approx(math.hypot(30.0, 30.0))


def test_flat_distance_does_not_depend_on_level(tmp_path):
    low = _write(tmp_path, [10] * 20, "low.bin")
    high = _write(tmp_path, [200] * 20, "high.bin")
    d_low = Terrain(4, 5, 1, 1, 2, 1, low).get_distance()
    d_high = Terrain(4, 5, 1, 1, 2, 1, high).get_distance()
    assert d_low == pytest.approx(d_high)


def test_direction_of_path_does_not_matter(tmp_path):
    path = _write(tmp_path, [3, 9, 1, 7, 4, 8, 2, 6, 5, 0, 11, 12])
    forward = Terrain(4, 3, 0, 1, 2, 3, path).get_distance()
    backward = Terrain(4, 3, 2, 3, 0, 1, path).get_distance()
    assert forward == pytest.approx(backward)
    assert forward > 0


def test_raised_ground_lengthens_path(tmp_path):
    flat = _write(tmp_path, [0] * 9, "flat.bin")
    hill = _write(tmp_path, [0, 0, 0, 0, 50, 0, 0, 0, 0], "hill.bin")
    d_flat = Terrain(3, 3, 1, 0, 1, 2, flat).get_distance()
    d_hill = Terrain(3, 3, 1, 0, 1, 2, hill).get_distance()
    assert d_hill > d_flat


def test_distance_is_cached(tmp_path):
    path = _write(tmp_path, [10] * 20)
    terrain = Terrain(4, 5, 1, 1, 2, 1, path)
    first = terrain.get_distance()
    path.unlink()
    assert terrain.get_distance() == first


def test_extra_bytes_are_ignored(tmp_path):
    exact = _write(tmp_path, [1, 2, 3, 4], "exact.bin")
    longer = _write(tmp_path, [1, 2, 3, 4, 99, 99], "longer.bin")
    a = Terrain(2, 2, 0, 0, 1, 1, exact).get_distance()
    b = Terrain(2, 2, 0, 0, 1, 1, longer).get_distance()
    assert a == b


@pytest.mark.parametrize(("num_x", "num_y"), [(1, 5), (5, 1), (0, 0)])
def test_grid_too_small(tmp_path, num_x, num_y):
    path = _write(tmp_path, [0] * 25)
    with pytest.raises(ValueError, match="at least 2"):
        Terrain(num_x, num_y, 0, 0, 0, 1, path)


def test_same_start_and_end(tmp_path):
    path = _write(tmp_path, [0] * 4)
    with pytest.raises(ValueError, match="same"):
        Terrain(2, 2, 1, 1, 1, 1, path)


def test_row_index_checked_against_width(tmp_path):
    path = _write(tmp_path, [0] * 4)
    with pytest.raises(IndexError, match="greater than the size"):
        Terrain(2, 2, 2, 0, 0, 0, path)


def test_missing_file(tmp_path):
    missing = tmp_path / "nope.bin"
    with pytest.raises(OSError, match="Could not open input file"):
        Terrain(2, 2, 0, 0, 1, 1, missing)


def test_short_file(tmp_path):
    path = _write(tmp_path, [1, 2, 3])
    with pytest.raises(ValueError, match="Read 3 bytes but expected 4"):
        Terrain(2, 2, 0, 0, 1, 1, path)


def test_column_out_of_range_fails_on_distance(tmp_path):
    path = _write(tmp_path, [0] * 4)
    terrain = Terrain(2, 2, 0, 0, 1, 5, path)
    with pytest.raises(IndexError, match="out of range"):
        terrain.get_distance()


def test_row_beyond_height_fails_on_distance(tmp_path):
    path = _write(tmp_path, [0] * 8)
    terrain = Terrain(4, 2, 3, 0, 0, 0, path)
    with pytest.raises(IndexError, match="out of range"):
        terrain.get_distance()