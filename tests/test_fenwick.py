from itertools import accumulate

import pytest

from algokit.fenwick import Fenwick, Fenwick2D, range_sum

VALUES = [3, -1, 4, 1, -5, 9, 2, 6]


def build():
    f = Fenwick(len(VALUES))
    for i, v in enumerate(VALUES, start=1):
        f.add(i, v)
    return f


def test_prefix_sums():
    f = build()
    for i in range(len(VALUES) + 1):
        assert f.prefix_sum(i) == sum(VALUES[:i])


def test_range_sums_after_update():
    f = build()
    values = list(VALUES)
    f.add(4, 10)
    values[3] += 10
    for left in range(1, len(values) + 1):
        for right in range(left, len(values) + 1):
            assert f.range_sum(left, right) == sum(values[left - 1:right])


def test_add_out_of_range():
    f = Fenwick(3)
    with pytest.raises(IndexError):
        f.add(0, 1)
    with pytest.raises(IndexError):
        f.add(4, 1)


def test_2d_rect_sums():
    grid = [[1, 2, 3], [4, 5, 6], [7, 8, 9], [-1, -2, -3]]
    f = Fenwick2D(4, 3)
    for i, row in enumerate(grid, start=1):
        for j, v in enumerate(row, start=1):
            f.add(i, j, v)
    for a in range(1, 5):
        for c in range(a, 5):
            for b in range(1, 4):
                for d in range(b, 4):
                    expected = sum(sum(row[b - 1:d]) for row in grid[a - 1:c])
                    assert f.rect_sum(a, b, c, d) == expected
    assert f.prefix_sum(4, 3) == sum(map(sum, grid))


def test_2d_add_out_of_range():
    f = Fenwick2D(2, 2)
    with pytest.raises(IndexError):
        f.add(3, 1, 1)


def test_range_sum_on_prefix_array():
    prefix = list(accumulate(VALUES))
    assert range_sum(prefix, 1, 3) == sum(VALUES[1:4])
    assert range_sum(prefix, 0, 0) == VALUES[0]
    assert range_sum(prefix, -5, 100) == sum(VALUES)
    assert range_sum(prefix, 5, 2) == 0