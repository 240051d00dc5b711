"""Tests for holemill/pattern_expander.py module."""
from holemill.models import Point3
from holemill.pattern_expander import expand_grid_pattern, iter_grid_positions


class TestIterGridPositions:
    """Tests for iter_grid_positions."""

    def test_two_by_two_serpentine(self):
        """Column 1 rows ascending, column 2 rows descending."""
        positions = list(iter_grid_positions(Point3(0, 0, 0), 2, 2, 10, 10))
        assert [(p.x, p.y) for p in positions] == [(0, 0), (0, 10), (10, 10), (10, 0)]
        assert [(p.column, p.row) for p in positions] == [(1, 1), (1, 2), (2, 2), (2, 1)]

    def test_three_columns(self):
        positions = list(iter_grid_positions(Point3(0, 0, 0), 3, 3, 5, 2))
        rows = [p.row for p in positions]
        assert rows == [1, 2, 3, 3, 2, 1, 1, 2, 3]
        assert positions[-1].x == 10
        assert positions[-1].y == 4

    def test_consecutive_positions_are_neighbours(self):
        """Serpentine order never jumps back across the grid."""
        positions = list(iter_grid_positions(Point3(0, 0, 0), 4, 5, 1.0, 1.0))
        for a, b in zip(positions, positions[1:]):
            assert abs(a.x - b.x) + abs(a.y - b.y) == 1.0

    def test_origin_offset(self):
        positions = list(iter_grid_positions(Point3(12.5, -3.0, 1.0), 1, 3, 0.0, 4.0))
        assert [(p.x, p.y) for p in positions] == [(12.5, -3.0), (12.5, 1.0), (12.5, 5.0)]

    def test_single_row(self):
        positions = list(iter_grid_positions(Point3(0, 0, 0), 3, 1, 7, 0))
        assert [(p.x, p.y) for p in positions] == [(0, 0), (7, 0), (14, 0)]

    def test_zero_count_yields_nothing(self):
        assert list(iter_grid_positions(Point3(0, 0, 0), 0, 3, 1, 1)) == []
        assert list(iter_grid_positions(Point3(0, 0, 0), 3, 0, 1, 1)) == []

    def test_center_property(self):
        position = next(iter_grid_positions(Point3(1.0, 2.0, 0), 1, 1, 0, 0))
        assert (position.center.x, position.center.y) == (1.0, 2.0)


class TestExpandGridPattern:
    """Tests for expand_grid_pattern."""

    def test_expand(self):
        points = expand_grid_pattern(0, 0, 10, 10, 2, 2)
        assert points == [(0, 0), (0, 10), (10, 10), (10, 0)]

    def test_count(self):
        assert len(expand_grid_pattern(0, 0, 1, 1, 4, 3)) == 12
