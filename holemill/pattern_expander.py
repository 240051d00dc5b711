"""Pattern expansion utilities for hole arrays.

Expands a rectangular grid definition into hole centers, visited in
serpentine order so consecutive holes are always neighbours.
"""
from typing import Iterator, List, Tuple

from .models import GridPosition, Point3


def iter_grid_positions(
    origin: Point3,
    x_count: int,
    y_count: int,
    x_spacing: float,
    y_spacing: float
) -> Iterator[GridPosition]:
    """
    Iterate over grid positions column by column.

    Odd columns are walked with rows ascending, even columns with rows
    descending. Each position is the previous one plus signed spacing.

    Args:
        origin: First hole center (Z is ignored here)
        x_count: Number of columns
        y_count: Number of rows
        x_spacing: Distance between columns
        y_spacing: Distance between rows

    Yields:
        GridPosition for every hole, in cutting order
    """
    if x_count < 1 or y_count < 1:
        return

    x = origin.x
    y = origin.y
    row_step = 1

    for column in range(1, x_count + 1):
        if column > 1:
            x += x_spacing
            row_step = -row_step

        rows = range(1, y_count + 1) if row_step > 0 else range(y_count, 0, -1)
        for index, row in enumerate(rows):
            if index > 0:
                y += row_step * y_spacing
            yield GridPosition(column=column, row=row, x=x, y=y)


def expand_grid_pattern(
    start_x: float,
    start_y: float,
    x_spacing: float,
    y_spacing: float,
    x_count: int,
    y_count: int
) -> List[Tuple[float, float]]:
    """
    Expand a grid pattern into individual points in serpentine order.

    Args:
        start_x: Starting X coordinate
        start_y: Starting Y coordinate
        x_spacing: Spacing between columns
        y_spacing: Spacing between rows
        x_count: Number of columns
        y_count: Number of rows

    Returns:
        List of (x, y) coordinate tuples
    """
    origin = Point3(start_x, start_y, 0.0)
    return [
        (pos.x, pos.y)
        for pos in iter_grid_positions(origin, x_count, y_count, x_spacing, y_spacing)
    ]
