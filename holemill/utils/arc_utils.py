"""Arc direction, offset and full circle emission utilities."""
from typing import List, Tuple

from ..models import ARC_CCW, ARC_CW, FEED, MotionCommand, Point


def calculate_arc_kind(direction: str) -> str:
    """
    Map a cutting direction to the arc command kind.

    Args:
        direction: 'cw' or 'ccw' (case insensitive)

    Returns:
        ARC_CW or ARC_CCW
    """
    hint_lower = direction.lower()
    if hint_lower == 'cw':
        return ARC_CW
    elif hint_lower == 'ccw':
        return ARC_CCW
    raise ValueError(f"Unknown cut direction '{direction}'. Expected 'cw' or 'ccw'")


def _turn_sign(direction: str) -> int:
    # +1 turns through +Y first (ccw), -1 through -Y first (cw)
    return 1 if calculate_arc_kind(direction) == ARC_CCW else -1


def calculate_ij_offsets(radius: float, direction: str) -> List[Tuple[float, float]]:
    """
    Calculate I, J offsets for the four arcs of a circle.

    I and J are the offsets from each arc's start point to the circle center,
    so every pair has magnitude equal to the radius.

    Args:
        radius: Circle radius
        direction: 'cw' or 'ccw'

    Returns:
        List of four (I, J) tuples in traversal order
    """
    sign = _turn_sign(direction)
    return [
        (-radius, 0.0),
        (0.0, -sign * radius),
        (radius, 0.0),
        (0.0, sign * radius),
    ]


def quadrant_points(center: Point, radius: float, direction: str) -> List[Tuple[float, float]]:
    """
    List the five points visited by a four-quadrant circle.

    The circle always starts and ends at (cx + r, cy). Counter-clockwise
    circles go through (cx, cy + r) first, clockwise ones through (cx, cy - r).

    Returns:
        Start point followed by the end point of each of the four arcs
    """
    cx, cy = center.x, center.y
    sign = _turn_sign(direction)
    return [
        (cx + radius, cy),
        (cx, cy + sign * radius),
        (cx - radius, cy),
        (cx, cy - sign * radius),
        (cx + radius, cy),
    ]


def calculate_arc_depths(start_z: float, end_z: float) -> List[float]:
    """
    Linearly interpolate Z over four arcs.

    The fourth value is end_z itself so rounding never shifts the final depth.
    """
    step_z = (start_z - end_z) / 4
    return [start_z - step_z, start_z - 2 * step_z, start_z - 3 * step_z, end_z]


def emit_circle(
    center: Point,
    radius: float,
    start_z: float,
    end_z: float,
    direction: str,
    strategy: str,
    feed_rate: float,
    plunge_rate: float,
    lead_in: bool = True
) -> List[MotionCommand]:
    """
    Build the moves for one full circle as four 90 degree arcs.

    Plunge strategy feeds straight down to end_z, moves out to the circle and
    cuts four flat arcs. Spiral strategy moves out to the circle at the
    current depth and descends helically, reaching end_z on the fourth arc.

    Args:
        center: Circle center
        radius: Tool center radius
        start_z: Depth at the start of the circle
        end_z: Depth at the end of the circle
        direction: 'cw' or 'ccw'
        strategy: 'plunge' or 'spiral'
        feed_rate: Feed for XY moves
        plunge_rate: Feed for vertical moves
        lead_in: Feed out to the circle start; False when the tool already
            sits there after the previous circle

    Returns:
        List of MotionCommand in emission order
    """
    kind = calculate_arc_kind(direction)
    points = quadrant_points(center, radius, direction)
    offsets = calculate_ij_offsets(radius, direction)

    if strategy == 'plunge':
        depths = [None] * 4
        commands = [MotionCommand(FEED, z=end_z, feed=plunge_rate)]
    elif strategy == 'spiral':
        depths = calculate_arc_depths(start_z, end_z)
        commands = []
    else:
        raise ValueError(f"Unknown strategy '{strategy}'. Expected 'plunge' or 'spiral'")

    if lead_in:
        start_x, start_y = points[0]
        commands.append(MotionCommand(FEED, x=start_x, y=start_y, feed=feed_rate))

    for quadrant in range(4):
        i, j = offsets[quadrant]
        x, y = points[quadrant + 1]
        commands.append(MotionCommand(kind, x=x, y=y, z=depths[quadrant], i=i, j=j))

    return commands
