"""Radial stepover planning for circular pockets."""
import logging
import math
from typing import Iterator, List

logger = logging.getLogger(__name__)

# Remainders smaller than this are floating point noise, not material
EPSILON = 1e-9


def stepover_distance(tool_diameter: float, stepover_percent: float) -> float:
    """Convert a stepover percentage of the tool diameter to a distance."""
    return tool_diameter * stepover_percent / 100


def calculate_cutter_path_radius(feature_radius: float, tool_radius: float) -> float:
    """
    Radius the tool center travels when the tool wall is flush with the feature wall.

    Args:
        feature_radius: Radius of the pocket
        tool_radius: Radius of the end mill

    Returns:
        feature_radius - tool_radius
    """
    return feature_radius - tool_radius


def iter_pass_radii(
    feature_radius: float,
    tool_radius: float,
    stepover: float
) -> Iterator[float]:
    """
    Iterate over the ring radii needed to clear a circular pocket.

    Rings are produced inside out, one stepover apart, and the last ring is
    always exactly the cutter path radius.

    Args:
        feature_radius: Radius of the pocket
        tool_radius: Radius of the end mill
        stepover: Radial distance between successive rings

    Yields:
        Tool center radius for each ring, strictly increasing

    Raises:
        ValueError: If stepover is not positive or the tool does not fit
    """
    if stepover <= 0:
        raise ValueError(f"Stepover must be positive, got {stepover}")

    cutter_path = calculate_cutter_path_radius(feature_radius, tool_radius)
    if cutter_path <= 0:
        raise ValueError(
            f"Feature radius {feature_radius} must exceed tool radius {tool_radius}"
        )

    if cutter_path <= stepover:
        yield cutter_path
        return

    count = math.floor(cutter_path / stepover)
    for ring in range(1, count):
        yield ring * stepover

    last = count * stepover
    if cutter_path - last > EPSILON:
        yield last
    # A remainder below EPSILON snaps the last ring onto the wall
    yield cutter_path


def plan_passes(
    feature_radius: float,
    tool_radius: float,
    stepover: float
) -> List[float]:
    """
    Plan the ordered ring radii for a pocket.

    Returns:
        List of tool center radii, smallest first
    """
    radii = list(iter_pass_radii(feature_radius, tool_radius, stepover))
    logger.debug(
        "Planned %d radial pass(es) for radius %s with tool radius %s",
        len(radii), feature_radius, tool_radius
    )
    return radii
