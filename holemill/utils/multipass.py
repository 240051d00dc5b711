"""Multi-pass depth calculation utilities."""
import math
from typing import Iterator, List, Tuple

from .stepover import EPSILON


def split_depth(depth: float, axial_step: float) -> Tuple[int, float]:
    """
    Split a feature depth into full axial passes and a remainder.

    Args:
        depth: Total feature depth (positive)
        axial_step: Depth per axial pass

    Returns:
        Tuple of (full_passes, remainder). Remainders below EPSILON are 0.

    Raises:
        ValueError: If axial_step is not positive
    """
    if axial_step <= 0:
        raise ValueError(f"Axial step must be positive, got {axial_step}")

    full_passes = math.floor(depth / axial_step)
    remainder = depth - full_passes * axial_step
    if remainder <= EPSILON:
        remainder = 0.0
    return full_passes, remainder


def iter_axial_depths(
    top_z: float,
    depth: float,
    axial_step: float
) -> Iterator[Tuple[float, float]]:
    """
    Iterate over axial passes, yielding the Z span of each.

    Args:
        top_z: Z of the workpiece surface
        depth: Total feature depth below top_z
        axial_step: Depth per axial pass

    Yields:
        Tuple of (start_z, end_z) for every pass. The last end_z is
        exactly top_z - depth.
    """
    full_passes, remainder = split_depth(depth, axial_step)
    bottom_z = top_z - depth

    start_z = top_z
    for i in range(1, full_passes + 1):
        end_z = top_z - axial_step * i
        if i == full_passes and not remainder:
            end_z = bottom_z
        yield start_z, end_z
        start_z = end_z

    if remainder:
        yield start_z, bottom_z


def calculate_num_axial_passes(depth: float, axial_step: float) -> int:
    """
    Calculate the number of axial passes needed for a given depth.

    Returns:
        Full passes plus one if a remainder is left over
    """
    full_passes, remainder = split_depth(depth, axial_step)
    return full_passes + (1 if remainder else 0)


def calculate_pass_depths(top_z: float, depth: float, axial_step: float) -> List[float]:
    """Return the end Z of each axial pass."""
    return [end_z for _, end_z in iter_axial_depths(top_z, depth, axial_step)]
