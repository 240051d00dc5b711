"""G-code generation for arrays of circular pockets.

This module turns machining parameters into an ordered stream of motion
commands:
- Radial stepover rings per feature (inside out)
- Axial passes per ring, either plunged flat circles or a helical descent
- A flattening circle at full depth for spiral cuts
- Counterbore before hole at every grid position, serpentine grid order
"""
import logging
from dataclasses import dataclass
from typing import Iterator, List

from .models import FEED, RAPID, Feature, MachiningParameters, MotionCommand, Point
from .pattern_expander import iter_grid_positions
from .utils.arc_utils import emit_circle
from .utils.multipass import calculate_num_axial_passes, iter_axial_depths
from .utils.stepover import plan_passes
from .utils.validators import check_parameters

logger = logging.getLogger(__name__)


@dataclass
class GenerationSummary:
    """Counts describing a generated program."""
    hole_count: int
    hole_radial_passes: int
    hole_axial_passes: int
    counterbore_radial_passes: int
    counterbore_axial_passes: int
    command_count: int


def synthesize_feature(
    center: Point,
    feature: Feature,
    pass_radius: float,
    params: MachiningParameters
) -> Iterator[MotionCommand]:
    """
    Cut one radial ring of a feature through its full depth.

    Sequence: rapid over the center, feed down to the origin Z, one circle
    per axial pass, a flat circle at the bottom for spiral cuts, feed back to
    the center, rapid up to the safety plane.

    Args:
        center: Feature center
        feature: Diameter and depth of the pocket
        pass_radius: Tool center radius for this ring
        params: Machining parameters

    Yields:
        MotionCommand in emission order
    """
    top_z = params.origin.z
    bottom_z = top_z - feature.depth

    yield MotionCommand(RAPID, x=center.x, y=center.y)
    yield MotionCommand(FEED, z=top_z, feed=params.plunge_rate)

    # Every circle ends on the ring start, so only the first one leads out
    for index, (start_z, end_z) in enumerate(
            iter_axial_depths(top_z, feature.depth, params.axial_step)):
        yield from emit_circle(
            center, pass_radius, start_z, end_z,
            params.direction, params.strategy,
            params.feed_rate, params.plunge_rate,
            lead_in=index == 0
        )

    if params.strategy == 'spiral':
        # The helix leaves a ramp on the floor
        yield from emit_circle(
            center, pass_radius, bottom_z, bottom_z,
            params.direction, params.strategy,
            params.feed_rate, params.plunge_rate,
            lead_in=False
        )

    yield MotionCommand(FEED, x=center.x, y=center.y, feed=params.feed_rate)
    yield MotionCommand(RAPID, z=params.safety_height)


def synthesize_hole(
    center: Point,
    feature: Feature,
    params: MachiningParameters
) -> Iterator[MotionCommand]:
    """
    Cut a complete feature: every radial ring, smallest first.

    Yields:
        MotionCommand in emission order
    """
    radii = plan_passes(feature.radius, params.tool_radius, params.stepover_distance)
    for radius in radii:
        yield from synthesize_feature(center, feature, radius, params)


def generate_program(params: MachiningParameters) -> Iterator[MotionCommand]:
    """
    Generate the motion commands for the whole hole array.

    Parameters are validated before the first command is produced, so an
    invalid set never yields a partial program.

    Args:
        params: Machining parameters

    Yields:
        MotionCommand in emission order

    Raises:
        ValidationError: If the parameters fail validation
    """
    check_parameters(params)
    logger.debug(
        "Generating %d x %d hole array (%s strategy)",
        params.x_count, params.y_count, params.strategy
    )
    return _iter_program(params)


def _iter_program(params: MachiningParameters) -> Iterator[MotionCommand]:
    positions = iter_grid_positions(
        params.origin, params.x_count, params.y_count,
        params.x_spacing, params.y_spacing
    )
    for position in positions:
        if params.counterbore is not None:
            yield from synthesize_hole(position.center, params.counterbore, params)
        yield from synthesize_hole(position.center, params.hole, params)


class HoleArrayGenerator:
    """G-code generator for a rectangular array of holes."""

    def __init__(self, params: MachiningParameters):
        """
        Initialize the generator.

        Args:
            params: Machining parameters for the run

        Raises:
            ValidationError: If the parameters fail validation
        """
        self.params = params
        self.warnings: List[str] = check_parameters(params)

    def commands(self) -> Iterator[MotionCommand]:
        """Return a fresh command stream for the whole array."""
        return _iter_program(self.params)

    def summary(self) -> GenerationSummary:
        """Count holes, passes and commands without writing anything."""
        params = self.params
        hole_radial = len(plan_passes(
            params.hole.radius, params.tool_radius, params.stepover_distance
        ))
        hole_axial = calculate_num_axial_passes(params.hole.depth, params.axial_step)

        cb_radial = 0
        cb_axial = 0
        if params.counterbore is not None:
            cb_radial = len(plan_passes(
                params.counterbore.radius, params.tool_radius, params.stepover_distance
            ))
            cb_axial = calculate_num_axial_passes(params.counterbore.depth, params.axial_step)

        return GenerationSummary(
            hole_count=params.x_count * params.y_count,
            hole_radial_passes=hole_radial,
            hole_axial_passes=hole_axial,
            counterbore_radial_passes=cb_radial,
            counterbore_axial_passes=cb_axial,
            command_count=sum(1 for _ in self.commands()),
        )
