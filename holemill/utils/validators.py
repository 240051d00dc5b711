"""Parameter and geometry validation utilities."""
from typing import List, Optional, Tuple

from ..models import DIRECTIONS, STRATEGIES, UNITS, Feature, MachiningParameters


class ValidationError(Exception):
    """Raised when parameters would produce an unsafe or endless program."""
    pass


def validate_feature(
    feature: Optional[Feature],
    tool_diameter: float,
    label: str
) -> List[str]:
    """
    Check that a feature can be cut with the tool.

    The tool must be strictly smaller than the feature, otherwise it would
    gouge the wall or jam on entry.

    Args:
        feature: Feature to check (None means not configured)
        tool_diameter: End mill diameter
        label: Name used in messages ('Hole', 'Counterbore')

    Returns:
        List of error messages (empty if valid)
    """
    errors = []
    if feature is None:
        return errors

    if feature.diameter <= tool_diameter:
        errors.append(
            f"{label} diameter ({feature.diameter}) must be larger than "
            f"tool diameter ({tool_diameter})"
        )
    if feature.depth <= 0:
        errors.append(f"{label} depth ({feature.depth}) must be positive")

    return errors


def validate_grid(
    x_count: int,
    y_count: int,
    x_spacing: float,
    y_spacing: float
) -> List[str]:
    """
    Validate grid counts and spacing.

    Spacing only matters on an axis with more than one position.

    Returns:
        List of error messages (empty if valid)
    """
    errors = []
    if x_count < 1:
        errors.append(f"X count ({x_count}) must be at least 1")
    if y_count < 1:
        errors.append(f"Y count ({y_count}) must be at least 1")
    if x_count > 1 and x_spacing <= 0:
        errors.append(f"X spacing ({x_spacing}) must be positive when X count is {x_count}")
    if y_count > 1 and y_spacing <= 0:
        errors.append(f"Y spacing ({y_spacing}) must be positive when Y count is {y_count}")
    return errors


def validate_stepdown(
    axial_step: float,
    tool_diameter: float,
    max_stepdown_factor: float = 1.0
) -> List[str]:
    """
    Warn when the axial step is aggressive for the tool.

    Args:
        axial_step: Depth per axial pass
        tool_diameter: End mill diameter
        max_stepdown_factor: Maximum comfortable ratio of step to diameter

    Returns:
        List of warning messages
    """
    warnings = []

    if axial_step <= 0 or tool_diameter <= 0:
        return warnings

    ratio = axial_step / tool_diameter
    if ratio > max_stepdown_factor:
        warnings.append(
            f"Axial step ({axial_step:.4f}) is {ratio * 100:.0f}% of tool diameter "
            f"({tool_diameter:.4f}). Consider reducing it to avoid tool breakage."
        )

    return warnings


def validate_feed_rates(
    feed_rate: float,
    plunge_rate: float
) -> List[str]:
    """
    Validate feed rate and plunge rate relationship.

    Plunge rate typically should not exceed feed rate.

    Returns:
        List of warning messages
    """
    warnings = []

    if plunge_rate > feed_rate:
        warnings.append(
            f"Plunge rate ({plunge_rate}) exceeds feed rate ({feed_rate}). "
            f"Verify this is intentional for your material and tool."
        )

    return warnings


def validate_parameters(params: MachiningParameters) -> Tuple[List[str], List[str]]:
    """
    Validate a full parameter set before generation.

    Errors block generation. Warnings are reported but do not stop it.

    Args:
        params: Machining parameters to check

    Returns:
        Tuple of (errors, warnings) lists
    """
    errors = []
    warnings = []

    if params.units not in UNITS:
        errors.append(f"Units must be one of {', '.join(UNITS)}, got '{params.units}'")
    if params.direction not in DIRECTIONS:
        errors.append(f"Direction must be one of {', '.join(DIRECTIONS)}, got '{params.direction}'")
    if params.strategy not in STRATEGIES:
        errors.append(f"Strategy must be one of {', '.join(STRATEGIES)}, got '{params.strategy}'")

    if params.tool_diameter <= 0:
        errors.append(f"Tool diameter ({params.tool_diameter}) must be positive")
    if params.stepover_percent <= 0:
        errors.append(f"Stepover ({params.stepover_percent}%) must be positive")
    elif params.stepover_percent > 100:
        warnings.append(
            f"Stepover ({params.stepover_percent}%) is more than the tool diameter "
            f"and will leave material between passes."
        )
    if params.axial_step <= 0:
        errors.append(f"Axial step ({params.axial_step}) must be positive")
    if params.feed_rate <= 0:
        errors.append(f"Feed rate ({params.feed_rate}) must be positive")
    if params.plunge_rate <= 0:
        errors.append(f"Plunge rate ({params.plunge_rate}) must be positive")

    errors.extend(validate_grid(
        params.x_count, params.y_count, params.x_spacing, params.y_spacing
    ))
    errors.extend(validate_feature(params.hole, params.tool_diameter, 'Hole'))
    errors.extend(validate_feature(params.counterbore, params.tool_diameter, 'Counterbore'))

    warnings.extend(validate_stepdown(params.axial_step, params.tool_diameter))
    warnings.extend(validate_feed_rates(params.feed_rate, params.plunge_rate))

    if params.counterbore is not None:
        if params.counterbore.diameter <= params.hole.diameter:
            warnings.append(
                f"Counterbore diameter ({params.counterbore.diameter}) is not larger "
                f"than hole diameter ({params.hole.diameter})"
            )
        if params.counterbore.depth >= params.hole.depth:
            warnings.append(
                f"Counterbore depth ({params.counterbore.depth}) is not shallower "
                f"than hole depth ({params.hole.depth})"
            )

    if params.safety_height <= params.origin.z:
        warnings.append(
            f"Safety plane ({params.safety_height}) is not above the origin Z "
            f"({params.origin.z}); rapids between holes may hit the workpiece."
        )

    return errors, warnings


def check_parameters(params: MachiningParameters) -> List[str]:
    """
    Validate parameters and raise on the first set of errors.

    Returns:
        Warning messages

    Raises:
        ValidationError: If any blocking error was found
    """
    errors, warnings = validate_parameters(params)
    if errors:
        raise ValidationError("; ".join(errors))
    return warnings
