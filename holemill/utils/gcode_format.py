"""G-code formatting utilities.

This is the only place motion commands become text.
"""
from datetime import datetime
from typing import List, Optional

from ..models import ARC_CCW, ARC_CW, FEED, RAPID, MachiningParameters, MotionCommand, ProgramInfo
from .units import unit_label, units_code

ARC_CODES = {ARC_CW: "G02", ARC_CCW: "G03"}

MODAL_SETUP = "G90 G40 G17"


def format_coordinate(value: float, precision: int = 4) -> str:
    """
    Format a coordinate value with appropriate decimal places.

    Args:
        value: The coordinate value
        precision: Number of decimal places (default 4)

    Returns:
        Formatted string representation, never "-0.0000"
    """
    # Adding 0.0 turns a rounded -0.0 into 0.0
    return f"{round(value, precision) + 0.0:.{precision}f}"


def format_feed(value: float) -> str:
    """Format a feed or plunge rate with 2 decimal places."""
    return format_coordinate(value, 2)


def format_comment(text: str) -> str:
    """Wrap text in a parenthesis comment, dropping any parens inside it."""
    cleaned = text.replace("(", "").replace(")", "").strip()
    return f"({cleaned})"


def generate_rapid_move(
    x: Optional[float] = None,
    y: Optional[float] = None,
    z: Optional[float] = None
) -> str:
    """
    Generate a G00 rapid move command.

    Args:
        x: X coordinate (optional)
        y: Y coordinate (optional)
        z: Z coordinate (optional)

    Returns:
        G00 command string
    """
    parts = ["G00"]
    if x is not None:
        parts.append(f"X{format_coordinate(x)}")
    if y is not None:
        parts.append(f"Y{format_coordinate(y)}")
    if z is not None:
        parts.append(f"Z{format_coordinate(z)}")
    return " ".join(parts)


def generate_linear_move(
    x: Optional[float] = None,
    y: Optional[float] = None,
    z: Optional[float] = None,
    feed: Optional[float] = None
) -> str:
    """
    Generate a G01 linear move command.

    Args:
        x: X coordinate (optional)
        y: Y coordinate (optional)
        z: Z coordinate (optional)
        feed: Feed rate (optional)

    Returns:
        G01 command string
    """
    parts = ["G01"]
    if x is not None:
        parts.append(f"X{format_coordinate(x)}")
    if y is not None:
        parts.append(f"Y{format_coordinate(y)}")
    if z is not None:
        parts.append(f"Z{format_coordinate(z)}")
    if feed is not None:
        parts.append(f"F{format_feed(feed)}")
    return " ".join(parts)


def generate_arc_move(
    code: str,
    x: float,
    y: float,
    i: float,
    j: float,
    z: Optional[float] = None
) -> str:
    """
    Generate a G02/G03 arc move command.

    Supports helical interpolation when Z is provided.

    Args:
        code: "G02" for CW, "G03" for CCW
        x: Destination X coordinate
        y: Destination Y coordinate
        i: I offset (X distance from arc start to center)
        j: J offset (Y distance from arc start to center)
        z: Destination Z coordinate (optional, for helical interpolation)

    Returns:
        Arc command string
    """
    parts = [
        code,
        f"X{format_coordinate(x)}",
        f"Y{format_coordinate(y)}"
    ]
    if z is not None:
        parts.append(f"Z{format_coordinate(z)}")
    parts.append(f"I{format_coordinate(i)}")
    parts.append(f"J{format_coordinate(j)}")
    return " ".join(parts)


def format_command(command: MotionCommand) -> str:
    """
    Render a MotionCommand as one line of G-code.

    Raises:
        ValueError: For an unknown command kind
    """
    if command.kind == RAPID:
        return generate_rapid_move(command.x, command.y, command.z)
    if command.kind == FEED:
        return generate_linear_move(command.x, command.y, command.z, command.feed)
    if command.kind in ARC_CODES:
        return generate_arc_move(
            ARC_CODES[command.kind],
            command.x, command.y, command.i, command.j, command.z
        )
    raise ValueError(f"Unknown motion command kind '{command.kind}'")


def generate_header(params: MachiningParameters, info: ProgramInfo) -> List[str]:
    """
    Generate the program header lines.

    Args:
        params: Machining parameters (units, diameters, safety plane)
        info: Comment and creation time

    Returns:
        List of header lines, starting with the % delimiter
    """
    created = info.created or datetime.now()
    label = unit_label(params.units)

    lines = [
        "%",
        format_comment(f"Created: {created.strftime('%Y-%m-%d %H:%M:%S')}"),
    ]
    if info.comment and info.comment.strip():
        lines.append(format_comment(info.comment))
    lines.append(format_comment(
        f"Hole diameter {format_coordinate(params.hole.diameter)} {label}, "
        f"depth {format_coordinate(params.hole.depth)} {label}, "
        f"tool diameter {format_coordinate(params.tool_diameter)} {label}"
    ))
    if params.counterbore is not None:
        lines.append(format_comment(
            f"Counterbore diameter {format_coordinate(params.counterbore.diameter)} {label}, "
            f"depth {format_coordinate(params.counterbore.depth)} {label}"
        ))
    lines.append(f"{units_code(params.units)} {MODAL_SETUP}")
    lines.append(generate_rapid_move(z=params.safety_height))
    return lines


def generate_footer(params: MachiningParameters) -> List[str]:
    """
    Generate the program footer lines.

    Returns:
        Retract, program end and closing % delimiter
    """
    return [
        generate_rapid_move(z=params.safety_height),
        "M30",
        "%",
    ]
