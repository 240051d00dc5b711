import os
from typing import Iterable, List, Tuple

import matplotlib.pyplot as plt
import numpy as np

from .models import ARC_CCW, RAPID, MachiningParameters, MotionCommand
from .pattern_expander import iter_grid_positions
from .utils.units import unit_label


def _arc_samples(start: Tuple[float, float], command: MotionCommand, segments: int) -> np.ndarray:
    """Sample an arc from start to the command's end point (excluding start)."""
    cx = start[0] + command.i
    cy = start[1] + command.j
    radius = np.hypot(command.i, command.j)

    a0 = np.arctan2(start[1] - cy, start[0] - cx)
    a1 = np.arctan2(command.y - cy, command.x - cx)
    if command.kind == ARC_CCW:
        if a1 <= a0:
            a1 += 2 * np.pi
    else:
        if a1 >= a0:
            a1 -= 2 * np.pi

    angles = np.linspace(a0, a1, segments + 1)[1:]
    return np.column_stack((cx + radius * np.cos(angles), cy + radius * np.sin(angles)))


def toolpath_xy(
    commands: Iterable[MotionCommand],
    segments_per_arc: int = 16
) -> Tuple[np.ndarray, np.ndarray]:
    """
    Flatten motion commands into XY polylines.

    Args:
        commands: Motion commands in emission order
        segments_per_arc: Line segments used to draw each arc

    Returns:
        Tuple of (cutting, rapid) arrays. Each is an N x 2 array of points
        where rows of NaN separate disconnected strokes.
    """
    cutting: List[Tuple[float, float]] = []
    rapids: List[Tuple[float, float]] = []
    nan = (np.nan, np.nan)
    x = y = None

    for command in commands:
        if command.x is None and command.y is None:
            continue
        new_x = command.x if command.x is not None else x
        new_y = command.y if command.y is not None else y
        if x is None:
            x, y = new_x, new_y
            continue

        if command.kind == RAPID:
            rapids.extend([(x, y), (new_x, new_y), nan])
        elif command.is_arc:
            cutting.append((x, y))
            cutting.extend(map(tuple, _arc_samples((x, y), command, segments_per_arc)))
            cutting.append(nan)
        else:
            cutting.extend([(x, y), (new_x, new_y), nan])
        x, y = new_x, new_y

    return np.array(cutting, dtype=float).reshape(-1, 2), np.array(rapids, dtype=float).reshape(-1, 2)


def plot_toolpath_preview(commands: Iterable[MotionCommand], params: MachiningParameters,
                          output_file: str = None, dpi: int = 150, font_size: int = 8,
                          show: bool = True):
    """
    Generate a visual preview of the hole array toolpath.

    Args:
        commands: Motion commands to draw
        params: Machining parameters for outlines and labels
        output_file: Optional path to save the plot
        dpi: Plot resolution
        font_size: Font size for annotations
        show: Open an interactive window after drawing
    """
    label = unit_label(params.units)
    cutting, rapids = toolpath_xy(commands)

    fig, ax = plt.subplots(figsize=(10, 8), dpi=dpi)

    if len(rapids):
        ax.plot(rapids[:, 0], rapids[:, 1], color='gray', linestyle=':', linewidth=1, label="Rapid")
    if len(cutting):
        ax.plot(cutting[:, 0], cutting[:, 1], color='blue', linewidth=1, label="Tool center")

    positions = list(iter_grid_positions(
        params.origin, params.x_count, params.y_count, params.x_spacing, params.y_spacing
    ))
    for index, pos in enumerate(positions):
        hole = plt.Circle((pos.x, pos.y), params.hole.radius, color='red', fill=False,
                          linewidth=2, linestyle='--', label="Hole" if index == 0 else "")
        ax.add_patch(hole)
        if params.counterbore is not None:
            cb = plt.Circle((pos.x, pos.y), params.counterbore.radius, color='green', fill=False,
                            linewidth=1.5, linestyle='-.', label="Counterbore" if index == 0 else "")
            ax.add_patch(cb)
        ax.text(pos.x, pos.y, str(index + 1), fontsize=font_size,
                verticalalignment='center', horizontalalignment='center')

    ax.set_xlabel(f"X-axis ({label})", fontsize=font_size + 2)
    ax.set_ylabel(f"Y-axis ({label})", fontsize=font_size + 2)
    ax.set_title(f"Hole Array Preview\nHole: ⌀{params.hole.diameter:.3f} {label} "
                 f"(depth: {params.hole.depth:.3f}), Tool: ⌀{params.tool_diameter:.3f} {label}, "
                 f"{params.strategy}", fontsize=font_size + 4)
    ax.legend(fontsize=font_size)
    ax.grid(True, alpha=0.3)
    ax.set_aspect('equal', adjustable='datalim')
    ax.margins(0.1)

    plt.tight_layout()

    if output_file:
        plt.savefig(output_file, dpi=dpi, bbox_inches='tight')

    if show:
        plt.show()
    plt.close(fig)


def save_plot_preview(commands: Iterable[MotionCommand], params: MachiningParameters,
                      base_filename: str, dpi: int = 150) -> str:
    """
    Save a plot preview next to the output program.

    Args:
        commands: Motion commands to draw
        params: Machining parameters
        base_filename: Program path; its extension is replaced with _preview.png

    Returns:
        Path of the saved image
    """
    plot_filename = f"{os.path.splitext(base_filename)[0]}_preview.png"
    plot_toolpath_preview(commands, params, plot_filename, dpi=dpi, font_size=10, show=False)
    return plot_filename
