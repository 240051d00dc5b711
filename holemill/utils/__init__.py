"""Shared utility modules for hole array generation."""

from .units import units_code, unit_label
from .stepover import stepover_distance, calculate_cutter_path_radius, iter_pass_radii, plan_passes
from .multipass import split_depth, iter_axial_depths, calculate_num_axial_passes, calculate_pass_depths
from .arc_utils import (
    calculate_arc_kind,
    calculate_ij_offsets,
    quadrant_points,
    calculate_arc_depths,
    emit_circle
)
from .gcode_format import (
    format_coordinate,
    format_feed,
    format_comment,
    format_command,
    generate_header,
    generate_footer,
    generate_rapid_move,
    generate_linear_move,
    generate_arc_move
)
from .validators import (
    ValidationError,
    validate_feature,
    validate_grid,
    validate_stepdown,
    validate_feed_rates,
    validate_parameters,
    check_parameters
)
from .file_manager import output_exists, open_output, write_program

__all__ = [
    # units
    'units_code',
    'unit_label',
    # stepover
    'stepover_distance',
    'calculate_cutter_path_radius',
    'iter_pass_radii',
    'plan_passes',
    # multipass
    'split_depth',
    'iter_axial_depths',
    'calculate_num_axial_passes',
    'calculate_pass_depths',
    # arc_utils
    'calculate_arc_kind',
    'calculate_ij_offsets',
    'quadrant_points',
    'calculate_arc_depths',
    'emit_circle',
    # gcode_format
    'format_coordinate',
    'format_feed',
    'format_comment',
    'format_command',
    'generate_header',
    'generate_footer',
    'generate_rapid_move',
    'generate_linear_move',
    'generate_arc_move',
    # validators
    'ValidationError',
    'validate_feature',
    'validate_grid',
    'validate_stepdown',
    'validate_feed_rates',
    'validate_parameters',
    'check_parameters',
    # file_manager
    'output_exists',
    'open_output',
    'write_program',
]
