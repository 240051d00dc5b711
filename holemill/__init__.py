"""G-code generation for arrays of bored holes."""

__version__ = '0.1.0'

from .models import (
    Point,
    Point3,
    Feature,
    MachiningParameters,
    GridPosition,
    MotionCommand,
    ProgramInfo
)
from .gcode_generator import (
    HoleArrayGenerator,
    GenerationSummary,
    synthesize_feature,
    synthesize_hole,
    generate_program
)
from .pattern_expander import iter_grid_positions, expand_grid_pattern
from .config_file import ConfigError, load_defaults
from .utils.validators import ValidationError

__all__ = [
    # Models
    'Point',
    'Point3',
    'Feature',
    'MachiningParameters',
    'GridPosition',
    'MotionCommand',
    'ProgramInfo',
    # Main generator
    'HoleArrayGenerator',
    'GenerationSummary',
    'synthesize_feature',
    'synthesize_hole',
    'generate_program',
    # Pattern expansion
    'iter_grid_positions',
    'expand_grid_pattern',
    # Configuration
    'ConfigError',
    'load_defaults',
    'ValidationError',
]
