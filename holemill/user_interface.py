import sys
from typing import Callable, Dict, Optional, Sequence, Tuple

from .config_file import get_choice, get_float, get_int
from .gcode_generator import GenerationSummary
from .models import DIRECTIONS, STRATEGIES, UNITS, Feature, MachiningParameters, Point3, ProgramInfo
from .utils.units import unit_label

InputFunc = Callable[[str], str]


def console_input(prompt: str) -> str:
    """Read a line from stdin, writing the prompt to stderr.

    stdout may be carrying the generated program.
    """
    sys.stderr.write(prompt)
    sys.stderr.flush()
    return input()


class Prompter:
    """Ask for values on the console, offering defaults from the defaults file."""

    def __init__(self, defaults: Dict[str, str], input_func: InputFunc = console_input, print_func=print):
        self.defaults = defaults
        self.input = input_func
        self.print = print_func

    def _ask(self, prompt: str, default) -> str:
        if default is not None:
            return self.input(f"{prompt} (default: {default}): ").strip()
        return self.input(f"{prompt}: ").strip()

    def get_float(self, prompt: str, key: str, fallback: Optional[float] = None) -> float:
        default = get_float(self.defaults, key, fallback)
        while True:
            user_input = self._ask(prompt, default)
            if not user_input and default is not None:
                return default
            try:
                return float(user_input)
            except ValueError:
                self.print("Please enter a valid number")

    def get_int(self, prompt: str, key: str, fallback: Optional[int] = None) -> int:
        default = get_int(self.defaults, key, fallback)
        while True:
            user_input = self._ask(prompt, default)
            if not user_input and default is not None:
                return default
            try:
                return int(user_input)
            except ValueError:
                self.print("Please enter a whole number")

    def get_choice(self, prompt: str, key: str, choices: Sequence[str], fallback: str) -> str:
        default = get_choice(self.defaults, key, choices, fallback)
        while True:
            user_input = self._ask(f"{prompt} ({'/'.join(choices)})", default).lower()
            if not user_input:
                return default
            if user_input in choices:
                return user_input
            self.print(f"Please enter one of: {', '.join(choices)}")

    def get_text(self, prompt: str, key: str) -> str:
        default = self.defaults.get(key) or None
        user_input = self._ask(prompt, default)
        if not user_input and default is not None:
            return default
        return user_input

    def confirm(self, prompt: str) -> bool:
        answer = self.input(f"{prompt} (y/n): ").lower().strip()
        return answer in ['y', 'yes']


def get_machining_parameters(prompter: Prompter) -> MachiningParameters:
    """Prompt user for machining parameters."""
    prompter.print("\n=== TOOL Parameters ===")
    units = prompter.get_choice("Units", 'units', UNITS, 'mm')
    label = unit_label(units)
    tool_diameter = prompter.get_float(f"Tool diameter ({label})", 'tool_diameter')
    direction = prompter.get_choice("Cut direction", 'direction', DIRECTIONS, 'ccw')
    stepover_percent = prompter.get_float("Stepover (% of tool diameter)", 'stepover', 50.0)
    safety_height = prompter.get_float(f"Safety plane ({label})", 'safety_plane')
    feed_rate = prompter.get_float(f"Feed rate ({label}/min)", 'feed_rate')

    prompter.print("\n=== HOLE Parameters ===")
    hole_diameter = prompter.get_float(f"Hole diameter ({label})", 'hole_diameter')
    hole_depth = prompter.get_float(f"Hole depth ({label})", 'hole_depth')
    strategy = prompter.get_choice("Axial strategy", 'strategy', STRATEGIES, 'plunge')
    axial_step = prompter.get_float(f"Axial step per pass ({label})", 'axial_step')
    plunge_rate = prompter.get_float(f"Plunge rate ({label}/min)", 'plunge_rate')

    counterbore = None
    cb_diameter = prompter.get_float(f"Counterbore diameter ({label}, 0 for none)", 'counterbore_diameter', 0.0)
    if cb_diameter > 0:
        cb_depth = prompter.get_float(f"Counterbore depth ({label})", 'counterbore_depth')
        counterbore = Feature(diameter=cb_diameter, depth=cb_depth)

    prompter.print("\n=== ARRAY Parameters ===")
    origin = Point3(
        x=prompter.get_float(f"Origin X ({label})", 'origin_x', 0.0),
        y=prompter.get_float(f"Origin Y ({label})", 'origin_y', 0.0),
        z=prompter.get_float(f"Origin Z ({label})", 'origin_z', 0.0),
    )
    x_count = prompter.get_int("Number of columns (X count)", 'x_count', 1)
    y_count = prompter.get_int("Number of rows (Y count)", 'y_count', 1)
    x_spacing = prompter.get_float(f"Column spacing ({label})", 'x_spacing', 0.0)
    y_spacing = prompter.get_float(f"Row spacing ({label})", 'y_spacing', 0.0)

    return MachiningParameters(
        units=units,
        tool_diameter=tool_diameter,
        direction=direction,
        stepover_percent=stepover_percent,
        feed_rate=feed_rate,
        plunge_rate=plunge_rate,
        safety_height=safety_height,
        strategy=strategy,
        axial_step=axial_step,
        origin=origin,
        x_count=x_count,
        y_count=y_count,
        x_spacing=x_spacing,
        y_spacing=y_spacing,
        hole=Feature(diameter=hole_diameter, depth=hole_depth),
        counterbore=counterbore,
    )


def get_program_info(prompter: Prompter) -> Tuple[ProgramInfo, str]:
    """Prompt for the header comment and output file name (blank for stdout)."""
    comment = prompter.get_text("Comment", 'comment')
    output_file = prompter.get_text("Output file (blank or - for standard output)", 'output_file')
    if output_file == '-':
        output_file = ''
    return ProgramInfo(comment=comment), output_file


def confirm_overwrite(prompter: Prompter, file_path: str) -> bool:
    """Ask before replacing an existing output file."""
    return prompter.confirm(f"File {file_path} already exists. Overwrite?")


def display_summary(
    prompter: Prompter,
    params: MachiningParameters,
    summary: GenerationSummary,
    output_file: str
) -> bool:
    """Display a summary of the operation."""
    label = unit_label(params.units)
    p = prompter.print

    p(f"\n=== Operation Summary ===")
    p(f"Output: {output_file or 'standard output'}")

    p(f"\nTool:")
    p(f"  Diameter: {params.tool_diameter} {label}")
    p(f"  Direction: {params.direction}")
    p(f"  Stepover: {params.stepover_percent}% ({params.stepover_distance:.4f} {label})")
    p(f"  Feed rate: {params.feed_rate:.2f} {label}/min")
    p(f"  Plunge rate: {params.plunge_rate:.2f} {label}/min")

    p(f"\nHoles:")
    p(f"  Diameter: {params.hole.diameter} {label}, depth {params.hole.depth} {label}")
    p(f"  Strategy: {params.strategy}, axial step {params.axial_step} {label}")
    p(f"  Passes per hole: {summary.hole_radial_passes} radial x {summary.hole_axial_passes} axial")
    if params.counterbore is not None:
        p(f"  Counterbore: {params.counterbore.diameter} {label}, depth {params.counterbore.depth} {label}")
        p(f"  Passes per counterbore: {summary.counterbore_radial_passes} radial x "
          f"{summary.counterbore_axial_passes} axial")

    p(f"\nArray:")
    p(f"  {params.x_count} x {params.y_count} = {summary.hole_count} holes")
    p(f"  Origin: ({params.origin.x}, {params.origin.y}, {params.origin.z})")
    p(f"  Spacing: {params.x_spacing} x {params.y_spacing} {label}")
    p(f"  Motion commands: {summary.command_count}")

    return prompter.confirm("\nProceed with G-code generation?")
