#!/usr/bin/env python3

import argparse
import logging
import sys

from config import Config
from holemill.config_file import ConfigError, load_defaults
from holemill.gcode_generator import HoleArrayGenerator
from holemill.user_interface import (
    Prompter,
    confirm_overwrite,
    console_input,
    display_summary,
    get_machining_parameters,
    get_program_info
)
from holemill.utils.file_manager import open_output, output_exists, write_program
from holemill.utils.validators import ValidationError


def _build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="holemill",
        description="Generate G-code to bore a grid of holes, with optional counterbores.",
    )
    p.add_argument(
        "-c", "--config", default=None,
        help=f"Defaults file (default: {Config.CONFIG_FILE})",
    )
    p.add_argument("--preview", action="store_true",
                   help="Save a PNG toolpath preview next to the output file")
    p.add_argument("-v", "--verbose", action="store_true",
                   help="Log planning details")
    return p


def main(argv=None, input_func=console_input):
    """Main application entry point."""
    args = _build_parser().parse_args(argv)
    if args.verbose:
        logging.basicConfig(level=logging.DEBUG)

    print("=== Hole Array G-code Generator ===", file=sys.stderr)

    config_file = args.config or Config.CONFIG_FILE
    try:
        defaults = load_defaults(config_file)
    except ConfigError as e:
        print(f"\n❌ ERROR: {str(e)}", file=sys.stderr)
        return 1

    prompter = Prompter(defaults, input_func=input_func,
                        print_func=lambda *a: print(*a, file=sys.stderr))

    try:
        params = get_machining_parameters(prompter)
        info, output_file = get_program_info(prompter)
    except ConfigError as e:
        print(f"\n❌ ERROR: {str(e)}", file=sys.stderr)
        return 1
    except (EOFError, KeyboardInterrupt):
        print("\n❌ ERROR: Input ended before all parameters were entered", file=sys.stderr)
        return 1

    try:
        generator = HoleArrayGenerator(params)
    except ValidationError as e:
        print(f"\n❌ ERROR: Invalid parameters: {str(e)}", file=sys.stderr)
        return 1

    for warning in generator.warnings:
        print(f"⚠️  {warning}", file=sys.stderr)

    try:
        if output_exists(output_file) and not confirm_overwrite(prompter, output_file):
            print("Operation cancelled.", file=sys.stderr)
            return 0

        if not display_summary(prompter, params, generator.summary(), output_file):
            print("Operation cancelled.", file=sys.stderr)
            return 0
    except (EOFError, KeyboardInterrupt):
        print("\n❌ ERROR: Input ended before the run was confirmed", file=sys.stderr)
        return 1

    try:
        with open_output(output_file) as stream:
            count = write_program(stream, params, generator.commands(), info)
    except ConfigError as e:
        print(f"\n❌ ERROR: {str(e)}", file=sys.stderr)
        return 1

    if output_file:
        print(f"✅ G-code generated: {output_file} ({count} motion commands)", file=sys.stderr)

    if args.preview and output_file:
        from holemill.visualizer import save_plot_preview

        plot_filename = save_plot_preview(generator.commands(), params, output_file,
                                          dpi=Config.PREVIEW_DPI)
        print(f"Plot saved to: {plot_filename}", file=sys.stderr)

    return 0


if __name__ == "__main__":
    sys.exit(main())
