"""Output destination and program writing utilities."""
import os
import sys
from contextlib import contextmanager
from typing import Iterable, Iterator, Optional, TextIO

from ..config_file import ConfigError
from ..models import MachiningParameters, MotionCommand, ProgramInfo
from .gcode_format import format_command, generate_footer, generate_header


def output_exists(file_path: Optional[str]) -> bool:
    """True if writing to file_path would replace an existing file."""
    return bool(file_path) and os.path.exists(file_path)


@contextmanager
def open_output(file_path: Optional[str]) -> Iterator[TextIO]:
    """
    Open the program destination once for writing.

    A blank or None path writes to standard output, which is flushed but
    left open.

    Args:
        file_path: Output file path, or None/'' for stdout

    Yields:
        Writable text stream

    Raises:
        ConfigError: If the file cannot be opened for writing
    """
    if not file_path or not file_path.strip():
        try:
            yield sys.stdout
        finally:
            sys.stdout.flush()
        return

    try:
        f = open(file_path, 'w')
    except OSError as e:
        raise ConfigError(f"Cannot write output file {file_path}: {e.strerror or str(e)}")

    with f:
        yield f


def write_program(
    stream: TextIO,
    params: MachiningParameters,
    commands: Iterable[MotionCommand],
    info: Optional[ProgramInfo] = None
) -> int:
    """
    Write a complete program: header, every command in order, footer.

    Args:
        stream: Writable text stream
        params: Machining parameters used for the header and footer
        commands: Motion commands in emission order
        info: Header comment and creation time

    Returns:
        Number of motion lines written
    """
    info = info or ProgramInfo()

    for line in generate_header(params, info):
        stream.write(line + "\n")

    count = 0
    for command in commands:
        stream.write(format_command(command) + "\n")
        count += 1

    for line in generate_footer(params):
        stream.write(line + "\n")

    return count
