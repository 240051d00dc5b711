"""Test configuration and fixtures."""
import os

os.environ.setdefault('MPLBACKEND', 'Agg')

import pytest

from holemill.models import Feature, MachiningParameters, Point3


def make_params(**overrides) -> MachiningParameters:
    """Build a valid parameter set, overriding any field."""
    values = dict(
        units='mm',
        tool_diameter=6.0,
        direction='ccw',
        stepover_percent=50.0,
        feed_rate=300.0,
        plunge_rate=100.0,
        safety_height=5.0,
        strategy='plunge',
        axial_step=5.0,
        origin=Point3(0.0, 0.0, 0.0),
        x_count=1,
        y_count=1,
        x_spacing=10.0,
        y_spacing=10.0,
        hole=Feature(diameter=20.0, depth=10.0),
        counterbore=None,
    )
    values.update(overrides)
    return MachiningParameters(**values)


@pytest.fixture
def params():
    """Single 20mm hole, 10mm deep, 6mm tool, plunge strategy."""
    return make_params()


@pytest.fixture
def spiral_params():
    """Same hole cut with the spiral strategy."""
    return make_params(strategy='spiral')


@pytest.fixture
def grid_params():
    """2 x 2 array with counterbores."""
    return make_params(
        x_count=2,
        y_count=2,
        counterbore=Feature(diameter=30.0, depth=3.0),
    )


@pytest.fixture
def defaults_file(tmp_path):
    """Write a defaults file and return its path."""
    path = tmp_path / "holemill.cfg"
    path.write_text(
        "# test defaults\n"
        "\n"
        "units = mm\n"
        "tool_diameter = 6.0\n"
        "direction = ccw   # comment after value\n"
        "stepover = 50\n"
        "safety_plane = 5\n"
        "feed_rate = 300\n"
        "hole_diameter = 20\n"
        "hole_depth = 10\n"
        "strategy = plunge\n"
        "axial_step = 5\n"
        "plunge_rate = 100\n"
        "counterbore_diameter = 0\n"
        "origin_x = 0\n"
        "origin_y = 0\n"
        "origin_z = 0\n"
        "x_count = 2\n"
        "y_count = 2\n"
        "x_spacing = 10\n"
        "y_spacing = 10\n"
    )
    return str(path)
