"""Tests for holemill/utils/validators.py module."""
import pytest

from conftest import make_params
from holemill.models import Feature, Point3
from holemill.utils.validators import (
    ValidationError,
    check_parameters,
    validate_feature,
    validate_feed_rates,
    validate_grid,
    validate_parameters,
    validate_stepdown
)


class TestValidateFeature:
    """Tests for validate_feature."""

    def test_valid(self):
        assert validate_feature(Feature(20.0, 10.0), 6.0, 'Hole') == []

    def test_not_configured(self):
        assert validate_feature(None, 6.0, 'Counterbore') == []

    def test_tool_equal_to_feature(self):
        errors = validate_feature(Feature(6.0, 10.0), 6.0, 'Hole')
        assert len(errors) == 1
        assert "Hole diameter" in errors[0]

    def test_tool_larger_than_feature(self):
        assert validate_feature(Feature(5.0, 10.0), 6.0, 'Hole')

    def test_zero_depth(self):
        errors = validate_feature(Feature(20.0, 0.0), 6.0, 'Hole')
        assert "depth" in errors[0]


class TestValidateGrid:
    """Tests for validate_grid."""

    def test_valid(self):
        assert validate_grid(3, 2, 10.0, 5.0) == []

    def test_zero_count(self):
        errors = validate_grid(0, 2, 10.0, 5.0)
        assert any("X count" in e for e in errors)

    def test_spacing_ignored_for_single_column(self):
        assert validate_grid(1, 1, 0.0, -5.0) == []

    def test_zero_spacing_with_multiple_rows(self):
        errors = validate_grid(1, 3, 0.0, 0.0)
        assert len(errors) == 1
        assert "Y spacing" in errors[0]


class TestWarnings:
    """Tests for warning-only validators."""

    def test_stepdown_ok(self):
        assert validate_stepdown(3.0, 6.0) == []

    def test_stepdown_deeper_than_tool(self):
        assert len(validate_stepdown(8.0, 6.0)) == 1

    def test_plunge_faster_than_feed(self):
        assert len(validate_feed_rates(100.0, 200.0)) == 1

    def test_plunge_slower_than_feed(self):
        assert validate_feed_rates(300.0, 100.0) == []


class TestValidateParameters:
    """Tests for validate_parameters and check_parameters."""

    def test_valid_parameters(self):
        errors, warnings = validate_parameters(make_params())
        assert errors == []
        assert warnings == []

    @pytest.mark.parametrize("overrides", [
        {'tool_diameter': 0.0},
        {'stepover_percent': 0.0},
        {'stepover_percent': -10.0},
        {'axial_step': 0.0},
        {'feed_rate': 0.0},
        {'plunge_rate': -1.0},
        {'x_count': 0},
        {'y_count': -1},
        {'x_count': 2, 'x_spacing': 0.0},
        {'units': 'cm'},
        {'direction': 'left'},
        {'strategy': 'peck'},
        {'hole': Feature(6.0, 10.0)},
        {'counterbore': Feature(4.0, 2.0)},
    ])
    def test_blocking_errors(self, overrides):
        errors, _ = validate_parameters(make_params(**overrides))
        assert errors

    def test_counterbore_narrower_than_hole_warns(self):
        errors, warnings = validate_parameters(make_params(counterbore=Feature(15.0, 2.0)))
        assert errors == []
        assert any("Counterbore diameter" in w for w in warnings)

    def test_counterbore_deeper_than_hole_warns(self):
        errors, warnings = validate_parameters(make_params(counterbore=Feature(30.0, 12.0)))
        assert errors == []
        assert any("Counterbore depth" in w for w in warnings)

    def test_safety_plane_below_origin_warns(self):
        _, warnings = validate_parameters(make_params(origin=Point3(0.0, 0.0, 10.0)))
        assert any("Safety plane" in w for w in warnings)

    def test_large_stepover_warns(self):
        errors, warnings = validate_parameters(make_params(stepover_percent=150.0))
        assert errors == []
        assert any("Stepover" in w for w in warnings)

    def test_check_parameters_raises(self):
        with pytest.raises(ValidationError) as exc:
            check_parameters(make_params(hole=Feature(5.0, 10.0)))
        assert "tool diameter" in str(exc.value)

    def test_check_parameters_returns_warnings(self):
        warnings = check_parameters(make_params(plunge_rate=500.0))
        assert len(warnings) == 1
