"""Tests for the unit renderer."""

import pytest

from fluidtype.engine.rendering import render_value
from fluidtype.schemas.options import OutputUnit, RfsOptions


@pytest.fixture(scope="module")
def rem_options():
    return RfsOptions()


@pytest.fixture(scope="module")
def px_options():
    return RfsOptions(unit=OutputUnit.PX)


class TestZero:
    def test_zero_is_bare_int(self, rem_options, px_options):
        for opts in (rem_options, px_options):
            result = render_value(0.0, opts)
            assert result == 0
            assert isinstance(result, int)

    def test_negative_zero(self, rem_options):
        assert render_value(-0.0, rem_options) == 0


class TestRem:
    def test_base_size(self, rem_options):
        assert render_value(20.0, rem_options) == "1.25rem"

    def test_integral_rem_has_no_decimal_point(self, rem_options):
        assert render_value(32.0, rem_options) == "2rem"

    def test_small_value(self, rem_options):
        assert render_value(1.0, rem_options) == "0.0625rem"

    def test_negative(self, rem_options):
        assert render_value(-24.0, rem_options) == "-1.5rem"

    def test_precision(self):
        assert render_value(1.0, RfsOptions(unit_precision=2)) == "0.06rem"

    def test_custom_rem_value(self):
        assert render_value(15.0, RfsOptions(rem_value=10.0)) == "1.5rem"


class TestPx:
    def test_integral(self, px_options):
        assert render_value(20.0, px_options) == "20px"

    def test_fraction(self, px_options):
        assert render_value(21.2, px_options) == "21.2px"

    def test_rounds_to_precision(self, px_options):
        assert render_value(10 / 3, px_options) == "3.33333px"

    def test_negative(self, px_options):
        assert render_value(-4.0, px_options) == "-4px"
