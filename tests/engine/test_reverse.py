"""Tests for the reverse evaluator."""

from __future__ import annotations

import pytest

from fluidtype.engine.reverse import pixel_value_at_screen_width
from fluidtype.engine.transformer import process
from fluidtype.schemas.options import OutputUnit, RfsOptions
from fluidtype.schemas.result import FluidTerm, FluidValue, Operator, TermKind


@pytest.fixture(scope="module")
def options():
    return RfsOptions()


class TestPlain:
    def test_returns_number_in_output_unit(self, options):
        assert pixel_value_at_screen_width("1.25rem", 800, options) == 1.25

    def test_does_not_depend_on_width(self, options):
        assert pixel_value_at_screen_width("1rem", 0, options) == pixel_value_at_screen_width(
            "1rem", 1920, options
        )

    def test_zero(self, options):
        assert pixel_value_at_screen_width(0, 1200, options) == 0.0

    def test_px_output(self):
        assert pixel_value_at_screen_width("18px", 1200, RfsOptions(unit=OutputUnit.PX)) == 18.0


class TestFluid:
    def test_at_breakpoint_gives_full_size(self, options):
        result = process("2rem", True, options)
        assert pixel_value_at_screen_width(result, 1200, options) == pytest.approx(32.0)

    def test_at_zero_width_gives_min_size(self, options):
        result = process("2rem", True, options)
        assert pixel_value_at_screen_width(result, 0, options) == pytest.approx(21.2)

    def test_half_breakpoint(self, options):
        result = process("2rem", True, options)
        assert pixel_value_at_screen_width(result, 600, options) == pytest.approx(26.6)

    def test_negative(self, options):
        result = process("-2rem", True, options)
        assert pixel_value_at_screen_width(result, 1200, options) == pytest.approx(-32.0)
        assert pixel_value_at_screen_width(result, 0, options) == pytest.approx(-21.2)

    def test_px_output(self):
        opts = RfsOptions(unit=OutputUnit.PX)
        result = process("40px", True, opts)
        assert pixel_value_at_screen_width(result, 1200, opts) == pytest.approx(40.0)

    def test_vmin_coefficient_is_used(self):
        opts = RfsOptions(two_dimensional=True)
        result = process("2rem", True, opts)
        assert result.viewport.unit == "vmin"
        assert pixel_value_at_screen_width(result, 1200, opts) == pytest.approx(32.0)

    def test_fixed_term_is_rendered_at_options_precision(self):
        opts = RfsOptions(unit_precision=2)
        fv = FluidValue(
            fixed=FluidTerm(kind=TermKind.FIXED, unit="rem", value=1.3333),
            viewport=FluidTerm(kind=TermKind.VIEWPORT, unit="vw", value=0.0),
            operator=Operator.PLUS,
        )
        assert pixel_value_at_screen_width(fv, 1000, opts) == pytest.approx(1.33 * 16)

    def test_rejects_unit_mismatch(self, options):
        px_result = process("40px", True, RfsOptions(unit=OutputUnit.PX))
        with pytest.raises(ValueError, match="fluid value is in 'px' but options render 'rem'"):
            pixel_value_at_screen_width(px_result, 1200, options)
