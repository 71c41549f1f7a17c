"""Tests for size previews."""

import pytest

from fluidtype.api.preview import preview_sizes
from fluidtype.engine.engine import ResponsiveFontSize

_TYPE_SCALE = {"h1": "2.5rem", "h2": "2rem", "body": "1rem", "caption": ""}


@pytest.fixture(scope="module")
def rfs():
    return ResponsiveFontSize()


class TestPreviewSizes:
    def test_at_breakpoint(self, rfs):
        assert preview_sizes(rfs, _TYPE_SCALE, 1200) == {"h1": 40, "h2": 32, "body": 16}

    def test_half_breakpoint_rounds_up(self, rfs):
        """h1: 22 + 9 = 31; h2: 21.2 + 5.4 = 26.6 → 27."""
        assert preview_sizes(rfs, _TYPE_SCALE, 600) == {"h1": 31, "h2": 27, "body": 16}

    def test_phone_width(self, rfs):
        """h1: 22 + 5.625 = 27.625 → 28; h2: 21.2 + 3.375 = 24.575 → 25."""
        assert preview_sizes(rfs, _TYPE_SCALE, 375) == {"h1": 28, "h2": 25, "body": 16}

    def test_empty_sizes_are_skipped(self, rfs):
        assert "caption" not in preview_sizes(rfs, _TYPE_SCALE, 1200)

    def test_keeps_order(self, rfs):
        assert list(preview_sizes(rfs, _TYPE_SCALE, 1200)) == ["h1", "h2", "body"]

    def test_px_engine(self):
        rfs = ResponsiveFontSize({"unit": "px"})
        assert preview_sizes(rfs, {"h1": "40px", "small": "14px"}, 1200) == {"h1": 40, "small": 14}

    def test_empty_mapping(self, rfs):
        assert preview_sizes(rfs, {}, 1200) == {}

    @pytest.mark.parametrize("width", [0, -320])
    def test_rejects_non_positive_width(self, rfs, width):
        with pytest.raises(ValueError, match="screen_width must be positive"):
            preview_sizes(rfs, _TYPE_SCALE, width)

    @pytest.mark.parametrize("width", ["1200", None, True])
    def test_rejects_non_numeric_width(self, rfs, width):
        with pytest.raises(ValueError, match="screen_width must be a number"):
            preview_sizes(rfs, _TYPE_SCALE, width)
