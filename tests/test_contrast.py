"""
Test suite for trollint/features/contrast.py
=============================================
Palette partition, finish overrides and RGB helpers.
"""

import pytest

from trollint.features.contrast import (
    CONTRAST_BY_COLOR,
    FINISH_OVERRIDES,
    classify,
    colors_in_class,
    effective_class,
    is_bright_pink,
    is_very_dark,
    is_yellow_green,
    luminance,
)
from trollint.models.catalog import COLOR_RGB, Color, ContrastClass, Finish


class TestPalettePartition:
    """Every colour belongs to exactly one contrast class"""

    def test_every_color_classified(self):
        assert set(CONTRAST_BY_COLOR) == set(Color)

    def test_every_color_has_rgb(self):
        assert set(COLOR_RGB) == set(Color)

    def test_palette_size(self):
        assert len(Color) == 46

    def test_classes_are_disjoint_and_cover_palette(self):
        seen = []
        for cls in ContrastClass:
            seen += colors_in_class(cls)
        assert sorted(seen) == sorted(Color)
        assert len(seen) == len(set(seen))

    @pytest.mark.parametrize("color, expected", [
        (Color.SARDINE, ContrastClass.NATURAL),
        (Color.PINK_FLUO, ContrastClass.FLASHY),
        (Color.BLACK, ContrastClass.DARK),
        (Color.WHITE_RED, ContrastClass.CONTRASTED),
    ])
    def test_known_classes(self, color, expected):
        assert classify(color) == expected


class TestFinishOverride:
    """Finish can move a colour to another class"""

    def test_no_finish_keeps_color_class(self):
        assert effective_class(Color.SARDINE) == ContrastClass.NATURAL

    def test_phosphorescent_is_dark(self):
        assert effective_class(Color.WHITE, Finish.PHOSPHORESCENT) == ContrastClass.DARK

    def test_holographic_is_flashy(self):
        assert effective_class(Color.BLACK, Finish.HOLOGRAPHIC) == ContrastClass.FLASHY

    def test_matte_is_dark(self):
        assert effective_class(Color.PINK_FLUO, Finish.MATTE) == ContrastClass.DARK

    @pytest.mark.parametrize("finish", [Finish.METALLIC, Finish.GLOSSY, Finish.PEARL])
    def test_unlisted_finish_keeps_color_class(self, finish):
        assert finish not in FINISH_OVERRIDES
        assert effective_class(Color.SARDINE, finish) == ContrastClass.NATURAL


class TestRgbHelpers:
    """RGB threshold tests used by condition inference"""

    def test_pink_fluo_is_bright_pink(self):
        assert is_bright_pink(Color.PINK_FLUO)

    def test_chartreuse_is_yellow_green(self):
        assert is_yellow_green(Color.CHARTREUSE)

    def test_black_is_very_dark(self):
        assert is_very_dark(Color.BLACK)
        assert not is_very_dark(Color.WHITE)

    def test_luminance_bounds(self):
        assert luminance(Color.BLACK) == 0.0
        assert luminance(Color.WHITE) == 1.0
