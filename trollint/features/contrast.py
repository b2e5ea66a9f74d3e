# trollint/features/contrast.py

from __future__ import annotations

from typing import Dict, List, Optional, Tuple

from trollint.models.catalog import COLOR_RGB, Color, ContrastClass, Finish

N = ContrastClass.NATURAL
F = ContrastClass.FLASHY
D = ContrastClass.DARK
C = ContrastClass.CONTRASTED

# Total partition of the palette. tests/test_contrast.py checks it covers every Color.
CONTRAST_BY_COLOR: Dict[Color, ContrastClass] = {
    Color.BLUE_SILVER: N, Color.BLUE_WHITE: N, Color.GREEN_SILVER: N, Color.GREEN_GOLD: N,
    Color.SARDINE: N, Color.MACKEREL: N, Color.SILVER: N, Color.SILVER_BLUE: N,
    Color.WHITE: N, Color.CLEAR: N, Color.BLUE: N, Color.GREEN: N, Color.OLIVE: N, Color.BLOW: N,

    Color.FUCHSIA: F, Color.PINK: F, Color.PINK_FLUO: F, Color.CHARTREUSE: F, Color.ORANGE: F,
    Color.YELLOW: F, Color.YELLOW_FLUO: F, Color.PINK_HOLO: F, Color.YELLOW_HOLO: F, Color.GOLD: F,

    Color.BLACK: D, Color.BLACK_PURPLE: D, Color.BLACK_BLUE: D, Color.BLUE_BLACK: D,
    Color.GREEN_BLACK: D, Color.DARK_PURPLE: D, Color.DARK_BLUE: D, Color.BLACK_RED: D,
    Color.PURPLE: D, Color.BROWN: D, Color.CHESTNUT: D,

    Color.BLUE_BLACK_GREY: C, Color.PURPLE_BLACK: C, Color.PINK_WHITE: C, Color.RED_YELLOW: C,
    Color.ORANGE_YELLOW: C, Color.WHITE_RED: C, Color.WHITE_ORANGE: C, Color.GREEN_WHITE: C,
    Color.PINK_BLUE: C, Color.BEIGE: C, Color.RED: C,
}

# Finishes not listed keep the colour's own class.
FINISH_OVERRIDES: Dict[Finish, ContrastClass] = {
    Finish.PHOSPHORESCENT: D,
    Finish.UV: D,
    Finish.MATTE: D,
    Finish.HOLOGRAPHIC: F,
    Finish.CHROME: F,
    Finish.MIRROR: F,
    Finish.GLITTER: F,
}


def classify(color: Color) -> ContrastClass:
    return CONTRAST_BY_COLOR[color]


def classify_finish(finish: Optional[Finish], base: ContrastClass) -> ContrastClass:
    if finish is None:
        return base
    return FINISH_OVERRIDES.get(finish, base)


def effective_class(color: Color, finish: Optional[Finish] = None) -> ContrastClass:
    """Colour class after the finish override."""
    return classify_finish(finish, classify(color))


def colors_in_class(cls: ContrastClass) -> List[Color]:
    return [c for c in Color if CONTRAST_BY_COLOR[c] == cls]


# =============================================================================
# RGB TESTS
# =============================================================================

def rgb(color: Color) -> Tuple[float, float, float]:
    return COLOR_RGB[color]


def luminance(color: Color) -> float:
    r, g, b = rgb(color)
    return round(0.2126 * r + 0.7152 * g + 0.0722 * b, 4)


def is_bright_pink(color: Color) -> bool:
    r, g, b = rgb(color)
    return r > 0.8 and g < 0.5 and b > 0.4


def is_yellow_green(color: Color) -> bool:
    r, g, b = rgb(color)
    return g > 0.7 and r > 0.4 and b < 0.3


def is_very_dark(color: Color) -> bool:
    r, g, b = rgb(color)
    return r < 0.3 and g < 0.3 and b < 0.4


def is_silvery(color: Color) -> bool:
    r, g, b = rgb(color)
    return abs(r - g) < 0.2 and abs(g - b) < 0.2 and r > 0.5
