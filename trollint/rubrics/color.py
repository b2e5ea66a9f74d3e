# trollint/rubrics/color.py

from __future__ import annotations

from typing import List

from . import RubricResult
from trollint.features.contrast import effective_class
from trollint.models.catalog import ContrastClass, Light, Turbidity
from trollint.models.lure import Lure
from trollint.models.query import FishingConditionsQuery

MAX_SCORE = 30.0
PRIMARY_CREDIT = 30.0
SECONDARY_CREDIT = 15.0

BRIGHT_LIGHT = {Light.STRONG, Light.DIFFUSE}
MURKY_WATER = {Turbidity.MURKY, Turbidity.VERY_MURKY}


def preferred_classes(light: Light, turbidity: Turbidity) -> List[ContrastClass]:
    """
    Contrast classes that show best for a (light, turbidity) pair.
    Murky water drops natural tones in favour of contrasted ones.
    """
    if light in BRIGHT_LIGHT:
        preferred = [ContrastClass.NATURAL, ContrastClass.FLASHY]
    else:
        preferred = [ContrastClass.DARK, ContrastClass.CONTRASTED]

    if turbidity in MURKY_WATER:
        preferred = [c for c in preferred if c != ContrastClass.NATURAL]
        if ContrastClass.CONTRASTED not in preferred:
            preferred.append(ContrastClass.CONTRASTED)
    return preferred


def score_color(lure: Lure, query: FishingConditionsQuery) -> RubricResult:
    """
    Colour axis (0-30): full credit when the principal colour (after finish
    override) is in the preferred set, partial when only the secondary is.
    """
    preferred = preferred_classes(query.light, query.turbidity)
    primary = effective_class(lure.color, lure.finish)
    secondary = effective_class(lure.secondary_color) if lure.secondary_color else None

    if primary in preferred:
        score, headline = PRIMARY_CREDIT, "primary"
    elif secondary is not None and secondary in preferred:
        score, headline = SECONDARY_CREDIT, "secondary"
    else:
        score, headline = 0.0, "none"

    return RubricResult(
        score=score,
        max_score=MAX_SCORE,
        headline=headline,
        reasons={
            "preferred": [c.value for c in preferred],
            "primary_class": primary.value,
            "secondary_class": secondary.value if secondary else None,
            "light": query.light.value,
            "turbidity": query.turbidity.value,
        },
    )
