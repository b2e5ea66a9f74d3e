# trollint/rubrics/justification.py
"""
Deterministic, template-rendered explanations for a scored lure.

Each axis picks its single strongest reason (RubricResult.headline) and fills
one sentence template. Pro tips come from fixed tables keyed by the winning
axis and the assigned spread position.
"""

from __future__ import annotations

from typing import Dict, Optional

from . import RubricResult
from trollint.models.catalog import SpreadPosition
from trollint.models.lure import Lure
from trollint.models.query import FishingConditionsQuery


def _band(band) -> str:
    lo, hi = band
    if hi == float("inf"):
        return f"{lo:g} m and deeper"
    return f"{lo:g}-{hi:g} m"


def _speed(rng) -> str:
    lo, hi = rng
    return f"{lo:g}-{hi:g} kt"


# =============================================================================
# TECHNIQUE
# =============================================================================

def justify_technique(lure: Lure, query: FishingConditionsQuery, result: RubricResult) -> str:
    r = result.reasons
    target = _band(r["target_depth_band"])
    lure_speed = _speed(r["lure_speed_range"])
    if r["speed_basis"] == "species":
        speed_ref = f"the {query.priority_species.value} range ({_speed(r['speed_target'])})"
    else:
        speed_ref = f"your {query.boat_speed:g} kt"

    templates: Dict[str, str] = {
        "depth_and_speed": (
            "{name} ({length:g} cm) works the {target} layer over {depth:g} m of water "
            "and its {lure_speed} range matches {speed_ref}."
        ),
        "depth": "{name} ({length:g} cm) works the {target} layer over {depth:g} m of water.",
        "speed": "{name} keeps its action at {lure_speed}, which matches {speed_ref}.",
        "trolling": "{name} can be trolled, but neither its depth nor its {lure_speed} range fits these conditions.",
        "none": "{name} is not a trolling lure.",
    }
    return templates[result.headline].format(
        name=lure.name or lure.lure_type.value,
        length=lure.length_cm,
        target=target,
        depth=query.bottom_depth,
        lure_speed=lure_speed,
        speed_ref=speed_ref,
    )


# =============================================================================
# COLOR
# =============================================================================

def justify_color(lure: Lure, query: FishingConditionsQuery, result: RubricResult) -> str:
    r = result.reasons
    preferred = " or ".join(r["preferred"])
    templates: Dict[str, str] = {
        "primary": "{color} reads as {cls}, one of the classes that show best in {light} light and {turbidity} water.",
        "secondary": (
            "{color} ({cls}) is not ideal here, but the {secondary} secondary colour ({sec_cls}) "
            "still gives a {preferred} signature."
        ),
        "none": "{color} ({cls}) is off-key for {light} light and {turbidity} water; {preferred} tones would show better.",
    }
    return templates[result.headline].format(
        color=lure.color.value,
        cls=r["primary_class"],
        secondary=lure.secondary_color.value if lure.secondary_color else "",
        sec_cls=r["secondary_class"],
        light=query.light.value,
        turbidity=query.turbidity.value,
        preferred=preferred,
    )


# =============================================================================
# CONDITIONS
# =============================================================================

def justify_conditions(lure: Lure, query: FishingConditionsQuery, result: RubricResult) -> str:
    r = result.reasons
    count = r["matched_count"]
    templates: Dict[str, str] = {
        "species": "Known {species} lure, and {count}/4 of today's conditions suit it.",
        "time_of_day": "A good {time} lure; {count}/4 of today's conditions suit it.",
        "sea_state": "Handles a {sea} sea well; {count}/4 of today's conditions suit it.",
        "turbidity": "Made for {turbidity} water; {count}/4 of today's conditions suit it.",
        "tide": "Fishes on a {tide} tide; {count}/4 of today's conditions suit it.",
        "none": "None of today's time, sea, water or tide conditions are in this lure's comfort zone.",
    }
    return templates[result.headline].format(
        species=query.priority_species.value if query.priority_species else "",
        count=count,
        time=query.time_of_day.value,
        sea=query.sea_state.value,
        turbidity=query.turbidity.value,
        tide=query.tide.value,
    )


# =============================================================================
# PRO TIPS
# =============================================================================

AXIS_TIPS: Dict[str, str] = {
    "technique": "Depth and speed are right: hold this speed and move the lure to another position every 15 minutes without a strike.",
    "color": "Colour is this lure's strength: run it in clean water where it is seen first.",
    "conditions": "Conditions favour this lure right now: fish it before the light or the tide turns.",
}

POSITION_TIPS: Dict[SpreadPosition, str] = {
    SpreadPosition.FREE: "Single line: run it just behind the wake and vary the speed in short bursts.",
    SpreadPosition.SHORT_CORNER: "Short corner sits in the prop wash: a noisy, bubbly lure stands out there.",
    SpreadPosition.LONG_CORNER: "Long corner runs in the calmer back wake: let the silhouette do the work.",
    SpreadPosition.SHORT_RIGGER: "Short rigger spreads the pattern sideways: watch it when turning.",
    SpreadPosition.LONG_RIGGER: "Long rigger covers the outer edge: keep it clear of the short rigger line.",
    SpreadPosition.SHOTGUN: "Shotgun trails far back in the middle: it picks up wary fish that follow without striking.",
}


def catch_probability(total: float) -> float:
    """Rough strike likelihood (%) from the total score, clamped to 30-95."""
    return round(min(95.0, max(30.0, 60.0 + (total - 50.0) * 0.7)), 1)


def tier(probability: float) -> str:
    if probability >= 80:
        return "Elite setup"
    if probability >= 65:
        return "Good potential"
    return "Average conditions"


def winning_axis(technique: RubricResult, color: RubricResult, conditions: RubricResult) -> str:
    """Axis with the best score ratio; ties go to technique, then colour."""
    axes = [("technique", technique), ("color", color), ("conditions", conditions)]
    return max(axes, key=lambda kv: kv[1].score / kv[1].max_score)[0]


def pro_tip(axis: str, probability: float, position: Optional[SpreadPosition] = None) -> str:
    text = f"{tier(probability)}: {AXIS_TIPS[axis]}"
    if position is not None:
        text += " " + POSITION_TIPS[position]
    return text
