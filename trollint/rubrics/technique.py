# trollint/rubrics/technique.py

from __future__ import annotations

import math

from typing import Dict, List, Set, Tuple

from . import RubricResult
from trollint.features.inference import depth_bucket, resolved_zones, speed_range
from trollint.models.catalog import Technique, Zone
from trollint.models.lure import Lure
from trollint.models.query import FishingConditionsQuery
from trollint.spread.speed import species_speed

MAX_SCORE = 40.0
TROLLING_CREDIT = 16.0
DEPTH_CREDIT = 12.0
SPEED_CREDIT = 12.0

# Depth interval (m) and matching zones per bottom-depth bucket
TARGET_BANDS: Dict[int, Tuple[float, float]] = {
    0: (0.0, 3.0),
    1: (3.0, 8.0),
    2: (8.0, math.inf),
}
TARGET_ZONES: Dict[int, Set[Zone]] = {
    0: {Zone.LAGOON, Zone.REEF},
    1: {Zone.PASS},
    2: {Zone.OFFSHORE, Zone.DEEP},
}


def _overlaps(a: Tuple[float, float], b: Tuple[float, float]) -> bool:
    return a[0] <= b[1] and a[1] >= b[0]


def score_technique(lure: Lure, query: FishingConditionsQuery) -> RubricResult:
    """
    Technique axis (0-40): trolling capability, swim-depth fit, speed fit.
    With a priority species, speed is matched against that species' envelope
    instead of the raw boat speed.
    """
    trolling = lure.supports(Technique.TROLLING)

    bucket = depth_bucket(query.bottom_depth)
    target_band = TARGET_BANDS[bucket]
    if lure.depth_max is not None:
        lure_band = (lure.depth_min if lure.depth_min is not None else 0.0, lure.depth_max)
        depth_match = _overlaps(lure_band, target_band)
        depth_basis = "declared_depth"
        matched_zones: List[str] = []
    else:
        lure_band = None
        shared = [z for z in resolved_zones(lure) if z in TARGET_ZONES[bucket]]
        depth_match = bool(shared)
        depth_basis = "zones"
        matched_zones = [z.value for z in shared]

    lure_speed = speed_range(lure)
    if query.priority_species is not None:
        env = species_speed(query.priority_species)
        speed_target = (env.min, env.max)
        speed_basis = "species"
    else:
        speed_target = (query.boat_speed, query.boat_speed)
        speed_basis = "boat_speed"
    speed_match = _overlaps(lure_speed, speed_target)

    score = 0.0
    if trolling:
        score += TROLLING_CREDIT
    if depth_match:
        score += DEPTH_CREDIT
    if speed_match:
        score += SPEED_CREDIT
    score = min(MAX_SCORE, score)

    if depth_match and speed_match:
        headline = "depth_and_speed"
    elif depth_match:
        headline = "depth"
    elif speed_match:
        headline = "speed"
    elif trolling:
        headline = "trolling"
    else:
        headline = "none"

    return RubricResult(
        score=score,
        max_score=MAX_SCORE,
        headline=headline,
        reasons={
            "trolling": trolling,
            "depth_match": depth_match,
            "depth_basis": depth_basis,
            "lure_depth_band": lure_band,
            "target_depth_band": target_band,
            "matched_zones": matched_zones,
            "speed_match": speed_match,
            "speed_basis": speed_basis,
            "lure_speed_range": lure_speed,
            "speed_target": speed_target,
        },
    )
