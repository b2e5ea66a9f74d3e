# trollint/rubrics/conditions.py

from __future__ import annotations

from . import RubricResult
from trollint.features.inference import resolved_conditions, resolved_species
from trollint.models.lure import Lure
from trollint.models.query import FishingConditionsQuery

MAX_SCORE = 30.0
QUARTER = MAX_SCORE / 4
SPECIES_BONUS = 5.0


def score_conditions(lure: Lure, query: FishingConditionsQuery) -> RubricResult:
    """
    Conditions axis (0-30): time of day, sea state, turbidity and tide each
    worth a quarter; a priority-species match adds a bonus, still capped.
    """
    optimal = resolved_conditions(lure)

    matches = {
        "time_of_day": query.time_of_day in optimal.times,
        "sea_state": query.sea_state in optimal.sea_states,
        "turbidity": query.turbidity in optimal.turbidity,
        "tide": query.tide in optimal.tides,
    }
    score = QUARTER * sum(matches.values())

    species_match = False
    if query.priority_species is not None:
        species_match = query.priority_species.value in resolved_species(lure)
        if species_match:
            score += SPECIES_BONUS
    score = min(MAX_SCORE, score)

    if species_match:
        headline = "species"
    else:
        # first matched quarter in a fixed order
        headline = next((k for k, ok in matches.items() if ok), "none")

    return RubricResult(
        score=score,
        max_score=MAX_SCORE,
        headline=headline,
        reasons={
            "matches": matches,
            "matched_count": sum(matches.values()),
            "species_match": species_match,
            "optimal": optimal.to_dict(),
        },
    )
