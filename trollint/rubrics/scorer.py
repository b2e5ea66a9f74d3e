# trollint/rubrics/scorer.py
"""
Condition-weighted scoring of one lure against one fishing-conditions query.

Three independently capped axes: technique (0-40), colour (0-30) and
conditions (0-30). The total is their plain sum, so technique dominates the
ranking by construction.
"""

from __future__ import annotations

import logging

from dataclasses import dataclass, field, replace
from typing import Any, Dict, Optional

from . import RubricResult
from trollint.features.contrast import effective_class
from trollint.models.catalog import ContrastClass, SpreadPosition
from trollint.models.lure import Lure
from trollint.models.query import FishingConditionsQuery
from trollint.rubrics.color import score_color
from trollint.rubrics.conditions import score_conditions
from trollint.rubrics.justification import (
    catch_probability,
    justify_color,
    justify_conditions,
    justify_technique,
    pro_tip,
    winning_axis,
)
from trollint.rubrics.technique import score_technique

logger = logging.getLogger(__name__)


@dataclass
class ScoredCandidate:
    """A lure paired with its score. Position and distance are set by spread assignment."""
    lure: Lure
    technique: float
    color: float
    conditions: float
    total: float
    contrast: ContrastClass
    technique_reason: str
    color_reason: str
    conditions_reason: str
    pro_tip: str
    winning_axis: str
    catch_probability: float
    position: Optional[SpreadPosition] = None
    distance_m: Optional[float] = None
    details: Dict[str, Any] = field(default_factory=dict)

    def with_position(self, position: SpreadPosition, distance_m: float) -> "ScoredCandidate":
        return replace(
            self,
            position=position,
            distance_m=distance_m,
            pro_tip=pro_tip(self.winning_axis, self.catch_probability, position),
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "lure": self.lure.to_dict(),
            "technique": round(self.technique, 2),
            "color": round(self.color, 2),
            "conditions": round(self.conditions, 2),
            "total": round(self.total, 2),
            "contrast": self.contrast.value,
            "position": self.position.value if self.position else None,
            "distance_m": self.distance_m,
            "justifications": {
                "technique": self.technique_reason,
                "color": self.color_reason,
                "conditions": self.conditions_reason,
                "pro_tip": self.pro_tip,
            },
            "winning_axis": self.winning_axis,
            "catch_probability": self.catch_probability,
            "details": self.details,
        }


def score_lure(lure: Lure, query: FishingConditionsQuery) -> ScoredCandidate:
    """Score one lure. Pure: the lure is read, never modified."""
    r_tech: RubricResult = score_technique(lure, query)
    r_color: RubricResult = score_color(lure, query)
    r_cond: RubricResult = score_conditions(lure, query)

    total = r_tech.score + r_color.score + r_cond.score
    probability = catch_probability(total)
    axis = winning_axis(r_tech, r_color, r_cond)

    logger.debug(
        "Scored %s: technique=%.1f color=%.1f conditions=%.1f total=%.1f",
        lure.id, r_tech.score, r_color.score, r_cond.score, total,
    )

    return ScoredCandidate(
        lure=lure,
        technique=r_tech.score,
        color=r_color.score,
        conditions=r_cond.score,
        total=total,
        contrast=effective_class(lure.color, lure.finish),
        technique_reason=justify_technique(lure, query, r_tech),
        color_reason=justify_color(lure, query, r_color),
        conditions_reason=justify_conditions(lure, query, r_cond),
        pro_tip=pro_tip(axis, probability),
        winning_axis=axis,
        catch_probability=probability,
        details={
            "technique": {"headline": r_tech.headline, **_jsonable(r_tech.reasons)},
            "color": {"headline": r_color.headline, **r_color.reasons},
            "conditions": {"headline": r_cond.headline, **r_cond.reasons},
        },
    )


def _jsonable(reasons: Dict[str, Any]) -> Dict[str, Any]:
    """Tuples become lists and an open-ended depth band gets a None upper bound."""
    out: Dict[str, Any] = {}
    for k, v in reasons.items():
        if isinstance(v, tuple):
            v = [None if x == float("inf") else x for x in v]
        out[k] = v
    return out
