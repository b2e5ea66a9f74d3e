# trollint/spread/assign.py
"""
Catalog ranking and spread assignment.

rank_and_assign() scores every trolling-capable lure, ranks the candidates
and fills 1-5 named slots under a fixed policy keyed by line count, then
attaches a speed envelope. Input is never modified; every result is a fresh
value.
"""

from __future__ import annotations

import logging

from dataclasses import dataclass, field
from typing import Any, Callable, Dict, List, Optional, Sequence, Set, Tuple

from trollint.models.catalog import ContrastClass, SpreadPosition, Technique
from trollint.models.lure import Lure
from trollint.models.query import FishingConditionsQuery, coherence_warnings, validate_query
from trollint.rubrics.scorer import ScoredCandidate, score_lure
from trollint.spread.analysis import analyze_spread
from trollint.spread.speed import SpeedEnvelope, compute_speed_envelope

logger = logging.getLogger(__name__)

P = SpreadPosition

# Canonical towing-distance bands (m)
DISTANCE_BANDS: Dict[SpreadPosition, Tuple[float, float]] = {
    P.FREE: (20.0, 30.0),
    P.SHORT_CORNER: (10.0, 20.0),
    P.LONG_CORNER: (30.0, 50.0),
    P.SHORT_RIGGER: (40.0, 60.0),
    P.LONG_RIGGER: (50.0, 70.0),
    P.SHOTGUN: (70.0, 100.0),
}

OPPOSITE_CONTRAST: Dict[ContrastClass, Set[ContrastClass]] = {
    ContrastClass.NATURAL: {ContrastClass.FLASHY, ContrastClass.DARK},
    ContrastClass.FLASHY: {ContrastClass.NATURAL, ContrastClass.DARK},
    ContrastClass.DARK: {ContrastClass.FLASHY, ContrastClass.NATURAL},
    ContrastClass.CONTRASTED: {ContrastClass.NATURAL},
}

# Slot order and contrast affinity for a full five-line spread
FIVE_LINE_AFFINITY: List[Tuple[SpreadPosition, Set[ContrastClass]]] = [
    (P.SHORT_CORNER, {ContrastClass.NATURAL}),
    (P.LONG_CORNER, {ContrastClass.DARK}),
    (P.SHORT_RIGGER, {ContrastClass.FLASHY}),
    (P.LONG_RIGGER, {ContrastClass.FLASHY}),
    (P.SHOTGUN, {ContrastClass.CONTRASTED}),
]

STATUS_OK = "ok"
STATUS_PARTIAL = "partial"
STATUS_EMPTY = "empty"


def slot_distance(position: SpreadPosition) -> float:
    lo, hi = DISTANCE_BANDS[position]
    return (lo + hi) / 2.0


@dataclass
class SpreadConfiguration:
    slots: List[ScoredCandidate]
    requested_lines: int
    filled_lines: int
    mean_distance_m: float
    speed: SpeedEnvelope
    status: str
    status_message: str
    warnings: List[str] = field(default_factory=list)
    analysis: List[str] = field(default_factory=list)
    # every ranked candidate, slotted or not; left out of to_dict()
    candidates: List[ScoredCandidate] = field(default_factory=list)

    @property
    def positions(self) -> List[SpreadPosition]:
        return [c.position for c in self.slots]

    def to_dict(self) -> Dict[str, Any]:
        return {
            "slots": [c.to_dict() for c in self.slots],
            "requested_lines": self.requested_lines,
            "filled_lines": self.filled_lines,
            "mean_distance_m": round(self.mean_distance_m, 2),
            "speed": self.speed.to_dict(),
            "status": self.status,
            "status_message": self.status_message,
            "warnings": list(self.warnings),
            "analysis": list(self.analysis),
        }


# =============================================================================
# RANKING
# =============================================================================

def rank_candidates(catalog: Sequence[Lure], query: FishingConditionsQuery) -> List[ScoredCandidate]:
    """
    Score every trolling-capable lure and sort: total, then technique, then colour,
    all descending. Equal keys keep catalog order.
    """
    scored = [score_lure(lure, query) for lure in catalog if lure.supports(Technique.TROLLING)]
    scored = [c for c in scored if c.technique > 0]
    scored.sort(key=lambda c: (-c.total, -c.technique, -c.color))
    return scored


# =============================================================================
# SLOT POLICIES
# =============================================================================

Picker = Callable[[ScoredCandidate], bool]


class _Pool:
    """Ranked candidates not yet assigned to a slot."""

    def __init__(self, ranked: List[ScoredCandidate]):
        self.remaining = list(ranked)

    def take(self, wanted: Optional[Picker] = None) -> ScoredCandidate:
        """Best remaining candidate matching `wanted`, else the best remaining one."""
        idx = 0
        if wanted is not None:
            idx = next((i for i, c in enumerate(self.remaining) if wanted(c)), 0)
        return self.remaining.pop(idx)


def _one_line(pool: _Pool) -> List[Tuple[SpreadPosition, ScoredCandidate]]:
    return [(P.FREE, pool.take())]


def _two_lines(pool: _Pool) -> List[Tuple[SpreadPosition, ScoredCandidate]]:
    first = pool.take()
    second = pool.take(lambda c: c.contrast != first.contrast)
    return [(P.SHORT_CORNER, first), (P.SHORT_RIGGER, second)]


def _three_lines(pool: _Pool) -> List[Tuple[SpreadPosition, ScoredCandidate]]:
    first = pool.take()
    opposite = OPPOSITE_CONTRAST[first.contrast]
    second = pool.take(lambda c: c.contrast in opposite)
    third = pool.take()
    return [(P.SHORT_CORNER, first), (P.LONG_CORNER, second), (P.SHOTGUN, third)]


def _four_lines(pool: _Pool) -> List[Tuple[SpreadPosition, ScoredCandidate]]:
    a = pool.take()
    b = pool.take(lambda c: c.contrast != a.contrast)
    c_ = pool.take()
    d = pool.take(lambda c: c.contrast != c_.contrast)
    return [(P.SHORT_CORNER, a), (P.SHORT_RIGGER, b), (P.LONG_CORNER, c_), (P.LONG_RIGGER, d)]


def _five_lines(pool: _Pool) -> List[Tuple[SpreadPosition, ScoredCandidate]]:
    out = []
    for position, classes in FIVE_LINE_AFFINITY:
        out.append((position, pool.take(lambda c, classes=classes: c.contrast in classes)))
    return out


POLICIES: Dict[int, Callable[[_Pool], List[Tuple[SpreadPosition, ScoredCandidate]]]] = {
    1: _one_line,
    2: _two_lines,
    3: _three_lines,
    4: _four_lines,
    5: _five_lines,
}


def assign_slots(ranked: List[ScoredCandidate], lines: int) -> List[ScoredCandidate]:
    """Fill `lines` slots from a ranked list. Caller guarantees 1 <= lines <= len(ranked)."""
    filled = POLICIES[lines](_Pool(ranked))
    for pos, cand in filled:
        logger.debug("Slot %s <- %s (%s, total %.1f)", pos.value, cand.lure.id, cand.contrast.value, cand.total)
    return [cand.with_position(pos, slot_distance(pos)) for pos, cand in filled]


# =============================================================================
# ENTRY POINT
# =============================================================================

def rank_and_assign(
    catalog: Sequence[Lure],
    query: FishingConditionsQuery,
) -> SpreadConfiguration:
    """
    Rank the catalog and build the spread.

    The full ranked list is kept on the result as `candidates`.

    Raises:
        InvalidQueryError: before any scoring, when the query is out of range.
    """
    validate_query(query)

    ranked = rank_candidates(catalog, query)
    max_lines = query.boat_profile.spec.max_lines
    lines = min(query.lines, max_lines, len(ranked))

    speed = compute_speed_envelope(
        query.priority_species,
        query.boat_profile,
        query.zone,
        query.sea_state,
        query.turbidity,
        query.time_of_day,
    )
    warnings = coherence_warnings(query)

    if lines == 0:
        logger.info("No trolling-capable lure among %d catalog entries", len(catalog))
        return SpreadConfiguration(
            slots=[],
            requested_lines=query.lines,
            filled_lines=0,
            mean_distance_m=0.0,
            speed=speed,
            status=STATUS_EMPTY,
            status_message="No trolling-capable lure in the catalog: no suggestions for these conditions.",
            warnings=warnings,
            candidates=ranked,
        )

    slots = assign_slots(ranked, lines)
    mean_distance = sum(c.distance_m for c in slots) / len(slots)

    if lines < query.lines:
        status = STATUS_PARTIAL
        limits = []
        if max_lines < query.lines:
            limits.append(f"boat profile {query.boat_profile.value} allows {max_lines} lines")
        if len(ranked) < min(query.lines, max_lines):
            limits.append(f"only {len(ranked)} trolling-capable lures available")
        message = f"{lines} of {query.lines} lines filled: " + ", ".join(limits) + "."
    else:
        status = STATUS_OK
        message = f"{lines} lines filled."

    logger.info(
        "Spread built: %d/%d lines from %d candidates, speed %.1f kt",
        lines, query.lines, len(ranked), speed.recommended,
    )

    return SpreadConfiguration(
        slots=slots,
        requested_lines=query.lines,
        filled_lines=lines,
        mean_distance_m=mean_distance,
        speed=speed,
        status=status,
        status_message=message,
        warnings=warnings,
        analysis=analyze_spread(slots, query),
        candidates=ranked,
    )
