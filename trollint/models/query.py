# trollint/models/query.py

from __future__ import annotations

import math

from dataclasses import dataclass
from typing import Any, Dict, List, Optional

from trollint.errors import InvalidQueryError
from trollint.models.catalog import (
    BoatProfile,
    Light,
    Moon,
    SeaState,
    Species,
    Tide,
    TimeOfDay,
    Turbidity,
    Zone,
)

MIN_LINES = 1
MAX_LINES = 5


@dataclass
class FishingConditionsQuery:
    """
    Observed conditions for one suggestion run.
    Built per request and never stored.
    """
    zone: Zone
    bottom_depth: float        # metres
    boat_speed: float          # knots
    time_of_day: TimeOfDay
    light: Light
    turbidity: Turbidity
    sea_state: SeaState
    tide: Tide
    moon: Moon
    priority_species: Optional[Species] = None
    lines: int = 3
    boat_profile: BoatProfile = BoatProfile.CLASSIC

    def to_dict(self) -> Dict[str, Any]:
        return {
            "zone": self.zone.value,
            "bottom_depth": self.bottom_depth,
            "boat_speed": self.boat_speed,
            "time_of_day": self.time_of_day.value,
            "light": self.light.value,
            "turbidity": self.turbidity.value,
            "sea_state": self.sea_state.value,
            "tide": self.tide.value,
            "moon": self.moon.value,
            "priority_species": self.priority_species.value if self.priority_species else None,
            "lines": self.lines,
            "boat_profile": self.boat_profile.value,
        }


def validate_query(query: FishingConditionsQuery) -> None:
    """
    Reject out-of-range numeric input. Values are never clamped.

    Raises:
        InvalidQueryError
    """
    for name in ("bottom_depth", "boat_speed"):
        value = getattr(query, name)
        if not isinstance(value, (int, float)) or isinstance(value, bool) or not math.isfinite(value):
            raise InvalidQueryError(name, value, "must be a finite number")
        if value < 0:
            raise InvalidQueryError(name, value, "must not be negative")

    if isinstance(query.lines, bool) or not isinstance(query.lines, int):
        raise InvalidQueryError("lines", query.lines, "must be an integer")
    if not MIN_LINES <= query.lines <= MAX_LINES:
        raise InvalidQueryError("lines", query.lines, f"must be between {MIN_LINES} and {MAX_LINES}")


def coherence_warnings(query: FishingConditionsQuery) -> List[str]:
    """
    Flag combinations that are unusual but still allowed.
    Advisory only: a query with warnings is scored normally.
    """
    warnings: List[str] = []

    if query.time_of_day in (TimeOfDay.DAWN, TimeOfDay.DUSK) and query.light == Light.STRONG:
        warnings.append("Strong light is unusual at dawn or dusk")
    if query.time_of_day == TimeOfDay.MIDDAY and query.light == Light.LOW:
        warnings.append("Low light is unusual at midday")
    if query.tide == Tide.FALLING and query.turbidity == Turbidity.CLEAR:
        warnings.append("Water is often murkier on a falling tide")
    if query.zone == Zone.LAGOON and query.sea_state == SeaState.FORMED:
        warnings.append("A formed sea is unusual inside the lagoon")
    if query.priority_species == Species.WAHOO and query.boat_speed < 10:
        warnings.append("Wahoo usually needs more than 10 kt")

    return warnings
