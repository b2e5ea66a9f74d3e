# trollint/spread/speed.py
"""
Trolling speed advisory.

The envelope starts from the priority species' canonical range (or the boat
profile's reference range) and is then shifted by an ordered list of
contextual adjustments, each leaving a note for the angler.
"""

from __future__ import annotations

import logging

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from trollint.models.catalog import BoatProfile, SeaState, Species, TimeOfDay, Turbidity, Zone

logger = logging.getLogger(__name__)

# Lowest lower bound ever advised (knots)
SPEED_FLOOR = 2.0


@dataclass(frozen=True)
class SpeciesSpeed:
    preferred: float
    min: float
    max: float


DEFAULT_SPECIES_SPEED = SpeciesSpeed(preferred=7.0, min=5.5, max=9.0)

SPECIES_SPEED: Dict[Species, SpeciesSpeed] = {
    Species.WAHOO: SpeciesSpeed(12.0, 10.0, 14.0),
    Species.YELLOWFIN_TUNA: SpeciesSpeed(8.0, 6.5, 9.5),
    Species.BIGEYE_TUNA: SpeciesSpeed(8.0, 6.5, 9.5),
    Species.MARLIN: SpeciesSpeed(8.5, 7.0, 10.0),
    Species.SAILFISH: SpeciesSpeed(8.5, 7.0, 10.0),
    Species.MAHI_MAHI: SpeciesSpeed(8.5, 7.0, 10.0),
    Species.SPANISH_MACKEREL: SpeciesSpeed(5.5, 4.0, 7.0),
    Species.DOGTOOTH_MACKEREL: SpeciesSpeed(5.5, 4.0, 7.0),
    Species.SKIPJACK: SpeciesSpeed(6.5, 5.5, 8.0),
    Species.TREVALLY: SpeciesSpeed(6.0, 4.5, 7.5),
    Species.GIANT_TREVALLY: SpeciesSpeed(6.0, 4.5, 7.5),
    Species.BLUEFIN_TREVALLY: SpeciesSpeed(6.0, 4.5, 7.5),
    Species.BARRACUDA: SpeciesSpeed(6.0, 4.0, 8.0),
    Species.GROUPER: SpeciesSpeed(4.5, 3.5, 6.0),
    Species.CORAL_GROUPER: SpeciesSpeed(4.5, 3.5, 6.0),
}


def species_speed(species: Species) -> SpeciesSpeed:
    return SPECIES_SPEED.get(species, DEFAULT_SPECIES_SPEED)


# Ordered adjustments: (min delta, max delta)
ROUGH_SEA_SHIFT = (-0.5, -1.0)
LOW_LIGHT_MAX_SHIFT = -0.5
VERY_MURKY_MIN_SHIFT = 0.3
OPEN_WATER_MAX_SHIFT = 1.0

ROUGH_SEAS = {SeaState.ROUGH, SeaState.FORMED}
LOW_LIGHT_TIMES = {TimeOfDay.DAWN, TimeOfDay.DUSK, TimeOfDay.NIGHT}
OPEN_WATER_ZONES = {Zone.OFFSHORE, Zone.DEEP, Zone.FAD}


@dataclass
class SpeedEnvelope:
    min_speed: float
    max_speed: float
    recommended: float
    basis: str                     # "species" or "boat_profile"
    notes: List[str] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "min": round(self.min_speed, 2),
            "max": round(self.max_speed, 2),
            "recommended": round(self.recommended, 2),
            "basis": self.basis,
            "notes": list(self.notes),
        }


def compute_speed_envelope(
    priority_species: Optional[Species],
    boat_profile: BoatProfile,
    zone: Zone,
    sea_state: SeaState,
    turbidity: Turbidity,
    time_of_day: TimeOfDay,
) -> SpeedEnvelope:
    """
    Recommended trolling speed and its (min, max) envelope, in knots.

    Always returns min <= recommended <= max.
    """
    notes: List[str] = []

    if priority_species is not None:
        ref = species_speed(priority_species)
        lo, hi, preferred = ref.min, ref.max, ref.preferred
        basis = "species"
        notes.append(f"{priority_species.value}: {lo:g}-{hi:g} kt canonical range")
    else:
        prof = boat_profile.spec
        lo, hi, preferred = prof.optimal_min, prof.optimal_max, None
        basis = "boat_profile"
        notes.append(f"Boat profile {boat_profile.value}: {lo:g}-{hi:g} kt reference range")

    if sea_state in ROUGH_SEAS:
        lo += ROUGH_SEA_SHIFT[0]
        hi += ROUGH_SEA_SHIFT[1]
        notes.append("Rough sea: envelope lowered and narrowed to keep lures swimming")

    if time_of_day in LOW_LIGHT_TIMES:
        hi += LOW_LIGHT_MAX_SHIFT
        notes.append("Low light: upper bound lowered, predators track slower baits")

    if turbidity == Turbidity.VERY_MURKY:
        lo += VERY_MURKY_MIN_SHIFT
        notes.append("Very murky water: lower bound raised slightly, a faster lure cuts through poor visibility")

    if zone in OPEN_WATER_ZONES:
        hi += OPEN_WATER_MAX_SHIFT
        notes.append("Open water: upper bound raised for pelagic hunters")

    lo = max(SPEED_FLOOR, lo)
    hi = max(SPEED_FLOOR, hi)
    if lo > hi:
        lo = hi
        notes.append("Adjustments collapsed the envelope to a single speed")

    if preferred is not None:
        recommended = min(max(preferred, lo), hi)
        notes.append(f"Recommended speed pinned to the {priority_species.value} preference")
    else:
        recommended = (lo + hi) / 2.0

    lo, hi, recommended = round(lo, 2), round(hi, 2), round(recommended, 2)
    logger.debug("Speed envelope %.2f-%.2f kt, recommended %.2f (%s)", lo, hi, recommended, basis)

    return SpeedEnvelope(min_speed=lo, max_speed=hi, recommended=recommended, basis=basis, notes=notes)
