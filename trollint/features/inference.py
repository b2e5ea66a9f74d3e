# trollint/features/inference.py
"""
Attribute inference from a lure's physical and visual properties.

Every function here is a pure read of the lure's declared fields: nothing is
mutated and the is_computed flag is left alone. apply_inference() is the one
place that builds a lure copy carrying the inferred values, and callers decide
whether to store it.
"""

from __future__ import annotations

import logging

from dataclasses import dataclass, replace
from typing import Any, Dict, List, Set, Tuple

from trollint.features.contrast import (
    effective_class,
    is_bright_pink,
    is_very_dark,
    is_yellow_green,
)
from trollint.models.catalog import (
    Color,
    ContrastClass,
    Finish,
    LureType,
    SeaState,
    SpreadPosition,
    Tide,
    TimeOfDay,
    Turbidity,
    Zone,
)
from trollint.models.lure import Lure, OptimalConditions, ordered

logger = logging.getLogger(__name__)

DEFAULT_DEPTH = 5.0


# =============================================================================
# ZONES
# =============================================================================

SURFACE_TYPES = {LureType.POPPER, LureType.FLOATING_STICKBAIT}
DEEP_JIG_TYPES = {LureType.METAL_JIG, LureType.VIBRATING_JIG}
COASTAL_ZONES = [Zone.LAGOON, Zone.REEF, Zone.PASS]


def depth_bucket(depth: float) -> int:
    """0 = shallow (<= 3 m), 1 = mid (3-8 m), 2 = deep (> 8 m)."""
    if depth <= 3:
        return 0
    if depth <= 8:
        return 1
    return 2


def infer_zones(lure: Lure) -> List[Zone]:
    depth = lure.depth_max if lure.depth_max is not None else DEFAULT_DEPTH
    length = lure.length_cm
    zones: List[Zone] = []

    bucket = depth_bucket(depth)
    if bucket == 0:
        zones += [Zone.LAGOON, Zone.REEF]
        if length >= 12:
            zones.append(Zone.PASS)
    elif bucket == 1:
        zones.append(Zone.PASS)
        if length >= 12:
            zones.append(Zone.OFFSHORE)
        if length >= 15:
            zones.append(Zone.REEF)
    else:
        zones += [Zone.OFFSHORE, Zone.DEEP]
        if length >= 15:
            zones.append(Zone.FAD)

    # type overrides
    t = lure.lure_type
    if t in SURFACE_TYPES:
        zones = list(COASTAL_ZONES)
    elif t in DEEP_JIG_TYPES:
        zones = [Zone.DEEP, Zone.REEF, Zone.FAD, Zone.DROP_OFF]
    elif t == LureType.SKIRTED:
        zones += [Zone.FAD, Zone.OFFSHORE]
    elif t == LureType.FLYING_FISH:
        zones = [Zone.OFFSHORE, Zone.FAD, Zone.PASS]
    elif t == LureType.SPOON and length < 10:
        zones = list(COASTAL_ZONES)

    return ordered(Zone, zones)


# =============================================================================
# SPECIES
# =============================================================================

# Colour pass. Colours missing from every group yield nothing.
SPECIES_BY_COLOR_GROUP: List[Tuple[Set[Color], List[str]]] = [
    ({Color.FUCHSIA, Color.PINK_FLUO, Color.PINK, Color.PINK_HOLO},
     ["Thazard", "Wahoo", "Bonite", "Carangue GT"]),
    ({Color.CHARTREUSE, Color.YELLOW_FLUO, Color.YELLOW_HOLO},
     ["Carangue GT", "Thon jaune", "Wahoo", "Mahi-mahi", "Thazard"]),
    ({Color.SILVER, Color.BLUE_SILVER, Color.SARDINE, Color.SILVER_BLUE, Color.BLUE_WHITE},
     ["Thon jaune", "Bonite", "Thazard", "Barracuda", "Carangue"]),
    ({Color.GREEN, Color.GREEN_SILVER, Color.OLIVE, Color.GREEN_GOLD},
     ["Mahi-mahi", "Carangue GT", "Barracuda", "Thon jaune"]),
    ({Color.BLACK, Color.BLACK_PURPLE, Color.DARK_PURPLE, Color.BLUE_BLACK, Color.DARK_BLUE,
      Color.PURPLE, Color.BLACK_BLUE},
     ["Wahoo", "Marlin", "Thon obèse", "Thon jaune", "Voilier"]),
    ({Color.ORANGE, Color.RED, Color.CHESTNUT, Color.ORANGE_YELLOW},
     ["Loche", "Picot", "Carangue", "Mérou"]),
    ({Color.BLUE, Color.WHITE},
     ["Carangue GT", "Thazard", "Bonite", "Barracuda"]),
    ({Color.GOLD},
     ["Wahoo", "Thon jaune", "Marlin", "Mahi-mahi"]),
    ({Color.WHITE_RED, Color.WHITE_ORANGE, Color.RED_YELLOW},
     ["Carangue GT", "Thazard", "Bonite", "Thon jaune"]),
    ({Color.PINK_BLUE, Color.PINK_WHITE},
     ["Mahi-mahi", "Thazard", "Wahoo"]),
]

SPECIES_BY_TYPE: Dict[LureType, List[str]] = {
    LureType.POPPER: ["Carangue GT", "Thazard", "Barracuda", "Bonite"],
    LureType.METAL_JIG: ["Loche", "Loche pintade", "Thon", "Carangue", "Mérou"],
    LureType.VIBRATING_JIG: ["Loche", "Loche pintade", "Thon", "Carangue", "Mérou"],
    LureType.FLYING_FISH: ["Wahoo", "Marlin", "Thon jaune", "Mahi-mahi", "Voilier"],
    LureType.SPOON: ["Thazard", "Bonite", "Carangue", "Barracuda"],
    LureType.STICKBAIT: ["Carangue GT", "Thazard", "Barracuda"],
    LureType.FLOATING_STICKBAIT: ["Carangue GT", "Thazard", "Barracuda"],
}


def _species_by_size(lure: Lure) -> List[str]:
    length = lure.length_cm
    depth = lure.depth_max if lure.depth_max is not None else DEFAULT_DEPTH
    out: List[str] = []

    if length < 12 and depth <= 3:
        out += ["Thazard", "Bonite", "Barracuda", "Carangue"]
    if 12 <= length <= 18:
        out += ["Carangue GT", "Thazard", "Bonite"]
        if depth >= 5:
            out += ["Mahi-mahi", "Thon jaune"]
    if length > 15 and depth > 8:
        out += ["Wahoo", "Thon jaune", "Mahi-mahi"]
        if length > 20:
            out += ["Marlin", "Voilier"]
    if length < 10 and depth <= 5:
        out += ["Loche", "Picot"]
    return out


def _species_by_color(color: Color) -> List[str]:
    for colors, names in SPECIES_BY_COLOR_GROUP:
        if color in colors:
            return list(names)
    return []


def _species_by_type(lure: Lure) -> List[str]:
    if lure.lure_type == LureType.SKIRTED:
        if lure.length_cm >= 15:
            return ["Mahi-mahi", "Wahoo", "Thon jaune", "Marlin", "Voilier"]
        return ["Mahi-mahi", "Thazard", "Carangue GT"]
    return list(SPECIES_BY_TYPE.get(lure.lure_type, []))


def infer_species(lure: Lure) -> List[str]:
    """Union of the size, colour and type passes, first-seen order kept."""
    species: List[str] = []
    for name in _species_by_size(lure) + _species_by_color(lure.color) + _species_by_type(lure):
        if name not in species:
            species.append(name)
    return species


# =============================================================================
# SPEED
# =============================================================================

DEFAULT_SPEED_RANGE = (5.0, 8.0)

SPEED_BY_TYPE: Dict[LureType, Tuple[float, float]] = {
    LureType.POPPER: (4.0, 7.0),
    LureType.FLOATING_STICKBAIT: (4.0, 7.0),
    LureType.SINKING_MINNOW: (5.0, 9.0),
    LureType.SKIRTED: (6.0, 10.0),
    LureType.FLYING_FISH: (5.0, 9.0),
    LureType.SQUID: (4.0, 7.0),
    LureType.STICKBAIT: (3.0, 6.0),
    LureType.SINKING_STICKBAIT: (3.0, 6.0),
}


def infer_speed_range(lure: Lure) -> Tuple[float, float]:
    """Trolling speed envelope (knots) by lure type, sub-bracketed by length where it matters."""
    t = lure.lure_type
    length = lure.length_cm

    if t == LureType.DIVING_MINNOW:
        if length < 12:
            return (4.0, 7.0)
        if length < 18:
            return (5.0, 9.0)
        return (6.0, 11.0)
    if t == LureType.SPOON:
        return (3.0, 6.0) if length < 8 else (4.0, 7.0)
    if t in (LureType.FLOATING_MINNOW, LureType.VIBRATING_MINNOW):
        return (4.0, 7.0) if length < 12 else (5.0, 8.0)
    return SPEED_BY_TYPE.get(t, DEFAULT_SPEED_RANGE)


def speed_range(lure: Lure) -> Tuple[float, float]:
    """Declared speed range when both bounds are set, inferred otherwise."""
    if lure.speed_min is not None and lure.speed_max is not None:
        return (lure.speed_min, lure.speed_max)
    return infer_speed_range(lure)


# =============================================================================
# OPTIMAL CONDITIONS
# =============================================================================

BASE_CONDITIONS: Dict[ContrastClass, Tuple[List[TimeOfDay], List[Turbidity], List[SeaState]]] = {
    ContrastClass.NATURAL: (
        [TimeOfDay.MORNING, TimeOfDay.AFTERNOON],
        [Turbidity.CLEAR, Turbidity.SLIGHTLY_MURKY],
        [SeaState.CALM, SeaState.SLIGHT],
    ),
    ContrastClass.FLASHY: (
        [TimeOfDay.MORNING, TimeOfDay.MIDDAY, TimeOfDay.AFTERNOON],
        [Turbidity.SLIGHTLY_MURKY, Turbidity.MURKY, Turbidity.VERY_MURKY],
        [SeaState.SLIGHT, SeaState.ROUGH],
    ),
    ContrastClass.DARK: (
        [TimeOfDay.DAWN, TimeOfDay.DUSK, TimeOfDay.NIGHT],
        [Turbidity.MURKY, Turbidity.VERY_MURKY],
        [SeaState.SLIGHT, SeaState.ROUGH, SeaState.FORMED],
    ),
    ContrastClass.CONTRASTED: (
        [TimeOfDay.DAWN, TimeOfDay.MORNING, TimeOfDay.DUSK],
        [Turbidity.SLIGHTLY_MURKY, Turbidity.MURKY],
        [SeaState.CALM, SeaState.SLIGHT, SeaState.ROUGH],
    ),
}

SHINY_FINISHES = {Finish.GLOSSY, Finish.HOLOGRAPHIC, Finish.CHROME, Finish.MIRROR, Finish.GLITTER}


def infer_optimal_conditions(lure: Lure) -> OptimalConditions:
    base_times, base_turbidity, base_seas = BASE_CONDITIONS[effective_class(lure.color, lure.finish)]
    times = set(base_times)
    turbidity = set(base_turbidity)
    seas = set(base_seas)

    # colour refinements
    if is_bright_pink(lure.color):
        seas.add(SeaState.FORMED)
    if is_yellow_green(lure.color):
        turbidity = {Turbidity.MURKY, Turbidity.VERY_MURKY}
    if is_very_dark(lure.color):
        times = {TimeOfDay.DAWN, TimeOfDay.DUSK, TimeOfDay.NIGHT}

    # finish refinements
    finish = lure.finish
    if finish == Finish.PHOSPHORESCENT:
        times |= {TimeOfDay.NIGHT, TimeOfDay.DUSK}
    elif finish == Finish.MATTE:
        times = {TimeOfDay.DAWN, TimeOfDay.DUSK}
        turbidity = {Turbidity.MURKY, Turbidity.VERY_MURKY}
    elif finish in SHINY_FINISHES:
        turbidity = {Turbidity.CLEAR, Turbidity.SLIGHTLY_MURKY}
        times.add(TimeOfDay.MIDDAY)

    return OptimalConditions(
        times=ordered(TimeOfDay, times),
        turbidity=ordered(Turbidity, turbidity),
        sea_states=ordered(SeaState, seas),
        tides=[Tide.RISING, Tide.FALLING],
        moons=None,
    )


# =============================================================================
# SPREAD POSITIONS
# =============================================================================

POSITION_AFFINITY: Dict[ContrastClass, List[SpreadPosition]] = {
    ContrastClass.NATURAL: [SpreadPosition.SHORT_CORNER],
    ContrastClass.DARK: [SpreadPosition.LONG_CORNER],
    ContrastClass.FLASHY: [SpreadPosition.SHORT_RIGGER, SpreadPosition.LONG_RIGGER],
    ContrastClass.CONTRASTED: [SpreadPosition.SHOTGUN],
}


def infer_spread_positions(lure: Lure) -> List[SpreadPosition]:
    return list(POSITION_AFFINITY[effective_class(lure.color, lure.finish)])


# =============================================================================
# APPLY
# =============================================================================

@dataclass
class InferredAttributes:
    zones: List[Zone]
    species: List[str]
    speed_range: Tuple[float, float]
    spread_positions: List[SpreadPosition]
    optimal_conditions: OptimalConditions

    def to_dict(self) -> Dict[str, Any]:
        return {
            "zones": [z.value for z in self.zones],
            "species": list(self.species),
            "speed_range": {"min": self.speed_range[0], "max": self.speed_range[1]},
            "spread_positions": [p.value for p in self.spread_positions],
            "optimal_conditions": self.optimal_conditions.to_dict(),
        }


def infer_all(lure: Lure) -> InferredAttributes:
    return InferredAttributes(
        zones=infer_zones(lure),
        species=infer_species(lure),
        speed_range=infer_speed_range(lure),
        spread_positions=infer_spread_positions(lure),
        optimal_conditions=infer_optimal_conditions(lure),
    )


def apply_inference(lure: Lure, *, recompute: bool = False) -> Lure:
    """
    Return a copy of the lure with inferred fields filled and is_computed set.

    An already computed lure comes back unchanged unless recompute=True.
    Declared fields (including declared speeds) are never touched. Zones, species
    and spread positions the lure already carries (for example merged note hints)
    are kept, with the inferred values added to them.
    """
    if lure.is_computed and not recompute:
        return lure

    inferred = infer_all(lure)
    logger.debug("Inferred attributes for lure %s (%s)", lure.id, lure.name)
    species = list(lure.target_species or [])
    species += [s for s in inferred.species if s not in species]
    return replace(
        lure,
        zones=ordered(Zone, (lure.zones or []) + inferred.zones),
        target_species=species,
        spread_positions=ordered(SpreadPosition, (lure.spread_positions or []) + inferred.spread_positions),
        optimal_conditions=inferred.optimal_conditions,
        is_computed=True,
    )


def resolved_zones(lure: Lure) -> List[Zone]:
    return lure.zones if lure.zones is not None else infer_zones(lure)


def resolved_species(lure: Lure) -> List[str]:
    return lure.target_species if lure.target_species is not None else infer_species(lure)


def resolved_conditions(lure: Lure) -> OptimalConditions:
    return lure.optimal_conditions if lure.optimal_conditions is not None else infer_optimal_conditions(lure)


def resolved_positions(lure: Lure) -> List[SpreadPosition]:
    return lure.spread_positions if lure.spread_positions is not None else infer_spread_positions(lure)
