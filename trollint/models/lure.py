# trollint/models/lure.py

from __future__ import annotations

import json
import logging

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, Iterable, List, Optional, Type, TypeVar

from trollint.errors import CatalogError
from trollint.models.catalog import (
    Color,
    Finish,
    LureType,
    Moon,
    SeaState,
    SpreadPosition,
    Technique,
    Tide,
    TimeOfDay,
    Turbidity,
    Zone,
)

logger = logging.getLogger(__name__)

E = TypeVar("E", bound=Enum)


def ordered(enum_cls: Type[E], members: Iterable[E]) -> List[E]:
    """De-duplicate members and return them in enum declaration order."""
    wanted = set(members)
    return [m for m in enum_cls if m in wanted]


@dataclass
class OptimalConditions:
    """
    Conditions under which a lure is expected to fish best.
    moons is None when it cannot be inferred (visual attributes say nothing about it).
    """
    times: List[TimeOfDay]
    turbidity: List[Turbidity]
    sea_states: List[SeaState]
    tides: List[Tide]
    moons: Optional[List[Moon]] = None

    def to_dict(self) -> Dict[str, Any]:
        return {
            "times": [t.value for t in self.times],
            "turbidity": [t.value for t in self.turbidity],
            "sea_states": [s.value for s in self.sea_states],
            "tides": [t.value for t in self.tides],
            "moons": [m.value for m in self.moons] if self.moons is not None else None,
        }


@dataclass
class Lure:
    """
    One catalog entry.

    Declared fields come from the angler. zones, target_species, spread_positions
    and optimal_conditions are inferred; None means "not computed / unknown",
    an empty list means "computed, nothing matched".
    """
    id: str
    name: str
    brand: str
    lure_type: LureType
    technique: Technique
    length_cm: float
    color: Color
    compatible_techniques: List[Technique] = field(default_factory=list)
    weight_g: Optional[float] = None
    secondary_color: Optional[Color] = None
    finish: Optional[Finish] = None
    depth_min: Optional[float] = None
    depth_max: Optional[float] = None
    speed_min: Optional[float] = None
    speed_max: Optional[float] = None
    notes: Optional[str] = None

    # inferred
    zones: Optional[List[Zone]] = None
    target_species: Optional[List[str]] = None
    spread_positions: Optional[List[SpreadPosition]] = None
    optimal_conditions: Optional[OptimalConditions] = None
    is_computed: bool = False

    @property
    def techniques(self) -> List[Technique]:
        """Declared primary technique plus the compatible ones."""
        return ordered(Technique, [self.technique, *self.compatible_techniques])

    def supports(self, technique: Technique) -> bool:
        return technique in self.techniques

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "name": self.name,
            "brand": self.brand,
            "lure_type": self.lure_type.value,
            "technique": self.technique.value,
            "compatible_techniques": [t.value for t in self.compatible_techniques],
            "length_cm": self.length_cm,
            "weight_g": self.weight_g,
            "color": self.color.value,
            "secondary_color": self.secondary_color.value if self.secondary_color else None,
            "finish": self.finish.value if self.finish else None,
            "depth_min": self.depth_min,
            "depth_max": self.depth_max,
            "speed_min": self.speed_min,
            "speed_max": self.speed_max,
            "notes": self.notes,
            "zones": [z.value for z in self.zones] if self.zones is not None else None,
            "target_species": list(self.target_species) if self.target_species is not None else None,
            "spread_positions": (
                [p.value for p in self.spread_positions] if self.spread_positions is not None else None
            ),
            "optimal_conditions": self.optimal_conditions.to_dict() if self.optimal_conditions else None,
            "is_computed": self.is_computed,
        }


# =============================================================================
# CATALOG LOADING
# =============================================================================

# Keys used by the legacy catalog export -> field names
LEGACY_KEYS: Dict[str, str] = {
    "nom": "name",
    "marque": "brand",
    "type": "lure_type",
    "typeLeurre": "lure_type",
    "categoriePeche": "technique",
    "techniquesPossibles": "compatible_techniques",
    "longueur": "length_cm",
    "poids": "weight_g",
    "couleurPrincipale": "color",
    "couleursSecondaires": "secondary_color",
    "couleurSecondaire": "secondary_color",
    "finition": "finish",
    "profondeurMin": "depth_min",
    "profondeurMax": "depth_max",
    "vitesseMinimale": "speed_min",
    "vitesseMaximale": "speed_max",
    "especesCibles": "target_species",
    "positionsSpread": "spread_positions",
    "isComputed": "is_computed",
}


def _enum(enum_cls: Type[E], value: Any, key: str) -> E:
    try:
        return enum_cls(value)
    except ValueError:
        raise CatalogError(f"Unknown {enum_cls.__name__} value for '{key}': {value!r}") from None


def _opt_float(raw: Dict[str, Any], key: str) -> Optional[float]:
    value = raw.get(key)
    if value is None:
        return None
    try:
        return float(value)
    except (TypeError, ValueError):
        raise CatalogError(f"Field '{key}' must be a number, got {value!r}") from None


def _conditions(value: Any) -> Optional[OptimalConditions]:
    """OptimalConditions from the dict written by OptimalConditions.to_dict()."""
    if value is None:
        return None
    if not isinstance(value, dict):
        raise CatalogError(f"Field 'optimal_conditions' must be an object, got {type(value).__name__}")

    def members(enum_cls, key):
        return [_enum(enum_cls, v, f"optimal_conditions.{key}") for v in value.get(key) or []]

    moons = value.get("moons")
    return OptimalConditions(
        times=members(TimeOfDay, "times"),
        turbidity=members(Turbidity, "turbidity"),
        sea_states=members(SeaState, "sea_states"),
        tides=members(Tide, "tides"),
        moons=members(Moon, "moons") if moons is not None else None,
    )


def lure_from_dict(data: Dict[str, Any]) -> Lure:
    """
    Build a Lure from a JSON-like dict.
    Accepts snake_case keys and the legacy export keys (see LEGACY_KEYS).
    """
    if not isinstance(data, dict):
        raise CatalogError(f"Lure record must be an object, got {type(data).__name__}")

    raw: Dict[str, Any] = {}
    for k, v in data.items():
        raw[LEGACY_KEYS.get(k, k)] = v

    for key in ("lure_type", "technique", "length_cm", "color"):
        if raw.get(key) is None:
            raise CatalogError(f"Lure record is missing required field '{key}'")

    # the legacy export stores secondary colours as a list; only the first one is used
    secondary = raw.get("secondary_color")
    if isinstance(secondary, list):
        secondary = secondary[0] if secondary else None

    compatible = raw.get("compatible_techniques") or []
    if not isinstance(compatible, list):
        raise CatalogError("Field 'compatible_techniques' must be a list")

    zones = raw.get("zones")
    species = raw.get("target_species")
    positions = raw.get("spread_positions")

    return Lure(
        id=str(raw.get("id", "")),
        name=str(raw.get("name", "")),
        brand=str(raw.get("brand", "")),
        lure_type=_enum(LureType, raw["lure_type"], "lure_type"),
        technique=_enum(Technique, raw["technique"], "technique"),
        compatible_techniques=[_enum(Technique, t, "compatible_techniques") for t in compatible],
        length_cm=_opt_float(raw, "length_cm"),
        weight_g=_opt_float(raw, "weight_g"),
        color=_enum(Color, raw["color"], "color"),
        secondary_color=_enum(Color, secondary, "secondary_color") if secondary else None,
        finish=_enum(Finish, raw["finish"], "finish") if raw.get("finish") else None,
        depth_min=_opt_float(raw, "depth_min"),
        depth_max=_opt_float(raw, "depth_max"),
        speed_min=_opt_float(raw, "speed_min"),
        speed_max=_opt_float(raw, "speed_max"),
        notes=raw.get("notes"),
        zones=[_enum(Zone, z, "zones") for z in zones] if zones is not None else None,
        target_species=[str(s) for s in species] if species is not None else None,
        spread_positions=(
            [_enum(SpreadPosition, p, "spread_positions") for p in positions] if positions is not None else None
        ),
        optimal_conditions=_conditions(raw.get("optimal_conditions")),
        is_computed=bool(raw.get("is_computed", False)),
    )


def load_catalog(path: str) -> List[Lure]:
    """
    Load a lure catalog from a JSON file.
    The file holds either a list of records or an object with a "leurres" / "lures" list.
    """
    with open(path, encoding="utf-8") as f:
        payload = json.load(f)

    if isinstance(payload, dict):
        payload = payload.get("lures", payload.get("leurres"))
    if not isinstance(payload, list):
        raise CatalogError(f"Catalog file {path} does not contain a list of lures")

    lures = [lure_from_dict(rec) for rec in payload]
    logger.info("Loaded %d lures from %s", len(lures), path)
    return lures
