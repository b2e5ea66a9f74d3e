# trollint/extract/notes.py
"""
Keyword extraction from free-text angler notes.

Used to migrate legacy notes into structured fields. The output is advisory:
merge_note_hints() unions it with what a lure already carries and never
replaces a declared value.
"""

from __future__ import annotations

import re

from dataclasses import dataclass, replace
from typing import Any, Dict, List, Optional, Tuple

from trollint.models.catalog import Finish, SpreadPosition, Zone
from trollint.models.lure import Lure, ordered


@dataclass
class NoteHints:
    zones: List[Zone]
    species: List[str]
    positions: List[SpreadPosition]
    finish: Optional[Finish]

    def is_empty(self) -> bool:
        return not (self.zones or self.species or self.positions or self.finish)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "zones": [z.value for z in self.zones],
            "species": list(self.species),
            "positions": [p.value for p in self.positions],
            "finish": self.finish.value if self.finish else None,
        }


# Short tokens that would fire inside unrelated words ("matin", "gtx") need word boundaries.
BOUNDED_TERMS = {"gt", "mat", "mate", "uv"}


def _has(text: str, *terms: str) -> bool:
    for term in terms:
        if term in BOUNDED_TERMS:
            if re.search(r"\b" + re.escape(term) + r"\b", text):
                return True
        elif term in text:
            return True
    return False


def _norm(text: Optional[str]) -> str:
    return (text or "").lower()


# =============================================================================
# ZONES
# =============================================================================

ZONE_KEYWORDS: Dict[Zone, List[str]] = {
    Zone.LAGOON: ["lagon"],
    Zone.REEF: ["récif", "recif"],
    Zone.OFFSHORE: ["large", "haute mer", "hauturier", "trolling", "traine", "traîne"],
    Zone.DEEP: ["profond", "tombant", "deep"],
    Zone.PASS: ["passe"],
    Zone.FAD: ["dcp"],
}


def extract_zones(text: Optional[str]) -> List[Zone]:
    t = _norm(text)
    return ordered(Zone, [zone for zone, terms in ZONE_KEYWORDS.items() if _has(t, *terms)])


# =============================================================================
# SPECIES
# =============================================================================

# Simple rules: any keyword -> species name
SIMPLE_SPECIES: List[Tuple[str, List[str]]] = [
    ("Wahoo", ["wahoo", "wahou"]),
    ("Thazard", ["thazard"]),
    ("Bonite", ["bonite"]),
    ("Mahi-mahi", ["mahi", "coryphène", "coryphene"]),
    ("Marlin", ["marlin"]),
    ("Voilier", ["voilier"]),
    ("Picot", ["picot"]),
    ("Barracuda", ["barracuda", "bécune", "becune"]),
    ("Mérou", ["mérou", "merou"]),
    ("Coureur arc-en-ciel", ["coureur"]),
]


def _tuna(t: str) -> Optional[str]:
    # "thon" never fires next to "bonite"
    if "thon" not in t or "bonite" in t:
        return None
    if "thon obèse" in t or "thon obese" in t:
        return "Thon obèse"
    return "Thon jaune"


def _trevally(t: str) -> Optional[str]:
    if "carangue" not in t:
        return None
    if _has(t, "gt", "g.t", "ignobilis"):
        return "Carangue GT"
    if "bleue" in t:
        return "Carangue bleue"
    return "Carangue"


def _grouper(t: str) -> Optional[str]:
    if "loche" not in t:
        return None
    return "Loche pintade" if "pintade" in t else "Loche"


def _snapper(t: str) -> Optional[str]:
    if "vivaneau" not in t:
        return None
    if "chien rouge" in t:
        return "Vivaneau chien rouge"
    if "rouge" in t:
        return "Vivaneau rouge"
    return "Vivaneau"


def extract_species(text: Optional[str]) -> List[str]:
    """
    Species named in a note.
    Qualified names ("carangue GT", "loche pintade") replace the generic one
    instead of being added next to it.
    """
    t = _norm(text)
    found: List[Optional[str]] = [_tuna(t), _trevally(t), _grouper(t), _snapper(t)]
    found += [name for name, terms in SIMPLE_SPECIES if _has(t, *terms)]

    species: List[str] = []
    for name in found:
        if name and name not in species:
            species.append(name)
    return species


# =============================================================================
# SPREAD POSITIONS
# =============================================================================

def extract_spread_positions(text: Optional[str]) -> List[SpreadPosition]:
    t = _norm(text)
    qualified = "short" in t or "long" in t
    positions: List[SpreadPosition] = []

    if _has(t, "short corner", "shortcorner", "short-corner"):
        positions.append(SpreadPosition.SHORT_CORNER)
    if _has(t, "long corner", "longcorner", "long-corner"):
        positions.append(SpreadPosition.LONG_CORNER)
    if "corner" in t and not qualified:
        positions += [SpreadPosition.SHORT_CORNER, SpreadPosition.LONG_CORNER]

    if "rigger" in t:
        if "short" in t:
            positions.append(SpreadPosition.SHORT_RIGGER)
        if "long" in t:
            positions.append(SpreadPosition.LONG_RIGGER)
        if not qualified:
            positions += [SpreadPosition.SHORT_RIGGER, SpreadPosition.LONG_RIGGER]

    if "shotgun" in t:
        positions.append(SpreadPosition.SHOTGUN)

    return ordered(SpreadPosition, positions)


# =============================================================================
# FINISH
# =============================================================================

# Checked in order, first hit wins.
FINISH_KEYWORDS: List[Tuple[Finish, List[str]]] = [
    (Finish.HOLOGRAPHIC, ["holographique", "holo"]),
    (Finish.METALLIC, ["métallique", "metallique"]),
    (Finish.MATTE, ["mat", "mate"]),
    (Finish.GLOSSY, ["brillant"]),
    (Finish.PEARL, ["perlé", "perle", "nacré", "nacre"]),
    (Finish.GLITTER, ["pailleté", "paillete", "paillette", "glitter"]),
    (Finish.UV, ["uv"]),
    (Finish.PHOSPHORESCENT, ["phosphorescent", "glow"]),
    (Finish.CHROME, ["chrome"]),
    (Finish.MIRROR, ["miroir"]),
]


def extract_finish(text: Optional[str]) -> Optional[Finish]:
    t = _norm(text)
    for finish, terms in FINISH_KEYWORDS:
        if _has(t, *terms):
            return finish
    return None


# =============================================================================
# COMBINED
# =============================================================================

def extract_notes(text: Optional[str]) -> NoteHints:
    return NoteHints(
        zones=extract_zones(text),
        species=extract_species(text),
        positions=extract_spread_positions(text),
        finish=extract_finish(text),
    )


def merge_note_hints(lure: Lure, hints: Optional[NoteHints] = None) -> Lure:
    """
    Union note hints into a copy of the lure.

    Lists that were never computed stay None when the note adds nothing, so
    "unknown" is not turned into "explicitly none". The finish is only filled
    when the lure has none declared.
    """
    hints = hints if hints is not None else extract_notes(lure.notes)
    if hints.is_empty():
        return lure

    def union(current, extra, enum_cls=None):
        if not extra:
            return current
        merged = list(current or []) + [x for x in extra if x not in (current or [])]
        return ordered(enum_cls, merged) if enum_cls else merged

    return replace(
        lure,
        zones=union(lure.zones, hints.zones, Zone),
        target_species=union(lure.target_species, hints.species),
        spread_positions=union(lure.spread_positions, hints.positions, SpreadPosition),
        finish=lure.finish if lure.finish is not None else hints.finish,
    )
