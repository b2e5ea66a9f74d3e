# trollint/models/catalog.py
"""
Closed vocabularies shared by the whole engine.

Wire values are the ones used by the lure catalog exports, so a JSON catalog
can be loaded without any translation table.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Dict, Tuple


class LureType(str, Enum):
    """Physical shape of a lure."""
    FLOATING_MINNOW = "poissonNageur"
    DIVING_MINNOW = "poissonNageurPlongeant"
    SINKING_MINNOW = "poissonNageurCoulant"
    VIBRATING_MINNOW = "poissonNageurVibrant"
    SKIRTED = "leurreAJupe"
    POPPER = "popper"
    STICKBAIT = "stickbait"
    FLOATING_STICKBAIT = "stickbaitFlottant"
    SINKING_STICKBAIT = "stickbaitCoulant"
    METAL_JIG = "jigMetallique"
    JIG_STICKBAIT = "jigStickbait"
    SINKING_JIG_STICKBAIT = "jigStickbaitCoulant"
    VIBRATING_JIG = "jigVibrant"
    LIPLESS = "vibeLipless"
    FLYING_FISH = "leurreDeTrainePoissonVolant"
    SPOON = "cuiller"
    SOFT_PLASTIC = "leurreSouple"
    SQUID = "Squid"
    MADAI = "madai"
    INCHIKU = "inchiku"


class Technique(str, Enum):
    TROLLING = "traine"
    CASTING = "lancer"
    JIG = "jig"
    RIG = "montage"
    HANDLINE = "palangrotte"
    VERTICAL_JIGGING = "jigging"


class Finish(str, Enum):
    HOLOGRAPHIC = "holographique"
    METALLIC = "metallique"
    MATTE = "mate"
    GLOSSY = "brillante"
    PEARL = "perlee"
    GLITTER = "paillete"
    UV = "UV"
    PHOSPHORESCENT = "phosphorescent"
    CHROME = "chrome"
    MIRROR = "miroir"


class Zone(str, Enum):
    LAGOON = "lagon"
    REEF = "recif"
    PASS = "passe"
    DROP_OFF = "tombant"
    OFFSHORE = "large"
    DEEP = "profond"
    FAD = "dcp"


class SpreadPosition(str, Enum):
    FREE = "libre"
    SHORT_CORNER = "shortCorner"
    LONG_CORNER = "longCorner"
    SHORT_RIGGER = "shortRigger"
    LONG_RIGGER = "longRigger"
    SHOTGUN = "shotgun"


class TimeOfDay(str, Enum):
    DAWN = "aube"
    MORNING = "matinee"
    MIDDAY = "midi"
    AFTERNOON = "apres_midi"
    DUSK = "crepuscule"
    NIGHT = "nuit"


class Light(str, Enum):
    STRONG = "forte"
    DIFFUSE = "diffuse"
    LOW = "faible"
    DARK = "sombre"
    NIGHT = "nuit"


class Turbidity(str, Enum):
    CLEAR = "claire"
    SLIGHTLY_MURKY = "legerementTrouble"
    MURKY = "trouble"
    VERY_MURKY = "tresTrouble"


class SeaState(str, Enum):
    CALM = "calme"
    SLIGHT = "peuAgitee"
    ROUGH = "agitee"
    FORMED = "formee"


class Tide(str, Enum):
    RISING = "montante"
    FALLING = "descendante"
    SLACK = "etale"


class Moon(str, Enum):
    NEW = "nouvelleLune"
    FIRST_QUARTER = "premierQuartier"
    FULL = "pleineLune"
    LAST_QUARTER = "dernierQuartier"


class ContrastClass(str, Enum):
    """Coarse visual-salience bucket of a lure colour."""
    NATURAL = "naturel"
    FLASHY = "flashy"
    DARK = "sombre"
    CONTRASTED = "contraste"


class Species(str, Enum):
    """Target species, valued by display name."""
    YELLOWFIN_TUNA = "Thon jaune"
    BIGEYE_TUNA = "Thon obèse"
    SKIPJACK = "Bonite"
    WAHOO = "Wahoo"
    MAHI_MAHI = "Mahi-mahi"
    MARLIN = "Marlin"
    SAILFISH = "Voilier"
    SPANISH_MACKEREL = "Thazard"
    DOGTOOTH_MACKEREL = "Thazard bâtard"
    TREVALLY = "Carangue"
    GIANT_TREVALLY = "Carangue GT"
    BLUEFIN_TREVALLY = "Carangue bleue"
    BARRACUDA = "Barracuda"
    SMALL_BARRACUDA = "Bécune"
    GROUPER = "Loche"
    CORAL_GROUPER = "Loche pintade"
    GIANT_GROUPER = "Mérou"
    EMPEROR = "Empereur"
    RED_SNAPPER = "Vivaneau rouge"
    RED_BASS = "Vivaneau chien rouge"
    BLACKTAIL_SNAPPER = "Vivaneau queue noire"
    SPANGLED_EMPEROR = "Bec de cane"
    RAINBOW_RUNNER = "Coureur arc-en-ciel"


class Color(str, Enum):
    # natural
    BLUE_SILVER = "bleuArgente"
    BLUE_WHITE = "bleuBlanc"
    GREEN_SILVER = "vertArgente"
    GREEN_GOLD = "vertDore"
    SARDINE = "sardine"
    MACKEREL = "maquereau"
    SILVER = "argente"
    SILVER_BLUE = "argenteBleu"
    WHITE = "blanc"
    CLEAR = "transparent"
    BLUE = "bleu"
    GREEN = "vert"
    OLIVE = "vertOlive"
    BLOW = "blow"
    # flashy
    FUCHSIA = "roseFuchsia"
    PINK = "rose"
    PINK_FLUO = "roseFluo"
    CHARTREUSE = "chartreuse"
    ORANGE = "orange"
    YELLOW = "jaune"
    YELLOW_FLUO = "jauneFluo"
    PINK_HOLO = "roseHolographique"
    YELLOW_HOLO = "jauneHolographique"
    GOLD = "or"
    # dark
    BLACK = "noir"
    BLACK_PURPLE = "noirViolet"
    BLACK_BLUE = "noirBleu"
    BLUE_BLACK = "bleuNoir"
    GREEN_BLACK = "vertNoir"
    DARK_PURPLE = "violetFonce"
    DARK_BLUE = "bleuFonce"
    BLACK_RED = "noirRouge"
    PURPLE = "violet"
    BROWN = "brun"
    CHESTNUT = "marron"
    # contrasted
    BLUE_BLACK_GREY = "bleuNoirGris"
    PURPLE_BLACK = "violetNoir"
    PINK_WHITE = "roseBlanc"
    RED_YELLOW = "rougeJaune"
    ORANGE_YELLOW = "orangeJaune"
    WHITE_RED = "blancRouge"
    WHITE_ORANGE = "blancOrange"
    GREEN_WHITE = "vertBlanc"
    PINK_BLUE = "roseBleu"
    BEIGE = "beige"
    RED = "rouge"


# RGB components in [0, 1], one entry per palette colour.
COLOR_RGB: Dict[Color, Tuple[float, float, float]] = {
    Color.BLUE_SILVER: (0.3, 0.6, 0.9),
    Color.BLUE_WHITE: (0.5, 0.7, 1.0),
    Color.GREEN_SILVER: (0.2, 0.7, 0.5),
    Color.GREEN_GOLD: (0.4, 0.7, 0.2),
    Color.SARDINE: (0.7, 0.8, 0.9),
    Color.MACKEREL: (0.2, 0.6, 0.5),
    Color.SILVER: (0.6, 0.6, 0.6),
    Color.SILVER_BLUE: (0.6, 0.7, 0.9),
    Color.WHITE: (1.0, 1.0, 1.0),
    Color.CLEAR: (0.7, 0.7, 0.7),
    Color.BLUE: (0.0, 0.48, 1.0),
    Color.GREEN: (0.2, 0.78, 0.35),
    Color.OLIVE: (0.5, 0.5, 0.2),
    Color.BLOW: (0.5, 0.8, 1.0),
    Color.FUCHSIA: (1.0, 0.0, 0.5),
    Color.PINK: (1.0, 0.18, 0.33),
    Color.PINK_FLUO: (1.0, 0.2, 0.7),
    Color.CHARTREUSE: (0.5, 1.0, 0.0),
    Color.ORANGE: (1.0, 0.58, 0.0),
    Color.YELLOW: (1.0, 0.8, 0.0),
    Color.YELLOW_FLUO: (1.0, 1.0, 0.0),
    Color.PINK_HOLO: (1.0, 0.5, 0.8),
    Color.YELLOW_HOLO: (1.0, 0.9, 0.3),
    Color.GOLD: (1.0, 0.84, 0.0),
    Color.BLACK: (0.0, 0.0, 0.0),
    Color.BLACK_PURPLE: (0.2, 0.0, 0.3),
    Color.BLACK_BLUE: (0.0, 0.1, 0.3),
    Color.BLUE_BLACK: (0.1, 0.1, 0.3),
    Color.GREEN_BLACK: (0.0, 0.2, 0.1),
    Color.DARK_PURPLE: (0.3, 0.0, 0.5),
    Color.DARK_BLUE: (0.0, 0.2, 0.6),
    Color.BLACK_RED: (0.3, 0.0, 0.1),
    Color.PURPLE: (0.69, 0.32, 0.87),
    Color.BROWN: (0.6, 0.4, 0.2),
    Color.CHESTNUT: (0.4, 0.2, 0.1),
    Color.BLUE_BLACK_GREY: (0.2, 0.3, 0.4),
    Color.PURPLE_BLACK: (0.3, 0.0, 0.4),
    Color.PINK_WHITE: (1.0, 0.7, 0.8),
    Color.RED_YELLOW: (1.0, 0.5, 0.0),
    Color.ORANGE_YELLOW: (1.0, 0.7, 0.0),
    Color.WHITE_RED: (1.0, 0.3, 0.3),
    Color.WHITE_ORANGE: (1.0, 0.6, 0.4),
    Color.GREEN_WHITE: (0.5, 0.9, 0.6),
    Color.PINK_BLUE: (0.7, 0.4, 0.9),
    Color.BEIGE: (0.9, 0.9, 0.7),
    Color.RED: (1.0, 0.23, 0.19),
}


@dataclass(frozen=True)
class BoatProfileSpec:
    reference_speed: float
    optimal_min: float
    optimal_max: float
    max_lines: int


class BoatProfile(str, Enum):
    CLASSIC = "classique"
    COMPACT = "clark429"

    @property
    def spec(self) -> BoatProfileSpec:
        return BOAT_PROFILES[self]


BOAT_PROFILES: Dict[BoatProfile, BoatProfileSpec] = {
    BoatProfile.CLASSIC: BoatProfileSpec(reference_speed=7.0, optimal_min=6.0, optimal_max=12.0, max_lines=5),
    BoatProfile.COMPACT: BoatProfileSpec(reference_speed=5.5, optimal_min=5.2, optimal_max=6.2, max_lines=4),
}
