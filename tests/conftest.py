"""
Shared builders for lures and fishing-conditions queries.
"""

import pytest

from trollint.models.catalog import (
    BoatProfile,
    Color,
    Light,
    LureType,
    Moon,
    SeaState,
    Technique,
    Tide,
    TimeOfDay,
    Turbidity,
    Zone,
)
from trollint.models.lure import Lure
from trollint.models.query import FishingConditionsQuery


def make_lure(**overrides) -> Lure:
    """A 14 cm pink-fluo trolling popper with nothing else declared."""
    fields = dict(
        id="L1",
        name="Popper rose",
        brand="Test",
        lure_type=LureType.POPPER,
        technique=Technique.TROLLING,
        length_cm=14.0,
        color=Color.PINK_FLUO,
    )
    fields.update(overrides)
    return Lure(**fields)


def make_query(**overrides) -> FishingConditionsQuery:
    """Lagoon, 5 m, midday, strong light, clear and calm water, rising tide, 6 kt."""
    fields = dict(
        zone=Zone.LAGOON,
        bottom_depth=5.0,
        boat_speed=6.0,
        time_of_day=TimeOfDay.MIDDAY,
        light=Light.STRONG,
        turbidity=Turbidity.CLEAR,
        sea_state=SeaState.CALM,
        tide=Tide.RISING,
        moon=Moon.FULL,
        priority_species=None,
        lines=3,
        boat_profile=BoatProfile.CLASSIC,
    )
    fields.update(overrides)
    return FishingConditionsQuery(**fields)


def make_catalog():
    """Six trolling lures covering all four contrast classes, plus one casting-only lure."""
    return [
        make_lure(id="pink", color=Color.PINK_FLUO),
        make_lure(id="sardine", lure_type=LureType.DIVING_MINNOW, color=Color.SARDINE, length_cm=13.0),
        make_lure(id="black", lure_type=LureType.SKIRTED, color=Color.BLACK_PURPLE, length_cm=20.0),
        make_lure(id="whitered", lure_type=LureType.FLOATING_MINNOW, color=Color.WHITE_RED, length_cm=11.0),
        make_lure(id="yellow", lure_type=LureType.FLOATING_MINNOW, color=Color.YELLOW_FLUO, length_cm=10.0),
        make_lure(id="blue", lure_type=LureType.DIVING_MINNOW, color=Color.BLUE_SILVER, length_cm=16.0),
        make_lure(id="cast", technique=Technique.CASTING, lure_type=LureType.STICKBAIT, color=Color.SILVER),
    ]


@pytest.fixture
def lure():
    return make_lure()


@pytest.fixture
def query():
    return make_query()


@pytest.fixture
def catalog():
    return make_catalog()
