"""
Test suite for trollint/features/inference.py
==============================================
Zone, species, speed, condition and position inference.
"""

import pytest

from conftest import make_lure
from trollint.errors import CatalogError
from trollint.extract.notes import merge_note_hints
from trollint.features.inference import (
    apply_inference,
    depth_bucket,
    infer_optimal_conditions,
    infer_species,
    infer_speed_range,
    infer_spread_positions,
    infer_zones,
    speed_range,
)
from trollint.models.catalog import (
    Color,
    Finish,
    LureType,
    SeaState,
    SpreadPosition,
    Tide,
    TimeOfDay,
    Turbidity,
    Zone,
)
from trollint.models.lure import lure_from_dict


class TestDepthBucket:

    @pytest.mark.parametrize("depth, bucket", [(0, 0), (3, 0), (3.1, 1), (8, 1), (8.5, 2), (40, 2)])
    def test_bucket_edges(self, depth, bucket):
        assert depth_bucket(depth) == bucket


class TestZones:
    """Zone inference from depth, length and type"""

    def test_popper_is_coastal(self):
        assert infer_zones(make_lure()) == [Zone.LAGOON, Zone.REEF, Zone.PASS]

    def test_mid_depth_minnow(self):
        lure = make_lure(lure_type=LureType.DIVING_MINNOW, length_cm=13.0)
        assert infer_zones(lure) == [Zone.PASS, Zone.OFFSHORE]

    def test_deep_large_minnow(self):
        lure = make_lure(lure_type=LureType.DIVING_MINNOW, length_cm=20.0, depth_max=10.0)
        assert infer_zones(lure) == [Zone.OFFSHORE, Zone.DEEP, Zone.FAD]

    def test_metal_jig_override(self):
        lure = make_lure(lure_type=LureType.METAL_JIG, length_cm=8.0)
        assert infer_zones(lure) == [Zone.REEF, Zone.DROP_OFF, Zone.DEEP, Zone.FAD]

    def test_skirted_adds_open_water(self):
        lure = make_lure(lure_type=LureType.SKIRTED, length_cm=20.0)
        assert infer_zones(lure) == [Zone.REEF, Zone.PASS, Zone.OFFSHORE, Zone.FAD]

    def test_no_duplicates(self):
        lure = make_lure(lure_type=LureType.SKIRTED, length_cm=20.0, depth_max=12.0)
        zones = infer_zones(lure)
        assert len(zones) == len(set(zones))


class TestSpecies:
    """Union of size, colour and type passes"""

    def test_popper_species_first_seen_order(self):
        assert infer_species(make_lure()) == [
            "Carangue GT", "Thazard", "Bonite", "Mahi-mahi", "Thon jaune", "Wahoo", "Barracuda",
        ]

    def test_no_duplicates(self):
        species = infer_species(make_lure())
        assert len(species) == len(set(species))

    def test_large_skirted_targets_pelagics(self):
        lure = make_lure(lure_type=LureType.SKIRTED, length_cm=22.0, depth_max=10.0, color=Color.BLACK)
        species = infer_species(lure)
        assert "Marlin" in species
        assert "Wahoo" in species

    def test_unknown_group_color_still_gets_type_species(self):
        lure = make_lure(color=Color.BEIGE, length_cm=25.0)
        assert infer_species(lure) == ["Carangue GT", "Thazard", "Barracuda", "Bonite"]


class TestSpeedRange:
    """Speed envelopes by type and length"""

    def test_large_diving_minnow(self):
        assert infer_speed_range(make_lure(lure_type=LureType.DIVING_MINNOW, length_cm=20.0)) == (6.0, 11.0)

    def test_small_diving_minnow(self):
        assert infer_speed_range(make_lure(lure_type=LureType.DIVING_MINNOW, length_cm=10.0)) == (4.0, 7.0)

    def test_unlisted_type_uses_default(self):
        assert infer_speed_range(make_lure(lure_type=LureType.SOFT_PLASTIC)) == (5.0, 8.0)

    def test_declared_speeds_win(self):
        lure = make_lure(speed_min=8.0, speed_max=12.0)
        assert speed_range(lure) == (8.0, 12.0)
        assert infer_speed_range(lure) == (4.0, 7.0)

    def test_half_declared_speed_falls_back(self):
        assert speed_range(make_lure(speed_min=8.0)) == (4.0, 7.0)


class TestOptimalConditions:
    """Base conditions by contrast class, refined by colour and finish"""

    def test_pink_flashy_popper(self):
        cond = infer_optimal_conditions(make_lure())
        assert cond.times == [TimeOfDay.MORNING, TimeOfDay.MIDDAY, TimeOfDay.AFTERNOON]
        assert cond.turbidity == [Turbidity.SLIGHTLY_MURKY, Turbidity.MURKY, Turbidity.VERY_MURKY]
        assert cond.sea_states == [SeaState.SLIGHT, SeaState.ROUGH, SeaState.FORMED]
        assert cond.tides == [Tide.RISING, Tide.FALLING]
        assert cond.moons is None

    def test_matte_finish_is_low_light(self):
        cond = infer_optimal_conditions(make_lure(finish=Finish.MATTE))
        assert cond.times == [TimeOfDay.DAWN, TimeOfDay.DUSK]
        assert cond.turbidity == [Turbidity.MURKY, Turbidity.VERY_MURKY]

    def test_shiny_finish_prefers_clear_water(self):
        cond = infer_optimal_conditions(make_lure(color=Color.SARDINE, finish=Finish.GLOSSY))
        assert cond.turbidity == [Turbidity.CLEAR, Turbidity.SLIGHTLY_MURKY]
        assert TimeOfDay.MIDDAY in cond.times

    def test_very_dark_color_is_low_light(self):
        cond = infer_optimal_conditions(make_lure(color=Color.BLACK))
        assert cond.times == [TimeOfDay.DAWN, TimeOfDay.DUSK, TimeOfDay.NIGHT]


class TestSpreadPositions:

    def test_flashy_goes_to_riggers(self):
        assert infer_spread_positions(make_lure()) == [SpreadPosition.SHORT_RIGGER, SpreadPosition.LONG_RIGGER]

    def test_natural_goes_to_short_corner(self):
        assert infer_spread_positions(make_lure(color=Color.SARDINE)) == [SpreadPosition.SHORT_CORNER]

    def test_finish_override_moves_position(self):
        lure = make_lure(color=Color.SARDINE, finish=Finish.UV)
        assert infer_spread_positions(lure) == [SpreadPosition.LONG_CORNER]


class TestApplyInference:
    """Inferred fields are cached on a copy and the flag is honoured"""

    def test_fills_fields_on_a_copy(self):
        lure = make_lure()
        computed = apply_inference(lure)

        assert computed.is_computed
        assert computed.zones == [Zone.LAGOON, Zone.REEF, Zone.PASS]
        assert computed.target_species
        assert computed.optimal_conditions is not None
        # source left alone
        assert lure.zones is None
        assert not lure.is_computed

    def test_computed_lure_returned_as_is(self):
        computed = apply_inference(make_lure())
        assert apply_inference(computed) is computed

    def test_recompute(self):
        computed = apply_inference(make_lure())
        again = apply_inference(computed, recompute=True)
        assert again is not computed
        assert again.zones == computed.zones

    def test_declared_fields_untouched(self):
        lure = make_lure(speed_min=8.0, speed_max=12.0, depth_max=2.0)
        computed = apply_inference(lure)
        assert (computed.speed_min, computed.speed_max, computed.depth_max) == (8.0, 12.0, 2.0)

    def test_keeps_note_hints(self):
        lure = merge_note_hints(make_lure(notes="excellent sur DCP, wahoo"))
        assert lure.zones == [Zone.FAD]

        computed = apply_inference(lure)
        assert computed.zones == [Zone.LAGOON, Zone.REEF, Zone.PASS, Zone.FAD]
        assert computed.target_species[0] == "Wahoo"
        assert set(infer_species(lure)) <= set(computed.target_species)
        assert len(computed.target_species) == len(set(computed.target_species))

    def test_recompute_keeps_note_hints(self):
        computed = apply_inference(merge_note_hints(make_lure(notes="dcp")))
        again = apply_inference(computed, recompute=True)
        assert Zone.FAD in again.zones


class TestComputedRecord:
    """A saved computed lure reloads with its cached fields"""

    def test_round_trip(self):
        computed = apply_inference(make_lure(color=Color.SARDINE))
        reloaded = lure_from_dict(computed.to_dict())

        assert reloaded.is_computed
        assert reloaded.optimal_conditions is not None
        assert reloaded.optimal_conditions == computed.optimal_conditions
        assert reloaded.to_dict() == computed.to_dict()

    def test_missing_conditions_stay_unknown(self):
        record = make_lure().to_dict()
        assert lure_from_dict(record).optimal_conditions is None

    def test_moons_left_open(self):
        record = apply_inference(make_lure()).to_dict()
        record["optimal_conditions"]["moons"] = None
        assert lure_from_dict(record).optimal_conditions.moons is None

    def test_unknown_condition_value(self):
        record = apply_inference(make_lure()).to_dict()
        record["optimal_conditions"]["tides"] = ["spring"]
        with pytest.raises(CatalogError, match="optimal_conditions.tides"):
            lure_from_dict(record)

    def test_conditions_must_be_an_object(self):
        record = make_lure().to_dict()
        record["optimal_conditions"] = ["aube"]
        with pytest.raises(CatalogError):
            lure_from_dict(record)
