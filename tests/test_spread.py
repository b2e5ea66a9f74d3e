"""
Test suite for trollint/spread/assign.py
=========================================
Ranking, slot policies, partial spreads and query validation.
"""

import math

import pytest

from conftest import make_catalog, make_lure, make_query
from trollint.errors import InvalidQueryError
from trollint.models.catalog import BoatProfile, ContrastClass, Light, SpreadPosition, Technique
from trollint.spread.assign import (
    OPPOSITE_CONTRAST,
    STATUS_EMPTY,
    STATUS_OK,
    STATUS_PARTIAL,
    rank_and_assign,
    rank_candidates,
)

P = SpreadPosition


class TestRanking:

    def test_sorted_by_total(self, catalog, query):
        ranked = rank_candidates(catalog, query)
        totals = [c.total for c in ranked]
        assert totals == sorted(totals, reverse=True)

    def test_non_trolling_lures_excluded(self, catalog, query):
        ids = [c.lure.id for c in rank_candidates(catalog, query)]
        assert "cast" not in ids
        assert len(ids) == 6

    def test_ties_keep_catalog_order(self, query):
        catalog = [make_lure(id="a"), make_lure(id="b"), make_lure(id="c")]
        assert [c.lure.id for c in rank_candidates(catalog, query)] == ["a", "b", "c"]


class TestSlotPolicies:
    """Fixed slot layout per line count"""

    @pytest.mark.parametrize("lines, positions", [
        (1, [P.FREE]),
        (2, [P.SHORT_CORNER, P.SHORT_RIGGER]),
        (3, [P.SHORT_CORNER, P.LONG_CORNER, P.SHOTGUN]),
        (4, [P.SHORT_CORNER, P.SHORT_RIGGER, P.LONG_CORNER, P.LONG_RIGGER]),
        (5, [P.SHORT_CORNER, P.LONG_CORNER, P.SHORT_RIGGER, P.LONG_RIGGER, P.SHOTGUN]),
    ])
    def test_positions(self, catalog, lines, positions):
        spread = rank_and_assign(catalog, make_query(lines=lines))
        assert spread.positions == positions
        assert spread.filled_lines == lines
        assert spread.status == STATUS_OK

    @pytest.mark.parametrize("lines", [1, 2, 3, 4, 5])
    def test_each_lure_used_once(self, catalog, lines):
        spread = rank_and_assign(catalog, make_query(lines=lines))
        ids = [c.lure.id for c in spread.slots]
        assert len(ids) == len(set(ids))
        assert len(set(spread.positions)) == len(spread.positions)

    def test_single_line_distance(self, catalog):
        spread = rank_and_assign(catalog, make_query(lines=1))
        assert spread.slots[0].distance_m == 25.0
        assert spread.mean_distance_m == 25.0

    def test_three_line_mean_distance(self, catalog, query):
        spread = rank_and_assign(catalog, query)
        assert [c.distance_m for c in spread.slots] == [15.0, 40.0, 85.0]
        assert spread.mean_distance_m == pytest.approx(140.0 / 3)

    def test_three_lines_long_corner_contrasts_with_short_corner(self, catalog, query):
        spread = rank_and_assign(catalog, query)
        first, second = spread.slots[0], spread.slots[1]
        assert second.contrast in OPPOSITE_CONTRAST[first.contrast]

    def test_top_candidate_gets_first_slot(self, catalog, query):
        spread = rank_and_assign(catalog, query)
        assert spread.slots[0].lure is spread.candidates[0].lure

    def test_candidates_kept_on_result(self, catalog, query):
        spread = rank_and_assign(catalog, query)
        ids = [c.lure.id for c in spread.candidates]
        assert len(ids) == 6
        assert "cast" not in ids
        assert [c.total for c in spread.candidates] == sorted((c.total for c in spread.candidates), reverse=True)
        assert "candidates" not in spread.to_dict()

    @pytest.mark.parametrize("position, contrast", [
        (P.SHORT_CORNER, ContrastClass.NATURAL),
        (P.LONG_CORNER, ContrastClass.DARK),
        (P.SHORT_RIGGER, ContrastClass.FLASHY),
        (P.LONG_RIGGER, ContrastClass.FLASHY),
        (P.SHOTGUN, ContrastClass.CONTRASTED),
    ])
    def test_five_line_contrasts(self, catalog, position, contrast):
        spread = rank_and_assign(catalog, make_query(lines=5))
        slot = next(c for c in spread.slots if c.position == position)
        assert slot.contrast == contrast

    def test_five_lines_without_dark_lure(self, catalog):
        catalog = [l for l in catalog if l.id != "black"]
        spread = rank_and_assign(catalog, make_query(lines=5))
        assert spread.filled_lines == 5

        short_corner, long_corner = spread.slots[0], spread.slots[1]
        assert short_corner.contrast == ContrastClass.NATURAL
        # no dark lure: the long corner takes the best one left
        left = [c for c in spread.candidates if c.lure is not short_corner.lure]
        assert long_corner.lure is left[0].lure
        assert long_corner.contrast != ContrastClass.DARK

    def test_four_line_pairs_contrast(self, catalog):
        spread = rank_and_assign(catalog, make_query(lines=4))
        by_position = {c.position: c for c in spread.slots}
        for near, far in [(P.SHORT_CORNER, P.SHORT_RIGGER), (P.LONG_CORNER, P.LONG_RIGGER)]:
            assert by_position[near].contrast != by_position[far].contrast

    def test_two_lines_contrast(self, catalog):
        spread = rank_and_assign(catalog, make_query(lines=2))
        assert spread.slots[0].contrast != spread.slots[1].contrast

    def test_slot_pro_tip_mentions_position(self, catalog):
        spread = rank_and_assign(catalog, make_query(lines=1))
        assert "Single line" in spread.slots[0].pro_tip


class TestPartialAndEmpty:

    def test_compact_boat_caps_lines(self, catalog):
        spread = rank_and_assign(catalog, make_query(lines=5, boat_profile=BoatProfile.COMPACT))
        assert spread.filled_lines == 4
        assert spread.requested_lines == 5
        assert spread.status == STATUS_PARTIAL
        assert "clark429" in spread.status_message

    def test_small_catalog(self):
        spread = rank_and_assign([make_lure(id="a"), make_lure(id="b")], make_query(lines=5))
        assert spread.filled_lines == 2
        assert spread.status == STATUS_PARTIAL
        assert "2 trolling-capable" in spread.status_message

    def test_empty_catalog(self, query):
        spread = rank_and_assign([], query)
        assert spread.candidates == []
        assert spread.slots == []
        assert spread.filled_lines == 0
        assert spread.status == STATUS_EMPTY
        assert spread.status_message

    def test_no_trolling_lure(self, query):
        catalog = [make_lure(technique=Technique.CASTING)]
        spread = rank_and_assign(catalog, query)
        assert spread.status == STATUS_EMPTY

    def test_speed_always_attached(self, query):
        spread = rank_and_assign([], query)
        assert spread.speed.min_speed <= spread.speed.recommended <= spread.speed.max_speed


class TestQueryValidation:
    """Bad queries fail before any scoring"""

    @pytest.mark.parametrize("overrides, field", [
        ({"lines": 0}, "lines"),
        ({"lines": 6}, "lines"),
        ({"lines": 2.5}, "lines"),
        ({"bottom_depth": -1.0}, "bottom_depth"),
        ({"boat_speed": math.nan}, "boat_speed"),
        ({"boat_speed": math.inf}, "boat_speed"),
    ])
    def test_invalid(self, overrides, field):
        with pytest.raises(InvalidQueryError) as exc:
            rank_and_assign(make_catalog(), make_query(**overrides))
        assert exc.value.field == field

    def test_invalid_with_empty_catalog(self):
        with pytest.raises(InvalidQueryError):
            rank_and_assign([], make_query(lines=9))

    def test_zero_speed_and_depth_are_valid(self, catalog):
        spread = rank_and_assign(catalog, make_query(boat_speed=0.0, bottom_depth=0.0))
        assert spread.filled_lines == 3


class TestPurityAndWarnings:

    def test_catalog_not_modified(self, catalog, query):
        before = [l.to_dict() for l in catalog]
        rank_and_assign(catalog, query)
        assert [l.to_dict() for l in catalog] == before

    def test_coherence_warning_does_not_block(self, catalog):
        spread = rank_and_assign(catalog, make_query(light=Light.LOW))
        assert spread.warnings == ["Low light is unusual at midday"]
        assert spread.filled_lines == 3

    def test_analysis_present(self, catalog, query):
        spread = rank_and_assign(catalog, query)
        assert any(line.startswith("Colours:") for line in spread.analysis)
