"""Unit tests for the selection overlay."""

import pytest

from optionboard.pipeline.strategy_engine import LegSelection, active_leg_set, apply_selection, classify
from tests.conftest import make_saved_leg, LATER_EXPIRY


@pytest.fixture
def legs():
    return [
        make_saved_leg("call", "buy", 100, quantity=5),
        make_saved_leg("call", "sell", 110, quantity=5),
        make_saved_leg("put", "buy", 90, quantity=2, expiry=LATER_EXPIRY),
    ]


class TestLegSelection:
    def test_toggle_selects_at_one(self, legs):
        sel = LegSelection().toggle(legs[0])
        assert sel.quantity_for(legs[0].id) == 1
        assert sel.is_selected(legs[0].id)

    def test_toggle_twice_deselects(self, legs):
        sel = LegSelection().toggle(legs[0]).toggle(legs[0])
        assert not sel.is_selected(legs[0].id)
        assert legs[0].id not in sel

    def test_operations_return_new_selection(self, legs):
        empty = LegSelection()
        picked = empty.toggle(legs[0])
        assert len(empty) == 0
        assert len(picked) == 1

    @pytest.mark.parametrize("requested,expected", [(3, 3), (9, 5), (-2, 0), (0, 0)])
    def test_update_quantity_clamps(self, legs, requested, expected):
        sel = LegSelection().update_quantity(legs[0], requested)
        assert sel.quantity_for(legs[0].id) == expected

    def test_zero_quantity_is_not_selected(self, legs):
        sel = LegSelection().update_quantity(legs[0], 0)
        assert not sel.is_selected(legs[0].id)

    def test_select_all_uses_full_quantity(self, legs):
        sel = LegSelection.select_all(legs)
        assert dict(sel) == {legs[0].id: 5, legs[1].id: 5, legs[2].id: 2}

    def test_clear(self, legs):
        assert len(LegSelection.select_all(legs).clear()) == 0

    def test_missing_id_is_zero(self):
        assert LegSelection().quantity_for("nope") == 0


class TestActiveLegSet:
    def test_apply_selection_overlays_new_values(self, legs):
        overlaid = apply_selection(legs, {legs[0].id: 2})
        assert overlaid[0].selected_quantity == 2
        assert overlaid[1].selected_quantity == 0
        assert legs[0].selected_quantity is None

    def test_active_set_filters_unselected(self, legs):
        active = active_leg_set(legs, {legs[0].id: 2, legs[1].id: 0})
        assert [l.id for l in active] == [legs[0].id]

    def test_active_set_scoped_to_expiry(self, legs):
        sel = LegSelection.select_all(legs)
        active = active_leg_set(legs, sel, expiry=LATER_EXPIRY)
        assert [l.id for l in active] == [legs[2].id]

    def test_plain_dict_selection(self, legs):
        active = active_leg_set(legs, {legs[0].id: 5, legs[1].id: 5})
        assert classify(active).archetype == "bullish call spread"

    def test_selection_feeds_classifier(self, legs):
        sel = LegSelection().update_quantity(legs[0], 2).update_quantity(legs[1], 2)
        r = classify(active_leg_set(legs, sel, expiry=legs[0].expiry))
        assert r.archetype == "bullish call spread"
        assert r.confidence == 0.95
