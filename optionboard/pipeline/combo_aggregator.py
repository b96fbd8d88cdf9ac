"""
Combo Aggregator — combination units per strike for the T-board.

Public API:
    strategy_combos(strategy, expiry, side) -> Dict[strike, qty]    (one strategy)
    aggregate_combos(strategies, expiry, side) -> Dict[strike, qty] (merged)
    aggregate_combo_tally(strategies, expiry) -> StrikeComboTally   (both sides)

A strategy only contributes when its legs at the expiry classify as a
spread-like archetype (vertical, iron condor, butterfly). Each pairing books
its quantity once, at the strike of its bought leg. Single legs, straddles,
strangles and unrecognised combinations book nothing.
"""

import logging
from dataclasses import replace
from typing import Dict, Iterable, List, Mapping, Tuple

from optionboard.pipeline.strategy_engine import (
    ARCHETYPES, ComplexStrategy, LegSnapshot, OptionLeg, StrikeComboTally, classify,
)
from optionboard.pipeline.strategy_engine.constants import BUY, CALL, PUT

logger = logging.getLogger(__name__)

ComboMap = Dict[float, int]

# Archetype families whose legs decompose into same-side pairings
SPREAD_FAMILIES = frozenset({"vertical", "multi", "butterfly"})


# ---------------------------------------------------------------------------
# Per-strategy combo function
# ---------------------------------------------------------------------------

def strategy_combos(strategy: ComplexStrategy, expiry: str, side: str) -> ComboMap:
    """Combination units per strike contributed by one strategy on one side."""
    combos: ComboMap = {}
    for leg, qty in _combo_units(strategy, expiry):
        if leg.option_side == side:
            combos[leg.strike] = combos.get(leg.strike, 0) + qty
    return combos


def _combo_units(strategy: ComplexStrategy, expiry: str) -> List[Tuple[OptionLeg, int]]:
    """(long leg, quantity) for each pairing in the strategy's legs at expiry."""
    scoped = strategy.legs_at(expiry)
    if not scoped:
        return []

    # Saved legs carry their own size; selected_quantity ?? quantity
    legs = [replace(leg, selected_quantity=leg.effective_quantity) for leg in scoped]
    result = classify(legs)
    if result is None:
        return []

    family = ARCHETYPES[result.archetype].family
    if family not in SPREAD_FAMILIES:
        logger.debug("Strategy %s at %s is %s; no combo units", strategy.id, expiry, result.archetype)
        return []

    snapshot = LegSnapshot.from_legs(leg for leg in legs if leg.is_active)
    return [
        (leg, snapshot.quantity_of(leg))
        for leg in snapshot.calls + snapshot.puts
        if leg.direction == BUY
    ]


# ---------------------------------------------------------------------------
# Aggregation across strategies
# ---------------------------------------------------------------------------

def merge_combo_maps(*maps: Mapping[float, int]) -> ComboMap:
    """Sum combo maps bucket by bucket. Inputs are left untouched."""
    merged: ComboMap = {}
    for combo_map in maps:
        for strike, qty in combo_map.items():
            merged[strike] = merged.get(strike, 0) + qty
    return merged


def aggregate_combos(strategies: Iterable[ComplexStrategy], expiry: str, side: str) -> ComboMap:
    """Total combination units per strike for one side across strategies.

    Only strategies holding at least one leg at ``expiry`` are considered.
    Recomputed on every call; nothing is cached.
    """
    per_strategy = [
        strategy_combos(strategy, expiry, side)
        for strategy in strategies
        if expiry in strategy.expiries
    ]
    return merge_combo_maps(*per_strategy)


def aggregate_combo_tally(strategies: Iterable[ComplexStrategy], expiry: str) -> StrikeComboTally:
    """Both sides of the combo tally for one expiry."""
    strategies = list(strategies)
    return StrikeComboTally(
        calls=aggregate_combos(strategies, expiry, CALL),
        puts=aggregate_combos(strategies, expiry, PUT),
    )
