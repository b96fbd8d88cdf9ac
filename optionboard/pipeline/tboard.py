"""
T-board — per-strike position counts for one expiry, calls left and puts right.

Public API:
    build_tboard(positions, strategies, expiry) -> List[TBoardRow]   (pure)
    group_by_expiry(positions, strategies, today) -> List[ExpiryGroup] (pure)

Position columns sum each leg's selected size (falling back to its full
quantity). Combo columns come from the combo aggregator, so a strike can show
combo units without any position column being non-zero and vice versa.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from datetime import date
from typing import Dict, Iterable, List

from optionboard.pipeline.combo_aggregator import aggregate_combo_tally
from optionboard.pipeline.strategy_engine import ComplexStrategy, OptionLeg
from optionboard.pipeline.strategy_engine.constants import BUY, CALL, PUT

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Pure data structures
# ---------------------------------------------------------------------------

@dataclass
class TBoardRow:
    """One strike row of the T-board."""
    strike: float
    call_rights: int = 0        # Bought calls
    call_covered: int = 0       # Covered sold calls
    call_obligations: int = 0   # Naked sold calls
    call_combo: int = 0
    put_combo: int = 0
    put_rights: int = 0
    put_covered: int = 0
    put_obligations: int = 0


@dataclass
class ExpiryGroup:
    """Positions and complex strategies that share one expiry."""
    expiry: str
    days_to_expiry: int
    single: List[OptionLeg] = field(default_factory=list)
    complex: List[ComplexStrategy] = field(default_factory=list)


# ---------------------------------------------------------------------------
# T-board rows
# ---------------------------------------------------------------------------

def build_tboard(
    positions: Iterable[OptionLeg],
    strategies: Iterable[ComplexStrategy],
    expiry: str,
) -> List[TBoardRow]:
    """Build T-board rows for the positions at ``expiry``.

    One row per distinct strike among those positions, ascending. Both the
    compact and the detailed board call this; equal input gives equal rows.
    """
    scoped = [p for p in positions if p.expiry == expiry]
    if not scoped:
        return []

    tally = aggregate_combo_tally(strategies, expiry)

    rows: Dict[float, TBoardRow] = {}
    for strike in sorted({p.strike for p in scoped}):
        rows[strike] = TBoardRow(
            strike=strike,
            call_combo=tally.calls.get(strike, 0),
            put_combo=tally.puts.get(strike, 0),
        )

    for p in scoped:
        row = rows[p.strike]
        qty = p.effective_quantity
        if p.option_side == CALL:
            if p.direction == BUY:
                row.call_rights += qty
            elif p.covered:
                row.call_covered += qty
            else:
                row.call_obligations += qty
        else:
            if p.direction == BUY:
                row.put_rights += qty
            elif p.covered:
                row.put_covered += qty
            else:
                row.put_obligations += qty

    logger.debug("T-board for %s: %d strikes from %d positions", expiry, len(rows), len(scoped))
    return list(rows.values())


# ---------------------------------------------------------------------------
# Expiry grouping
# ---------------------------------------------------------------------------

def days_to_expiry(expiry: str, today: date) -> int:
    """Whole days from ``today`` until ``expiry``; negative once expired."""
    return (date.fromisoformat(expiry) - today).days


def group_by_expiry(
    positions: Iterable[OptionLeg],
    strategies: Iterable[ComplexStrategy],
    today: date,
) -> List[ExpiryGroup]:
    """Bucket positions and complex strategies by expiry, nearest first.

    A strategy counts as complex when it has two or more legs; it is listed
    under every expiry it touches. Single-leg strategies are not listed.
    """
    groups: Dict[str, ExpiryGroup] = {}

    def _group(expiry: str) -> ExpiryGroup:
        if expiry not in groups:
            groups[expiry] = ExpiryGroup(expiry=expiry, days_to_expiry=days_to_expiry(expiry, today))
        return groups[expiry]

    for p in positions:
        _group(p.expiry).single.append(p)

    for strategy in strategies:
        if len(strategy.legs) < 2:
            continue
        for expiry in sorted(strategy.expiries):
            _group(expiry).complex.append(strategy)

    side_order = {CALL: 0, PUT: 1}
    for group in groups.values():
        group.single.sort(key=lambda p: (side_order.get(p.option_side, 2), p.strike, p.direction))

    return [groups[e] for e in sorted(groups)]
