"""Vertical spread patterns (2-leg, same side, equal quantity)."""

from typing import Optional

from .constants import BUY, CALL, SELL
from .types import LegSnapshot, OptionLeg


def match_vertical(snapshot: LegSnapshot) -> Optional[str]:
    """Identify a vertical spread from exactly 2 active legs on one side.

    Preconditions checked here:
    - Exactly 2 legs, both calls or both puts
    - Equal selected quantity
    - Different strikes, opposite directions
    """
    if len(snapshot.legs) != 2:
        return None

    if len(snapshot.calls) == 2:
        side, (low, high) = "call", snapshot.calls
    elif len(snapshot.puts) == 2:
        side, (low, high) = "put", snapshot.puts
    else:
        return None

    if snapshot.quantity_of(low) != snapshot.quantity_of(high):
        return None

    return vertical_name(side, low, high)


def vertical_name(side: str, low: OptionLeg, high: OptionLeg) -> Optional[str]:
    """Name the vertical formed by a strike-sorted pair, ignoring quantities."""
    if low.strike == high.strike:
        return None

    if side == CALL:
        # Call verticals
        if low.direction == BUY and high.direction == SELL:
            return "bullish call spread"  # debit: long lower call, short higher call
        if low.direction == SELL and high.direction == BUY:
            return "bearish call spread"  # credit: short lower call, long higher call
    else:
        # Put verticals
        if low.direction == SELL and high.direction == BUY:
            return "bullish put spread"   # short lower put, long higher put
        if low.direction == BUY and high.direction == SELL:
            return "bearish put spread"   # long lower put, short higher put

    return None
