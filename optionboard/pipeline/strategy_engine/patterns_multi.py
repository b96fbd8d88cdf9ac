"""Multi-side patterns: Straddle, Strangle, Iron Condor."""

from typing import Optional

from .constants import BUY, SELL
from .types import LegSnapshot


def match_straddle_strangle(snapshot: LegSnapshot) -> Optional[str]:
    """Match one bought call plus one bought put of equal quantity.

    Short pairs are not volatility archetypes here and fall through.
    """
    if len(snapshot.calls) != 1 or len(snapshot.puts) != 1:
        return None

    call, put = snapshot.calls[0], snapshot.puts[0]
    if call.direction != BUY or put.direction != BUY:
        return None
    if snapshot.quantity_of(call) != snapshot.quantity_of(put):
        return None

    return "straddle" if call.strike == put.strike else "strangle"


def match_iron_condor(snapshot: LegSnapshot) -> Optional[str]:
    """Match two calls plus two puts forming two short verticals.

    All four legs must carry the same quantity. The call pair must be
    sell-low/buy-high; the put pair must be one buy and one sell at distinct
    strikes, in either orientation: the glossary reads the put wing as a
    short put vertical, which is buy-low/sell-high.
    """
    if len(snapshot.calls) != 2 or len(snapshot.puts) != 2:
        return None

    quantities = {snapshot.quantity_of(leg) for leg in snapshot.legs}
    if len(quantities) != 1:
        return None

    low_call, high_call = snapshot.calls
    if not (low_call.direction == SELL and high_call.direction == BUY):
        return None
    if low_call.strike == high_call.strike:
        return None

    low_put, high_put = snapshot.puts
    if low_put.direction == high_put.direction:
        return None
    if low_put.strike == high_put.strike:
        return None

    return "iron condor"
