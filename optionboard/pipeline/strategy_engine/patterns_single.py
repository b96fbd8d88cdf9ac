"""Single-leg archetype patterns."""

from typing import Optional

from .constants import BUY, CALL, PUT
from .types import LegSnapshot


def match_single(snapshot: LegSnapshot) -> Optional[str]:
    """Identify a single-leg archetype. Returns archetype name or None."""
    if len(snapshot.legs) != 1:
        return None

    leg = snapshot.legs[0]
    if leg.option_side == CALL:
        return "long call" if leg.direction == BUY else "short call"
    if leg.option_side == PUT:
        return "long put" if leg.direction == BUY else "short put"

    return None
