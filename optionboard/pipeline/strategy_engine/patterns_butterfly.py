"""Butterfly pattern (3-leg, same side, 1:2:1)."""

from typing import Optional

from .constants import BUY, SELL
from .types import LegSnapshot


def match_butterfly(snapshot: LegSnapshot) -> Optional[str]:
    """Identify a butterfly from exactly 3 same-side legs.

    Wings are bought, the body is sold, and the body quantity is exactly
    twice each wing's quantity.
    """
    if len(snapshot.legs) != 3:
        return None

    if len(snapshot.calls) == 3:
        wings_and_body = snapshot.calls
    elif len(snapshot.puts) == 3:
        wings_and_body = snapshot.puts
    else:
        return None

    low, body, high = wings_and_body
    if not (low.strike < body.strike < high.strike):
        return None
    if not (low.direction == BUY and body.direction == SELL and high.direction == BUY):
        return None

    body_qty = snapshot.quantity_of(body)
    if body_qty != 2 * snapshot.quantity_of(low) or body_qty != 2 * snapshot.quantity_of(high):
        return None

    return "butterfly"
