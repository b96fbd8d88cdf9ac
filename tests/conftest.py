"""
Shared pytest fixtures and leg/strategy factory helpers for optionboard tests.

Everything under test is pure, so no fixture touches disk or network.
"""

import itertools

import pytest

from optionboard.config import Settings
from optionboard.pipeline.strategy_engine import ComplexStrategy, OptionLeg

EXPIRY = "2025-03-26"
LATER_EXPIRY = "2025-04-23"

_ids = itertools.count(1)


# ---------------------------------------------------------------------------
# Factory helpers
# ---------------------------------------------------------------------------

def make_leg(
    option_side="call",
    direction="buy",
    strike=100.0,
    *,
    quantity=1,
    selected=None,
    expiry=EXPIRY,
    covered=False,
    id=None,
):
    """Build an OptionLeg. ``selected`` defaults to the full quantity; pass 0 to deselect."""
    return OptionLeg(
        id=id or f"leg-{next(_ids):04d}",
        option_side=option_side,
        direction=direction,
        strike=strike,
        expiry=expiry,
        quantity=quantity,
        selected_quantity=quantity if selected is None else selected,
        covered=covered,
    )


def make_saved_leg(option_side="call", direction="buy", strike=100.0, *, quantity=1, expiry=EXPIRY, covered=False):
    """A leg as stored in a saved strategy: no selection overlay."""
    return OptionLeg(
        id=f"leg-{next(_ids):04d}",
        option_side=option_side,
        direction=direction,
        strike=strike,
        expiry=expiry,
        quantity=quantity,
        covered=covered,
    )


def make_strategy(*legs, name="strategy", id=None):
    return ComplexStrategy(id=id or f"s-{next(_ids):04d}", name=name, legs=tuple(legs))


def make_leg_payload(
    *,
    id="p1",
    type="call",
    position_type="buy",
    strike=100,
    expiry=EXPIRY,
    quantity=1,
    **extra,
):
    """Build a raw leg dict the way the dashboard sends it."""
    payload = {
        "id": id,
        "type": type,
        "position_type": position_type,
        "strike": strike,
        "expiry": expiry,
        "quantity": quantity,
        "premium": 1.0,
        "status": "open",
    }
    payload.update(extra)
    return payload


# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------

@pytest.fixture
def settings():
    return Settings()


@pytest.fixture
def bull_call_spread():
    return make_strategy(
        make_saved_leg("call", "buy", 120, quantity=2),
        make_saved_leg("call", "sell", 125, quantity=2),
        name="bull call",
    )


@pytest.fixture
def bear_put_spread():
    return make_strategy(
        make_saved_leg("put", "buy", 90, quantity=3),
        make_saved_leg("put", "sell", 95, quantity=3),
        name="bear put",
    )
