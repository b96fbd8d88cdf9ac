"""Adapters that bridge dashboard payload records to the strategy engine's types."""

from typing import Iterable, List

from optionboard.schemas import LegRecord, StrategyRecord
from .types import ComplexStrategy, OptionLeg


def record_to_leg(record: LegRecord) -> OptionLeg:
    """Convert a validated LegRecord into an OptionLeg.

    The record's own picked size (leg_quantity, then selectedQuantity) becomes
    the leg's selected_quantity.
    """
    return OptionLeg(
        id=record.id,
        option_side=record.option_side,
        direction=record.position_type,
        strike=float(record.resolved_strike),
        expiry=record.expiry,
        quantity=record.quantity,
        selected_quantity=record.active_quantity,
        covered=record.is_covered,
    )


def records_to_legs(records: Iterable[LegRecord]) -> List[OptionLeg]:
    return [record_to_leg(r) for r in records]


def record_to_strategy(record: StrategyRecord) -> ComplexStrategy:
    return ComplexStrategy(
        id=record.id,
        name=record.name,
        legs=tuple(records_to_legs(record.positions)),
        category=record.category,
    )
