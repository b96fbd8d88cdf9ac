"""Main strategy classification dispatcher."""

import logging
from typing import Iterable, Optional

from .constants import ARCHETYPES, CUSTOM
from .rules import first_match
from .types import ClassificationResult, LegSnapshot, OptionLeg

logger = logging.getLogger(__name__)


def classify(active_legs: Iterable[OptionLeg]) -> Optional[ClassificationResult]:
    """Classify the archetype formed by a set of active legs.

    Algorithm:
    1. Drop legs without a positive selected quantity
    2. Partition into calls and puts, each sorted by strike
    3. Walk the rules table (single, vertical, straddle/strangle,
       iron condor, butterfly); the first match wins
    4. Fall back to a custom combination

    Legs are expected to share one expiry. That is the caller's job;
    mixed expiries are classified on shape alone.
    """
    legs = [leg for leg in active_legs if leg.is_active]
    if not legs:
        return None

    snapshot = LegSnapshot.from_legs(legs)
    rule, name = first_match(snapshot)

    if name is None:
        logger.debug("No rule matched %s; using fallback", describe_legs(legs))
        return _result(CUSTOM, len(legs))

    logger.debug("Rule %s matched %s for %s", rule.name, name, describe_legs(legs))
    return _result(name, len(legs))


def describe_legs(legs: Iterable[OptionLeg]) -> str:
    """Compact one-line rendering of legs, e.g. 'buy 2x call 100 | sell 2x call 110'."""
    return " | ".join(
        f"{leg.direction} {leg.selected_quantity}x {leg.option_side} {leg.strike:g}"
        for leg in legs
    )


def _result(name: str, leg_count: int) -> ClassificationResult:
    """Build a ClassificationResult from an archetype name using the registry."""
    defn = ARCHETYPES[name]
    return ClassificationResult(
        archetype=defn.name,
        category=defn.category,
        confidence=defn.confidence,
        leg_count=leg_count,
    )
