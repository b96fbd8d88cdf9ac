"""Strategy Engine — archetype classification of selected option legs.

Public API:
    classify(active_legs) -> Optional[ClassificationResult]
    active_leg_set(legs, selection, expiry) -> Tuple[OptionLeg, ...]
    records_to_legs(records) -> List[OptionLeg]
"""

from .types import (
    ArchetypeDef, ClassificationResult, ComplexStrategy, LegSnapshot, OptionLeg, StrikeComboTally,
)
from .constants import ARCHETYPES, CATEGORIES, CUSTOM
from .rules import RULES, Rule
from .classifier import classify, describe_legs
from .selection import LegSelection, active_leg_set, apply_selection
from .adapters import record_to_leg, record_to_strategy, records_to_legs

__all__ = [
    "classify", "describe_legs",
    "active_leg_set", "apply_selection", "LegSelection",
    "record_to_leg", "records_to_legs", "record_to_strategy",
    "OptionLeg", "ClassificationResult", "ComplexStrategy", "LegSnapshot", "StrikeComboTally",
    "ArchetypeDef", "ARCHETYPES", "CATEGORIES", "CUSTOM", "RULES", "Rule",
]
