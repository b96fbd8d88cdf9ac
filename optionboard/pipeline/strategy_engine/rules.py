"""Ordered rules table for archetype matching.

Rules are tried top to bottom and the first match wins. Specific shapes come
before the fallback, and the 2-leg rules run before the 4-leg iron condor so
that each leg count is claimed by the narrowest pattern that fits.
"""

from dataclasses import dataclass
from typing import Callable, Optional, Tuple

from .patterns_butterfly import match_butterfly
from .patterns_multi import match_iron_condor, match_straddle_strangle
from .patterns_single import match_single
from .patterns_vertical import match_vertical
from .types import LegSnapshot

Matcher = Callable[[LegSnapshot], Optional[str]]


@dataclass(frozen=True)
class Rule:
    name: str
    matcher: Matcher


RULES: Tuple[Rule, ...] = (
    Rule("single-leg", match_single),
    Rule("vertical-spread", match_vertical),
    Rule("straddle-strangle", match_straddle_strangle),
    Rule("iron-condor", match_iron_condor),
    Rule("butterfly", match_butterfly),
)


def first_match(snapshot: LegSnapshot, rules: Tuple[Rule, ...] = RULES) -> Tuple[Optional[Rule], Optional[str]]:
    """Return the first rule that matches and the archetype it produced."""
    for rule in rules:
        name = rule.matcher(snapshot)
        if name:
            return rule, name
    return None, None
