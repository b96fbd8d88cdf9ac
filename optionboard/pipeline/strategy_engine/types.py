"""Data types for the strategy engine."""

from dataclasses import dataclass, field
from typing import Dict, Optional, Set, Tuple


@dataclass(frozen=True)
class OptionLeg:
    """A single option position as held in the portfolio."""
    id: str                                 # Unique within a session
    option_side: str                        # "call" or "put"
    direction: str                          # "buy" or "sell"
    strike: float
    expiry: str                             # ISO date key, e.g. "2025-03-26"
    quantity: int                           # Holder's total size, always positive
    selected_quantity: Optional[int] = None  # Active size; None/0 = not selected
    covered: bool = False                   # Covered sell (display only)

    @property
    def is_active(self) -> bool:
        return self.selected_quantity is not None and self.selected_quantity > 0

    @property
    def effective_quantity(self) -> int:
        """Selected size when one is set, otherwise the full holding."""
        if self.selected_quantity is not None:
            return self.selected_quantity
        return self.quantity


@dataclass(frozen=True)
class LegSnapshot:
    """Active legs partitioned by side, each side sorted by strike ascending.

    Pattern matchers only ever see a snapshot, never the raw selection.
    """
    legs: Tuple[OptionLeg, ...]
    calls: Tuple[OptionLeg, ...]
    puts: Tuple[OptionLeg, ...]

    @classmethod
    def from_legs(cls, legs) -> "LegSnapshot":
        legs = tuple(legs)
        calls = tuple(sorted((l for l in legs if l.option_side == "call"), key=lambda l: l.strike))
        puts = tuple(sorted((l for l in legs if l.option_side == "put"), key=lambda l: l.strike))
        return cls(legs=legs, calls=calls, puts=puts)

    @staticmethod
    def quantity_of(leg: OptionLeg) -> int:
        return leg.selected_quantity or 0


@dataclass(frozen=True)
class ArchetypeDef:
    """Registry entry defining an archetype's metadata."""
    name: str
    category: str               # "bullish", "bearish", "neutral", "volatility"
    confidence: float           # 0.0-1.0
    leg_count: int              # Expected number of legs (0 = any)
    family: str                 # "single", "vertical", "volatility", "multi", "butterfly", "custom"


@dataclass(frozen=True)
class ClassificationResult:
    """Result of strategy classification."""
    archetype: str              # e.g., "bullish call spread"
    category: str
    confidence: float
    leg_count: int


@dataclass(frozen=True)
class ComplexStrategy:
    """A saved, named group of legs. Read-only input to the combo aggregator."""
    id: str
    name: str
    legs: Tuple[OptionLeg, ...]
    category: Optional[str] = None

    @property
    def expiries(self) -> Set[str]:
        return {leg.expiry for leg in self.legs}

    def legs_at(self, expiry: str) -> Tuple[OptionLeg, ...]:
        return tuple(leg for leg in self.legs if leg.expiry == expiry)


@dataclass(frozen=True)
class StrikeComboTally:
    """Combination units per strike, kept separately for calls and puts."""
    calls: Dict[float, int] = field(default_factory=dict)
    puts: Dict[float, int] = field(default_factory=dict)

    def for_side(self, side: str) -> Dict[float, int]:
        return self.calls if side == "call" else self.puts
