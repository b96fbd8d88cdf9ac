"""Explicit selection overlay: leg id -> selected quantity.

The dashboard keeps the user's current picks here instead of writing them into
the legs. Every operation returns a new LegSelection; nothing is mutated, so a
selection can be handed to classify() and the aggregator as plain input.
"""

from dataclasses import replace
from types import MappingProxyType
from typing import Dict, Iterable, Iterator, Mapping, Optional, Tuple

from .types import OptionLeg


class LegSelection(Mapping[str, int]):
    """Immutable mapping of leg id to selected quantity."""

    def __init__(self, quantities: Optional[Mapping[str, int]] = None):
        self._quantities = MappingProxyType(dict(quantities or {}))

    def __getitem__(self, leg_id: str) -> int:
        return self._quantities[leg_id]

    def __iter__(self) -> Iterator[str]:
        return iter(self._quantities)

    def __len__(self) -> int:
        return len(self._quantities)

    def __repr__(self) -> str:
        return f"LegSelection({dict(self._quantities)!r})"

    def quantity_for(self, leg_id: str) -> int:
        return self._quantities.get(leg_id, 0)

    def is_selected(self, leg_id: str) -> bool:
        return self.quantity_for(leg_id) > 0

    def toggle(self, leg: OptionLeg) -> "LegSelection":
        """Deselect a selected leg, otherwise select it at quantity 1."""
        quantities: Dict[str, int] = dict(self._quantities)
        if self.is_selected(leg.id):
            del quantities[leg.id]
        else:
            quantities[leg.id] = 1
        return LegSelection(quantities)

    def update_quantity(self, leg: OptionLeg, quantity: int) -> "LegSelection":
        """Set a leg's quantity, clamped to [0, leg.quantity]."""
        bounded = max(0, min(int(quantity), leg.quantity))
        quantities = dict(self._quantities)
        quantities[leg.id] = bounded
        return LegSelection(quantities)

    @classmethod
    def select_all(cls, legs: Iterable[OptionLeg]) -> "LegSelection":
        return cls({leg.id: leg.quantity for leg in legs})

    @classmethod
    def clear(cls) -> "LegSelection":
        return cls()


def apply_selection(legs: Iterable[OptionLeg], selection: Mapping[str, int]) -> Tuple[OptionLeg, ...]:
    """Overlay selected quantities onto legs, producing new leg values."""
    return tuple(
        replace(leg, selected_quantity=selection.get(leg.id, 0))
        for leg in legs
    )


def active_leg_set(
    legs: Iterable[OptionLeg],
    selection: Mapping[str, int],
    expiry: Optional[str] = None,
) -> Tuple[OptionLeg, ...]:
    """Legs with a positive selected quantity, optionally scoped to one expiry."""
    overlaid = apply_selection(legs, selection)
    return tuple(
        leg for leg in overlaid
        if leg.is_active and (expiry is None or leg.expiry == expiry)
    )
