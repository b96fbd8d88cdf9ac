"""Pydantic models for the dashboard's leg/strategy payloads and the save-form prefill."""

from datetime import date, datetime
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

COVERED_MARKER = "备兑"


class LegRecord(BaseModel):
    """One option position as the dashboard sends it.

    The payload mixes two generations of field names: ``type``/``strike`` and
    the strategy-leg variants ``contract_type_zh``/``contract_strike_price``.
    The leg variants win when both are present.
    """
    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    id: str
    type: Optional[str] = None
    contract_type_zh: Optional[str] = None
    position_type: str
    strike: Optional[float] = None
    contract_strike_price: Optional[float] = None
    expiry: str
    quantity: int = Field(ge=1)
    selected_quantity: Optional[int] = Field(default=None, alias="selectedQuantity")
    leg_quantity: Optional[int] = None
    position_type_zh: Optional[str] = None
    covered: bool = False

    @field_validator("expiry", mode="before")
    @classmethod
    def _expiry_to_key(cls, v):
        if isinstance(v, datetime):
            return v.date().isoformat()
        if isinstance(v, date):
            return v.isoformat()
        if not isinstance(v, str):
            raise ValueError(f"expiry must be an ISO date, got {v!r}")
        try:
            return date.fromisoformat(v).isoformat()
        except ValueError:
            raise ValueError(f"expiry must be an ISO date (YYYY-MM-DD), got {v!r}") from None

    @model_validator(mode="after")
    def _check_leg(self) -> "LegRecord":
        if self.option_side not in ("call", "put"):
            raise ValueError(f"leg {self.id}: option side must be call or put, got {self.type!r}")
        if self.position_type not in ("buy", "sell"):
            raise ValueError(f"leg {self.id}: position_type must be buy or sell, got {self.position_type!r}")
        if self.resolved_strike is None or self.resolved_strike <= 0:
            raise ValueError(f"leg {self.id}: strike must be positive")
        return self

    @property
    def option_side(self) -> Optional[str]:
        if self.type in ("call", "put"):
            return self.type
        return self.contract_type_zh

    @property
    def resolved_strike(self) -> Optional[float]:
        if self.contract_strike_price is not None:
            return self.contract_strike_price
        return self.strike

    @property
    def active_quantity(self) -> Optional[int]:
        """leg_quantity, else selectedQuantity. None means no size was picked."""
        if self.leg_quantity is not None:
            return self.leg_quantity
        return self.selected_quantity

    @property
    def is_covered(self) -> bool:
        return self.covered or self.position_type_zh == COVERED_MARKER


class StrategyRecord(BaseModel):
    """A saved complex strategy with its legs."""
    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    id: str
    name: str
    category: Optional[str] = None
    positions: List[LegRecord] = Field(default_factory=list)


class DraftLeg(BaseModel):
    id: str
    option_side: str
    direction: str
    strike: float
    expiry: str
    leg_quantity: int
    covered: bool = False


class StrategyDraft(BaseModel):
    """Prefill for the "save strategy" form. Advisory only."""
    name: str
    category: str
    confidence: float
    confidence_label: str       # "high", "medium", "low"
    legs: List[DraftLeg]
