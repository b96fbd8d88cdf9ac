"""Strategy service — save-form suggestions and per-expiry T-boards for the dashboard."""

from dataclasses import dataclass, field
from datetime import date
from typing import Any, Dict, Iterable, List, Mapping, Optional

from loguru import logger
from pydantic import ValidationError

from optionboard.config import Settings, load_settings
from optionboard.pipeline.strategy_engine import (
    ComplexStrategy, OptionLeg, active_leg_set, classify, records_to_legs, record_to_strategy,
)
from optionboard.pipeline.strategy_engine.types import ClassificationResult
from optionboard.pipeline.tboard import ExpiryGroup, TBoardRow, build_tboard, group_by_expiry
from optionboard.schemas import DraftLeg, LegRecord, StrategyDraft, StrategyRecord


@dataclass
class ExpiryBoard:
    """An expiry group together with its T-board rows."""
    group: ExpiryGroup
    rows: List[TBoardRow] = field(default_factory=list)


def suggest_strategy(
    legs: Iterable[OptionLeg],
    selection: Mapping[str, int],
    expiry: str,
    settings: Optional[Settings] = None,
) -> Optional[StrategyDraft]:
    """Prefill for the "save strategy" form from the current selection.

    Returns None when nothing at ``expiry`` is selected. The draft is advisory;
    saving never depends on it. Confidence labels use ``settings``, or the
    environment when it is omitted.
    """
    active = active_leg_set(legs, selection, expiry=expiry)
    result = classify(active)
    if result is None:
        logger.debug(f"No active legs at {expiry}; nothing to suggest")
        return None

    if settings is None:
        settings = load_settings()

    logger.info(
        f"Suggested {result.archetype} ({result.category}, {result.confidence:.2f}) "
        f"for {len(active)} legs at {expiry}"
    )
    return _draft(result, active, settings)


def classify_records(payloads: Iterable[Dict[str, Any]]) -> Optional[ClassificationResult]:
    """Parse raw leg payloads and classify them using their own picked sizes."""
    try:
        records = [LegRecord.model_validate(p) for p in payloads]
    except ValidationError as e:
        logger.error(f"Invalid leg payload: {e}")
        raise

    return classify(records_to_legs(records))


def parse_strategies(payloads: Iterable[Dict[str, Any]]) -> List[ComplexStrategy]:
    """Parse saved strategy payloads into ComplexStrategy values."""
    try:
        return [record_to_strategy(StrategyRecord.model_validate(p)) for p in payloads]
    except ValidationError as e:
        logger.error(f"Invalid strategy payload: {e}")
        raise


def build_expiry_boards(
    positions: Iterable[OptionLeg],
    strategies: Iterable[ComplexStrategy],
    today: date,
) -> List[ExpiryBoard]:
    """Group positions by expiry and attach each group's T-board rows."""
    strategies = list(strategies)
    groups = group_by_expiry(positions, strategies, today)

    boards = [
        ExpiryBoard(group=g, rows=build_tboard(g.single, g.complex, g.expiry))
        for g in groups
    ]
    logger.debug(f"Built {len(boards)} expiry boards from {len(strategies)} strategies")
    return boards


def _draft(result: ClassificationResult, active: Iterable[OptionLeg], settings: Settings) -> StrategyDraft:
    return StrategyDraft(
        name=result.archetype,
        category=result.category,
        confidence=result.confidence,
        confidence_label=settings.confidence_label(result.confidence),
        legs=[
            DraftLeg(
                id=leg.id,
                option_side=leg.option_side,
                direction=leg.direction,
                strike=leg.strike,
                expiry=leg.expiry,
                leg_quantity=leg.selected_quantity,
                covered=leg.covered,
            )
            for leg in active
        ],
    )
