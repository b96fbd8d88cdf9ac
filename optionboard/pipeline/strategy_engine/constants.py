"""Archetype registry — single source of truth for archetype metadata."""

from .types import ArchetypeDef

CALL = "call"
PUT = "put"
BUY = "buy"
SELL = "sell"

CATEGORIES = ("bullish", "bearish", "neutral", "volatility")

CUSTOM = "custom combination"

ARCHETYPES: dict[str, ArchetypeDef] = {
    # -- Single legs --
    "long call":            ArchetypeDef("long call",            "bullish",    0.9,  1, "single"),
    "short call":           ArchetypeDef("short call",           "bearish",    0.9,  1, "single"),
    "long put":             ArchetypeDef("long put",             "bearish",    0.9,  1, "single"),
    "short put":            ArchetypeDef("short put",            "bullish",    0.9,  1, "single"),
    # -- Verticals --
    "bullish call spread":  ArchetypeDef("bullish call spread",  "bullish",    0.95, 2, "vertical"),
    "bearish call spread":  ArchetypeDef("bearish call spread",  "bearish",    0.95, 2, "vertical"),
    "bullish put spread":   ArchetypeDef("bullish put spread",   "bullish",    0.95, 2, "vertical"),
    "bearish put spread":   ArchetypeDef("bearish put spread",   "bearish",    0.95, 2, "vertical"),
    # -- Volatility --
    "straddle":             ArchetypeDef("straddle",             "volatility", 0.9,  2, "volatility"),
    "strangle":             ArchetypeDef("strangle",             "volatility", 0.9,  2, "volatility"),
    # -- Neutral multi-leg --
    "iron condor":          ArchetypeDef("iron condor",          "neutral",    0.9,  4, "multi"),
    "butterfly":            ArchetypeDef("butterfly",            "neutral",    0.85, 3, "butterfly"),
    # -- Fallback --
    CUSTOM:                 ArchetypeDef(CUSTOM,                 "neutral",    0.5,  0, "custom"),
}
