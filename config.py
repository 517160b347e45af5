from __future__ import annotations

import os
from typing import Dict, Tuple

# config.py - defaults, field limits and presets for the lumpsum calculator

DEBOUNCE_SECONDS = float(os.environ.get("LUMPSUM_DEBOUNCE_MS", "300")) / 1000.0
LOG_LEVEL = os.environ.get("LUMPSUM_LOG_LEVEL", "WARNING").upper()

CURRENCY_SYMBOL = "₹"

DEFAULTS = {
    "lumpsum_amount": 100_000,
    "goal_amount": 1_000_000,
    "years": 5,
    "annual_return_pct": 12.0,
    "compounding_freq": 1,
    "inflation_pct": 6.0,
    "tax_pct": 20.0,
}

# field -> (min, max, label)
FIELD_LIMITS: Dict[str, Tuple[float, float, str]] = {
    "lumpsum_amount": (1_000, 10_000_000, "Investment amount"),
    "goal_amount": (10_000, 100_000_000, "Goal amount"),
    "years": (1, 40, "Investment period (years)"),
    "annual_return_pct": (1.0, 30.0, "Expected return (%)"),
    "inflation_pct": (0.0, 15.0, "Inflation rate (%)"),
    "tax_pct": (0.0, 50.0, "Tax on gains (%)"),
}

# periods per year -> label
COMPOUNDING_OPTIONS: Dict[int, str] = {
    1: "Annually",
    2: "Half-yearly",
    4: "Quarterly",
    12: "Monthly",
}

SCENARIO_PRESETS = {
    "conservative": {"lumpsum_amount": 100_000, "years": 10, "annual_return_pct": 8.0},
    "balanced": {"lumpsum_amount": 200_000, "years": 7, "annual_return_pct": 12.0},
    "aggressive": {"lumpsum_amount": 500_000, "years": 5, "annual_return_pct": 15.0},
}

# Quick-pick buttons under the amount input.
AMOUNT_PRESETS = (50_000, 100_000, 500_000, 1_000_000)
