from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Iterator

import pandas as pd

from compounding import future_value
from errors import InvalidArgumentError
from scenario import CalculationInputs, CalculationResult

# breakdown.py - year-by-year ledger and growth curve for tables and charts

BREAKDOWN_COLUMNS = ["Year", "Opening Balance", "Interest Earned", "Closing Balance"]


@dataclass(frozen=True)
class BreakdownRow:
    year: int
    opening_balance: float
    interest_earned: float
    closing_balance: float


class Breakdown:
    """
    Rows for years 1..years, generated lazily and restartable.

    Each closing balance is computed straight from the principal for that
    year, so rounding never carries over from one row to the next.
    """

    def __init__(self, principal: float, rate_pct: float, years: int, compounding_freq: int = 1) -> None:
        if years < 0:
            raise InvalidArgumentError(f"period must be >= 0 years, got {years}", field="years")
        self.principal = principal
        self.rate_pct = rate_pct
        self.years = int(years)
        self.compounding_freq = compounding_freq

    def __len__(self) -> int:
        return self.years

    def __iter__(self) -> Iterator[BreakdownRow]:
        opening = self.principal
        for year in range(1, self.years + 1):
            closing = future_value(self.principal, self.rate_pct, year, self.compounding_freq)
            yield BreakdownRow(year, opening, closing - opening, closing)
            opening = closing


def breakdown_for(inputs: CalculationInputs, result: CalculationResult) -> Breakdown:
    return Breakdown(result.initial_investment, inputs.annual_return_pct, inputs.years, inputs.compounding_freq)


# Tabular form of the ledger for st.dataframe and CSV export.
def breakdown_frame(rows: Iterable[BreakdownRow]) -> pd.DataFrame:
    data = [(r.year, r.opening_balance, r.interest_earned, r.closing_balance) for r in rows]
    return pd.DataFrame(data, columns=BREAKDOWN_COLUMNS)


# Balance at year 0..years; year 0 is the principal.
def growth_curve(principal: float, rate_pct: float, years: int, compounding_freq: int = 1) -> pd.DataFrame:
    rows = [{"Year": 0, "Balance": float(principal)}]
    rows += [{"Year": r.year, "Balance": r.closing_balance} for r in Breakdown(principal, rate_pct, years, compounding_freq)]
    return pd.DataFrame(rows, columns=["Year", "Balance"])
