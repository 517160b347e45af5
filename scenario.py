from __future__ import annotations

import logging
from dataclasses import asdict, dataclass
from enum import Enum
from typing import Dict, Optional

import config
from compounding import (
    effective_annual_return_pct,
    future_value,
    inflation_adjust,
    post_tax_amount,
    present_value_for_target,
    sip_future_value,
    total_return_pct,
)
from errors import InvalidArgumentError, ZeroBaseError

# scenario.py - turns validated inputs into a result for Investment or Goal mode

logger = logging.getLogger(__name__)


class Mode(str, Enum):
    INVESTMENT = "investment"
    GOAL = "goal"

    @classmethod
    def parse(cls, text: str) -> "Mode":
        try:
            return cls((text or "").strip().lower())
        except ValueError:
            raise InvalidArgumentError(f"unknown mode {text!r}, expected 'investment' or 'goal'") from None


@dataclass(frozen=True)
class CalculationInputs:
    amount: float  # principal in Investment mode, target in Goal mode
    years: int
    annual_return_pct: float
    compounding_freq: int = 1
    inflation_pct: float = 0.0
    tax_pct: float = 0.0
    inflation_enabled: bool = False
    tax_enabled: bool = False
    mode: Mode = Mode.INVESTMENT


@dataclass(frozen=True)
class CalculationResult:
    mode: Mode
    initial_investment: float
    estimated_gains: float
    maturity_amount: float
    inflation_adjusted_amount: float
    post_tax_amount: float
    effective_annual_return_pct: float
    total_return_pct: float
    required_lumpsum: Optional[float] = None

    def as_dict(self) -> Dict[str, object]:
        d = asdict(self)
        d["mode"] = self.mode.value
        return d


@dataclass(frozen=True)
class SipComparison:
    lumpsum_maturity: float
    equivalent_monthly_sip: float
    sip_maturity: float

    @property
    def sip_advantage(self) -> float:
        return self.sip_maturity - self.lumpsum_maturity


# Shared tail of both modes: adjustments and percentages against `base`.
def _derive(inputs: CalculationInputs, base: float, maturity: float, required: Optional[float]) -> CalculationResult:
    if base == 0:
        raise ZeroBaseError("initial investment is zero; return percentages are undefined", field="amount")

    gains = maturity - base
    inflation_adjusted = (
        inflation_adjust(maturity, inputs.inflation_pct, inputs.years) if inputs.inflation_enabled else maturity
    )
    post_tax = post_tax_amount(maturity, base, inputs.tax_pct) if inputs.tax_enabled else maturity

    return CalculationResult(
        mode=inputs.mode,
        initial_investment=base,
        estimated_gains=gains,
        maturity_amount=maturity,
        inflation_adjusted_amount=inflation_adjusted,
        post_tax_amount=post_tax,
        effective_annual_return_pct=effective_annual_return_pct(maturity, base, inputs.years),
        total_return_pct=total_return_pct(gains, base),
        required_lumpsum=required,
    )


def resolve(inputs: CalculationInputs) -> CalculationResult:
    """
    Compute the result for ``inputs.mode``.

    Investment mode grows ``inputs.amount``; Goal mode treats ``inputs.amount``
    as the target and solves for the lumpsum that reaches it. Raises
    ZeroBaseError when the starting amount is zero instead of returning nan.
    """
    if inputs.mode == Mode.INVESTMENT:
        maturity = future_value(inputs.amount, inputs.annual_return_pct, inputs.years, inputs.compounding_freq)
        result = _derive(inputs, float(inputs.amount), maturity, None)
    elif inputs.mode == Mode.GOAL:
        required = present_value_for_target(
            inputs.amount, inputs.annual_return_pct, inputs.years, inputs.compounding_freq
        )
        result = _derive(inputs, required, float(inputs.amount), required)
    else:
        raise InvalidArgumentError(f"unsupported mode {inputs.mode!r}")

    logger.debug(
        "resolved %s: start=%.2f maturity=%.2f",
        inputs.mode.value,
        result.initial_investment,
        result.maturity_amount,
    )
    return result


def compare_lumpsum_vs_sip(principal: float, rate_pct: float, years: float) -> SipComparison:
    """
    Lumpsum at annual compounding vs. the same money split evenly into monthly SIPs.

    The monthly SIP here is a plain ``principal / months`` split, not the solved
    value from ``compounding.equivalent_monthly_sip``.
    """
    months = years * 12
    if months == 0:
        raise ZeroBaseError("cannot split the principal over zero months", field="years")
    monthly = principal / months
    return SipComparison(
        lumpsum_maturity=future_value(principal, rate_pct, years, 1),
        equivalent_monthly_sip=monthly,
        sip_maturity=sip_future_value(monthly, rate_pct, years),
    )


def default_inputs(mode: Mode = Mode.INVESTMENT) -> CalculationInputs:
    d = config.DEFAULTS
    amount = d["goal_amount"] if mode == Mode.GOAL else d["lumpsum_amount"]
    return CalculationInputs(
        amount=amount,
        years=d["years"],
        annual_return_pct=d["annual_return_pct"],
        compounding_freq=d["compounding_freq"],
        inflation_pct=d["inflation_pct"],
        tax_pct=d["tax_pct"],
        mode=mode,
    )


# Presets always land in Investment mode with annual compounding and no adjustments.
def preset_inputs(name: str) -> CalculationInputs:
    preset = config.SCENARIO_PRESETS[name.lower()]
    base = default_inputs(Mode.INVESTMENT)
    return CalculationInputs(
        amount=preset["lumpsum_amount"],
        years=preset["years"],
        annual_return_pct=preset["annual_return_pct"],
        compounding_freq=1,
        inflation_pct=base.inflation_pct,
        tax_pct=base.tax_pct,
    )
