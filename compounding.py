from __future__ import annotations

from errors import InvalidArgumentError, ZeroBaseError

# compounding.py - compound interest, discounting, tax and SIP formulas
#
# All rates are percentages (12 means 12%). Nothing here returns nan or inf:
# inputs that would produce one raise instead.


# Growth factor per compounding period; must stay positive so fractional
# exponents have a real value.
def _period_base(rate_pct: float, compounding_freq: int) -> float:
    if compounding_freq < 1:
        raise InvalidArgumentError(f"compounding frequency must be >= 1, got {compounding_freq}")
    base = 1 + rate_pct / 100.0 / compounding_freq
    if base <= 0:
        raise InvalidArgumentError(f"rate {rate_pct}% wipes out the balance each period")
    return base


def _check_years(years: float) -> None:
    if years < 0:
        raise InvalidArgumentError(f"period must be >= 0 years, got {years}")


def future_value(principal: float, rate_pct: float, years: float, compounding_freq: int = 1) -> float:
    """Value of ``principal`` after ``years`` compounded ``compounding_freq`` times a year."""
    base = _period_base(rate_pct, compounding_freq)
    _check_years(years)
    return principal * base ** (compounding_freq * years)


def present_value_for_target(target: float, rate_pct: float, years: float, compounding_freq: int = 1) -> float:
    """Lumpsum needed today to grow into ``target``; the inverse of :func:`future_value`."""
    base = _period_base(rate_pct, compounding_freq)
    _check_years(years)
    return target / base ** (compounding_freq * years)


# Deflate a nominal amount to today's money.
def inflation_adjust(amount: float, inflation_pct: float, years: float) -> float:
    _check_years(years)
    base = 1 + inflation_pct / 100.0
    if base <= 0:
        raise InvalidArgumentError(f"inflation rate must be above -100%, got {inflation_pct}")
    return amount / base ** years


def post_tax_amount(maturity: float, principal: float, tax_pct: float) -> float:
    """
    Maturity after tax on the gain only.

    A negative gain yields a negative tax, i.e. the result exceeds ``maturity``.
    """
    gains = maturity - principal
    return maturity - gains * (tax_pct / 100.0)


def effective_annual_return_pct(end_value: float, start_value: float, years: float) -> float:
    if start_value == 0:
        raise ZeroBaseError("effective return is undefined for a zero starting value")
    if years <= 0:
        raise InvalidArgumentError(f"effective return needs a period of at least one year, got {years}")
    ratio = end_value / start_value
    if ratio < 0:
        raise InvalidArgumentError(f"effective return is undefined when start and end values differ in sign ({start_value}, {end_value})")
    return (ratio ** (1 / years) - 1) * 100.0


def total_return_pct(gains: float, base: float) -> float:
    if base == 0:
        raise ZeroBaseError("total return is undefined for a zero base amount")
    return gains / base * 100.0


# FV multiplier of 1 paid at the start of each month (annuity-due).
def _annuity_due_factor(annual_rate_pct: float, months: float) -> float:
    r = annual_rate_pct / 12.0 / 100.0
    if r == 0:
        return months
    if 1 + r <= 0:
        raise InvalidArgumentError(f"monthly rate from {annual_rate_pct}% wipes out each contribution")
    return ((1 + r) ** months - 1) / r * (1 + r)


def sip_future_value(monthly_amount: float, annual_rate_pct: float, years: float) -> float:
    """Future value of monthly contributions made at the start of each month."""
    _check_years(years)
    return monthly_amount * _annuity_due_factor(annual_rate_pct, years * 12)


def equivalent_monthly_sip(lumpsum: float, annual_rate_pct: float, years: float) -> float:
    """
    Monthly SIP that ends at the same value as ``lumpsum`` compounded monthly.

    Solves :func:`sip_future_value` for the monthly amount, with the target
    taken from :func:`future_value` at 12 periods a year.
    """
    _check_years(years)
    months = years * 12
    if months == 0:
        raise ZeroBaseError("cannot spread a lumpsum over zero months")
    target = future_value(lumpsum, annual_rate_pct, years, 12)
    return target / _annuity_due_factor(annual_rate_pct, months)
