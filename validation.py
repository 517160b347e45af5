from __future__ import annotations

import math
import re
from dataclasses import dataclass
from typing import Dict, List, Mapping, Optional

import config
from errors import CalculatorError, InvalidFormatError, OutOfRangeError
from scenario import CalculationInputs, Mode

# validation.py - parse raw field values and range-check them before any math runs

_CURRENCY_RE = re.compile(r"(?i)inr|rs\.?|₹|\$")
_GROUPING_RE = re.compile(r"[,_'\s\u00a0\u202f]")

WHOLE_NUMBER_FIELDS = {"years", "compounding_freq"}


@dataclass(frozen=True)
class ValidationResult:
    valid: bool
    value: Optional[float] = None
    reason: str = ""


def parse_number(raw: object, field: Optional[str] = None) -> float:
    """
    Parse a number typed by a user, e.g. ``"₹1,00,000"``, ``"Rs. 5 000"`` or ``"12.5%"``.

    Grouping separators, currency markers and a trailing percent sign are
    dropped. Anything else that is not numeric raises InvalidFormatError.
    """
    if raw is None:
        raise InvalidFormatError("a value is required", field=field)
    if isinstance(raw, bool):
        raise InvalidFormatError(f"{raw!r} is not a number", field=field)

    if isinstance(raw, (int, float)):
        value = float(raw)
    else:
        text = str(raw).strip()
        text = _CURRENCY_RE.sub("", text)
        text = _GROUPING_RE.sub("", text)
        if text.endswith("%"):
            text = text[:-1]
        if not text:
            raise InvalidFormatError(f"{raw!r} is not a number", field=field)
        try:
            value = float(text)
        except ValueError:
            raise InvalidFormatError(f"{raw!r} is not a number", field=field) from None

    if not math.isfinite(value):
        raise InvalidFormatError(f"{raw!r} is not a finite number", field=field)
    return value


def _label(field: str) -> str:
    if field == "compounding_freq":
        return "Compounding frequency"
    return config.FIELD_LIMITS[field][2]


def check_field(field: str, raw: object) -> float:
    """Parse and range-check one field; raises InvalidFormatError or OutOfRangeError."""
    if field != "compounding_freq" and field not in config.FIELD_LIMITS:
        raise KeyError(field)

    value = parse_number(raw, field=field)
    label = _label(field)

    if field in WHOLE_NUMBER_FIELDS and not value.is_integer():
        raise InvalidFormatError(f"{label} must be a whole number, got {value:g}", field=field)

    if field == "compounding_freq":
        if int(value) not in config.COMPOUNDING_OPTIONS:
            allowed = ", ".join(str(n) for n in config.COMPOUNDING_OPTIONS)
            raise OutOfRangeError(f"{label} must be one of {allowed} periods per year", field=field)
        return value

    lo, hi, _ = config.FIELD_LIMITS[field]
    if value < lo or value > hi:
        raise OutOfRangeError(f"{label} must be between {lo:,g} and {hi:,g}, got {value:,g}", field=field)
    return value


def validate_field(field: str, raw: object) -> ValidationResult:
    try:
        return ValidationResult(True, check_field(field, raw))
    except CalculatorError as exc:
        return ValidationResult(False, None, str(exc))


def amount_field(mode: Mode) -> str:
    return "goal_amount" if mode == Mode.GOAL else "lumpsum_amount"


# Fields that matter for this mode and these toggles, in display order.
def relevant_fields(raw: Mapping[str, object], mode: Mode) -> List[str]:
    fields = [amount_field(mode), "years", "annual_return_pct", "compounding_freq"]
    if raw.get("inflation_enabled"):
        fields.append("inflation_pct")
    if raw.get("tax_enabled"):
        fields.append("tax_pct")
    return fields


def _raw_value(raw: Mapping[str, object], field: str) -> object:
    if field == "compounding_freq":
        return raw.get(field, config.DEFAULTS["compounding_freq"])
    return raw.get(field)


def validate_inputs(raw: Mapping[str, object], mode: Mode) -> Dict[str, ValidationResult]:
    return {f: validate_field(f, _raw_value(raw, f)) for f in relevant_fields(raw, mode)}


def build_inputs(raw: Mapping[str, object], mode: Mode) -> CalculationInputs:
    """
    Build validated CalculationInputs from raw form values.

    Fields outside the current mode or behind a disabled toggle are ignored.
    The first invalid field raises.
    """
    values = {f: check_field(f, _raw_value(raw, f)) for f in relevant_fields(raw, mode)}
    inflation_enabled = bool(raw.get("inflation_enabled"))
    tax_enabled = bool(raw.get("tax_enabled"))
    return CalculationInputs(
        amount=values[amount_field(mode)],
        years=int(values["years"]),
        annual_return_pct=values["annual_return_pct"],
        compounding_freq=int(values["compounding_freq"]),
        inflation_pct=values.get("inflation_pct", 0.0),
        tax_pct=values.get("tax_pct", 0.0),
        inflation_enabled=inflation_enabled,
        tax_enabled=tax_enabled,
        mode=mode,
    )
