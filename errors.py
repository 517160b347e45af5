from __future__ import annotations

from typing import Optional

# errors.py - error kinds raised by parsing, validation and the math layer


class CalculatorError(Exception):
    def __init__(self, message: str, field: Optional[str] = None) -> None:
        super().__init__(message)
        self.field = field


# Text that does not parse to a finite number.
class InvalidFormatError(CalculatorError, ValueError):
    pass


# A parsed value outside its field's min/max.
class OutOfRangeError(CalculatorError, ValueError):
    pass


# Percentages taken against a zero base (principal, required lumpsum, months).
class ZeroBaseError(CalculatorError, ZeroDivisionError):
    pass


# Contract violations in the math layer: non-positive compounding frequency,
# negative period, a growth base that is not positive.
class InvalidArgumentError(CalculatorError, ValueError):
    pass
