from __future__ import annotations

import logging
import time
from dataclasses import dataclass, field
from typing import Callable, Dict, List, Mapping, Optional

import config
from breakdown import BreakdownRow, breakdown_for
from errors import InvalidFormatError, OutOfRangeError, ZeroBaseError
from scenario import CalculationInputs, CalculationResult, Mode, resolve
from validation import build_inputs, validate_inputs

# session.py - coalesces bursts of input changes and keeps the last good result

logger = logging.getLogger(__name__)


@dataclass
class _Pending:
    raw: Dict[str, object]
    mode: Mode
    due: float


@dataclass
class CalculatorSession:
    """
    Trailing-edge coalescing of recalculation requests.

    Each ``submit`` replaces whatever is pending and pushes the deadline out by
    ``delay`` seconds; only the latest request ever runs. A rejected request
    leaves ``result`` and ``breakdown`` untouched and fills ``errors``.
    """

    delay: float = config.DEBOUNCE_SECONDS
    clock: Callable[[], float] = time.monotonic
    inputs: Optional[CalculationInputs] = None
    result: Optional[CalculationResult] = None
    breakdown: List[BreakdownRow] = field(default_factory=list)
    errors: Dict[str, str] = field(default_factory=dict)
    runs: int = 0
    _pending: Optional[_Pending] = field(default=None, repr=False)

    @property
    def pending(self) -> bool:
        return self._pending is not None

    def submit(self, raw: Mapping[str, object], mode: Mode) -> None:
        if self._pending is not None:
            logger.debug("superseding pending recalculation")
        self._pending = _Pending(dict(raw), mode, self.clock() + self.delay)

    def poll(self) -> bool:
        if self._pending is None or self.clock() < self._pending.due:
            return False
        return self.flush()

    # Run the pending request now. Returns True if a new result was produced.
    def flush(self) -> bool:
        pending, self._pending = self._pending, None
        if pending is None:
            return False
        return self._run(pending.raw, pending.mode)

    def _run(self, raw: Dict[str, object], mode: Mode) -> bool:
        try:
            inputs = build_inputs(raw, mode)
            result = resolve(inputs)
        except (InvalidFormatError, OutOfRangeError, ZeroBaseError) as exc:
            report = validate_inputs(raw, mode)
            self.errors = {f: r.reason for f, r in report.items() if not r.valid}
            if not self.errors:
                self.errors = {getattr(exc, "field", None) or "amount": str(exc)}
            logger.warning("recalculation rejected: %s", exc)
            return False

        self.inputs = inputs
        self.result = result
        self.breakdown = list(breakdown_for(inputs, result))
        self.errors = {}
        self.runs += 1
        return True
