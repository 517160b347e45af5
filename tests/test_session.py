import pytest

from scenario import Mode
from session import CalculatorSession

# unit tests for recalculation coalescing


class FakeClock:
    def __init__(self):
        self.now = 0.0

    def __call__(self):
        return self.now


def raw(amount="1,00,000", **overrides):
    form = {
        "lumpsum_amount": amount,
        "goal_amount": "10,00,000",
        "years": 5,
        "annual_return_pct": 12.0,
        "compounding_freq": 1,
        "inflation_enabled": False,
        "inflation_pct": 6.0,
        "tax_enabled": False,
        "tax_pct": 20.0,
    }
    form.update(overrides)
    return form


def test_waits_for_the_trailing_edge():
    clock = FakeClock()
    s = CalculatorSession(delay=0.3, clock=clock)
    s.submit(raw(), Mode.INVESTMENT)
    assert s.pending
    clock.now = 0.2
    assert not s.poll()
    assert s.result is None
    clock.now = 0.3
    assert s.poll()
    assert not s.pending
    assert s.result.maturity_amount == pytest.approx(176_234.17, abs=0.01)
    assert len(s.breakdown) == 5


def test_latest_submit_supersedes_pending():
    clock = FakeClock()
    s = CalculatorSession(delay=0.3, clock=clock)
    s.submit(raw("50,000"), Mode.INVESTMENT)
    clock.now = 0.2
    s.submit(raw("2,00,000"), Mode.INVESTMENT)
    clock.now = 0.4
    assert not s.poll()  # deadline moved to 0.5
    clock.now = 0.5
    assert s.poll()
    assert s.runs == 1
    assert s.result.initial_investment == 200_000


def test_invalid_input_keeps_last_result():
    s = CalculatorSession(delay=0.0, clock=FakeClock())
    s.submit(raw(), Mode.INVESTMENT)
    assert s.flush()
    previous = s.result

    s.submit(raw("500"), Mode.INVESTMENT)
    assert not s.flush()
    assert s.result is previous
    assert "lumpsum_amount" in s.errors

    s.submit(raw("abc"), Mode.INVESTMENT)
    assert not s.flush()
    assert s.result is previous
    assert "lumpsum_amount" in s.errors


def test_errors_clear_after_a_good_run():
    s = CalculatorSession(delay=0.0, clock=FakeClock())
    s.submit(raw("500"), Mode.INVESTMENT)
    s.flush()
    assert s.errors
    s.submit(raw(), Mode.GOAL)
    assert s.flush()
    assert s.errors == {}
    assert s.result.required_lumpsum == pytest.approx(567_426.86, abs=0.01)


def test_flush_without_pending():
    s = CalculatorSession(delay=0.0, clock=FakeClock())
    assert not s.flush()
    assert not s.poll()
