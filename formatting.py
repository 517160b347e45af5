from __future__ import annotations

from typing import Optional

from config import CURRENCY_SYMBOL

# formatting.py - number to display string helpers (INR conventions)

CRORE = 10_000_000
LAKH = 100_000


# Round to whole rupees and group digits the Indian way: 12,34,567.
def group_indian(x: float) -> str:
    n = int(round(x))
    digits = str(abs(n))
    head, tail = digits[:-3], digits[-3:]
    groups = []
    while len(head) > 2:
        groups.insert(0, head[-2:])
        head = head[:-2]
    if head:
        groups.insert(0, head)
    body = ",".join(groups + [tail])
    return f"-{body}" if n < 0 else body


# Compact currency: ₹1.23Cr, ₹1.76L, ₹12K, ₹950.
def money(x: Optional[float]) -> str:
    if x is None:
        return "—"
    sign = "-" if x < 0 else ""
    a = abs(x)
    if a >= CRORE:
        body = f"{a / CRORE:.2f}Cr"
    elif a >= LAKH:
        body = f"{a / LAKH:.2f}L"
    elif a >= 1000:
        body = f"{a / 1000:.0f}K"
    else:
        body = group_indian(a)
    return f"{sign}{CURRENCY_SYMBOL}{body}"


def pct(x: Optional[float], decimals: int = 1) -> str:
    return f"{x:.{decimals}f}%" if x is not None else "—"
