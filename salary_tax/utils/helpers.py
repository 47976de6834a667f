"""Shared utility functions — whole-rupee rounding and rupee formatting."""

from __future__ import annotations

import math

from salary_tax.config import settings

CURRENCY_SYMBOL = "₹"


# ── Rounding ──────────────────────────────────────────────────────────────

def _round_half_up(value: float) -> int:
    """Round a non-negative amount to whole rupees, halves going up."""
    return int(math.floor(value + 0.5))


# ── Indian number formatting ──────────────────────────────────────────────

def group_indian_digits(digits: str) -> str:
    """Insert separators the Indian way: last three digits, then pairs.

    ``"10710000"`` → ``"1,07,10,000"``
    """
    if len(digits) <= 3:
        return digits

    head, tail = digits[:-3], digits[-3:]
    groups: list[str] = []
    while len(head) > 2:
        groups.insert(0, head[-2:])
        head = head[:-2]
    if head:
        groups.insert(0, head)
    return ",".join(groups + [tail])


def format_currency(value: float) -> str:
    """Format an amount as whole rupees, e.g. ``1071000`` → ``₹10,71,000``.

    Raises ``ValueError`` for NaN or infinite amounts.
    """
    if not math.isfinite(value):
        raise ValueError(f"Cannot format non-finite amount: {value!r}")

    rupees = _round_half_up(abs(value))
    sign = "-" if value < 0 and rupees != 0 else ""
    return f"{sign}{CURRENCY_SYMBOL}{group_indian_digits(str(rupees))}"


def format_lpa(value: float) -> str:
    """Express an annual amount in lakhs per annum, e.g. ``₹12.00 LPA``."""
    if not math.isfinite(value):
        raise ValueError(f"Cannot format non-finite amount: {value!r}")

    lakhs = abs(value) / settings.LAKH
    sign = "-" if value < 0 and f"{lakhs:.2f}" != "0.00" else ""
    return f"{sign}{CURRENCY_SYMBOL}{lakhs:.2f} LPA"
