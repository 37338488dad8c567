"""Salary amount parsing, cadence inference, and cross-cadence comparison."""

import re
from typing import Any, Optional

from .models import SalaryCadence, SalaryGrade

HOURS_PER_YEAR = 2080  # 52 weeks * 40 hours
MONTHS_PER_YEAR = 12

# Amounts above this are read as monthly pay, anything else as an hourly rate.
# This is a policy threshold for the source spreadsheets, not a unit conversion.
MONTHLY_CADENCE_THRESHOLD = 150

_NON_NUMERIC = re.compile(r"[^\d.]")
_LEADING_NUMBER = re.compile(r"\d+(?:\.\d*)?|\.\d+")


def amount_to_annual(amount: float, cadence: SalaryCadence) -> float:
    """Convert ``amount`` paid at ``cadence`` to its annual equivalent.

    Example:
        >>> amount_to_annual(10, SalaryCadence.HOURLY)
        20800
    """
    if cadence == SalaryCadence.HOURLY:
        return amount * HOURS_PER_YEAR
    if cadence == SalaryCadence.MONTHLY:
        return amount * MONTHS_PER_YEAR
    return amount


def parse_amount(raw: Any) -> Optional[float]:
    """Parse a salary cell such as ``"$6,250.00"`` into a float.

    Every character other than digits and dots is discarded first, then the
    leading numeric literal is read. Returns None when nothing numeric remains.
    """
    if raw is None:
        return None

    cleaned = _NON_NUMERIC.sub("", str(raw))
    match = _LEADING_NUMBER.match(cleaned)
    if not match:
        return None
    return float(match.group(0))


def infer_cadence(amount: float) -> SalaryCadence:
    return SalaryCadence.MONTHLY if amount > MONTHLY_CADENCE_THRESHOLD else SalaryCadence.HOURLY


def build_salary_grade(grade: int, raw: Any, currency: str = "USD") -> Optional[SalaryGrade]:
    """Build a SalaryGrade from a raw cell, or None if the cell is unusable.

    Unparsable and non-positive amounts are dropped silently; messy salary
    sheets routinely contain blanks, dashes, and zero placeholders.
    """
    amount = parse_amount(raw.strip() if isinstance(raw, str) else raw)
    if amount is None or amount <= 0:
        return None
    return SalaryGrade(grade=grade, amount=amount, cadence=infer_cadence(amount), currency=currency)


def comparable_amount(grade: SalaryGrade, requested: SalaryCadence) -> float:
    """Express ``grade`` in the unit a salary threshold was given in.

    Hourly requests compare hourly grades as-is and convert other grades to an
    hourly equivalent through their annual figure. Monthly and annual requests
    compare every grade on its annual equivalent.
    """
    if requested == SalaryCadence.HOURLY:
        if grade.cadence == SalaryCadence.HOURLY:
            return grade.amount
        return amount_to_annual(grade.amount, grade.cadence) / HOURS_PER_YEAR
    return amount_to_annual(grade.amount, grade.cadence)


def format_amount(amount: float) -> str:
    """Render an amount with thousands separators and no trailing zeros."""
    if float(amount).is_integer():
        return f"{int(amount):,}"
    return f"{amount:,.2f}".rstrip("0").rstrip(".")
