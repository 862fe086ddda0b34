# logic/metrics.py — calculs salariaux en Decimal (aucun float intermédiaire)
from __future__ import annotations

from datetime import date
from decimal import ROUND_HALF_UP, Decimal
from typing import Iterable, Optional

from payreport.logic.formatting import CENTS, quantize_money
from payreport.models import Employee
from payreport.services.date_utils import age_in_years

MINIMUM_WAGE = Decimal("1212.00")


def percent_increase(base: Decimal, pct: int) -> Decimal:
    """``base × (1 + pct/100)`` arrondi à 2 décimales (half-up)."""
    factor = Decimal(1) + Decimal(pct) / Decimal(100)
    return quantize_money(base * factor)


def apply_raise(employees: Iterable[Employee], pct: int) -> None:
    for emp in employees:
        emp.update_salary(percent_increase(emp.salary, pct))


def total_salary(employees: Iterable[Employee]) -> Decimal:
    return sum((emp.salary for emp in employees), Decimal("0.00"))


def minimum_wage_multiple(salary: Decimal, minimum_wage: Decimal = MINIMUM_WAGE) -> Decimal:
    if minimum_wage <= 0:
        raise ValueError(f"minimum wage must be positive: {minimum_wage}")
    return (salary / minimum_wage).quantize(CENTS, rounding=ROUND_HALF_UP)


def minimum_wage_multiples(
    employees: Iterable[Employee], minimum_wage: Decimal = MINIMUM_WAGE
) -> list[tuple[Employee, Decimal]]:
    return [(emp, minimum_wage_multiple(emp.salary, minimum_wage)) for emp in employees]


def find_oldest(employees: Iterable[Employee]) -> Optional[Employee]:
    # min() garde le premier rencontré en cas d'égalité
    return min(employees, key=lambda emp: emp.birth_date, default=None)


def oldest_with_age(
    employees: Iterable[Employee], today: Optional[date] = None
) -> Optional[tuple[Employee, int]]:
    oldest = find_oldest(employees)
    if oldest is None:
        return None
    return oldest, age_in_years(oldest.birth_date, today)
