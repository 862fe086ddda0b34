import logging
from datetime import date
from decimal import Decimal
from typing import Dict, Iterable, List, Optional

import pandas as pd

from payreport.logic.formatting import format_money
from payreport.logic.metrics import (
    MINIMUM_WAGE,
    apply_raise,
    minimum_wage_multiples,
    oldest_with_age,
    total_salary,
)
from payreport.models import Employee
from payreport.services.date_utils import born_in_months

logger = logging.getLogger(__name__)

REMOVED_NAME = "Joao"
RAISE_PCT = 10
BIRTHDAY_MONTHS = (10, 12)

EMPLOYEE_COLUMNS = ["name", "birth_date", "salary", "role"]


# === Opérations sur la liste =================================================
def remove_by_name(employees: List[Employee], name: str) -> int:
    """Retire (sur place) tous les employés portant ce nom, sans tenir compte de la casse.

    Returns:
        Nombre d'employés retirés
    """
    kept = [emp for emp in employees if not emp.has_name(name)]
    removed = len(employees) - len(kept)
    employees[:] = kept
    logger.info(f"{removed} employé(s) '{name}' retiré(s)")
    return removed


def group_by_role(employees: Iterable[Employee]) -> Dict[str, List[Employee]]:
    groups: Dict[str, List[Employee]] = {}
    for emp in employees:
        groups.setdefault(emp.role, []).append(emp)
    return groups


def filter_birth_months(
    employees: Iterable[Employee], months: Iterable[int] = BIRTHDAY_MONTHS
) -> List[Employee]:
    months = tuple(months)
    return [emp for emp in employees if born_in_months(emp.birth_date, months)]


def sort_by_name(employees: Iterable[Employee]) -> List[Employee]:
    """Nouvelle liste triée par nom (insensible à la casse, tri stable)."""
    return sorted(employees, key=lambda emp: emp.name.casefold())


# === DataFrames ==============================================================
def df_employees(employees: Iterable[Employee]) -> pd.DataFrame:
    rows = [
        {
            "name": emp.name,
            "birth_date": emp.birth_date,
            "salary": emp.salary,
            "role": emp.role,
        }
        for emp in employees
    ]
    return pd.DataFrame(rows, columns=EMPLOYEE_COLUMNS)


def _sum_decimal(series: pd.Series) -> Decimal:
    return sum(series, Decimal("0.00"))


def df_role_summary(employees: Iterable[Employee]) -> pd.DataFrame:
    """Effectif et masse salariale par fonction (ordre de première apparition)."""
    df = df_employees(employees)
    if df.empty:
        return pd.DataFrame(columns=["headcount", "total_salary"])

    return df.groupby("role", sort=False).agg(
        headcount=("name", "size"),
        total_salary=("salary", _sum_decimal),
    )


# === Rapport console =========================================================
class EmployeeReport:
    """Exécute le script de rapport sur une liste d'employés (modifiée sur place)."""

    def __init__(
        self,
        employees: List[Employee],
        today: Optional[date] = None,
        minimum_wage: Decimal = MINIMUM_WAGE,
    ):
        self.employees = employees
        self.today = today
        self.minimum_wage = minimum_wage

    @staticmethod
    def section(number: str, title: str) -> None:
        print(f"\n==== {number} {title} ====")

    @staticmethod
    def print_employees(employees: Iterable[Employee]) -> None:
        for emp in employees:
            print(emp)

    def run(self) -> None:
        self.section("3.1", "Employees inserted (original order)")
        self.print_employees(self.employees)

        remove_by_name(self.employees, REMOVED_NAME)
        self.section("3.2", f"After removing '{REMOVED_NAME}'")
        self.print_employees(self.employees)

        self.section("3.3", "Formatted print")
        self.print_employees(self.employees)

        apply_raise(self.employees, RAISE_PCT)
        logger.debug(f"Augmentation de {RAISE_PCT}% appliquée")
        self.section("3.4", f"{RAISE_PCT}% salary increase")
        self.print_employees(self.employees)

        self.print_role_map()
        self.print_grouped()

        self.section("3.8", "Birthdays in October and December")
        self.print_employees(filter_birth_months(self.employees, BIRTHDAY_MONTHS))

        self.print_oldest()

        self.section("3.10", "Employees in alphabetical order")
        self.print_employees(sort_by_name(self.employees))

        self.section("3.11", "Total salaries")
        print(f"Total: R$ {format_money(total_salary(self.employees))}")

        self.section("3.12", "Minimum wages earned by each employee")
        for emp, multiple in minimum_wage_multiples(self.employees, self.minimum_wage):
            print(f"{emp.name} => {format_money(multiple)}")

    def print_role_map(self) -> None:
        self.section("3.5", "Map by role")
        summary = df_role_summary(self.employees)
        for role, headcount in summary["headcount"].items():
            print(f"{role} => {headcount}")

    def print_grouped(self) -> None:
        self.section("3.6", "Employees grouped by role")
        for role, members in group_by_role(self.employees).items():
            print(f"\nRole: {role}")
            self.print_employees(members)

    def print_oldest(self) -> None:
        self.section("3.9", "Oldest employee")
        found = oldest_with_age(self.employees, self.today)
        if found is None:
            return
        emp, age = found
        print(f"Name: {emp.name}, Age: {age}")
