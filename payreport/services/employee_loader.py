"""Chargement des employés depuis un provider (validation des textes bruts)."""

import logging
from typing import List

from payreport.models import Employee
from payreport.providers import AbstractEmployeeProvider
from payreport.utils.parsers import ParseError, parse_date, parse_money

logger = logging.getLogger(__name__)


def build_employee(name: str, birth_date: str, salary: str, role: str) -> Employee:
    context = f"employee '{name}'"
    return Employee(
        name=name,
        birth_date=parse_date(birth_date, context),
        salary=parse_money(salary, context),
        role=role,
    )


def load_employees(provider: AbstractEmployeeProvider) -> List[Employee]:
    """
    Construit la liste des employés dans l'ordre de la source.

    Le chargement s'arrête à la première ligne invalide: aucune liste
    partielle n'est retournée.

    Raises:
        ParseError: date ou salaire mal formé
    """
    employees: List[Employee] = []
    for row_idx, row in enumerate(provider.fetch_rows()):
        try:
            employees.append(build_employee(*row))
        except ParseError as exc:
            logger.error(f"Ligne {row_idx} rejetée: {exc}")
            raise

    logger.info(f"{len(employees)} employés chargés")
    return employees
