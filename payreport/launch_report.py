#!/usr/bin/env python3
"""
Script de lancement du rapport employés.
Charge les employés, exécute le rapport et retourne le code de sortie.
"""

import logging
import sys
from typing import Optional

from payreport.config import settings
from payreport.logic.reports import EmployeeReport
from payreport.providers import AbstractEmployeeProvider, SeedEmployeeProvider
from payreport.services.employee_loader import load_employees
from payreport.services.error_messages import format_error_for_user
from payreport.utils.parsers import ParseError

logger = logging.getLogger(__name__)


def run(provider: Optional[AbstractEmployeeProvider] = None, today=None) -> int:
    if provider is None:
        provider = SeedEmployeeProvider()

    try:
        employees = load_employees(provider)
    except ParseError as exc:
        error = format_error_for_user(exc)
        print(f"Error: {error['message']}", file=sys.stderr)
        print(f"   {error['solution']}", file=sys.stderr)
        return 1

    EmployeeReport(employees, today=today).run()
    return 0


def main() -> int:
    """Fonction principale de lancement"""
    settings.bootstrap_env()
    logger.debug(f"{settings.APPLICATION_NAME}: démarrage du rapport")
    return run()


if __name__ == "__main__":
    sys.exit(main())
