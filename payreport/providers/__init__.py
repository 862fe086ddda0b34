# providers/__init__.py
"""
Module providers pour l'accès aux données des employés.

Contient l'interface abstraite et la source fixe (seed).
"""

from .data_provider import AbstractEmployeeProvider, EmployeeRow
from .seed_provider import SEED_ROWS, SeedEmployeeProvider

__all__ = [
    "AbstractEmployeeProvider",
    "EmployeeRow",
    "SEED_ROWS",
    "SeedEmployeeProvider",
]
