from typing import List, Optional

from .data_provider import AbstractEmployeeProvider, EmployeeRow

SEED_ROWS: List[EmployeeRow] = [
    ("Maria", "18/10/2000", "2.009,44", "Operador"),
    ("Joao", "12/05/1990", "2.284,38", "Operador"),
    ("Caio", "02/05/1961", "9.836,14", "Coordenador"),
    ("Miguel", "14/10/1988", "1.910,85", "Diretor"),
    ("Alice", "05/01/1995", "2.233,88", "Recepcionista"),
    ("Heitor", "19/11/1999", "1.709,45", "Operador"),
    ("Helena", "02/12/1996", "3.245,68", "Gerente"),
    ("Laura", "08/07/1994", "2.157,15", "Contadora"),
]


class SeedEmployeeProvider(AbstractEmployeeProvider):
    """Source fixe: les 8 employés du rapport, dans l'ordre du tableau."""

    def __init__(self, rows: Optional[List[EmployeeRow]] = None):
        self._rows = list(SEED_ROWS if rows is None else rows)

    def fetch_rows(self) -> List[EmployeeRow]:
        return list(self._rows)
