# providers/data_provider.py
"""Interface abstraite pour les sources de données employés"""

from abc import ABC, abstractmethod
from typing import List, Tuple

# (nom, date de naissance "dd/mm/yyyy", salaire "1.234,56", fonction)
EmployeeRow = Tuple[str, str, str, str]


class AbstractEmployeeProvider(ABC):
    """
    Interface pour l'accès aux données brutes des employés.

    Implémentations:
    - SeedEmployeeProvider: jeu de données fixe embarqué dans le code
    """

    @abstractmethod
    def fetch_rows(self) -> List[EmployeeRow]:
        """
        Retourne les lignes brutes, dans l'ordre de la source.

        Returns:
            Liste de tuples texte (nom, date de naissance, salaire, fonction).
            Les valeurs ne sont pas encore validées.
        """
        pass
