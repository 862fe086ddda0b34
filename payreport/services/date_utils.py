#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Module utilitaire de gestion des dates de naissance

Fonctions:
- age_in_years() : Âge en années complètes à une date donnée
- born_in_months() : Vérifie le mois de naissance
"""

from datetime import date
from typing import Iterable, Optional


def age_in_years(birth_date: date, today: Optional[date] = None) -> int:
    """
    Calcule l'âge en années complètes.

    L'âge n'augmente qu'une fois l'anniversaire (mois et jour) atteint
    dans l'année courante. Né un 29/02: l'anniversaire tombe le 01/03
    les années non bissextiles.

    Args:
        birth_date: Date de naissance
        today: Date de référence (défaut: date du jour)

    Returns:
        Nombre d'années écoulées
    """
    if today is None:
        today = date.today()
    before_anniversary = (today.month, today.day) < (birth_date.month, birth_date.day)
    return today.year - birth_date.year - int(before_anniversary)


def born_in_months(birth_date: date, months: Iterable[int]) -> bool:
    return birth_date.month in set(months)
