"""Parseurs pour les montants et dates saisis au format pt-BR.

Formats acceptés:
- montants: ``2.009,44`` (point = séparateur de milliers, virgule = décimale)
- dates: ``18/10/2000`` (jour/mois/année, 2/2/4 chiffres)
"""

from __future__ import annotations

import re
from datetime import date, datetime
from decimal import Decimal, InvalidOperation

_MONEY_CANON_RE = re.compile(r"^\d+(\.\d+)?$")
_DATE_RE = re.compile(r"^(\d{2})/(\d{2})/(\d{4})$")


class ParseError(ValueError):
    """Valeur texte impossible à convertir lors du chargement des employés."""

    def __init__(self, field: str, value, reason: str = "", context: str = ""):
        self.field = field
        self.value = value
        self.reason = reason
        self.context = context
        message = f"Invalid {field} value {value!r}"
        if context:
            message = f"{message} for {context}"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message)


def parse_money(value: str, context: str = "") -> Decimal:
    """
    Convertit un montant pt-BR en Decimal à 2 décimales.

    Args:
        value: Texte du montant (ex: "2.009,44")
        context: Contexte pour le message d'erreur (ex: "employee 'Maria'")

    Returns:
        Decimal exact (ex: Decimal("2009.44"))

    Raises:
        ParseError: si le texte est vide, négatif ou non numérique
    """
    if not isinstance(value, str):
        raise ParseError("salary", value, "expected text", context)

    raw_value = value.strip()
    if not raw_value:
        raise ParseError("salary", value, "empty value", context)

    # Retirer les séparateurs de milliers puis normaliser la décimale
    cleaned = raw_value.replace(".", "").replace(",", ".")

    if not _MONEY_CANON_RE.match(cleaned):
        raise ParseError("salary", value, "not a non-negative decimal amount", context)

    try:
        amount = Decimal(cleaned)
    except InvalidOperation as exc:
        raise ParseError("salary", value, str(exc), context) from exc

    if amount.as_tuple().exponent < -2:
        raise ParseError("salary", value, "more than 2 decimal digits", context)
    return amount


def parse_date(value: str, context: str = "") -> date:
    """Convertit une date ``dd/mm/yyyy`` en ``datetime.date``.

    Raises:
        ParseError: si le format est incorrect ou la date n'existe pas (ex: 31/02/2000)
    """
    if not isinstance(value, str):
        raise ParseError("birth_date", value, "expected text", context)

    date_str = value.strip()
    if not _DATE_RE.match(date_str):
        raise ParseError("birth_date", value, "expected dd/mm/yyyy", context)

    try:
        return datetime.strptime(date_str, "%d/%m/%Y").date()
    except ValueError as exc:
        raise ParseError("birth_date", value, str(exc), context) from exc
