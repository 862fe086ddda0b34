#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Module de traduction des erreurs techniques en messages utilisateur simples
"""
from typing import Optional, Tuple

from payreport.utils.parsers import ParseError

_FIELD_LABELS = {
    "salary": "salary",
    "birth_date": "birth date",
}


def translate_error(
    error: Exception, error_message: Optional[str] = None
) -> Tuple[str, str]:
    """
    Traduit une erreur technique en message utilisateur simple.

    Args:
        error: Exception levée
        error_message: Message d'erreur (optionnel, sinon utilise str(error))

    Returns:
        Tuple (message_utilisateur, solution)
    """
    if error_message is None:
        error_message = str(error)

    # ========== ERREURS DE SAISIE ==========

    if isinstance(error, ParseError):
        label = _FIELD_LABELS.get(error.field, error.field)
        where = f" ({error.context})" if error.context else ""

        if error.field == "birth_date":
            solution = "Use the dd/mm/yyyy format with a real calendar date, e.g. 18/10/2000."
        elif error.field == "salary":
            solution = "Use '.' for thousands and ',' for decimals, e.g. 2.009,44."
        else:
            solution = "Fix the value in the employee data source."

        return (
            f"Malformed {label} field: {error.value!r}{where}.",
            solution,
        )

    # Message par défaut
    return (error_message, "Check the employee data source and run the report again.")


def format_error_for_user(
    error: Exception, error_message: Optional[str] = None
) -> dict:
    """
    Formate une erreur pour l'affichage à l'utilisateur.

    Returns:
        dict avec 'message', 'solution', 'type' et 'technical'
    """
    user_msg, solution = translate_error(error, error_message)

    return {
        "message": user_msg,
        "solution": solution,
        "type": "error",
        "technical": str(error),
    }
