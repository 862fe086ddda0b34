from datetime import date
from decimal import ROUND_HALF_UP, Decimal

CENTS = Decimal("0.01")

# "1,234.56" -> "1.234,56"
_PT_BR_SEPARATORS = str.maketrans({",": ".", ".": ","})


def quantize_money(value) -> Decimal:
    return Decimal(value).quantize(CENTS, rounding=ROUND_HALF_UP)


def format_money(value) -> str:
    """Formate un montant avec '.' pour les milliers et ',' pour les décimales."""
    formatted = f"{quantize_money(value):,.2f}"
    return formatted.translate(_PT_BR_SEPARATORS)


def format_date(value: date) -> str:
    # dd/mm/yyyy, année toujours sur 4 chiffres (strftime ne complète pas < 1000)
    return f"{value.day:02d}/{value.month:02d}/{value.year:04d}"
