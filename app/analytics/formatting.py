"""
Helper condivisi di arrotondamento e formattazione percentuali.

Usati sia dall'aggregazione squadra sia dalle statistiche giocatore,
cosi' la stessa regola di arrotondamento vale ovunque.
"""

import math
from decimal import ROUND_HALF_UP, Decimal

Number = int | float


def _finite_float(value: Number | None) -> float | None:
    """float finito oppure None (interi troppo grandi, NaN, infiniti)."""
    if value is None:
        return None
    try:
        result = float(value)
    except (OverflowError, TypeError, ValueError):
        return None
    return result if math.isfinite(result) else None


def safe_divide(numerator: Number | None, denominator: Number | None) -> float:
    """numerator / denominator; 0.0 se denominatore nullo o quoziente non rappresentabile."""
    if numerator is None or not denominator:
        return 0.0
    try:
        quotient = numerator / denominator
    except (OverflowError, ZeroDivisionError, TypeError):
        return 0.0
    return quotient if math.isfinite(quotient) else 0.0


def round_half_away(value: Number | None) -> int:
    """Arrotonda all'intero piu' vicino; i .5 si allontanano dallo zero."""
    number = _finite_float(value)
    if number is None:
        return 0
    rounded = math.floor(abs(number) + 0.5)
    return int(-rounded if number < 0 else rounded)


def round_to(value: Number | None, digits: int = 2) -> float:
    """Come round_half_away ma a `digits` decimali (1.005 -> 1.01, 0.125 -> 0.13)."""
    number = _finite_float(value)
    if number is None:
        return 0.0
    quantum = Decimal(1).scaleb(-digits)
    return float(Decimal(repr(number)).quantize(quantum, rounding=ROUND_HALF_UP))


def ratio(numerator: Number | None, denominator: Number | None) -> int:
    """Percentuale intera numerator/denominator. 0 se denominatore nullo o <= 0."""
    if numerator is None or denominator is None or denominator <= 0:
        return 0
    return round_half_away(safe_divide(numerator, denominator) * 100)


def format_percentage(value: Number | None) -> str:
    """'<value>%'. Nessun clamp: 0 e valori fuori 0-100 passano invariati."""
    if value is None:
        value = 0
    if isinstance(value, float) and value.is_integer():
        value = int(value)
    return f"{value}%"
