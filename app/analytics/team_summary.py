"""
Aggregazione stagionale (o su intervallo date) delle partite di una squadra.

Flusso:
  1. Normalizza ogni riga (punteggi sempre numerici, colonne opzionali o None)
  2. Filtro opzionale su intervallo date inclusivo
  3. Totali gol, W/D/L, percentuale vittorie
  4. Medie null-safe per ogni colonna rate/volume: i None non entrano nel denominatore
  5. Form: esiti delle ultime partite per data DESC, ricalcolata ad ogni chiamata

Input vuoto (anche dopo il filtro) -> {} : "nessun dato" e' diverso da
"squadra con statistiche tutte a zero".
"""

import logging
import math
from collections.abc import Iterable, Mapping
from datetime import date
from typing import Any

from app.analytics.formatting import ratio, round_half_away, round_to, safe_divide
from app.analytics.normalizer import MATCH_STAT_FIELDS, normalize_match_row, to_date, to_number

logger = logging.getLogger(__name__)

DEFAULT_FORM_LENGTH = 5

DateRange = tuple[date | str | None, date | str | None] | Mapping[str, date | str | None]


def match_result(row: dict[str, Any]) -> str:
    """'W' | 'D' | 'L' dal punto di vista della squadra."""
    if row["team_score"] > row["opponent_score"]:
        return "W"
    if row["team_score"] < row["opponent_score"]:
        return "L"
    return "D"


def _in_range(row: dict[str, Any], start: date | None, end: date | None) -> bool:
    if start is None and end is None:
        return True
    match_date = row["date"]
    if match_date is None:
        return False
    if start is not None and match_date < start:
        return False
    if end is not None and match_date > end:
        return False
    return True


def _null_safe_stats(rows: list[dict[str, Any]], field: str) -> tuple[int | float, int]:
    """(somma, media arrotondata) sui soli valori non-null. (0, 0) se nessun valore."""
    values = [r[field] for r in rows if r[field] is not None]
    if not values:
        return 0, 0
    total = sum(values)
    if isinstance(total, float) and not math.isfinite(total):
        return 0, 0
    return total, round_half_away(safe_divide(total, len(values)))


def _form_length(value: Any) -> int:
    """Lunghezza form come intero >= 0; DEFAULT_FORM_LENGTH se non interpretabile."""
    length = to_number(value)
    if length is None or length < 0:
        return DEFAULT_FORM_LENGTH
    return int(length)


def _range_bounds(date_range: Any) -> tuple[date | None, date | None] | None:
    """(start, end) da {start, end} o da una coppia (start, end). None se nessun filtro."""
    if isinstance(date_range, Mapping):
        return to_date(date_range.get("start")), to_date(date_range.get("end"))
    if isinstance(date_range, (list, tuple)) and len(date_range) == 2:
        return to_date(date_range[0]), to_date(date_range[1])
    return None


def recent_form(rows: list[dict[str, Any]], length: int = DEFAULT_FORM_LENGTH) -> list[str]:
    """Esiti delle `length` partite piu' recenti, data DESC. Le righe senza data vanno in coda."""
    length = _form_length(length)
    dated = [r for r in rows if r["date"] is not None]
    undated = [r for r in rows if r["date"] is None]
    ordered = sorted(dated, key=lambda r: r["date"], reverse=True) + undated
    return [match_result(r) for r in ordered[:length]]


def aggregate_team_summary(
    rows: Iterable[Any] | None,
    date_range: DateRange | None = None,
    form_length: int = DEFAULT_FORM_LENGTH,
) -> dict[str, Any]:
    """
    TeamSummary piatto (chiavi snake_case, <campo>_avg / <campo>_total per le colonne opzionali).
    Restituisce {} se non ci sono partite da aggregare. Non solleva mai eccezioni.
    """
    if not isinstance(rows, (list, tuple)):
        rows = list(rows) if isinstance(rows, Iterable) and not isinstance(rows, (str, bytes, dict)) else []
    matches = [normalize_match_row(r) for r in rows]

    bounds = _range_bounds(date_range)
    if bounds is not None:
        start, end = bounds
        matches = [m for m in matches if _in_range(m, start, end)]

    if not matches:
        logger.debug("Nessuna partita da aggregare (range=%s)", date_range)
        return {}

    total_matches = len(matches)
    goals_for = sum(m["team_score"] for m in matches)
    goals_against = sum(m["opponent_score"] for m in matches)

    results = [match_result(m) for m in matches]
    wins = results.count("W")
    draws = results.count("D")
    losses = results.count("L")

    summary: dict[str, Any] = {
        "total_matches": total_matches,
        "goals_for": goals_for,
        "goals_against": goals_against,
        "goal_difference": goals_for - goals_against,
        "wins": wins,
        "draws": draws,
        "losses": losses,
        "win_percentage": ratio(wins, total_matches),
        "points": wins * 3 + draws,
        "clean_sheets": sum(1 for m in matches if m["opponent_score"] == 0),
        "goals_for_per_match": round_to(safe_divide(goals_for, total_matches)),
        "goals_against_per_match": round_to(safe_divide(goals_against, total_matches)),
        "form": recent_form(matches, form_length),
    }

    for field in MATCH_STAT_FIELDS:
        total, avg = _null_safe_stats(matches, field)
        summary[f"{field}_avg"] = avg
        summary[f"{field}_total"] = total

    return summary
