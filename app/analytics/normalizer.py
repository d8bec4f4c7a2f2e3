"""
Normalizzazione delle righe grezze provenienti dal datastore.

Ogni campo noto diventa un numero oppure None (mai stringhe, mai NaN).
Nessuna eccezione qualunque sia la forma dell'input: cio' che non e'
riconoscibile diventa None. Tutti i calcoli a valle lavorano su record totali.
"""

import logging
import math
from datetime import date, datetime
from decimal import Decimal, InvalidOperation
from typing import Any, Mapping

logger = logging.getLogger(__name__)

# ---------------------------------------------------------------------------
# Campi
# ---------------------------------------------------------------------------

SCORE_FIELDS: tuple[str, ...] = ("team_score", "opponent_score")

# Colonne rate/volume di una partita: opzionali, None = "non registrato".
MATCH_STAT_FIELDS: tuple[str, ...] = (
    "possession",
    "pass_accuracy",
    "shots",
    "shots_on_target",
    "corners",
    "fouls",
    "offsides",
    "xg",
    "passes",
    "tackles",
    "saves",
)

# campo canonico -> chiavi accettate in input (snake_case dal DB, camelCase dal frontend)
PLAYER_STAT_ALIASES: dict[str, tuple[str, ...]] = {
    "goals": ("goals",),
    "assists": ("assists",),
    "yellow_cards": ("yellow_cards", "yellowCards"),
    "red_cards": ("red_cards", "redCards"),
    "minutes_played": ("minutes_played", "minutesPlayed"),
    "saves": ("saves",),
    "save_percentage": ("save_percentage", "savePercentage"),
    "clean_sheets": ("clean_sheets", "cleansheets", "cleanSheets"),
    "tackles": ("tackles",),
    "interceptions": ("interceptions",),
    "clearances": ("clearances",),
    "pass_completion": ("pass_completion", "passCompletion"),
    "shots": ("shots",),
    "shots_on_target": ("shots_on_target", "shotsOnTarget"),
    "chances_created": ("chances_created", "chancesCreated"),
    "dribbles_attempted": ("dribbles_attempted", "dribblesAttempted"),
    "dribbles_successful": ("dribbles_successful", "dribblesSuccessful"),
    "offsides": ("offsides",),
}

PLAYER_STAT_FIELDS: tuple[str, ...] = tuple(PLAYER_STAT_ALIASES)

# Percentuali gia' salvate come tali: mai ricalcolate.
STORED_PERCENTAGE_FIELDS = frozenset({"save_percentage", "pass_completion"})

_MATCH_ALIASES: dict[str, tuple[str, ...]] = {
    "team_score": ("team_score", "teamScore"),
    "opponent_score": ("opponent_score", "opponentScore"),
    "pass_accuracy": ("pass_accuracy", "passAccuracy"),
    "shots_on_target": ("shots_on_target", "shotsOnTarget"),
}


# ---------------------------------------------------------------------------
# Coercizione valori
# ---------------------------------------------------------------------------

def to_number(value: Any) -> int | float | None:
    """
    Converte un valore grezzo in int/float.
    None per bool, NaN, infiniti, stringhe non numeriche e tipi sconosciuti.
    """
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, int):
        # solo interi rappresentabili come float
        try:
            float(value)
        except OverflowError:
            return None
        return value
    if isinstance(value, float):
        return value if math.isfinite(value) else None
    if isinstance(value, Decimal):
        return to_number(float(value)) if value.is_finite() else None
    if isinstance(value, str):
        text = value.strip()
        if not text:
            return None
        try:
            parsed = Decimal(text)
        except InvalidOperation:
            return None
        if not parsed.is_finite():
            return None
        if parsed == parsed.to_integral_value() and "." not in text and "e" not in text.lower():
            return to_number(int(parsed))
        return to_number(float(parsed))
    return None


def to_date(value: Any) -> date | None:
    """date/datetime/ISO string -> date. None se non interpretabile."""
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if isinstance(value, str) and value.strip():
        text = value.strip().replace("Z", "+00:00")
        try:
            return datetime.fromisoformat(text).date()
        except ValueError:
            pass
        try:
            return date.fromisoformat(text[:10])
        except ValueError:
            return None
    return None


def _pick(raw: Mapping[str, Any], keys: tuple[str, ...]) -> Any:
    for key in keys:
        if key in raw and raw[key] is not None:
            return raw[key]
    return None


def _as_mapping(raw: Any) -> Mapping[str, Any]:
    if isinstance(raw, Mapping):
        return raw
    if raw is not None:
        logger.debug("Riga non mappabile ignorata: %r", type(raw).__name__)
    return {}


# ---------------------------------------------------------------------------
# Record canonici
# ---------------------------------------------------------------------------

def normalize_match_row(raw: Any) -> dict[str, Any]:
    """
    Riga partita canonica: punteggi sempre numerici (0 se mancanti),
    colonne opzionali numero o None, date come datetime.date o None.
    """
    row = _as_mapping(raw)
    result: dict[str, Any] = {}

    for field in SCORE_FIELDS:
        score = to_number(_pick(row, _MATCH_ALIASES[field]))
        result[field] = score if score is not None else 0

    for field in MATCH_STAT_FIELDS:
        result[field] = to_number(_pick(row, _MATCH_ALIASES.get(field, (field,))))

    result["date"] = to_date(row.get("date"))
    return result


def normalize_player_stats(raw: Any) -> dict[str, Any]:
    """
    Record statistiche giocatore totale: ogni contatore e' un numero (0 se assente).
    performance_data resta ordinato; le voci non numeriche diventano 0.
    """
    stats = _as_mapping(raw)
    # Giocatore completo ({position, stats: {...}}) o record statistiche piatto
    if isinstance(stats.get("stats"), Mapping):
        stats = stats["stats"]
    result: dict[str, Any] = {}
    for field, keys in PLAYER_STAT_ALIASES.items():
        value = to_number(_pick(stats, keys))
        result[field] = value if value is not None else 0

    series = _pick(stats, ("performance_data", "performanceData"))
    if isinstance(series, (list, tuple)):
        result["performance_data"] = [
            value if value is not None else 0
            for value in (to_number(item) for item in series)
        ]
    else:
        result["performance_data"] = []
    return result
