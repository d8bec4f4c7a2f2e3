"""
Statistiche derivate per giocatore, per gruppo tattico.

Output:
  - key_stats: sempre 3 voci, dipendono dal gruppo
  - chart_stat: quale campo grezzo alimenta il grafico trend
  - general_stats: sempre 5 voci, uguali per tutti i gruppi
  - position_stats: dipendono dal gruppo, vuote per UNKNOWN

Dispatch puro su insieme chiuso (4 gruppi + default). Le percentuali gia'
salvate (save_percentage, pass_completion) vengono solo formattate, mai ricalcolate.
"""

from typing import Any, Callable

from app.analytics.formatting import format_percentage, ratio
from app.analytics.normalizer import normalize_player_stats
from app.analytics.positions import PositionGroup, classify_position

Stat = dict[str, Any]
StatBuilder = Callable[[dict[str, Any]], list[Stat]]


def _stat(label: str, value: Any) -> Stat:
    return {"label": label, "value": value}


def _shot_accuracy(s: dict[str, Any]) -> str:
    return format_percentage(ratio(s["shots_on_target"], s["shots"]))


def _dribble_success(s: dict[str, Any]) -> str:
    return format_percentage(ratio(s["dribbles_successful"], s["dribbles_attempted"]))


# ---------------------------------------------------------------------------
# Key stats + chart
# ---------------------------------------------------------------------------

KEY_STATS: dict[PositionGroup, StatBuilder] = {
    PositionGroup.GOALKEEPER: lambda s: [
        _stat("Saves", s["saves"]),
        _stat("Save %", format_percentage(s["save_percentage"])),
        _stat("Clean Sheets", s["clean_sheets"]),
    ],
    PositionGroup.DEFENDER: lambda s: [
        _stat("Tackles", s["tackles"]),
        _stat("Interceptions", s["interceptions"]),
        _stat("Pass %", format_percentage(s["pass_completion"])),
    ],
    PositionGroup.MIDFIELDER: lambda s: [
        _stat("Goals", s["goals"]),
        _stat("Assists", s["assists"]),
        _stat("Pass %", format_percentage(s["pass_completion"])),
    ],
    PositionGroup.STRIKER: lambda s: [
        _stat("Goals", s["goals"]),
        _stat("Shots", s["shots"]),
        _stat("Shot Accuracy", _shot_accuracy(s)),
    ],
    PositionGroup.UNKNOWN: lambda s: [
        _stat("Goals", s["goals"]),
        _stat("Assists", s["assists"]),
        _stat("Minutes", s["minutes_played"]),
    ],
}

CHART_STATS: dict[PositionGroup, dict[str, str]] = {
    PositionGroup.GOALKEEPER: {"label": "Saves", "data_key": "saves"},
    PositionGroup.DEFENDER: {"label": "Tackles", "data_key": "tackles"},
    PositionGroup.MIDFIELDER: {"label": "Assists", "data_key": "assists"},
    PositionGroup.STRIKER: {"label": "Goals", "data_key": "goals"},
    PositionGroup.UNKNOWN: {"label": "Goals", "data_key": "goals"},
}

# ---------------------------------------------------------------------------
# General + position stats
# ---------------------------------------------------------------------------

POSITION_STATS: dict[PositionGroup, StatBuilder] = {
    PositionGroup.GOALKEEPER: lambda s: [
        _stat("Saves", s["saves"]),
        _stat("Clean Sheets", s["clean_sheets"]),
        _stat("Save Percentage", format_percentage(s["save_percentage"])),
        _stat("Clearances", s["clearances"]),
    ],
    PositionGroup.DEFENDER: lambda s: [
        _stat("Tackles", s["tackles"]),
        _stat("Interceptions", s["interceptions"]),
        _stat("Clearances", s["clearances"]),
        _stat("Pass Completion", format_percentage(s["pass_completion"])),
    ],
    PositionGroup.MIDFIELDER: lambda s: [
        _stat("Assists", s["assists"]),
        _stat("Pass Completion", format_percentage(s["pass_completion"])),
        _stat("Dribbles Attempted", s["dribbles_attempted"]),
        _stat("Dribbles Successful", s["dribbles_successful"]),
        _stat("Dribble Success Rate", _dribble_success(s)),
        _stat("Tackles", s["tackles"]),
        _stat("Offsides", s["offsides"]),
    ],
    PositionGroup.STRIKER: lambda s: [
        _stat("Shots", s["shots"]),
        _stat("Shots On Target", s["shots_on_target"]),
        _stat("Shot Accuracy", _shot_accuracy(s)),
        _stat("Dribbles Attempted", s["dribbles_attempted"]),
        _stat("Dribbles Successful", s["dribbles_successful"]),
        _stat("Dribble Success Rate", _dribble_success(s)),
        _stat("Offsides", s["offsides"]),
    ],
    PositionGroup.UNKNOWN: lambda s: [],
}


def general_stats(stats: dict[str, Any]) -> list[Stat]:
    return [
        _stat("Goals", stats["goals"]),
        _stat("Assists", stats["assists"]),
        _stat("Yellow Cards", stats["yellow_cards"]),
        _stat("Red Cards", stats["red_cards"]),
        _stat("Minutes Played", stats["minutes_played"]),
    ]


def _resolve_group(group: Any) -> PositionGroup:
    """Accetta PositionGroup, il suo nome o un codice posizione; altrimenti UNKNOWN."""
    if isinstance(group, PositionGroup):
        return group
    if isinstance(group, str) and group in PositionGroup.__members__:
        return PositionGroup[group]
    return classify_position(group)


# ---------------------------------------------------------------------------
# API pubblica
# ---------------------------------------------------------------------------

def derive_key_stats(player: Any, group: Any) -> dict[str, Any]:
    """{key_stats: [3 Stat], chart_stat: {label, data_key}}"""
    stats = normalize_player_stats(player)
    resolved = _resolve_group(group)
    return {
        "key_stats": KEY_STATS[resolved](stats),
        "chart_stat": dict(CHART_STATS[resolved]),
    }


def derive_position_stats(player: Any, group: Any) -> dict[str, Any]:
    """{general_stats: [5 Stat], position_stats: [Stat]}"""
    stats = normalize_player_stats(player)
    resolved = _resolve_group(group)
    return {
        "general_stats": general_stats(stats),
        "position_stats": POSITION_STATS[resolved](stats),
    }


def derive_player_stats(player: Any, group: Any) -> dict[str, Any]:
    """Key stats + general/position stats + serie per il grafico, in un solo record."""
    resolved = _resolve_group(group)
    return {
        "group": resolved,
        **derive_key_stats(player, resolved),
        **derive_position_stats(player, resolved),
        "performance_data": normalize_player_stats(player)["performance_data"],
    }
