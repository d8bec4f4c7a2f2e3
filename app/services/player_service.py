"""
Servizio statistiche giocatore.
Somma le righe partita in un record cumulativo, classifica la posizione
e deriva key stats / general stats / position stats dal motore analytics.
"""

import logging
from typing import Any

from sqlalchemy.orm import Session

from app.analytics.formatting import round_half_away, safe_divide
from app.analytics.normalizer import PLAYER_STAT_FIELDS, STORED_PERCENTAGE_FIELDS, to_number
from app.analytics.player_stats import CHART_STATS, derive_key_stats, derive_player_stats
from app.analytics.positions import classify_position
from app.models import Match, Player, PlayerMatchStats, Team
from app.schemas.players import PlayerStatsResponse
from app.schemas.teams import RosterPlayerRow, TeamInfo, TeamRosterResponse

logger = logging.getLogger(__name__)

# ---------------------------------------------------------------------------
# Aggregazione righe partita -> record cumulativo
# ---------------------------------------------------------------------------


def _stats_row_to_dict(row: PlayerMatchStats) -> dict[str, Any]:
    return {field: getattr(row, field) for field in PLAYER_STAT_FIELDS}


def build_cumulative_record(rows: list[dict[str, Any]], chart_key: str | None = None) -> dict[str, Any]:
    """
    Record cumulativo: contatori sommati sui valori presenti,
    percentuali salvate mediate (mai ricalcolate dai contatori).
    performance_data = serie per partita del campo chart_key, nell'ordine delle righe.
    """
    record: dict[str, Any] = {}
    for field in PLAYER_STAT_FIELDS:
        values = [v for v in (to_number(r.get(field)) for r in rows) if v is not None]
        if field in STORED_PERCENTAGE_FIELDS:
            record[field] = round_half_away(safe_divide(sum(values), len(values))) if values else 0
        else:
            record[field] = sum(values)

    if chart_key:
        record["performance_data"] = [to_number(r.get(chart_key)) or 0 for r in rows]
    return record


def _load_match_rows(player_id: int, db: Session) -> list[dict[str, Any]]:
    """Righe statistiche del giocatore in ordine cronologico (partite senza data in coda)."""
    rows = (
        db.query(PlayerMatchStats)
        .join(Match, PlayerMatchStats.match_id == Match.id)
        .filter(PlayerMatchStats.player_id == player_id)
        .order_by(Match.date.is_(None), Match.date.asc(), Match.id.asc())
        .all()
    )
    return [_stats_row_to_dict(r) for r in rows]


# ---------------------------------------------------------------------------
# API pubblica
# ---------------------------------------------------------------------------


def get_player_stats(player_id: int, db: Session) -> PlayerStatsResponse | None:
    """Statistiche derivate complete per un giocatore. None se il giocatore non esiste."""
    player = db.get(Player, player_id)
    if player is None:
        return None

    group = classify_position(player.position)
    rows = _load_match_rows(player_id, db)
    record = build_cumulative_record(rows, chart_key=CHART_STATS[group]["data_key"])
    derived = derive_player_stats(record, group)

    logger.info(
        "Statistiche player_id=%s position=%r group=%s su %d partite",
        player_id, player.position, group.value, len(rows),
    )

    return PlayerStatsResponse(
        player_id=player.id,
        name=player.name or "",
        team_id=player.team_id,
        position=player.position or "",
        group=group.value,
        matches_played=len(rows),
        key_stats=derived["key_stats"],
        chart_stat=derived["chart_stat"],
        general_stats=derived["general_stats"],
        position_stats=derived["position_stats"],
        performance_data=derived["performance_data"],
    )


def get_team_roster(team_id: int, db: Session) -> TeamRosterResponse | None:
    """Rosa con gruppo tattico e key stats per ogni giocatore. None se la squadra non esiste."""
    team = db.get(Team, team_id)
    if team is None:
        return None

    players = (
        db.query(Player)
        .filter(Player.team_id == team_id)
        .order_by(Player.name.asc())
        .all()
    )

    # Una sola query per tutte le righe della rosa, raggruppate in memoria (niente N+1).
    stats_rows = (
        db.query(PlayerMatchStats)
        .join(Player, PlayerMatchStats.player_id == Player.id)
        .filter(Player.team_id == team_id)
        .all()
    )
    by_player: dict[int, list[dict[str, Any]]] = {}
    for row in stats_rows:
        by_player.setdefault(row.player_id, []).append(_stats_row_to_dict(row))

    roster = []
    for player in players:
        group = classify_position(player.position)
        record = build_cumulative_record(by_player.get(player.id, []))
        key = derive_key_stats(record, group)
        roster.append(
            RosterPlayerRow(
                player_id=player.id,
                name=player.name or "",
                position=player.position or "",
                jersey_num=player.jersey_num or "",
                group=group.value,
                key_stats=key["key_stats"],
                chart_stat=key["chart_stat"],
            )
        )

    return TeamRosterResponse(team=TeamInfo(team_id=team.id, team_name=team.name or ""), players=roster)
