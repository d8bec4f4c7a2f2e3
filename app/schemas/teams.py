"""Pydantic schemas per API Teams."""

from pydantic import BaseModel

from app.schemas.players import ChartStat, StatItem


class TeamInfo(BaseModel):
    team_id: int
    team_name: str


# --- Roster ---


class RosterPlayerRow(BaseModel):
    """Riga rosa: giocatore con gruppo tattico e le 3 statistiche chiave."""
    player_id: int
    name: str
    position: str = ""
    jersey_num: str = ""
    group: str
    key_stats: list[StatItem]
    chart_stat: ChartStat


class TeamRosterResponse(BaseModel):
    team: TeamInfo
    players: list[RosterPlayerRow]
