"""Pydantic schemas per API Players."""

from pydantic import BaseModel


class StatItem(BaseModel):
    """Coppia label/valore da mostrare: conteggio grezzo o percentuale gia' formattata."""
    label: str
    value: int | float | str


class ChartStat(BaseModel):
    label: str
    data_key: str


class PlayerStatsResponse(BaseModel):
    player_id: int
    name: str
    team_id: int
    position: str = ""
    group: str
    matches_played: int = 0
    key_stats: list[StatItem]
    chart_stat: ChartStat
    general_stats: list[StatItem]
    position_stats: list[StatItem]
    performance_data: list[int | float] = []
