from app.models.match import Match
from app.models.player import Player
from app.models.player_match_stats import PlayerMatchStats
from app.models.team import Team

__all__ = [
    "Team",
    "Match",
    "Player",
    "PlayerMatchStats",
]
