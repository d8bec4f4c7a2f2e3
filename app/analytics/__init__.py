from app.analytics.formatting import format_percentage, ratio, round_half_away
from app.analytics.normalizer import normalize_match_row, normalize_player_stats, to_number
from app.analytics.player_stats import derive_key_stats, derive_player_stats, derive_position_stats
from app.analytics.positions import PositionGroup, classify_position
from app.analytics.team_summary import aggregate_team_summary

__all__ = [
    "format_percentage",
    "ratio",
    "round_half_away",
    "to_number",
    "normalize_match_row",
    "normalize_player_stats",
    "PositionGroup",
    "classify_position",
    "aggregate_team_summary",
    "derive_key_stats",
    "derive_position_stats",
    "derive_player_stats",
]
