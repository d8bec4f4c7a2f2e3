from datetime import date, datetime
from decimal import Decimal

from app.analytics.normalizer import (
    MATCH_STAT_FIELDS,
    PLAYER_STAT_FIELDS,
    normalize_match_row,
    normalize_player_stats,
    to_number,
)


def test_to_number_accepts_numbers_and_numeric_strings():
    assert to_number(3) == 3
    assert to_number(1.8) == 1.8
    assert to_number(Decimal("55.5")) == 55.5
    assert to_number(" 60 ") == 60
    assert isinstance(to_number("60"), int)
    assert to_number("82.5") == 82.5


def test_to_number_rejects_garbage():
    for value in (None, True, False, "", "abc", "nan", "inf", float("nan"), float("inf"), [], {}, object()):
        assert to_number(value) is None


def test_normalize_match_row_missing_fields():
    row = normalize_match_row({"team_score": 2})
    assert row["team_score"] == 2
    assert row["opponent_score"] == 0
    for field in MATCH_STAT_FIELDS:
        assert row[field] is None
    assert row["date"] is None


def test_normalize_match_row_malformed_values():
    row = normalize_match_row({
        "team_score": "3",
        "opponent_score": None,
        "possession": "n/a",
        "xg": "1.4",
        "shots": float("nan"),
        "date": "2024-09-01T15:00:00Z",
    })
    assert row["team_score"] == 3
    assert row["opponent_score"] == 0
    assert row["possession"] is None
    assert row["xg"] == 1.4
    assert row["shots"] is None
    assert row["date"] == date(2024, 9, 1)


def test_normalize_match_row_camel_case_and_datetime():
    row = normalize_match_row({"teamScore": 1, "opponentScore": 4, "passAccuracy": 77,
                               "date": datetime(2024, 1, 2, 20, 45)})
    assert (row["team_score"], row["opponent_score"], row["pass_accuracy"]) == (1, 4, 77)
    assert row["date"] == date(2024, 1, 2)


def test_normalize_match_row_non_mapping():
    row = normalize_match_row("not a row")
    assert row["team_score"] == 0 and row["opponent_score"] == 0


def test_normalize_player_stats_is_total():
    stats = normalize_player_stats({"goals": "4", "yellowCards": 2, "cleansheets": 3, "shots": None})
    assert set(PLAYER_STAT_FIELDS) <= set(stats)
    assert stats["goals"] == 4
    assert stats["yellow_cards"] == 2
    assert stats["clean_sheets"] == 3
    assert stats["shots"] == 0
    assert stats["performance_data"] == []


def test_normalize_player_stats_nested_and_series():
    stats = normalize_player_stats({
        "position": "GK",
        "stats": {"saves": 7, "performanceData": [1, None, "2", "x", 3.5]},
    })
    assert stats["saves"] == 7
    assert stats["performance_data"] == [1, 0, 2, 0, 3.5]


def test_normalize_player_stats_none():
    stats = normalize_player_stats(None)
    assert all(stats[field] == 0 for field in PLAYER_STAT_FIELDS)


def test_to_number_drops_integers_too_large_for_float():
    assert to_number(10**400) is None
    assert to_number("1" + "0" * 400) is None
    assert to_number(Decimal("1e400")) is None
    assert to_number(10**300) == 10**300
