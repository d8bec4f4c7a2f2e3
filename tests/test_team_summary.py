from datetime import date

from app.analytics.normalizer import MATCH_STAT_FIELDS
from app.analytics.team_summary import aggregate_team_summary


def test_empty_input_returns_empty_dict():
    assert aggregate_team_summary([]) == {}
    assert aggregate_team_summary(None) == {}


def test_averages_skip_null_values():
    rows = [
        {"team_score": 2, "opponent_score": 1, "possession": 60, "pass_accuracy": 85},
        {"team_score": 1, "opponent_score": 0, "possession": None, "pass_accuracy": None},
        {"team_score": 0, "opponent_score": 2, "possession": 50, "pass_accuracy": 80},
    ]
    summary = aggregate_team_summary(rows)
    assert summary["goals_for"] == 3
    assert summary["goals_against"] == 3
    assert summary["possession_avg"] == 55
    assert summary["pass_accuracy_avg"] == 83
    assert summary["possession_total"] == 110


def test_averages_round_half_up():
    rows = [
        {"team_score": 2, "opponent_score": 1, "possession": 60, "pass_accuracy": 85, "xg": 1.8},
        {"team_score": 1, "opponent_score": 0, "possession": 55, "pass_accuracy": 82, "xg": 1.2},
    ]
    summary = aggregate_team_summary(rows)
    assert summary["possession_avg"] == 58
    assert summary["pass_accuracy_avg"] == 84
    assert summary["xg_avg"] == 2


def test_all_optional_fields_null_give_zero_averages():
    rows = [{"team_score": 1, "opponent_score": 1}, {"team_score": 0, "opponent_score": 3}]
    summary = aggregate_team_summary(rows)
    for field in MATCH_STAT_FIELDS:
        assert summary[f"{field}_avg"] == 0
        assert summary[f"{field}_total"] == 0


def test_totals_are_consistent():
    rows = [
        {"team_score": 3, "opponent_score": 0},
        {"team_score": 1, "opponent_score": 1},
        {"team_score": 0, "opponent_score": 2},
        {"team_score": 2, "opponent_score": 1},
    ]
    summary = aggregate_team_summary(rows)
    assert summary["goal_difference"] == summary["goals_for"] - summary["goals_against"] == 2
    assert summary["wins"] + summary["draws"] + summary["losses"] == summary["total_matches"] == 4
    assert (summary["wins"], summary["draws"], summary["losses"]) == (2, 1, 1)
    assert summary["win_percentage"] == 50
    assert summary["points"] == 7
    assert summary["clean_sheets"] == 1
    assert summary["goals_for_per_match"] == 1.5


def test_malformed_rows_do_not_raise():
    rows = [{"team_score": "x", "opponent_score": None, "shots": "many"}, "garbage", None]
    summary = aggregate_team_summary(rows)
    assert summary["total_matches"] == 3
    assert summary["draws"] == 3
    assert summary["shots_avg"] == 0


def test_form_is_most_recent_first():
    rows = [
        {"date": "2024-08-01", "team_score": 1, "opponent_score": 0},
        {"date": "2024-10-01", "team_score": 0, "opponent_score": 1},
        {"date": "2024-09-01", "team_score": 2, "opponent_score": 2},
        {"date": None, "team_score": 5, "opponent_score": 0},
        {"date": "2024-07-01", "team_score": 0, "opponent_score": 3},
        {"date": "2024-06-01", "team_score": 4, "opponent_score": 0},
    ]
    summary = aggregate_team_summary(rows)
    assert summary["form"] == ["L", "D", "W", "L", "W"]
    assert aggregate_team_summary(rows, form_length=2)["form"] == ["L", "D"]


def test_date_range_is_inclusive():
    rows = [
        {"date": date(2024, 8, 1), "team_score": 1, "opponent_score": 0},
        {"date": date(2024, 8, 15), "team_score": 2, "opponent_score": 2},
        {"date": date(2024, 9, 1), "team_score": 0, "opponent_score": 1},
        {"date": None, "team_score": 9, "opponent_score": 0},
    ]
    summary = aggregate_team_summary(rows, date_range=(date(2024, 8, 1), date(2024, 8, 15)))
    assert summary["total_matches"] == 2
    assert summary["goals_for"] == 3

    open_end = aggregate_team_summary(rows, date_range=("2024-08-15", None))
    assert open_end["total_matches"] == 2


def test_date_range_filtering_to_nothing_returns_empty_dict():
    rows = [{"date": "2024-08-01", "team_score": 1, "opponent_score": 0}]
    assert aggregate_team_summary(rows, date_range=("2025-01-01", "2025-12-31")) == {}


def test_no_range_keeps_undated_rows():
    rows = [{"team_score": 1, "opponent_score": 0}]
    assert aggregate_team_summary(rows, date_range=(None, None))["total_matches"] == 1


def test_date_range_as_start_end_mapping():
    rows = [
        {"date": "2024-08-01", "team_score": 1, "opponent_score": 0},
        {"date": "2024-09-01", "team_score": 0, "opponent_score": 1},
    ]
    assert aggregate_team_summary(rows, date_range={"start": "2025-01-01", "end": "2025-12-31"}) == {}
    summary = aggregate_team_summary(rows, date_range={"start": date(2024, 8, 15)})
    assert summary["total_matches"] == 1
    assert summary["losses"] == 1


def test_huge_values_do_not_raise():
    summary = aggregate_team_summary([{"team_score": "1" + "0" * 400, "opponent_score": 0}])
    assert summary["goals_for"] == 0
    assert summary["draws"] == 1

    summary = aggregate_team_summary([{"team_score": 1, "opponent_score": 0, "possession": 10**400}])
    assert summary["possession_avg"] == 0
    assert summary["possession_total"] == 0


def test_sums_beyond_float_range_do_not_raise():
    rows = [{"team_score": 1, "opponent_score": 0, "passes": 10**308, "xg": 1e308} for _ in range(2)]
    summary = aggregate_team_summary(rows)
    assert summary["passes_total"] == 2 * 10**308
    assert summary["passes_avg"] == int(1e308)
    assert summary["xg_total"] == 0
    assert summary["xg_avg"] == 0


def test_form_length_is_coerced():
    rows = [{"date": f"2024-08-0{d}", "team_score": 1, "opponent_score": 0} for d in range(1, 6)]
    assert aggregate_team_summary(rows, form_length="3")["form"] == ["W", "W", "W"]
    assert len(aggregate_team_summary(rows, form_length="abc")["form"]) == 5
    assert len(aggregate_team_summary(rows, form_length=None)["form"]) == 5
    assert aggregate_team_summary(rows, form_length=0)["form"] == []


def test_per_match_goals_round_ties_away_from_zero():
    rows = [{"team_score": 1, "opponent_score": 0}] + [{"team_score": 0, "opponent_score": 0}] * 7
    summary = aggregate_team_summary(rows)
    assert summary["goals_for_per_match"] == 0.13  # 0.125
