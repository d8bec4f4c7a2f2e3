import math

from app.analytics.formatting import format_percentage, ratio, round_half_away, round_to, safe_divide


def test_round_half_away_ties():
    assert round_half_away(82.5) == 83
    assert round_half_away(57.5) == 58
    assert round_half_away(0.5) == 1
    assert round_half_away(-2.5) == -3
    assert round_half_away(2.4) == 2


def test_round_half_away_non_finite():
    assert round_half_away(math.nan) == 0
    assert round_half_away(math.inf) == 0


def test_ratio_zero_denominator():
    for numerator in (0, 1, 10, 999):
        assert ratio(numerator, 0) == 0
    assert ratio(5, None) == 0


def test_ratio_values():
    assert ratio(10, 10) == 100
    assert ratio(5, 7) == 71
    assert ratio(1, 8) == 13  # 12.5


def test_format_percentage_no_clamp():
    assert format_percentage(0) == "0%"
    assert format_percentage(85) == "85%"
    assert format_percentage(140) == "140%"
    assert format_percentage(-5) == "-5%"
    assert format_percentage(80.0) == "80%"
    assert format_percentage(82.5) == "82.5%"


def test_huge_integers_do_not_overflow():
    assert ratio(10**400, 1) == 0
    assert ratio(1, 10**400) == 0
    assert round_half_away(10**400) == 0
    assert safe_divide(10**400, 3) == 0.0
    assert safe_divide(7, 0) == 0.0


def test_round_to_ties_away_from_zero():
    assert round_to(0.125) == 0.13
    assert round_to(2.675) == 2.68
    assert round_to(-0.125) == -0.13
    assert round_to(1 / 3) == 0.33
    assert round_to(float("nan")) == 0.0
