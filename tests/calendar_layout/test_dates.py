"""
캘린더 날짜 계산 테스트
"""

from datetime import date

from layout.dates import (
    add_days, diff_days, get_day_range, get_month_grid, get_month_range, get_week_days,
    get_week_range, week_start, year_month_key, year_week_key,
)


def test_week_starts_on_monday():
    assert week_start(date(2024, 2, 18)) == date(2024, 2, 12)
    assert week_start(date(2024, 2, 12)) == date(2024, 2, 12)
    assert get_week_range(date(2024, 2, 14)) == (date(2024, 2, 12), date(2024, 2, 18))
    assert len(get_week_days(date(2024, 2, 14))) == 7
    assert get_day_range(date(2024, 2, 14)) == (date(2024, 2, 14), date(2024, 2, 14))


def test_month_grid_is_six_weeks():
    grid = get_month_grid(2024, 2)

    assert len(grid) == 6
    assert all(len(week) == 7 for week in grid)
    assert grid[0][0] == date(2024, 1, 29)
    assert get_month_range(2024, 2) == (date(2024, 1, 29), date(2024, 3, 10))


def test_diff_and_add_days():
    assert diff_days(date(2024, 2, 28), date(2024, 3, 1)) == 2
    assert add_days(date(2024, 12, 31), 1) == date(2025, 1, 1)


def test_period_keys():
    assert year_month_key(date(2024, 5, 9)) == "2024-05"
    assert year_week_key(date(2024, 1, 1)) == "2024-W01"
    assert year_week_key(date(2021, 1, 3)) == "2020-W53"
