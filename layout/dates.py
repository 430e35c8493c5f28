"""
캘린더 날짜 계산 (월요일 시작 주)

모든 함수는 datetime.date를 받고 돌려줍니다.
"""

from datetime import date, timedelta
from typing import List, Tuple


def diff_days(a: date, b: date) -> int:
    """b - a (일 단위)"""
    return (b - a).days


def add_days(d: date, days: int) -> date:
    return d + timedelta(days=days)


def week_start(d: date) -> date:
    """d가 속한 주의 월요일"""
    return d - timedelta(days=d.weekday())


def get_week_days(d: date) -> List[date]:
    """d가 속한 주의 7일 (월~일)"""
    monday = week_start(d)
    return [monday + timedelta(days=i) for i in range(7)]


def get_month_grid(year: int, month: int) -> List[List[date]]:
    """해당 월을 포함하는 6x7 날짜 그리드 (월요일 시작)"""
    first = date(year, month, 1)
    start = week_start(first)
    return [
        [start + timedelta(days=week * 7 + day) for day in range(7)]
        for week in range(6)
    ]


def get_month_range(year: int, month: int) -> Tuple[date, date]:
    grid = get_month_grid(year, month)
    return grid[0][0], grid[5][6]


def get_week_range(d: date) -> Tuple[date, date]:
    days = get_week_days(d)
    return days[0], days[6]


def get_day_range(d: date) -> Tuple[date, date]:
    return d, d


def year_month_key(d: date) -> str:
    """월간 노트 키 (YYYY-MM)"""
    return f"{d.year:04d}-{d.month:02d}"


def year_week_key(d: date) -> str:
    """주간 노트 키 (ISO 주차, YYYY-Www)"""
    iso_year, iso_week, _ = d.isocalendar()
    return f"{iso_year:04d}-W{iso_week:02d}"
