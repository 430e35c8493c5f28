"""
레인 배정 테스트
"""

from datetime import date

from layout.lanes import Interval, assign_lanes


def _iv(key, start_day, end_day):
    return Interval(key, date(2024, 1, start_day), date(2024, 1, end_day))


def test_empty():
    assignment = assign_lanes([])
    assert assignment.num_lanes == 0
    assert assignment.lanes == {}


def test_chain_of_pairwise_overlaps_uses_two_lanes():
    # 1(월)~2(화), 2(화)~4(목), 3(수)~5(금): 한 날짜에 겹치는 최대 개수는 2
    assignment = assign_lanes([_iv("a", 1, 2), _iv("b", 2, 4), _iv("c", 3, 5)])

    assert assignment.num_lanes == 2
    assert assignment.lanes == {"a": 0, "b": 1, "c": 0}


def test_all_sharing_one_day_use_three_lanes():
    # 월~수, 화~목, 수~금은 모두 수요일을 포함
    assignment = assign_lanes([_iv("a", 1, 3), _iv("b", 2, 4), _iv("c", 3, 5)])

    assert assignment.num_lanes == 3


def test_touching_ends_overlap():
    """끝나는 날과 시작하는 날이 같으면 겹친 것"""
    assert assign_lanes([_iv("a", 1, 3), _iv("b", 3, 4)]).num_lanes == 2
    assert assign_lanes([_iv("a", 1, 3), _iv("b", 4, 5)]).num_lanes == 1


def test_reuses_first_free_lane():
    assignment = assign_lanes([_iv("a", 1, 5), _iv("b", 1, 1), _iv("c", 2, 2), _iv("d", 3, 6)])

    assert assignment.lanes == {"a": 0, "b": 1, "c": 1, "d": 1}
    assert assignment.members(1) == ["b", "c", "d"]


def test_same_start_keeps_input_order():
    assignment = assign_lanes([_iv("second", 1, 2), _iv("first", 1, 2)])

    assert assignment.lanes == {"second": 0, "first": 1}


def test_lane_count_equals_max_overlap():
    intervals = [_iv(i, start, end) for i, (start, end) in enumerate(
        [(1, 10), (2, 3), (4, 6), (5, 8), (9, 12), (11, 11), (7, 7)]
    )]

    assignment = assign_lanes(intervals)

    max_overlap = max(
        sum(1 for iv in intervals if iv.start <= date(2024, 1, day) <= iv.end)
        for day in range(1, 13)
    )
    assert assignment.num_lanes == max_overlap
    for lane in range(assignment.num_lanes):
        members = sorted((iv for iv in intervals if assignment.lanes[iv.key] == lane), key=lambda iv: iv.start)
        for prev, cur in zip(members, members[1:]):
            assert prev.end < cur.start
