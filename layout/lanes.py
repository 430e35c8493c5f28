"""
구간 레인 배정 (greedy interval partitioning)

시작일 순으로 처리하면서, 마지막 종료일이 이번 시작일보다 엄격히 앞선
첫 번째 레인에 넣고, 없으면 새 레인을 엽니다.
날짜는 양 끝 포함이므로 같은 날에 끝나고 시작하는 두 구간은 겹친 것으로 봅니다.
레인 수는 어느 시점에서든 동시에 겹치는 구간의 최대 개수와 같습니다.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, Hashable, Iterable, List, NamedTuple


class Interval(NamedTuple):
    key: Hashable
    start: Any
    end: Any


@dataclass
class LaneAssignment:
    lanes: Dict[Hashable, int] = field(default_factory=dict)
    num_lanes: int = 0

    def members(self, lane: int) -> List[Hashable]:
        return [key for key, assigned in self.lanes.items() if assigned == lane]


def assign_lanes(intervals: Iterable[Interval]) -> LaneAssignment:
    """각 구간의 key -> 레인 번호 (0부터)"""
    # sorted는 안정 정렬이므로 같은 시작일이면 입력(형제) 순서 유지
    ordered = sorted(intervals, key=lambda interval: interval.start)
    lane_ends: List[Any] = []
    assignment = LaneAssignment()

    for interval in ordered:
        for lane, lane_end in enumerate(lane_ends):
            if lane_end < interval.start:
                lane_ends[lane] = interval.end
                assignment.lanes[interval.key] = lane
                break
        else:
            assignment.lanes[interval.key] = len(lane_ends)
            lane_ends.append(interval.end)

    assignment.num_lanes = len(lane_ends)
    return assignment
